# game.py
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .clock import TickController
from .config import CFG, Config
from .food import FoodManager
from .grid import Cell, Grid, Position
from .snake import Outcome, Snake

logger = logging.getLogger(__name__)


class Status(Enum):
    IDLE = "idle"            # waiting out the start delay
    RUNNING = "running"
    GAME_OVER = "game_over"  # terminal


class SessionExit(Enum):
    CONTINUE = "continue"    # start a fresh session
    CLOSED = "closed"        # window closed, leave the program


# ---------- Render-ready view ----------
@dataclass(frozen=True)
class Snapshot:
    head: Position
    body: Tuple[Position, ...]
    food: Tuple[Position, ...]
    width: int
    height: int
    status: Status
    length: int
    interval_ms: int

    @property
    def over(self) -> bool:
        return self.status is Status.GAME_OVER


# ---------- Session ----------
class GameSession:
    """
    One game from spawn to collision. Owns the grid, the snake, the food
    pool, the tick clock and the random generator.

    Per frame the caller feeds input with apply_input(), then update(now)
    to run whatever steps the clock says are due, then reads snapshot().
    """

    def __init__(self, cfg: Config = CFG, rng: Optional[random.Random] = None, now_ms: int = 0):
        self.cfg = cfg
        self.rng = rng if rng is not None else random.Random(cfg.seed)
        self.grid = Grid(cfg.grid_w, cfg.grid_h)
        self.snake = Snake(self.grid, cfg.start, cfg.initial_length, cfg.start_direction)
        self.food = FoodManager(cfg.food_capacity, self.rng)
        self.clock = TickController.from_config(cfg, now_ms)
        self.status = Status.IDLE
        logger.info(
            "New session: %dx%d grid, snake length %d at %s",
            cfg.grid_w, cfg.grid_h, self.snake.length, cfg.start,
        )

    @property
    def over(self) -> bool:
        return self.status is Status.GAME_OVER

    def apply_input(self, intents: Iterable[Tuple[int, int]]) -> None:
        """Only the last direction pressed during the frame counts."""
        last = None
        for direction in intents:
            last = direction
        if last is not None and not self.over:
            self.snake.set_direction(last)

    def step(self) -> Outcome:
        """
        Advance the simulation by exactly one tick, ignoring the clock.
        Roll for food, move the snake, then act on the outcome.
        """
        if self.over:
            return Outcome.COLLISION
        self.status = Status.RUNNING

        self.food.try_spawn(self.grid, self.cfg.food_probability)
        outcome = self.snake.advance()

        if outcome is Outcome.COLLISION:
            self.status = Status.GAME_OVER
            logger.info("Game over: collision at length %d", self.snake.length)
        elif outcome is Outcome.ATE:
            self.food.consume(self.snake.head)
        return outcome

    def update(self, now_ms: int) -> int:
        """Run every step that is due at now_ms. Returns how many ran."""
        if self.over:
            return 0
        if not self.clock.started(now_ms):
            return 0
        self.status = Status.RUNNING

        steps = 0
        while not self.over and self.clock.due(now_ms):
            self.step()
            self.clock.tick()
            steps += 1
        if steps > 1:
            logger.debug("Caught up %d steps in one frame", steps)
        return steps

    def snapshot(self) -> Snapshot:
        return Snapshot(
            head=self.snake.head,
            body=tuple(self.snake.body),
            food=tuple(self.food.active_positions()),
            width=self.grid.width,
            height=self.grid.height,
            status=self.status,
            length=self.snake.length,
            interval_ms=self.clock.interval_ms,
        )

    def check_invariants(self) -> None:
        """Raise RuntimeError if the grid and the entities disagree."""
        if self.grid.get(self.snake.head) != Cell.HEAD or self.grid.count(Cell.HEAD) != 1:
            raise RuntimeError(f"Head at {self.snake.head} is not the only HEAD cell")
        for pos in self.snake.body:
            if self.grid.get(pos) != Cell.SEGMENT:
                raise RuntimeError(f"{pos} not marked as segment")
        if self.grid.count(Cell.SEGMENT) != self.snake.length - 1:
            raise RuntimeError(
                f"{self.grid.count(Cell.SEGMENT)} SEGMENT cells for a snake of length {self.snake.length}"
            )
        for pos in self.food.active_positions():
            if self.grid.get(pos) != Cell.FOOD:
                raise RuntimeError(f"{pos} not marked as food")
        if self.grid.count(Cell.FOOD) != self.food.active_count:
            raise RuntimeError("FOOD cells on the grid do not match the active food slots")
