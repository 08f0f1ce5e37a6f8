# snake.py
import logging
from collections import deque
from enum import Enum
from typing import Deque, List, Tuple

from .config import STILL
from .grid import Cell, Grid, Position

logger = logging.getLogger(__name__)


class Outcome(Enum):
    MOVED = "moved"
    ATE = "ate"
    COLLISION = "collision"


def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


class Snake:
    """
    Head position plus an ordered body (index 0 sits right behind the head).

    Every move is mirrored into the grid so that the grid and the position
    list never disagree: one HEAD cell, len(body) SEGMENT cells.
    """

    def __init__(self, grid: Grid, start: Position, length: int, direction: Tuple[int, int] = STILL):
        if length < 1:
            raise ValueError(f"Snake length must be >= 1, got {length}")
        self.grid = grid
        self.head: Position = start
        self.body: Deque[Position] = deque()
        self.direction = direction

        # Body extends to the right of the head; clamp at the edge instead of wrapping
        x, y = start
        for i in range(1, length):
            if x + i >= grid.width:
                logger.debug("Initial snake truncated from %d to %d", length, i)
                break
            self.body.append((x + i, y))

        grid.set(self.head, Cell.HEAD)
        for pos in self.body:
            grid.set(pos, Cell.SEGMENT)

    @property
    def length(self) -> int:
        return len(self.body) + 1

    def positions(self) -> List[Position]:
        return [self.head, *self.body]

    def set_direction(self, new_direction: Tuple[int, int]) -> None:
        """Change heading, ignoring 180° turns back into the neck."""
        if not is_opposite(new_direction, self.direction):
            self.direction = new_direction

    def advance(self) -> Outcome:
        if self.direction == STILL:
            return Outcome.MOVED

        hx, hy = self.head
        dx, dy = self.direction
        new_head = self.grid.wrap((hx + dx, hy + dy))
        if new_head == self.head:
            # a one-cell-wide axis wraps straight back onto the head
            return Outcome.MOVED

        target = self.grid.get(new_head)
        if target == Cell.SEGMENT:
            return Outcome.COLLISION

        grow = target == Cell.FOOD
        self._shift(new_head, grow)
        return Outcome.ATE if grow else Outcome.MOVED

    def _shift(self, new_head: Position, grow: bool) -> None:
        old_head = self.head

        # The cell the tail leaves behind (the head itself for a lone head)
        if self.body:
            vacated = self.body.pop()
            self.body.appendleft(old_head)
        else:
            vacated = old_head

        self.grid.set(vacated, Cell.EMPTY)
        if self.body:
            self.grid.set(old_head, Cell.SEGMENT)
        self.grid.set(new_head, Cell.HEAD)
        self.head = new_head

        if grow:
            self.body.append(vacated)
            self.grid.set(vacated, Cell.SEGMENT)
