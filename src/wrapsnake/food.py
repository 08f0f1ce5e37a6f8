# food.py
import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from .grid import Cell, Grid, Position

logger = logging.getLogger(__name__)


@dataclass
class FoodSlot:
    pos: Optional[Position] = None
    active: bool = False


class FoodManager:
    """Fixed pool of reusable food slots, toggled active/inactive."""

    def __init__(self, capacity: int, rng: random.Random):
        if capacity < 0:
            raise ValueError(f"Food capacity must be >= 0, got {capacity}")
        self.rng = rng
        self.slots = [FoodSlot() for _ in range(capacity)]

    @property
    def capacity(self) -> int:
        return len(self.slots)

    @property
    def active_count(self) -> int:
        return sum(1 for slot in self.slots if slot.active)

    def active_positions(self) -> List[Position]:
        return [slot.pos for slot in self.slots if slot.active]

    def _pick_empty(self, grid: Grid) -> Optional[Position]:
        # Rejection sampling; fine while the board is mostly empty
        for _ in range(grid.size):
            pos = (self.rng.randrange(grid.width), self.rng.randrange(grid.height))
            if grid.is_empty(pos):
                return pos
        return None

    def try_spawn(self, grid: Grid, probability: int) -> Optional[Position]:
        """
        Roll once; with chance 1/probability place food on a random empty cell.

        Returns the new food position, or None when the roll failed, every
        slot is already active, or no empty cell turned up within
        width*height attempts. None is not an error: the next tick rolls again.
        """
        if probability < 1:
            raise ValueError(f"Spawn probability denominator must be >= 1, got {probability}")
        if self.rng.randrange(probability) != 0:
            return None

        slot = next((s for s in self.slots if not s.active), None)
        if slot is None:
            return None

        pos = self._pick_empty(grid)
        if pos is None:
            logger.debug("No empty cell found for food, skipping this tick")
            return None

        slot.pos = pos
        slot.active = True
        grid.set(pos, Cell.FOOD)
        logger.debug("Food spawned at %s", pos)
        return pos

    def consume(self, pos: Position) -> None:
        """Deactivate the food at pos; the snake has already overwritten the cell."""
        for slot in self.slots:
            if slot.active and slot.pos == pos:
                slot.active = False
                logger.debug("Food consumed at %s", pos)
                return
        raise LookupError(f"No active food at {pos}: grid and food pool out of sync")
