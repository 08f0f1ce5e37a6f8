# grid.py
from enum import IntEnum
from typing import Tuple

import numpy as np  # type: ignore

Position = Tuple[int, int]


class Cell(IntEnum):
    EMPTY = 0
    HEAD = 1
    SEGMENT = 2
    FOOD = 3


class Grid:
    """
    Authoritative cell-state map of the board, indexed [x, y].

    Positions passed to get()/set() must already be wrapped; anything
    outside the board is a bug in the caller and raises IndexError.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = np.full((width, height), Cell.EMPTY, dtype=np.int8)

    @property
    def size(self) -> int:
        return self.width * self.height

    def _check(self, pos: Position) -> None:
        x, y = pos
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"{pos} is outside the {self.width}x{self.height} grid")

    def get(self, pos: Position) -> Cell:
        self._check(pos)
        return Cell(int(self.cells[pos[0], pos[1]]))

    def set(self, pos: Position, state: Cell) -> None:
        self._check(pos)
        self.cells[pos[0], pos[1]] = state

    def wrap(self, pos: Position) -> Position:
        """Toroidal wrap, applied to each axis independently."""
        return (pos[0] % self.width, pos[1] % self.height)

    def is_empty(self, pos: Position) -> bool:
        return self.get(pos) == Cell.EMPTY

    def count(self, state: Cell) -> int:
        return int(np.count_nonzero(self.cells == state))
