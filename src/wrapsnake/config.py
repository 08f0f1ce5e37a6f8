from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Window & grid -----
WIDTH, HEIGHT = 900, 900
GRID_W, GRID_H = 25, 25

# ----- Colors -----
BG      = (255, 255, 255)
OUTLINE = (100, 100, 100)
RED     = (200, 0, 0)

# Fraction of a cell covered by each kind of piece
SNAKE_SCALE = 0.9
FOOD_SCALE  = 0.7

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
STILL = (0, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT, STILL)

# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    start: Tuple[int, int] = (12, 12)
    initial_length: int = 5
    start_direction: Tuple[int, int] = LEFT

    start_delay_ms: int = 1000     # pause before the snake starts moving
    step_ms: int = 250             # first step interval
    min_step_ms: int = 100         # speed ramp floor
    step_decrement_ms: int = 1     # interval shrink per step

    food_capacity: int = 2
    food_probability: int = 10     # a food spawns with chance 1/food_probability per step

    max_fps: int = 0               # 0 = unlimited
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_w < 1 or self.grid_h < 1:
            raise ValueError(f"Grid must be at least 1x1, got {self.grid_w}x{self.grid_h}")
        sx, sy = self.start
        if not (0 <= sx < self.grid_w and 0 <= sy < self.grid_h):
            raise ValueError(f"Start position {self.start} is outside the grid")
        if self.initial_length < 1:
            raise ValueError(f"initial_length must be >= 1, got {self.initial_length}")
        if self.start_direction not in DIRECTIONS:
            raise ValueError(f"Invalid start direction {self.start_direction}")
        if self.start_delay_ms < 0:
            raise ValueError("start_delay_ms must be >= 0")
        if self.min_step_ms < 1 or self.step_ms < self.min_step_ms:
            raise ValueError(
                f"Need 1 <= min_step_ms <= step_ms, got {self.min_step_ms} and {self.step_ms}"
            )
        if self.step_decrement_ms < 0:
            raise ValueError("step_decrement_ms must be >= 0")
        if self.food_capacity < 0:
            raise ValueError("food_capacity must be >= 0")
        if self.food_probability < 1:
            raise ValueError(f"food_probability must be >= 1, got {self.food_probability}")
        if self.max_fps < 0:
            raise ValueError("max_fps must be >= 0")

CFG = Config()
