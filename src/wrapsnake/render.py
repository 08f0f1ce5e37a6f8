# render.py
from typing import List, NamedTuple, Tuple

import pygame  # type: ignore

from .config import BG, FOOD_SCALE, OUTLINE, RED, SNAKE_SCALE
from .game import Snapshot

Color = Tuple[int, int, int]


class Primitive(NamedTuple):
    rect: Tuple[float, float, float, float]  # left, top, width, height in pixels
    fill: Color
    outline: Color
    outline_px: int


def cell_rect(gx: int, gy: int, cell_w: float, cell_h: float, scale: float) -> Tuple[float, float, float, float]:
    """Pixel rect of a scaled piece centred inside grid cell (gx, gy)."""
    w, h = cell_w * scale, cell_h * scale
    return (gx * cell_w + (cell_w - w) / 2, gy * cell_h + (cell_h - h) / 2, w, h)


def to_primitives(snap: Snapshot, size_px: Tuple[int, int], snake_color: Color) -> List[Primitive]:
    """Translate a snapshot into rectangles; food first so the snake draws on top."""
    cell_w = size_px[0] / snap.width
    cell_h = size_px[1] / snap.height
    outline_px = max(1, int(cell_w / 8))

    prims = [
        Primitive(cell_rect(x, y, cell_w, cell_h, FOOD_SCALE), RED, OUTLINE, outline_px)
        for x, y in snap.food
    ]
    for x, y in (snap.head, *snap.body):
        prims.append(Primitive(cell_rect(x, y, cell_w, cell_h, SNAKE_SCALE), snake_color, OUTLINE, outline_px))
    return prims


def draw_game(screen: pygame.Surface, snap: Snapshot, snake_color: Color) -> None:
    screen.fill(BG)
    for prim in to_primitives(snap, screen.get_size(), snake_color):
        rect = pygame.Rect(*(round(v) for v in prim.rect))
        pygame.draw.rect(screen, prim.fill, rect)
        # width > 0 draws only the border, inside the rect
        pygame.draw.rect(screen, prim.outline, rect, prim.outline_px)
