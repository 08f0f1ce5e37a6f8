# main.py
import argparse
import dataclasses
import logging
import random
from typing import List, Optional, Tuple

import pygame  # type: ignore

from .config import CFG, Config, HEIGHT, WIDTH, UP, DOWN, LEFT, RIGHT
from .game import GameSession, SessionExit
from .render import draw_game

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,  pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,  pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}


def poll_input() -> Tuple[bool, List[Tuple[int, int]]]:
    """Drain the event queue. Returns (window still open, directions pressed)."""
    intents = []
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False, intents
        if event.type == pygame.KEYDOWN and event.key in KEY_DIRECTIONS:
            intents.append(KEY_DIRECTIONS[event.key])
    return True, intents


def play(screen: pygame.Surface, cfg: Config, rng: random.Random) -> SessionExit:
    """Run one session until the snake bites itself or the window closes."""
    clock = pygame.time.Clock()
    snake_color = (rng.randrange(256), rng.randrange(256), rng.randrange(256))
    session = GameSession(cfg, rng, pygame.time.get_ticks())

    frames = 0
    fps_timer = pygame.time.get_ticks()

    while True:
        # 1) input
        open_, intents = poll_input()
        if not open_:
            return SessionExit.CLOSED
        session.apply_input(intents)

        # 2) update (zero or more fixed steps)
        now = pygame.time.get_ticks()
        session.update(now)
        if session.over:
            return SessionExit.CONTINUE

        # 3) render
        draw_game(screen, session.snapshot(), snake_color)
        pygame.display.flip()
        clock.tick(cfg.max_fps)  # 0 means no cap

        frames += 1
        if now - fps_timer >= 1000:
            logger.info("fps: %d", frames)
            frames = 0
            fps_timer = now


def build_config(args: argparse.Namespace) -> Config:
    overrides = {
        "grid_w": args.width,
        "grid_h": args.height,
        "initial_length": args.length,
        "max_fps": args.fps,
        "seed": args.seed,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.width is not None or args.height is not None:
        w = overrides.get("grid_w", CFG.grid_w)
        h = overrides.get("grid_h", CFG.grid_h)
        overrides["start"] = (w // 2, h // 2)
    return dataclasses.replace(CFG, **overrides)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Snake on a wrapped grid")
    parser.add_argument("--width", type=int, default=None, help="grid width in cells")
    parser.add_argument("--height", type=int, default=None, help="grid height in cells")
    parser.add_argument("--length", type=int, default=None, help="initial snake length")
    parser.add_argument("--fps", type=int, default=None, help="frame rate cap, 0 = unlimited")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible games")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(args)
    rng = random.Random(cfg.seed)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")

    try:
        # Restart after every collision until the window is closed
        while play(screen, cfg, rng) is SessionExit.CONTINUE:
            logger.info("Restarting")
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
