from __future__ import annotations

import argparse
import logging
import random

import pygame

from . import config
from .controls import apply_action, buttons_for, hit_test, window_size
from .engine import Engine
from .render import draw_state

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", add_help=True)
    parser.add_argument("--rows", type=int, default=config.ROWS, help="Grid rows.")
    parser.add_argument("--cols", type=int, default=config.COLS, help="Grid columns.")
    parser.add_argument("--length", type=int, default=config.DEFAULT_LENGTH, help="Initial snake length.")
    parser.add_argument("--tick-ms", type=int, default=config.TICK_MS, help="Milliseconds per simulation tick.")
    parser.add_argument("--cell-size", type=int, default=config.CELL, help="Pixel size of one grid cell.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity.",
    )
    return parser


def build_engine(args: argparse.Namespace) -> Engine:
    return Engine(
        rows=args.rows,
        cols=args.cols,
        length=args.length,
        tick_ms=args.tick_ms,
        rng=random.Random(args.seed),
    )


def handle_event(engine: Engine, event: pygame.event.Event) -> bool:
    """Feed one pygame event to the engine. Returns False when the player quits."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key in (pygame.K_ESCAPE, pygame.K_q):
            return False
        engine.set_direction(pygame.key.name(event.key))
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        apply_action(engine, hit_test(buttons_for(engine), event.pos))
    return True


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cell_size <= 0:
        parser.error("--cell-size must be positive")

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    config.CELL = args.cell_size

    try:
        engine = build_engine(args)
    except ValueError as e:
        parser.error(str(e))

    pygame.init()
    screen = pygame.display.set_mode(window_size(engine.rows, engine.cols))
    pygame.display.set_caption("gridsnake")
    font = pygame.font.Font(None, config.FONT_SIZE)
    clock = pygame.time.Clock()
    logger.debug("window %s, tick %dms", screen.get_size(), args.tick_ms)

    playing = True
    while playing:
        for event in pygame.event.get():
            if not handle_event(engine, event):
                playing = False

        engine.timer.pump()
        draw_state(screen, font, engine)
        pygame.display.flip()
        clock.tick(config.FPS)

    engine.stop()
    pygame.quit()
    print("Game Over! Score:", engine.score)
