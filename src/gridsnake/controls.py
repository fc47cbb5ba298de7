from __future__ import annotations

from collections import namedtuple

import pygame

from . import config

Button = namedtuple("Button", ["label", "rect", "action"])
# action: "start", "stop", or a raw key identifier passed to Engine.set_direction.

START = "start"
STOP = "stop"

_PAD_GAP = 6


def window_width(cols: int) -> int:
    # Wide enough for the direction pad even on narrow grids.
    return max(cols * config.CELL, 2 * config.BUTTON_W + 4 * _PAD_GAP)


def window_size(rows: int, cols: int) -> tuple[int, int]:
    return (window_width(cols), config.HEADER + rows * config.CELL + config.FOOTER)


def board_origin(cols: int) -> tuple[int, int]:
    return ((window_width(cols) - cols * config.CELL) // 2, config.HEADER)


def toggle_button(engine) -> Button | None:
    """START GAME before the first start, STOP GAME while running, nothing once over."""
    if engine.game_over:
        return None
    rect = pygame.Rect(0, 0, config.BUTTON_W * 2, config.BUTTON_H)
    rect.center = (window_width(engine.cols) // 2, config.HEADER // 2)
    if engine.running:
        return Button("STOP GAME", rect, STOP)
    return Button("START GAME", rect, START)


def direction_pad(rows: int, cols: int) -> list[Button]:
    top = config.HEADER + rows * config.CELL + config.FONT_SIZE + 24
    cx = window_width(cols) // 2
    bw, bh = config.BUTTON_W, config.BUTTON_H

    up = pygame.Rect(cx - bw // 2, top, bw, bh)
    left = pygame.Rect(cx - bw - _PAD_GAP // 2, top + bh + _PAD_GAP, bw, bh)
    right = pygame.Rect(cx + _PAD_GAP // 2, top + bh + _PAD_GAP, bw, bh)
    down = pygame.Rect(cx - bw // 2, top + 2 * (bh + _PAD_GAP), bw, bh)
    return [
        Button("UP", up, "ArrowUp"),
        Button("LEFT", left, "ArrowLeft"),
        Button("RIGHT", right, "ArrowRight"),
        Button("DOWN", down, "ArrowDown"),
    ]


def buttons_for(engine) -> list[Button]:
    buttons = direction_pad(engine.rows, engine.cols)
    toggle = toggle_button(engine)
    if toggle is not None:
        buttons.insert(0, toggle)
    return buttons


def hit_test(buttons: list[Button], pos: tuple[int, int]) -> str | None:
    for button in buttons:
        if button.rect.collidepoint(pos):
            return button.action
    return None


def apply_action(engine, action: str | None) -> None:
    if action is None:
        return
    if action == START:
        engine.start()
    elif action == STOP:
        engine.stop()
    else:
        engine.set_direction(action)
