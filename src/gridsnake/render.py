from __future__ import annotations

import numpy as np
import pygame

from . import config
from .board import cell_grid, colorize
from .controls import board_origin, buttons_for


def draw_board(screen: pygame.Surface, engine) -> None:
    rgb = colorize(cell_grid(engine))
    # pygame surfarray is (w, h, c), the grid is (rows, cols, c).
    small = pygame.surfarray.make_surface(np.transpose(rgb, (1, 0, 2)))
    board = pygame.transform.scale(small, (engine.cols * config.CELL, engine.rows * config.CELL))
    screen.blit(board, board_origin(engine.cols))


def draw_text_center(screen: pygame.Surface, font: pygame.font.Font, text: str, center, color) -> None:
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(center=center))


def draw_buttons(screen: pygame.Surface, font: pygame.font.Font, engine) -> None:
    for button in buttons_for(engine):
        pygame.draw.rect(screen, config.BUTTON_COLOR, button.rect, border_radius=4)
        draw_text_center(screen, font, button.label, button.rect.center, config.BUTTON_TEXT)


def draw_state(screen: pygame.Surface, font: pygame.font.Font, engine) -> None:
    screen.fill(config.BLACK)
    width = screen.get_width()

    if engine.game_over:
        draw_text_center(screen, font, "GAME OVER", (width // 2, config.HEADER // 2), config.GAME_OVER_COLOR)

    draw_board(screen, engine)

    score_y = config.HEADER + engine.rows * config.CELL + config.FONT_SIZE // 2 + 8
    draw_text_center(screen, font, f"SCORE {engine.score}", (width // 2, score_y), config.WHITE)

    draw_buttons(screen, font, engine)
