import pygame
import pytest
from conftest import ScriptedRng

from gridsnake import config
from gridsnake.controls import board_origin, window_size
from gridsnake.engine import Engine
from gridsnake.render import draw_state


@pytest.fixture
def canvas(pygame_ready):
    engine = Engine(rows=10, cols=20, length=4, rng=ScriptedRng(9, 19))
    screen = pygame.Surface(window_size(engine.rows, engine.cols))
    font = pygame.font.Font(None, config.FONT_SIZE)
    return engine, screen, font


def pixel(screen, engine, row, col):
    x0, y0 = board_origin(engine.cols)
    x = x0 + col * config.CELL + config.CELL // 2
    y = y0 + row * config.CELL + config.CELL // 2
    return tuple(screen.get_at((x, y)))[:3]


class TestDrawState:
    """Off-screen rendering of the board."""

    def test_cells_are_colored(self, canvas):
        """Head, body, food and empty cells get their palette colors."""
        engine, screen, font = canvas
        draw_state(screen, font, engine)
        assert pixel(screen, engine, 0, 3) == config.HEAD_COLOR
        assert pixel(screen, engine, 0, 0) == config.BODY_COLOR
        assert pixel(screen, engine, 9, 19) == config.FOOD_COLOR
        assert pixel(screen, engine, 5, 5) == config.GRID_BG

    def test_redraw_after_tick_and_game_over(self, canvas):
        """The board follows the engine, including the game over screen."""
        engine, screen, font = canvas
        engine.tick()
        draw_state(screen, font, engine)
        assert pixel(screen, engine, 0, 4) == config.HEAD_COLOR
        assert pixel(screen, engine, 0, 0) == config.GRID_BG

        engine.set_direction("up")
        engine.tick()
        assert engine.game_over
        draw_state(screen, font, engine)
        assert pixel(screen, engine, 0, 4) == config.HEAD_COLOR
