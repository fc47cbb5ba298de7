import numpy as np
from conftest import ScriptedRng

from gridsnake import config
from gridsnake.board import BODY, EMPTY, FOOD, HEAD, cell_grid, colorize
from gridsnake.engine import Engine


class TestCellGrid:
    """Cell classes derived from engine state."""

    def test_classes(self):
        """Body cells, head cell and food cell are marked; the rest is empty."""
        engine = Engine(rows=4, cols=6, length=3, rng=ScriptedRng(3, 5))
        grid = cell_grid(engine)

        assert grid.shape == (4, 6)
        assert list(grid[0, :3]) == [BODY, BODY, HEAD]
        assert grid[3, 5] == FOOD
        assert np.count_nonzero(grid == EMPTY) == 4 * 6 - 4

    def test_body_hides_food(self):
        """Food under the body renders as body."""
        engine = Engine(rows=4, cols=6, length=3, rng=ScriptedRng(0, 1))
        grid = cell_grid(engine)
        assert grid[0, 1] == BODY
        assert np.count_nonzero(grid == FOOD) == 0

    def test_head_drawn_over_food(self):
        """Food under the head renders as head."""
        engine = Engine(rows=4, cols=6, length=3, rng=ScriptedRng(0, 2))
        assert cell_grid(engine)[0, 2] == HEAD

    def test_colorize(self):
        """Palette lookup yields an RGB image of the same grid."""
        engine = Engine(rows=4, cols=6, length=3, rng=ScriptedRng(3, 5))
        rgb = colorize(cell_grid(engine))
        assert rgb.shape == (4, 6, 3)
        assert rgb.dtype == np.uint8
        assert tuple(rgb[0, 2]) == config.HEAD_COLOR
        assert tuple(rgb[3, 5]) == config.FOOD_COLOR
        assert tuple(rgb[2, 2]) == config.GRID_BG
