from __future__ import annotations

import numpy as np

from . import config

EMPTY, FOOD, BODY, HEAD = 0, 1, 2, 3

PALETTE = np.array(
    [config.GRID_BG, config.FOOD_COLOR, config.BODY_COLOR, config.HEAD_COLOR],
    dtype=np.uint8,
)


def cell_grid(engine) -> np.ndarray:
    """(rows, cols) array of cell classes; head wins over body, body over food."""
    grid = np.full((engine.rows, engine.cols), EMPTY, dtype=np.uint8)

    food = engine.food
    if 0 <= food.row < engine.rows and 0 <= food.col < engine.cols:
        grid[food.row, food.col] = FOOD

    if engine.occupied:
        rows, cols = zip(*engine.occupied)
        grid[list(rows), list(cols)] = BODY

    head = engine.head.cell
    grid[head.row, head.col] = HEAD
    return grid


def colorize(grid: np.ndarray) -> np.ndarray:
    # (rows, cols) -> (rows, cols, 3)
    return PALETTE[grid]
