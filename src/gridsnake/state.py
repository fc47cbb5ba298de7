from __future__ import annotations

from collections import namedtuple

Cell = namedtuple("Cell", ["row", "col"])
Segment = namedtuple("Segment", ["cell", "is_head"])
# snake: list[Segment], tail is first element, head is last.
# is_head is only read by the renderer.

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# (drow, dcol)
DELTAS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

NOT_STARTED = "not-started"
RUNNING = "running"
GAME_OVER = "game-over"


def step(cell: Cell, direction: str) -> Cell:
    drow, dcol = DELTAS[direction]
    return Cell(cell.row + drow, cell.col + dcol)


def occupied_cells(snake) -> frozenset[Cell]:
    return frozenset(seg.cell for seg in snake)
