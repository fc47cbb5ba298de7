from __future__ import annotations

import random

from . import config
from .state import Cell, Segment, step


def key_to_direction(key: str, current: str) -> str:
    return config.KEY_BINDINGS.get(key, current)


def initial_snake(length: int) -> list[Segment]:
    snake = [Segment(Cell(0, col), False) for col in range(length)]
    snake[-1] = snake[-1]._replace(is_head=True)
    return snake


def random_cell(rng: random.Random, rows: int, cols: int) -> Cell:
    # Independent draws; the snake body is not avoided.
    return Cell(rng.randrange(rows), rng.randrange(cols))


def out_of_bounds(cell: Cell, rows: int, cols: int) -> bool:
    return cell.col >= cols or cell.row >= rows or cell.col < 0 or cell.row < 0


def collides(cell: Cell, rows: int, cols: int, occupied) -> bool:
    return out_of_bounds(cell, rows, cols) or cell in occupied


def shift_body(snake: list[Segment]) -> tuple[Segment, Segment, list[Segment]]:
    """Detach the head and pull every other segment one slot toward it.

    Returns ``(tail, head, body)`` where ``body`` holds everything but the
    head, each segment now sitting where its successor was, and the slot
    next to the head taking the old head's cell.
    """
    tail, head = snake[0], snake[-1]
    body = list(snake[1:-1])
    if len(snake) > 1:
        body.append(Segment(head.cell, False))
    return tail, head, body


def advance_head(head: Segment, direction: str) -> Segment:
    return Segment(step(head.cell, direction), True)
