from __future__ import annotations

import logging
import random
from typing import Callable

from . import config
from .logic import (
    advance_head,
    collides,
    initial_snake,
    key_to_direction,
    random_cell,
    shift_body,
)
from .scheduler import RepeatingTask
from .state import GAME_OVER, NOT_STARTED, RIGHT, RUNNING, Cell, Segment, occupied_cells

logger = logging.getLogger(__name__)


class Engine:
    """One game of Snake.

    The engine owns the snake, its occupied-cell index, the direction, the
    food, the score and the lifecycle flag. A driver feeds it through
    :meth:`set_direction` and the repeating task armed by :meth:`start`, and
    reads the accessors after each tick.

    The occupied index is rebuilt only at the end of a successful tick, so a
    collision check sees the body as it stood before the current move. The
    cell the tail is vacating this tick therefore still counts as occupied.
    """

    def __init__(
        self,
        rows: int = config.ROWS,
        cols: int = config.COLS,
        length: int = config.DEFAULT_LENGTH,
        tick_ms: int = config.TICK_MS,
        rng: random.Random | None = None,
        clock: Callable[[], int] | None = None,
    ):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"grid must be at least 1x1, got {rows}x{cols}")
        if length <= 0:
            raise ValueError(f"snake length must be positive, got {length}")
        if length > cols:
            raise ValueError(f"snake of length {length} does not fit in {cols} columns")

        self.rows = rows
        self.cols = cols
        self.rng = rng or random.Random()
        self.timer = RepeatingTask(tick_ms, self.tick, clock)

        self._snake: list[Segment] = initial_snake(length)
        self._occupied: frozenset[Cell] = occupied_cells(self._snake)
        self._direction = RIGHT
        self._food = random_cell(self.rng, rows, cols)
        self._score = 0
        self._lifecycle = NOT_STARTED
        self._ticks = 0

    # --- accessors ---
    @property
    def snake(self) -> tuple[Segment, ...]:
        return tuple(self._snake)

    @property
    def head(self) -> Segment:
        return self._snake[-1]

    @property
    def occupied(self) -> frozenset[Cell]:
        return self._occupied

    @property
    def direction(self) -> str:
        return self._direction

    @property
    def food(self) -> Cell:
        return self._food

    @property
    def score(self) -> int:
        return self._score

    @property
    def lifecycle(self) -> str:
        return self._lifecycle

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def running(self) -> bool:
        return self._lifecycle == RUNNING

    @property
    def game_over(self) -> bool:
        return self._lifecycle == GAME_OVER

    # --- driver entry points ---
    def set_direction(self, key: str) -> None:
        self._direction = key_to_direction(key, self._direction)

    def start(self) -> None:
        if self._lifecycle != NOT_STARTED:
            return
        self._lifecycle = RUNNING
        self.timer.start()
        logger.info("game started on %dx%d grid", self.rows, self.cols)

    def stop(self) -> None:
        if self._lifecycle == GAME_OVER:
            return
        self._lifecycle = GAME_OVER
        self.timer.cancel()
        logger.info("game over after %d ticks, score %d", self._ticks, self._score)

    def tick(self) -> None:
        if self._lifecycle == GAME_OVER:
            return

        direction = self._direction
        self._ticks += 1

        tail, head, body = shift_body(self._snake)
        # Consumption is judged on the head's cell before it moves.
        food_consumed = head.cell == self._food
        new_head = advance_head(head, direction)

        if food_consumed:
            self._score += config.FOOD_POINTS
            self._food = random_cell(self.rng, self.rows, self.cols)
            logger.debug("food eaten at %s, score %d, next food %s", head.cell, self._score, self._food)

        if collides(new_head.cell, self.rows, self.cols, self._occupied):
            self.stop()
            return

        body.append(new_head)
        if food_consumed:
            body.insert(0, tail._replace(is_head=False))
        self._snake = body
        self._occupied = occupied_cells(self._snake)
