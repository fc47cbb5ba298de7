from __future__ import annotations

import logging
from typing import Callable

import pygame

logger = logging.getLogger(__name__)


class RepeatingTask:
    """Calls ``callback`` every ``period_ms`` from a cooperative main loop.

    The driver calls :meth:`pump` once per frame. At most one run happens per
    pump, and a pump issued from inside the callback is ignored, so runs never
    overlap. When the loop falls more than a period behind, the missed runs
    are dropped instead of being replayed in a burst.
    """

    def __init__(
        self,
        period_ms: int,
        callback: Callable[[], None],
        clock: Callable[[], int] | None = None,
    ):
        if period_ms <= 0:
            raise ValueError(f"period must be positive, got {period_ms}")
        self.period_ms = period_ms
        self.callback = callback
        self.clock = clock or pygame.time.get_ticks
        self.next_due: int | None = None
        self.cancelled = False
        self.runs = 0
        self._in_callback = False

    @property
    def active(self) -> bool:
        return self.next_due is not None and not self.cancelled

    def start(self) -> None:
        if self.cancelled or self.next_due is not None:
            return
        self.next_due = self.clock() + self.period_ms
        logger.debug("repeating task started, period=%dms", self.period_ms)

    def cancel(self) -> bool:
        """Tear the task down. Returns False if it was already cancelled."""
        if self.cancelled:
            return False
        self.cancelled = True
        logger.debug("repeating task cancelled after %d runs", self.runs)
        return True

    def pump(self) -> bool:
        if not self.active or self._in_callback:
            return False
        now = self.clock()
        if now < self.next_due:
            return False

        self.next_due += self.period_ms
        if self.next_due <= now:
            self.next_due = now + self.period_ms

        self._in_callback = True
        try:
            self.callback()
        finally:
            self._in_callback = False
        self.runs += 1
        return True
