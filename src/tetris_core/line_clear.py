"""Flash-then-remove sequencing for completed rows."""

from __future__ import annotations

from typing import Iterable, Tuple

from .config import FLASH_BLINKS, FLASH_DURATION_MS
from .utils import blink_visible


class LineClearSequencer:
    """Track rows that are flashing before they are removed.

    The sequencer is idle while ``rows`` is empty.  :meth:`begin` records the
    completed rows and restarts the timer; :meth:`advance` reports when the
    flash has run its course.  Removing the rows and scoring them is left to
    the owner.
    """

    def __init__(self, duration: float = FLASH_DURATION_MS, blinks: int = FLASH_BLINKS) -> None:
        self.duration = duration
        self.blinks = blinks
        self.rows: Tuple[int, ...] = ()
        self.timer = 0.0

    @property
    def flashing(self) -> bool:
        return bool(self.rows)

    @property
    def visible(self) -> bool:
        """Whether the flashing rows are drawn highlighted this frame."""

        if not self.rows:
            return True
        return blink_visible(self.timer, self.duration, self.blinks)

    def begin(self, rows: Iterable[int]) -> None:
        self.rows = tuple(rows)
        self.timer = 0.0

    def advance(self, dt: float) -> bool:
        """Advance the flash timer and return ``True`` once it has elapsed."""

        if not self.rows:
            return False
        self.timer += dt
        return self.timer >= self.duration

    def clear(self) -> None:
        self.rows = ()
        self.timer = 0.0
