"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Milliseconds between automatic one-row drops.
DROP_INTERVAL_MS = 600.0
# Length of the line-clear flash and the number of blink phases within it.
FLASH_DURATION_MS = 400.0
FLASH_BLINKS = 4


@dataclass(frozen=True)
class EngineConfig:
    """Tunable timings for one game instance.

    ``line_clear_animation`` switches between flashing completed rows before
    removing them and removing them as soon as the piece locks.  ``seed`` only
    seeds the default random source; an explicitly injected one wins.
    """

    line_clear_animation: bool = True
    drop_interval: float = DROP_INTERVAL_MS
    flash_duration: float = FLASH_DURATION_MS
    flash_blinks: int = FLASH_BLINKS
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.drop_interval <= 0:
            raise ValueError(f"drop_interval must be positive, got {self.drop_interval}")
        if self.flash_duration <= 0:
            raise ValueError(f"flash_duration must be positive, got {self.flash_duration}")
        if self.flash_blinks <= 0:
            raise ValueError(f"flash_blinks must be positive, got {self.flash_blinks}")
