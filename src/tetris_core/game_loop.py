"""Frame-driven game loop.

The loop is host agnostic.  A host with an animation-frame scheduler passes
``request_frame``/``cancel_frame`` callables (the shape of the browser's
``requestAnimationFrame``); a host that runs its own loop, such as
:mod:`tetris_core.run_pygame`, simply calls :meth:`GameLoop.tick` once per
frame with a millisecond timestamp.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Optional

from .config import EngineConfig
from .game_state import GameState, PieceSource, Snapshot


LOGGER = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


@dataclass
class GameLoop:
    config: EngineConfig = field(default_factory=EngineConfig)
    request_frame: Optional[Callable[[FrameCallback], Any]] = None
    cancel_frame: Optional[Callable[[Any], None]] = None
    render: Optional[Callable[[Snapshot], None]] = None
    rng: Optional[PieceSource] = None
    state: GameState = field(init=False)
    running: bool = field(default=False, init=False)
    last_ts: Optional[float] = field(default=None, init=False)
    frame_handle: Any = field(default=None, init=False)
    # Bumped on every restart/stop so callbacks scheduled earlier are ignored.
    generation: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.state = GameState(config=self.config, rng=self.rng)

    def start(self, ts: Optional[float] = None) -> None:
        if self.running:
            LOGGER.info("Start ignored: game already running")
            return
        self.restart(ts)

    def restart(self, ts: Optional[float] = None) -> None:
        """Reset every piece of game state and schedule a fresh frame."""

        self._cancel_pending()
        self.generation += 1
        self.state.restart()
        self.last_ts = ts
        self.running = True
        self._draw()
        self._schedule()

    def stop(self) -> None:
        if not self.running and self.frame_handle is None:
            return
        self.running = False
        self.generation += 1
        self._cancel_pending()

    def tick(self, ts: float) -> None:
        """Advance the current game to timestamp ``ts`` (milliseconds)."""

        self._tick(ts, generation=self.generation)

    def _tick(self, ts: float, generation: int) -> None:
        if generation != self.generation or not self.running:
            return
        self.frame_handle = None
        try:
            dt = 0.0 if self.last_ts is None else ts - self.last_ts
            self.last_ts = ts
            self.state.advance(dt)
            self._draw()
        except Exception:
            LOGGER.exception("Crash detected during tick; restarting")
            self.restart(ts)
            return
        if self.state.game_over:
            self.stop()
            return
        self._schedule()

    def _draw(self) -> None:
        if self.render is not None:
            self.render(self.state.snapshot())

    def _schedule(self) -> None:
        if self.request_frame is None:
            return
        self.frame_handle = self.request_frame(partial(self._tick, generation=self.generation))

    def _cancel_pending(self) -> None:
        if self.frame_handle is not None and self.cancel_frame is not None:
            self.cancel_frame(self.frame_handle)
        self.frame_handle = None
