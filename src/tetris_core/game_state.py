"""High level game state container.

:class:`GameState` owns everything a single game mutates: the board, the
active piece, the score, the line-clear flash and the gravity accumulator.
Input operations are no-ops rather than errors while the game is locked, i.e.
after game over, while rows are flashing or when no piece is active.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, Tuple

from .board import PIECE_VALUES, Board, Grid
from .config import EngineConfig
from .line_clear import LineClearSequencer
from .tetromino import PIECE_ORDER, Tetromino, spawn_column
from .utils import collides, score_for_lines


LOGGER = logging.getLogger(__name__)

# Horizontal offsets tried, in order, when an in-place rotation collides.
WALL_KICKS: Tuple[int, ...] = (-1, 1, -2, 2)


class PieceSource(Protocol):
    """Random source used to pick the next piece type."""

    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game for renderers."""

    grid: Grid
    active_cells: Tuple[Tuple[int, int], ...]
    active_value: int
    score: int
    flashing_rows: Tuple[int, ...]
    flash_visible: bool
    game_over: bool

    @property
    def final_score(self) -> Optional[int]:
        return self.score if self.game_over else None

    def render_grid(self) -> List[List[int]]:
        """Return the grid as nested lists with the active piece overlaid.

        Blocks of the active piece above the board are skipped.
        """

        grid = [[int(cell) for cell in row] for row in self.grid]
        for r, c in self.active_cells:
            if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
                grid[r][c] = self.active_value
        return grid


@dataclass
class GameState:
    """Mutable state for a Tetris game session.

    ``rng`` is any object with a ``randrange`` method; by default a
    :class:`random.Random` seeded from ``config.seed``.
    """

    config: EngineConfig = field(default_factory=EngineConfig)
    rng: Optional[PieceSource] = None
    board: Board = field(default_factory=Board)
    active: Optional[Tetromino] = None
    score: int = 0
    game_over: bool = False
    drop_accum: float = 0.0
    line_clear: LineClearSequencer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random(self.config.seed)
        self.line_clear = LineClearSequencer(self.config.flash_duration, self.config.flash_blinks)

    @property
    def is_locked(self) -> bool:
        return self.game_over or self.line_clear.flashing or self.active is None

    # Lifecycle ------------------------------------------------------------
    def restart(self) -> None:
        """Reset the entire game state and spawn the first piece."""

        self.board = Board()
        self.score = 0
        self.game_over = False
        self.drop_accum = 0.0
        self.line_clear.clear()
        self.active = None
        LOGGER.info("New game started")
        self.spawn_tetromino()

    def spawn_tetromino(self) -> Tetromino:
        """Spawn and return a new active tetromino.

        The shape is drawn uniformly from the random source and the piece is
        centred at the top of the board.  A spawn that collides with locked
        blocks ends the game; the piece stays active so it can still be drawn.
        """

        shape = PIECE_ORDER[self.rng.randrange(len(PIECE_ORDER))]
        self.active = Tetromino(shape, position=(0, spawn_column(shape, self.board.width)))
        if collides(self.board, self.active):
            self._end_game("spawned piece collides")
        return self.active

    def _end_game(self, reason: str) -> None:
        self.game_over = True
        LOGGER.info("Game over (%s). Final score: %d", reason, self.score)

    # Input operations -----------------------------------------------------
    def move_left(self) -> bool:
        return self._shift(-1)

    def move_right(self) -> bool:
        return self._shift(1)

    def _shift(self, dx: int) -> bool:
        if self.is_locked or collides(self.board, self.active, dx, 0):
            return False
        self.active.move(dx, 0)
        return True

    def soft_drop(self) -> bool:
        """Move the piece down one row, locking it when it cannot fall."""

        if self.is_locked:
            return False
        if not collides(self.board, self.active, 0, 1):
            self.active.move(0, 1)
        else:
            self.lock_active()
        return True

    def rotate(self) -> bool:
        """Rotate clockwise, trying the wall kicks when the rotation collides."""

        if self.is_locked:
            return False
        piece = self.active
        next_rotation = (piece.rotation + 1) % 4
        for kick in (0,) + WALL_KICKS:
            if not collides(self.board, piece, kick, 0, next_rotation):
                piece.move(kick, 0)
                piece.rotation = next_rotation
                return True
        return False

    # Locking and line clears ----------------------------------------------
    def lock_active(self) -> None:
        """Lock the active piece, then flash, clear or spawn as required."""

        if self.active is None:
            return
        if not self.board.lock_piece(self.active):
            self._end_game("piece locked above the board")
            return

        self.active = None
        rows = self.board.full_rows()
        if rows:
            if self.config.line_clear_animation:
                self.line_clear.begin(rows)
                LOGGER.debug("Flashing rows %s", rows)
                return
            self._clear_rows(rows)
        self.spawn_tetromino()

    def _clear_rows(self, rows: Sequence[int]) -> None:
        cleared = self.board.remove_rows(rows)
        points = score_for_lines(cleared)
        self.score += points
        LOGGER.info("Cleared %d row(s) for %d points. Score: %d", cleared, points, self.score)

    def _finish_line_clear(self) -> None:
        rows = self.line_clear.rows
        self.line_clear.clear()
        self._clear_rows(rows)
        self.spawn_tetromino()
        self.drop_accum = 0.0

    # Time -----------------------------------------------------------------
    def advance(self, dt: float) -> None:
        """Advance the game by ``dt`` milliseconds.

        Gravity is suspended while rows flash.  Otherwise at most one row is
        dropped per call and any excess time carries over to the next call.
        """

        if self.game_over:
            return
        if self.line_clear.flashing:
            if self.line_clear.advance(dt):
                self._finish_line_clear()
            return

        self.drop_accum += dt
        if self.drop_accum >= self.config.drop_interval:
            self.soft_drop()
            self.drop_accum -= self.config.drop_interval

    def snapshot(self) -> Snapshot:
        grid = self.board.grid.copy()
        grid.setflags(write=False)
        if self.active is not None:
            cells = tuple(self.active.blocks())
            value = PIECE_VALUES[self.active.shape]
        else:
            cells = ()
            value = 0
        return Snapshot(
            grid=grid,
            active_cells=cells,
            active_value=value,
            score=self.score,
            flashing_rows=self.line_clear.rows,
            flash_visible=self.line_clear.visible,
            game_over=self.game_over,
        )
