"""Utility helpers for the Tetris engine."""

from __future__ import annotations

import math
from typing import Optional

from .board import Board
from .tetromino import Tetromino


# Points awarded for clearing 1-4 rows with a single lock.
LINE_CLEAR_POINTS = {1: 100, 2: 300, 3: 500, 4: 800}


def score_for_lines(lines: int) -> int:
    """Return the points for clearing ``lines`` rows at once.

    Counts beyond four cannot happen with a single tetromino but score
    ``lines * 200``.
    """

    if lines <= 0:
        return 0
    return LINE_CLEAR_POINTS.get(lines, lines * 200)


def blink_visible(timer: float, duration: float, blinks: int) -> bool:
    """Return whether flashing rows are drawn at ``timer`` into the flash.

    Even phases show the rows highlighted, odd phases hide them.
    """

    phase = math.floor(timer / (duration / blinks))
    return phase % 2 == 0


def collides(
    board: Board,
    tetromino: Tetromino,
    dx: int = 0,
    dy: int = 0,
    rotation: Optional[int] = None,
) -> bool:
    """Return ``True`` if ``tetromino`` offset by ``dx``/``dy`` hits something.

    ``rotation`` tests another rotation state in place of the current one.  A
    block collides when it leaves the board sideways or through the floor, or
    lands on a locked cell.  Blocks above the top edge are never checked
    against the grid.
    """

    for row, col in tetromino.blocks(rotation):
        if board.is_occupied(row + dy, col + dx):
            return True
    return False
