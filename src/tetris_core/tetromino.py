"""Tetromino catalog and the active falling piece.

Every piece type owns four square rotation matrices.  The spawn orientation is
listed explicitly below; the remaining states are derived by rotating the
matrix clockwise, which reproduces the classic catalog (``I`` on a 4x4 grid,
``O`` on 2x2 and the rest on 3x3).  The matrices are shared by every piece
instance and are write-protected.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

import numpy as np
from numpy.typing import NDArray

Matrix = NDArray[np.uint8]
RotationState = List[Tuple[int, int]]

ROTATION_COUNT = 4


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


# Fixed draw order; a piece's colour index is its position plus one.
PIECE_ORDER: Tuple[TetrominoType, ...] = tuple(TetrominoType)


# Spawn orientation for each tetromino.
_SPAWN_MATRICES: Dict[TetrominoType, List[List[int]]] = {
    TetrominoType.I: [[0, 0, 0, 0], [1, 1, 1, 1], [0, 0, 0, 0], [0, 0, 0, 0]],
    TetrominoType.O: [[1, 1], [1, 1]],
    TetrominoType.T: [[0, 1, 0], [1, 1, 1], [0, 0, 0]],
    TetrominoType.S: [[0, 1, 1], [1, 1, 0], [0, 0, 0]],
    TetrominoType.Z: [[1, 1, 0], [0, 1, 1], [0, 0, 0]],
    TetrominoType.J: [[1, 0, 0], [1, 1, 1], [0, 0, 0]],
    TetrominoType.L: [[0, 0, 1], [1, 1, 1], [0, 0, 0]],
}


def _frozen(matrix: NDArray) -> Matrix:
    frozen = np.array(matrix, dtype=np.uint8)
    frozen.setflags(write=False)
    return frozen


def _generate_rotations(spawn: List[List[int]]) -> Tuple[Matrix, ...]:
    """Generate the four rotation states, each 90 degrees clockwise of the last."""

    state = np.array(spawn, dtype=np.uint8)
    rotations = []
    for _ in range(ROTATION_COUNT):
        rotations.append(_frozen(state))
        state = np.rot90(state, k=-1)
    return tuple(rotations)


TETROMINO_MATRICES: Dict[TetrominoType, Tuple[Matrix, ...]] = {
    t_type: _generate_rotations(spawn) for t_type, spawn in _SPAWN_MATRICES.items()
}

# Occupied offsets per rotation, row-major so the topmost cells come first.
_BLOCK_OFFSETS: Dict[TetrominoType, Tuple[RotationState, ...]] = {
    t_type: tuple(
        [(int(r), int(c)) for r, c in np.argwhere(matrix)] for matrix in states
    )
    for t_type, states in TETROMINO_MATRICES.items()
}


def shape_matrix(shape: TetrominoType, rotation: int) -> Matrix:
    """Return the rotation matrix for ``shape``; ``rotation`` wraps modulo 4."""

    return TETROMINO_MATRICES[shape][rotation % ROTATION_COUNT]


def shape_blocks(shape: TetrominoType, rotation: int) -> RotationState:
    """Return the block offsets for ``shape`` at ``rotation``.

    Parameters
    ----------
    shape:
        The :class:`TetrominoType` to query.
    rotation:
        Index of the desired rotation state.  Values are wrapped so any integer
        is accepted.
    """

    return _BLOCK_OFFSETS[shape][rotation % ROTATION_COUNT]


def spawn_column(shape: TetrominoType, cols: int = 10) -> int:
    """Column that horizontally centres the spawn matrix of ``shape``."""

    width = TETROMINO_MATRICES[shape][0].shape[1]
    return cols // 2 - math.ceil(width / 2)


@dataclass
class Tetromino:
    """Active falling piece in the game.

    ``position`` is the ``(row, col)`` of the rotation matrix's top-left
    corner, so occupied cells may lie outside the board while the piece is
    still legal.
    """

    shape: TetrominoType
    rotation: int = 0
    position: Tuple[int, int] = (0, 0)  # (row, col)

    @property
    def row(self) -> int:
        return self.position[0]

    @property
    def col(self) -> int:
        return self.position[1]

    def rotate(self, direction: int = 1) -> None:
        """Rotate the piece clockwise for positive ``direction``."""

        self.rotation = (self.rotation + direction) % ROTATION_COUNT

    def move(self, dx: int, dy: int) -> None:
        """Move the piece by the given offsets.

        ``dx`` moves horizontally (columns) and ``dy`` moves vertically
        (rows).
        """

        row, col = self.position
        self.position = (row + dy, col + dx)

    def matrix(self) -> Matrix:
        return shape_matrix(self.shape, self.rotation)

    def blocks(self, rotation: int | None = None) -> List[Tuple[int, int]]:
        """Return the global block coordinates, optionally for another rotation."""

        row, col = self.position
        state = shape_blocks(self.shape, self.rotation if rotation is None else rotation)
        return [(row + dr, col + dc) for dr, dc in state]
