"""Board representation for the Tetris playfield."""

from __future__ import annotations

from typing import Iterable, List

import numpy as np
from numpy.typing import NDArray

from .tetromino import PIECE_ORDER, Tetromino


# Dimensions of the board.  Renderers size their surface from these.
COLS = 10
ROWS = 20

Grid = NDArray[np.uint8]

# Mapping from ``TetrominoType`` to the colour index stored in the grid.  ``0``
# is an empty cell.
PIECE_VALUES = {t: i + 1 for i, t in enumerate(PIECE_ORDER)}


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((ROWS, COLS), dtype=np.uint8)


class Board:
    """Tetris board holding the locked cells."""

    width: int = COLS
    height: int = ROWS

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def get_cell(self, row: int, col: int) -> int:
        """Safely return the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            return int(self.grid[row, col])
        raise IndexError("Cell out of bounds")

    def set_cell(self, row: int, col: int, value: int) -> None:
        """Safely set the value at ``(row, col)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if 0 <= row < self.height and 0 <= col < self.width:
            self.grid[row, col] = np.uint8(value)
        else:
            raise IndexError("Cell out of bounds")

    def is_occupied(self, row: int, col: int) -> bool:
        """Return ``True`` if a block may not occupy ``(row, col)``.

        Cells below the floor or beside the walls count as occupied.  Cells
        above the top edge are always free so pieces can spawn partly outside
        the visible board.
        """

        if row >= self.height or not 0 <= col < self.width:
            return True
        if row < 0:
            return False
        return bool(self.grid[row, col] != 0)

    def lock_piece(self, tetromino: Tetromino) -> bool:
        """Lock the tetromino's blocks into the board grid.

        Returns ``False`` without touching the grid when any block sits above
        the board, which ends the game.
        """

        coordinates = np.asarray(tetromino.blocks(), dtype=np.int16)
        if coordinates.size == 0:
            return True

        rows, cols = coordinates.T
        if np.any(rows < 0):
            return False
        if np.any(rows >= self.height) or np.any(cols < 0) or np.any(cols >= self.width):
            raise IndexError("Block out of bounds")

        self.grid[rows, cols] = np.uint8(PIECE_VALUES[tetromino.shape])
        return True

    def full_rows(self) -> List[int]:
        """Return the indices of completed rows, top to bottom."""

        return [int(r) for r in np.flatnonzero(np.all(self.grid != 0, axis=1))]

    def remove_rows(self, rows: Iterable[int]) -> int:
        """Remove ``rows`` and drop everything above them.

        The same number of empty rows is inserted at the top and the remaining
        rows keep their relative order.  Returns how many rows were removed.

        Raises:
            IndexError: If any row index is outside the board.
        """

        targets = sorted(set(rows))
        if any(not 0 <= row < self.height for row in targets):
            raise IndexError("Row out of bounds")
        keep = np.ones(self.height, dtype=bool)
        keep[targets] = False
        removed = int(self.height - np.count_nonzero(keep))
        if removed:
            new_rows = np.zeros((removed, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, self.grid[keep]))
        return removed
