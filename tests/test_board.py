from __future__ import annotations

import numpy as np
import pytest

from tetris_core.board import COLS, ROWS, Board
from tetris_core.tetromino import Tetromino, TetrominoType


def test_occupancy_outside_the_board() -> None:
    board = Board()
    assert board.is_occupied(ROWS, 0)
    assert board.is_occupied(0, -1)
    assert board.is_occupied(0, COLS)
    assert not board.is_occupied(-1, 5)
    assert board.is_occupied(-1, COLS)
    board.set_cell(3, 4, 5)
    assert board.is_occupied(3, 4)
    assert not board.is_occupied(3, 5)


def test_cell_access_out_of_bounds_raises() -> None:
    board = Board()
    with pytest.raises(IndexError):
        board.get_cell(ROWS, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, COLS, 1)


def test_full_rows_scanned_top_to_bottom() -> None:
    board = Board()
    board.grid[19] = 1
    board.grid[5] = 2
    board.grid[10] = 3
    board.grid[10][7] = 0
    assert board.full_rows() == [5, 19]


def test_removing_every_row_of_a_full_board() -> None:
    board = Board()
    board.grid[:, :] = 4
    assert board.full_rows() == list(range(ROWS))
    assert board.remove_rows(board.full_rows()) == ROWS
    assert board.grid.shape == (ROWS, COLS)
    assert not board.grid.any()


def test_removing_non_adjacent_rows_keeps_order() -> None:
    board = Board()
    board.grid[16][0] = 1
    board.grid[17] = 3
    board.grid[18][0] = 2
    board.grid[19] = 3
    board.remove_rows([19, 17])
    assert board.grid[19].tolist() == [2] + [0] * 9
    assert board.grid[18].tolist() == [1] + [0] * 9
    assert not board.grid[:18].any()


def test_removing_rows_outside_the_board_raises() -> None:
    board = Board()
    board.grid[19] = 1
    with pytest.raises(IndexError):
        board.remove_rows([-1])
    with pytest.raises(IndexError):
        board.remove_rows([19, ROWS])
    assert board.grid[19].tolist() == [1] * COLS
    assert board.full_rows() == [19]


def test_lock_piece_writes_colour_index() -> None:
    board = Board()
    assert board.lock_piece(Tetromino(TetrominoType.O, position=(18, 0)))
    assert board.grid[18:, :2].tolist() == [[2, 2], [2, 2]]


def test_lock_piece_above_board_writes_nothing() -> None:
    board = Board()
    piece = Tetromino(TetrominoType.T, position=(-1, 3))
    assert not board.lock_piece(piece)
    assert np.count_nonzero(board.grid) == 0
