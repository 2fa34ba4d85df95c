"""Falling-block puzzle engine: pieces, board, line clears and the game loop."""

from .board import COLS, ROWS, PIECE_VALUES, Board
from .tetromino import (
    PIECE_ORDER,
    TETROMINO_MATRICES,
    Tetromino,
    TetrominoType,
    shape_blocks,
    shape_matrix,
    spawn_column,
)
from .config import EngineConfig
from .line_clear import LineClearSequencer
from .game_state import GameState, PieceSource, Snapshot, WALL_KICKS
from .game_loop import GameLoop
from .utils import blink_visible, collides, score_for_lines

__all__ = [
    "COLS",
    "ROWS",
    "PIECE_VALUES",
    "PIECE_ORDER",
    "TETROMINO_MATRICES",
    "WALL_KICKS",
    "Board",
    "Tetromino",
    "TetrominoType",
    "EngineConfig",
    "LineClearSequencer",
    "GameState",
    "GameLoop",
    "PieceSource",
    "Snapshot",
    "blink_visible",
    "collides",
    "score_for_lines",
    "shape_blocks",
    "shape_matrix",
    "spawn_column",
]
