from __future__ import annotations

import pygame

from tetris_core.board import COLS, ROWS
from tetris_core.game_loop import GameLoop
from tetris_core.game_state import GameState
from tetris_core.run_pygame import (
    BACKGROUND,
    CELL_COLORS,
    CELL_SIZE,
    FLASH_COLOR,
    draw_snapshot,
    handle_key,
)
from tetris_core.tetromino import PIECE_ORDER, TetrominoType


class SequenceRng:
    def __init__(self, *shapes: TetrominoType) -> None:
        self._indices = [PIECE_ORDER.index(shape) for shape in shapes]
        self._pos = 0

    def randrange(self, n: int) -> int:
        value = self._indices[self._pos % len(self._indices)]
        self._pos += 1
        return value


def _pixel(surface: pygame.Surface, row: int, col: int) -> tuple:
    x = col * CELL_SIZE + CELL_SIZE // 2
    y = row * CELL_SIZE + CELL_SIZE // 2
    return tuple(surface.get_at((x, y)))[:3]


def _surface() -> pygame.Surface:
    return pygame.Surface((COLS * CELL_SIZE, ROWS * CELL_SIZE))


def test_draws_locked_cells_and_active_piece() -> None:
    state = GameState(rng=SequenceRng(TetrominoType.T))
    state.restart()
    state.board.grid[19][0] = 2
    screen = _surface()

    draw_snapshot(screen, state.snapshot())

    assert _pixel(screen, 19, 0) == CELL_COLORS[2]
    assert _pixel(screen, 1, 4) == CELL_COLORS[3]
    assert _pixel(screen, 10, 5) == BACKGROUND


def test_flashing_rows_blink() -> None:
    state = GameState(rng=SequenceRng(TetrominoType.O))
    state.restart()
    state.board.grid[19, :] = 1
    state.active = None
    state.line_clear.begin([19])
    screen = _surface()

    draw_snapshot(screen, state.snapshot())
    assert _pixel(screen, 19, 3) == FLASH_COLOR

    state.advance(150)
    draw_snapshot(screen, state.snapshot())
    assert _pixel(screen, 19, 3) == BACKGROUND


def test_keys_drive_the_engine() -> None:
    loop = GameLoop(rng=SequenceRng(TetrominoType.T))
    loop.start(0.0)

    assert handle_key(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT), loop, 10.0)
    assert loop.state.active.col == 2
    assert handle_key(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP), loop, 20.0)
    assert loop.state.active.rotation == 1
    assert handle_key(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN), loop, 30.0)
    assert loop.state.active.row == 1
    assert not handle_key(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a), loop, 40.0)

    loop.state.score = 500
    assert handle_key(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_r), loop, 50.0)
    assert loop.state.score == 0
    assert loop.state.active.position == (0, 3)
    assert loop.last_ts == 50.0


def test_game_over_overlay_dims_the_board() -> None:
    state = GameState(rng=SequenceRng(TetrominoType.T))
    state.board.grid[19][0] = 2
    state.board.grid[1][4] = 7
    state.spawn_tetromino()
    assert state.game_over
    screen = _surface()

    draw_snapshot(screen, state.snapshot())

    empty = _pixel(screen, 19, 9)
    locked = _pixel(screen, 19, 0)
    assert sum(empty) < sum(BACKGROUND)
    assert all(value <= bg for value, bg in zip(empty, BACKGROUND))
    assert sum(locked) < sum(CELL_COLORS[2])
