"""Simple pygame front-end for the Tetris engine.

This module is a thin renderer and keyboard adapter around
:class:`~tetris_core.game_loop.GameLoop`.  It only reads snapshots of the game
and forwards key presses to the engine's input operations.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Optional

import pygame

from .board import COLS, ROWS
from .config import EngineConfig
from .game_loop import GameLoop
from .game_state import Snapshot

# Size of a single board cell in pixels
CELL_SIZE = 30
# Frames per second to run the game loop at
FPS = 60

BACKGROUND = (15, 15, 35)
GRID_LINE = (26, 26, 58)
FLASH_COLOR = (255, 255, 255)

# Mapping from the colour index stored in the board grid to a colour
CELL_COLORS = {
    1: (0, 240, 240),  # I
    2: (240, 240, 0),  # O
    3: (160, 0, 240),  # T
    4: (0, 240, 0),  # S
    5: (240, 0, 0),  # Z
    6: (0, 0, 240),  # J
    7: (240, 160, 0),  # L
}

KEY_BINDINGS = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_DOWN: "soft_drop",
    pygame.K_UP: "rotate",
}

LOGGER = logging.getLogger(__name__)


def _cell_rect(row: int, col: int) -> pygame.Rect:
    return pygame.Rect(col * CELL_SIZE, row * CELL_SIZE, CELL_SIZE, CELL_SIZE)


def _draw_block(screen: pygame.Surface, row: int, col: int, color) -> None:
    rect = _cell_rect(row, col)
    pygame.draw.rect(screen, color, rect)
    pygame.draw.rect(screen, BACKGROUND, rect, 1)


def draw_board(screen: pygame.Surface, snapshot: Snapshot) -> None:
    """Render the locked cells, flashing rows and grid lines."""

    screen.fill(BACKGROUND)
    flashing = set(snapshot.flashing_rows)
    for r, row in enumerate(snapshot.grid):
        for c, value in enumerate(row):
            if not value:
                continue
            if r in flashing:
                # Hidden phases leave the background showing.
                if snapshot.flash_visible:
                    _draw_block(screen, r, c, FLASH_COLOR)
            else:
                _draw_block(screen, r, c, CELL_COLORS[int(value)])

    width, height = COLS * CELL_SIZE, ROWS * CELL_SIZE
    for r in range(ROWS + 1):
        pygame.draw.line(screen, GRID_LINE, (0, r * CELL_SIZE), (width, r * CELL_SIZE))
    for c in range(COLS + 1):
        pygame.draw.line(screen, GRID_LINE, (c * CELL_SIZE, 0), (c * CELL_SIZE, height))


def draw_tetromino(screen: pygame.Surface, snapshot: Snapshot) -> None:
    """Render the currently active tetromino."""

    if not snapshot.active_cells:
        return
    color = CELL_COLORS[snapshot.active_value]
    for r, c in snapshot.active_cells:
        if r >= 0:
            _draw_block(screen, r, c, color)


def draw_game_over(screen: pygame.Surface, snapshot: Snapshot) -> None:
    """Dim the board and show the final score with a restart hint."""

    if not pygame.font.get_init():
        pygame.font.init()
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 180))
    screen.blit(overlay, (0, 0))

    center_x = screen.get_width() // 2
    center_y = screen.get_height() // 2
    lines = [
        (pygame.font.Font(None, 48), "GAME OVER"),
        (pygame.font.Font(None, 32), f"Score: {snapshot.final_score}"),
        (pygame.font.Font(None, 24), "Press R to restart"),
    ]
    for offset, (font, text) in zip((-40, 0, 40), lines):
        surface = font.render(text, True, FLASH_COLOR)
        screen.blit(surface, surface.get_rect(center=(center_x, center_y + offset)))


def draw_snapshot(screen: pygame.Surface, snapshot: Snapshot) -> None:
    draw_board(screen, snapshot)
    draw_tetromino(screen, snapshot)
    if snapshot.game_over:
        draw_game_over(screen, snapshot)


def handle_key(event: pygame.event.Event, loop: GameLoop, now: float) -> bool:
    """Forward a key press to the engine.  Returns ``True`` if it was bound."""

    if event.key == pygame.K_r:
        loop.restart(now)
        return True
    operation = KEY_BINDINGS.get(event.key)
    if operation is None:
        return False
    getattr(loop.state, operation)()
    return True


async def run(config: Optional[EngineConfig] = None) -> None:
    """Open a window and play until it is closed."""

    # Ensure SDL/pygame binds to the visible canvas in the page when running on Web.
    os.environ.setdefault("SDL_HINT_EMSCRIPTEN_CANVAS_ELEMENT_ID", "#canvas")
    os.environ.setdefault("SDL_HINT_EMSCRIPTEN_KEYBOARD_ELEMENT", "#canvas")
    pygame.init()
    screen = pygame.display.set_mode((COLS * CELL_SIZE, ROWS * CELL_SIZE))
    pygame.display.set_caption("Tetris")
    clock = pygame.time.Clock()

    loop = GameLoop(config=config or EngineConfig())
    loop.start(pygame.time.get_ticks())
    LOGGER.info("Game window opened")

    open_window = True
    while open_window:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                open_window = False
            elif event.type == pygame.KEYDOWN:
                handle_key(event, loop, pygame.time.get_ticks())

        loop.tick(pygame.time.get_ticks())
        snapshot = loop.state.snapshot()
        draw_snapshot(screen, snapshot)
        pygame.display.set_caption(f"Tetris - Score: {snapshot.score}")
        pygame.display.flip()
        clock.tick(FPS)

        # Yield to the browser/host event loop to keep UI responsive
        await asyncio.sleep(0)

    loop.stop()
    pygame.quit()
    LOGGER.info("Game window closed")


def main(config: Optional[EngineConfig] = None) -> None:
    asyncio.run(run(config))


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
