"""Simple ASCII demo for the Tetris engine.

Run with: `python -m tetris_core`

By default this prints a single frame composed of the board plus the active
tetromino after letting gravity run for ``--ticks`` frames.  Pass ``--gui`` to
open the pygame window instead.
"""

from __future__ import annotations

import argparse
import logging

from . import EngineConfig, GameState


def _print_grid(grid: list[list[int]]) -> None:
    for row in grid:
        print("".join("#" if cell else "." for cell in row))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tetris engine demo.")
    parser.add_argument("--gui", action="store_true", help="Open the pygame window.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece sequence.")
    parser.add_argument("--ticks", type=int, default=0, help="Frames to simulate before printing.")
    parser.add_argument("--frame-ms", type=float, default=16.0, help="Milliseconds per simulated frame.")
    parser.add_argument(
        "--no-animation",
        dest="animation",
        action="store_false",
        help="Remove completed rows without the flash animation.",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (e.g. DEBUG, INFO).")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")
    config = EngineConfig(line_clear_animation=args.animation, seed=args.seed)

    if args.gui:
        from .run_pygame import main as run_gui

        run_gui(config)
        return

    gs = GameState(config=config)
    gs.restart()
    for _ in range(args.ticks):
        gs.advance(args.frame_ms)
    _print_grid(gs.snapshot().render_grid())
    print(f"Score: {gs.score}{' (game over)' if gs.game_over else ''}")


if __name__ == "__main__":
    main()
