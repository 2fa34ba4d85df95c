"""Play seeded games with random inputs and log how they went.

Run with::

    PYTHONPATH=src python examples/simulate_games.py

Pass ``--help`` to see options for the number of games, frame length and
line-clear animation.
"""

from __future__ import annotations

import argparse
import logging
import random

from tetris_core.config import EngineConfig
from tetris_core.game_state import GameState


LOGGER = logging.getLogger(__name__)

ACTIONS = ("move_left", "move_right", "rotate", "soft_drop", "soft_drop")


def play_game(
    seed: int,
    *,
    frame_ms: float = 16.0,
    max_frames: int = 20_000,
    animation: bool = True,
) -> tuple[GameState, int]:
    """Play one game and return the final state and the frames simulated."""

    inputs = random.Random(seed)
    state = GameState(config=EngineConfig(line_clear_animation=animation, seed=seed))
    state.restart()
    frames = 0
    while frames < max_frames and not state.game_over:
        getattr(state, inputs.choice(ACTIONS))()
        state.advance(frame_ms)
        frames += 1
    return state, frames


def log_game(state: GameState, *, frames: int, index: int) -> dict[str, int | bool]:
    summary = {"score": state.score, "frames": frames, "game_over": state.game_over}
    LOGGER.info(
        "Game %d: score=%d, frames=%d, %s",
        index,
        state.score,
        frames,
        "topped out" if state.game_over else "still running",
    )
    return summary


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--games", type=int, default=5, help="How many games to play.")
    parser.add_argument("--seed", type=int, default=0, help="Seed of the first game.")
    parser.add_argument("--frame-ms", type=float, default=16.0, help="Milliseconds per frame.")
    parser.add_argument("--max-frames", type=int, default=20_000, help="Frame cap per game.")
    parser.add_argument(
        "--no-animation",
        dest="animation",
        action="store_false",
        help="Remove completed rows without the flash animation.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    best = 0
    for index in range(1, args.games + 1):
        state, frames = play_game(
            args.seed + index - 1,
            frame_ms=args.frame_ms,
            max_frames=args.max_frames,
            animation=args.animation,
        )
        best = max(best, log_game(state, frames=frames, index=index)["score"])
    LOGGER.info("Best score over %d game(s): %d", args.games, best)


if __name__ == "__main__":
    main()
