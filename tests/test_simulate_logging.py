import logging
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from examples.simulate_games import log_game, play_game


def test_log_game_reports_summary(caplog):
    state, frames = play_game(3, max_frames=50)

    with caplog.at_level(logging.INFO, logger="examples.simulate_games"):
        summary = log_game(state, frames=frames, index=7)

    assert frames <= 50
    assert summary == {"score": state.score, "frames": frames, "game_over": state.game_over}
    message = "".join(caplog.messages)
    assert "Game 7" in message
    assert f"score={state.score}" in message


def test_play_game_is_repeatable_per_seed():
    first, first_frames = play_game(11, max_frames=2000)
    second, second_frames = play_game(11, max_frames=2000)
    assert first_frames == second_frames
    assert first.score == second.score
    assert np.array_equal(first.board.grid, second.board.grid)
