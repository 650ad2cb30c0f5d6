from __future__ import annotations

import pytest

from cardroom.benchmark import run_war_series
from cardroom.war import WarConfig


def test_run_war_series_returns_report() -> None:
    config = WarConfig(max_rounds=400)
    report = run_war_series(3, seed=7, config=config)

    assert report.games == 3
    assert report.first_wins + report.second_wins + report.undecided == 3
    assert 0 <= report.round_limited <= 3
    assert 1 <= report.max_rounds <= 400
    assert report.mean_rounds <= report.max_rounds
    assert report.total_wars >= 0


def test_run_war_series_is_reproducible() -> None:
    config = WarConfig(max_rounds=200)
    assert run_war_series(2, seed=11, config=config) == run_war_series(2, seed=11, config=config)


def test_run_war_series_requires_games() -> None:
    with pytest.raises(ValueError):
        run_war_series(0)
