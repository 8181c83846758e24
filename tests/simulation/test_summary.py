"""Tests for skating_rink.simulation.summary module."""

from __future__ import annotations

import pytest

from skating_rink.config.types import SimulationConfig, SimulationResult
from skating_rink.simulation.summary import final_mean_payoffs, summarize_run


def _result(series: dict[int, list[tuple[int, float]]], skipped: int = 0) -> SimulationResult:
    return SimulationResult(
        run_id="test",
        rounds_played=4,
        num_skaters=2,
        skipped_turns=skipped,
        angles=tuple(sorted(series)),
        angle_series=series,
        payoff_rows=[],
    )


def test_final_mean_payoffs_takes_last_point() -> None:
    result = _result({0: [(1, 1.0), (4, 2.5)], 180: [(1, 0.0), (4, 7.0)]})
    assert final_mean_payoffs(result) == {0: 2.5, 180: 7.0}


def test_summary_reports_best_angle_and_spread() -> None:
    result = _result({0: [(4, 2.5)], 90: [(4, 7.0)], 180: [(4, 1.0)], 270: [(4, 7.0)]})
    summary = summarize_run(result, SimulationConfig(base_angle=90))
    assert summary["best_angle"] == 90
    assert summary["payoff_spread"] == pytest.approx(6.0)
    assert summary["final_mean_payoff"] == {"0": 2.5, "90": 7.0, "180": 1.0, "270": 7.0}


def test_summary_skip_rate() -> None:
    result = _result({0: [(4, 1.0)]}, skipped=2)
    summary = summarize_run(result, SimulationConfig())
    assert summary["skip_rate"] == pytest.approx(2 / 8)
    assert summary["config"]["num_skaters"] == 3
