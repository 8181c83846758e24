"""Run-level summary statistics derived from the angle series."""

from __future__ import annotations

from dataclasses import asdict

import numpy as np

from skating_rink.config.types import SimulationConfig, SimulationResult
from skating_rink.io.schemas import RUN_SUMMARY_SCHEMA_VERSION


def final_mean_payoffs(result: SimulationResult) -> dict[int, float]:
    """Population mean payoff per angle at the last played round."""
    return {
        angle: (points[-1][1] if points else 0.0)
        for angle, points in result.angle_series.items()
    }


def summarize_run(result: SimulationResult, config: SimulationConfig) -> dict[str, object]:
    """Collect the JSON-serializable summary written next to the run artifacts.

    ``best_angle`` is the angle with the highest final population mean payoff
    (lowest angle on ties). ``payoff_spread`` is the gap between the best and
    worst angle and grows as skaters settle on a preferred direction.
    """
    finals = final_mean_payoffs(result)
    angles = np.array(sorted(finals), dtype=np.int64)
    values = np.array([finals[int(angle)] for angle in angles], dtype=np.float64)
    turns = result.rounds_played * result.num_skaters
    return {
        "schema_version": RUN_SUMMARY_SCHEMA_VERSION,
        "run_id": result.run_id,
        "config": asdict(config),
        "rounds_played": result.rounds_played,
        "num_skaters": result.num_skaters,
        "skipped_turns": result.skipped_turns,
        "skip_rate": result.skipped_turns / turns if turns else 0.0,
        "final_mean_payoff": {
            str(int(angle)): float(value) for angle, value in zip(angles, values, strict=True)
        },
        "best_angle": int(angles[int(np.argmax(values))]),
        "payoff_spread": float(values.max() - values.min()),
    }
