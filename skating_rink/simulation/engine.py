"""Simulation driver: rink construction, population, run, and persistence."""

from __future__ import annotations

import logging
import random
from pathlib import Path

from skating_rink.config.types import SimulationConfig, SimulationResult
from skating_rink.domain.rink import SkatingRink
from skating_rink.domain.skater import Skater
from skating_rink.io.paths import angle_series_path, run_summary_path, skater_payoffs_path
from skating_rink.simulation.persistence import (
    write_angle_series,
    write_payoff_csv,
    write_run_summary,
)
from skating_rink.simulation.summary import summarize_run

logger = logging.getLogger(__name__)


def _deterministic_run_id(config: SimulationConfig) -> str:
    """Build reproducible run ID stable across runs for identical settings."""
    return f"n{config.num_skaters}_a{config.base_angle}_r{config.rounds}_s{config.seed}"


def populate(rink: SkatingRink, config: SimulationConfig, rng: random.Random) -> list[Skater]:
    """Create and register ``config.num_skaters`` skaters, each placed clear of the earlier ones.

    A :exc:`PlacementError` from any skater propagates unchanged.
    """
    skaters: list[Skater] = []
    for skater_id in range(config.num_skaters):
        skater = Skater(skater_id=skater_id, rink=rink, config=config, rng=rng)
        rink.register(skater)
        skaters.append(skater)
    return skaters


def build_rink(config: SimulationConfig, rng: random.Random) -> SkatingRink:
    """Create a populated rink ready to run."""
    rink = SkatingRink.from_config(config)
    populate(rink, config, rng)
    return rink


def run_simulation(
    config: SimulationConfig | None = None,
    out_dir: Path | None = None,
    rng: random.Random | None = None,
) -> SimulationResult:
    """Run one seeded simulation and optionally persist its artifacts.

    ``rng`` defaults to ``random.Random(config.seed)``. When ``out_dir`` is
    given, the angle series (Parquet), per-skater payoffs (CSV) and a run
    summary (JSON) are written under ``out_dir/logs``.
    """
    config = config or SimulationConfig()
    rng = rng if rng is not None else random.Random(config.seed)
    run_id = _deterministic_run_id(config)

    logger.info(
        "Starting run %s: %d skaters, %d rounds on %gx%g rink",
        run_id,
        config.num_skaters,
        config.rounds,
        config.width,
        config.height,
    )
    rink = build_rink(config, rng)
    rink.run(config.rounds)

    result = SimulationResult(
        run_id=run_id,
        rounds_played=rink.rounds_played,
        num_skaters=len(rink.skaters),
        skipped_turns=rink.skipped_turns,
        angles=rink.angles,
        angle_series=rink.angle_series(),
        payoff_rows=rink.payoff_rows(),
    )
    logger.info(
        "Finished run %s after %d rounds (%d skipped turns)",
        run_id,
        result.rounds_played,
        result.skipped_turns,
    )

    if out_dir is not None:
        save_artifacts(result, config, Path(out_dir))
    return result


def save_artifacts(result: SimulationResult, config: SimulationConfig, out_dir: Path) -> None:
    """Write the angle series, per-skater payoff CSV and run summary."""
    write_angle_series(result.angle_series, angle_series_path(out_dir))
    write_payoff_csv(result.payoff_rows, result.angles, skater_payoffs_path(out_dir))
    write_run_summary(summarize_run(result, config), run_summary_path(out_dir))
