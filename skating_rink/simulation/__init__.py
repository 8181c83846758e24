"""Simulation engine: driver, summaries, and artifact persistence."""

from skating_rink.simulation.engine import build_rink, populate, run_simulation, save_artifacts
from skating_rink.simulation.summary import final_mean_payoffs, summarize_run

__all__ = [
    "build_rink",
    "final_mean_payoffs",
    "populate",
    "run_simulation",
    "save_artifacts",
    "summarize_run",
]
