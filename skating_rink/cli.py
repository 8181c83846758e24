"""CLI entrypoint for running a skating-rink simulation.

This module owns CLI argument parsing and dispatch. Domain logic lives in:

- ``skating_rink.config``            – defaults and ``SimulationConfig``
- ``skating_rink.simulation.engine`` – ``run_simulation`` driver
- ``skating_rink.viz``               – payoff chart rendering
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from skating_rink.config.types import SimulationConfig
from skating_rink.domain.errors import ConfigurationError, PlacementError
from skating_rink.io.paths import angle_chart_path
from skating_rink.simulation.engine import run_simulation
from skating_rink.simulation.summary import summarize_run
from skating_rink.viz.render import render_angle_series
from skating_rink.viz.theme import REGISTERED_THEMES, get_theme

_DEFAULTS = SimulationConfig()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# Value coercion helpers
# ---------------------------------------------------------------------------


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """Resolve an integer; rejects booleans and non-integral floats from the file."""
    raw = _get_val(cli_val, key, file_cfg, default)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    return int(raw)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    raw = _get_val(cli_val, key, file_cfg, default)
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"{key} must be a number, got {raw!r}")
    return float(raw)


def _get_str(cli_val: object, key: str, file_cfg: dict[str, object], default: str) -> str:
    raw = _get_val(cli_val, key, file_cfg, default)
    if not isinstance(raw, (str, Path)):
        raise ValueError(f"{key} must be a string, got {raw!r}")
    return str(raw)


def _get_plot(cli_val: bool | None, file_cfg: dict[str, object]) -> bool:
    raw = _get_val(cli_val, "plot", file_cfg, True)
    if not isinstance(raw, bool):
        raise ValueError(f"plot must be true or false, got {raw!r}")
    return raw


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Simulate epsilon-greedy skaters learning to avoid collisions on a torus"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--skaters", type=int, default=None, help="Number of skaters")
    parser.add_argument("--rounds", type=int, default=None)
    parser.add_argument(
        "--base-angle", type=int, default=None, help="Degrees between canonical actions"
    )
    parser.add_argument("--step-distance", type=float, default=None)
    parser.add_argument("--path-fragments", type=int, default=None)
    parser.add_argument(
        "--exploration-rate",
        type=float,
        default=None,
        help="Probability of exploring instead of exploiting",
    )
    parser.add_argument("--width", type=float, default=None)
    parser.add_argument("--height", type=float, default=None)
    parser.add_argument("--collision-radius", type=float, default=None)
    parser.add_argument("--high-reward", type=int, default=None)
    parser.add_argument("--low-reward", type=int, default=None)
    parser.add_argument("--max-placement-attempts", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--plot",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Render the mean-payoff-per-angle chart into OUT_DIR/plots",
    )
    parser.add_argument(
        "--theme", type=str, choices=sorted(REGISTERED_THEMES), default=None
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=_LOG_LEVELS,
        default=None,
    )
    return parser


def _build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> SimulationConfig:
    """Resolve every simulation scalar with CLI > file > default precedence."""
    return SimulationConfig(
        num_skaters=_get_int(args.skaters, "num_skaters", file_cfg, _DEFAULTS.num_skaters),
        base_angle=_get_int(args.base_angle, "base_angle", file_cfg, _DEFAULTS.base_angle),
        step_distance=_get_float(
            args.step_distance, "step_distance", file_cfg, _DEFAULTS.step_distance
        ),
        path_fragments=_get_int(
            args.path_fragments, "path_fragments", file_cfg, _DEFAULTS.path_fragments
        ),
        exploration_rate=_get_float(
            args.exploration_rate, "exploration_rate", file_cfg, _DEFAULTS.exploration_rate
        ),
        rounds=_get_int(args.rounds, "rounds", file_cfg, _DEFAULTS.rounds),
        width=_get_float(args.width, "width", file_cfg, _DEFAULTS.width),
        height=_get_float(args.height, "height", file_cfg, _DEFAULTS.height),
        collision_radius=_get_float(
            args.collision_radius, "collision_radius", file_cfg, _DEFAULTS.collision_radius
        ),
        high_reward=_get_int(args.high_reward, "high_reward", file_cfg, _DEFAULTS.high_reward),
        low_reward=_get_int(args.low_reward, "low_reward", file_cfg, _DEFAULTS.low_reward),
        max_placement_attempts=_get_int(
            args.max_placement_attempts,
            "max_placement_attempts",
            file_cfg,
            _DEFAULTS.max_placement_attempts,
        ),
        seed=_get_int(args.seed, "seed", file_cfg, _DEFAULTS.seed),
    )


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a single simulation run.

    Supports ``--config path/to/config.json`` for experiment reproducibility.
    CLI arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        log_level = _get_str(args.log_level, "log_level", file_cfg, "WARNING").upper()
        if log_level not in _LOG_LEVELS:
            valid = ", ".join(_LOG_LEVELS)
            raise ValueError(f"log_level must be one of {valid}, got {log_level!r}")
        config = _build_config(args, file_cfg)
        out_dir = Path(_get_str(args.out_dir, "out_dir", file_cfg, "data"))
        plot = _get_plot(args.plot, file_cfg)
        theme = get_theme(_get_str(args.theme, "theme", file_cfg, "default"))
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        result = run_simulation(config, out_dir=out_dir)
    except (ConfigurationError, PlacementError) as exc:
        parser.exit(1, f"{parser.prog}: error: {exc}\n")

    summary = summarize_run(result, config)
    summary.pop("config")
    summary["out_dir"] = str(out_dir)
    if plot:
        chart = render_angle_series(
            result.angle_series,
            angle_chart_path(out_dir.resolve()),
            num_skaters=result.num_skaters,
            base_dir=out_dir,
            theme=theme,
        )
        summary["chart"] = str(chart)
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
