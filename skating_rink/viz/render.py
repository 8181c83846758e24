"""Line chart of population mean payoff per canonical angle."""

from __future__ import annotations

from pathlib import Path

import matplotlib
import matplotlib.pyplot as plt
import numpy as np

from skating_rink.domain.rink import AngleSeries
from skating_rink.io.paths import resolve_within_base as _resolve_within_base
from skating_rink.viz.theme import DEFAULT_THEME, Theme

CHART_TITLE = "Mean rewards per angle"
X_LABEL = "simulation round"


def angle_label(angle: int) -> str:
    return f"{angle}\N{DEGREE SIGN}"


def y_label(num_skaters: int) -> str:
    return f"mean reward over all ({num_skaters}) skaters"


def render_angle_series(
    series: AngleSeries,
    output_path: Path,
    num_skaters: int,
    title: str = CHART_TITLE,
    base_dir: Path | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Plot one line per angle (x = round, y = mean payoff) and save it.

    When ``base_dir`` is given the output path must resolve inside it.
    """
    if not series:
        raise ValueError("series must contain at least one angle")
    if base_dir is None:
        output_path = Path(output_path).resolve()
    else:
        output_path = _resolve_within_base(Path(output_path), Path(base_dir).resolve())

    fig, ax = plt.subplots(figsize=theme.figsize)
    fig.patch.set_facecolor(theme.figure_background)
    ax.set_facecolor(theme.axes_background)
    cmap = matplotlib.colormaps[theme.colormap]
    angles = sorted(series)
    colors = cmap(np.linspace(0.0, 1.0, len(angles))) if len(angles) > 1 else [cmap(0)]

    for angle, color in zip(angles, colors, strict=True):
        points = np.asarray(series[angle], dtype=np.float64).reshape(-1, 2)
        ax.plot(
            points[:, 0],
            points[:, 1],
            color=color,
            linewidth=theme.line_width,
            label=angle_label(angle),
        )

    ax.set_title(title)
    ax.set_xlabel(X_LABEL)
    ax.set_ylabel(y_label(num_skaters))
    ax.grid(True, color=theme.grid_color, alpha=0.5)
    ax.legend(loc="upper left", bbox_to_anchor=(1.01, 1.0), frameon=False)
    fig.tight_layout()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=theme.dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path
