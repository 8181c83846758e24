"""Visualization theme presets for the payoff chart.

Themes are frozen dataclasses that group all styling constants together so
the renderer can swap palettes via the ``--theme`` CLI argument or
programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of chart style tokens."""

    colormap: str = "tab10"
    figure_background: str = "lightgray"
    axes_background: str = "white"
    grid_color: str = "gray"
    line_width: float = 1.5
    figsize: tuple[float, float] = (12.0, 6.0)
    dpi: int = 150


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

PAPER_THEME = Theme(
    colormap="viridis",
    figure_background="white",
    axes_background="white",
    grid_color="#E0E0E0",
    line_width=1.2,
    figsize=(7.0, 3.5),
    dpi=300,
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
