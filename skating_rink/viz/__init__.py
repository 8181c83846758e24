"""Charting of simulation results."""

from skating_rink.viz.render import render_angle_series
from skating_rink.viz.theme import DEFAULT_THEME, PAPER_THEME, Theme, get_theme

__all__ = ["DEFAULT_THEME", "PAPER_THEME", "Theme", "get_theme", "render_angle_series"]
