"""Exceptions raised by the simulation core."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Catalog parameters cannot produce a uniform set of canonical actions."""


class PlacementError(RuntimeError):
    """No collision-free initial position was found within the attempt budget."""
