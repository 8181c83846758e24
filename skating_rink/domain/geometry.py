"""Toroidal coordinate arithmetic and the planar collision test."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Position:
    """Point on the rink, normalized into ``[0, width) x [0, height)``."""

    x: float
    y: float


def wrap(value: float, bound: float) -> float:
    """Fold ``value`` back into ``[0, bound)`` after leaving through an edge.

    One correction of ``bound`` covers any displacement shorter than the
    bound. Larger overshoots and negative values that round up to exactly
    ``bound`` fall through to a modulo.
    """
    if value >= bound:
        value -= bound
    elif value < 0:
        value += bound
    if not 0.0 <= value < bound:
        value %= bound
        if value >= bound:
            value = 0.0
    return value


def advance(
    position: Position, angle: float, distance: float, width: float, height: float
) -> Position:
    """Move ``distance`` along ``angle`` (degrees) on a ``width`` x ``height`` torus."""
    rad = math.radians(angle)
    return Position(
        x=wrap(position.x + math.cos(rad) * distance, width),
        y=wrap(position.y + math.sin(rad) * distance, height),
    )


def euclidean_distance(a: Position, b: Position) -> float:
    # Planar distance: the torus seam is ignored.
    return math.hypot(a.x - b.x, a.y - b.y)


def is_colliding(candidate: Position, others: Iterable[Position], radius: float) -> bool:
    """True if any of ``others`` lies strictly closer than ``radius``."""
    return any(euclidean_distance(candidate, other) < radius for other in others)
