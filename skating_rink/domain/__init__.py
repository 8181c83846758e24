"""Domain layer: action catalog, geometry, skaters, and the rink."""

from skating_rink.domain.actions import (
    ActionState,
    CanonicalAction,
    build_catalog,
    catalog_angles,
    new_action_states,
    order_actions,
)
from skating_rink.domain.errors import ConfigurationError, PlacementError
from skating_rink.domain.geometry import Position, advance, euclidean_distance, is_colliding, wrap
from skating_rink.domain.rink import AngleSeries, PayoffRow, SkatingRink
from skating_rink.domain.skater import Skater

__all__ = [
    "ActionState",
    "AngleSeries",
    "CanonicalAction",
    "ConfigurationError",
    "PayoffRow",
    "PlacementError",
    "Position",
    "Skater",
    "SkatingRink",
    "advance",
    "build_catalog",
    "catalog_angles",
    "euclidean_distance",
    "is_colliding",
    "new_action_states",
    "order_actions",
    "wrap",
]
