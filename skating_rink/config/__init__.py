"""Configuration layer: constants and typed config dataclasses."""

from skating_rink.config.constants import (
    BASE_ANGLE,
    COLLISION_RADIUS,
    EXPLORATION_RATE,
    FULL_CIRCLE_DEGREES,
    HIGH_REWARD,
    LOW_REWARD,
    MAX_PLACEMENT_ATTEMPTS,
    NUM_ROUNDS,
    NUM_SKATERS,
    PATH_FRAGMENTS,
    RINK_HEIGHT,
    RINK_WIDTH,
    STEP_DISTANCE,
)
from skating_rink.config.types import SimulationConfig, SimulationResult

__all__ = [
    "BASE_ANGLE",
    "COLLISION_RADIUS",
    "EXPLORATION_RATE",
    "FULL_CIRCLE_DEGREES",
    "HIGH_REWARD",
    "LOW_REWARD",
    "MAX_PLACEMENT_ATTEMPTS",
    "NUM_ROUNDS",
    "NUM_SKATERS",
    "PATH_FRAGMENTS",
    "RINK_HEIGHT",
    "RINK_WIDTH",
    "STEP_DISTANCE",
    "SimulationConfig",
    "SimulationResult",
]
