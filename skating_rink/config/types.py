"""Configuration dataclasses for skating-rink simulations.

The frozen ``SimulationConfig`` carries every scalar the core consumes.
Values are validated once here so the domain layer can treat them as
already-checked inputs; the only check the domain performs itself is
the base-angle divisibility test in ``build_catalog``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from skating_rink.config.constants import (
    BASE_ANGLE,
    COLLISION_RADIUS,
    EXPLORATION_RATE,
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

if TYPE_CHECKING:
    from skating_rink.domain.rink import PayoffRow

__all__ = [
    "SimulationConfig",
    "SimulationResult",
]

# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationConfig:
    """Runtime parameters for one skating-rink run."""

    num_skaters: int = NUM_SKATERS
    base_angle: int = BASE_ANGLE
    """Spacing in degrees between canonical actions; must divide 360."""
    step_distance: float = STEP_DISTANCE
    path_fragments: int = PATH_FRAGMENTS
    """Increments per move; each one is collision-tested."""
    exploration_rate: float = EXPLORATION_RATE
    """Probability of exploring; 1 - exploration_rate is the probability of exploiting."""
    rounds: int = NUM_ROUNDS
    width: float = RINK_WIDTH
    height: float = RINK_HEIGHT
    collision_radius: float = COLLISION_RADIUS
    high_reward: int = HIGH_REWARD
    low_reward: int = LOW_REWARD
    max_placement_attempts: int = MAX_PLACEMENT_ATTEMPTS
    seed: int = 0

    def __post_init__(self) -> None:
        if self.num_skaters < 1:
            raise ValueError("num_skaters must be >= 1")
        if self.base_angle < 1:
            raise ValueError("base_angle must be >= 1")
        if self.step_distance <= 0:
            raise ValueError("step_distance must be > 0")
        if self.path_fragments < 1:
            raise ValueError("path_fragments must be >= 1")
        if not 0.0 <= self.exploration_rate <= 1.0:
            raise ValueError("exploration_rate must be in [0.0, 1.0]")
        if self.rounds < 1:
            raise ValueError("rounds must be >= 1")
        if self.width <= 0 or self.height <= 0:
            raise ValueError("rink dimensions must be > 0")
        if self.collision_radius <= 0:
            raise ValueError("collision_radius must be > 0")
        if self.high_reward < 0 or self.low_reward < 0:
            raise ValueError("rewards must be >= 0")
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be >= 1")
        # A single wrap correction is exact only for increments shorter than the rink.
        if self.increment_distance >= min(self.width, self.height):
            raise ValueError("step_distance / path_fragments must be smaller than the rink")

    @property
    def increment_distance(self) -> float:
        """Length of one collision-tested path increment."""
        return self.step_distance / self.path_fragments


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationResult:
    """Top-level result for one simulated run."""

    run_id: str
    rounds_played: int
    num_skaters: int
    skipped_turns: int
    angles: tuple[int, ...]
    angle_series: dict[int, list[tuple[int, float]]] = field(repr=False)
    payoff_rows: list[PayoffRow] = field(repr=False)
