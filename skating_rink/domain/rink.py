"""Rectangular torus hosting skaters, with the round loop and aggregation.

Skaters act in registration order. Within a round, a skater sees the
already-updated positions of those who moved before it and the previous
round's positions of those still to move.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from skating_rink.config.constants import BASE_ANGLE, STEP_DISTANCE
from skating_rink.domain.actions import CanonicalAction, build_catalog, catalog_angles
from skating_rink.domain.geometry import Position, advance, is_colliding

if TYPE_CHECKING:
    from skating_rink.config.types import SimulationConfig
    from skating_rink.domain.skater import Skater

logger = logging.getLogger(__name__)

AngleSeries = dict[int, list[tuple[int, float]]]
"""angle -> ordered ``(round, population mean payoff)`` points."""


@dataclass(frozen=True)
class PayoffRow:
    """Cumulated payoffs of one skater right after its move in one round."""

    round: int
    skater_index: int
    payoffs: tuple[int, ...]  # ascending angle order


@dataclass
class SkatingRink:
    """Toroidal rink owning the registered skaters and their aggregate history."""

    width: float
    height: float
    collision_radius: float
    catalog: tuple[CanonicalAction, ...]
    skaters: list[Skater] = field(default_factory=list)
    rounds_played: int = 0
    _series: AngleSeries = field(default_factory=dict, repr=False)
    _payoff_log: list[PayoffRow] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("rink dimensions must be > 0")
        if self.collision_radius <= 0:
            raise ValueError("collision_radius must be > 0")
        if not self.catalog:
            raise ValueError("catalog must not be empty")
        self.catalog = tuple(self.catalog)
        for angle in catalog_angles(self.catalog):
            self._series.setdefault(angle, [])

    @classmethod
    def create(
        cls,
        width: float,
        height: float,
        collision_radius: float,
        base_angle: int = BASE_ANGLE,
        step_distance: float = STEP_DISTANCE,
    ) -> SkatingRink:
        """Build an empty rink with a freshly generated action catalog."""
        return cls(
            width=width,
            height=height,
            collision_radius=collision_radius,
            catalog=build_catalog(base_angle, step_distance),
        )

    @classmethod
    def from_config(cls, config: SimulationConfig) -> SkatingRink:
        return cls.create(
            width=config.width,
            height=config.height,
            collision_radius=config.collision_radius,
            base_angle=config.base_angle,
            step_distance=config.step_distance,
        )

    @property
    def angles(self) -> tuple[int, ...]:
        return catalog_angles(self.catalog)

    @property
    def skipped_turns(self) -> int:
        return sum(skater.skipped_turns for skater in self.skaters)

    # ------------------------------------------------------------------
    # Registration and geometry
    # ------------------------------------------------------------------

    def register(self, skater: Skater) -> None:
        """Append ``skater``; registration order is activation order."""
        if skater.rink is not self:
            raise ValueError("skater belongs to a different rink")
        if any(existing is skater for existing in self.skaters):
            raise ValueError(f"skater {skater.skater_id} is already registered")
        self.skaters.append(skater)

    def other_skaters(self, skater: Skater) -> list[Skater]:
        return [other for other in self.skaters if other is not skater]

    def advance(self, position: Position, angle: float, distance: float) -> Position:
        return advance(position, angle, distance, self.width, self.height)

    def is_colliding(self, position: Position, skater: Skater | None = None) -> bool:
        """Collision test of ``position`` against every skater except ``skater``."""
        others = (other.position for other in self.skaters if other is not skater)
        return is_colliding(position, others, self.collision_radius)

    # ------------------------------------------------------------------
    # Round loop
    # ------------------------------------------------------------------

    def run(self, rounds: int) -> None:
        """Play ``rounds`` further rounds, continuing the round numbering."""
        if rounds < 1:
            raise ValueError("rounds must be >= 1")
        if not self.skaters:
            raise ValueError("no skaters registered")
        first = self.rounds_played + 1
        for round_number in range(first, first + rounds):
            for index, skater in enumerate(self.skaters):
                skater.move(round_number)
                self._payoff_log.append(
                    PayoffRow(
                        round=round_number,
                        skater_index=index,
                        payoffs=skater.payoff_vector(),
                    )
                )
            self._aggregate(round_number)
            self.rounds_played = round_number
        logger.debug("Rink finished rounds %d-%d", first, self.rounds_played)

    def _aggregate(self, round_number: int) -> None:
        n_skaters = len(self.skaters)
        for angle, points in self._series.items():
            total = sum(skater.mean_payoff(angle) for skater in self.skaters)
            points.append((round_number, total / n_skaters))

    # ------------------------------------------------------------------
    # Exposed statistics
    # ------------------------------------------------------------------

    def angle_series(self) -> AngleSeries:
        """Per-angle population mean payoff series, angles ascending."""
        return {angle: list(self._series[angle]) for angle in sorted(self._series)}

    def payoff_rows(self) -> list[PayoffRow]:
        return list(self._payoff_log)
