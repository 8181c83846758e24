"""Canonical action catalog and per-skater payoff bookkeeping.

The catalog is an immutable tuple shared by every skater on a rink. Payoff
counters live in ``ActionState`` objects that each skater creates for
itself through ``new_action_states``; nothing in this module hands the same
state object to two callers.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from random import Random

from skating_rink.config.constants import FULL_CIRCLE_DEGREES
from skating_rink.domain.errors import ConfigurationError


@dataclass(frozen=True)
class CanonicalAction:
    """One movement direction with its fixed per-round step distance."""

    angle: int
    distance: float


@dataclass
class ActionState:
    """Mutable payoff statistics of one action for one skater."""

    cumulated_payoff: int = 0
    mean_payoff: float = 0.0

    def reward(self, amount: int) -> None:
        self.cumulated_payoff += amount

    def update_mean(self, round_number: int) -> None:
        """Recompute the mean over elapsed rounds (rounds start at 1)."""
        if round_number < 1:
            raise ValueError("round_number must be >= 1")
        self.mean_payoff = self.cumulated_payoff / round_number


def build_catalog(base_angle: int, step_distance: float) -> tuple[CanonicalAction, ...]:
    """Build the angle-ascending catalog ``0, base_angle, 2*base_angle, ... < 360``.

    Raises :exc:`ConfigurationError` when ``base_angle`` does not divide 360,
    which would leave a non-uniform gap before wrapping back to 0.
    """
    if isinstance(base_angle, bool) or not isinstance(base_angle, int):
        raise ConfigurationError(f"base angle must be an integer, got {base_angle!r}")
    if base_angle < 1:
        raise ConfigurationError(f"base angle must be >= 1, got {base_angle}")
    if FULL_CIRCLE_DEGREES % base_angle != 0:
        raise ConfigurationError(
            f"{FULL_CIRCLE_DEGREES} degrees is not divisible by base angle {base_angle}"
        )
    if step_distance <= 0:
        raise ConfigurationError(f"step distance must be > 0, got {step_distance}")
    return tuple(
        CanonicalAction(angle=angle, distance=float(step_distance))
        for angle in range(0, FULL_CIRCLE_DEGREES, base_angle)
    )


def catalog_angles(catalog: Sequence[CanonicalAction]) -> tuple[int, ...]:
    return tuple(action.angle for action in catalog)


def new_action_states(catalog: Sequence[CanonicalAction]) -> dict[int, ActionState]:
    """Return a fresh angle -> state table for one skater."""
    return {action.angle: ActionState() for action in catalog}


def order_actions(
    prior_order: Sequence[CanonicalAction],
    payoffs: Mapping[int, int],
    round_number: int,
    draw: float,
    exploration_rate: float,
    rng: Random,
) -> list[CanonicalAction]:
    """Return this round's priority list of actions (epsilon-greedy).

    Explores (uniformly random permutation) in the first round or when
    ``draw < exploration_rate``; otherwise exploits by stably sorting
    ``prior_order`` by descending cumulated payoff, so ties keep their
    previous relative order. ``rng`` is only consumed when exploring.
    """
    ordered = list(prior_order)
    if round_number <= 1 or draw < exploration_rate:
        rng.shuffle(ordered)
        return ordered
    ordered.sort(key=lambda action: payoffs[action.angle], reverse=True)
    return ordered
