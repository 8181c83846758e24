"""Skater agent: epsilon-greedy direction choice and collision-aware moves.

Each skater owns its position and its angle -> ``ActionState`` table. A
move walks the chosen direction in ``path_fragments`` increments and is
abandoned as soon as any increment comes within the collision radius of
another skater, so a skater either covers the full step or stays put.
"""

from __future__ import annotations

import logging
from random import Random
from typing import TYPE_CHECKING

from skating_rink.domain.actions import (
    ActionState,
    CanonicalAction,
    new_action_states,
    order_actions,
)
from skating_rink.domain.errors import PlacementError
from skating_rink.domain.geometry import Position

if TYPE_CHECKING:
    from skating_rink.config.types import SimulationConfig
    from skating_rink.domain.rink import SkatingRink

logger = logging.getLogger(__name__)


class Skater:
    """A learning agent bound to one rink."""

    def __init__(
        self,
        skater_id: int,
        rink: SkatingRink,
        config: SimulationConfig,
        rng: Random,
    ) -> None:
        self.skater_id = skater_id
        self.rink = rink
        self.rng = rng
        self.exploration_rate = config.exploration_rate
        self.high_reward = config.high_reward
        self.low_reward = config.low_reward
        self.path_fragments = config.path_fragments
        self.round_counter = 0
        self.skipped_turns = 0
        self.action_states: dict[int, ActionState] = new_action_states(rink.catalog)
        self._order: list[CanonicalAction] = list(rink.catalog)
        self.position = self._initial_position(config.max_placement_attempts)

    def __repr__(self) -> str:
        return (
            f"Skater(id={self.skater_id}, x={self.position.x:.3f}, "
            f"y={self.position.y:.3f}, round={self.round_counter})"
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def _initial_position(self, max_attempts: int) -> Position:
        """Rejection-sample a start point clear of every registered skater."""
        for attempt in range(1, max_attempts + 1):
            candidate = Position(
                x=self.rng.random() * self.rink.width,
                y=self.rng.random() * self.rink.height,
            )
            if not self.rink.is_colliding(candidate, skater=self):
                logger.debug(
                    "Placed skater %d at (%.3f, %.3f) after %d attempt(s)",
                    self.skater_id,
                    candidate.x,
                    candidate.y,
                    attempt,
                )
                return candidate
        raise PlacementError(
            f"skater {self.skater_id}: no collision-free position after {max_attempts} attempts"
        )

    # ------------------------------------------------------------------
    # Policy
    # ------------------------------------------------------------------

    def select_order(self, round_number: int) -> list[CanonicalAction]:
        """Priority list of actions for ``round_number``.

        Draws exactly one uniform number per call. The returned order is
        kept as the tie-break order of the next exploitation.
        """
        draw = self.rng.random()
        self._order = order_actions(
            prior_order=self._order,
            payoffs=self.cumulated_payoffs(),
            round_number=round_number,
            draw=draw,
            exploration_rate=self.exploration_rate,
            rng=self.rng,
        )
        return list(self._order)

    # ------------------------------------------------------------------
    # Turn resolution
    # ------------------------------------------------------------------

    def move(self, round_number: int) -> CanonicalAction | None:
        """Play one round; return the committed action, or None if skipped.

        Blocked actions tried before the committed one earn ``low_reward``,
        the committed one earns ``high_reward``. Mean payoffs of all actions
        are refreshed against ``round_number`` whether or not the skater
        moved.
        """
        if round_number <= self.round_counter:
            raise ValueError(
                f"round {round_number} already played (last round {self.round_counter})"
            )
        self.round_counter = round_number
        committed: CanonicalAction | None = None
        for action in self.select_order(round_number):
            destination = self._attempt(action)
            state = self.action_states[action.angle]
            if destination is None:
                state.reward(self.low_reward)
                continue
            self.position = destination
            state.reward(self.high_reward)
            committed = action
            break

        if committed is None:
            self.skipped_turns += 1
            logger.info(
                "Skater %d found no collision-free move in round %d; skipping turn",
                self.skater_id,
                round_number,
            )

        for state in self.action_states.values():
            state.update_mean(round_number)
        return committed

    def _attempt(self, action: CanonicalAction) -> Position | None:
        """Walk the fragmented path; return the destination or None if blocked."""
        increment = action.distance / self.path_fragments
        current = self.position
        for _ in range(self.path_fragments):
            current = self.rink.advance(current, action.angle, increment)
            if self.rink.is_colliding(current, skater=self):
                return None
        return current

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def cumulated_payoffs(self) -> dict[int, int]:
        return {angle: state.cumulated_payoff for angle, state in self.action_states.items()}

    def cumulated_payoff(self, angle: int) -> int:
        return self.action_states[angle].cumulated_payoff

    def mean_payoff(self, angle: int) -> float:
        return self.action_states[angle].mean_payoff

    def payoff_vector(self) -> tuple[int, ...]:
        """Cumulated payoffs ordered by ascending angle."""
        return tuple(
            self.action_states[angle].cumulated_payoff for angle in sorted(self.action_states)
        )
