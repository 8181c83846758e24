"""Tests for skating_rink.domain.skater module."""

from __future__ import annotations

import logging
import math
from random import Random

import pytest

from skating_rink.config.types import SimulationConfig
from skating_rink.domain.errors import PlacementError
from skating_rink.domain.geometry import Position, advance, euclidean_distance
from skating_rink.domain.rink import SkatingRink
from skating_rink.domain.skater import Skater
from skating_rink.simulation.engine import build_rink


def _config(**overrides: object) -> SimulationConfig:
    settings: dict[str, object] = {
        "num_skaters": 1,
        "width": 20.0,
        "height": 20.0,
        "collision_radius": 1.0,
        "base_angle": 90,
        "exploration_rate": 0.0,
    }
    settings.update(overrides)
    return SimulationConfig(**settings)  # type: ignore[arg-type]


def _add_skater(
    rink: SkatingRink,
    config: SimulationConfig,
    rng: Random,
    x: float | None = None,
    y: float | None = None,
) -> Skater:
    skater = Skater(skater_id=len(rink.skaters), rink=rink, config=config, rng=rng)
    rink.register(skater)
    if x is not None and y is not None:
        skater.position = Position(x, y)
    return skater


def _torus_delta(a: float, b: float, bound: float) -> float:
    return (a - b + bound / 2) % bound - bound / 2


class TestPlacement:
    def test_initial_position_within_bounds(self) -> None:
        config = _config(width=7.0, height=3.0)
        rink = SkatingRink.from_config(config)
        rng = Random(0)
        for _ in range(20):
            skater = Skater(skater_id=0, rink=rink, config=config, rng=rng)
            assert 0.0 <= skater.position.x < 7.0
            assert 0.0 <= skater.position.y < 3.0

    def test_population_starts_collision_free(self) -> None:
        config = _config(num_skaters=8, width=15.0, height=15.0, collision_radius=2.0)
        rink = build_rink(config, Random(3))
        for i, a in enumerate(rink.skaters):
            for b in rink.skaters[i + 1 :]:
                assert euclidean_distance(a.position, b.position) >= 2.0

    def test_impossible_placement_raises_after_attempt_cap(self) -> None:
        # A radius of 8 exceeds the 5x5 diagonal, so no second position can ever fit.
        config = _config(
            num_skaters=2, width=5.0, height=5.0, collision_radius=8.0, max_placement_attempts=50
        )
        rink = SkatingRink.from_config(config)
        rng = Random(0)
        _add_skater(rink, config, rng)
        with pytest.raises(PlacementError, match="50 attempts"):
            Skater(skater_id=1, rink=rink, config=config, rng=rng)
        assert len(rink.skaters) == 1

    def test_placement_ignores_unregistered_skaters(self) -> None:
        config = _config(width=5.0, height=5.0, collision_radius=8.0, max_placement_attempts=5)
        rink = SkatingRink.from_config(config)
        Skater(skater_id=0, rink=rink, config=config, rng=Random(0))
        Skater(skater_id=1, rink=rink, config=config, rng=Random(1))


class TestFirstRoundScenario:
    def test_single_skater_moves_one_step_and_earns_high_reward(self) -> None:
        config = _config(
            width=5.0, height=5.0, collision_radius=0.8, base_angle=45, exploration_rate=0.1
        )
        rink = SkatingRink.from_config(config)
        skater = _add_skater(rink, config, Random(21))
        start = Position(skater.position.x, skater.position.y)

        committed = skater.move(1)

        assert committed is not None
        payoffs = skater.cumulated_payoffs()
        assert payoffs[committed.angle] == config.high_reward
        assert sorted(payoffs.values()) == [0] * 7 + [config.high_reward]

        expected = advance(start, committed.angle, config.step_distance, 5.0, 5.0)
        assert abs(_torus_delta(skater.position.x, expected.x, 5.0)) < 1e-9
        assert abs(_torus_delta(skater.position.y, expected.y, 5.0)) < 1e-9
        dx = _torus_delta(skater.position.x, start.x, 5.0)
        dy = _torus_delta(skater.position.y, start.y, 5.0)
        assert math.hypot(dx, dy) == pytest.approx(config.step_distance)
        assert 0.0 <= skater.position.x < 5.0
        assert 0.0 <= skater.position.y < 5.0


class TestExploitation:
    def test_highest_payoff_action_is_tried_first(self) -> None:
        config = _config()
        rink = SkatingRink.from_config(config)
        skater = _add_skater(rink, config, Random(0), 10.0, 10.0)
        skater.action_states[180].cumulated_payoff = 30
        skater.action_states[270].cumulated_payoff = 20

        order = skater.select_order(2)

        assert [a.angle for a in order] == [180, 270, 0, 90]

    def test_blocked_best_action_falls_back_to_next_best(self) -> None:
        config = _config()
        rink = SkatingRink.from_config(config)
        rng = Random(0)
        mover = _add_skater(rink, config, rng, 10.0, 10.0)
        _add_skater(rink, config, rng, 10.0, 11.5)  # blocks the 90 degree path
        mover.action_states[90].cumulated_payoff = 50
        mover.action_states[0].cumulated_payoff = 40

        committed = mover.move(2)

        assert committed is not None and committed.angle == 0
        assert mover.cumulated_payoff(90) == 50 + config.low_reward
        assert mover.cumulated_payoff(0) == 40 + config.high_reward
        assert mover.cumulated_payoff(180) == 0
        assert mover.position.x == pytest.approx(11.0)
        assert mover.position.y == pytest.approx(10.0)

    def test_ties_follow_previous_round_order(self) -> None:
        config = _config()
        rink = SkatingRink.from_config(config)
        skater = _add_skater(rink, config, Random(9), 10.0, 10.0)
        first = [a.angle for a in skater.select_order(1)]
        second = [a.angle for a in skater.select_order(2)]
        assert second == first

    def test_mean_payoff_refreshed_for_untried_actions(self) -> None:
        config = _config()
        rink = SkatingRink.from_config(config)
        skater = _add_skater(rink, config, Random(0), 10.0, 10.0)
        skater.action_states[90].cumulated_payoff = 50
        skater.action_states[180].cumulated_payoff = 40

        committed = skater.move(2)

        assert committed is not None and committed.angle == 90
        assert skater.mean_payoff(90) == pytest.approx(30.0)
        assert skater.mean_payoff(180) == pytest.approx(20.0)
        assert skater.mean_payoff(0) == 0.0


class TestSkippedTurn:
    def _boxed_in(self) -> tuple[SimulationConfig, Skater]:
        config = _config(num_skaters=5, collision_radius=2.0)
        rink = SkatingRink.from_config(config)
        rng = Random(1)
        skater = _add_skater(rink, config, rng, 10.0, 10.0)
        for x, y in [(12.5, 10.0), (7.5, 10.0), (10.0, 12.5), (10.0, 7.5)]:
            _add_skater(rink, config, rng, x, y)
        return config, skater

    def test_position_unchanged_and_all_actions_get_low_reward(self) -> None:
        config, skater = self._boxed_in()

        committed = skater.move(1)

        assert committed is None
        assert skater.position == Position(10.0, 10.0)
        assert skater.skipped_turns == 1
        assert set(skater.cumulated_payoffs().values()) == {config.low_reward}
        for angle in skater.action_states:
            assert skater.mean_payoff(angle) == pytest.approx(config.low_reward / 1)

    def test_skip_is_logged_not_raised(self, caplog: pytest.LogCaptureFixture) -> None:
        _, skater = self._boxed_in()
        with caplog.at_level(logging.INFO, logger="skating_rink.domain.skater"):
            skater.move(1)
        assert "skipping turn" in caplog.text


class TestMoveInvariants:
    def test_payoff_statistics_and_separation_over_many_rounds(self) -> None:
        config = _config(
            num_skaters=6,
            width=10.0,
            height=10.0,
            collision_radius=1.5,
            base_angle=45,
            exploration_rate=0.2,
        )
        rink = build_rink(config, Random(4))
        n_actions = len(rink.catalog)
        previous = {s.skater_id: s.cumulated_payoffs() for s in rink.skaters}

        for round_number in range(1, 31):
            for skater in rink.skaters:
                before = previous[skater.skater_id]
                committed = skater.move(round_number)
                after = skater.cumulated_payoffs()

                if committed is not None:
                    for other in rink.other_skaters(skater):
                        assert euclidean_distance(skater.position, other.position) >= 1.5
                    blocked = sum(after.values()) - sum(before.values()) - config.high_reward
                    assert 0 <= blocked < n_actions
                else:
                    assert sum(after.values()) - sum(before.values()) == n_actions

                for angle, state in skater.action_states.items():
                    assert state.cumulated_payoff >= before[angle]
                    assert state.mean_payoff == pytest.approx(
                        state.cumulated_payoff / round_number
                    )
                assert 0.0 <= skater.position.x < 10.0
                assert 0.0 <= skater.position.y < 10.0
                previous[skater.skater_id] = after

    def test_round_cannot_be_replayed(self) -> None:
        config = _config()
        rink = SkatingRink.from_config(config)
        skater = _add_skater(rink, config, Random(0))
        skater.move(1)
        with pytest.raises(ValueError, match="already played"):
            skater.move(1)

    def test_action_states_not_shared_between_skaters(self) -> None:
        config = _config(num_skaters=2)
        rink = build_rink(config, Random(0))
        a, b = rink.skaters
        assert a.action_states is not b.action_states
        for angle in a.action_states:
            assert a.action_states[angle] is not b.action_states[angle]
        a.action_states[0].reward(10)
        assert b.cumulated_payoff(0) == 0

    def test_payoff_vector_is_angle_ascending(self) -> None:
        config = _config()
        rink = SkatingRink.from_config(config)
        skater = _add_skater(rink, config, Random(0))
        skater.action_states[270].cumulated_payoff = 4
        skater.action_states[0].cumulated_payoff = 1
        assert skater.payoff_vector() == (1, 0, 0, 4)


class TestCollisionQueries:
    def test_moves_consult_the_rink_excluding_self(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config = _config(path_fragments=4)
        rink = SkatingRink.from_config(config)
        mover = _add_skater(rink, config, Random(0), 10.0, 10.0)
        calls: list[object] = []
        original = rink.is_colliding

        def spy(position: Position, skater: Skater | None = None) -> bool:
            calls.append(skater)
            return original(position, skater=skater)

        monkeypatch.setattr(rink, "is_colliding", spy)
        mover.move(1)

        assert calls == [mover] * 4
