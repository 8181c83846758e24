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


def test_base_angle_divides_full_circle() -> None:
    assert isinstance(BASE_ANGLE, int) and BASE_ANGLE > 0
    assert FULL_CIRCLE_DEGREES % BASE_ANGLE == 0


def test_rink_dimensions_are_positive() -> None:
    assert RINK_WIDTH > 0
    assert RINK_HEIGHT > 0


def test_increment_fits_inside_rink() -> None:
    assert isinstance(PATH_FRAGMENTS, int) and PATH_FRAGMENTS > 0
    assert STEP_DISTANCE / PATH_FRAGMENTS < min(RINK_WIDTH, RINK_HEIGHT)


def test_exploration_rate_is_probability() -> None:
    assert 0.0 <= EXPLORATION_RATE <= 1.0


def test_high_reward_exceeds_low_reward() -> None:
    assert isinstance(HIGH_REWARD, int) and isinstance(LOW_REWARD, int)
    assert HIGH_REWARD > LOW_REWARD >= 0


def test_population_and_rounds_are_positive() -> None:
    assert isinstance(NUM_SKATERS, int) and NUM_SKATERS > 0
    assert isinstance(NUM_ROUNDS, int) and NUM_ROUNDS > 0


def test_collision_radius_and_attempt_cap_are_positive() -> None:
    assert COLLISION_RADIUS > 0
    assert isinstance(MAX_PLACEMENT_ATTEMPTS, int) and MAX_PLACEMENT_ATTEMPTS > 0
