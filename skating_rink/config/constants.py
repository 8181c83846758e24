"""Centralized defaults for skating-rink simulations.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

FULL_CIRCLE_DEGREES = 360
"""Angular span covered by the canonical action catalog."""

NUM_SKATERS = 3
"""Default number of skaters per simulation."""

BASE_ANGLE = 60
"""Default angular spacing between canonical actions (6 actions)."""

STEP_DISTANCE = 1.0
"""Distance covered by one successful move."""

PATH_FRAGMENTS = 10
"""Number of increments a move is split into for collision braking."""

EXPLORATION_RATE = 0.1
"""Probability of exploring (random action order) instead of exploiting."""

NUM_ROUNDS = 200
"""Default number of simulation rounds."""

RINK_WIDTH = 15.0
"""Default torus width."""

RINK_HEIGHT = 15.0
"""Default torus height."""

COLLISION_RADIUS = 3.0
"""Minimum Euclidean distance that must separate two skaters."""

HIGH_REWARD = 10
"""Payoff credited to the action that produced a collision-free move."""

LOW_REWARD = 1
"""Payoff credited to each action that was tried and blocked."""

MAX_PLACEMENT_ATTEMPTS = 10_000
"""Safety cap on rejection-sampling draws for one initial position."""
