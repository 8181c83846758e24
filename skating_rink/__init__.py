"""Skating-rink simulation of epsilon-greedy skaters on a torus."""

__version__ = "0.1.0"
