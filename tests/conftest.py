"""Pytest configuration and shared fixtures."""

import os

# Ensure headless pygame for all tests
os.environ['SDL_VIDEODRIVER'] = 'dummy'

import pytest

from endless_platformer.config import GameConfig
from endless_platformer.world import initial_world


class ScriptedRng:
    """Deterministic stand-in for random.Random.

    Hands out the scripted values in order. `random()` returns the value as-is;
    `uniform(a, b)` maps it onto [a, b]. Running out raises IndexError, so a
    test fails loudly if code draws more than expected.
    """

    def __init__(self, values=()):
        self.values = list(values)
        self.draws = 0

    def _next(self) -> float:
        value = self.values.pop(0)
        self.draws += 1
        return value

    def random(self) -> float:
        return self._next()

    def uniform(self, a: float, b: float) -> float:
        return a + self._next() * (b - a)


@pytest.fixture
def game_config():
    """Default game configuration (400x600 screen)."""
    return GameConfig()


@pytest.fixture
def world(game_config):
    """Freshly reset world."""
    return initial_world(game_config)


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRng instances."""
    return ScriptedRng
