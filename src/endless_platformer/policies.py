"""Scripted policies for automated data collection.

Each policy takes an observation (Dict with 'state', or the flat state vector
from StateOnlyWrapper) and returns a Direction action id.
"""

from typing import Optional

import numpy as np

from .config import GameConfig
from .controls import Direction
from .gym_env import NUM_TRACKED_PLATFORMS, PLAYER_FEATURES, PLATFORM_FEATURES


def _state_of(obs) -> np.ndarray:
    if isinstance(obs, dict):
        return obs["state"]
    return obs


class BasePolicy:
    """Base class for scripted policies."""

    name: str = "base"

    def __call__(self, obs) -> int:
        return self.act(obs)

    def act(self, obs) -> int:
        raise NotImplementedError

    def reset(self):
        """Called at the start of each episode."""
        pass


class IdlePolicy(BasePolicy):
    """Never moves. Rides the seed platform until it scrolls off the top."""

    name = "idle"

    def act(self, obs):
        return int(Direction.NONE)


class RandomPolicy(BasePolicy):
    """Uniform random direction each step."""

    name = "random"

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng or np.random.default_rng()

    def act(self, obs):
        return int(self.rng.integers(0, len(Direction)))


class SeekerPolicy(BasePolicy):
    """Steers toward the nearest safe platform below the player.

    Hazards are skipped as targets, as is the platform the player is standing
    on, so a grounded player walks off toward the next one. If the platform
    directly under a falling player is a hazard, it steers off whichever edge
    is closer.
    """

    name = "seeker"

    def __init__(self, config: Optional[GameConfig] = None, margin: float = 4.0):
        self.config = config or GameConfig()
        self.margin = margin

    def act(self, obs):
        state = _state_of(obs)
        player_x = float(state[0])
        pw = self.config.player.width
        plat_w = self.config.platforms.width
        center = player_x + pw / 2
        grounded = state[3] > 0.5

        target = None
        for i in range(NUM_TRACKED_PLATFORMS):
            base = PLAYER_FEATURES + i * PLATFORM_FEATURES
            if state[base] < 0.5:
                break
            if grounded and i == 0:
                continue
            px = float(state[base + 1])
            overlaps = player_x + pw > px and player_x < px + plat_w
            if state[base + 3] > 0.5:
                if i == 0 and overlaps:
                    # Hazard directly below: leave by the nearer side
                    left_gap = center - px
                    right_gap = px + plat_w - center
                    return int(Direction.LEFT if left_gap < right_gap else Direction.RIGHT)
                continue
            target = px + plat_w / 2
            break

        if target is None or abs(target - center) <= self.margin:
            return int(Direction.NONE)
        return int(Direction.RIGHT if target > center else Direction.LEFT)


POLICIES = {
    "idle": IdlePolicy,
    "random": RandomPolicy,
    "seeker": SeekerPolicy,
}
