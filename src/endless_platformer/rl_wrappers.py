"""Gymnasium wrappers for the endless platformer.

Wrapper stack order:
  1. DomainRandomizationWrapper - sample a new GameConfig per reset
  2. StateOnlyWrapper - extract the flat state vector from the Dict obs
"""

from typing import Callable, Optional

import gymnasium
from gymnasium import spaces

from .config import GameConfig
from .gym_env import EndlessPlatformerEnv


class StateOnlyWrapper(gymnasium.ObservationWrapper):
    """Extract the flat state vector from the Dict observation.

    The env returns {'rgb': (H,W,3), 'state': (21,)}. State-based agents only
    need the vector, so RGB is dropped.
    """

    def __init__(self, env: gymnasium.Env):
        super().__init__(env)
        assert isinstance(env.observation_space, spaces.Dict), (
            f"StateOnlyWrapper expects Dict obs space, got {type(env.observation_space)}"
        )
        assert "state" in env.observation_space.spaces, (
            "StateOnlyWrapper expects 'state' key in obs Dict"
        )
        self.observation_space = env.observation_space["state"]

    def observation(self, obs):
        return obs["state"]


class DomainRandomizationWrapper(gymnasium.Wrapper):
    """Swap in a freshly sampled GameConfig before every reset.

    Args:
        env: An EndlessPlatformerEnv (possibly already wrapped).
        sampler: Zero-arg callable returning a GameConfig. Defaults to
            GameConfig.sample_full.
    """

    def __init__(
        self,
        env: gymnasium.Env,
        sampler: Optional[Callable[[], GameConfig]] = None,
    ):
        super().__init__(env)
        self.sampler = sampler or GameConfig.sample_full
        self.current_config: Optional[GameConfig] = None

    def reset(self, **kwargs):
        config = self.sampler().check()
        self.current_config = config
        base = self.env.unwrapped
        base.config = config
        obs, info = self.env.reset(**kwargs)
        info["config"] = config.to_dict()
        return obs, info


def make_platformer_env(
    config: Optional[GameConfig] = None,
    state_only: bool = True,
    randomize: bool = False,
    sampler: Optional[Callable[[], GameConfig]] = None,
    **env_kwargs,
) -> gymnasium.Env:
    """Build the standard wrapper stack around EndlessPlatformerEnv."""
    env: gymnasium.Env = EndlessPlatformerEnv(config=config, **env_kwargs)
    if randomize:
        env = DomainRandomizationWrapper(env, sampler=sampler)
    if state_only:
        env = StateOnlyWrapper(env)
    return env
