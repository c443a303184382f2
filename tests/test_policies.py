"""Tests for scripted policies."""

import os
import numpy as np
import pytest

os.environ['SDL_VIDEODRIVER'] = 'dummy'

from endless_platformer.controls import Direction
from endless_platformer.entities import Platform, PlatformType
from endless_platformer.gym_env import EndlessPlatformerEnv
from endless_platformer.policies import IdlePolicy, RandomPolicy, SeekerPolicy, POLICIES


@pytest.fixture
def env():
    e = EndlessPlatformerEnv(max_episode_steps=3000)
    yield e
    e.close()


@pytest.fixture
def obs(env):
    o, _ = env.reset(seed=42)
    return o


class TestIdlePolicy:
    def test_never_moves(self, obs):
        policy = IdlePolicy()
        assert all(policy(obs) == Direction.NONE for _ in range(5))


class TestRandomPolicy:
    def test_returns_valid_action(self, env, obs):
        policy = RandomPolicy(rng=np.random.default_rng(0))
        for _ in range(20):
            assert env.action_space.contains(policy(obs))

    def test_varies_actions(self, obs):
        policy = RandomPolicy(rng=np.random.default_rng(0))
        assert len({policy(obs) for _ in range(50)}) > 1


class TestSeekerPolicy:
    def test_steers_to_platform_centre(self, env, obs):
        policy = SeekerPolicy(env.config)
        # Player centre 210, seed platform centre 200
        assert policy(obs) == Direction.LEFT

    def test_accepts_flat_state(self, env, obs):
        policy = SeekerPolicy(env.config)
        assert policy(obs["state"]) == policy(obs)

    def test_holds_when_centred(self, env):
        env.reset(seed=0)
        env.session.world.player.x = 190
        obs = env._get_obs()
        assert SeekerPolicy(env.config)(obs) == Direction.NONE

    def test_leaves_hazard_below(self, env):
        env.reset(seed=0)
        world = env.session.world
        world.platforms[0].kind = PlatformType.HAZARD
        world.player.x = 220  # right of the hazard's centre
        obs = env._get_obs()
        assert SeekerPolicy(env.config)(obs) == Direction.RIGHT

    def test_skips_hazard_target(self, env):
        env.reset(seed=0)
        world = env.session.world
        world.player.x = 0
        world.platforms = [
            Platform(200, 300, 100, 15, PlatformType.HAZARD),
            Platform(0, 400, 100, 15),
        ]
        obs = env._get_obs()
        # Hazard not under the player, so head for the safe platform (centre 50)
        assert SeekerPolicy(env.config)(obs) == Direction.RIGHT

    def test_ignores_platform_underfoot(self, env):
        env.reset(seed=0)
        world = env.session.world
        world.player.x = 240
        world.player.grounded = True
        world.player.y = world.platforms[0].y - world.player.height
        world.platforms.append(Platform(300, 560, 100, 15))
        obs = env._get_obs()
        # Standing on the seed platform, so aim at the one further down
        assert SeekerPolicy(env.config)(obs) == Direction.RIGHT

    def test_full_episode_valid_actions(self, env):
        policy = SeekerPolicy(env.config)
        obs, _ = env.reset(seed=5)
        for _ in range(3000):
            action = policy(obs)
            assert env.action_space.contains(action)
            obs, _, terminated, truncated, _ = env.step(action)
            if terminated or truncated:
                break


def test_registry():
    assert set(POLICIES) == {"idle", "random", "seeker"}
