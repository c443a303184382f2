"""Tests for the Gymnasium environment wrapper."""

import os
import numpy as np
import pytest

# Headless rendering
os.environ['SDL_VIDEODRIVER'] = 'dummy'

from endless_platformer.gym_env import (
    EndlessPlatformerEnv,
    STATE_DIM,
    NUM_TRACKED_PLATFORMS,
    PLAYER_FEATURES,
    PLATFORM_FEATURES,
)
from endless_platformer.config import GameConfig, PlatformConfig
from endless_platformer.controls import Direction
from endless_platformer.entities import PlatformType


@pytest.fixture
def env():
    e = EndlessPlatformerEnv()
    yield e
    e.close()


class TestEnvCreation:
    def test_create_default(self, env):
        assert env.observation_space is not None
        assert env.action_space.n == 3

    def test_create_with_config(self):
        config = GameConfig(platforms=PlatformConfig(hazard_probability=0.0))
        env = EndlessPlatformerEnv(config=config)
        assert env.config.platforms.hazard_probability == 0.0
        env.close()

    def test_invalid_config_rejected(self):
        with pytest.raises(ValueError):
            EndlessPlatformerEnv(config=GameConfig(screen_width=-1))

    def test_custom_resolution(self):
        env = EndlessPlatformerEnv(obs_resolution=(64, 48), render_mode="rgb_array")
        obs, _ = env.reset(seed=42)
        assert obs["rgb"].shape == (64, 48, 3)
        env.close()


class TestEnvReset:
    def test_reset_returns_obs_and_info(self, env):
        obs, info = env.reset(seed=42)
        assert "rgb" in obs
        assert "state" in obs
        assert info["score"] == 0
        assert info["episode_steps"] == 0
        assert info["game_over"] is False

    def test_obs_in_observation_space(self, env):
        obs, _ = env.reset(seed=42)
        assert obs["state"].shape == (STATE_DIM,)
        assert obs["state"].dtype == np.float32
        assert env.observation_space.contains(obs)

    def test_initial_state_vector(self, env):
        obs, _ = env.reset(seed=42)
        state = obs["state"]
        assert state[0] == 200.0
        assert state[1] == 100.0
        assert state[2] == 0.0
        assert state[4] == pytest.approx(1.0)
        assert state[5] == pytest.approx(100.0)
        assert state[6] == 0.0
        assert state[7] == 0.0
        # Seed platform tracked first
        assert state[9] == 1.0
        assert state[10] == 150.0
        assert state[11] == 500.0
        assert state[12] == 0.0
        # Remaining slots empty
        assert state[13] == 0.0

    def test_platform_slot_offsets(self, env):
        env.reset(seed=0)
        world = env.session.world
        world.platforms[0].kind = PlatformType.HAZARD
        state = env._get_state_vector()
        assert STATE_DIM == PLAYER_FEATURES + NUM_TRACKED_PLATFORMS * PLATFORM_FEATURES
        base = PLAYER_FEATURES
        assert list(state[base:base + PLATFORM_FEATURES]) == [1.0, 150.0, 500.0, 1.0]
        assert state[base + PLATFORM_FEATURES] == 0.0

    def test_reset_with_seed_reproducible(self, env):
        env.reset(seed=42)
        states_a = [env.step(Direction.RIGHT)[0]["state"] for _ in range(200)]
        env.reset(seed=42)
        states_b = [env.step(Direction.RIGHT)[0]["state"] for _ in range(200)]
        for a, b in zip(states_a, states_b):
            np.testing.assert_array_equal(a, b)

    def test_different_seeds_differ(self, env):
        _, info_a = env.reset(seed=1)
        _, info_b = env.reset(seed=2)
        assert info_a["level_seed"] != info_b["level_seed"]


class TestEnvStep:
    def test_step_returns_five_values(self, env):
        env.reset(seed=0)
        result = env.step(0)
        assert len(result) == 5
        obs, reward, terminated, truncated, info = result
        assert isinstance(reward, float)
        assert "reward_signals" in info

    def test_accepts_numpy_action(self, env):
        env.reset(seed=0)
        env.step(np.array(2))
        assert env.session.world.player.x == 203

    def test_invalid_action(self, env):
        env.reset(seed=0)
        with pytest.raises(ValueError):
            env.step(7)

    def test_step_before_reset(self, env):
        with pytest.raises(AssertionError):
            env.step(0)

    def test_truncation(self):
        env = EndlessPlatformerEnv(max_episode_steps=10)
        env.reset(seed=0)
        for _ in range(9):
            _, _, _, truncated, _ = env.step(0)
            assert not truncated
        _, _, _, truncated, _ = env.step(0)
        assert truncated
        env.close()

    def test_idle_episode_terminates(self, env):
        env.reset(seed=3)
        total_score_signal = 0.0
        death_signals = 0.0
        terminated = False
        for _ in range(3000):
            _, _, terminated, _, info = env.step(int(Direction.NONE))
            total_score_signal += info["reward_signals"]["score"]
            death_signals += info["reward_signals"]["death"]
            if terminated:
                break
        assert terminated
        assert info["game_over"]
        assert info["death_cause"] == "ceiling"
        assert death_signals == 1.0
        assert total_score_signal == info["score"]

    def test_reward_weights(self):
        env = EndlessPlatformerEnv(reward_weights={"step": 2.0})
        env.reset(seed=0)
        _, reward, _, _, _ = env.step(0)
        assert reward == pytest.approx(2.0)
        env.close()

    def test_hazard_contact_terminates(self, env):
        env.reset(seed=0)
        env.session.world.platforms[0].kind = PlatformType.HAZARD
        terminated = False
        for _ in range(200):
            _, reward, terminated, _, info = env.step(0)
            if terminated:
                break
        assert terminated
        assert info["death_cause"] == "hazard"
        assert info["reward_signals"]["death"] == 1.0
        assert reward < 0


class TestEnvRender:
    def test_rgb_array(self):
        env = EndlessPlatformerEnv(render_mode="rgb_array", obs_resolution=(96, 64))
        obs, _ = env.reset(seed=0)
        frame = env.render()
        assert frame.shape == (96, 64, 3)
        assert frame.dtype == np.uint8
        # Something other than background got drawn
        assert len(np.unique(frame.reshape(-1, 3), axis=0)) > 1
        assert obs["rgb"].any()
        env.close()

    def test_no_frames_without_render_mode(self, env):
        obs, _ = env.reset(seed=0)
        assert not obs["rgb"].any()
        assert env.render() is None
