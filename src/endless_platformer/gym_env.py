"""Gymnasium environment wrapper for the endless platformer.

Provides standard Gym API for RL training and data collection.
Observations include both RGB frames and a structured state vector.
"""

import random
from typing import Optional, Dict, Tuple

import numpy as np
import gymnasium
from gymnasium import spaces

import pygame

from .config import GameConfig
from .controls import Direction
from .render import draw_world, draw_hud
from .session import GameSession


# Platforms reported in the state vector (nearest below the player first)
NUM_TRACKED_PLATFORMS = 3
PLAYER_FEATURES = 9
PLATFORM_FEATURES = 4
STATE_DIM = PLAYER_FEATURES + NUM_TRACKED_PLATFORMS * PLATFORM_FEATURES


class EndlessPlatformerEnv(gymnasium.Env):
    """Gymnasium wrapper for the endless platformer.

    Observation space (Dict):
        'rgb': uint8 array of shape (H, W, 3) - rendered frame
        'state': float32 array of shape (21,) - state vector containing:
            [0-1] player position (x, y)
            [2]   player vertical velocity dy
            [3]   player grounded (0/1)
            [4]   scroll speed
            [5]   max vertical gap
            [6]   score
            [7]   game over (0/1)
            [8]   episode progress (steps / max_steps)
            [9-20] 3 tracked platforms x (present, x, y, is_hazard)

    Action space: Discrete(3) - Direction.NONE / LEFT / RIGHT

    Reward = weighted sum of raw signals (stored in info['reward_signals']):
        score: points gained this step
        death: 1.0 on the step the game ends
        step:  1.0 every step
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_mode: Optional[str] = None,
        obs_resolution: Tuple[int, int] = (128, 96),
        max_episode_steps: int = 5000,
        reward_weights: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        self.config = (config or GameConfig()).check()
        self.render_mode = render_mode
        self.obs_height, self.obs_width = obs_resolution
        self.max_episode_steps = max_episode_steps

        self.reward_weights = reward_weights or {
            "score": 1.0,
            "death": -10.0,
            "step": 0.01,
        }

        self.action_space = spaces.Discrete(len(Direction))

        self.observation_space = spaces.Dict({
            "rgb": spaces.Box(
                low=0, high=255,
                shape=(self.obs_height, self.obs_width, 3),
                dtype=np.uint8,
            ),
            "state": spaces.Box(
                low=-np.inf, high=np.inf,
                shape=(STATE_DIM,),
                dtype=np.float32,
            ),
        })

        # Initialize pygame (caller sets SDL_VIDEODRIVER for headless)
        if not pygame.get_init():
            pygame.init()

        # Offscreen render surface (native resolution)
        self._surface = pygame.Surface(
            (self.config.screen_width, self.config.screen_height)
        )

        self._display = None
        if render_mode == "human":
            self._display = pygame.display.set_mode(
                (self.config.screen_width, self.config.screen_height)
            )
            pygame.display.set_caption("EndlessPlatformerEnv")

        # Populated on reset
        self._session: Optional[GameSession] = None
        self._episode_steps = 0
        self._prev_score = 0
        self._level_seed: int = 0

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)

        level_seed = int(self.np_random.integers(0, 2**31))
        self._session = GameSession(self.config, rng=random.Random(level_seed))
        self._level_seed = level_seed

        self._episode_steps = 0
        self._prev_score = 0

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def step(self, action):
        assert self._session is not None, "Must call reset() before step()"

        direction = self._parse_action(action)
        was_over = self._session.game_over
        self._session.tick(direction)
        self._episode_steps += 1

        reward_signals = self._compute_rewards(was_over)
        reward = sum(
            self.reward_weights.get(k, 0.0) * v
            for k, v in reward_signals.items()
        )

        terminated = self._session.game_over
        truncated = self._episode_steps >= self.max_episode_steps

        obs = self._get_obs()
        info = self._get_info()
        info["reward_signals"] = reward_signals

        if self.render_mode == "human":
            self.render()

        return obs, float(reward), terminated, truncated, info

    # ------------------------------------------------------------------
    # Action handling
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_action(action) -> Direction:
        if isinstance(action, np.ndarray):
            action = action.item()
        try:
            return Direction(int(action))
        except ValueError:
            raise ValueError(f"Invalid action: {action!r} (expected 0, 1 or 2)") from None

    # ------------------------------------------------------------------
    # Reward computation
    # ------------------------------------------------------------------

    def _compute_rewards(self, was_over: bool):
        world = self._session.world
        signals = {
            "score": float(world.score - self._prev_score),
            "death": 1.0 if world.game_over and not was_over else 0.0,
            "step": 1.0,
        }
        self._prev_score = world.score
        return signals

    # ------------------------------------------------------------------
    # Observations
    # ------------------------------------------------------------------

    def _get_obs(self):
        # Frames are only rendered when the caller asked for them
        if self.render_mode in ("rgb_array", "human"):
            rgb = self._render_frame()
        else:
            rgb = np.zeros(
                (self.obs_height, self.obs_width, 3), dtype=np.uint8
            )
        state = self._get_state_vector()
        return {"rgb": rgb, "state": state}

    def _get_state_vector(self):
        state = np.zeros(STATE_DIM, dtype=np.float32)
        if self._session is None:
            return state

        world = self._session.world
        player = world.player
        state[0] = player.x
        state[1] = player.y
        state[2] = player.dy
        state[3] = float(player.grounded)
        state[4] = world.scroll_speed
        state[5] = world.max_gap
        state[6] = float(world.score)
        state[7] = float(world.game_over)
        state[8] = float(self._episode_steps) / max(self.max_episode_steps, 1)

        # Platforms are in spawn order, which is also top-to-bottom
        below = [p for p in world.platforms if p.y >= player.bottom]
        for i, plat in enumerate(below[:NUM_TRACKED_PLATFORMS]):
            base = PLAYER_FEATURES + i * PLATFORM_FEATURES
            state[base] = 1.0
            state[base + 1] = plat.x
            state[base + 2] = plat.y
            state[base + 3] = float(plat.is_hazard)

        return state

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_frame(self):
        """Render current state to numpy array (H, W, 3) uint8."""
        draw_world(self._surface, self._session.snapshot())

        scaled = pygame.transform.scale(
            self._surface, (self.obs_width, self.obs_height)
        )
        # surfarray gives (W, H, 3); transpose to (H, W, 3)
        array = pygame.surfarray.array3d(scaled)
        return np.transpose(array, (1, 0, 2)).astype(np.uint8)

    def render(self):
        if self._session is None:
            return None
        if self.render_mode == "rgb_array":
            return self._render_frame()
        elif self.render_mode == "human" and self._display:
            snap = self._session.snapshot()
            draw_world(self._display, snap)
            draw_hud(self._display, snap)
            pygame.display.flip()
        return None

    def _get_info(self):
        world = self._session.world
        return {
            "score": world.score,
            "episode_steps": self._episode_steps,
            "game_over": world.game_over,
            "death_cause": self._session.death_cause,
            "player_position": (world.player.x, world.player.y),
            "scroll_speed": world.scroll_speed,
            "num_platforms": len(world.platforms),
            "level_seed": self._level_seed,
        }

    def close(self):
        if self._display:
            pygame.display.quit()
            self._display = None
