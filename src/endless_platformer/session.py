"""A running game: configuration, random source, and the current world.

GameSession is what hosts (the pygame engine, the gym environment) hold on to.
It exposes exactly three operations on the world: `reset`, `tick`, and
`snapshot`.
"""

import logging
import random
from typing import Optional

from .config import GameConfig
from .controls import Direction
from .level_gen import PlatformGenerator
from .physics import tick
from .world import WorldState, WorldSnapshot, initial_world, snapshot


logger = logging.getLogger(__name__)


class GameSession:
    """Owns one WorldState and advances it frame by frame."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """Create a session and start the first game.

        Args:
            config: Game configuration. Uses defaults if None.
            rng: Random source for platform generation. A fresh
                `random.Random()` if None; pass a seeded one for reproducible runs.
        """
        self.config = (config or GameConfig()).check()
        self.rng = rng or random.Random()
        self.generator = PlatformGenerator(
            self.config.platforms, self.config.difficulty, self.rng
        )
        self.ticks = 0
        self.death_cause: Optional[str] = None  # "hazard", "ceiling", "fall"
        self.world: WorldState = initial_world(self.config)

    @property
    def game_over(self) -> bool:
        return self.world.game_over

    @property
    def score(self) -> int:
        return self.world.score

    def reset(self, seed: Optional[int] = None) -> WorldState:
        """Start a new game, replacing the whole world at once.

        Args:
            seed: If given, reseed the random source first.
        """
        if seed is not None:
            self.rng.seed(seed)
        self.world = initial_world(self.config)
        self.ticks = 0
        self.death_cause = None
        logger.info("Game reset")
        return self.world

    def tick(self, direction: Direction = Direction.NONE) -> WorldState:
        """Advance one frame in `direction`."""
        if self.world.game_over:
            return self.world
        tick(self.world, direction, self.generator, self.config)
        self.ticks += 1
        if self.world.game_over:
            self.death_cause = self._death_cause()
            logger.info(
                f"Game over ({self.death_cause}): score={self.world.score} ticks={self.ticks}"
            )
        return self.world

    def snapshot(self) -> WorldSnapshot:
        return snapshot(self.world, self.config.difficulty.interval)

    def _death_cause(self) -> str:
        if self.world.hit_hazard:
            return "hazard"
        if self.world.player.y < 0:
            return "ceiling"
        return "fall"
