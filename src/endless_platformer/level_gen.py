"""Procedural platform generation for the endless descent.

Platforms enter from just below the visible area. The generator decides when
the next one is due (scrolled distance since the last spawn), where it goes
horizontally, and whether it is a hazard:

- Solvability: each platform is placed within `max_reach` of the previous one,
  so the player can always travel between consecutive platforms.
- Hazard pacing: hazards are rare and never spawn back-to-back.
- Difficulty: every spawn scores a point and feeds the difficulty ramp, which
  widens the vertical spacing of later platforms.
"""

import logging
import random
from typing import Optional, Tuple

from .config import PlatformConfig, DifficultyConfig
from .difficulty import apply_difficulty
from .entities import Platform, PlatformType
from .world import WorldState


logger = logging.getLogger(__name__)


def spawn_range(
    previous: Optional[Platform],
    platform_width: float,
    screen_width: float,
    max_reach: float,
) -> Tuple[float, float]:
    """Interval of valid x positions for the next platform.

    Without a previous platform this is the whole screen; otherwise it is
    limited to `max_reach` either side of the previous platform's span.
    """
    min_x = 0.0
    max_x = screen_width - platform_width
    if previous is not None:
        min_x = max(0.0, previous.x - max_reach)
        max_x = min(screen_width - platform_width, previous.x + platform_width + max_reach)
    return min_x, max_x


class PlatformGenerator:
    """Spawns platforms into a WorldState.

    All randomness comes from the injected `rng`, which only needs
    `uniform(a, b)` and `random()` (a `random.Random` works). Each spawn draws,
    in order: the x position, the hazard roll, and the next spawn threshold.
    """

    def __init__(
        self,
        platforms: Optional[PlatformConfig] = None,
        difficulty: Optional[DifficultyConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.platforms = platforms or PlatformConfig()
        self.difficulty = difficulty or DifficultyConfig()
        self.rng = rng or random.Random()

    def should_spawn(self, world: WorldState, screen_height: float) -> bool:
        """A platform is due once the last one has scrolled past the threshold."""
        last = world.last_platform
        if last is None:
            return True
        return screen_height - last.y > world.spawn_threshold

    def choose_type(self, world: WorldState) -> PlatformType:
        """Draw a platform type, forcing NORMAL right after a hazard."""
        roll = self.rng.random()
        if world.consecutive_hazards >= 1:
            return PlatformType.NORMAL
        if roll < self.platforms.hazard_probability:
            return PlatformType.HAZARD
        return PlatformType.NORMAL

    def maybe_spawn(
        self,
        world: WorldState,
        screen_width: float,
        screen_height: float,
    ) -> Optional[Platform]:
        """Spawn the next platform if one is due.

        Mutates `world` in place: appends the platform, bumps the score,
        applies the difficulty ramp, and draws the next spawn threshold.

        Returns:
            The new platform, or None when nothing was spawned.
        """
        if not self.should_spawn(world, screen_height):
            return None

        min_x, max_x = spawn_range(
            world.last_platform,
            self.platforms.width,
            screen_width,
            self.platforms.max_reach,
        )
        x = self.rng.uniform(min_x, max_x)

        kind = self.choose_type(world)
        if kind is PlatformType.HAZARD:
            world.consecutive_hazards += 1
        else:
            world.consecutive_hazards = 0

        platform = Platform(
            x=x,
            y=screen_height,
            width=self.platforms.width,
            height=self.platforms.height,
            kind=kind,
        )
        world.platforms.append(platform)
        world.score += 1

        world.scroll_speed, world.max_gap = apply_difficulty(
            world.score, world.scroll_speed, world.max_gap, self.difficulty
        )
        if world.score % self.difficulty.interval == 0:
            logger.info(
                f"Difficulty up at score {world.score}: "
                f"speed={world.scroll_speed:.2f} max_gap={world.max_gap:.1f}"
            )

        world.spawn_threshold = self.rng.uniform(self.difficulty.min_gap, world.max_gap)

        logger.debug(
            f"Spawned {kind.value} platform at x={x:.1f} "
            f"(range {min_x:.1f}-{max_x:.1f}), next in {world.spawn_threshold:.1f}px"
        )
        return platform
