"""Configuration system for the endless platformer.

Three parameter groups feed the simulation:
- PlayerConfig: sprite size, spawn point, and per-tick movement constants
- PlatformConfig: platform geometry, horizontal reach, and hazard frequency
- DifficultyConfig: scroll speed, vertical spacing, and how they ramp with score

GameConfig bundles them with the screen dimensions. All units are pixels and
pixels-per-tick; the simulation has no notion of wall-clock time.
"""

from dataclasses import dataclass, field
from typing import Tuple, Dict, Any, ClassVar, List
import copy
import random


@dataclass
class PlayerConfig:
    """Player sprite and movement constants."""

    width: float = 20.0
    height: float = 20.0

    # Spawn point after every reset
    start_x: float = 200.0
    start_y: float = 100.0

    move_speed: float = 3.0  # Horizontal displacement per tick (px)
    gravity: float = 0.25  # Added to dy every tick (px/tick^2), positive = down

    MOVE_SPEED_RANGE: ClassVar[Tuple[float, float]] = (2.0, 5.0)
    GRAVITY_RANGE: ClassVar[Tuple[float, float]] = (0.15, 0.4)

    @classmethod
    def sample(cls) -> "PlayerConfig":
        """Sample movement constants, keeping geometry at defaults."""
        return cls(
            move_speed=random.uniform(*cls.MOVE_SPEED_RANGE),
            gravity=random.uniform(*cls.GRAVITY_RANGE),
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            "width": self.width,
            "height": self.height,
            "start_x": self.start_x,
            "start_y": self.start_y,
            "move_speed": self.move_speed,
            "gravity": self.gravity,
        }


@dataclass
class PlatformConfig:
    """Platform geometry and generation constraints."""

    width: float = 100.0
    height: float = 15.0

    # The single platform present after a reset
    seed_x: float = 150.0
    seed_y: float = 500.0

    # Horizontal travel considered reachable between consecutive platforms
    max_reach: float = 250.0
    hazard_probability: float = 0.05

    HAZARD_PROBABILITY_RANGE: ClassVar[Tuple[float, float]] = (0.0, 0.25)
    MAX_REACH_RANGE: ClassVar[Tuple[float, float]] = (120.0, 300.0)

    @classmethod
    def sample(cls) -> "PlatformConfig":
        """Sample generation constraints, keeping geometry at defaults."""
        return cls(
            max_reach=random.uniform(*cls.MAX_REACH_RANGE),
            hazard_probability=random.uniform(*cls.HAZARD_PROBABILITY_RANGE),
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            "width": self.width,
            "height": self.height,
            "seed_x": self.seed_x,
            "seed_y": self.seed_y,
            "max_reach": self.max_reach,
            "hazard_probability": self.hazard_probability,
        }


@dataclass
class DifficultyConfig:
    """Scroll speed and platform spacing, and how both ramp with score.

    Every `interval` points the scroll speed grows by `speed_increment` and the
    maximum vertical gap by `gap_increment`. Neither value is capped.
    """

    initial_speed: float = 1.0  # Upward platform displacement per tick (px)
    speed_increment: float = 0.1

    min_gap: float = 80.0  # Floor for the scrolled distance between spawns
    initial_max_gap: float = 100.0
    gap_increment: float = 5.0

    interval: int = 10  # Points per difficulty level
    initial_spawn_threshold: float = 100.0  # Distance before the first spawn after reset

    INITIAL_SPEED_RANGE: ClassVar[Tuple[float, float]] = (0.6, 1.6)
    SPEED_INCREMENT_RANGE: ClassVar[Tuple[float, float]] = (0.05, 0.2)
    INITIAL_MAX_GAP_RANGE: ClassVar[Tuple[float, float]] = (90.0, 140.0)
    INTERVAL_RANGE: ClassVar[Tuple[int, int]] = (5, 15)

    @classmethod
    def sample(cls) -> "DifficultyConfig":
        """Sample a difficulty ramp."""
        return cls(
            initial_speed=random.uniform(*cls.INITIAL_SPEED_RANGE),
            speed_increment=random.uniform(*cls.SPEED_INCREMENT_RANGE),
            initial_max_gap=random.uniform(*cls.INITIAL_MAX_GAP_RANGE),
            interval=random.randint(*cls.INTERVAL_RANGE),
        )

    def to_dict(self) -> Dict[str, float]:
        return {
            "initial_speed": self.initial_speed,
            "speed_increment": self.speed_increment,
            "min_gap": self.min_gap,
            "initial_max_gap": self.initial_max_gap,
            "gap_increment": self.gap_increment,
            "interval": self.interval,
            "initial_spawn_threshold": self.initial_spawn_threshold,
        }


@dataclass
class GameConfig:
    """Complete game configuration combining all parameter groups."""
    player: PlayerConfig = field(default_factory=PlayerConfig)
    platforms: PlatformConfig = field(default_factory=PlatformConfig)
    difficulty: DifficultyConfig = field(default_factory=DifficultyConfig)

    screen_width: int = 400
    screen_height: int = 600
    fps: int = 60

    # Extra penetration (px) beyond this tick's dy still accepted as a landing
    landing_tolerance: float = 5.0
    # Half-width (px) around the player's centre where a pointer is ignored
    pointer_deadzone: float = 5.0

    @classmethod
    def sample_full(cls) -> "GameConfig":
        """Sample movement, generation and difficulty parameters."""
        return cls(
            player=PlayerConfig.sample(),
            platforms=PlatformConfig.sample(),
            difficulty=DifficultyConfig.sample(),
        )

    def validate(self) -> List[str]:
        """Check the preconditions the simulation relies on.

        Returns:
            List of problems, empty when the config is usable.
        """
        errors = []
        if self.screen_width <= 0 or self.screen_height <= 0:
            errors.append(
                f"screen must be non-empty, got {self.screen_width}x{self.screen_height}"
            )
        if self.platforms.width > self.screen_width:
            errors.append(
                f"platform width {self.platforms.width} exceeds screen width {self.screen_width}"
            )
        if self.player.width > self.screen_width:
            errors.append(
                f"player width {self.player.width} exceeds screen width {self.screen_width}"
            )
        if not 0.0 <= self.platforms.hazard_probability <= 1.0:
            errors.append(
                f"hazard_probability must be in [0, 1], got {self.platforms.hazard_probability}"
            )
        if self.platforms.max_reach < 0:
            errors.append(f"max_reach must be >= 0, got {self.platforms.max_reach}")
        if self.difficulty.min_gap > self.difficulty.initial_max_gap:
            errors.append(
                f"min_gap {self.difficulty.min_gap} exceeds initial_max_gap "
                f"{self.difficulty.initial_max_gap}"
            )
        if self.difficulty.interval < 1:
            errors.append(f"difficulty interval must be >= 1, got {self.difficulty.interval}")
        if self.difficulty.speed_increment < 0 or self.difficulty.gap_increment < 0:
            errors.append("difficulty increments must be non-negative")
        if self.fps <= 0:
            errors.append(f"fps must be positive, got {self.fps}")
        return errors

    def check(self) -> "GameConfig":
        """Raise ValueError if the config is unusable, else return it."""
        errors = self.validate()
        if errors:
            raise ValueError(f"Invalid game config: {errors}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary."""
        return {
            "player": self.player.to_dict(),
            "platforms": self.platforms.to_dict(),
            "difficulty": self.difficulty.to_dict(),
            "screen_width": self.screen_width,
            "screen_height": self.screen_height,
            "fps": self.fps,
            "landing_tolerance": self.landing_tolerance,
            "pointer_deadzone": self.pointer_deadzone,
        }


# Predefined configurations for play and evaluation
CONFIGS = {
    "default": GameConfig(),

    # Slow ramp, no hazards - good for a first run
    "relaxed": GameConfig(
        platforms=PlatformConfig(hazard_probability=0.0),
        difficulty=DifficultyConfig(initial_speed=0.8, speed_increment=0.05, interval=20),
    ),

    # Fast scroll, wide gaps, quick levelling
    "frantic": GameConfig(
        player=PlayerConfig(move_speed=4.0),
        difficulty=DifficultyConfig(
            initial_speed=1.6, speed_increment=0.2,
            initial_max_gap=130.0, gap_increment=8.0, interval=5,
        ),
    ),

    # One platform in five is a hazard
    "hazardous": GameConfig(
        platforms=PlatformConfig(hazard_probability=0.2),
    ),
}


def get_config(name: str) -> GameConfig:
    """Look up a preset by name. Returns a copy safe to modify."""
    if name not in CONFIGS:
        raise ValueError(f"Unknown preset: {name} (choose from {sorted(CONFIGS)})")
    return copy.deepcopy(CONFIGS[name])
