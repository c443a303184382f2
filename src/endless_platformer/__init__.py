"""endless-platformer: a single-screen endless vertical platformer.

The player falls onto procedurally generated platforms scrolling up the
screen. Each spawned platform scores a point; leaving the screen or touching a
hazard platform ends the game. The simulation core (generation, physics,
collision) is pure Python; pygame hosts and a Gymnasium environment sit on top.
"""

from .config import PlayerConfig, PlatformConfig, DifficultyConfig, GameConfig, CONFIGS, get_config
from .entities import Player, Platform, PlatformType
from .difficulty import apply_difficulty, level_for_score
from .world import WorldState, WorldSnapshot, initial_world, snapshot
from .level_gen import PlatformGenerator, spawn_range
from .controls import Direction, InputSnapshot, resolve_direction
from .physics import tick
from .session import GameSession

__all__ = [
    "PlayerConfig",
    "PlatformConfig",
    "DifficultyConfig",
    "GameConfig",
    "CONFIGS",
    "get_config",
    "Player",
    "Platform",
    "PlatformType",
    "apply_difficulty",
    "level_for_score",
    "WorldState",
    "WorldSnapshot",
    "initial_world",
    "snapshot",
    "PlatformGenerator",
    "spawn_range",
    "Direction",
    "InputSnapshot",
    "resolve_direction",
    "tick",
    "GameSession",
]
