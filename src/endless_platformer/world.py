"""World state aggregate and its read-only snapshot.

WorldState holds everything a running game mutates: the player, the platform
sequence (spawn order, oldest first), score, the game-over flag, the current
difficulty values, and the generator's bookkeeping. Physics and the platform
generator are the only code that mutate it; a reset replaces the whole object.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import GameConfig
from .difficulty import level_for_score
from .entities import Player, Platform, PlatformType, Color


@dataclass
class WorldState:
    """Mutable state of one game session."""
    player: Player
    platforms: List[Platform] = field(default_factory=list)
    score: int = 0
    game_over: bool = False
    scroll_speed: float = 1.0
    max_gap: float = 100.0
    spawn_threshold: float = 100.0
    consecutive_hazards: int = 0
    hit_hazard: bool = False

    @property
    def last_platform(self) -> Optional[Platform]:
        return self.platforms[-1] if self.platforms else None


def initial_world(config: Optional[GameConfig] = None) -> WorldState:
    """Build a fresh world: player at the spawn point above one NORMAL platform."""
    config = config or GameConfig()
    p = config.player
    plat = config.platforms
    d = config.difficulty

    player = Player(x=p.start_x, y=p.start_y, width=p.width, height=p.height)
    seed = Platform(
        x=plat.seed_x,
        y=plat.seed_y,
        width=plat.width,
        height=plat.height,
        kind=PlatformType.NORMAL,
    )
    return WorldState(
        player=player,
        platforms=[seed],
        score=0,
        game_over=False,
        scroll_speed=d.initial_speed,
        max_gap=d.initial_max_gap,
        spawn_threshold=d.initial_spawn_threshold,
        consecutive_hazards=0,
    )


Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class PlatformView:
    rect: Rect
    color: Color
    kind: PlatformType


@dataclass(frozen=True)
class WorldSnapshot:
    """Immutable view of a world for renderers and observers."""
    player_rect: Rect
    player_color: Color
    platforms: Tuple[PlatformView, ...]
    score: int
    level: int
    game_over: bool


def snapshot(world: WorldState, difficulty_interval: int) -> WorldSnapshot:
    """Copy the renderable parts of `world` into a WorldSnapshot."""
    return WorldSnapshot(
        player_rect=world.player.rect,
        player_color=world.player.color,
        platforms=tuple(
            PlatformView(rect=plat.rect, color=plat.color, kind=plat.kind)
            for plat in world.platforms
        ),
        score=world.score,
        level=level_for_score(world.score, difficulty_interval),
        game_over=world.game_over,
    )
