"""Per-tick physics and collision for the endless platformer.

Motion is integrated with semi-implicit Euler in screen coordinates (y grows
downward), one step per frame. `tick` runs the stages in a fixed order:

    horizontal input -> gravity -> spawn -> scroll & cull -> collisions -> bounds

Each stage is a standalone function so it can be driven in isolation.
"""

from typing import Optional

from .config import GameConfig, PlayerConfig
from .controls import Direction
from .entities import Player, PlatformType
from .level_gen import PlatformGenerator
from .world import WorldState


def move_horizontal(
    player: Player,
    direction: Direction,
    move_speed: float,
    screen_width: float,
) -> None:
    """Shift the player one step in `direction`, clamped to the screen."""
    player.x += Direction(direction).sign * move_speed
    player.x = min(max(player.x, 0.0), screen_width - player.width)


def integrate_vertical(player: Player, gravity: float) -> None:
    """Accelerate by gravity, then move by the new velocity."""
    player.dy += gravity
    player.y += player.dy


def scroll_and_cull(world: WorldState) -> int:
    """Move every platform up by the scroll speed and drop those fully off the top.

    Returns:
        Number of platforms removed.
    """
    removed = 0
    # Walk backwards so deletions don't shift unvisited indices
    for i in range(len(world.platforms) - 1, -1, -1):
        plat = world.platforms[i]
        plat.y -= world.scroll_speed
        if plat.y + plat.height < 0:
            del world.platforms[i]
            removed += 1
    return removed


def resolve_collisions(world: WorldState, landing_tolerance: float = 5.0) -> None:
    """Land the player on platforms it reached this tick.

    A landing needs the player to be falling, its bottom edge at or below the
    platform top but by no more than dy + landing_tolerance, and strict
    horizontal overlap. NORMAL platforms catch the player; touching a HAZARD
    ends the game and leaves the player where it made contact.
    """
    player = world.player
    for plat in world.platforms:
        bottom = player.bottom
        if (
            player.dy > 0
            and bottom >= plat.y
            and bottom <= plat.y + player.dy + landing_tolerance
            and player.x + player.width > plat.x
            and player.x < plat.x + plat.width
        ):
            if plat.kind is PlatformType.HAZARD:
                world.hit_hazard = True
                world.game_over = True
                return
            player.dy = 0.0
            player.y = plat.y - player.height
            player.grounded = True


def check_out_of_bounds(world: WorldState, screen_height: float) -> bool:
    """End the game if the player left the screen vertically."""
    y = world.player.y
    if y < 0 or y > screen_height:
        world.game_over = True
    return world.game_over


def tick(
    world: WorldState,
    direction: Direction,
    generator: PlatformGenerator,
    config: Optional[GameConfig] = None,
) -> WorldState:
    """Advance the world by one frame. Does nothing once the game is over."""
    if world.game_over:
        return world

    config = config or GameConfig()
    player_cfg: PlayerConfig = config.player
    player = world.player

    player.grounded = False
    move_horizontal(player, direction, player_cfg.move_speed, config.screen_width)
    integrate_vertical(player, player_cfg.gravity)

    generator.maybe_spawn(world, config.screen_width, config.screen_height)

    scroll_and_cull(world)
    resolve_collisions(world, config.landing_tolerance)
    check_out_of_bounds(world, config.screen_height)
    return world
