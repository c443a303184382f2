"""Game entities: the falling player and the scrolling platforms.

Entities are plain mutable records. All behaviour lives in the physics and
generator modules, which operate on them through the WorldState aggregate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


Color = Tuple[int, int, int]

COLOR_PLAYER: Color = (255, 87, 51)
COLOR_PLATFORM: Color = (76, 175, 80)
COLOR_HAZARD: Color = (255, 0, 0)


class PlatformType(Enum):
    """Platform variants. HAZARD ends the game on contact."""
    NORMAL = "normal"
    HAZARD = "hazard"


PLATFORM_COLORS = {
    PlatformType.NORMAL: COLOR_PLATFORM,
    PlatformType.HAZARD: COLOR_HAZARD,
}


@dataclass
class Player:
    """Player sprite. Screen coordinates, y grows downward.

    width/height never change after creation; dy is the vertical velocity in
    px/tick (positive = falling).
    """
    x: float
    y: float
    width: float
    height: float
    dy: float = 0.0
    grounded: bool = False

    color: Color = COLOR_PLAYER

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height)"""
        return self.x, self.y, self.width, self.height


@dataclass
class Platform:
    """A horizontal platform scrolling up the screen."""
    x: float
    y: float
    width: float
    height: float
    kind: PlatformType = PlatformType.NORMAL

    @property
    def color(self) -> Color:
        return PLATFORM_COLORS[self.kind]

    @property
    def is_hazard(self) -> bool:
        return self.kind is PlatformType.HAZARD

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """(x, y, width, height)"""
        return self.x, self.y, self.width, self.height
