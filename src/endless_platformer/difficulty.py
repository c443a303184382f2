"""Difficulty ramp: scroll speed and vertical spacing as a function of score."""

from typing import Optional, Tuple

from .config import DifficultyConfig


def apply_difficulty(
    score: int,
    speed: float,
    max_gap: float,
    config: Optional[DifficultyConfig] = None,
) -> Tuple[float, float]:
    """Return (speed, max_gap) after reaching `score`.

    Both values step up once each time the score lands on a positive multiple
    of the difficulty interval; any other score leaves them unchanged. There is
    no upper bound.
    """
    config = config or DifficultyConfig()
    if score > 0 and score % config.interval == 0:
        return speed + config.speed_increment, max_gap + config.gap_increment
    return speed, max_gap


def level_for_score(score: int, interval: int) -> int:
    """1-based difficulty level shown to the player."""
    return score // interval + 1
