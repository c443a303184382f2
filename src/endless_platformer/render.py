"""Pygame drawing of a WorldSnapshot.

Shared by the interactive engine and the gym environment so both show the
same picture. Only reads snapshots; never touches live game state.
"""

from typing import Tuple

import pygame

from .world import WorldSnapshot


COLOR_BG = (34, 34, 34)
COLOR_TEXT = (255, 255, 255)
COLOR_OVERLAY = (0, 0, 0, 178)  # 70% black


def draw_world(surface: pygame.Surface, snap: WorldSnapshot) -> None:
    """Draw platforms and player (no text)."""
    surface.fill(COLOR_BG)

    for plat in snap.platforms:
        x, y, w, h = plat.rect
        pygame.draw.rect(surface, plat.color, (int(x), int(y), int(w), int(h)))

    x, y, w, h = snap.player_rect
    pygame.draw.rect(surface, snap.player_color, (int(x), int(y), int(w), int(h)))


def draw_hud(surface: pygame.Surface, snap: WorldSnapshot) -> None:
    """Score/level in the top-left, plus the game-over overlay when finished."""
    font = pygame.font.Font(None, 28)
    surface.blit(font.render(f"Score: {snap.score}", True, COLOR_TEXT), (10, 10))
    surface.blit(font.render(f"Level: {snap.level}", True, COLOR_TEXT), (10, 40))

    if snap.game_over:
        width, height = surface.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        surface.blit(overlay, (0, 0))
        _draw_centered_text(surface, "GAME OVER", 48, (width // 2, height // 2))
        _draw_centered_text(
            surface, "Press Space to Restart", 28, (width // 2, height // 2 + 40)
        )


def _draw_centered_text(
    surface: pygame.Surface, text: str, size: int, center: Tuple[int, int]
) -> None:
    font = pygame.font.Font(None, size)
    text_surface = font.render(text, True, COLOR_TEXT)
    surface.blit(text_surface, text_surface.get_rect(center=center))
