"""Interactive pygame host for the endless platformer.

Captures keyboard and pointer input, drives one simulation tick per frame, and
draws the result. Holds no game rules of its own.
"""

import logging
import random
from typing import Optional, Dict

import pygame

from .config import GameConfig
from .controls import Direction, InputSnapshot, resolve_direction
from .render import draw_world, draw_hud
from .session import GameSession


logger = logging.getLogger(__name__)

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


class PlatformerEngine:
    """Main game engine: window, input capture and the frame loop.

    Controls:
    - Left/Right or A/D: move
    - Mouse drag or touch: move toward the pointer
    - Space: restart after game over
    - Escape: quit
    """

    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        """Initialize game engine.

        Args:
            config: Game configuration. Uses defaults if None.
            seed: Seed for platform generation. Random if None.
        """
        self.config = (config or GameConfig()).check()
        self.session = GameSession(self.config, rng=random.Random(seed))

        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.config.screen_width, self.config.screen_height)
        )
        pygame.display.set_caption("Endless Platformer")
        self.clock = pygame.time.Clock()

        self.running = False

        # Input state, written by events and read once per frame
        self._keys_pressed: Dict[int, bool] = {}
        self._pointer_x: Optional[float] = None

    def input_snapshot(self) -> InputSnapshot:
        """Freeze the current device state for this frame."""
        return InputSnapshot(
            left=any(self._keys_pressed.get(k, False) for k in LEFT_KEYS),
            right=any(self._keys_pressed.get(k, False) for k in RIGHT_KEYS),
            pointer_x=self._pointer_x,
        )

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._keys_pressed[event.key] = True
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE and self.session.game_over:
                    self.reset()
            elif event.type == pygame.KEYUP:
                self._keys_pressed[event.key] = False
            elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
                # Finger coordinates are normalized to [0, 1]
                self._pointer_x = event.x * self.config.screen_width
            elif event.type == pygame.FINGERUP:
                self._pointer_x = None
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._pointer_x = float(event.pos[0])
            elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
                self._pointer_x = float(event.pos[0])
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self._pointer_x = None

    def current_direction(self) -> Direction:
        return resolve_direction(
            self.input_snapshot(),
            self.session.world.player,
            self.config.pointer_deadzone,
        )

    def update(self) -> None:
        """Advance the game by one frame."""
        self.session.tick(self.current_direction())

    def render(self) -> None:
        """Render current game state."""
        snap = self.session.snapshot()
        draw_world(self.screen, snap)
        draw_hud(self.screen, snap)
        pygame.display.flip()

    def reset(self) -> None:
        self.session.reset()

    def run(self) -> None:
        """Main game loop."""
        self.running = True
        logger.info(
            f"Starting game at {self.config.screen_width}x{self.config.screen_height} "
            f"@ {self.config.fps}fps"
        )
        while self.running:
            self.handle_events()
            self.update()
            self.render()
            self.clock.tick(self.config.fps)

        pygame.quit()
