"""
renderer.py

Fixed-size pygame window that shows a packed-RGB framebuffer.
"""
from __future__ import annotations

import numpy as np
import pygame

import config
from compositor import unpack_rgb
from events import EventManager


class Window:
    def __init__(self,
                 width: int = config.WIDTH,
                 height: int = config.HEIGHT,
                 title: str = config.WINDOW_TITLE,
                 fps: int = config.FPS) -> None:
        pygame.init()
        self.width, self.height = width, height
        self.fps = fps
        # raises pygame.error when no video device is available
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        pygame.key.set_repeat()          # no auto-repeat: one KEYDOWN per press
        self.clock = pygame.time.Clock()
        self._open = True

    @property
    def is_open(self) -> bool:
        return self._open

    def pump(self) -> None:
        """Feed pending SDL events into the EventManager."""
        for e in pygame.event.get():
            EventManager.handle(e)

    def present(self, buffer: np.ndarray) -> None:
        rgb = unpack_rgb(buffer, self.width, self.height)
        surf = pygame.image.frombuffer(rgb.tobytes(), (self.width, self.height), "RGB")
        self.screen.blit(surf, (0, 0))
        pygame.display.flip()

    def tick(self) -> None:
        self.clock.tick(self.fps)

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.quit()
