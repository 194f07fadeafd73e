from __future__ import annotations

import pygame

from doomfire.utilities.logging import get_logger

logger = get_logger(__name__)

PIXEL_FORMAT = "RGBA"


class FireWindow:
    """A pygame window that shows an RGBA frame buffer."""

    def __init__(self, width: int, height: int, *, scale: int = 1, title: str) -> None:
        if scale < 1:
            raise ValueError("scale must be at least 1")
        self._size = (width, height)
        self._scale = scale
        self._title = title
        self._screen: pygame.Surface | None = None

    @property
    def window_size(self) -> tuple[int, int]:
        width, height = self._size
        return width * self._scale, height * self._scale

    @property
    def screen(self) -> pygame.Surface | None:
        return self._screen

    def initialize(self) -> None:
        pygame.display.init()
        pygame.display.set_caption(self._title)
        self._screen = pygame.display.set_mode(self.window_size)
        logger.info(
            "Opened %sx%s window (scale %s)",
            *self.window_size,
            self._scale,
        )

    def present(self, buffer: bytearray) -> None:
        if self._screen is None:
            raise RuntimeError("FireWindow is not initialized")
        frame = pygame.image.frombuffer(buffer, self._size, PIXEL_FORMAT)
        if self._scale != 1:
            frame = pygame.transform.scale(frame, self.window_size)
        self._screen.blit(frame, (0, 0))
        pygame.display.flip()

    def close(self) -> None:
        self._screen = None
        pygame.display.quit()
