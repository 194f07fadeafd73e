from __future__ import annotations

import pygame
from reactivex.subject import Subject

from doomfire.utilities.logging import get_logger

logger = get_logger(__name__)


class FireEventHandler:
    """Drain the pygame event queue, publishing toggle key presses."""

    def __init__(self, toggle_key: str) -> None:
        try:
            self._toggle_key = pygame.key.key_code(toggle_key)
        except ValueError as exc:
            raise ValueError(f"Unknown toggle key {toggle_key!r}") from exc
        self.toggles: Subject[int] = Subject()

    @property
    def toggle_key(self) -> int:
        return self._toggle_key

    def handle_events(self) -> bool:
        """Return ``False`` once the window has been closed."""

        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                logger.info("Window closed")
                running = False
            elif event.type == pygame.KEYDOWN and event.key == self._toggle_key:
                self.toggles.on_next(event.key)
        return running
