from __future__ import annotations

import logging

import pygame
from reactivex import operators as ops

from doomfire.field import FireField
from doomfire.runtime.display import FireWindow
from doomfire.runtime.event_handler import FireEventHandler
from doomfire.runtime.frame_pacer import FramePacer
from doomfire.utilities.logging import get_logger
from doomfire.utilities.logging_control import get_logging_controller

logger = get_logger(__name__)


class FireLoop:
    """Drive a :class:`FireField` once per frame and show it in a window.

    Each frame handles input, renders the field into the frame buffer,
    presents it, steps the simulation and then waits out the frame budget.
    """

    def __init__(
        self,
        field: FireField,
        window: FireWindow,
        event_handler: FireEventHandler,
        pacer: FramePacer,
    ) -> None:
        self.field = field
        self.window = window
        self.event_handler = event_handler
        self.pacer = pacer
        self.frame_buffer = bytearray(field.frame_size)
        self.frames_rendered = 0
        self.running = False
        self._toggle_subscription = event_handler.toggles.pipe(
            ops.map(lambda _key: self.field.toggle()),
        ).subscribe(self._on_toggled)

    def start(self, max_frames: int | None = None) -> None:
        logger.info(
            "Starting %sx%s fire loop at up to %s fps",
            self.field.width,
            self.field.height,
            self.pacer.max_fps,
        )
        self.window.initialize()
        self.running = True
        try:
            while self.running:
                if max_frames is not None and self.frames_rendered >= max_frames:
                    break
                self._one_loop()
        finally:
            self._toggle_subscription.dispose()
            self.window.close()
            logger.info("Fire loop stopped after %s frames", self.frames_rendered)

    def stop(self) -> None:
        self.running = False

    def _one_loop(self) -> None:
        frame_start = self.pacer.frame_start()
        if not self.event_handler.handle_events():
            self.stop()
            return

        self.field.render(self.frame_buffer)
        try:
            self.window.present(self.frame_buffer)
        except pygame.error:
            logger.exception("Failed to present frame, exiting")
            self.stop()
            return
        self.field.step()
        self.frames_rendered += 1

        slept = self.pacer.pace(frame_start)
        get_logging_controller().log(
            key="fire_loop.frame",
            logger=logger,
            level=logging.INFO,
            msg="Frame %s took %.2f ms (slept %.2f ms)",
            args=(
                self.frames_rendered,
                (self.pacer.frame_start() - frame_start - slept) * 1000.0,
                slept * 1000.0,
            ),
        )

    def _on_toggled(self, lit: bool) -> None:
        logger.info("Fire %s", "ignited" if lit else "extinguished")
