import pygame

from doomfire.field import FireField
from doomfire.runtime import FireEventHandler, FireLoop, FireWindow, FramePacer
from doomfire.utilities.env import Configuration


def build_field(
    *,
    width: int | None = None,
    height: int | None = None,
    seed: int | None = None,
) -> FireField:
    return FireField(
        width if width is not None else Configuration.width(),
        height if height is not None else Configuration.height(),
        rng=seed if seed is not None else Configuration.seed(),
    )


def build_fire_loop(
    field: FireField,
    *,
    max_fps: int | None = None,
    scale: int | None = None,
) -> FireLoop:
    pygame.init()
    window = FireWindow(
        field.width,
        field.height,
        scale=scale if scale is not None else Configuration.scale(),
        title=Configuration.window_title(),
    )
    event_handler = FireEventHandler(Configuration.toggle_key())
    pacer = FramePacer(max_fps if max_fps is not None else Configuration.max_fps())
    return FireLoop(field, window, event_handler, pacer)
