"""The PSX Doom fire effect as a small cellular automaton.

``FireField`` holds the simulation; a host owns an RGBA buffer and calls
``render`` and ``step`` on it once per frame::

    field = FireField(320, 168, rng=42)
    field.ignite()
    frame = bytearray(field.frame_size)
    field.render(frame)
    field.step()
"""

from doomfire.field import FireField as FireField
from doomfire.field import FireFieldError as FireFieldError
from doomfire.field import FrameSizeError as FrameSizeError
from doomfire.field import InvalidDimensionsError as InvalidDimensionsError
from doomfire.palette import MAX_INTENSITY as MAX_INTENSITY
from doomfire.palette import PALETTE as PALETTE
from doomfire.palette import color_of as color_of
