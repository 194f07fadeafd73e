"""Color ramp used to turn fire intensities into RGBA pixels."""

import numpy as np

# PSX Doom fire ramp: black -> red -> orange -> yellow -> white.
PALETTE = np.array(
    [
        [0x07, 0x07, 0x07, 0xFF],
        [0x1F, 0x07, 0x07, 0xFF],
        [0x2F, 0x0F, 0x07, 0xFF],
        [0x47, 0x0F, 0x07, 0xFF],
        [0x57, 0x17, 0x07, 0xFF],
        [0x67, 0x1F, 0x07, 0xFF],
        [0x77, 0x1F, 0x07, 0xFF],
        [0x8F, 0x27, 0x07, 0xFF],
        [0x9F, 0x2F, 0x07, 0xFF],
        [0xAF, 0x3F, 0x07, 0xFF],
        [0xBF, 0x47, 0x07, 0xFF],
        [0xC7, 0x47, 0x07, 0xFF],
        [0xDF, 0x4F, 0x07, 0xFF],
        [0xDF, 0x57, 0x07, 0xFF],
        [0xDF, 0x57, 0x07, 0xFF],
        [0xD7, 0x5F, 0x07, 0xFF],
        [0xD7, 0x5F, 0x07, 0xFF],
        [0xD7, 0x67, 0x0F, 0xFF],
        [0xCF, 0x6F, 0x0F, 0xFF],
        [0xCF, 0x77, 0x0F, 0xFF],
        [0xCF, 0x7F, 0x0F, 0xFF],
        [0xCF, 0x87, 0x17, 0xFF],
        [0xC7, 0x87, 0x17, 0xFF],
        [0xC7, 0x8F, 0x17, 0xFF],
        [0xC7, 0x97, 0x1F, 0xFF],
        [0xBF, 0x9F, 0x1F, 0xFF],
        [0xBF, 0x9F, 0x1F, 0xFF],
        [0xBF, 0xA7, 0x27, 0xFF],
        [0xBF, 0xA7, 0x27, 0xFF],
        [0xBF, 0xAF, 0x2F, 0xFF],
        [0xB7, 0xAF, 0x2F, 0xFF],
        [0xB7, 0xB7, 0x2F, 0xFF],
        [0xB7, 0xB7, 0x37, 0xFF],
        [0xCF, 0xCF, 0x6F, 0xFF],
        [0xDF, 0xDF, 0x9F, 0xFF],
        [0xEF, 0xEF, 0xC7, 0xFF],
        [0xFF, 0xFF, 0xFF, 0xFF],
    ],
    dtype=np.uint8,
)
PALETTE.flags.writeable = False

MAX_INTENSITY = len(PALETTE) - 1


def color_of(intensity: int) -> tuple[int, int, int, int]:
    """Return the RGBA color for ``intensity``.

    Intensities outside ``0..MAX_INTENSITY`` raise :class:`IndexError` rather
    than being clamped, so a broken update rule shows up immediately.
    """

    if not 0 <= intensity <= MAX_INTENSITY:
        raise IndexError(
            f"intensity must be between 0 and {MAX_INTENSITY}, got {intensity}"
        )
    red, green, blue, alpha = PALETTE[intensity]
    return int(red), int(green), int(blue), int(alpha)
