import numpy as np

from doomfire.exceptions import InvariantViolation

# Intensity 0 is cold background, 36 is the white-hot source row
MAX_INTENSITY = 36
PALETTE_SIZE = MAX_INTENSITY + 1


def palette_doom():
    # PSX Doom fire ramp: near-black, reds, oranges, yellows, white
    palette = [
        [0x07, 0x07, 0x07],
        [0x1F, 0x07, 0x07],
        [0x2F, 0x0F, 0x07],
        [0x47, 0x0F, 0x07],
        [0x57, 0x17, 0x07],
        [0x67, 0x1F, 0x07],
        [0x77, 0x1F, 0x07],
        [0x8F, 0x27, 0x07],
        [0x9F, 0x2F, 0x07],
        [0xAF, 0x3F, 0x07],
        [0xBF, 0x47, 0x07],
        [0xC7, 0x47, 0x07],
        [0xDF, 0x4F, 0x07],
        [0xDF, 0x57, 0x07],
        [0xDF, 0x57, 0x07],
        [0xD7, 0x5F, 0x07],
        [0xD7, 0x5F, 0x07],
        [0xD7, 0x67, 0x0F],
        [0xCF, 0x6F, 0x0F],
        [0xCF, 0x77, 0x0F],
        [0xCF, 0x7F, 0x0F],
        [0xCF, 0x87, 0x17],
        [0xC7, 0x87, 0x17],
        [0xC7, 0x8F, 0x17],
        [0xC7, 0x97, 0x1F],
        [0xBF, 0x9F, 0x1F],
        [0xBF, 0x9F, 0x1F],
        [0xBF, 0xA7, 0x27],
        [0xBF, 0xA7, 0x27],
        [0xBF, 0xAF, 0x2F],
        [0xB7, 0xAF, 0x2F],
        [0xB7, 0xB7, 0x2F],
        [0xB7, 0xB7, 0x37],
        [0xCF, 0xCF, 0x6F],
        [0xDF, 0xDF, 0x9F],
        [0xEF, 0xEF, 0xC7],
        [0xFF, 0xFF, 0xFF],
    ]
    return palette


# Built once at import, read-only afterwards
PALETTE_DOOM = tuple(tuple(rgb) for rgb in palette_doom())


def color_of(intensity):
    """Return the ``(r, g, b)`` entry for an intensity in ``[0, 36]``."""
    # bool is an int subclass but never a valid intensity
    if (
        isinstance(intensity, bool)
        or not isinstance(intensity, (int, np.integer))
        or not 0 <= intensity <= MAX_INTENSITY
    ):
        raise InvariantViolation(
            f"intensity {intensity!r} outside palette range 0..{MAX_INTENSITY}",
            value=intensity,
        )
    return PALETTE_DOOM[int(intensity)]


def inverse_color(color):
    r, g, b = color
    return (255 - r, 255 - g, 255 - b)
