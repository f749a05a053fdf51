"""Shared world definitions: scenes, colours and cave pixel lookup."""

from __future__ import annotations

import enum
import math
import sys
from dataclasses import dataclass, replace

RENDER_WIDTH = 320.0
RENDER_HEIGHT = 180.0

CAVE_WIDTH = 2017
CAVE_HEIGHT = 2216
BYTES_PER_PIXEL = 4


class Scene(enum.Enum):
    """The phase the game is in."""

    START = enum.auto()
    GAME = enum.auto()
    END = enum.auto()


@dataclass(frozen=True)
class Color:
    """An RGBA colour with channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def with_alpha(self, alpha: float) -> Color:
        """Return the same colour with a different alpha channel."""
        return replace(self, a=alpha)


BLACK = Color(0.0, 0.0, 0.0, 1.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)
PURPLE = Color(0.5, 0.0, 0.5, 1.0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


def _to_index(value: float) -> int:
    if not value > 0:
        return 0
    if math.isinf(value):
        return sys.maxsize
    return math.floor(value)


def get_bg_color(pixels: bytes | bytearray | memoryview, x: float, y: float) -> Color:
    """Return the colour of the cave map at pixel coordinates (x, y).

    Coordinates outside the map give a fully transparent colour; negative
    coordinates are clamped to zero.
    """
    xi = _to_index(x)
    yi = _to_index(y)
    if xi >= CAVE_WIDTH or yi >= CAVE_HEIGHT:
        return TRANSPARENT

    start = (yi * CAVE_WIDTH + xi) * BYTES_PER_PIXEL
    chunk = bytes(pixels[start:start + BYTES_PER_PIXEL])
    if len(chunk) < BYTES_PER_PIXEL:
        raise IndexError(f"pixel ({xi}, {yi}) lies beyond the end of the pixel data")

    r, g, b, a = chunk
    return Color(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def map_range(
    value: float, begin: float, end: float, new_begin: float, new_end: float
) -> float:
    """Linearly map value from [begin, end] onto [new_begin, new_end]."""
    return new_begin + (new_end - new_begin) * ((value - begin) / (end - begin))