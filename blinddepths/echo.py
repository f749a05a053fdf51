"""Sonar echoes that travel through the cave and light up what they hit."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from blinddepths.camera import Camera2D
from blinddepths.world import (
    BLACK,
    RED,
    RENDER_HEIGHT,
    RENDER_WIDTH,
    TRANSPARENT,
    Color,
    get_bg_color,
)

ECHO_SPEED = 6.0
FADE_RATE = 0.004
ECHO_COUNT = 61
ECHO_SPACING_DEGREES = 6.0
ORIGIN_OFFSET = 16.0


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...

    def random(self) -> float: ...


@dataclass
class Echo:
    """A single sonar particle."""

    pos: tuple[float, float]
    direction: float
    color: Color
    hit: bool = False
    no_find: bool = False
    lifetime: float = 1.0

    def _advance(self, distance: float) -> None:
        x, y = self.pos
        self.pos = (
            x + math.cos(self.direction) * distance,
            y + math.sin(self.direction) * distance,
        )

    def update(
        self,
        pixels: bytes | bytearray | memoryview,
        camera: Camera2D,
        dt: float,
        rng: RandomSource,
    ) -> None:
        """Move the echo one frame, or fade it once it has stopped."""
        if self.lifetime <= 0.0:
            return

        frames = dt * 60.0
        if not self.hit and not self.no_find:
            self._advance(ECHO_SPEED * frames)

            sample_x = self.pos[0] * (camera.work_size[0] / (RENDER_WIDTH / 0.5))
            sample_y = self.pos[1] * (camera.work_size[1] / (RENDER_HEIGHT / 0.5))
            found = get_bg_color(pixels, sample_x, sample_y)
            if found != BLACK:
                if found == RED:
                    self.no_find = True
                    self.color = TRANSPARENT
                else:
                    self._advance(rng.randint(1, 79) * frames)
                    self.hit = True
                    self.color = found
        else:
            self.lifetime -= FADE_RATE * frames
            self.color = self.color.with_alpha(self.lifetime)


def make_echoes(
    pos: tuple[float, float], direction: float, color: Color
) -> list[Echo]:
    """Return a full ring of echoes fanning out from pos."""
    origin = (pos[0] + ORIGIN_OFFSET, pos[1] + ORIGIN_OFFSET)
    return [
        Echo(origin, math.radians(i * ECHO_SPACING_DEGREES) - direction, color)
        for i in range(ECHO_COUNT)
    ]