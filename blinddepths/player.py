"""The player's submarine."""

from __future__ import annotations

import math
from dataclasses import dataclass

from blinddepths.camera import Camera2D
from blinddepths.echo import Echo, make_echoes
from blinddepths.world import (
    BLACK,
    PURPLE,
    RENDER_HEIGHT,
    RENDER_WIDTH,
    Scene,
    get_bg_color,
)

START_POS = (201.0, 167.0)
MAX_SPEED = 3.0
DRAG = 100.0
ECHO_COOLDOWN = 40.0
SPRITE_OFFSET = 16.0
RING_POINTS = 31
RING_SPACING_DEGREES = 12.0
RING_RADIUS = 40.0


@dataclass(frozen=True)
class Controls:
    """The player's input for one frame."""

    forward: bool = False
    turn_left: bool = False
    turn_right: bool = False
    echo: bool = False


@dataclass
class Player:
    """The submarine: position, velocity, heading in degrees and echo cooldown."""

    pos: tuple[float, float] = START_POS
    vel: tuple[float, float] = (0.0, 0.0)
    direction: float = 0.0
    timer: float = 0.0

    def update(
        self,
        controls: Controls,
        pixels: bytes | bytearray | memoryview,
        camera: Camera2D,
        scene: Scene,
        dt: float,
    ) -> list[Echo]:
        """Advance one frame and return any echoes sent."""
        playing = scene is Scene.GAME
        frames = dt * 60.0
        vx, vy = self.vel

        if controls.forward and playing:
            heading = math.radians(self.direction)
            vx += math.cos(heading) * dt
            vy += math.sin(heading) * dt

        speed = math.hypot(vx, vy)
        if speed > MAX_SPEED:
            vx, vy = vx * MAX_SPEED / speed, vy * MAX_SPEED / speed

        self.pos = (self.pos[0] + vx, self.pos[1] + vy)
        vx -= vx / DRAG * frames
        vy -= vy / DRAG * frames

        if controls.turn_right and playing:
            self.direction += frames
        if controls.turn_left and playing:
            self.direction -= frames

        sent: list[Echo] = []
        if controls.echo and playing and self.timer <= 0.0:
            sent = make_echoes(self.pos, self.direction, PURPLE)
            self.timer = ECHO_COOLDOWN
        self.timer -= frames

        sample_x = self.pos[0] * (camera.work_size[0] / (RENDER_WIDTH / 0.5)) + SPRITE_OFFSET
        sample_y = self.pos[1] * (camera.work_size[1] / (RENDER_HEIGHT / 0.5)) + SPRITE_OFFSET
        if get_bg_color(pixels, sample_x, sample_y) != BLACK:
            vx, vy = -vx, -vy

        self.vel = (vx, vy)
        return sent

    def sonar_ring(self) -> list[tuple[float, float]]:
        """Return the points of the ring drawn around the submarine."""
        cx = self.pos[0] + SPRITE_OFFSET
        cy = self.pos[1] + SPRITE_OFFSET
        points = []
        for i in range(RING_POINTS):
            angle = math.radians(i * RING_SPACING_DEGREES) - self.direction
            points.append(
                (cx + math.cos(angle) * RING_RADIUS, cy + math.sin(angle) * RING_RADIUS)
            )
        return points