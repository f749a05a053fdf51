"""Beacons that periodically emit rings of echoes."""

from __future__ import annotations

from dataclasses import dataclass

from blinddepths.echo import Echo, RandomSource, make_echoes
from blinddepths.world import PURPLE, TRANSPARENT


@dataclass
class Beacon:
    """A fixed emitter; visible beacons emit purple echoes, hidden ones invisible ones."""

    pos: tuple[float, float]
    visible: bool
    freq: int
    timer: float = 0.0

    def update(self, dt: float, rng: RandomSource) -> list[Echo]:
        """Advance the timer and return any echoes emitted this frame."""
        self.timer += dt * 60.0
        if self.timer <= self.freq:
            return []
        self.timer = 0.0
        color = PURPLE if self.visible else TRANSPARENT
        return make_echoes(self.pos, rng.random(), color)