"""The lost colleague who follows the player once found."""

from __future__ import annotations

import math
from dataclasses import dataclass

FIND_DISTANCE = 80.0
FOLLOW_DISTANCE = 70.0
FOLLOW_SPEED = 3.0


@dataclass
class Friend:
    """The colleague waiting somewhere in the cave."""

    pos: tuple[float, float]
    found: bool = False
    show: bool = False

    def update(self, player_pos: tuple[float, float], dt: float) -> None:
        """Get found when the player is close, then trail behind them."""
        dx = player_pos[0] - self.pos[0]
        dy = player_pos[1] - self.pos[1]
        distance = math.hypot(dx, dy)

        if not self.found:
            if distance < FIND_DISTANCE:
                self.found = True
                self.show = True
        elif distance > FOLLOW_DISTANCE:
            step = dt * 60.0 * FOLLOW_SPEED / distance
            self.pos = (self.pos[0] + dx * step, self.pos[1] + dy * step)

    def facing(self, player_pos: tuple[float, float]) -> float:
        """Return the angle in radians from the friend towards the player."""
        return math.atan2(player_pos[1] - self.pos[1], player_pos[0] - self.pos[0])