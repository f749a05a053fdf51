"""The creature that chases the player out of the cave."""

from __future__ import annotations

from dataclasses import dataclass

MONSTER_SPEED = 15.0
TRIGGER_MIN_X = 635.0
TRIGGER_MAX_X = 1221.0
TRIGGER_MIN_Y = 540.0
TRIGGER_MAX_Y = 680.0


@dataclass
class Monster:
    """A monster that wakes once the player leads the friend past it."""

    pos: tuple[float, float]
    activated: bool = False

    def update(
        self, player_pos: tuple[float, float], friend_found: bool, dt: float
    ) -> None:
        """Wake up inside the trigger zone, then sweep to the left."""
        px, py = player_pos
        if (
            TRIGGER_MIN_Y < py < TRIGGER_MAX_Y
            and TRIGGER_MIN_X < px < TRIGGER_MAX_X
            and friend_found
        ):
            self.activated = True

        if self.activated:
            self.pos = (self.pos[0] - MONSTER_SPEED * dt * 60.0, self.pos[1])