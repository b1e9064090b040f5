"""Game-wide constants, hit rectangles, bullets and power-ups."""

from __future__ import annotations

import math
from dataclasses import dataclass

BASE_SIZE = 16
ENEMY_BULLET_SPEED = 2
ENEMY_HIT_TIMER_DURATION = 2
ENEMY_MOVE_PAUSE_DECREASE = 1
ENEMY_MOVE_PAUSE_MIN = 3
ENEMY_MOVE_PAUSE_START = 63
ENEMY_MOVE_PAUSE_START_MIN = 47
ENEMY_MOVE_SPEED = 2
ENEMY_TYPES = 3
EXPLOSION_ANIMATION_SPEED = 2
FAST_RELOAD_DURATION = 7
NEXT_LEVEL_TRANSITION = 64
PLAYER_BULLET_SPEED = 4
PLAYER_MOVE_SPEED = 2
POWERUP_ANIMATION_SPEED = 16
POWERUP_SPEED = 2
POWERUP_TYPES = 4
RELOAD_DURATION = 31
SCREEN_RESIZE = 4
TOTAL_LEVELS = 8
UFO_ANIMATION_SPEED = 8
UFO_MOVE_SPEED = 1

ENEMY_SHOOT_CHANCE = 4096
ENEMY_SHOOT_CHANCE_INCREASE = 64
ENEMY_SHOOT_CHANCE_MIN = 1024
POWERUP_DURATION = 512
SCREEN_HEIGHT = 180
SCREEN_WIDTH = 320
UFO_TIMER_MAX = 1024
UFO_TIMER_MIN = 768

# Length of one simulation step, in microseconds.
FRAME_DURATION_US = 16667

# Number of earlier positions a bullet remembers for drawing its tail.
TAIL_LENGTH = 3


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    magnitude = math.floor(abs(value) + 0.5)
    return -magnitude if value < 0 else magnitude


@dataclass(frozen=True)
class Rect:
    """An integer axis-aligned rectangle."""

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles share a non-empty area."""
        min_x1, max_x1 = sorted((self.left, self.right))
        min_y1, max_y1 = sorted((self.top, self.bottom))
        min_x2, max_x2 = sorted((other.left, other.right))
        min_y2, max_y2 = sorted((other.top, other.bottom))
        return max(min_x1, min_x2) < min(max_x1, max_x2) and max(min_y1, min_y2) < min(
            max_y1, max_y2
        )


class Bullet:
    """A projectile moving by a fixed step each frame, with a short tail."""

    def __init__(self, step_x, step_y, x, y):
        self.dead = False
        self.x = int(x)
        self.y = int(y)
        self.real_x = float(self.x)
        self.real_y = float(self.y)
        self.step_x = float(step_x)
        self.step_y = float(step_y)
        self.previous_x = [self.x] * TAIL_LENGTH
        self.previous_y = [self.y] * TAIL_LENGTH

    def update(self) -> None:
        """Advance one frame; the bullet dies once it leaves the screen."""
        if self.dead:
            return
        self.real_x += self.step_x
        self.real_y += self.step_y

        self.previous_x = self.previous_x[1:] + [self.x]
        self.previous_y = self.previous_y[1:] + [self.y]

        self.x = _round_half_away(self.real_x)
        self.y = _round_half_away(self.real_y)

        if (
            self.x <= -BASE_SIZE
            or self.y <= -BASE_SIZE
            or SCREEN_HEIGHT <= self.y
            or SCREEN_WIDTH <= self.x
        ):
            self.dead = True

    def hitbox(self) -> Rect:
        return Rect(
            int(self.x + 0.375 * BASE_SIZE),
            int(self.y + 0.375 * BASE_SIZE),
            int(0.25 * BASE_SIZE),
            int(0.25 * BASE_SIZE),
        )


class Powerup:
    """A falling power-up dropped by the UFO.

    Types: 0 shield, 1 fast reload, 2 triple shot, 3 mirrored controls.
    """

    def __init__(self, x, y, type_):
        self.dead = False
        self.x = int(x)
        self.y = int(y)
        self.type = int(type_)

    def hitbox(self) -> Rect:
        return Rect(
            int(self.x + 0.25 * BASE_SIZE),
            int(self.y + 0.25 * BASE_SIZE),
            int(0.5 * BASE_SIZE),
            int(0.5 * BASE_SIZE),
        )