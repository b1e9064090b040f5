"""A single invader."""

from __future__ import annotations

import math

from .entities import (
    BASE_SIZE,
    ENEMY_BULLET_SPEED,
    ENEMY_HIT_TIMER_DURATION,
    ENEMY_MOVE_SPEED,
    SCREEN_WIDTH,
    Bullet,
    Rect,
)

LEFT = -1
DOWN = 0
RIGHT = 1

# Horizontal bullet steps, as fractions of the bullet speed, for each enemy type.
_SPREADS = {
    0: (0.0,),
    1: (0.125, -0.125),
    2: (0.0, 0.25, -0.25),
}


def _row_direction(y: int) -> int:
    return LEFT if (y // BASE_SIZE) % 2 == 0 else RIGHT


class Enemy:
    """An invader that snakes across the screen and shoots downwards."""

    def __init__(self, type_, x, y):
        self.type = int(type_)
        self.x = int(x)
        self.y = int(y)
        self.direction = _row_direction(self.y)
        self.health = 1 + self.type
        # While positive, the enemy is shown white to mark a hit.
        self.hit_timer = 0

    def hit(self) -> None:
        self.hit_timer = ENEMY_HIT_TIMER_DURATION

    def move(self) -> None:
        """Take one step along the snake path."""
        left_edge = BASE_SIZE
        right_edge = SCREEN_WIDTH - 2 * BASE_SIZE
        if self.direction != DOWN:
            if (self.direction == RIGHT and self.x == right_edge) or (
                self.direction == LEFT and self.x == left_edge
            ):
                self.direction = DOWN
                self.y += ENEMY_MOVE_SPEED
            else:
                stepped = self.x + ENEMY_MOVE_SPEED * self.direction
                self.x = min(max(stepped, left_edge), right_edge)
        else:
            row_bottom = BASE_SIZE * math.ceil(self.y / BASE_SIZE)
            self.y = min(self.y + ENEMY_MOVE_SPEED, row_bottom)
            if self.y == BASE_SIZE * math.ceil(self.y / BASE_SIZE):
                self.direction = _row_direction(self.y)

    def shoot(self) -> list[Bullet]:
        """Return the bullets this enemy fires, depending on its type."""
        return [
            Bullet(spread * ENEMY_BULLET_SPEED, ENEMY_BULLET_SPEED, self.x, self.y)
            for spread in _SPREADS.get(self.type, ())
        ]

    def update(self) -> None:
        """Count down the hit flash; health drops when it ends."""
        if self.hit_timer > 0:
            if self.hit_timer == 1:
                self.health = max(0, self.health - 1)
            self.hit_timer -= 1

    def hitbox(self) -> Rect:
        return Rect(
            int(self.x + 0.25 * BASE_SIZE),
            int(self.y + 0.25 * BASE_SIZE),
            int(0.5 * BASE_SIZE),
            int(0.5 * BASE_SIZE),
        )