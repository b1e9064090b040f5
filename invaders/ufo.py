"""The UFO that crosses the top of the screen and drops power-ups."""

from __future__ import annotations

from .entities import (
    BASE_SIZE,
    EXPLOSION_ANIMATION_SPEED,
    POWERUP_ANIMATION_SPEED,
    POWERUP_SPEED,
    POWERUP_TYPES,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    UFO_ANIMATION_SPEED,
    UFO_MOVE_SPEED,
    UFO_TIMER_MAX,
    UFO_TIMER_MIN,
    Powerup,
    Rect,
)

EXPLOSION_COLOR = (255, 36, 0)


class Ufo:
    """The UFO and the power-ups it has dropped."""

    def __init__(self, rng, assets):
        self.y = BASE_SIZE
        self.powerups: list[Powerup] = []
        self.animation = assets.animation("Ufo", UFO_ANIMATION_SPEED, 2 * BASE_SIZE)
        self.explosion = assets.animation(
            "ExplosionBig", EXPLOSION_ANIMATION_SPEED, 2 * BASE_SIZE
        )
        self.reset(True, rng)
        self.powerup_animations = [
            assets.animation(f"Powerup{index}", POWERUP_ANIMATION_SPEED, BASE_SIZE)
            for index in range(POWERUP_TYPES)
        ]

    def check_bullet_collision(self, rng, bullet_hitbox) -> bool:
        """Destroy the UFO if the bullet hits it, dropping a random power-up."""
        if not self.dead and self.hitbox().intersects(bullet_hitbox):
            self.dead = True
            self.explosion_x = self.x
            self.powerups.append(
                Powerup(self.x + 0.5 * BASE_SIZE, self.y, rng.randint(0, POWERUP_TYPES - 1))
            )
            return True
        return False

    def check_powerup_collision(self, player_hitbox) -> int:
        """Collect a touched power-up: its type plus one, or 0 when none."""
        for powerup in self.powerups:
            if not powerup.dead and powerup.hitbox().intersects(player_hitbox):
                powerup.dead = True
                return 1 + powerup.type
        return 0

    def draw(self, surface) -> None:
        if not self.dead:
            self.animation.draw(self.x, self.y, surface)
        if not self.dead_animation_over:
            self.explosion.draw(
                self.explosion_x, self.y - 0.5 * BASE_SIZE, surface, EXPLOSION_COLOR
            )
        for powerup in self.powerups:
            self.powerup_animations[powerup.type].draw(powerup.x, powerup.y, surface)

    def reset(self, dead, rng) -> None:
        """Put the UFO back at the right edge and pick a new waiting time."""
        self.dead = bool(dead)
        self.dead_animation_over = False
        self.explosion_x = SCREEN_WIDTH
        self.x = SCREEN_WIDTH
        self.timer = rng.randint(UFO_TIMER_MIN, UFO_TIMER_MAX)
        self.powerups.clear()
        self.animation.reset()
        self.explosion.reset()

    def update(self, rng) -> None:
        if not self.dead:
            self.x -= UFO_MOVE_SPEED
            # Leaving the screen destroys the UFO without a power-up.
            if self.x <= -2 * BASE_SIZE:
                self.dead = True
            self.animation.update()
        else:
            if not self.dead_animation_over:
                self.dead_animation_over = self.explosion.update()
            if self.timer == 0:
                self.reset(False, rng)
            else:
                self.timer -= 1

        for powerup in self.powerups:
            powerup.y += POWERUP_SPEED
            if SCREEN_HEIGHT <= powerup.y:
                powerup.dead = True

        for animation in self.powerup_animations:
            animation.update()

        self.powerups[:] = [powerup for powerup in self.powerups if not powerup.dead]

    def hitbox(self) -> Rect:
        return Rect(self.x, self.y, 2 * BASE_SIZE, BASE_SIZE)