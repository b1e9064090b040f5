"""The player's ship."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .entities import (
    BASE_SIZE,
    EXPLOSION_ANIMATION_SPEED,
    FAST_RELOAD_DURATION,
    PLAYER_BULLET_SPEED,
    PLAYER_MOVE_SPEED,
    POWERUP_DURATION,
    RELOAD_DURATION,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Bullet,
    Rect,
)

NO_POWER = 0
SHIELD = 1
FAST_RELOAD = 2
TRIPLE_SHOT = 3
MIRRORED = 4

SHIELD_EXPLOSION_COLOR = (0, 109, 255)
DEATH_EXPLOSION_COLOR = (255, 36, 0)

# The horizontal position is an unsigned 16-bit value.
_POSITION_MASK = 0xFFFF


@dataclass(frozen=True)
class Controls:
    """The state of the player's keys during one frame."""

    left: bool = False
    right: bool = False
    fire: bool = False


class Player:
    """The ship at the bottom of the screen, its bullets and its power."""

    def __init__(self, assets):
        self.score = 0
        self.bullets: list[Bullet] = []
        self.explosion = assets.animation("Explosion", EXPLOSION_ANIMATION_SPEED, BASE_SIZE)
        self.reset()
        self.bullet_texture = assets.image("PlayerBullet")
        self.texture = assets.image("Player")

    def die(self) -> None:
        self.dead = True

    def draw(self, surface) -> None:
        if not self.dead:
            for bullet in self.bullets:
                surface.blit(self.bullet_texture, (bullet.x, bullet.y))
            area = pygame.Rect(BASE_SIZE * self.current_power, 0, BASE_SIZE, BASE_SIZE)
            surface.blit(self.texture, (self.x, self.y), area)
            if not self.shield_animation_over:
                self.explosion.draw(self.x, self.y, surface, SHIELD_EXPLOSION_COLOR)
        elif not self.dead_animation_over:
            self.explosion.draw(self.x, self.y, surface, DEATH_EXPLOSION_COLOR)

    def reset(self) -> None:
        """Return to the start position, alive, with no power and no bullets."""
        self.dead = False
        self.dead_animation_over = False
        self.shield_animation_over = True
        self.current_power = NO_POWER
        self.reload_timer = 0
        self.power_timer = 0
        self.x = (SCREEN_WIDTH - BASE_SIZE) // 2
        self.y = SCREEN_HEIGHT - 2 * BASE_SIZE
        self.bullets.clear()
        self.explosion.reset()

    def add_score(self, amount) -> None:
        self.score += amount

    def reset_score(self) -> None:
        self.score = 0

    def _shift(self, step: int) -> None:
        self.x = (self.x + step) & _POSITION_MASK

    def update(self, rng, controls, enemy_bullets, enemies, ufo) -> None:
        """Advance one frame of movement, shooting, collisions and power-ups."""
        if not self.dead:
            mirrored = self.current_power == MIRRORED
            if controls.left:
                self._shift(PLAYER_MOVE_SPEED if mirrored else -PLAYER_MOVE_SPEED)
            if controls.right:
                self._shift(-PLAYER_MOVE_SPEED if mirrored else PLAYER_MOVE_SPEED)
            if self.x > SCREEN_WIDTH - BASE_SIZE:
                self.x = 0

            if self.reload_timer == 0:
                if controls.fire:
                    self.reload_timer = (
                        FAST_RELOAD_DURATION
                        if self.current_power == FAST_RELOAD
                        else RELOAD_DURATION
                    )
                    self.bullets.append(Bullet(0, -PLAYER_BULLET_SPEED, self.x, self.y))
                    if self.current_power == TRIPLE_SHOT:
                        offset = 0.375 * BASE_SIZE
                        self.bullets.append(
                            Bullet(0, -PLAYER_BULLET_SPEED, self.x - offset, self.y)
                        )
                        self.bullets.append(
                            Bullet(0, -PLAYER_BULLET_SPEED, self.x + offset, self.y)
                        )
            else:
                self.reload_timer -= 1

            own_box = self.hitbox()
            for enemy_bullet in enemy_bullets:
                if own_box.intersects(enemy_bullet.hitbox()):
                    if self.current_power == SHIELD:
                        self.current_power = NO_POWER
                        self.shield_animation_over = False
                    else:
                        self.dead = True
                    enemy_bullet.dead = True
                    break

            powerup_type = ufo.check_powerup_collision(self.hitbox())
            if powerup_type > 0:
                self.current_power = powerup_type
                self.power_timer = POWERUP_DURATION

            if self.power_timer == 0:
                self.current_power = NO_POWER
            else:
                self.power_timer -= 1

            if not self.shield_animation_over:
                self.shield_animation_over = self.explosion.update()
        elif not self.dead_animation_over:
            self.dead_animation_over = self.explosion.update()

        for bullet in self.bullets:
            bullet.update()
            if not bullet.dead and ufo.check_bullet_collision(rng, bullet.hitbox()):
                bullet.dead = True

        for enemy in enemies:
            for bullet in self.bullets:
                if (
                    not bullet.dead
                    and enemy.health > 0
                    and enemy.hitbox().intersects(bullet.hitbox())
                ):
                    bullet.dead = True
                    enemy.hit()
                    break

        self.bullets[:] = [bullet for bullet in self.bullets if not bullet.dead]

    def hitbox(self) -> Rect:
        return Rect(
            int(self.x + 0.125 * BASE_SIZE),
            int(self.y + 0.125 * BASE_SIZE),
            int(0.75 * BASE_SIZE),
            int(0.75 * BASE_SIZE),
        )