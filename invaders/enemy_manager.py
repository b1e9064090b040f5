"""The formation of invaders, their level layouts and their bullets."""

from __future__ import annotations

import pygame

from .entities import (
    BASE_SIZE,
    ENEMY_MOVE_PAUSE_DECREASE,
    ENEMY_MOVE_PAUSE_MIN,
    ENEMY_MOVE_PAUSE_START,
    ENEMY_MOVE_PAUSE_START_MIN,
    ENEMY_SHOOT_CHANCE,
    ENEMY_SHOOT_CHANCE_INCREASE,
    ENEMY_SHOOT_CHANCE_MIN,
    ENEMY_TYPES,
    TAIL_LENGTH,
    TOTAL_LEVELS,
    Bullet,
)
from .enemy import Enemy

HIT_COLOR = (255, 255, 255)
ENEMY_COLORS = {
    0: (182, 10, 240),
    1: (255, 165, 0),
    2: (0, 0, 255),
}

# One tuple of four rows per level; each digit is an enemy of that type.
_LEVEL_ROWS = (
    ("0 " * 8, " 0" * 8, "0 " * 8, " 0" * 8),
    ("0" * 16,) * 4,
    ("10" * 8, "01" * 8, "10" * 8, "01" * 8),
    ("1" * 16,) * 4,
    ("2" * 16, "1" * 16, "10" * 8, "01" * 8),
    ("0" * 16, "2" * 16, "1" * 16, "1" * 16),
    ("21" * 8, "12" * 8, "21" * 8, "12" * 8),
    ("2" * 16,) * 4,
)


def level_sketch(level) -> str:
    """Return the layout of a level; past the last level the second half repeats."""
    level = int(level)
    if level < 0:
        raise ValueError(f"level must not be negative: {level}")
    if level >= TOTAL_LEVELS:
        half = TOTAL_LEVELS // 2
        level = half + level % half
    return "\n".join(_LEVEL_ROWS[level])


class EnemyManager:
    """Owns every enemy and every enemy bullet on the screen."""

    def __init__(self, assets):
        self.enemies: list[Enemy] = []
        self.enemy_bullets: list[Bullet] = []
        self.enemy_animations = []
        self.reset(0)
        self.bullet_texture = assets.image("EnemyBullet")
        self.enemy_animations = [
            assets.animation(f"Enemy{index}", 1 + self.move_pause, BASE_SIZE)
            for index in range(ENEMY_TYPES)
        ]

    def reached_player(self, player_y) -> bool:
        """True once any enemy has come down to the player's row."""
        return any(enemy.y > player_y - 0.5 * BASE_SIZE for enemy in self.enemies)

    def draw(self, surface) -> None:
        for bullet in self.enemy_bullets:
            for index, position in enumerate(zip(bullet.previous_x, bullet.previous_y)):
                area = pygame.Rect(BASE_SIZE * index, 0, BASE_SIZE, BASE_SIZE)
                surface.blit(self.bullet_texture, position, area)
            area = pygame.Rect(BASE_SIZE * TAIL_LENGTH, 0, BASE_SIZE, BASE_SIZE)
            surface.blit(self.bullet_texture, (bullet.x, bullet.y), area)

        for enemy in self.enemies:
            color = HIT_COLOR if enemy.hit_timer else ENEMY_COLORS.get(enemy.type, HIT_COLOR)
            self.enemy_animations[enemy.type].draw(enemy.x, enemy.y, surface, color)

    def reset(self, level) -> None:
        """Lay out the enemies of the given level and clear all bullets."""
        level = int(level)
        sketch = level_sketch(level)

        self.move_pause = max(
            ENEMY_MOVE_PAUSE_START_MIN, ENEMY_MOVE_PAUSE_START - ENEMY_MOVE_PAUSE_DECREASE * level
        )
        self.move_timer = self.move_pause
        self.shoot_chance = max(
            ENEMY_SHOOT_CHANCE_MIN, ENEMY_SHOOT_CHANCE - ENEMY_SHOOT_CHANCE_INCREASE * level
        )

        for animation in self.enemy_animations:
            animation.reset()
        self.enemy_bullets.clear()
        self.enemies.clear()

        column = row = 0
        for char in sketch:
            column += 1
            if char == "\n":
                column = 0
                row += 1
            elif char in "012":
                self.enemies.append(
                    Enemy(int(char), BASE_SIZE * (1 + column), BASE_SIZE * (2 + row))
                )

    def update(self, rng) -> None:
        """Advance one frame: move, shoot, drop the dead, move the bullets."""
        if self.move_timer == 0:
            self.move_timer = self.move_pause
            for enemy in self.enemies:
                enemy.move()
            for animation in self.enemy_animations:
                animation.change_current_frame()
        else:
            self.move_timer -= 1

        for enemy in self.enemies:
            enemy.update()
            if rng.randint(0, self.shoot_chance) == 0:
                self.enemy_bullets.extend(enemy.shoot())

        survivors = [enemy for enemy in self.enemies if enemy.health != 0]
        killed = len(self.enemies) - len(survivors)
        # The more enemies die, the faster the rest move.
        self.move_pause = max(
            ENEMY_MOVE_PAUSE_MIN, self.move_pause - ENEMY_MOVE_PAUSE_DECREASE * killed
        )
        self.enemies[:] = survivors

        for bullet in self.enemy_bullets:
            bullet.update()
        self.enemy_bullets[:] = [bullet for bullet in self.enemy_bullets if not bullet.dead]