import pygame
import pytest

from invaders.assets import Assets
from invaders.enemy_manager import ENEMY_COLORS, EnemyManager, level_sketch
from invaders.entities import (
    BASE_SIZE,
    ENEMY_MOVE_PAUSE_START,
    ENEMY_MOVE_PAUSE_START_MIN,
    ENEMY_MOVE_SPEED,
    ENEMY_SHOOT_CHANCE,
    ENEMY_SHOOT_CHANCE_MIN,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)


def _strip(frames, height=BASE_SIZE):
    surface = pygame.Surface((frames * BASE_SIZE, height))
    surface.fill((255, 255, 255))
    return surface


class _Extreme:
    """A random source that always answers the lowest or the highest value."""

    def __init__(self, low):
        self.low = low

    def randint(self, a, b):
        return a if self.low else b


@pytest.fixture
def manager():
    images = {f"Enemy{index}": _strip(2) for index in range(3)}
    images["EnemyBullet"] = _strip(4)
    return EnemyManager(Assets(images))


def test_levels_wrap_to_second_half():
    assert level_sketch(8) == level_sketch(4)
    assert level_sketch(9) == level_sketch(5)
    assert level_sketch(15) == level_sketch(7)


def test_negative_level_rejected():
    with pytest.raises(ValueError):
        level_sketch(-1)


@pytest.mark.parametrize("level", range(8))
def test_sketch_has_four_rows(level):
    assert len(level_sketch(level).split("\n")) == 4


@pytest.mark.parametrize("level", range(10))
def test_reset_creates_one_enemy_per_digit(manager, level):
    manager.reset(level)
    digits = [c for c in level_sketch(level) if c.isdigit()]
    assert len(manager.enemies) == len(digits)
    assert [enemy.type for enemy in manager.enemies] == [int(c) for c in digits]


def test_first_enemy_position(manager):
    manager.reset(1)
    first = manager.enemies[0]
    assert (first.x, first.y) == (2 * BASE_SIZE, 2 * BASE_SIZE)


def test_level_three_is_all_type_one(manager):
    manager.reset(3)
    assert {enemy.type for enemy in manager.enemies} == {1}


def test_reset_difficulty(manager):
    manager.reset(0)
    assert manager.move_pause == ENEMY_MOVE_PAUSE_START
    assert manager.move_timer == ENEMY_MOVE_PAUSE_START
    assert manager.shoot_chance == ENEMY_SHOOT_CHANCE
    manager.reset(100)
    assert manager.move_pause == ENEMY_MOVE_PAUSE_START_MIN
    assert manager.shoot_chance == ENEMY_SHOOT_CHANCE_MIN


def test_reached_player(manager):
    manager.reset(0)
    lowest = max(enemy.y for enemy in manager.enemies)
    assert not manager.reached_player(lowest + BASE_SIZE // 2)
    assert manager.reached_player(lowest + BASE_SIZE // 2 - 1)


def test_enemies_wait_for_move_timer(manager):
    manager.reset(0)
    start = [(enemy.x, enemy.y) for enemy in manager.enemies]
    rng = _Extreme(low=False)
    for _ in range(ENEMY_MOVE_PAUSE_START):
        manager.update(rng)
    assert [(enemy.x, enemy.y) for enemy in manager.enemies] == start
    manager.update(rng)
    assert manager.enemies[0].x == 2 * BASE_SIZE - ENEMY_MOVE_SPEED
    assert manager.move_timer == ENEMY_MOVE_PAUSE_START


def test_every_enemy_shoots_when_chance_hits(manager):
    manager.reset(0)
    manager.update(_Extreme(low=True))
    assert len(manager.enemy_bullets) == len(manager.enemies)
    assert not manager.enemy_bullets[0].dead


def test_no_shots_when_chance_misses(manager):
    manager.reset(7)
    manager.update(_Extreme(low=False))
    assert manager.enemy_bullets == []


def test_dead_enemies_removed_and_pace_increases(manager):
    manager.reset(1)
    count = len(manager.enemies)
    manager.enemies[0].health = 0
    manager.enemies[1].health = 0
    manager.update(_Extreme(low=False))
    assert len(manager.enemies) == count - 2
    assert manager.move_pause == ENEMY_MOVE_PAUSE_START - 3


def test_draw_tints_enemies(manager):
    manager.reset(0)
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    manager.draw(surface)
    first = manager.enemies[0]
    assert tuple(surface.get_at((first.x, first.y)))[:3] == ENEMY_COLORS[0]


def test_draw_hit_enemy_white(manager):
    manager.reset(0)
    manager.enemies[0].hit()
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    manager.draw(surface)
    first = manager.enemies[0]
    assert tuple(surface.get_at((first.x, first.y)))[:3] == (255, 255, 255)