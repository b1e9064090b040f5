import pytest

from invaders.enemy import Enemy
from invaders.entities import (
    BASE_SIZE,
    ENEMY_BULLET_SPEED,
    ENEMY_HIT_TIMER_DURATION,
    ENEMY_MOVE_SPEED,
    SCREEN_WIDTH,
)


def test_direction_depends_on_row():
    assert Enemy(0, 48, 2 * BASE_SIZE).direction == -1
    assert Enemy(0, 48, 3 * BASE_SIZE).direction == 1


@pytest.mark.parametrize("type_", [0, 1, 2])
def test_health_grows_with_type(type_):
    assert Enemy(type_, 48, 32).health == 1 + type_


def test_snake_path_left_edge_then_down():
    enemy = Enemy(0, 3 * BASE_SIZE, 2 * BASE_SIZE)
    xs = []
    for _ in range(200):
        enemy.move()
        xs.append(enemy.x)
        if enemy.direction == 1:
            break
    assert enemy.direction == 1
    assert enemy.x == BASE_SIZE
    assert enemy.y == 3 * BASE_SIZE
    assert min(xs) >= BASE_SIZE


def test_horizontal_move_is_clamped():
    enemy = Enemy(0, BASE_SIZE + 1, 2 * BASE_SIZE)
    enemy.move()
    assert enemy.x == BASE_SIZE


def test_right_edge_turns_down():
    edge = SCREEN_WIDTH - 2 * BASE_SIZE
    enemy = Enemy(0, edge - 1, 3 * BASE_SIZE)
    enemy.move()
    assert enemy.x == edge
    enemy.move()
    assert enemy.direction == 0
    assert enemy.y == 3 * BASE_SIZE + ENEMY_MOVE_SPEED
    assert enemy.x == edge


@pytest.mark.parametrize("type_, count", [(0, 1), (1, 2), (2, 3)])
def test_shoot_spread(type_, count):
    enemy = Enemy(type_, 64, 48)
    bullets = enemy.shoot()
    assert len(bullets) == count
    assert all(b.step_y == ENEMY_BULLET_SPEED for b in bullets)
    assert sum(b.step_x for b in bullets) == pytest.approx(0)
    assert all((b.x, b.y) == (64, 48) for b in bullets)


def test_hit_lowers_health_after_flash():
    enemy = Enemy(1, 64, 48)
    enemy.hit()
    assert enemy.hit_timer == ENEMY_HIT_TIMER_DURATION
    before = enemy.health
    for _ in range(ENEMY_HIT_TIMER_DURATION - 1):
        enemy.update()
    assert enemy.health == before
    enemy.update()
    assert enemy.health == before - 1
    assert enemy.hit_timer == 0
    enemy.update()
    assert enemy.health == before - 1


def test_health_never_negative():
    enemy = Enemy(0, 64, 48)
    for _ in range(3):
        enemy.hit()
        for _ in range(ENEMY_HIT_TIMER_DURATION):
            enemy.update()
    assert enemy.health == 0


def test_hitbox_inside_sprite():
    enemy = Enemy(2, 80, 64)
    box = enemy.hitbox()
    assert 80 < box.left and box.right < 80 + BASE_SIZE
    assert 64 < box.top and box.bottom < 64 + BASE_SIZE