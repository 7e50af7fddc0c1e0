import random

import pytest

from minikit.spaceship_entities import (
    WINDOW_WIDTH,
    Bullet,
    Controls,
    Enemy,
    EnemyManager,
    Player,
    Rect,
)


def test_rect_overlap_detected():
    assert Rect(0, 0, 10, 10).intersects(Rect(5, 5, 10, 10))
    assert Rect(5, 5, 10, 10).intersects(Rect(0, 0, 10, 10))


def test_rect_touching_edges_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 10, 10))
    assert not Rect(0, 0, 10, 10).intersects(Rect(0, 20, 10, 10))


def test_bullet_moves_upward():
    bullet = Bullet(100.0, 200.0)
    bullet.update(1.0)
    assert bullet.x == 100.0
    assert bullet.y == 200.0 - 300.0


def test_bullet_bounds_and_deactivate():
    bullet = Bullet(10.0, 20.0)
    assert bullet.bounds() == Rect(10.0, 20.0, bullet.radius * 2, bullet.radius * 2)
    bullet.deactivate()
    assert bullet.active is False


def test_player_moves_right():
    player = Player()
    start_x, start_y = player.x, player.y
    player.update(0.5, Controls(right=True))
    assert player.x - start_x == pytest.approx(player.speed * 0.5)
    assert player.y == start_y


def test_opposite_controls_cancel():
    player = Player()
    start = (player.x, player.y)
    player.update(1.0, Controls(left=True, right=True, up=True, down=True))
    assert (player.x, player.y) == start


def test_shooting_spawns_bullet_at_ship_nose():
    player = Player()
    bullet = player.process_shooting(0.016, Controls(shoot=True))
    assert player.bullets == [bullet]
    assert bullet.x + bullet.radius == pytest.approx(player.x)
    assert bullet.y == player.bounds().y


def test_shooting_respects_cooldown():
    player = Player()
    shoot = Controls(shoot=True)
    player.process_shooting(0.1, shoot)
    assert player.process_shooting(0.1, shoot) is None
    assert len(player.bullets) == 1
    player.process_shooting(player.shoot_cooldown_time, shoot)
    assert len(player.bullets) == 2


def test_no_shot_without_trigger():
    player = Player()
    assert player.process_shooting(1.0, Controls()) is None
    assert player.bullets == []


def test_bullets_leaving_screen_are_deactivated_then_removed():
    player = Player(bullets=[Bullet(0.0, 1.0)])
    player.update_bullets(0.01)
    assert len(player.bullets) == 1
    assert player.bullets[0].active is False
    player.bullets[0].y = -50.0
    player.update_bullets(0.01)
    assert player.bullets == []


def test_deduct_health_clamps_at_zero():
    player = Player()
    player.deduct_health(1)
    assert player.health == player.max_health - 1
    player.deduct_health(10)
    assert player.health == 0
    assert player.health_ratio() == 0.0


def test_full_health_ratio():
    assert Player().health_ratio() == 1.0


def test_enemy_bounces_off_right_edge():
    enemy = Enemy()
    enemy.x = WINDOW_WIDTH - 1
    enemy.update(0.1)
    assert enemy.speed < 0
    assert enemy.bounds().right <= WINDOW_WIDTH


def test_enemy_drifts_down():
    enemy = Enemy()
    start_y = enemy.y
    enemy.update(1.0)
    assert enemy.y - start_y == pytest.approx(enemy.downward_speed)


def test_enemy_reset_places_at_top_within_window():
    rng = random.Random(1234)
    enemy = Enemy()
    for _ in range(50):
        enemy.reset(rng)
        assert enemy.y == 0.0
        assert 0 <= enemy.x < WINDOW_WIDTH - enemy.texture_width


def test_manager_spawns_on_first_update():
    manager = EnemyManager(3.0, rng=random.Random(1))
    manager.update(0.0, Player())
    assert len(manager.enemies) == 1
    assert manager.spawn_timer == 3.0


def test_manager_bullet_destroys_enemy():
    manager = EnemyManager(100.0, rng=random.Random(2))
    manager.spawn_timer = 100.0
    enemy = Enemy()
    manager.enemies.append(enemy)
    player = Player(bullets=[Bullet(enemy.x - 5, enemy.y - 5)])
    hits = manager.update(0.0, player)
    assert hits == 1
    assert manager.enemies == []
    assert player.bullets[0].active is False


def test_manager_enemy_reaching_bottom_costs_health():
    manager = EnemyManager(100.0)
    manager.spawn_timer = 100.0
    enemy = Enemy()
    enemy.y = 700.0
    manager.enemies.append(enemy)
    player = Player()
    manager.update(0.0, player)
    assert manager.enemies == []
    assert player.health == player.max_health - 1