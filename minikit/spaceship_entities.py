"""Game objects for a top-down space shooter: player, bullets and enemies."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

WINDOW_WIDTH = 800.0
WINDOW_HEIGHT = 600.0

BULLET_RADIUS = 5.0
BULLET_SPEED = 300.0

ENEMY_SIZE = 30.0
ENEMY_START = (400.0, 50.0)
ENEMY_SPEED = 100.0
ENEMY_DOWNWARD_SPEED = 20.0

PLAYER_SIZE = 64.0
PLAYER_START = (400.0, 500.0)
PLAYER_SPEED = 200.0
PLAYER_MAX_HEALTH = 3
SHOOT_COOLDOWN = 0.5


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        """Whether the two rectangles overlap by a non-empty area."""
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return left < right and top < bottom


@dataclass(frozen=True)
class Controls:
    """Which movement and fire inputs are held during a frame."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    shoot: bool = False


@dataclass
class Bullet:
    """A round projectile whose (x, y) is the top-left of its bounding box."""

    x: float
    y: float
    radius: float = BULLET_RADIUS
    velocity_x: float = 0.0
    velocity_y: float = -BULLET_SPEED
    active: bool = True

    def update(self, delta_time: float) -> None:
        """Move by the velocity over ``delta_time`` seconds."""
        self.x += self.velocity_x * delta_time
        self.y += self.velocity_y * delta_time

    def bounds(self) -> Rect:
        """The bullet's bounding box."""
        diameter = self.radius * 2
        return Rect(self.x, self.y, diameter, diameter)

    def deactivate(self) -> None:
        """Mark the bullet as spent."""
        self.active = False


class Enemy:
    """An enemy that drifts down and bounces between the side edges.

    ``texture_size`` is the unscaled image size; edge bouncing and respawn
    placement use it, while the drawn and collided size is ``ENEMY_SIZE``
    centred on the position.
    """

    def __init__(self, texture_size: tuple[float, float] = (ENEMY_SIZE, ENEMY_SIZE)) -> None:
        self.texture_width, self.texture_height = texture_size
        self.x, self.y = ENEMY_START
        self.speed = ENEMY_SPEED
        self.downward_speed = ENEMY_DOWNWARD_SPEED

    def update(self, delta_time: float) -> None:
        """Advance the enemy, reversing direction at the window edges."""
        self.x += self.speed * delta_time
        self.y += self.downward_speed * delta_time
        half = self.texture_width / 2
        if self.x - half < 0 or self.x + half > WINDOW_WIDTH:
            self.speed = -self.speed
            self.x = max(half, min(self.x, WINDOW_WIDTH - half))

    def reset(self, rng: random.Random | None = None) -> None:
        """Place the enemy at the top of the window at a random column."""
        chooser = rng if rng is not None else random
        self.y = 0.0
        self.x = float(chooser.randrange(int(WINDOW_WIDTH - self.texture_width)))

    def bounds(self) -> Rect:
        """The enemy's bounding box on screen."""
        half = ENEMY_SIZE / 2
        return Rect(self.x - half, self.y - half, ENEMY_SIZE, ENEMY_SIZE)


@dataclass
class Player:
    """The player's ship, its health and the bullets it has fired."""

    x: float = PLAYER_START[0]
    y: float = PLAYER_START[1]
    speed: float = PLAYER_SPEED
    health: int = PLAYER_MAX_HEALTH
    max_health: int = PLAYER_MAX_HEALTH
    shoot_cooldown: float = 0.0
    shoot_cooldown_time: float = SHOOT_COOLDOWN
    bullets: list[Bullet] = field(default_factory=list)

    def update(self, delta_time: float, controls: Controls) -> None:
        """Move according to the held direction keys."""
        dx = dy = 0.0
        if controls.left:
            dx -= self.speed
        if controls.right:
            dx += self.speed
        if controls.up:
            dy -= self.speed
        if controls.down:
            dy += self.speed
        self.x += dx * delta_time
        self.y += dy * delta_time

    def process_shooting(self, delta_time: float, controls: Controls) -> Bullet | None:
        """Fire a bullet from the ship's nose when allowed; return it if fired."""
        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= delta_time
        if not (controls.shoot and self.shoot_cooldown <= 0):
            return None
        area = self.bounds()
        bullet = Bullet(area.x + area.width / 2 - BULLET_RADIUS, area.y)
        self.bullets.append(bullet)
        self.shoot_cooldown = self.shoot_cooldown_time
        return bullet

    def update_bullets(self, delta_time: float) -> None:
        """Move active bullets and drop those that have left the top of the window."""
        for bullet in self.bullets:
            if bullet.active:
                bullet.update(delta_time)
                if bullet.y < 0:
                    bullet.deactivate()
        self.bullets = [b for b in self.bullets if b.y + b.radius * 2 >= 0]

    def deduct_health(self, amount: int) -> None:
        """Lose ``amount`` health, never going below zero."""
        self.health = max(0, self.health - amount)
        print(f"Player health: {self.health}", flush=True)

    def bounds(self) -> Rect:
        """The ship's bounding box, centred on its position."""
        half = PLAYER_SIZE / 2
        return Rect(self.x - half, self.y - half, PLAYER_SIZE, PLAYER_SIZE)

    def health_ratio(self) -> float:
        """Remaining health as a fraction of the maximum."""
        return self.health / self.max_health


class EnemyManager:
    """Spawns enemies at a fixed interval and resolves their collisions."""

    def __init__(
        self,
        spawn_rate: float = 1.0,
        rng: random.Random | None = None,
        texture_size: tuple[float, float] = (ENEMY_SIZE, ENEMY_SIZE),
    ) -> None:
        self.spawn_rate = spawn_rate
        self.spawn_timer = 0.0
        self.enemies: list[Enemy] = []
        self._rng = rng
        self._texture_size = texture_size

    def spawn_enemy(self) -> Enemy:
        """Add a new enemy at the top of the window and return it."""
        enemy = Enemy(self._texture_size)
        enemy.reset(self._rng)
        self.enemies.append(enemy)
        return enemy

    def update(self, delta_time: float, player: Player) -> int:
        """Spawn, move and collide enemies; return how many bullets hit one."""
        self.spawn_timer -= delta_time
        if self.spawn_timer <= 0:
            self.spawn_enemy()
            self.spawn_timer = self.spawn_rate

        for enemy in self.enemies:
            enemy.update(delta_time)

        hits = 0
        for bullet in player.bullets:
            if not bullet.active:
                continue
            area = bullet.bounds()
            survivors = []
            for enemy in self.enemies:
                if area.intersects(enemy.bounds()):
                    bullet.deactivate()
                    hits += 1
                else:
                    survivors.append(enemy)
            self.enemies = survivors

        remaining = []
        for enemy in self.enemies:
            if enemy.bounds().y >= WINDOW_HEIGHT:
                player.deduct_health(1)
            else:
                remaining.append(enemy)
        self.enemies = remaining
        return hits