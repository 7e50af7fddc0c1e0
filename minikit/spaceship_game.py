"""Windowed space shooter: dodge and shoot the enemies drifting down."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from minikit.spaceship_entities import (  # noqa: E402
    ENEMY_SIZE,
    PLAYER_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Controls,
    EnemyManager,
    Player,
)

FRAME_RATE = 60
SPAWN_RATE = 3.0
HEALTH_BAR_WIDTH = 200
HEALTH_BAR_HEIGHT = 20
RED = (255, 0, 0)
BLACK = (0, 0, 0)
GREY = (50, 50, 50)


def read_controls(pressed: Sequence[bool] | Mapping[int, bool]) -> Controls:
    """Turn a pressed-key table, indexed by pygame key codes, into controls."""
    return Controls(
        left=bool(pressed[pygame.K_LEFT] or pressed[pygame.K_a]),
        right=bool(pressed[pygame.K_RIGHT] or pressed[pygame.K_d]),
        up=bool(pressed[pygame.K_UP] or pressed[pygame.K_w]),
        down=bool(pressed[pygame.K_DOWN] or pressed[pygame.K_s]),
        shoot=bool(pressed[pygame.K_SPACE]),
    )


def step(player: Player, enemy_manager: EnemyManager, delta_time: float, controls: Controls) -> bool:
    """Advance the game one frame; return False once the player is out of health."""
    player.update(delta_time, controls)
    player.process_shooting(delta_time, controls)
    player.update_bullets(delta_time)
    enemy_manager.update(delta_time, player)
    return player.health > 0


def _load_image(path: Path, size: float) -> pygame.Surface | None:
    try:
        image = pygame.image.load(str(path)).convert_alpha()
    except (pygame.error, FileNotFoundError):
        print(f"Error loading texture {path}!", file=sys.stderr)
        return None
    return pygame.transform.smoothscale(image, (int(size), int(size)))


def _draw_scene(
    screen: pygame.Surface,
    player: Player,
    enemy_manager: EnemyManager,
    player_image: pygame.Surface | None,
    enemy_image: pygame.Surface | None,
) -> None:
    screen.fill(BLACK)
    ship = player.bounds()
    if player_image is not None:
        screen.blit(player_image, (ship.x, ship.y))
    else:
        pygame.draw.rect(screen, RED, pygame.Rect(ship.x, ship.y, ship.width, ship.height))

    pygame.draw.rect(screen, GREY, pygame.Rect(10, 10, HEALTH_BAR_WIDTH, HEALTH_BAR_HEIGHT))
    fill = int(HEALTH_BAR_WIDTH * player.health_ratio())
    pygame.draw.rect(screen, RED, pygame.Rect(10, 10, fill, HEALTH_BAR_HEIGHT))

    for enemy in enemy_manager.enemies:
        area = enemy.bounds()
        if enemy_image is not None:
            screen.blit(enemy_image, (area.x, area.y))
        else:
            pygame.draw.rect(screen, (0, 200, 0), pygame.Rect(area.x, area.y, area.width, area.height))

    for bullet in player.bullets:
        if bullet.active:
            centre = (bullet.x + bullet.radius, bullet.y + bullet.radius)
            pygame.draw.circle(screen, RED, centre, bullet.radius)


def main(argv: list[str] | None = None) -> int:
    """Play until the window is closed, showing GAME OVER once health runs out."""
    parser = argparse.ArgumentParser(prog="spaceship", description="Play the space shooter.")
    parser.add_argument("--resources", default="resources", help="directory holding images and font")
    args = parser.parse_args(argv)
    resources = Path(args.resources)

    pygame.init()
    try:
        screen = pygame.display.set_mode((int(WINDOW_WIDTH), int(WINDOW_HEIGHT)))
        pygame.display.set_caption("Space Shooter")
        clock = pygame.time.Clock()

        font_path = resources / "Arial.ttf"
        try:
            font = pygame.font.Font(str(font_path), 64)
        except (OSError, FileNotFoundError):
            print("Failed to load font", file=sys.stderr)
            font = pygame.font.Font(None, 64)
        font.set_bold(True)
        game_over_text = font.render("GAME OVER", True, RED)
        game_over_pos = game_over_text.get_rect(center=(WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2))

        player_image = _load_image(resources / "spaceship.png", PLAYER_SIZE)
        enemy_image = _load_image(resources / "enemy.png", ENEMY_SIZE)

        player = Player()
        enemy_manager = EnemyManager(SPAWN_RATE)
        running = True
        game_over = False
        clock.tick()

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            delta_time = clock.tick(FRAME_RATE) / 1000.0

            if not game_over:
                controls = read_controls(pygame.key.get_pressed())
                if step(player, enemy_manager, delta_time, controls):
                    _draw_scene(screen, player, enemy_manager, player_image, enemy_image)
                else:
                    game_over = True
            if game_over:
                screen.fill(BLACK)
                screen.blit(game_over_text, game_over_pos)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())