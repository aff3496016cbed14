"""
Per-tick movement integration and off-screen pruning.
Every function advances one entity kind by a single tick in place.
"""

from __future__ import annotations

import math
import random
from typing import List

from .config import ENEMY_BULLET_RADIUS, GAME_HEIGHT, GAME_WIDTH, PARTICLE_ALPHA_DECAY
from .entities import Bullet, EnemyBullet, Particle, Player, Star
from .utils import clamp, uniform
from .world import WorldState


def move_player(player: Player, speed: float, left: bool, right: bool):
    if left:
        player.x -= speed
    if right:
        player.x += speed
    hw = player.half_width
    player.x = clamp(player.x, hw, GAME_WIDTH - hw)


def bullet_on_screen(b: Bullet) -> bool:
    return (
        b.y + b.height > 0
        and b.x + b.width / 2 > 0
        and b.x - b.width / 2 < GAME_WIDTH
    )


def move_bullets(bullets: List[Bullet]) -> List[Bullet]:
    for b in bullets:
        b.x += math.sin(b.angle) * b.speed
        b.y -= math.cos(b.angle) * b.speed
    return [b for b in bullets if bullet_on_screen(b)]


def move_enemy_bullets(bullets: List[EnemyBullet]) -> List[EnemyBullet]:
    for b in bullets:
        b.y += b.speed
    return [b for b in bullets if b.y - b.radius < GAME_HEIGHT]


def move_enemies(world: WorldState, rng: random.Random) -> int:
    """Move enemies, let them shoot, prune. Returns shots fired."""
    profile = world.difficulty
    shots = 0
    for e in world.enemies:
        e.y += e.speed

        if e.horizontal_speed:
            e.x += e.horizontal_speed
            if e.x - e.radius < 0 or e.x + e.radius > GAME_WIDTH:
                e.horizontal_speed = -e.horizontal_speed

        if rng.random() < profile.enemy_fire_chance:
            world.enemy_bullets.append(EnemyBullet(
                x=e.x,
                y=e.y + e.radius,
                speed=profile.enemy_bullet_speed,
                radius=ENEMY_BULLET_RADIUS,
            ))
            shots += 1

    world.enemies = [e for e in world.enemies if e.alive and e.y - e.radius < GAME_HEIGHT]
    return shots


def move_falling(items: list) -> list:
    """Power-ups and shield pickups drift straight down"""
    for p in items:
        p.y += p.speed
    return [p for p in items if p.y - p.radius < GAME_HEIGHT]


def update_particles(particles: List[Particle]) -> List[Particle]:
    for p in particles:
        p.radius += p.speed
        p.alpha -= PARTICLE_ALPHA_DECAY
    return [p for p in particles if p.alpha > 0]


def move_stars(stars: List[Star], rng: random.Random):
    for s in stars:
        s.y += s.speed
        if s.y > GAME_HEIGHT:
            s.y = 0.0
            s.x = uniform(rng, 0, GAME_WIDTH)


def advance(world: WorldState, rng: random.Random) -> int:
    """
    Advance every non-player entity by one tick.

    Returns the number of enemy bullets fired this tick.
    """
    move_stars(world.stars, rng)
    world.bullets = move_bullets(world.bullets)
    enemy_shots = move_enemies(world, rng)
    world.enemy_bullets = move_enemy_bullets(world.enemy_bullets)
    world.power_ups = move_falling(world.power_ups)
    world.shields = move_falling(world.shields)
    world.particles = update_particles(world.particles)
    return enemy_shots
