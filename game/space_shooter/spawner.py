"""
Time-gated enemy spawning with an exponentially shrinking interval
"""

from __future__ import annotations

import random
from typing import Optional

from loguru import logger

from .config import (
    BIG_ENEMY_THRESHOLD,
    ENEMY_COLOR_RANGE,
    ENEMY_HSPEED_RANGE,
    ENEMY_RADIUS_RANGE,
    GAME_WIDTH,
)
from .entities import Enemy
from .utils import randint_below, random_color, uniform
from .world import WorldState


def enemy_health(radius: float) -> int:
    """Large enemies take two hits"""
    return 2 if radius > BIG_ENEMY_THRESHOLD else 1


class SpawnScheduler:
    """Decides when a new enemy appears and rolls its attributes"""

    def __init__(self, rng: random.Random):
        self.rng = rng

    def due(self, world: WorldState, timestamp: float) -> bool:
        return timestamp - world.last_spawn_time > world.spawn_interval

    def update(self, world: WorldState, timestamp: float) -> Optional[Enemy]:
        """Spawn at most one enemy; returns it when spawned"""
        if not self.due(world, timestamp):
            return None

        profile = world.difficulty
        world.last_spawn_time = timestamp
        world.spawn_interval = max(
            profile.spawn_interval_min,
            world.spawn_interval * profile.spawn_decrease_rate,
        )

        enemy = self.make_enemy(world)
        world.enemies.append(enemy)
        logger.debug(
            "spawned enemy r={:.1f} hp={} at t={} (next interval {:.0f}ms)",
            enemy.radius, enemy.health, timestamp, world.spawn_interval,
        )
        return enemy

    def make_enemy(self, world: WorldState) -> Enemy:
        profile = world.difficulty
        color = random_color(self.rng, *ENEMY_COLOR_RANGE)
        radius = uniform(self.rng, *ENEMY_RADIUS_RANGE)
        speed = uniform(self.rng, profile.enemy_speed_min, profile.enemy_speed_max)

        # 0 stationary, 1 drift left, 2 drift right
        movement = randint_below(self.rng, 0, 3)
        direction = (0, -1, 1)[movement]
        horizontal_speed = uniform(self.rng, *ENEMY_HSPEED_RANGE) * direction

        return Enemy(
            x=uniform(self.rng, radius, GAME_WIDTH - radius),
            y=-radius,
            radius=radius,
            color=color,
            speed=speed,
            horizontal_speed=horizontal_speed,
            health=enemy_health(radius),
        )
