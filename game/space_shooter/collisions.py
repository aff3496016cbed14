"""
Collision detection and resolution
----------------------------------
Five interaction checks run in a fixed order every tick:

  1. player vs enemy          (shield absorbs, otherwise game over)
  2. player vs enemy bullet   (shield absorbs, otherwise game over)
  3. player bullet vs enemy   (damage, score, drops)
  4. player vs weapon power-up
  5. player vs shield pickup

Checks 1 and 2 end the tick's collision pass as soon as one of them fires,
so the order is part of the game rules.
"""

from __future__ import annotations

import math
import random
from typing import Dict

from loguru import logger

from .config import BIG_ENEMY_THRESHOLD, MAX_WEAPON_LEVEL
from .effects import EffectGenerator
from .entities import Enemy, PowerUp, ShieldPickup
from .utils import within
from .world import WorldState


def new_events() -> Dict[str, float]:
    """Per-tick event tally shared by the engine and the reward function"""
    return {
        "spawn": 0,
        "shot": 0,
        "enemy_shot": 0,
        "hit": 0,
        "kill": 0,
        "score": 0,
        "weapon_pickup": 0,
        "shield_pickup": 0,
        "shield_break": 0,
        "game_over": 0,
    }


class CollisionSystem:
    """Applies the collision rules to a world, tallying outcomes into `events`"""

    def __init__(self, rng: random.Random, effects: EffectGenerator):
        self.rng = rng
        self.effects = effects

    def resolve(self, world: WorldState, events: Dict[str, float]) -> bool:
        """
        Run all checks once. Returns True when the player was destroyed.
        """
        if self._player_vs_enemies(world, events):
            return bool(events["game_over"])
        if self._player_vs_enemy_bullets(world, events):
            return bool(events["game_over"])
        self._bullets_vs_enemies(world, events)
        self._player_vs_power_ups(world, events)
        self._player_vs_shields(world, events)
        return False

    # ----------------------------
    # Threats to the player
    # ----------------------------

    def _break_shield(self, world: WorldState, events: Dict[str, float]):
        player = world.player
        player.has_shield = False
        events["shield_break"] += 1
        self.effects.shield_break(world.particles, player.x, player.y)

    def _player_vs_enemies(self, world: WorldState, events: Dict[str, float]) -> bool:
        player = world.player
        for i, enemy in enumerate(world.enemies):
            if not within(player.x, player.y, enemy.x, enemy.y, enemy.radius + player.half_width):
                continue
            if player.has_shield:
                self.effects.explosion(world.particles, enemy.x, enemy.y, enemy.color)
                del world.enemies[i]
                world.enemies_defeated += 1
                events["kill"] += 1
                self._break_shield(world, events)
                logger.debug("shield absorbed enemy collision")
            else:
                events["game_over"] = 1
            return True
        return False

    def _player_vs_enemy_bullets(self, world: WorldState, events: Dict[str, float]) -> bool:
        player = world.player
        # looser hitbox against bullets
        reach = player.half_width / 3
        for i, bullet in enumerate(world.enemy_bullets):
            if not within(player.x, player.y, bullet.x, bullet.y, bullet.radius + reach):
                continue
            if player.has_shield:
                del world.enemy_bullets[i]
                self._break_shield(world, events)
                logger.debug("shield absorbed enemy bullet")
            else:
                events["game_over"] = 1
            return True
        return False

    # ----------------------------
    # Player offence
    # ----------------------------

    def _bullets_vs_enemies(self, world: WorldState, events: Dict[str, float]):
        bullets = world.bullets
        enemies = world.enemies
        for i in range(len(bullets) - 1, -1, -1):
            bullet = bullets[i]
            for j in range(len(enemies) - 1, -1, -1):
                enemy = enemies[j]
                if not within(bullet.x, bullet.y, enemy.x, enemy.y, enemy.radius + bullet.width / 2):
                    continue

                enemy.health -= 1
                del bullets[i]
                events["hit"] += 1
                self.effects.small_burst(world.particles, bullet.x, bullet.y, enemy.color)

                if enemy.health <= 0:
                    self._destroy_enemy(world, enemy, events)
                    del enemies[j]
                break

    def _destroy_enemy(self, world: WorldState, enemy: Enemy, events: Dict[str, float]):
        profile = world.difficulty
        points = math.floor(enemy.radius * profile.score_multiplier)
        world.score += points
        world.enemies_defeated += 1
        events["score"] += points
        events["kill"] += 1
        self.effects.explosion(world.particles, enemy.x, enemy.y, enemy.color)

        if self.rng.random() < profile.weapon_drop_chance and world.weapon_level < MAX_WEAPON_LEVEL:
            world.power_ups.append(PowerUp(x=enemy.x, y=enemy.y))
            logger.debug("weapon power-up dropped at ({:.0f}, {:.0f})", enemy.x, enemy.y)

        if enemy.radius > BIG_ENEMY_THRESHOLD and self.rng.random() < profile.shield_drop_chance:
            world.shields.append(ShieldPickup(x=enemy.x, y=enemy.y))
            logger.debug("shield pickup dropped at ({:.0f}, {:.0f})", enemy.x, enemy.y)

    # ----------------------------
    # Pickups
    # ----------------------------

    def _player_vs_power_ups(self, world: WorldState, events: Dict[str, float]):
        player = world.player
        remaining = []
        for p in world.power_ups:
            if not within(player.x, player.y, p.x, p.y, p.radius + player.half_width):
                remaining.append(p)
                continue
            if world.weapon_level < MAX_WEAPON_LEVEL:
                world.weapon_level += 1
                events["weapon_pickup"] += 1
                self.effects.power_up(world.particles, player.x, player.y)
                logger.debug("weapon level -> {}", world.weapon_level)
        world.power_ups = remaining

    def _player_vs_shields(self, world: WorldState, events: Dict[str, float]):
        player = world.player
        remaining = []
        for s in world.shields:
            if not within(player.x, player.y, s.x, s.y, s.radius + player.half_width):
                remaining.append(s)
                continue
            if not player.has_shield:
                player.has_shield = True
                world.shield_count += 1
                events["shield_pickup"] += 1
                self.effects.shield_gained(world.particles, player.x, player.y)
        world.shields = remaining
