"""
World state aggregate
---------------------
Owns every entity collection plus the progression counters for one run.
Renderers and the Gymnasium wrapper read it; only the engine systems mutate it.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .config import (
    GAME_HEIGHT,
    GAME_WIDTH,
    PLAYER_START_Y_OFFSET,
    STAR_COUNT,
    CharacterProfile,
    DifficultyProfile,
)
from .entities import (
    Bullet,
    Enemy,
    EnemyBullet,
    Particle,
    Player,
    PowerUp,
    ShieldPickup,
    Star,
)
from .utils import uniform


class GameStatus(str, Enum):
    NOT_RUNNING = "not_running"
    RUNNING = "running"
    GAME_OVER = "game_over"


def make_player(character: CharacterProfile) -> Player:
    """Fresh player ship for the given character"""
    return Player(
        x=GAME_WIDTH / 2,
        y=GAME_HEIGHT - PLAYER_START_Y_OFFSET,
        color=character.color,
        fire_rate=character.fire_rate,
        has_shield=character.start_with_shield,
    )


def make_stars(rng: random.Random, count: int = STAR_COUNT) -> List[Star]:
    """Scatter background stars over the playfield"""
    return [
        Star(
            x=uniform(rng, 0, GAME_WIDTH),
            y=uniform(rng, 0, GAME_HEIGHT),
            size=uniform(rng, 1, 4),
            speed=uniform(rng, 0.5, 2.5),
            brightness=uniform(rng, 0.2, 1.0),
        )
        for _ in range(count)
    ]


@dataclass
class WorldState:
    """All mutable state of a single run"""
    difficulty: DifficultyProfile
    character: CharacterProfile
    player: Player
    bullets: List[Bullet] = field(default_factory=list)
    enemy_bullets: List[EnemyBullet] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    power_ups: List[PowerUp] = field(default_factory=list)
    shields: List[ShieldPickup] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    stars: List[Star] = field(default_factory=list)

    score: int = 0
    enemies_defeated: int = 0
    weapon_level: int = 1
    shield_count: int = 0
    spawn_interval: float = 0.0
    last_spawn_time: float = 0.0
    last_tick_time: Optional[float] = None
    status: GameStatus = GameStatus.NOT_RUNNING

    @classmethod
    def new(
        cls,
        difficulty: DifficultyProfile,
        character: CharacterProfile,
        rng: Optional[random.Random] = None,
    ) -> "WorldState":
        """World with every counter at its run-start default"""
        return cls(
            difficulty=difficulty,
            character=character,
            player=make_player(character),
            stars=make_stars(rng) if rng is not None else [],
            shield_count=1 if character.start_with_shield else 0,
            spawn_interval=difficulty.spawn_interval_initial,
        )

    @property
    def running(self) -> bool:
        return self.status is GameStatus.RUNNING

    def entity_counts(self) -> dict:
        return {
            "bullets": len(self.bullets),
            "enemy_bullets": len(self.enemy_bullets),
            "enemies": len(self.enemies),
            "power_ups": len(self.power_ups),
            "shields": len(self.shields),
            "particles": len(self.particles),
        }
