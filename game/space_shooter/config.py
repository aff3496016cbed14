"""
Static configuration tables for the space shooter
Difficulty and character profiles, playfield constants and environment defaults
"""

from dataclasses import dataclass
from typing import Dict, Tuple

Color = Tuple[int, int, int]

# Playfield
GAME_WIDTH = 600
GAME_HEIGHT = 800
STAR_COUNT = 100

# Progression
MAX_WEAPON_LEVEL = 5
BIG_ENEMY_THRESHOLD = 20  # radius strictly above this -> large enemy
DEFAULT_PLAYER_NAME = "Anonymous"
MAX_RANKINGS = 10

# Player body
PLAYER_WIDTH = 35.0
PLAYER_HEIGHT = 35.0
PLAYER_START_Y_OFFSET = 100.0

# Enemy generation ranges ([lo, hi))
ENEMY_RADIUS_RANGE = (10.0, 25.0)
ENEMY_HSPEED_RANGE = (1.0, 3.0)
ENEMY_COLOR_RANGE = (100, 255)

# Projectiles and pickups
ENEMY_BULLET_RADIUS = 5.0
POWER_UP_RADIUS = 10.0
POWER_UP_SPEED = 2.0
SHIELD_RADIUS = 12.0
SHIELD_SPEED = 1.5

# Particles
PARTICLE_ALPHA_DECAY = 0.02

# Effect colours
CYAN = (0, 255, 255)
SHIELD_GREEN = (0, 255, 153)


class UnknownProfileError(ValueError):
    """Raised when a difficulty or character name is not in the tables."""


@dataclass(frozen=True)
class DifficultyProfile:
    """Enemy pacing and reward settings for one difficulty level"""
    name: str
    enemy_speed_min: float
    enemy_speed_max: float
    spawn_interval_initial: float  # ms
    spawn_interval_min: float  # ms
    spawn_decrease_rate: float
    enemy_fire_chance: float  # per enemy per tick
    enemy_bullet_speed: float
    weapon_drop_chance: float
    shield_drop_chance: float
    score_multiplier: float

    def __post_init__(self):
        if self.enemy_speed_min > self.enemy_speed_max:
            raise ValueError(f"{self.name}: enemy_speed_min > enemy_speed_max")
        if not 0 < self.spawn_interval_min <= self.spawn_interval_initial:
            raise ValueError(f"{self.name}: spawn intervals must satisfy 0 < min <= initial")
        if not 0 < self.spawn_decrease_rate <= 1:
            raise ValueError(f"{self.name}: spawn_decrease_rate must be in (0, 1]")
        for field_name in ("enemy_fire_chance", "weapon_drop_chance", "shield_drop_chance"):
            p = getattr(self, field_name)
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"{self.name}: {field_name} must be a probability, got {p}")


@dataclass(frozen=True)
class CharacterProfile:
    """Ship handling settings for one selectable character"""
    name: str
    speed: float
    fire_rate: float  # ms between shots
    bullet_speed: float
    color: Color
    description: str = ""
    bullet_size_multiplier: float = 1.0
    start_with_shield: bool = False

    def __post_init__(self):
        if self.speed <= 0 or self.bullet_speed <= 0:
            raise ValueError(f"{self.name}: speeds must be positive")
        if self.fire_rate < 0:
            raise ValueError(f"{self.name}: fire_rate must be >= 0")
        if self.bullet_size_multiplier <= 0:
            raise ValueError(f"{self.name}: bullet_size_multiplier must be positive")


DIFFICULTIES: Dict[str, DifficultyProfile] = {
    "EASY": DifficultyProfile(
        name="Easy",
        enemy_speed_min=1.5,
        enemy_speed_max=3.5,
        spawn_interval_initial=1200,
        spawn_interval_min=500,
        spawn_decrease_rate=0.97,
        enemy_fire_chance=0.003,
        enemy_bullet_speed=5,
        weapon_drop_chance=0.3,
        shield_drop_chance=0.15,
        score_multiplier=0.8,
    ),
    "MEDIUM": DifficultyProfile(
        name="Medium",
        enemy_speed_min=2,
        enemy_speed_max=5,
        spawn_interval_initial=1000,
        spawn_interval_min=300,
        spawn_decrease_rate=0.95,
        enemy_fire_chance=0.005,
        enemy_bullet_speed=6,
        weapon_drop_chance=0.2,
        shield_drop_chance=0.1,
        score_multiplier=1.0,
    ),
    "HARD": DifficultyProfile(
        name="Hard",
        enemy_speed_min=3,
        enemy_speed_max=7,
        spawn_interval_initial=800,
        spawn_interval_min=200,
        spawn_decrease_rate=0.93,
        enemy_fire_chance=0.008,
        enemy_bullet_speed=7,
        weapon_drop_chance=0.15,
        shield_drop_chance=0.07,
        score_multiplier=1.5,
    ),
}

CHARACTERS: Dict[str, CharacterProfile] = {
    "STANDARD": CharacterProfile(
        name="Standard",
        speed=12,
        fire_rate=300,
        bullet_speed=10,
        color=(0, 255, 0),
        description="Balanced",
    ),
    "SPEED": CharacterProfile(
        name="Speed",
        speed=18,
        fire_rate=250,
        bullet_speed=12,
        color=(0, 255, 255),
        description="High-speed movement",
    ),
    "POWER": CharacterProfile(
        name="Power",
        speed=10,
        fire_rate=350,
        bullet_speed=9,
        color=(255, 85, 0),
        description="High heat",
        bullet_size_multiplier=1.5,
    ),
    "DEFENSE": CharacterProfile(
        name="Defense",
        speed=9,
        fire_rate=400,
        bullet_speed=8,
        color=(0, 102, 255),
        description="High durability",
        start_with_shield=True,
    ),
}


def get_difficulty(name: str) -> DifficultyProfile:
    """Look up a difficulty profile by name (case-insensitive)"""
    try:
        return DIFFICULTIES[name.strip().upper()]
    except KeyError:
        raise UnknownProfileError(
            f"Unknown difficulty: {name!r} (expected one of {', '.join(DIFFICULTIES)})"
        ) from None


def get_character(name: str) -> CharacterProfile:
    """Look up a character profile by name (case-insensitive)"""
    try:
        return CHARACTERS[name.strip().upper()]
    except KeyError:
        raise UnknownProfileError(
            f"Unknown character: {name!r} (expected one of {', '.join(CHARACTERS)})"
        ) from None


# ==============================================================================
# ENVIRONMENT DEFAULTS
# ==============================================================================

ENV_CONFIG = {
    "difficulty": "medium",
    "character": "standard",
    "fps": 60,
    "max_steps": 3600,  # 60 seconds at 60 FPS
    "k_enemies": 5,
    "m_enemy_bullets": 5,
}

# Reward shaping for the Gymnasium wrapper
REWARD_CONFIG = {
    "name": "baseline",
    "description": "Score-driven reward with survival pressure",
    "R_SCORE": 0.05,         # per point of score gained
    "R_KILL": 1.0,           # per enemy destroyed
    "R_HIT": 0.2,            # per bullet hit
    "R_WEAPON_PICKUP": 1.0,  # per weapon level gained
    "R_SHIELD_PICKUP": 1.0,  # per shield gained
    "R_SHIELD_BREAK": 1.0,   # penalty when the shield absorbs a hit
    "R_SHOT": 0.005,         # penalty per volley fired
    "R_TIME": 0.001,         # small time penalty
    "R_DEATH": 10.0,         # game over penalty
}
