"""
Game entity dataclasses
"""

from dataclasses import dataclass

from .config import (
    ENEMY_BULLET_RADIUS,
    PLAYER_HEIGHT,
    PLAYER_WIDTH,
    POWER_UP_RADIUS,
    POWER_UP_SPEED,
    SHIELD_RADIUS,
    SHIELD_SPEED,
    Color,
)


@dataclass
class Player:
    """Player ship; (x, y) is the nose of the ship"""
    x: float
    y: float
    color: Color
    fire_rate: float
    width: float = PLAYER_WIDTH
    height: float = PLAYER_HEIGHT
    last_fire_time: float = float("-inf")  # never fired -> no cooldown
    has_shield: bool = False

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2


@dataclass
class Bullet:
    """Player projectile; angle 0 flies straight up"""
    x: float
    y: float
    width: float
    height: float
    speed: float
    angle: float = 0.0  # radians, positive deflects right


@dataclass
class EnemyBullet:
    """Enemy projectile falling straight down"""
    x: float
    y: float
    speed: float
    radius: float = ENEMY_BULLET_RADIUS


@dataclass
class Enemy:
    """Descending enemy"""
    x: float
    y: float
    radius: float
    color: Color
    speed: float  # px/tick downward
    horizontal_speed: float = 0.0  # signed, 0 = no drift
    health: int = 1

    @property
    def alive(self) -> bool:
        return self.health > 0


@dataclass
class PowerUp:
    """Weapon upgrade pickup"""
    x: float
    y: float
    radius: float = POWER_UP_RADIUS
    speed: float = POWER_UP_SPEED


@dataclass
class ShieldPickup:
    """Shield pickup, only dropped by large enemies"""
    x: float
    y: float
    radius: float = SHIELD_RADIUS
    speed: float = SHIELD_SPEED


@dataclass
class Particle:
    """Cosmetic explosion particle"""
    x: float
    y: float
    radius: float
    speed: float  # radius growth per tick
    alpha: float
    color: Color


@dataclass
class Star:
    """Background star (presentation only)"""
    x: float
    y: float
    size: float
    speed: float
    brightness: float
