"""
Weapon system: fire-rate gating and per-level bullet patterns
"""

from __future__ import annotations

from typing import Dict, List, NamedTuple, Tuple

from .config import MAX_WEAPON_LEVEL, CharacterProfile
from .entities import Bullet, Player
from .utils import clamp


class Shot(NamedTuple):
    """One bullet of a volley, relative to the ship's nose"""
    dx: float
    dy: float
    width: float
    height: float
    speed_bonus: float = 0.0
    angle: float = 0.0


# Hand-tuned volleys, one per weapon level
WEAPON_PATTERNS: Dict[int, Tuple[Shot, ...]] = {
    1: (
        Shot(0, 0, 5, 15),
    ),
    2: (
        Shot(-10, 0, 5, 15),
        Shot(10, 0, 5, 15),
    ),
    3: (
        Shot(0, 0, 5, 15),
        Shot(-15, 10, 5, 15),
        Shot(15, 10, 5, 15),
    ),
    4: (
        Shot(-5, 0, 8, 20, 2),   # core
        Shot(5, 0, 8, 20, 2),    # core
        Shot(-20, 10, 5, 15),
        Shot(20, 10, 5, 15),
    ),
    5: (
        Shot(0, 0, 10, 25, 3),
        Shot(-15, 5, 6, 18, 1),
        Shot(15, 5, 6, 18, 1),
        Shot(-25, 10, 5, 15, 0, -0.3),
        Shot(25, 10, 5, 15, 0, 0.3),
    ),
}


def can_fire(player: Player, now: float) -> bool:
    return now - player.last_fire_time > player.fire_rate


def build_volley(x: float, y: float, level: int, character: CharacterProfile) -> List[Bullet]:
    """Bullets for one trigger pull at the given weapon level"""
    level = int(clamp(level, 1, MAX_WEAPON_LEVEL))
    scale = character.bullet_size_multiplier
    return [
        Bullet(
            x=x + shot.dx,
            y=y + shot.dy,
            width=shot.width * scale,
            height=shot.height * scale,
            speed=character.bullet_speed + shot.speed_bonus,
            angle=shot.angle,
        )
        for shot in WEAPON_PATTERNS[level]
    ]


def try_fire(
    player: Player,
    now: float,
    level: int,
    character: CharacterProfile,
    out: List[Bullet],
) -> List[Bullet]:
    """
    Fire a volley if the cooldown has elapsed.

    Returns the new bullets (empty when the shot was suppressed).
    """
    if not can_fire(player, now):
        return []
    player.last_fire_time = now
    volley = build_volley(player.x, player.y, level, character)
    out.extend(volley)
    return volley
