"""
Particle effect generators.
Each collision outcome appends cosmetic particles to a particle list;
nothing here feeds back into gameplay.
"""

from __future__ import annotations

import math
import random
from typing import List

from .config import CYAN, SHIELD_GREEN, Color
from .entities import Particle
from .utils import randint_below, uniform


class EffectGenerator:
    """Stochastic burst generator bound to one random source"""

    def __init__(self, rng: random.Random):
        self.rng = rng

    def _fragments(
        self,
        out: List[Particle],
        x: float,
        y: float,
        count: int,
        dist_range,
        radius_range,
        color: Color,
    ):
        for _ in range(count):
            angle = uniform(self.rng, 0.0, math.pi * 2)
            dist = uniform(self.rng, *dist_range)
            out.append(Particle(
                x=x + math.cos(angle) * dist,
                y=y + math.sin(angle) * dist,
                radius=uniform(self.rng, *radius_range),
                speed=uniform(self.rng, 0.5, 1.5),
                alpha=uniform(self.rng, 0.5, 1.0),
                color=color,
            ))

    def small_burst(self, out: List[Particle], x: float, y: float, color: Color):
        """Single spark where a bullet hits"""
        out.append(Particle(x=x, y=y, radius=3, speed=1, alpha=0.8, color=color))

    def explosion(self, out: List[Particle], x: float, y: float, color: Color):
        """Core flash plus 5-9 fragments for a destroyed enemy"""
        out.append(Particle(x=x, y=y, radius=5, speed=2, alpha=1.0, color=color))
        count = randint_below(self.rng, 5, 10)
        self._fragments(out, x, y, count, (10.0, 30.0), (2.0, 5.0), color)

    def power_up(self, out: List[Particle], x: float, y: float):
        """Two expanding rings on weapon upgrade"""
        for i in range(2):
            out.append(Particle(x=x, y=y, radius=10 + i * 15, speed=2, alpha=0.7, color=CYAN))

    def shield_gained(self, out: List[Particle], x: float, y: float):
        out.append(Particle(x=x, y=y, radius=30, speed=1.5, alpha=0.5, color=SHIELD_GREEN))

    def shield_break(self, out: List[Particle], x: float, y: float):
        """Ten shards scattered around the ship"""
        self._fragments(out, x, y, 10, (10.0, 40.0), (2.0, 6.0), SHIELD_GREEN)
