"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Optional, Tuple
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points"""
    return math.hypot(x1 - x2, y1 - y2)


def within(x1: float, y1: float, x2: float, y2: float, reach: float) -> bool:
    """Check if two points are strictly closer than `reach`"""
    return distance(x1, y1, x2, y2) < reach


def uniform(rng: random.Random, lo: float, hi: float) -> float:
    """Draw from [lo, hi) and clamp the result into range"""
    return clamp(lo + rng.random() * (hi - lo), lo, hi)


def randint_below(rng: random.Random, lo: int, hi: int) -> int:
    """Integer in [lo, hi), clamped"""
    return int(clamp(math.floor(lo + rng.random() * (hi - lo)), lo, hi - 1))


def random_color(rng: random.Random, lo: int, hi: int) -> Tuple[int, int, int]:
    """Random RGB colour with every channel in [lo, hi)"""
    return (randint_below(rng, lo, hi), randint_below(rng, lo, hi), randint_below(rng, lo, hi))


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create an isolated random source for one engine"""
    return random.Random(seed)


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
