"""Shared fixtures for the space shooter tests."""

from __future__ import annotations

import dataclasses

import pytest

from game.space_shooter.collisions import new_events
from game.space_shooter.engine import SimulationEngine
from game.space_shooter.entities import Enemy


@pytest.fixture
def engine() -> SimulationEngine:
    """Medium / Standard engine with a fixed seed, already running."""
    eng = SimulationEngine("medium", "standard", player_name="Tester", seed=1234)
    eng.start()
    return eng


@pytest.fixture
def world(engine):
    return engine.world


@pytest.fixture
def events():
    return new_events()


@pytest.fixture
def quiet(world):
    """Stop enemies from shooting so movement tests are deterministic."""
    world.difficulty = dataclasses.replace(world.difficulty, enemy_fire_chance=0.0)
    return world


def make_enemy(x: float, y: float, radius: float = 15.0, health: int = 1, **kwargs) -> Enemy:
    kwargs.setdefault("color", (200, 120, 120))
    kwargs.setdefault("speed", 0.0)
    return Enemy(x=x, y=y, radius=radius, health=health, **kwargs)
