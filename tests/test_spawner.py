import random

import pytest

from game.space_shooter.config import BIG_ENEMY_THRESHOLD, GAME_WIDTH
from game.space_shooter.spawner import SpawnScheduler


class ScriptedRandom(random.Random):
    """random() returns queued values first, then 0.5."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def random(self):
        return self.values.pop(0) if self.values else 0.5


def test_spawn_waits_for_interval(world):
    scheduler = SpawnScheduler(random.Random(0))
    assert world.spawn_interval == 1000

    assert scheduler.update(world, 1000) is None  # not strictly greater
    assert world.enemies == []

    enemy = scheduler.update(world, 1001)
    assert enemy is not None
    assert world.enemies == [enemy]
    assert world.last_spawn_time == 1001
    assert world.spawn_interval == pytest.approx(950)


def test_spawn_interval_decays_to_floor(world):
    scheduler = SpawnScheduler(random.Random(7))
    profile = world.difficulty
    intervals = []
    t = 0.0
    for _ in range(200):
        t += 2000
        assert scheduler.update(world, t) is not None
        intervals.append(world.spawn_interval)

    assert all(b <= a for a, b in zip(intervals, intervals[1:]))
    assert min(intervals) >= profile.spawn_interval_min
    assert intervals[-1] == profile.spawn_interval_min


def test_spawned_enemy_attributes_in_range(world):
    scheduler = SpawnScheduler(random.Random(3))
    profile = world.difficulty
    for i in range(300):
        enemy = scheduler.make_enemy(world)
        assert 10 <= enemy.radius <= 25
        assert profile.enemy_speed_min <= enemy.speed <= profile.enemy_speed_max
        assert enemy.radius <= enemy.x <= GAME_WIDTH - enemy.radius
        assert enemy.y == -enemy.radius
        assert enemy.horizontal_speed == 0 or 1 <= abs(enemy.horizontal_speed) <= 3
        assert enemy.health == (2 if enemy.radius > BIG_ENEMY_THRESHOLD else 1)
        assert all(100 <= c <= 254 for c in enemy.color)


def test_large_radius_gets_two_health(world):
    # colour (3 draws), then radius
    large = SpawnScheduler(ScriptedRandom([0.5, 0.5, 0.5, 11 / 15])).make_enemy(world)
    assert large.radius == pytest.approx(21)
    assert large.health == 2

    small = SpawnScheduler(ScriptedRandom([0.5, 0.5, 0.5, 9 / 15])).make_enemy(world)
    assert small.radius == pytest.approx(19)
    assert small.health == 1


def test_horizontal_behaviour_choices(world):
    # colour, radius, speed, movement type, magnitude
    stationary = SpawnScheduler(ScriptedRandom([0.5] * 5 + [0.1, 0.5])).make_enemy(world)
    left = SpawnScheduler(ScriptedRandom([0.5] * 5 + [0.5, 0.5])).make_enemy(world)
    right = SpawnScheduler(ScriptedRandom([0.5] * 5 + [0.9, 0.5])).make_enemy(world)

    assert stationary.horizontal_speed == 0
    assert left.horizontal_speed == pytest.approx(-2.0)
    assert right.horizontal_speed == pytest.approx(2.0)
