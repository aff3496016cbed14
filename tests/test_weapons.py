import pytest

from game.space_shooter.config import CHARACTERS
from game.space_shooter.engine import InputState, SimulationEngine
from game.space_shooter.entities import Player
from game.space_shooter.weapons import WEAPON_PATTERNS, build_volley, try_fire

STANDARD = CHARACTERS["STANDARD"]
POWER = CHARACTERS["POWER"]


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5])
def test_bullet_count_matches_level(level):
    volley = build_volley(300, 700, level, STANDARD)
    assert len(volley) == level


def test_level_four_core_shots():
    volley = build_volley(300, 700, 4, STANDARD)
    core = [b for b in volley if b.width == 8]
    assert [b.x for b in core] == [295, 305]
    assert all(b.speed == STANDARD.bullet_speed + 2 and b.height == 20 for b in core)
    assert sorted(b.x for b in volley if b.width == 5) == [280, 320]


def test_level_five_angled_outer_shots():
    volley = build_volley(300, 700, 5, STANDARD)
    angled = {b.x: b.angle for b in volley if b.angle}
    assert angled == {275: -0.3, 325: 0.3}
    centre = volley[0]
    assert (centre.x, centre.y, centre.width, centre.height) == (300, 700, 10, 25)
    assert centre.speed == STANDARD.bullet_speed + 3


def test_power_character_enlarges_bullets():
    standard = build_volley(300, 700, 1, STANDARD)[0]
    power = build_volley(300, 700, 1, POWER)[0]
    assert power.width == pytest.approx(standard.width * 1.5)
    assert power.height == pytest.approx(standard.height * 1.5)
    assert power.speed == POWER.bullet_speed


def test_patterns_ordered_by_count():
    counts = [len(WEAPON_PATTERNS[level]) for level in range(1, 6)]
    assert counts == [1, 2, 3, 4, 5]


def test_cooldown_gate():
    player = Player(x=300, y=700, color=(0, 255, 0), fire_rate=300)
    out = []
    assert len(try_fire(player, 0, 1, STANDARD, out)) == 1
    assert try_fire(player, 300, 1, STANDARD, out) == []  # needs strictly more than fire_rate
    assert len(try_fire(player, 301, 1, STANDARD, out)) == 1
    assert len(out) == 2
    assert player.last_fire_time == 301


def test_fire_rate_end_to_end():
    engine = SimulationEngine("medium", "standard", seed=5)
    world = engine.start()
    assert world.enemies == []

    fire = InputState(fire=True)
    engine.tick(0, fire)
    assert len(world.bullets) == 1

    engine.tick(200, fire)
    assert len(world.bullets) == 1

    engine.tick(301, fire)
    assert len(world.bullets) == 2
