import dataclasses

import pytest

from game.space_shooter.config import (
    CHARACTERS,
    DIFFICULTIES,
    DifficultyProfile,
    UnknownProfileError,
    get_character,
    get_difficulty,
)
from game.space_shooter.engine import SimulationEngine


def test_lookup_is_case_insensitive():
    assert get_difficulty("medium") is DIFFICULTIES["MEDIUM"]
    assert get_difficulty(" Hard ") is DIFFICULTIES["HARD"]
    assert get_character("Power") is CHARACTERS["POWER"]


def test_unknown_names_fail_fast():
    with pytest.raises(UnknownProfileError):
        get_difficulty("nightmare")
    with pytest.raises(ValueError):
        get_character("wizard")
    with pytest.raises(UnknownProfileError):
        SimulationEngine("insane", "standard")


def test_profiles_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DIFFICULTIES["EASY"].score_multiplier = 10


def test_invalid_profile_rejected():
    medium = DIFFICULTIES["MEDIUM"]
    with pytest.raises(ValueError):
        dataclasses.replace(medium, enemy_speed_min=9, enemy_speed_max=1)
    with pytest.raises(ValueError):
        dataclasses.replace(medium, weapon_drop_chance=1.5)
    with pytest.raises(ValueError):
        dataclasses.replace(medium, spawn_decrease_rate=0)
    with pytest.raises(ValueError):
        DifficultyProfile(
            name="Broken",
            enemy_speed_min=1,
            enemy_speed_max=2,
            spawn_interval_initial=100,
            spawn_interval_min=500,
            spawn_decrease_rate=0.9,
            enemy_fire_chance=0.0,
            enemy_bullet_speed=1,
            weapon_drop_chance=0.0,
            shield_drop_chance=0.0,
            score_multiplier=1.0,
        )


def test_character_table():
    assert CHARACTERS["STANDARD"].fire_rate == 300
    assert CHARACTERS["POWER"].bullet_size_multiplier == 1.5
    assert CHARACTERS["DEFENSE"].start_with_shield
    assert not any(c.start_with_shield for k, c in CHARACTERS.items() if k != "DEFENSE")
