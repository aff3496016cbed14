import numpy as np
import pytest

from conftest import make_enemy
from game.space_shooter.shooter_env import ShooterEnv, run_random_episode


@pytest.fixture
def env():
    e = ShooterEnv(max_steps=300)
    yield e
    e.close()


def test_reset_observation(env):
    obs, info = env.reset(seed=3)
    assert obs.shape == env.observation_space.shape
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["score"] == 0 and info["status"] == "running"


def test_step_contract(env):
    env.reset(seed=3)
    obs, reward, terminated, truncated, info = env.step(np.array([1, 1]))
    assert env.observation_space.contains(obs)
    assert isinstance(reward, float)
    assert not terminated and not truncated
    assert info["bullets"] == 1
    assert info["step"] == 1


def test_truncates_at_max_steps():
    env = ShooterEnv(max_steps=5)
    env.reset(seed=0)
    for _ in range(4):
        _, _, terminated, truncated, _ = env.step(np.array([0, 0]))
        assert not truncated
    _, _, terminated, truncated, _ = env.step(np.array([0, 0]))
    assert truncated


def test_collision_terminates_with_penalty(env):
    env.reset(seed=1)
    p = env.world.player
    env.world.enemies = [make_enemy(p.x, p.y)]
    _, reward, terminated, _, info = env.step(np.array([0, 0]))
    assert terminated
    assert reward <= -env.reward_config["R_DEATH"]
    assert info["result"]["score"] == 0

    with pytest.raises(RuntimeError):
        env.step(np.array([0, 0]))


def test_kill_is_rewarded(env):
    env.reset(seed=1)
    env.world.enemies = [make_enemy(300, 200, radius=25)]
    env.world.bullets = []
    from game.space_shooter.entities import Bullet
    env.world.bullets.append(Bullet(x=300, y=210, width=5, height=15, speed=10))
    _, reward, _, _, info = env.step(np.array([0, 0]))
    assert info["score"] == 25
    assert reward > 1.0


def test_rgb_array_render():
    env = ShooterEnv(render_mode="rgb_array")
    env.reset(seed=2)
    frame = env.render()
    assert frame.shape == (800, 600, 3)
    assert frame.dtype == np.uint8
    # player ship is drawn in its colour just below the nose
    p = env.world.player
    assert tuple(frame[int(p.y) + 20, int(p.x)]) == env.world.player.color


def test_invalid_render_mode():
    with pytest.raises(ValueError):
        ShooterEnv(render_mode="ascii")


def test_headless_random_episode():
    total = run_random_episode(render=False, seed=0, max_steps=200)
    assert isinstance(total, float)
