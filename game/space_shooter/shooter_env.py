"""
ShooterEnv - Gymnasium wrapper around the space shooter simulation
-----------------------------------------------------------------
- SimulationEngine for the game rules (spawn, weapons, collisions)
- Gymnasium API
- 1 agent ship that strafes left/right and fires (fire rate gated)
- Vector observation: ship state + top-K nearest enemies + top-M nearest
  enemy bullets + nearest weapon/shield pickup
- MultiDiscrete action space: [move(3), fire(2)]
- "human" rendering through the arcade window, "rgb_array" through a small
  numpy rasteriser

Quick test:
    python -m game.space_shooter.shooter_env
"""

from __future__ import annotations

import time
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ENV_CONFIG, GAME_HEIGHT, GAME_WIDTH, MAX_WEAPON_LEVEL, REWARD_CONFIG
from .engine import InputState, SimulationEngine
from .utils import clamp, seed_everything
from .world import GameStatus

BG_COLOR = (5, 5, 20)
BULLET_COLOR = (255, 204, 0)
CORE_BULLET_COLOR = (255, 255, 0)
ENEMY_BULLET_COLOR = (255, 0, 0)
POWER_UP_COLOR = (0, 255, 255)
SHIELD_COLOR = (0, 255, 153)


class ShooterEnv(gym.Env):
    """Vertical space shooter environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        difficulty: str = ENV_CONFIG["difficulty"],
        character: str = ENV_CONFIG["character"],
        fps: int = ENV_CONFIG["fps"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_enemies: int = ENV_CONFIG["k_enemies"],
        m_enemy_bullets: int = ENV_CONFIG["m_enemy_bullets"],
        reward_config: Optional[Dict[str, Any]] = None,
        player_name: Optional[str] = None,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode: {render_mode}")
        self.render_mode = render_mode

        self.engine = SimulationEngine(difficulty, character, player_name=player_name)
        self.width = GAME_WIDTH
        self.height = GAME_HEIGHT
        self.fps = fps
        self.frame_ms = 1000.0 / fps
        self.max_steps = max_steps

        # Observation config
        self.k_enemies = k_enemies
        self.m_enemy_bullets = m_enemy_bullets
        self.reward_config = dict(REWARD_CONFIG, **(reward_config or {}))

        # Action space:
        # move: 0 stay, 1 left, 2 right
        # fire: 0/1
        self.action_space = spaces.MultiDiscrete([3, 2])

        # Observation space (vector)
        # Ship: x(1) shield(1) weapon level(1) cooldown(1)
        # Each enemy: rel pos(2) vel(2)
        # Each enemy bullet: rel pos(2)
        # Nearest power-up and shield pickup: rel pos(2 + 2)
        obs_dim = 4 + (self.k_enemies * 4) + (self.m_enemy_bullets * 2) + 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._window = None
        self._step_count = 0
        self._clock_ms = 0.0
        self._events: Dict[str, float] = {}

    @property
    def world(self):
        return self.engine.world

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)
        if seed is not None:
            self.engine.seed(seed)

        self._step_count = 0
        self._clock_ms = 0.0
        self._events = {}
        self.engine.start()

        return self._get_obs(), self._get_info()

    def step(self, action):
        if self.engine.status is not GameStatus.RUNNING:
            raise RuntimeError("step() called on a finished episode; call reset() first")

        move, fire = int(action[0]), int(action[1])
        inputs = InputState(left=move == 1, right=move == 2, fire=bool(fire))

        self._clock_ms += self.frame_ms
        self._events = self.engine.tick(self._clock_ms, inputs)

        reward = self._compute_reward()

        terminated = self.engine.status is GameStatus.GAME_OVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        world = self.world
        player = world.player
        px, py = player.x, player.y

        elapsed = self._clock_ms - player.last_fire_time
        cooldown = max(0.0, player.fire_rate - elapsed) / max(1e-6, player.fire_rate)

        obs_parts = [
            (px / self.width) * 2 - 1,
            1.0 if player.has_shield else -1.0,
            (world.weapon_level - 1) / (MAX_WEAPON_LEVEL - 1) * 2 - 1,
            clamp(cooldown * 2 - 1, -1, 1),
        ]

        max_speed = max(1e-6, world.difficulty.enemy_speed_max)

        # Enemies: top-K nearest
        enemies_sorted = sorted(
            world.enemies, key=lambda e: (e.x - px) ** 2 + (e.y - py) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.x - px) / self.width, -1, 1),
                    clamp((e.y - py) / self.height, -1, 1),
                    clamp(e.horizontal_speed / max_speed, -1, 1),
                    clamp(e.speed / max_speed, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        # Enemy bullets: top-M nearest
        bullets_sorted = sorted(
            world.enemy_bullets, key=lambda b: (b.x - px) ** 2 + (b.y - py) ** 2
        )
        for i in range(self.m_enemy_bullets):
            if i < len(bullets_sorted):
                b = bullets_sorted[i]
                obs_parts += [
                    clamp((b.x - px) / self.width, -1, 1),
                    clamp((b.y - py) / self.height, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0]

        for pickups in (world.power_ups, world.shields):
            if pickups:
                p = min(pickups, key=lambda q: (q.x - px) ** 2 + (q.y - py) ** 2)
                obs_parts += [
                    clamp((p.x - px) / self.width, -1, 1),
                    clamp((p.y - py) / self.height, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self) -> float:
        cfg = self.reward_config
        ev = self._events

        reward = 0.0
        reward += cfg["R_SCORE"] * ev.get("score", 0)
        reward += cfg["R_KILL"] * ev.get("kill", 0)
        reward += cfg["R_HIT"] * ev.get("hit", 0)
        reward += cfg["R_WEAPON_PICKUP"] * ev.get("weapon_pickup", 0)
        reward += cfg["R_SHIELD_PICKUP"] * ev.get("shield_pickup", 0)

        reward -= cfg["R_SHIELD_BREAK"] * ev.get("shield_break", 0)
        reward -= cfg["R_SHOT"] * ev.get("shot", 0)
        reward -= cfg["R_TIME"]

        if ev.get("game_over"):
            reward -= cfg["R_DEATH"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        world = self.world
        info = {
            "score": world.score,
            "enemies_defeated": world.enemies_defeated,
            "weapon_level": world.weapon_level,
            "shield": world.player.has_shield,
            "shield_count": world.shield_count,
            "spawn_interval": world.spawn_interval,
            "step": self._step_count,
            "status": world.status.value,
        }
        info.update(world.entity_counts())
        if self.engine.result is not None:
            info["result"] = self.engine.result.to_dict()
        return info

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "human":
            if self._window is None:
                # arcade needs a display; only import it when a window is requested
                from .window import ShooterWindow
                self._window = ShooterWindow(self.engine)
            self._window.dispatch_events()
            self._window.on_draw()
            self._window.flip()
            return None

        return self._render_rgb_array()

    def _render_rgb_array(self) -> np.ndarray:
        world = self.world
        frame = np.empty((self.height, self.width, 3), dtype=np.uint8)
        frame[:] = BG_COLOR

        for s in world.stars:
            _fill_circle(frame, s.x, s.y, s.size, (255, 255, 255), s.brightness)
        for p in world.power_ups:
            _fill_circle(frame, p.x, p.y, p.radius, POWER_UP_COLOR)
        for s in world.shields:
            _fill_circle(frame, s.x, s.y, s.radius, SHIELD_COLOR)
        for e in world.enemies:
            _fill_circle(frame, e.x, e.y, e.radius, e.color)
        for b in world.enemy_bullets:
            _fill_circle(frame, b.x, b.y, b.radius, ENEMY_BULLET_COLOR)
        for b in world.bullets:
            color = CORE_BULLET_COLOR if b.width >= 8 else BULLET_COLOR
            _fill_rect(frame, b.x - b.width / 2, b.y - b.height / 2, b.width, b.height, color)

        player = world.player
        _fill_triangle(frame, player.x, player.y, player.width, player.height, player.color)
        if player.has_shield:
            _fill_circle(frame, player.x, player.y + player.half_height, player.width * 0.8, SHIELD_COLOR, 0.3)

        for p in world.particles:
            _fill_circle(frame, p.x, p.y, p.radius, p.color, clamp(p.alpha, 0.0, 1.0))

        return frame

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# numpy rasteriser helpers
# ----------------------------

def _blend(region: np.ndarray, mask: np.ndarray, color: Tuple[int, int, int], alpha: float):
    if alpha >= 1.0:
        region[mask] = color
        return
    src = np.asarray(color, dtype=np.float32)
    region[mask] = (region[mask] * (1.0 - alpha) + src * alpha).astype(np.uint8)


def _fill_circle(frame: np.ndarray, cx: float, cy: float, r: float, color, alpha: float = 1.0):
    h, w = frame.shape[:2]
    x0, x1 = max(0, int(cx - r)), min(w, int(cx + r) + 1)
    y0, y1 = max(0, int(cy - r)), min(h, int(cy + r) + 1)
    if x0 >= x1 or y0 >= y1:
        return
    ys, xs = np.ogrid[y0:y1, x0:x1]
    mask = (xs - cx) ** 2 + (ys - cy) ** 2 <= r * r
    _blend(frame[y0:y1, x0:x1], mask, color, alpha)


def _fill_rect(frame: np.ndarray, x: float, y: float, rw: float, rh: float, color):
    h, w = frame.shape[:2]
    x0, x1 = max(0, int(x)), min(w, int(x + rw))
    y0, y1 = max(0, int(y)), min(h, int(y + rh))
    if x0 < x1 and y0 < y1:
        frame[y0:y1, x0:x1] = color


def _fill_triangle(frame: np.ndarray, tip_x: float, tip_y: float, tw: float, th: float, color):
    """Upward-pointing ship: tip at (tip_x, tip_y), base th pixels below"""
    h, w = frame.shape[:2]
    x0, x1 = max(0, int(tip_x - tw / 2)), min(w, int(tip_x + tw / 2) + 1)
    y0, y1 = max(0, int(tip_y)), min(h, int(tip_y + th) + 1)
    if x0 >= x1 or y0 >= y1:
        return
    ys, xs = np.ogrid[y0:y1, x0:x1]
    mask = np.abs(xs - tip_x) <= (ys - tip_y) / th * (tw / 2)
    _blend(frame[y0:y1, x0:x1], mask, color, 1.0)


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42, **env_kwargs) -> float:
    """Run a random episode for testing; returns the total reward"""
    env = ShooterEnv(render_mode="human" if render else None, **env_kwargs)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... Close the window to exit early.")

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render:
            time.sleep(1.0 / env.fps)

    print(f"Random episode return: {total:.2f}")
    print(f"Score: {info['score']}  Enemies defeated: {info['enemies_defeated']}  Steps: {info['step']}")

    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
