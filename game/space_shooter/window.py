"""
Arcade window: draws the world read-only and, in interactive mode,
turns keyboard state into engine ticks.
"""

from __future__ import annotations

from typing import Optional, Set

import arcade

from .config import GAME_HEIGHT, GAME_WIDTH
from .engine import InputState, SimulationEngine
from .world import GameStatus

BG_COLOR = (5, 5, 20)
HUD_C = (220, 220, 220)
BULLET_C = (255, 204, 0)
CORE_BULLET_C = (255, 255, 0)
ANGLED_BULLET_C = (0, 255, 255)
ENEMY_BULLET_C = (255, 0, 0)
POWER_UP_C = (0, 255, 255)
SHIELD_C = (0, 255, 153)
WHITE = (255, 255, 255)


def _rgba(color, alpha: float):
    return (color[0], color[1], color[2], max(0, min(255, int(alpha * 255))))


class ShooterWindow(arcade.Window):
    """Arcade window for rendering (and optionally playing) the shooter"""

    def __init__(self, engine: SimulationEngine, interactive: bool = False, title: str = "Space Shooter"):
        super().__init__(GAME_WIDTH, GAME_HEIGHT, title)
        self.engine = engine
        self.interactive = interactive
        self._held: Set[int] = set()
        self._clock_ms = 0.0

    # arcade's origin is bottom-left, the simulation's is top-left
    def _sy(self, y: float) -> float:
        return GAME_HEIGHT - y

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        """Draw the current game state"""
        self.clear()
        world = self.engine.world

        arcade.draw_lrbt_rectangle_filled(0, GAME_WIDTH, 0, GAME_HEIGHT, BG_COLOR)

        for s in world.stars:
            arcade.draw_circle_filled(s.x, self._sy(s.y), s.size, _rgba(WHITE, s.brightness))

        player = world.player
        if player.has_shield:
            arcade.draw_circle_outline(
                player.x, self._sy(player.y + player.half_height),
                player.width * 0.8, _rgba((0, 255, 150), 0.7), 3,
            )
        arcade.draw_triangle_filled(
            player.x, self._sy(player.y),
            player.x - player.half_width, self._sy(player.y + player.height),
            player.x + player.half_width, self._sy(player.y + player.height),
            player.color,
        )

        for b in world.bullets:
            if b.width >= 8:
                color = CORE_BULLET_C
            elif b.angle:
                color = ANGLED_BULLET_C
            else:
                color = BULLET_C
            arcade.draw_lrbt_rectangle_filled(
                b.x - b.width / 2, b.x + b.width / 2,
                self._sy(b.y + b.height / 2), self._sy(b.y - b.height / 2),
                color,
            )

        for b in world.enemy_bullets:
            arcade.draw_circle_filled(b.x, self._sy(b.y), b.radius, ENEMY_BULLET_C)

        for e in world.enemies:
            arcade.draw_circle_filled(e.x, self._sy(e.y), e.radius, e.color)

        for p in world.power_ups:
            arcade.draw_circle_filled(p.x, self._sy(p.y), p.radius, POWER_UP_C)
            arcade.draw_circle_outline(p.x, self._sy(p.y), p.radius + 5, WHITE, 2)

        for s in world.shields:
            arcade.draw_circle_filled(s.x, self._sy(s.y), s.radius, SHIELD_C)
            arcade.draw_circle_outline(s.x, self._sy(s.y), s.radius + 3, _rgba(WHITE, 0.7), 1)

        for p in world.particles:
            arcade.draw_circle_filled(p.x, self._sy(p.y), p.radius, _rgba(p.color, p.alpha))

        self._draw_hud()

    def _draw_hud(self):
        world = self.engine.world
        txt = (f"Score: {world.score}  "
               f"Defeated: {world.enemies_defeated}  "
               f"Weapon: {world.weapon_level}  "
               f"Shields: {world.shield_count}")
        arcade.draw_text(txt, 12, GAME_HEIGHT - 24, HUD_C, 14)
        arcade.draw_text(
            f"{self.engine.player_name} | {self.engine.difficulty.name} | {self.engine.character.name}",
            12, GAME_HEIGHT - 44, HUD_C, 12,
        )

        if world.status is GameStatus.GAME_OVER:
            arcade.draw_text("GAME OVER", GAME_WIDTH / 2, GAME_HEIGHT / 2 + 40, WHITE, 32, anchor_x="center")
            rank = self.engine.rank if self.engine.rank else "-"
            arcade.draw_text(
                f"Score {world.score}   Rank {rank}",
                GAME_WIDTH / 2, GAME_HEIGHT / 2, HUD_C, 16, anchor_x="center",
            )
            if self.interactive:
                arcade.draw_text(
                    "Press ENTER to play again", GAME_WIDTH / 2, GAME_HEIGHT / 2 - 40,
                    HUD_C, 14, anchor_x="center",
                )
            self._draw_rankings()

    def _draw_rankings(self):
        board = self.engine.leaderboard
        if board is None or not len(board):
            return
        y = GAME_HEIGHT / 2 - 90
        for i, r in enumerate(board.entries):
            line = f"{i + 1:>2}. {r.player_name:<12} {r.score:>6}  {r.difficulty:<6} {r.character:<8} {r.date}"
            highlight = CORE_BULLET_C if i + 1 == self.engine.rank else HUD_C
            arcade.draw_text(line, 60, y - i * 20, highlight, 12)

    # ----------------------------
    # Input / simulation
    # ----------------------------

    def current_input(self) -> InputState:
        return InputState(
            left=arcade.key.LEFT in self._held,
            right=arcade.key.RIGHT in self._held,
            fire=arcade.key.SPACE in self._held,
        )

    def on_key_press(self, symbol: int, modifiers: int):
        self._held.add(symbol)
        if symbol == arcade.key.ESCAPE:
            self.close()
        elif self.interactive and symbol == arcade.key.ENTER and self.engine.status is not GameStatus.RUNNING:
            self._clock_ms = 0.0
            self.engine.start()

    def on_key_release(self, symbol: int, modifiers: int):
        self._held.discard(symbol)

    def on_update(self, delta_time: float):
        if not self.interactive:
            return
        self._clock_ms += delta_time * 1000.0
        self.engine.tick(self._clock_ms, self.current_input())


def play(engine: SimulationEngine, title: Optional[str] = None):
    """Open an interactive window and run until it is closed"""
    window = ShooterWindow(engine, interactive=True, title=title or "Space Shooter")
    engine.start()
    arcade.run()
    return window
