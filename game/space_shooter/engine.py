"""
SimulationEngine - one run of the space shooter, advanced one tick at a time
--------------------------------------------------------------------------
- The caller owns the clock: every tick receives a monotonically increasing
  timestamp in milliseconds and a snapshot of the held keys.
- Tick order: spawn -> player movement -> entity movement/pruning ->
  weapon -> collisions (effects are emitted while resolving).
- Run status: NOT_RUNNING -> RUNNING -> GAME_OVER -> (start) -> RUNNING.
  Ticks outside RUNNING are ignored, so a finished run stays frozen.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, Optional, Union

from loguru import logger

from .collisions import CollisionSystem, new_events
from .config import CharacterProfile, DifficultyProfile, get_character, get_difficulty
from .effects import EffectGenerator
from .movement import advance, move_player
from .rankings import GameResult, Leaderboard, format_date, normalize_player_name
from .spawner import SpawnScheduler
from .utils import make_rng
from .weapons import try_fire
from .world import GameStatus, WorldState


@dataclass(frozen=True)
class InputState:
    """Keys held during one tick"""
    left: bool = False
    right: bool = False
    fire: bool = False


class SimulationEngine:
    """Owns the world state and the systems that mutate it"""

    def __init__(
        self,
        difficulty: Union[str, DifficultyProfile] = "medium",
        character: Union[str, CharacterProfile] = "standard",
        player_name: Optional[str] = None,
        seed: Optional[int] = None,
        leaderboard: Optional[Leaderboard] = None,
    ):
        # Unknown names fail here, before any run exists
        self.difficulty = get_difficulty(difficulty) if isinstance(difficulty, str) else difficulty
        self.character = get_character(character) if isinstance(character, str) else character
        self.player_name = normalize_player_name(player_name)
        self.leaderboard = leaderboard

        self.rng = make_rng(seed)
        self._build_systems()

        self.world = WorldState.new(self.difficulty, self.character)
        self.result: Optional[GameResult] = None
        self.rank: Optional[int] = None
        self.ticks = 0

    def _build_systems(self):
        self.effects = EffectGenerator(self.rng)
        self.spawner = SpawnScheduler(self.rng)
        self.collisions = CollisionSystem(self.rng, self.effects)

    # ----------------------------
    # Run lifecycle
    # ----------------------------

    @property
    def status(self) -> GameStatus:
        return self.world.status

    def seed(self, seed: Optional[int]):
        """Replace the random source; takes effect for every system"""
        self.rng = make_rng(seed)
        self._build_systems()

    def start(self) -> WorldState:
        """Begin a fresh run, discarding any previous world"""
        self.world = WorldState.new(self.difficulty, self.character, self.rng)
        self.world.status = GameStatus.RUNNING
        self.result = None
        self.rank = None
        self.ticks = 0
        logger.info(
            "Run started: player={} difficulty={} character={}",
            self.player_name, self.difficulty.name, self.character.name,
        )
        return self.world

    def tick(self, timestamp: float, inputs: Optional[InputState] = None) -> Dict[str, float]:
        """Advance the world by one frame. Returns the tick's event tally."""
        events = new_events()
        world = self.world
        if not world.running:
            return events
        if world.last_tick_time is not None and timestamp < world.last_tick_time:
            raise ValueError(
                f"Timestamp went backwards: {timestamp} < {world.last_tick_time}"
            )
        world.last_tick_time = timestamp
        inputs = inputs or InputState()
        self.ticks += 1

        if self.spawner.update(world, timestamp) is not None:
            events["spawn"] += 1

        move_player(world.player, self.character.speed, inputs.left, inputs.right)
        events["enemy_shot"] += advance(world, self.rng)

        if inputs.fire:
            volley = try_fire(world.player, timestamp, world.weapon_level, self.character, world.bullets)
            if volley:
                events["shot"] += 1

        if self.collisions.resolve(world, events):
            self._game_over()
        return events

    def _game_over(self):
        world = self.world
        world.status = GameStatus.GAME_OVER
        self.result = GameResult(
            player_name=self.player_name,
            score=world.score,
            enemies_defeated=world.enemies_defeated,
            difficulty=self.difficulty.name,
            character=self.character.name,
            date=format_date(date.today()),
        )
        logger.info(
            "Game over: {} scored {} ({} enemies) after {} ticks",
            self.player_name, world.score, world.enemies_defeated, self.ticks,
        )
        if self.leaderboard is not None:
            self.rank = self.leaderboard.add(self.result)
            logger.info("Ranking position: {}", self.rank if self.rank else "-")
