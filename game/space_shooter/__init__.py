"""Space shooter - real-time simulation engine, Gymnasium wrapper and arcade front end"""

from .config import CHARACTERS, DIFFICULTIES, UnknownProfileError, get_character, get_difficulty
from .engine import InputState, SimulationEngine
from .rankings import GameResult, Leaderboard
from .shooter_env import ShooterEnv, run_random_episode
from .world import GameStatus, WorldState

__all__ = [
    'CHARACTERS',
    'DIFFICULTIES',
    'UnknownProfileError',
    'get_character',
    'get_difficulty',
    'InputState',
    'SimulationEngine',
    'GameResult',
    'Leaderboard',
    'ShooterEnv',
    'run_random_episode',
    'GameStatus',
    'WorldState',
]
