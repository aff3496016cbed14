"""
Result records and the top-10 leaderboard
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

from loguru import logger

from .config import DEFAULT_PLAYER_NAME, MAX_RANKINGS


def normalize_player_name(name: Optional[str]) -> str:
    """Trimmed display name, falling back to the default"""
    name = (name or "").strip()
    return name or DEFAULT_PLAYER_NAME


def format_date(day: date) -> str:
    return f"{day.year}/{day.month:02d}/{day.day:02d}"


@dataclass(frozen=True)
class GameResult:
    """Final tally of one run, handed to the ranking collaborator"""
    player_name: str
    score: int
    enemies_defeated: int
    difficulty: str
    character: str
    date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "playerName": self.player_name,
            "score": self.score,
            "enemiesDefeated": self.enemies_defeated,
            "difficulty": self.difficulty,
            "character": self.character,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameResult":
        return cls(
            player_name=data.get("playerName") or DEFAULT_PLAYER_NAME,
            score=int(data["score"]),
            enemies_defeated=int(data.get("enemiesDefeated", 0)),
            difficulty=data.get("difficulty") or "Medium",
            character=data.get("character") or "Standard",
            date=data.get("date", ""),
        )


class Leaderboard:
    """
    Keeps the best results sorted by score, highest first.

    When constructed with a path, every `add` writes the board back as JSON.
    """

    def __init__(self, path: Optional[str] = None, limit: int = MAX_RANKINGS):
        self.path = path
        self.limit = limit
        self.entries: List[GameResult] = []

    @classmethod
    def load(cls, path: str, limit: int = MAX_RANKINGS) -> "Leaderboard":
        board = cls(path=path, limit=limit)
        if not os.path.exists(path):
            return board
        try:
            with open(path, "r") as f:
                raw = json.load(f)
            if not isinstance(raw, list) or not all(isinstance(item, dict) for item in raw):
                raise ValueError("expected a list of result objects")
            board.entries = [GameResult.from_dict(item) for item in raw]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Corrupt rankings file {path}: {e}") from e
        board.entries.sort(key=lambda r: r.score, reverse=True)
        del board.entries[limit:]
        logger.info("Loaded {} rankings from {}", len(board.entries), path)
        return board

    def add(self, result: GameResult) -> Optional[int]:
        """Insert a result; returns its 1-based rank, or None if it did not place"""
        self.entries.append(result)
        # stable sort keeps earlier entries ahead on ties
        self.entries.sort(key=lambda r: r.score, reverse=True)
        del self.entries[self.limit:]
        if self.path is not None:
            self.save()
        return self.rank_of(result)

    def rank_of(self, result: GameResult) -> Optional[int]:
        for i, entry in enumerate(self.entries):
            if entry == result:
                return i + 1
        return None

    def save(self, path: Optional[str] = None):
        path = path or self.path
        if path is None:
            raise ValueError("Leaderboard has no path to save to")
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "w") as f:
            json.dump([r.to_dict() for r in self.entries], f, indent=2)
        logger.info("Saved {} rankings to {}", len(self.entries), path)

    def to_list(self) -> List[Dict[str, Any]]:
        return [r.to_dict() for r in self.entries]

    def __len__(self) -> int:
        return len(self.entries)
