# app/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from app.config import DEFAULT_DIFFICULTY, DEFAULT_TIME_LIMIT, DEFAULT_WORD_COUNT


class GameStatus(str, Enum):
    LOADING = "LOADING"
    IDLE = "IDLE"
    PLAYING = "PLAYING"
    FINISHED = "FINISHED"


class GameMode(str, Enum):
    TIME = "TIME"
    WORDS = "WORDS"
    CUSTOM = "CUSTOM"


class Difficulty(str, Enum):
    SIMPLE = "simple"
    MEDIUM = "medium"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class Stats:
    wpm: int = 0
    raw_wpm: int = 0
    accuracy: int = 100
    correct_chars: int = 0
    incorrect_chars: int = 0
    time_elapsed: float = 0.0
    total_chars: int = 0


@dataclass(frozen=True)
class Configuration:
    mode: GameMode = GameMode.TIME
    time_limit: int = DEFAULT_TIME_LIMIT
    word_count: int = DEFAULT_WORD_COUNT
    difficulty: Difficulty = Difficulty(DEFAULT_DIFFICULTY)
    custom_text: Optional[str] = None


@dataclass
class GameSession:
    status: GameStatus = GameStatus.LOADING
    text: str = ""
    input: str = ""
    start_time: Optional[float] = None
    stats: Stats = field(default_factory=Stats)

    def elapsed(self, now: float) -> float:
        if self.start_time is None:
            return 0.0
        return max(0.0, now - self.start_time)
