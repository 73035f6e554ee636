# services/config_resolver.py
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Optional

from app.config import TIME_MODE_WORD_COUNT
from app.state import Configuration, Difficulty, GameMode, GameStatus
from app.validation import enum_member, non_blank, positive_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResetRequest:
    new_mode: Optional[GameMode] = None
    new_time: Optional[int] = None
    new_word_count: Optional[int] = None
    new_difficulty: Optional[Difficulty] = None
    custom_text: Optional[str] = None
    keep_text: bool = False


@dataclass(frozen=True)
class Resolution:
    """What a reset turns into: next config, target status, text, and words to fetch (if any)."""

    config: Configuration
    status: GameStatus
    text: str
    fetch_words: Optional[int] = None

    @property
    def needs_text(self) -> bool:
        return self.fetch_words is not None


def _merge(current: Configuration, request: ResetRequest) -> Configuration:
    changes = {}

    mode = enum_member(request.new_mode, GameMode, "mode")
    if mode is not None:
        changes["mode"] = mode

    time_limit = positive_int(request.new_time, "time limit")
    if time_limit is not None:
        changes["time_limit"] = time_limit

    word_count = positive_int(request.new_word_count, "word count")
    if word_count is not None:
        changes["word_count"] = word_count

    difficulty = enum_member(request.new_difficulty, Difficulty, "difficulty")
    if difficulty is not None:
        changes["difficulty"] = difficulty

    return replace(current, **changes) if changes else current


def resolve_reset(
    current: Configuration, current_text: str, request: Optional[ResetRequest] = None
) -> Resolution:
    """
    Decide how a reset is served, in this order:
      1. custom text supplied  -> CUSTOM mode, that text, IDLE
      2. keep_text, same mode  -> current text, IDLE
      3. CUSTOM mode           -> current text, IDLE (nothing to fetch)
      4. otherwise             -> LOADING, fetch word_count (WORDS) or
                                  TIME_MODE_WORD_COUNT (TIME) words
    """
    request = request or ResetRequest()
    config = _merge(current, request)

    custom_text = non_blank(request.custom_text)
    if custom_text is not None:
        config = replace(config, mode=GameMode.CUSTOM, custom_text=custom_text)
        return Resolution(config=config, status=GameStatus.IDLE, text=custom_text)

    if request.keep_text and config.mode is current.mode:
        return Resolution(config=config, status=GameStatus.IDLE, text=current_text)

    if config.mode is GameMode.CUSTOM:
        text = config.custom_text if config.custom_text is not None else current_text
        return Resolution(config=config, status=GameStatus.IDLE, text=text)

    words = config.word_count if config.mode is GameMode.WORDS else TIME_MODE_WORD_COUNT
    return Resolution(config=config, status=GameStatus.LOADING, text=current_text, fetch_words=words)
