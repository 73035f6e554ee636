# services/typing_engine.py
from __future__ import annotations
import logging
import time
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal, Slot

from app.calculation import compute_stats
from app.state import Configuration, GameMode, GameSession, GameStatus, Stats
from core.chrono import CountdownTimer
from services.config_resolver import ResetRequest, resolve_reset

logger = logging.getLogger(__name__)


class TypingEngine(QObject):
    """
    Owns the live GameSession and the countdown.

    LOADING -> IDLE       text installed
    IDLE    -> PLAYING    first keystroke (starts the countdown in TIME mode)
    PLAYING -> FINISHED   input length reaches text length, or countdown expiry
    any     -> LOADING / IDLE on reset()
    """

    statusChanged = Signal(object)
    textChanged = Signal(str)
    inputChanged = Signal(str)
    statsChanged = Signal(object)
    countdownChanged = Signal(int)
    finished = Signal(object)

    def __init__(
        self,
        loader=None,
        timer: Optional[CountdownTimer] = None,
        clock: Callable[[], float] = time.monotonic,
        config: Optional[Configuration] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.session = GameSession()
        self.config = config or Configuration()
        self.time_left = self.config.time_limit
        self._clock = clock
        self._generation = 0

        self.timer = timer or CountdownTimer(parent=self)
        self.timer.tick.connect(self._on_tick)
        self.timer.expired.connect(self._on_expired)

        self.loader = loader
        if self.loader is not None:
            self.loader.loaded.connect(self._on_text_loaded)

    # ---------------- read-only views ----------------
    @property
    def status(self) -> GameStatus:
        return self.session.status

    @property
    def text(self) -> str:
        return self.session.text

    @property
    def input(self) -> str:
        return self.session.input

    @property
    def stats(self) -> Stats:
        return self.session.stats

    @property
    def generation(self) -> int:
        return self._generation

    # ---------------- commands ----------------
    def begin_session(self):
        self.reset()

    def reset(self, request: Optional[ResetRequest] = None):
        self.timer.cancel()

        resolution = resolve_reset(self.config, self.session.text, request)
        self.config = resolution.config
        self.time_left = self.config.time_limit
        self._generation += 1

        self.session = GameSession(status=resolution.status, text=resolution.text)
        logger.info(
            "Reset (generation %d): mode=%s status=%s",
            self._generation, self.config.mode.value, resolution.status.value,
        )

        if resolution.needs_text:
            self._request_text(resolution.fetch_words)

        self.textChanged.emit(self.session.text)
        self.inputChanged.emit("")
        self.statsChanged.emit(self.session.stats)
        self.countdownChanged.emit(self.time_left)
        self.statusChanged.emit(self.session.status)

    def handle_input(self, value: str):
        s = self.session
        if s.status in (GameStatus.FINISHED, GameStatus.LOADING):
            return

        if s.status is GameStatus.IDLE:
            self._start()

        value = (value or "")[: len(s.text)]
        s.input = value
        s.stats = compute_stats(s.text, value, s.elapsed(self._clock()))
        self.inputChanged.emit(value)
        self.statsChanged.emit(s.stats)

        if len(value) == len(s.text):
            self._finish()

    # ---------------- transitions ----------------
    def _set_status(self, status: GameStatus):
        if self.session.status is status:
            return
        logger.info("Status %s -> %s", self.session.status.value, status.value)
        self.session.status = status
        self.statusChanged.emit(status)

    def _start(self):
        self.session.start_time = self._clock()
        self._set_status(GameStatus.PLAYING)
        if self.config.mode is GameMode.TIME:
            self.timer.start(self.config.time_limit)

    def _finish(self):
        self.timer.cancel()
        self.session.start_time = None
        self._set_status(GameStatus.FINISHED)
        self.finished.emit(self.session.stats)

    def _request_text(self, word_count: int):
        if self.loader is None:
            logger.warning("No text loader configured; session stays in LOADING")
            return
        self.loader.request(self._generation, word_count)

    # ---------------- event sinks ----------------
    @Slot(int, str)
    def _on_text_loaded(self, generation: int, text: str):
        if generation != self._generation:
            logger.debug("Dropping stale text (generation %d, current %d)", generation, self._generation)
            return
        if self.session.status is not GameStatus.LOADING:
            return
        self.session.text = text
        logger.info("Installed text: %d chars", len(text))
        self.textChanged.emit(text)
        self._set_status(GameStatus.IDLE)

    @Slot(int)
    def _on_tick(self, remaining: int):
        self.time_left = remaining
        self.countdownChanged.emit(remaining)

    @Slot()
    def _on_expired(self):
        if self.session.status is not GameStatus.PLAYING:
            return
        self._finish()
