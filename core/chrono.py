# core/chrono.py
import logging

from PySide6.QtCore import QObject, QTimer, Signal

from app.config import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class CountdownTimer(QObject):
    """
    One countdown at a time. start() replaces whatever was running;
    expired fires once, after the tick that reaches zero.
    """

    tick = Signal(int)     # seconds remaining
    expired = Signal()

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, parent=None):
        super().__init__(parent)
        self._remaining = 0
        self._running = False

        self._tick = QTimer(self)
        self._tick.setInterval(interval_ms)
        self._tick.timeout.connect(self._on_timeout)

    @property
    def is_active(self) -> bool:
        return self._running

    @property
    def remaining(self) -> int:
        return self._remaining

    def start(self, limit_seconds: int):
        self.cancel()
        self._remaining = int(limit_seconds)
        self._running = True
        self._tick.start()
        logger.debug("Countdown started: %ss", self._remaining)

    def cancel(self):
        if not self._running:
            return
        self._running = False
        self._tick.stop()
        logger.debug("Countdown cancelled at %ss", self._remaining)

    def _on_timeout(self):
        if not self._running:
            return  # a timeout queued before cancel()
        self._remaining = max(0, self._remaining - 1)
        self.tick.emit(self._remaining)
        if self._remaining <= 0:
            self._running = False
            self._tick.stop()
            self.expired.emit()
