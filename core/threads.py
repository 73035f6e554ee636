# core/threads.py
import logging

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from services.text_provider import fetch_text_with_fallback, generate_local_text

logger = logging.getLogger(__name__)


class TextLoadWorkerSignals(QObject):
    loaded = Signal(int, str)  # generation, text


class TextLoadWorker(QRunnable):
    def __init__(self, provider, generation: int, word_count: int):
        super().__init__()
        self.provider = provider
        self.generation = generation
        self.word_count = word_count
        self.signals = TextLoadWorkerSignals()

    def run(self):
        try:
            text = fetch_text_with_fallback(self.provider, self.word_count)
        except Exception:
            # must never leave the session stuck in LOADING
            logger.exception("Text load crashed, using local text")
            text = generate_local_text(self.word_count)
        self.signals.loaded.emit(self.generation, text)


class Workers:
    pool = QThreadPool.globalInstance()


class TextLoader(QObject):
    """Runs text requests on the thread pool and re-emits results on the GUI thread."""

    loaded = Signal(int, str)

    def __init__(self, provider=None, pool: QThreadPool = None, parent=None):
        super().__init__(parent)
        self.provider = provider
        self._pool = pool or Workers.pool
        self._in_flight = {}

    def request(self, generation: int, word_count: int):
        worker = TextLoadWorker(self.provider, generation, word_count)
        worker.signals.loaded.connect(self._on_worker_loaded)
        self._in_flight[generation] = worker
        self._pool.start(worker)
        logger.info("Requested %d words (generation %d)", word_count, generation)

    @Slot(int, str)
    def _on_worker_loaded(self, generation: int, text: str):
        self._in_flight.pop(generation, None)
        self.loaded.emit(generation, text)

    def wait(self, msecs: int = -1) -> bool:
        return self._pool.waitForDone(msecs)
