# services/score_store.py
import logging
from typing import Tuple

from app.config import SCORE_DB_PATH
from utils.db_helper import BEST_WPM_KEY, read_score, write_score

logger = logging.getLogger(__name__)


class ScoreStore:
    """Best WPM across sessions, kept in sqlite."""

    def __init__(self, db_path: str = SCORE_DB_PATH):
        self.db_path = db_path

    def get_best(self) -> int:
        return read_score(BEST_WPM_KEY, self.db_path)

    def set_best(self, value: int):
        write_score(BEST_WPM_KEY, value, self.db_path)


def record_result(store: ScoreStore, wpm: int) -> Tuple[int, bool]:
    """Store wpm only if it beats the saved best. Returns (best, is_new_best)."""
    best = store.get_best()
    if wpm > best:
        store.set_best(wpm)
        logger.info("New best: %d WPM (was %d)", wpm, best)
        return wpm, True
    return best, False
