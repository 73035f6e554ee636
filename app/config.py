# app/config.py
import os
from dotenv import load_dotenv

load_dotenv()

# -------- Text source --------
QUOTES_API_URL = os.getenv("QUOTES_API_URL", "https://api.api-ninjas.com/v1/quotes")
QUOTES_API_KEY = os.getenv("QUOTES_API_KEY")
QUOTE_COUNT = 3
QUOTES_TIMEOUT_SEC = 5.0

# -------- Session defaults --------
DEFAULT_TIME_LIMIT = 30
DEFAULT_WORD_COUNT = 25
DEFAULT_DIFFICULTY = "medium"
TIME_MODE_WORD_COUNT = 100  # enough text to outlast any countdown

TIME_CHOICES = (15, 30, 60, 120)
WORD_CHOICES = (10, 25, 50, 100)

TICK_INTERVAL_MS = 1000

# -------- Persistence --------
SCORE_DB_PATH = os.getenv("SPEEDFORCE_DB", "data/scores.db")

# -------- Results benchmark (label, wpm) --------
BENCHMARK_LEVELS = (
    ("Fast", 90),
    ("Fluent", 60),
    ("Average", 30),
    ("Slow", 0),
)
