import sqlite3, os
from app.config import SCORE_DB_PATH
from app.errors import ScoreStoreError

BEST_WPM_KEY = "best_wpm"


def _ensure_schema(conn):
    conn.execute("""
    CREATE TABLE IF NOT EXISTS scores(
        name TEXT PRIMARY KEY,
        value INTEGER NOT NULL,
        updated_at DATETIME DEFAULT CURRENT_TIMESTAMP
    );
    """)


def get_conn(db_path: str = SCORE_DB_PATH):
    folder = os.path.dirname(db_path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    conn = sqlite3.connect(db_path)
    _ensure_schema(conn)
    return conn


def read_score(name: str, db_path: str = SCORE_DB_PATH) -> int:
    conn = None
    try:
        conn = get_conn(db_path)
        row = conn.execute("SELECT value FROM scores WHERE name=?", (name,)).fetchone()
        return int(row[0]) if row else 0
    except (sqlite3.Error, OSError) as e:
        raise ScoreStoreError(str(e)) from e
    finally:
        if conn is not None:
            conn.close()


def write_score(name: str, value: int, db_path: str = SCORE_DB_PATH):
    conn = None
    try:
        conn = get_conn(db_path)
        conn.execute(
            "INSERT INTO scores(name, value) VALUES (?, ?) "
            "ON CONFLICT(name) DO UPDATE SET value=excluded.value, updated_at=CURRENT_TIMESTAMP",
            (name, int(value)),
        )
        conn.commit()
    except (sqlite3.Error, OSError) as e:
        raise ScoreStoreError(str(e)) from e
    finally:
        if conn is not None:
            conn.close()
