# services/commands.py
from app.state import Difficulty, GameMode
from services.config_resolver import ResetRequest
from services.typing_engine import TypingEngine


class Commands:
    """Named user commands, each one a reset of the engine."""

    def __init__(self, engine: TypingEngine):
        self.engine = engine

    def begin_session(self):
        self.engine.begin_session()

    def restart_with_new_text(self):
        self.engine.reset(ResetRequest(keep_text=False))

    def reset_to_idle_same_text(self):
        self.engine.reset(ResetRequest(keep_text=True))

    def change_mode(self, mode: GameMode) -> bool:
        """False for CUSTOM: the caller has to ask for the text first."""
        if mode == GameMode.CUSTOM:
            return False
        self.engine.reset(ResetRequest(new_mode=mode))
        return True

    def change_time(self, seconds: int):
        self.engine.reset(ResetRequest(new_time=seconds))

    def change_word_count(self, count: int):
        self.engine.reset(ResetRequest(new_word_count=count))

    def change_difficulty(self, difficulty: Difficulty):
        self.engine.reset(ResetRequest(new_difficulty=difficulty))

    def set_custom_text(self, draft: str) -> bool:
        if not draft or not draft.strip():
            return False
        self.engine.reset(ResetRequest(custom_text=draft, new_mode=GameMode.CUSTOM))
        return True
