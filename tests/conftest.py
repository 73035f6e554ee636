from typing import List, Tuple

import pytest
from PySide6.QtCore import QCoreApplication, QObject, Signal

from services.typing_engine import TypingEngine


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeLoader(QObject):
    loaded = Signal(int, str)

    def __init__(self) -> None:
        super().__init__()
        self.requests: List[Tuple[int, int]] = []

    def request(self, generation: int, word_count: int) -> None:
        self.requests.append((generation, word_count))

    def deliver(self, text: str, generation: int | None = None) -> None:
        if generation is None:
            generation = self.requests[-1][0]
        self.loaded.emit(generation, text)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def loader() -> FakeLoader:
    return FakeLoader()


@pytest.fixture
def engine(loader: FakeLoader, clock: FakeClock) -> TypingEngine:
    return TypingEngine(loader=loader, clock=clock)


@pytest.fixture
def ready_engine(engine: TypingEngine, loader: FakeLoader) -> TypingEngine:
    """Time mode, 30 s, text 'hello world', status IDLE."""
    engine.begin_session()
    loader.deliver("hello world")
    return engine


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "data" / "scores.db")
