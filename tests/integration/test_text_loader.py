from PySide6.QtCore import QCoreApplication, QThreadPool

from app.errors import TextProviderError
from core.threads import TextLoader


class _Provider:
    def __init__(self, result=None):
        self.result = result
        self.calls = []

    def fetch_text(self, word_count):
        self.calls.append(word_count)
        if self.result is None:
            raise TextProviderError("down")
        return self.result


def _run(loader, generation, word_count):
    seen = []
    loader.loaded.connect(lambda gen, text: seen.append((gen, text)))
    loader.request(generation, word_count)
    assert loader.wait(5000)
    QCoreApplication.processEvents()
    return seen


def test_loader_delivers_provider_text():
    provider = _Provider("remote words")
    loader = TextLoader(provider, pool=QThreadPool())

    assert _run(loader, 4, 12) == [(4, "remote words")]
    assert provider.calls == [12]


def test_loader_falls_back_on_failure():
    loader = TextLoader(_Provider(), pool=QThreadPool())

    seen = _run(loader, 1, 6)

    assert len(seen) == 1
    generation, text = seen[0]
    assert generation == 1
    assert len(text[:-1].split(" ")) == 6
