# main.py
from __future__ import annotations
import sys
import logging

from PySide6.QtWidgets import QApplication, QMessageBox

from core.threads import TextLoader
from services.score_store import ScoreStore
from services.text_provider import QuoteTextProvider
from services.typing_engine import TypingEngine
from ui.main_window import MainWindow


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler("app.log", encoding="utf-8"),
        ],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        if QApplication.instance() is not None:
            QMessageBox.critical(None, "Application Error", f"{exctype.__name__}: {value}")
        sys.exit(1)

    sys.excepthook = excepthook


def main() -> int:
    setup_logging()

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Speed Force")
    app.setOrganizationName("Speed Force")

    loader = TextLoader(QuoteTextProvider())
    engine = TypingEngine(loader=loader)
    win = MainWindow(engine, ScoreStore())
    win.show()

    engine.begin_session()
    try:
        return app.exec()
    finally:
        loader.wait(2000)


if __name__ == "__main__":
    sys.exit(main())
