# ui/main_window.py
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QStackedWidget, QButtonGroup
)
from PySide6.QtCore import Qt

from app.config import TIME_CHOICES, WORD_CHOICES
from app.errors import ScoreStoreError
from app.state import Difficulty, GameMode, GameStatus, Stats
from services.commands import Commands
from services.score_store import ScoreStore, record_result
from services.typing_engine import TypingEngine
from ui.session_summary import SessionSummary
from ui.widgets.session_dialog import CustomTextDialog
from ui.widgets.typing_area import TypingArea

logger = logging.getLogger(__name__)

_DIFFICULTY_LABELS = {
    Difficulty.SIMPLE: "Easy",
    Difficulty.MEDIUM: "Medium",
    Difficulty.ADVANCED: "Hard",
}

_QSS = """
QWidget { background: #0f172a; color: #e2e8f0; }
QWidget#TopBar {
    background: rgba(255,255,255,0.04);
    border: 1px solid rgba(255,255,255,0.08);
    border-radius: 14px;
}
QPushButton#TopBtn {
    background: transparent;
    border: 1px solid rgba(255,255,255,0.10);
    border-radius: 9px;
    padding: 6px 12px;
}
QPushButton#TopBtn:checked { border-color: #22d3ee; color: #22d3ee; }
QPushButton#TopBtn:hover { border-color: rgba(255,255,255,0.32); }
QLabel#lblCounter { color: #22d3ee; font-size: 36px; font-weight: 700; }
QLabel#lblHint { color: #64748b; font-size: 11px; }
"""


class MainWindow(QMainWindow):
    def __init__(self, engine: TypingEngine, store: ScoreStore):
        super().__init__()
        self.setWindowTitle("Speed Force")
        self.resize(1200, 720)
        self.engine = engine
        self.commands = Commands(engine)
        self.store = store
        self._custom_draft = ""

        self.pages = QStackedWidget(self)
        self.pages.addWidget(self._build_landing())
        self.pages.addWidget(self._build_game())
        self.setCentralWidget(self.pages)
        self.setStyleSheet(_QSS)

        # Connect signals
        engine.statusChanged.connect(self._on_status)
        engine.textChanged.connect(lambda _: self._refresh_typing())
        engine.inputChanged.connect(lambda _: self._refresh_typing())
        engine.statsChanged.connect(self._on_stats)
        engine.countdownChanged.connect(lambda _: self._refresh_counter())
        engine.finished.connect(self._on_finished)

    # ---------------- Landing ----------------
    def _build_landing(self):
        page = QWidget(self)
        v = QVBoxLayout(page)
        v.addStretch(1)
        title = QLabel("ARE YOU A FLASH IN TYPING?", page)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 56px; font-weight: 900;")
        sub = QLabel("TEST YOUR SPEED. CHALLENGE YOURSELF.", page)
        sub.setAlignment(Qt.AlignCenter)
        btn = QPushButton("Start Typing...", page)
        btn.clicked.connect(self._enter_game)
        hint = QLabel("or press Enter", page)
        hint.setObjectName("lblHint")
        hint.setAlignment(Qt.AlignCenter)
        for w in (title, sub):
            v.addWidget(w)
        v.addWidget(btn, alignment=Qt.AlignHCenter)
        v.addWidget(hint)
        v.addStretch(1)
        return page

    def _enter_game(self):
        self.pages.setCurrentIndex(1)
        self._refresh_typing()

    def keyPressEvent(self, ev):
        if ev.modifiers() & (Qt.ControlModifier | Qt.AltModifier | Qt.MetaModifier):
            return super().keyPressEvent(ev)
        if self.pages.currentIndex() == 0 and ev.key() in (Qt.Key_Return, Qt.Key_Enter):
            self._enter_game()
            return
        if self.pages.currentIndex() == 1 and ev.key() in (Qt.Key_Tab, Qt.Key_Escape):
            self.commands.restart_with_new_text()
            return
        super().keyPressEvent(ev)

    # ---------------- Game page ----------------
    def _build_game(self):
        page = QWidget(self)
        root_v = QVBoxLayout(page)
        root_v.setContentsMargins(48, 32, 48, 32)
        root_v.setSpacing(24)

        brand = QPushButton("SPEED FORCE", page)
        brand.setFlat(True)
        brand.setFocusPolicy(Qt.NoFocus)
        brand.clicked.connect(lambda: self.pages.setCurrentIndex(0))
        root_v.addWidget(brand, alignment=Qt.AlignLeft)

        self.topBar = self._build_top_bar(page)
        root_v.addWidget(self.topBar)

        header = QHBoxLayout()
        self.lblCounter = QLabel("", page)
        self.lblCounter.setObjectName("lblCounter")
        self.lblWPM = QLabel("WPM 0", page)
        self.lblAcc = QLabel("Accuracy 100%", page)
        header.addWidget(self.lblCounter)
        header.addStretch(1)
        header.addWidget(self.lblWPM)
        header.addWidget(self.lblAcc)
        self.headerBox = QWidget(page)
        self.headerBox.setLayout(header)
        root_v.addWidget(self.headerBox)

        self.typing = TypingArea(page)
        self.typing.inputChanged.connect(self.engine.handle_input)
        self.typing.restartRequested.connect(self.commands.restart_with_new_text)
        root_v.addWidget(self.typing, 1)

        self.summary = SessionSummary(page)
        self.summary.retryRequested.connect(self.commands.reset_to_idle_same_text)
        self.summary.newTestRequested.connect(self.commands.restart_with_new_text)
        self.summary.setVisible(False)
        root_v.addWidget(self.summary, 1)

        hint = QLabel("TAB  Restart      ESC  Reset", page)
        hint.setObjectName("lblHint")
        hint.setAlignment(Qt.AlignCenter)
        root_v.addWidget(hint)
        return page

    def _top_button(self, bar, text, handler, checkable=True):
        btn = QPushButton(text, bar)
        btn.setObjectName("TopBtn")
        btn.setCheckable(checkable)
        btn.setFocusPolicy(Qt.NoFocus)
        btn.clicked.connect(handler)
        return btn

    def _build_top_bar(self, parent):
        bar = QWidget(parent)
        bar.setObjectName("TopBar")
        h = QHBoxLayout(bar)
        h.setContentsMargins(14, 12, 14, 12)
        h.setSpacing(10)

        self.modeGroup = QButtonGroup(bar)
        self.modeButtons = {}
        for mode, label in ((GameMode.TIME, "Time"), (GameMode.WORDS, "Words"), (GameMode.CUSTOM, "Custom")):
            btn = self._top_button(bar, label, lambda _=False, m=mode: self._on_mode(m))
            self.modeGroup.addButton(btn)
            self.modeButtons[mode] = btn
            h.addWidget(btn)
        h.addSpacing(24)

        self.timeButtons = {}
        for t in TIME_CHOICES:
            btn = self._top_button(bar, f"{t}s", lambda _=False, t=t: self.commands.change_time(t))
            self.timeButtons[t] = btn
            h.addWidget(btn)

        self.wordButtons = {}
        for w in WORD_CHOICES:
            btn = self._top_button(bar, str(w), lambda _=False, w=w: self.commands.change_word_count(w))
            self.wordButtons[w] = btn
            h.addWidget(btn)

        self.btnChangeText = self._top_button(bar, "Change Text", self._open_custom_text, checkable=False)
        h.addWidget(self.btnChangeText)
        h.addSpacing(24)

        self.difficultyButtons = {}
        for d in Difficulty:
            btn = self._top_button(
                bar, _DIFFICULTY_LABELS[d], lambda _=False, d=d: self.commands.change_difficulty(d)
            )
            self.difficultyButtons[d] = btn
            h.addWidget(btn)

        h.addStretch(1)
        return bar

    # ---------------- Commands ----------------
    def _on_mode(self, mode):
        if not self.commands.change_mode(mode):
            self._open_custom_text()

    def _open_custom_text(self):
        dlg = CustomTextDialog(self._custom_draft, self)
        if not dlg.exec():
            self._sync_top_bar()
            return
        self._custom_draft = dlg.draft
        self.commands.set_custom_text(dlg.draft)

    # ---------------- Engine events ----------------
    def _on_status(self, status: GameStatus):
        self.topBar.setVisible(status is GameStatus.IDLE)
        self.headerBox.setVisible(status is GameStatus.PLAYING)
        finished = status is GameStatus.FINISHED
        self.summary.setVisible(finished)
        self.typing.setVisible(not finished)
        self._sync_top_bar()
        self._refresh_counter()
        self._refresh_typing()

    def _on_stats(self, stats: Stats):
        self.lblWPM.setText(f"WPM {stats.wpm}")
        self.lblAcc.setText(f"Accuracy {stats.accuracy}%")
        self.lblAcc.setStyleSheet("color: #10b981;" if stats.accuracy > 95 else "")
        self._refresh_counter()

    def _on_finished(self, stats: Stats):
        try:
            best, _ = record_result(self.store, stats.wpm)
        except ScoreStoreError as e:
            logger.warning("Best score unavailable: %s", e)
            best = stats.wpm
        # the badge also shows when tying the stored best; only a higher score is saved
        shows_best_badge = stats.wpm >= best
        self.summary.show_result(stats, best, shows_best_badge)

    def _refresh_typing(self):
        self.typing.set_state(self.engine.text, self.engine.input, self.engine.status)

    def _refresh_counter(self):
        if self.engine.config.mode is GameMode.TIME:
            self.lblCounter.setText(f"{self.engine.time_left} s")
        else:
            self.lblCounter.setText(f"{len(self.engine.input)}/{len(self.engine.text)} chars")

    def _sync_top_bar(self):
        cfg = self.engine.config
        for mode, btn in self.modeButtons.items():
            btn.setChecked(mode is cfg.mode)
        for t, btn in self.timeButtons.items():
            btn.setVisible(cfg.mode is GameMode.TIME)
            btn.setChecked(t == cfg.time_limit)
        for w, btn in self.wordButtons.items():
            btn.setVisible(cfg.mode is GameMode.WORDS)
            btn.setChecked(w == cfg.word_count)
        self.btnChangeText.setVisible(cfg.mode is GameMode.CUSTOM)
        for d, btn in self.difficultyButtons.items():
            btn.setVisible(cfg.mode is not GameMode.CUSTOM)
            btn.setChecked(d is cfg.difficulty)
