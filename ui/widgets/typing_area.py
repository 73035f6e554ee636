# ui/widgets/typing_area.py
from __future__ import annotations
import html

from PySide6.QtCore import Qt, QEvent, Signal
from PySide6.QtGui import QKeySequence
from PySide6.QtWidgets import QWidget, QLabel, QLineEdit, QVBoxLayout, QSizePolicy

from app.state import GameStatus

_COLORS = {
    "ok": "#22d3ee",
    "err": "#f43f5e",
    "mut": "#64748b",
    "caret": "#22d3ee",
    "err_bg": "rgba(244,63,94,0.20)",
}

_BLOCKED = (QKeySequence.Paste, QKeySequence.Copy, QKeySequence.Cut)


class GuardedLineEdit(QLineEdit):
    """
    Input box for the test: no paste, copy, cut, drag-and-drop or context menu.
    Tab and Escape are reported instead of moving focus.
    """

    restartRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setDragEnabled(False)
        self.setAcceptDrops(False)
        self.setContextMenuPolicy(Qt.NoContextMenu)

    def event(self, ev):
        if ev.type() == QEvent.KeyPress and ev.key() in (Qt.Key_Tab, Qt.Key_Backtab, Qt.Key_Escape):
            self.restartRequested.emit()
            return True
        return super().event(ev)

    def keyPressEvent(self, ev):
        if any(ev.matches(seq) for seq in _BLOCKED):
            ev.ignore()
            return
        super().keyPressEvent(ev)

    def mouseReleaseEvent(self, ev):
        # X11 middle-click pastes the selection
        if ev.button() == Qt.MiddleButton:
            ev.ignore()
            return
        super().mouseReleaseEvent(ev)


class TypingArea(QWidget):
    """Colored target text on top of an invisible input box."""

    inputChanged = Signal(str)
    restartRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._text = ""
        self._input = ""
        self._status = GameStatus.LOADING

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.lblText = QLabel("", self)
        self.lblText.setObjectName("lblText")
        self.lblText.setTextFormat(Qt.RichText)
        self.lblText.setWordWrap(True)
        self.lblText.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.lblText.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.lblText.setMinimumHeight(200)
        self.lblText.setStyleSheet("font-family: monospace; font-size: 24px; line-height: 1.6;")
        root.addWidget(self.lblText, stretch=1)

        self.edit = GuardedLineEdit(self)
        self.edit.setFixedHeight(1)
        self.edit.setStyleSheet("background: transparent; border: none; color: transparent;")
        self.edit.textEdited.connect(self.inputChanged)
        self.edit.restartRequested.connect(self.restartRequested)
        root.addWidget(self.edit)

    def mousePressEvent(self, ev):
        self.edit.setFocus()
        super().mousePressEvent(ev)

    def set_state(self, text: str, typed: str, status: GameStatus):
        self._text = text or ""
        self._input = typed or ""
        self._status = status

        accepting = status in (GameStatus.IDLE, GameStatus.PLAYING)
        self.edit.setEnabled(accepting)
        self.edit.setMaxLength(max(1, len(self._text)))
        if self.edit.text() != self._input:
            self.edit.setText(self._input)
        if accepting:
            self.edit.setFocus()
        self._render()

    def _render(self):
        if self._status is GameStatus.LOADING:
            self.lblText.setText(f'<span style="color:{_COLORS["mut"]}">Loading text…</span>')
            return

        parts: list[str] = []
        caret_at = len(self._input) if self._status is not GameStatus.FINISHED else -1

        for idx, ch in enumerate(self._text):
            style = []
            shown = ch
            if idx < len(self._input):
                if self._input[idx] == ch:
                    style.append(f"color:{_COLORS['ok']}")
                else:
                    style.append(f"color:{_COLORS['err']}")
                    if ch == " ":
                        shown = "_"
                        style.append(f"background:{_COLORS['err_bg']}")
            else:
                style.append(f"color:{_COLORS['mut']}")
            glyph = "&nbsp;" if shown == " " else html.escape(shown)
            parts.append(f'<span style="{";".join(style)}">{glyph}</span>')

        # QLabel rich text has no borders; the caret is a bar glyph
        if 0 <= caret_at <= len(parts):
            parts.insert(caret_at, f'<span style="color:{_COLORS["caret"]}">|</span>')

        self.lblText.setText("".join(parts))
