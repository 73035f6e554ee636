# ui/session_summary.py
from __future__ import annotations
from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
import pyqtgraph as pg

from app.config import BENCHMARK_LEVELS
from app.state import Stats

_CURRENT_BRUSH = (148, 163, 184)
_BEST_BRUSH = (234, 179, 8)


def chart_ceiling(wpm: int, best: int) -> float:
    """Top of the benchmark chart, leaving headroom above the tallest bar."""
    return max(wpm, best, 100) * 1.15


class SessionSummary(QWidget):
    """
    Final stats for a finished session plus a current-vs-best bar chart
    drawn against the benchmark levels.
    """

    retryRequested = Signal()
    newTestRequested = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)

        root = QVBoxLayout(self)
        root.setSpacing(18)

        title = QLabel("Test Complete", self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 32px; font-weight: 700;")
        root.addWidget(title)

        body = QHBoxLayout()
        cards = QVBoxLayout()
        self.lblWPM = QLabel("0", self)
        self.lblWPM.setObjectName("lblWPM")
        self.lblAcc = QLabel("100%", self)
        self.lblAcc.setObjectName("lblAcc")
        for caption, lab in (("WPM", self.lblWPM), ("Accuracy", self.lblAcc)):
            cap = QLabel(caption.upper(), self)
            cap.setAlignment(Qt.AlignCenter)
            lab.setAlignment(Qt.AlignCenter)
            lab.setStyleSheet("font-size: 48px; font-weight: 900;")
            cards.addWidget(cap)
            cards.addWidget(lab)
        body.addLayout(cards, 1)

        # Plot setup
        self.plot = pg.PlotWidget()
        self.plot.setBackground(None)
        self.plot.setMenuEnabled(False)
        self.plot.setMouseEnabled(x=False, y=False)
        self.plot.hideButtons()
        self.plot.getAxis("bottom").setTicks([])
        self.plot.setLabel("left", "WPM")
        body.addWidget(self.plot, 2)
        root.addLayout(body, 1)

        details = QHBoxLayout()
        self.lblTime = QLabel("Time 0s", self)
        self.lblChars = QLabel("Chars 0", self)
        self.lblErrors = QLabel("Errors 0", self)
        for lab in (self.lblTime, self.lblChars, self.lblErrors):
            lab.setAlignment(Qt.AlignCenter)
            details.addWidget(lab)
        root.addLayout(details)

        row = QHBoxLayout()
        row.addStretch(1)
        btn_retry = QPushButton("Retry", self)
        btn_retry.clicked.connect(self.retryRequested)
        btn_new = QPushButton("New Test", self)
        btn_new.clicked.connect(self.newTestRequested)
        for btn in (btn_retry, btn_new):
            btn.setFocusPolicy(Qt.NoFocus)
            row.addWidget(btn)
        row.addStretch(1)
        root.addLayout(row)

    def show_result(self, stats: Stats, best: int, is_new_best: bool):
        self.lblWPM.setText(str(stats.wpm))
        self.lblAcc.setText(f"{stats.accuracy}%")
        self.lblAcc.setStyleSheet(
            "font-size: 48px; font-weight: 900; color: %s;"
            % ("#10b981" if stats.accuracy >= 95 else "#eab308")
        )
        self.lblTime.setText(f"Time {int(stats.time_elapsed)}s")
        self.lblChars.setText(f"Chars {stats.total_chars}")
        self.lblErrors.setText(f"Errors {stats.incorrect_chars}")
        self._draw_chart(stats.wpm, best, is_new_best)

    def _draw_chart(self, wpm: int, best: int, is_new_best: bool):
        self.plot.clear()
        top = chart_ceiling(wpm, best)
        self.plot.setYRange(0, top, padding=0)
        self.plot.setXRange(-0.75, 1.75, padding=0)

        for label, value in BENCHMARK_LEVELS:
            line = pg.InfiniteLine(
                pos=value,
                angle=0,
                pen=pg.mkPen((100, 116, 139), width=1, style=Qt.DashLine),
                label=label,
                labelOpts={"position": 0.95, "color": (148, 163, 184)},
            )
            self.plot.addItem(line)

        if not is_new_best:
            current = pg.BarGraphItem(x=[0], height=[wpm], width=0.5, brush=_CURRENT_BRUSH)
            self.plot.addItem(current)
        best_bar = pg.BarGraphItem(x=[1], height=[best], width=0.5, brush=_BEST_BRUSH)
        self.plot.addItem(best_bar)

        best_label = "New Best!" if is_new_best else "Best"
        self.plot.getAxis("bottom").setTicks([[(0, "" if is_new_best else "Current"), (1, best_label)]])
