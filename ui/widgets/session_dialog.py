import logging

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QPlainTextEdit, QFileDialog, QMessageBox
)

from app.errors import TextFileError
from utils.file_handler import load_text_file, single_line

logger = logging.getLogger(__name__)


class CustomTextDialog(QDialog):
    def __init__(self, draft: str = "", parent=None):
        super().__init__(parent)
        self.setWindowTitle("Custom Text")
        self.resize(640, 360)

        layout = QVBoxLayout(self)
        layout.setSpacing(14)

        layout.addWidget(QLabel("Paste your text here...", self))
        self.txt_draft = QPlainTextEdit(self)
        self.txt_draft.setPlainText(draft)
        self.txt_draft.textChanged.connect(self._sync_start)
        layout.addWidget(self.txt_draft, 1)

        # Buttons
        row = QHBoxLayout()
        btn_load = QPushButton("Load file…", self)
        btn_load.clicked.connect(self._on_load)
        self.btn_start = QPushButton("Start Test", self)
        self.btn_start.clicked.connect(self.accept)
        btn_cancel = QPushButton("Cancel", self)
        btn_cancel.clicked.connect(self.reject)
        row.addWidget(btn_load)
        row.addStretch(1)
        row.addWidget(btn_cancel)
        row.addWidget(self.btn_start)

        layout.addLayout(row)
        self._sync_start()

    @property
    def draft(self) -> str:
        return single_line(self.txt_draft.toPlainText())

    def _sync_start(self):
        self.btn_start.setEnabled(bool(self.draft.strip()))

    def _on_load(self):
        path, _ = QFileDialog.getOpenFileName(self, "Open text", "", "Text (*.txt)")
        if not path:
            return
        try:
            self.txt_draft.setPlainText(load_text_file(path))
        except TextFileError as e:
            logger.warning("Custom text file rejected: %s", e)
            QMessageBox.warning(self, "Load Text", str(e))
