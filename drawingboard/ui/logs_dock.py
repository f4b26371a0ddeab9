from PyQt5.QtWidgets import QWidget, QVBoxLayout, QPlainTextEdit
from ..logger import log_emitter


class LogsWidget(QWidget):
    """Read-only view of the application log, fed by ``QtHandler``."""

    def __init__(self, parent=None, max_lines=2000):
        super().__init__(parent)
        self.text_edit = QPlainTextEdit(self)
        self.text_edit.setReadOnly(True)
        self.text_edit.setMaximumBlockCount(max_lines)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.text_edit)
        log_emitter.log_record.connect(self.text_edit.appendPlainText)
