import sys
import os
import logging
import traceback
from datetime import datetime
from PyQt5.QtWidgets import QApplication, QMessageBox

logger = logging.getLogger(__name__)

LOG_DIR = os.path.join(os.path.expanduser("~"), "drawingboard_logs")
LOG_FILE = os.path.join(LOG_DIR, "drawingboard.log")


def write_report(exc_type, exc_value, exc_tb, log_file=LOG_FILE):
    """Append the traceback to ``log_file`` and return the formatted text."""
    os.makedirs(os.path.dirname(log_file), exist_ok=True)
    details = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    with open(log_file, "a", encoding="utf-8") as f:
        f.write(f"\n=== {datetime.now().isoformat()} ===\n")
        f.write(details)
    return details


def _excepthook(exc_type, exc_value, exc_tb):
    """Log the traceback to a file and show a dialog when the UI is running."""
    details = write_report(exc_type, exc_value, exc_tb)
    logger.error(f"Uncaught {exc_type.__name__}: {exc_value}")

    app = QApplication.instance()
    if app is not None:
        try:
            msg = QMessageBox()
            msg.setIcon(QMessageBox.Critical)
            msg.setWindowTitle("Drawing Board - Erreur")
            msg.setText(
                "Une erreur inattendue est survenue. "
                f"Un rapport a été enregistré dans:\n{LOG_FILE}"
            )
            msg.setDetailedText(details)
            msg.exec_()
        except Exception:
            logger.exception("Could not display the error dialog")

    sys.__excepthook__(exc_type, exc_value, exc_tb)


def install_excepthook():
    """Install global exception handler that logs uncaught exceptions."""
    sys.excepthook = _excepthook
