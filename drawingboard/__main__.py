# drawingboard/__main__.py
import logging
import sys
from PyQt5.QtWidgets import QApplication, QSplashScreen
from PyQt5.QtGui import QPixmap, QPainter, QColor, QFont
from PyQt5.QtCore import Qt
from drawingboard.bug_report import install_excepthook
from drawingboard.config import SELECTED_TINT, load_settings
from drawingboard.logger import setup_logging


def _splash_screen() -> QSplashScreen:
    """Écran d'accueil affiché pendant la construction de la fenêtre."""
    pix = QPixmap(400, 300)
    pix.fill(Qt.white)
    painter = QPainter(pix)
    painter.setPen(QColor.fromRgbF(*SELECTED_TINT))
    f = QFont()
    f.setPointSize(32)
    painter.setFont(f)
    painter.drawText(pix.rect(), Qt.AlignCenter, "Drawing Board")
    painter.end()
    return QSplashScreen(pix)


def main():
    # Ensure uncaught exceptions are logged and reported
    install_excepthook()
    setup_logging(logging.DEBUG if "--debug" in sys.argv else logging.INFO)
    app = QApplication(sys.argv)
    from drawingboard.ui.main_window import MainWindow

    settings = load_settings()
    splash = None
    if settings.show_splash:
        splash = _splash_screen()
        splash.show()
        app.processEvents()

    win = MainWindow(settings)
    if splash:
        splash.finish(win)
    win.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
