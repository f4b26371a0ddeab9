# drawingboard/ui/main_window.py
import logging
from PyQt5.QtWidgets import QMainWindow, QDockWidget, QAction
from PyQt5.QtCore import Qt, QSettings

from ..brushes import Eraser, Lines, Pen, SprayPaint
from ..canvas import CanvasWidget
from ..config import SCENE_HEIGHT, SCENE_WIDTH, load_settings
from ..toolbar import DrawingToolBar
from .logs_dock import LogsWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Window hosting the drawing canvas, its toolbar and the log dock."""

    def __init__(self, settings=None):
        super().__init__()
        logger.debug("MainWindow initialized")
        self.setWindowTitle("Drawing Board")
        self.resize(SCENE_WIDTH, SCENE_HEIGHT)

        # Paramètres de l'application
        self.qsettings = QSettings("drawingboard", "drawingboard")
        self.settings = settings or load_settings(self.qsettings)

        self.canvas = CanvasWidget(self)
        self.setCentralWidget(self.canvas)

        scene = self.canvas.scene
        brushes = [
            Pen(scene, self.settings),
            Lines(scene, self.settings),
            Eraser(scene, self.settings),
            SprayPaint(scene, self.settings),
        ]
        self.toolbar = DrawingToolBar(scene, brushes, self.settings)

        self.logs_widget = LogsWidget(self)
        self.logs_dock = QDockWidget("Logs", self)
        self.logs_dock.setWidget(self.logs_widget)
        self.addDockWidget(Qt.BottomDockWidgetArea, self.logs_dock)
        self.logs_dock.setVisible(self.settings.show_logs)

        self._build_menu()

        geometry = self.qsettings.value("geometry")
        if geometry is not None:
            self.restoreGeometry(geometry)

    def _build_menu(self):
        mb = self.menuBar()
        self.actions = {}

        filem = mb.addMenu("Fichier")
        exit_act = QAction("Quitter", self)
        exit_act.setShortcut("Ctrl+Q")
        exit_act.triggered.connect(self.close)
        filem.addAction(exit_act)
        self.actions["exit"] = exit_act

        viewm = mb.addMenu("Affichage")
        logs_act = self.logs_dock.toggleViewAction()
        logs_act.setText("Logs")
        viewm.addAction(logs_act)
        self.actions["logs"] = logs_act

    # ------------------------------------------------------------------
    def closeEvent(self, event):
        self.qsettings.setValue("geometry", self.saveGeometry())
        self.settings.show_logs = self.logs_dock.isVisible()
        self.settings.save(self.qsettings)
        event.accept()
