# drawingboard/config.py
"""
Constantes de mise en page et préférences utilisateur.

Les préférences sont lues depuis ``QSettings("drawingboard", "drawingboard")``
quand Qt est disponible ; le cœur fonctionne avec les valeurs par défaut.
"""

import logging

from .color import Color

logger = logging.getLogger(__name__)

# Sidebar layout, in scene coordinates (origin at the centre, y up)
SIDEBAR_BOUNDARY_X = -410
SIDEBAR_X = -460
SIDEBAR_WIDTH = 90
SIDEBAR_BASE_HEIGHT = 250
SIDEBAR_HEIGHT_PER_BRUSH = 75
SIDEBAR_SPACING = 85
SIDEBAR_TOP_MARGIN = 60
MAX_BRUSHES = 6

SCENE_WIDTH = 1024
SCENE_HEIGHT = 768

# Pickers
ELEMENT_SIZE = 40
COLOR_PICKER_WIDTH = 400
COLOR_PICKER_HEIGHT = 200
THICKNESS_PICKER_WIDTH = 400
THICKNESS_PICKER_HEIGHT = 60
THICKNESS_STEP = 3
COLOR_CELL_SCALE = 2.0
THICKNESS_CELL_SCALE = 1.5
PICKER_Z = 10

# Colors
DEFAULT_DRAWING_COLOR = Color(0.0, 0.0, 0.0)
SELECTED_TINT = Color(0.686, 0.322, 0.871)
UNSELECTED_TINT = Color(0.0, 0.0, 0.0)
SIDEBAR_COLOR = Color(0.8, 0.8, 0.8)
COLOR_PICKER_PANEL = Color(0.278, 0.278, 0.278)
THICKNESS_PICKER_PANEL = Color(0.921, 0.921, 0.921)
ERASER_COLOR = Color(1.0, 1.0, 1.0)


class Settings:
    """User preferences with their default values."""

    def __init__(
        self,
        pen_thickness: int = 5,
        eraser_thickness: int = 30,
        selection_duration: float = 0.2,
        show_splash: bool = True,
        show_logs: bool = False,
    ):
        self.pen_thickness = pen_thickness
        self.eraser_thickness = eraser_thickness
        self.selection_duration = selection_duration
        self.show_splash = show_splash
        self.show_logs = show_logs

    def save(self, settings=None):
        from PyQt5.QtCore import QSettings

        settings = settings or QSettings("drawingboard", "drawingboard")
        settings.setValue("pen_thickness", self.pen_thickness)
        settings.setValue("eraser_thickness", self.eraser_thickness)
        settings.setValue("selection_duration", self.selection_duration)
        settings.setValue("show_splash", self.show_splash)
        settings.setValue("show_logs", self.show_logs)


DEFAULT_SETTINGS = Settings()


def load_settings(settings=None) -> Settings:
    """Read preferences from QSettings, falling back to defaults."""
    from PyQt5.QtCore import QSettings

    settings = settings or QSettings("drawingboard", "drawingboard")
    loaded = Settings(
        pen_thickness=int(settings.value("pen_thickness", 5)),
        eraser_thickness=int(settings.value("eraser_thickness", 30)),
        selection_duration=float(settings.value("selection_duration", 0.2)),
        show_splash=settings.value("show_splash", True, type=bool),
        show_logs=settings.value("show_logs", False, type=bool),
    )
    logger.debug(
        f"Settings loaded: pen={loaded.pen_thickness} "
        f"eraser={loaded.eraser_thickness} "
        f"duration={loaded.selection_duration}"
    )
    return loaded
