# drawingboard/pickers.py
"""
Sélecteurs modaux de la barre d'outils (couleur et épaisseur).

Un sélecteur passe de fermé à ouvert avec ``draw`` puis se referme soit
lorsqu'une case est touchée (``on_selected`` est appelé après l'animation,
puis ``dismiss``), soit par ``dismiss`` seul lors d'un toucher extérieur.
"""

import logging
from enum import Enum
from typing import Callable, Optional, Protocol

from .color import BLACK, CLEAR, Color
from .config import (
    COLOR_CELL_SCALE,
    COLOR_PICKER_HEIGHT,
    COLOR_PICKER_PANEL,
    COLOR_PICKER_WIDTH,
    DEFAULT_DRAWING_COLOR,
    DEFAULT_SETTINGS,
    ELEMENT_SIZE,
    PICKER_Z,
    THICKNESS_CELL_SCALE,
    THICKNESS_PICKER_HEIGHT,
    THICKNESS_PICKER_PANEL,
    THICKNESS_PICKER_WIDTH,
    THICKNESS_STEP,
    Settings,
)
from .geometry import Anchor, Point
from .scene import Graphic, Scene

logger = logging.getLogger(__name__)


class PickerKind(Enum):
    COLOR = "color"
    THICKNESS = "thickness"


class Picker(Protocol):
    kind: PickerKind
    name: str
    icon: Graphic
    on_selected: Callable

    @property
    def is_open(self) -> bool: ...

    def draw(self, at: Point) -> None: ...

    def dismiss(self) -> None: ...

    def cancel(self) -> None: ...


class CellSelection:
    """
    Tracks the open sessions of a picker grid.

    Only the first cell touched in a session is honoured, and a completion
    scheduled by an older session is stale once the grid has been redrawn.
    """

    def __init__(self):
        self.session = 0
        self.chosen = False

    def begin(self):
        self.session += 1
        self.chosen = False

    def claim(self) -> Optional[int]:
        if self.chosen:
            return None
        self.chosen = True
        return self.session

    def cancel(self):
        """Makes a pending completion stale until the next ``begin``."""
        self.session += 1
        self.chosen = True

    def is_current(self, session: int) -> bool:
        return session == self.session


def _grid_count(extent: int, element_size: int) -> int:
    if element_size <= 0:
        return 0
    return max(0, extent // element_size)


class ColorPicker:
    """Hue/saturation grid with a grayscale column on the right."""

    kind = PickerKind.COLOR
    name = "colorPicker"
    cell_inset = 27
    icon_outline = 6

    def __init__(
        self,
        scene: Scene,
        settings: Settings = DEFAULT_SETTINGS,
        width: int = COLOR_PICKER_WIDTH,
        height: int = COLOR_PICKER_HEIGHT,
        element_size: int = ELEMENT_SIZE,
    ):
        self.scene = scene
        self.width = width
        self.height = height
        self.element_size = element_size
        self.duration = settings.selection_duration
        self.on_selected: Callable[[Color], None] = lambda color: None
        self.icon = scene.circle(25, DEFAULT_DRAWING_COLOR)
        self.icon.stroke_color = BLACK
        self.icon.stroke_width = self.icon_outline
        self.panel: Optional[Graphic] = None
        self._open = False
        self._selection = CellSelection()

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def rows(self) -> int:
        return _grid_count(self.height, self.element_size)

    @property
    def columns(self) -> int:
        return _grid_count(self.width, self.element_size)

    def color_at(self, row: int, column: int) -> Color:
        """Color of the 1-based cell (row, column)."""
        saturation = row / self.rows
        if column == self.columns:
            return Color.gray(saturation)
        return Color.from_hsv(column / self.columns, saturation, 1.0)

    def dismiss(self):
        """Removes all graphics of the grid. Does nothing when closed."""
        if not self._open:
            return
        self._open = False
        self.icon.stroke_color = BLACK
        self.icon.stroke_width = self.icon_outline
        self.scene.remove_graphics(self.name)
        logger.debug("Color picker dismissed")

    def cancel(self):
        """Dismisses the grid and drops a selection still animating."""
        self._selection.cancel()
        self.dismiss()

    def draw(self, at: Point):
        panel = self.scene.rectangle(
            self.width + 20, self.height + 20, 20, COLOR_PICKER_PANEL
        )
        panel.name = self.name
        panel.z_position = PICKER_Z - 1
        # presses on the panel background stay inside the picker
        panel.set_on_touch_handler(lambda touch: None)
        self.panel = panel
        self.scene.place(panel, at=at, anchor=Anchor.LEFT)
        self._open = True
        self._selection.begin()

        rows, columns = self.rows, self.columns
        logger.debug(f"Color picker opened with {rows}x{columns} cells")
        if rows < 1 or columns < 1:
            return

        column_distance = self.width / columns
        row_distance = self.height / rows
        y = at.y + self.height / 1.65
        for row in range(1, rows + 1):
            y -= row_distance
            x = at.x + self.cell_inset
            for column in range(1, columns + 1):
                color = self.color_at(row, column)
                square = self.scene.rectangle(
                    self.element_size, self.element_size, 0, color
                )
                square.name = self.name
                square.z_position = PICKER_Z
                square.set_on_touch_handler(
                    lambda touch, cell=square, value=color: self._on_cell_touched(
                        cell, value
                    )
                )
                self.scene.place(square, at=Point(x, y))
                x += column_distance

    def _on_cell_touched(self, cell: Graphic, color: Color):
        session = self._selection.claim()
        if session is None:
            logger.debug("Color cell ignored, a selection is already running")
            return
        cell.z_position = PICKER_Z + 1
        cell.run(COLOR_CELL_SCALE, self.duration)
        self.scene.schedule(self.duration, lambda: self._finish(session, color))

    def _finish(self, session: int, color: Color):
        if not self._selection.is_current(session):
            logger.debug("Dropping stale color selection")
            return
        logger.debug(f"Color selected: {color.name()}")
        self.on_selected(color)
        self.dismiss()


class ThicknessPicker:
    """A single row of stroke samples, each three units thicker than the last."""

    kind = PickerKind.THICKNESS
    name = "thicknessPicker"
    cell_inset = 25
    sample_length = 40
    hit_radius = 20

    def __init__(
        self,
        scene: Scene,
        settings: Settings = DEFAULT_SETTINGS,
        width: int = THICKNESS_PICKER_WIDTH,
        height: int = THICKNESS_PICKER_HEIGHT,
        element_size: int = ELEMENT_SIZE,
    ):
        self.scene = scene
        self.width = width
        self.height = height
        self.element_size = element_size
        self.duration = settings.selection_duration
        self.on_selected: Callable[[int], None] = lambda thickness: None
        self.icon = scene.line_sample(self.sample_length, 15, BLACK)
        self.icon.rotation = 90
        self.panel: Optional[Graphic] = None
        self._open = False
        self._selection = CellSelection()

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def columns(self) -> int:
        return _grid_count(self.width, self.element_size)

    @staticmethod
    def thickness_at(column: int) -> int:
        """Thickness of the 1-based cell ``column``."""
        return THICKNESS_STEP * column

    def dismiss(self):
        """Removes all graphics of the row. Does nothing when closed."""
        if not self._open:
            return
        self._open = False
        self.scene.remove_graphics(self.name)
        logger.debug("Thickness picker dismissed")

    def cancel(self):
        """Dismisses the row and drops a selection still animating."""
        self._selection.cancel()
        self.dismiss()

    def draw(self, at: Point):
        panel = self.scene.rectangle(
            self.width + 20, self.height + 10, 20, THICKNESS_PICKER_PANEL
        )
        panel.name = self.name
        panel.z_position = PICKER_Z - 1
        # presses on the panel background stay inside the picker
        panel.set_on_touch_handler(lambda touch: None)
        self.panel = panel
        self.scene.place(panel, at=at, anchor=Anchor.LEFT)
        self._open = True
        self._selection.begin()

        columns = self.columns
        logger.debug(f"Thickness picker opened with {columns} cells")
        if columns < 1:
            return

        column_distance = self.width / columns
        x = at.x + self.cell_inset
        for column in range(1, columns + 1):
            thickness = self.thickness_at(column)
            sample = self.scene.line_sample(self.sample_length, thickness, BLACK)
            sample.name = self.name
            sample.rotation = 90
            sample.z_position = PICKER_Z
            target = self.scene.circle(self.hit_radius, CLEAR)
            target.name = self.name
            target.z_position = PICKER_Z + 1
            target.set_on_touch_handler(
                lambda touch, cell=sample, value=thickness: self._on_cell_touched(
                    cell, value
                )
            )
            self.scene.place(sample, at=Point(x, at.y))
            self.scene.place(target, at=Point(x, at.y))
            x += column_distance

    def _on_cell_touched(self, cell: Graphic, thickness: int):
        session = self._selection.claim()
        if session is None:
            logger.debug("Thickness cell ignored, a selection is already running")
            return
        cell.run(THICKNESS_CELL_SCALE, self.duration)
        self.scene.schedule(self.duration, lambda: self._finish(session, thickness))

    def _finish(self, session: int, thickness: int):
        if not self._selection.is_current(session):
            logger.debug("Dropping stale thickness selection")
            return
        logger.debug(f"Thickness selected: {thickness}")
        self.on_selected(thickness)
        self.dismiss()
