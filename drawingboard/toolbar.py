# drawingboard/toolbar.py
"""
Barre d'outils latérale : pinceaux, sélecteur de couleur et d'épaisseur.

La barre possède la liste des pinceaux, le pinceau sélectionné et les deux
sélecteurs. Elle installe sur la scène le gestionnaire de glissement qui
dessine avec le pinceau courant, ainsi que le gestionnaire de toucher
extérieur qui referme les sélecteurs.
"""

import logging
from typing import Sequence

from .brushes import Brush, Pen
from .color import CLEAR, Color
from .config import (
    DEFAULT_SETTINGS,
    MAX_BRUSHES,
    SELECTED_TINT,
    SIDEBAR_BASE_HEIGHT,
    SIDEBAR_BOUNDARY_X,
    SIDEBAR_COLOR,
    SIDEBAR_HEIGHT_PER_BRUSH,
    SIDEBAR_SPACING,
    SIDEBAR_TOP_MARGIN,
    SIDEBAR_WIDTH,
    SIDEBAR_X,
    UNSELECTED_TINT,
    Settings,
)
from .geometry import Point, Size, Touch
from .pickers import ColorPicker, Picker, PickerKind, ThicknessPicker
from .scene import Scene

logger = logging.getLogger(__name__)


class DrawingToolBar:
    """Sets up the drawing app: every brush plus the color and thickness pickers."""

    width = SIDEBAR_WIDTH
    spacing = SIDEBAR_SPACING
    max_brushes = MAX_BRUSHES

    def __init__(
        self,
        scene: Scene,
        brushes: Sequence[Brush],
        settings: Settings = DEFAULT_SETTINGS,
    ):
        self.scene = scene
        self.settings = settings
        brushes = list(brushes)
        if len(brushes) > self.max_brushes:
            logger.warning(
                f"Toolbar holds {self.max_brushes} brushes, "
                f"ignoring {len(brushes) - self.max_brushes}"
            )
        self.brushes: list[Brush] = brushes[: self.max_brushes]
        self.selected_brush: Brush = (
            self.brushes[0] if self.brushes else Pen(scene, settings)
        )
        self.height = SIDEBAR_BASE_HEIGHT + len(self.brushes) * SIDEBAR_HEIGHT_PER_BRUSH

        self.color_picker = ColorPicker(scene, settings)
        self.thickness_picker = ThicknessPicker(scene, settings)
        self.pickers: dict[PickerKind, Picker] = {
            PickerKind.COLOR: self.color_picker,
            PickerKind.THICKNESS: self.thickness_picker,
        }
        self.picker_positions: dict[PickerKind, Point] = {}
        self._drawing_enabled = False

        self.side_rect = scene.rectangle(self.width, self.height, 20, SIDEBAR_COLOR)
        self.side_rect.pinned = True
        self._set_up_side_bar()
        self.enable_drawing()

    # ------------------------------------------------------------------
    @property
    def drawing_enabled(self) -> bool:
        return self._drawing_enabled

    def enable_drawing(self):
        """Forwards canvas drags to the selected brush."""
        self.scene.set_on_touch_moved_handler(self._draw)
        if not self._drawing_enabled:
            logger.debug("Drawing enabled")
        self._drawing_enabled = True

    def disable_drawing(self):
        self.scene.set_on_touch_moved_handler(self._ignore)
        if self._drawing_enabled:
            logger.debug("Drawing disabled")
        self._drawing_enabled = False

    def _draw(self, touch: Touch):
        # touches over the sidebar never reach a brush
        if touch.position.x <= SIDEBAR_BOUNDARY_X:
            return
        self.selected_brush.handle_touch(touch)

    def _ignore(self, touch: Touch):
        pass

    def _end_stroke(self, touch: Touch):
        self.selected_brush.reset()

    # ------------------------------------------------------------------
    def _all_brushes(self) -> list[Brush]:
        if self.selected_brush in self.brushes:
            return self.brushes
        return self.brushes + [self.selected_brush]

    def select_brush(self, brush: Brush):
        brush.icon.pulse()
        self.selected_brush.icon.set_image_color(UNSELECTED_TINT)
        brush.icon.set_image_color(SELECTED_TINT)
        self.selected_brush = brush
        brush.reset()
        logger.debug(f"Brush selected: {brush.kind.value}")

    def open_picker(self, kind: PickerKind):
        picker = self.pickers[kind]
        picker.icon.pulse()
        # a selection still animating in either picker must not reach the new one
        for other in self.pickers.values():
            other.cancel()
        self.disable_drawing()
        if kind is PickerKind.COLOR:
            picker.on_selected = self._apply_color
        else:
            picker.on_selected = self._apply_thickness
        picker.draw(self.picker_positions[kind])

    def dismiss_pickers(self):
        self.thickness_picker.dismiss()
        self.color_picker.dismiss()

    def _apply_color(self, color: Color):
        self.color_picker.icon.background_color = color
        for brush in self._all_brushes():
            brush.color = color
        self.enable_drawing()

    def _apply_thickness(self, thickness: int):
        for brush in self._all_brushes():
            brush.thickness = thickness
        icon = self.thickness_picker.icon
        icon.size = Size(icon.size.width, thickness)
        self.enable_drawing()

    def _outside_tap(self, touch: Touch):
        self.dismiss_pickers()
        self.enable_drawing()

    # ------------------------------------------------------------------
    def _set_up_side_bar(self):
        """Places the sidebar, every brush icon and both picker icons."""
        self.scene.place(self.side_rect, at=Point(SIDEBAR_X, 0))

        position = Point(SIDEBAR_X, self.height / 2 - SIDEBAR_TOP_MARGIN)
        for brush in self.brushes:
            tint = SELECTED_TINT if brush is self.selected_brush else UNSELECTED_TINT
            brush.icon.set_image_color(tint)
            brush.icon.pinned = True
            brush.icon.set_on_touch_handler(
                lambda touch, selected=brush: self.select_brush(selected)
            )
            self.scene.place(brush.icon, at=position)
            position = position.offset(dy=-self.spacing)

        # color picker
        self.picker_positions[PickerKind.COLOR] = position
        self.color_picker.icon.pinned = True
        self.color_picker.icon.set_on_touch_handler(
            lambda touch: self.open_picker(PickerKind.COLOR)
        )
        self.scene.place(self.color_picker.icon, at=position)

        # thickness picker, behind a clear hit target
        position = position.offset(dy=-self.spacing)
        self.picker_positions[PickerKind.THICKNESS] = position
        overlay = self.scene.circle(20, CLEAR)
        overlay.pinned = True
        overlay.z_position = 1
        overlay.set_on_touch_handler(
            lambda touch: self.open_picker(PickerKind.THICKNESS)
        )
        self.thickness_picker.icon.pinned = True
        self.scene.place(self.thickness_picker.icon, at=position)
        self.scene.place(overlay, at=position)

        # dismisses pickers when touching outside of them
        self.scene.set_on_touch_handler(self._outside_tap)
        self.scene.set_on_touch_ended_handler(self._end_stroke)
        logger.debug(
            f"Toolbar set up with {len(self.brushes)} brushes, height {self.height}"
        )
