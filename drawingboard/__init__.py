"""
Drawing surface with a side toolbar of brushes, a color picker and a
thickness picker.

The core (brushes, pickers, toolbar) only depends on the ``Scene`` and
``Graphic`` capabilities; ``drawingboard.canvas`` renders them with PyQt5.
"""

from .brushes import Brush, BrushKind, Eraser, Lines, Pen, SprayPaint
from .color import Color
from .geometry import Anchor, Point, Size, Touch
from .pickers import ColorPicker, Picker, PickerKind, ThicknessPicker
from .toolbar import DrawingToolBar

__all__ = [
    "Anchor",
    "Brush",
    "BrushKind",
    "Color",
    "ColorPicker",
    "DrawingToolBar",
    "Eraser",
    "Lines",
    "Pen",
    "Picker",
    "PickerKind",
    "Point",
    "Size",
    "SprayPaint",
    "ThicknessPicker",
    "Touch",
]
