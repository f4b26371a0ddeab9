# drawingboard/brushes.py
"""
Pinceaux de la barre d'outils.

Chaque pinceau transforme un événement tactile en marques sur la scène.
``thickness`` et ``color`` sont lus au moment de l'appel : une modification
par un sélecteur s'applique au trait suivant.
"""

import logging
import random
from enum import Enum
from typing import Optional, Protocol

from .color import Color
from .config import (
    DEFAULT_DRAWING_COLOR,
    DEFAULT_SETTINGS,
    ERASER_COLOR,
    SIDEBAR_BOUNDARY_X,
    Settings,
)
from .geometry import Point, Size, Touch
from .scene import Graphic, Scene

logger = logging.getLogger(__name__)


class BrushKind(Enum):
    PEN = "pen"
    LINES = "lines"
    SPRAY_PAINT = "spray_paint"
    ERASER = "eraser"


class Brush(Protocol):
    kind: BrushKind
    thickness: int
    color: Color
    icon: Graphic

    def handle_touch(self, touch: Touch) -> None: ...

    def reset(self) -> None:
        """End the current stroke."""


class Pen:
    """Draws a series of circles to create free-form lines."""

    kind = BrushKind.PEN
    icon_name = "pen"

    def __init__(self, scene: Scene, settings: Settings = DEFAULT_SETTINGS):
        self.scene = scene
        self.thickness: int = settings.pen_thickness
        self.color: Color = DEFAULT_DRAWING_COLOR
        self.icon = scene.image(self.icon_name)

    def handle_touch(self, touch: Touch):
        circle = self.scene.circle(self.thickness // 2, self.color)
        self.scene.place(circle, at=touch.position)

    def reset(self):
        pass


class Lines:
    """Draws a straight segment from the previous touch point to the current one."""

    kind = BrushKind.LINES
    icon_name = "lines"

    def __init__(self, scene: Scene, settings: Settings = DEFAULT_SETTINGS):
        self.scene = scene
        self.thickness: int = settings.pen_thickness
        self.color: Color = DEFAULT_DRAWING_COLOR
        self.icon = scene.image(self.icon_name)
        self.previous_touch_point: Optional[Point] = None

    def handle_touch(self, touch: Touch):
        if self.previous_touch_point is None:
            self.previous_touch_point = touch.position
        line = self.scene.line(
            self.previous_touch_point, touch.position, self.thickness, self.color
        )
        self.scene.place(line)
        self.previous_touch_point = touch.position

    def reset(self):
        self.previous_touch_point = None


class SprayPaint:
    """Simulates spray paint with a cluster of variously sized dots."""

    kind = BrushKind.SPRAY_PAINT
    icon_name = "spray_paint"
    min_dots = 10
    max_dots = 30

    def __init__(
        self,
        scene: Scene,
        settings: Settings = DEFAULT_SETTINGS,
        rng: Optional[random.Random] = None,
    ):
        self.scene = scene
        self.thickness: int = settings.pen_thickness
        self.color: Color = DEFAULT_DRAWING_COLOR
        self.icon = scene.image(self.icon_name)
        self.rng = rng or random.Random()

    def handle_touch(self, touch: Touch):
        thickness = self.thickness
        color = self.color
        for _ in range(self.rng.randint(self.min_dots, self.max_dots)):
            radius = 1 + self.rng.randint(0, max(0, thickness // 2))
            point = touch.position.random_point(thickness, self.rng)
            # keeps the spray out of the sidebar
            if point.x <= SIDEBAR_BOUNDARY_X:
                continue
            self.scene.place(self.scene.circle(radius, color), at=point)

    def reset(self):
        pass


class Eraser:
    """Removes every graphic within the brush's square footprint."""

    kind = BrushKind.ERASER
    icon_name = "eraser"

    def __init__(self, scene: Scene, settings: Settings = DEFAULT_SETTINGS):
        self.scene = scene
        self.thickness: int = settings.eraser_thickness
        self.color: Color = ERASER_COLOR
        self.icon = scene.image(self.icon_name)

    def handle_touch(self, touch: Touch):
        side = self.thickness * 2
        graphics = self.scene.get_graphics(touch.position, Size(side, side))
        if graphics:
            logger.debug(
                f"Erasing {len(graphics)} graphics at "
                f"{touch.position.x:.1f},{touch.position.y:.1f}"
            )
            self.scene.remove(graphics)

    def reset(self):
        pass
