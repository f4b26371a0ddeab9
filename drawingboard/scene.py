# drawingboard/scene.py
"""
Capacités exigées du moteur de rendu.

Le cœur (pinceaux, sélecteurs, barre d'outils) ne connaît que ces deux
protocoles ; ``drawingboard.canvas`` en fournit une implémentation PyQt5.
"""

from typing import Callable, Iterable, Optional, Protocol

from .color import Color
from .geometry import Anchor, Point, Size, Touch

TouchHandler = Callable[[Touch], None]


class Graphic(Protocol):
    """A placed visual element."""

    name: str
    z_position: float
    rotation: float
    size: Size
    background_color: Color
    stroke_color: Color
    stroke_width: float
    position: Point
    # pinned graphics are toolbar chrome, never returned by get_graphics
    pinned: bool

    def set_on_touch_handler(self, handler: TouchHandler) -> None: ...

    def set_image_color(self, color: Color) -> None: ...

    def pulse(self) -> None: ...

    def run(self, scale: float, duration: float,
            completion: Optional[Callable[[], None]] = None) -> None:
        """Animate to ``scale`` over ``duration`` seconds, then call completion."""


class Scene(Protocol):
    # factories
    def circle(self, radius: float, color: Color) -> Graphic: ...

    def rectangle(self, width: float, height: float, corner_radius: float,
                  color: Color) -> Graphic: ...

    def line(self, start: Point, end: Point, thickness: float,
             color: Color) -> Graphic: ...

    def line_sample(self, length: float, thickness: float,
                    color: Color) -> Graphic:
        """A free-standing horizontal line, centred on its position."""

    def image(self, name: str) -> Graphic: ...

    # placement
    def place(self, graphic: Graphic, at: Optional[Point] = None,
              anchor: Anchor = Anchor.CENTER) -> None: ...

    def remove_graphics(self, named: str) -> None: ...

    def remove(self, graphics: Iterable[Graphic]) -> None: ...

    def get_graphics(self, at: Point, size: Size) -> list[Graphic]: ...

    # events
    def set_on_touch_moved_handler(self, handler: TouchHandler) -> None: ...

    def set_on_touch_handler(self, handler: TouchHandler) -> None: ...

    def set_on_touch_ended_handler(self, handler: TouchHandler) -> None: ...

    def schedule(self, duration: float, continuation: Callable[[], None]) -> None: ...
