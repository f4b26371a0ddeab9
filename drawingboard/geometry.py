# drawingboard/geometry.py
"""
Types de base partagés par le cœur : positions, tailles et événements tactiles.

Les coordonnées suivent la convention de la scène : origine au centre,
axe des y vers le haut.
"""

import math
import random
from enum import Enum
from typing import NamedTuple, Optional


class Point(NamedTuple):
    x: float = 0.0
    y: float = 0.0

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def random_point(self, radius: float, rng: Optional[random.Random] = None) -> "Point":
        """Return a point drawn uniformly from the disc of ``radius`` around self."""
        rng = rng or random
        if radius <= 0:
            return self
        angle = rng.uniform(0, 2 * math.pi)
        distance = radius * math.sqrt(rng.random())
        return Point(
            self.x + distance * math.cos(angle),
            self.y + distance * math.sin(angle),
        )


class Size(NamedTuple):
    width: float = 0.0
    height: float = 0.0

    def region(self, center: Point) -> tuple[float, float, float, float]:
        """(left, bottom, right, top) of a box of this size centred on ``center``."""
        half_w = self.width / 2
        half_h = self.height / 2
        return (
            center.x - half_w,
            center.y - half_h,
            center.x + half_w,
            center.y + half_h,
        )


class Touch(NamedTuple):
    position: Point


class Anchor(Enum):
    CENTER = "center"
    LEFT = "left"
