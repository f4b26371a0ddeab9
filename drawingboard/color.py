# drawingboard/color.py
"""
Couleur opaque transmise telle quelle entre les pinceaux, les sélecteurs
et la scène. Le rendu la convertit dans son propre type (QColor, …).
"""

import colorsys
from typing import NamedTuple


class Color(NamedTuple):
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, brightness: float = 1.0,
                 alpha: float = 1.0) -> "Color":
        r, g, b = colorsys.hsv_to_rgb(hue, saturation, brightness)
        return cls(r, g, b, alpha)

    @classmethod
    def gray(cls, white: float, alpha: float = 1.0) -> "Color":
        return cls(white, white, white, alpha)

    @property
    def hue(self) -> float:
        return colorsys.rgb_to_hsv(self.red, self.green, self.blue)[0]

    @property
    def saturation(self) -> float:
        return colorsys.rgb_to_hsv(self.red, self.green, self.blue)[1]

    @property
    def brightness(self) -> float:
        return colorsys.rgb_to_hsv(self.red, self.green, self.blue)[2]

    @property
    def is_gray(self) -> bool:
        return self.red == self.green == self.blue

    @property
    def white(self) -> float:
        """Gray level, only meaningful when ``is_gray``."""
        return self.red

    def name(self) -> str:
        """Hex string, same format as QColor.name()."""
        r, g, b = (int(round(c * 255)) for c in (self.red, self.green, self.blue))
        return f"#{r:02x}{g:02x}{b:02x}"


CLEAR = Color(0.0, 0.0, 0.0, 0.0)
BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
