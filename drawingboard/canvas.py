# drawingboard/canvas.py
# -*- coding: utf-8 -*-
"""
Implémentation PyQt5 des capacités ``Scene`` et ``Graphic``.

Le cœur travaille avec l'origine au centre et l'axe des y vers le haut ;
la scène Qt a l'axe des y vers le bas, d'où ``to_scene``/``from_scene``.
"""

import logging
import os

from PyQt5.QtCore import QLineF, QPointF, QRectF, Qt, QTimer, QVariantAnimation
from PyQt5.QtGui import QBrush, QColor, QFont, QPainter, QPainterPath, QPen, QPixmap
from PyQt5.QtWidgets import (
    QGraphicsColorizeEffect,
    QGraphicsLineItem,
    QGraphicsPathItem,
    QGraphicsPixmapItem,
    QGraphicsScene,
    QGraphicsView,
)

from .color import BLACK, CLEAR, Color
from .config import SCENE_HEIGHT, SCENE_WIDTH
from .geometry import Anchor, Point, Size, Touch

logger = logging.getLogger(__name__)

ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")
ICON_SIZE = 56
# QGraphicsItem.data() key holding the wrapping graphic
GRAPHIC_KEY = 0


def to_qcolor(color: Color) -> QColor:
    return QColor.fromRgbF(color.red, color.green, color.blue, color.alpha)


def from_qcolor(qcolor: QColor) -> Color:
    return Color(qcolor.redF(), qcolor.greenF(), qcolor.blueF(), qcolor.alphaF())


def to_scene(point: Point) -> QPointF:
    return QPointF(point.x, -point.y)


def from_scene(pos: QPointF) -> Point:
    return Point(pos.x(), -pos.y())


class CanvasGraphic:
    """Common state of every graphic placed on a ``CanvasScene``."""

    def __init__(self, item):
        self.item = item
        self.name = ""
        self.pinned = False
        self._touch_handler = None
        self._animations = []
        item.setData(GRAPHIC_KEY, self)

    # -- Style -------------------------------------------------------
    @property
    def z_position(self) -> float:
        return self.item.zValue()

    @z_position.setter
    def z_position(self, value: float):
        self.item.setZValue(value)

    @property
    def rotation(self) -> float:
        return self.item.rotation()

    @rotation.setter
    def rotation(self, degrees: float):
        self.item.setRotation(degrees)

    @property
    def position(self) -> Point:
        return from_scene(self.item.pos())

    @position.setter
    def position(self, point: Point):
        self.item.setPos(to_scene(point))

    # -- Interaction -------------------------------------------------
    @property
    def touch_handler(self):
        return self._touch_handler

    def set_on_touch_handler(self, handler):
        self._touch_handler = handler

    def set_image_color(self, color: Color):
        effect = QGraphicsColorizeEffect()
        effect.setColor(to_qcolor(color))
        effect.setStrength(1.0)
        self.item.setGraphicsEffect(effect)

    # -- Animation ---------------------------------------------------
    def _animate(self, animation: QVariantAnimation, completion=None):
        self._animations.append(animation)
        animation.valueChanged.connect(self.item.setScale)

        def finished():
            if animation in self._animations:
                self._animations.remove(animation)
            if completion is not None:
                completion()

        animation.finished.connect(finished)
        animation.start()

    def pulse(self):
        anim = QVariantAnimation()
        anim.setDuration(150)
        anim.setStartValue(1.0)
        anim.setKeyValueAt(0.5, 1.2)
        anim.setEndValue(1.0)
        self._animate(anim)

    def run(self, scale: float, duration: float, completion=None):
        anim = QVariantAnimation()
        anim.setDuration(int(duration * 1000))
        anim.setStartValue(float(self.item.scale()))
        anim.setEndValue(float(scale))
        self._animate(anim, completion)


class ShapeGraphic(CanvasGraphic):
    """Circle or rounded rectangle, centred on its position."""

    def __init__(self, width: float, height: float, corner_radius: float = 0,
                 color: Color = BLACK, ellipse: bool = False):
        super().__init__(QGraphicsPathItem())
        self._ellipse = ellipse
        self._corner_radius = corner_radius
        self._size = Size(width, height)
        self._background = color
        self._stroke_color = CLEAR
        self._stroke_width = 0.0
        self._rebuild()
        self.item.setBrush(QBrush(to_qcolor(color)))
        self.item.setPen(QPen(Qt.NoPen))

    def _rebuild(self):
        w, h = self._size
        rect = QRectF(-w / 2, -h / 2, w, h)
        path = QPainterPath()
        if self._ellipse:
            path.addEllipse(rect)
        elif self._corner_radius:
            path.addRoundedRect(rect, self._corner_radius, self._corner_radius)
        else:
            path.addRect(rect)
        self.item.setPath(path)

    @property
    def size(self) -> Size:
        return self._size

    @size.setter
    def size(self, value: Size):
        self._size = Size(*value)
        self._rebuild()

    @property
    def background_color(self) -> Color:
        return self._background

    @background_color.setter
    def background_color(self, color: Color):
        self._background = color
        self.item.setBrush(QBrush(to_qcolor(color)))

    @property
    def stroke_color(self) -> Color:
        return self._stroke_color

    @stroke_color.setter
    def stroke_color(self, color: Color):
        self._stroke_color = color
        self._update_pen()

    @property
    def stroke_width(self) -> float:
        return self._stroke_width

    @stroke_width.setter
    def stroke_width(self, width: float):
        self._stroke_width = width
        self._update_pen()

    def _update_pen(self):
        if self._stroke_width <= 0:
            self.item.setPen(QPen(Qt.NoPen))
            return
        self.item.setPen(QPen(to_qcolor(self._stroke_color), self._stroke_width))


class LineGraphic(CanvasGraphic):
    """A segment with round caps. ``size`` is (length, thickness)."""

    def __init__(self, line: QLineF, thickness: float, color: Color = BLACK):
        super().__init__(QGraphicsLineItem(line))
        self._color = color
        self._thickness = thickness
        self._update_pen()

    def _update_pen(self):
        pen = QPen(to_qcolor(self._color), self._thickness)
        pen.setCapStyle(Qt.RoundCap)
        self.item.setPen(pen)

    @property
    def size(self) -> Size:
        return Size(self.item.line().length(), self._thickness)

    @size.setter
    def size(self, value: Size):
        length, thickness = value
        line = self.item.line()
        if line.length() > 0:
            line.setLength(length)
        self.item.setLine(line)
        self._thickness = thickness
        self._update_pen()

    @property
    def background_color(self) -> Color:
        return self._color

    @background_color.setter
    def background_color(self, color: Color):
        self.stroke_color = color

    @property
    def stroke_color(self) -> Color:
        return self._color

    @stroke_color.setter
    def stroke_color(self, color: Color):
        self._color = color
        self._update_pen()

    @property
    def stroke_width(self) -> float:
        return self._thickness

    @stroke_width.setter
    def stroke_width(self, width: float):
        self._thickness = width
        self._update_pen()


def _placeholder_pixmap(name: str) -> QPixmap:
    """Draws the first letters of ``name`` when no asset file exists."""
    pix = QPixmap(ICON_SIZE, ICON_SIZE)
    pix.fill(Qt.transparent)
    painter = QPainter(pix)
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setPen(QPen(Qt.black, 3))
    painter.drawEllipse(QRectF(3, 3, ICON_SIZE - 6, ICON_SIZE - 6))
    font = QFont()
    font.setPointSize(14)
    font.setBold(True)
    painter.setFont(font)
    label = "".join(part[0] for part in name.split("_")).upper()
    painter.drawText(pix.rect(), Qt.AlignCenter, label)
    painter.end()
    return pix


class ImageGraphic(CanvasGraphic):
    """Toolbar icon loaded from ``assets/<name>.png``."""

    def __init__(self, name: str):
        path = os.path.join(ASSETS_DIR, f"{name}.png")
        pix = QPixmap(path) if os.path.exists(path) else QPixmap()
        if pix.isNull():
            pix = _placeholder_pixmap(name)
        else:
            pix = pix.scaled(ICON_SIZE, ICON_SIZE, Qt.KeepAspectRatio,
                             Qt.SmoothTransformation)
        super().__init__(QGraphicsPixmapItem(pix))
        self._orig_pixmap = pix
        self._size = Size(pix.width(), pix.height())
        self._tint = None
        self.item.setShapeMode(QGraphicsPixmapItem.BoundingRectShape)
        self._background = CLEAR
        self.stroke_color = CLEAR
        self.stroke_width = 0.0
        self._render()

    def _render(self):
        w, h = self._size
        pix = self._orig_pixmap.scaled(
            int(round(w)), int(round(h)), Qt.KeepAspectRatio,
            Qt.SmoothTransformation,
        )
        if self._tint is not None:
            # template tinting: keep the alpha mask, replace the colors
            painter = QPainter(pix)
            painter.setCompositionMode(QPainter.CompositionMode_SourceIn)
            painter.fillRect(pix.rect(), to_qcolor(self._tint))
            painter.end()
        self.item.setPixmap(pix)
        self.item.setOffset(-pix.width() / 2, -pix.height() / 2)

    def set_image_color(self, color: Color):
        self._tint = color
        self._render()

    @property
    def size(self) -> Size:
        return self._size

    @size.setter
    def size(self, value: Size):
        w, h = value
        if w > 0 and h > 0:
            self._size = Size(w, h)
            self._render()

    @property
    def background_color(self) -> Color:
        return self._background

    @background_color.setter
    def background_color(self, color: Color):
        self._background = color


class CanvasScene(QGraphicsScene):
    """QGraphicsScene implementing the drawing ``Scene`` capability."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setSceneRect(
            -SCENE_WIDTH / 2, -SCENE_HEIGHT / 2, SCENE_WIDTH, SCENE_HEIGHT
        )
        self.setBackgroundBrush(QBrush(Qt.white))
        self._on_touch = self._ignore
        self._on_touch_moved = self._ignore
        self._on_touch_ended = self._ignore

    @staticmethod
    def _ignore(touch):
        pass

    # -- Factories ---------------------------------------------------
    def circle(self, radius, color):
        return ShapeGraphic(radius * 2, radius * 2, 0, color, ellipse=True)

    def rectangle(self, width, height, corner_radius, color):
        return ShapeGraphic(width, height, corner_radius, color)

    def line(self, start, end, thickness, color):
        return LineGraphic(QLineF(to_scene(start), to_scene(end)), thickness, color)

    def line_sample(self, length, thickness, color):
        return LineGraphic(QLineF(-length / 2, 0, length / 2, 0), thickness, color)

    def image(self, name):
        return ImageGraphic(name)

    # -- Placement ---------------------------------------------------
    def graphics(self) -> list:
        """Every placed graphic, topmost first."""
        found = []
        for item in self.items():
            graphic = item.data(GRAPHIC_KEY)
            if graphic is not None:
                found.append(graphic)
        return found

    def place(self, graphic, at=None, anchor=Anchor.CENTER):
        if at is not None:
            if anchor is Anchor.LEFT:
                at = at.offset(dx=graphic.size.width / 2)
            graphic.position = at
        self.addItem(graphic.item)

    def remove_graphics(self, named):
        doomed = [g for g in self.graphics() if g.name == named]
        for graphic in doomed:
            self.removeItem(graphic.item)
        if doomed:
            logger.debug(f"Removed {len(doomed)} graphics named {named}")

    def remove(self, graphics):
        for graphic in graphics:
            if graphic.item.scene() is self:
                self.removeItem(graphic.item)

    def get_graphics(self, at, size):
        center = to_scene(at)
        region = QRectF(
            center.x() - size.width / 2,
            center.y() - size.height / 2,
            size.width,
            size.height,
        )
        found = []
        for item in self.items(region, Qt.IntersectsItemBoundingRect):
            graphic = item.data(GRAPHIC_KEY)
            if graphic is not None and not graphic.pinned:
                found.append(graphic)
        return found

    # -- Events ------------------------------------------------------
    def set_on_touch_handler(self, handler):
        self._on_touch = handler

    def set_on_touch_moved_handler(self, handler):
        self._on_touch_moved = handler

    def set_on_touch_ended_handler(self, handler):
        self._on_touch_ended = handler

    def schedule(self, duration, continuation):
        QTimer.singleShot(int(duration * 1000), continuation)

    def _touch_at(self, pos: QPointF) -> Touch:
        return Touch(from_scene(pos))

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.scenePos()
        touch = self._touch_at(pos)
        for item in self.items(pos):
            graphic = item.data(GRAPHIC_KEY)
            if graphic is not None and graphic.touch_handler is not None:
                logger.debug(
                    f"Touch at {touch.position.x:.1f},{touch.position.y:.1f} "
                    f"handled by {graphic.name or type(graphic).__name__}"
                )
                graphic.touch_handler(touch)
                event.accept()
                return
        self._on_touch(touch)
        event.accept()

    def mouseMoveEvent(self, event):
        if event.buttons() & Qt.LeftButton:
            self._on_touch_moved(self._touch_at(event.scenePos()))
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self._on_touch_ended(self._touch_at(event.scenePos()))
            event.accept()
            return
        super().mouseReleaseEvent(event)


class CanvasWidget(QGraphicsView):
    """View keeping the whole drawing scene visible."""

    def __init__(self, parent=None):
        super().__init__(parent)
        logger.debug("CanvasWidget initialized")
        self.scene = CanvasScene(self)
        self.setScene(self.scene)
        self.setRenderHint(QPainter.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setViewportUpdateMode(QGraphicsView.BoundingRectViewportUpdate)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.fitInView(self.scene.sceneRect(), Qt.KeepAspectRatio)
