import random

import pytest

from drawingboard.color import BLACK, CLEAR
from drawingboard.geometry import Anchor, Point, Size, Touch


def regions_intersect(a, b):
    """True when two (left, bottom, right, top) boxes overlap or touch."""
    return a[0] <= b[2] and b[0] <= a[2] and a[1] <= b[3] and b[1] <= a[3]


class FakeGraphic:
    """Records what the core does to a graphic."""

    def __init__(self, kind, size, color=BLACK, start=None, end=None):
        self.kind = kind
        self.size = size
        self.background_color = color
        self.stroke_color = color
        self.stroke_width = 0
        self.start = start
        self.end = end
        self.name = ""
        self.z_position = 0
        self.rotation = 0
        self.position = Point()
        self.pinned = False
        self.touch_handler = None
        self.image_color = None
        self.pulses = 0
        self.runs = []

    def set_on_touch_handler(self, handler):
        self.touch_handler = handler

    def set_image_color(self, color):
        self.image_color = color

    def pulse(self):
        self.pulses += 1

    def run(self, scale, duration, completion=None):
        self.runs.append((scale, duration))
        if completion is not None:
            completion()

    def touch(self, point=None):
        self.touch_handler(Touch(point or self.position))

    def region(self):
        if self.kind == "line":
            return (
                min(self.start.x, self.end.x) - self.size.height / 2,
                min(self.start.y, self.end.y) - self.size.height / 2,
                max(self.start.x, self.end.x) + self.size.height / 2,
                max(self.start.y, self.end.y) + self.size.height / 2,
            )
        return self.size.region(self.position)


class FakeScene:
    """In-memory ``Scene``: keeps placed graphics and queued continuations."""

    def __init__(self):
        self.graphics = []
        self.pending = []
        self.on_touch = None
        self.on_touch_moved = None
        self.on_touch_ended = None

    def circle(self, radius, color):
        return FakeGraphic("circle", Size(radius * 2, radius * 2), color)

    def rectangle(self, width, height, corner_radius, color):
        return FakeGraphic("rectangle", Size(width, height), color)

    def line(self, start, end, thickness, color):
        length = ((end.x - start.x) ** 2 + (end.y - start.y) ** 2) ** 0.5
        return FakeGraphic("line", Size(length, thickness), color, start, end)

    def line_sample(self, length, thickness, color):
        return FakeGraphic("sample", Size(length, thickness), color)

    def image(self, name):
        graphic = FakeGraphic("image", Size(56, 56), CLEAR)
        graphic.name = name
        return graphic

    def place(self, graphic, at=None, anchor=Anchor.CENTER):
        if at is not None:
            if anchor is Anchor.LEFT:
                at = at.offset(dx=graphic.size.width / 2)
            graphic.position = at
        self.graphics.append(graphic)

    def remove_graphics(self, named):
        self.graphics = [g for g in self.graphics if g.name != named]

    def remove(self, graphics):
        doomed = [id(g) for g in graphics]
        self.graphics = [g for g in self.graphics if id(g) not in doomed]

    def get_graphics(self, at, size):
        region = size.region(at)
        return [
            g for g in self.graphics
            if not g.pinned and regions_intersect(g.region(), region)
        ]

    def set_on_touch_handler(self, handler):
        self.on_touch = handler

    def set_on_touch_moved_handler(self, handler):
        self.on_touch_moved = handler

    def set_on_touch_ended_handler(self, handler):
        self.on_touch_ended = handler

    def schedule(self, duration, continuation):
        self.pending.append((duration, continuation))

    # -- test helpers ----------------------------------------------------
    def advance(self):
        """Run every queued continuation, in order."""
        pending, self.pending = self.pending, []
        for _, continuation in pending:
            continuation()

    def named(self, name):
        return [g for g in self.graphics if g.name == name]

    def marks(self):
        return [g for g in self.graphics if not g.pinned and not g.name]

    def drag(self, *points):
        for point in points:
            self.on_touch_moved(Touch(Point(*point)))

    def tap(self, point=(0, 0)):
        self.on_touch(Touch(Point(*point)))

    def release(self, point=(0, 0)):
        self.on_touch_ended(Touch(Point(*point)))


@pytest.fixture
def scene():
    return FakeScene()


@pytest.fixture
def rng():
    return random.Random(1234)
