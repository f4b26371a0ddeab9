import math

import pytest

from drawingboard.color import Color
from drawingboard.geometry import Point, Size


def test_point_offset_returns_new_point():
    p = Point(1, 2)
    assert p.offset(dx=3) == Point(4, 2)
    assert p.offset(dy=-5) == Point(1, -3)
    assert p == Point(1, 2)


def test_random_point_stays_in_disc(rng):
    center = Point(10, -20)
    for _ in range(200):
        q = center.random_point(15, rng)
        assert math.hypot(q.x - center.x, q.y - center.y) <= 15 + 1e-9


def test_random_point_with_zero_radius_is_the_point(rng):
    assert Point(3, 4).random_point(0, rng) == Point(3, 4)


def test_size_region_is_centred():
    assert Size(10, 4).region(Point(0, 0)) == (-5, -2, 5, 2)


def test_color_from_hsv_round_trips():
    color = Color.from_hsv(0.3, 0.4, 1.0)
    assert color.hue == pytest.approx(0.3)
    assert color.saturation == pytest.approx(0.4)
    assert color.brightness == pytest.approx(1.0)
    assert not color.is_gray


def test_color_gray():
    color = Color.gray(0.6)
    assert color.is_gray
    assert color.white == pytest.approx(0.6)
    assert color.saturation == 0


def test_color_name_matches_qt_format():
    assert Color(1.0, 0.0, 0.0).name() == "#ff0000"
    assert Color.gray(0.0).name() == "#000000"
