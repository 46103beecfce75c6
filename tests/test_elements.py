import math

import pytest

from andercad.elements import (
    SketchArc,
    SketchCircle,
    SketchElementType,
    SketchLine,
    SketchPoint,
)


def test_ids_are_unique_and_increasing():
    a = SketchPoint()
    b = SketchLine()
    assert b.id > a.id
    assert len({a.id, b.id, b.start.id, b.end.id}) == 4


def test_element_defaults():
    p = SketchPoint(1.0, 2.0)
    assert p.type is SketchElementType.POINT
    assert p.selected is False
    assert p.visible is True


def test_point_coordinates_and_set_xy():
    p = SketchPoint(1.5, -2.0)
    assert (p.x, p.y, p.point.z) == (1.5, -2.0, 0.0)
    p.set_xy(7.0, 8.0)
    assert (p.x, p.y) == (7.0, 8.0)
    p.x = 3.0
    assert p.point.x == 3.0


def test_point_description():
    assert SketchPoint(1.5, 2.0).description() == "Point (1.5, 2)"


def test_line_length_and_angle():
    line = SketchLine.from_coords(0.0, 0.0, 3.0, 4.0)
    assert line.type is SketchElementType.LINE
    assert line.length() == pytest.approx(5.0)
    assert line.angle() == pytest.approx(math.atan2(4.0, 3.0))


def test_line_vertical_angle_and_description():
    line = SketchLine.from_coords(1.0, 1.0, 1.0, 3.0)
    assert line.angle() == pytest.approx(math.pi / 2)
    assert line.description() == "Line (Length: 2)"


def test_line_missing_point_has_zero_length():
    line = SketchLine.from_coords(0.0, 0.0, 3.0, 4.0)
    line.end = None
    assert line.length() == 0.0
    assert line.angle() == 0.0


def test_default_line_is_degenerate():
    assert SketchLine().length() == 0.0


def test_circle_measures_are_consistent():
    circle = SketchCircle(SketchPoint(2.0, 3.0), 2.5)
    assert circle.type is SketchElementType.CIRCLE
    assert circle.diameter() == 5.0
    assert circle.circumference() == pytest.approx(math.pi * circle.diameter())
    assert circle.area() == pytest.approx(circle.circumference() * circle.radius / 2)
    assert circle.description() == "Circle (Radius: 2.5)"


def test_circle_default_center_and_radius():
    circle = SketchCircle()
    assert circle.radius == 1.0
    assert (circle.center.x, circle.center.y) == (0.0, 0.0)


def test_arc_default_is_half_circle():
    arc = SketchArc()
    assert arc.type is SketchElementType.ARC
    assert arc.sweep_angle() == pytest.approx(math.pi)
    assert arc.length() == pytest.approx(arc.radius * math.pi)
    assert arc.description() == "Arc (Radius: 1, Sweep: 180°)"


def test_arc_sweep_wraps_negative():
    arc = SketchArc(SketchPoint(), 2.0, 3 * math.pi / 2, math.pi / 2)
    assert arc.sweep_angle() == pytest.approx(math.pi)


@pytest.mark.parametrize("start,end", [(0.0, 7.0), (5.0, -9.0), (1.0, 1.0)])
def test_arc_sweep_in_range(start, end):
    sweep = SketchArc(SketchPoint(), 1.0, start, end).sweep_angle()
    assert 0.0 <= sweep <= 2 * math.pi
    assert math.cos(sweep) == pytest.approx(math.cos(end - start))


def test_arc_end_points():
    arc = SketchArc(SketchPoint(1.0, 2.0), 2.0, 0.0, math.pi / 2)
    start, end = arc.start_point(), arc.end_point()
    assert (start.x, start.y) == pytest.approx((3.0, 2.0))
    assert (end.x, end.y) == pytest.approx((1.0, 4.0))
    assert start.point.distance(arc.center.point) == pytest.approx(arc.radius)


def test_arc_without_center_has_no_end_points():
    arc = SketchArc()
    arc.center = None
    assert arc.start_point() is None
    assert arc.end_point() is None