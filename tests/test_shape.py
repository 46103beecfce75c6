import math

import pytest

from andercad.geometry import Point, Transform
from andercad.shape import (
    Box,
    Shape,
    create_box,
    create_box_from_corners,
    create_cylinder,
    create_sphere,
)


def test_unit_box_volume_and_area():
    box = create_box(1, 1, 1)
    assert box.volume() == pytest.approx(1.0)
    assert box.area() == pytest.approx(6.0)


def test_box_from_corners_matches_box_from_sizes():
    a = create_box(2, 3, 4)
    b = create_box_from_corners(Point(5, 5, 5), Point(3, 2, 1))
    assert b.volume() == pytest.approx(a.volume())
    assert b.area() == pytest.approx(a.area())
    assert b.solid.origin == Point(3, 2, 1)


@pytest.mark.parametrize("sizes", [(0, 1, 1), (1, -1, 1), (1, 1, 0)])
def test_box_with_non_positive_size_raises(sizes):
    with pytest.raises(ValueError):
        create_box(*sizes)


def test_degenerate_corners_raise():
    with pytest.raises(ValueError):
        create_box_from_corners(Point(0, 0, 0), Point(1, 1, 0))


def test_unit_cylinder_volume():
    assert create_cylinder(1, 1).volume() == pytest.approx(math.pi)


def test_cylinder_default_center_is_origin():
    assert create_cylinder(2, 3).solid.center == Point()


@pytest.mark.parametrize("args", [(0, 1), (1, 0), (-2, 5)])
def test_cylinder_invalid_sizes_raise(args):
    with pytest.raises(ValueError):
        create_cylinder(*args)


def test_sphere_volume_area_relation():
    r = 2.5
    s = create_sphere(r, Point(1, 2, 3))
    assert 3 * s.volume() == pytest.approx(r * s.area())
    assert s.solid.center == Point(1, 2, 3)


def test_sphere_invalid_radius_raises():
    with pytest.raises(ValueError):
        create_sphere(0)


def test_empty_shape():
    empty = Shape()
    assert not empty.is_valid()
    assert empty.volume() == 0.0
    assert empty.area() == 0.0


def test_translation_preserves_measures():
    box = create_box(2, 3, 4)
    moved = box.transformed(Transform.translation(10, -5, 2))
    assert moved.volume() == pytest.approx(box.volume())
    assert moved.area() == pytest.approx(box.area())


def test_scaling_scales_measures():
    factor = 2.0
    s = create_sphere(1.5)
    scaled = s.transformed(Transform.scaling(Point(3, 0, 0), factor))
    assert scaled.volume() == pytest.approx(s.volume() * factor**3)
    assert scaled.area() == pytest.approx(s.area() * factor**2)


def test_transformed_does_not_change_original():
    box = create_box(1, 2, 3)
    box.transformed(Transform.translation(1, 1, 1))
    assert box.transform == Transform.identity()


@pytest.mark.parametrize(
    "shape",
    [
        create_box(1, 2, 3),
        create_cylinder(2, 5, Point(1, 1, 1)),
        create_sphere(3).transformed(Transform.rotation(Point(), Point(1, 0, 0), 0.4)),
        Shape(),
    ],
)
def test_dict_round_trip(shape):
    restored = Shape.from_dict(shape.to_dict())
    assert restored.to_dict() == shape.to_dict()
    assert restored.volume() == pytest.approx(shape.volume())


def test_from_dict_unknown_type_raises():
    data = create_box(1, 1, 1).to_dict()
    data["type"] = "torus"
    with pytest.raises(ValueError):
        Shape.from_dict(data)


def test_from_dict_missing_key_raises():
    with pytest.raises(ValueError):
        Shape.from_dict({"type": "box"})


def test_box_solid_measures_direct():
    box = Box(2, 2, 2)
    assert create_box(2, 2, 2).volume() == pytest.approx(box.volume())