"""Solid primitives, the shape wrapper and the primitive factory."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from andercad.geometry import Point, Transform

# Lengths at or below this are treated as degenerate.
CONFUSION = 1e-7


@dataclass(frozen=True)
class Box:
    """An axis-aligned box with its minimum corner at ``origin``."""

    width: float
    height: float
    depth: float
    origin: Point = field(default_factory=Point)

    def volume(self) -> float:
        return self.width * self.height * self.depth

    def area(self) -> float:
        w, h, d = self.width, self.height, self.depth
        return 2.0 * (w * h + h * d + w * d)


@dataclass(frozen=True)
class Cylinder:
    """A cylinder along +Z whose base circle is centred at ``center``."""

    radius: float
    height: float
    center: Point = field(default_factory=Point)

    def volume(self) -> float:
        return math.pi * self.radius**2 * self.height

    def area(self) -> float:
        return 2.0 * math.pi * self.radius * (self.radius + self.height)


@dataclass(frozen=True)
class Sphere:
    """A sphere centred at ``center``."""

    radius: float
    center: Point = field(default_factory=Point)

    def volume(self) -> float:
        return 4.0 / 3.0 * math.pi * self.radius**3

    def area(self) -> float:
        return 4.0 * math.pi * self.radius**2


Solid = Union[Box, Cylinder, Sphere]


@dataclass(frozen=True, eq=False)
class Shape:
    """A solid placed in model space; an empty shape has no solid."""

    solid: Optional[Solid] = None
    transform: Transform = field(default_factory=Transform.identity)

    def is_valid(self) -> bool:
        return self.solid is not None

    def volume(self) -> float:
        """Volume of the placed solid, or 0 for an empty shape."""
        if self.solid is None:
            return 0.0
        return self.solid.volume() * self.transform.scale_factor**3

    def area(self) -> float:
        """Surface area of the placed solid, or 0 for an empty shape."""
        if self.solid is None:
            return 0.0
        return self.solid.area() * self.transform.scale_factor**2

    def transformed(self, transform: Transform) -> Shape:
        """Return a new shape with ``transform`` applied after the current placement."""
        return Shape(self.solid, transform.compose(self.transform))

    def to_dict(self) -> dict[str, Any]:
        """Serialise the shape to plain data."""
        data: dict[str, Any] = {"transform": [list(row) for row in self.transform.matrix]}
        solid = self.solid
        if solid is None:
            data["type"] = "empty"
        elif isinstance(solid, Box):
            data.update(
                type="box",
                width=solid.width,
                height=solid.height,
                depth=solid.depth,
                origin=list(solid.origin),
            )
        elif isinstance(solid, Cylinder):
            data.update(
                type="cylinder",
                radius=solid.radius,
                height=solid.height,
                center=list(solid.center),
            )
        else:
            data.update(type="sphere", radius=solid.radius, center=list(solid.center))
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Shape:
        """Rebuild a shape from the output of :meth:`to_dict`."""
        try:
            kind = data["type"]
            transform = Transform(tuple(tuple(row) for row in data["transform"]))
            solid: Optional[Solid]
            if kind == "empty":
                solid = None
            elif kind == "box":
                solid = Box(data["width"], data["height"], data["depth"], Point(*data["origin"]))
            elif kind == "cylinder":
                solid = Cylinder(data["radius"], data["height"], Point(*data["center"]))
            elif kind == "sphere":
                solid = Sphere(data["radius"], Point(*data["center"]))
            else:
                raise ValueError(f"unknown shape type: {kind!r}")
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed shape data: {exc}") from exc
        return cls(solid, transform)


def create_box(width: float, height: float, depth: float) -> Shape:
    """A box with one corner at the origin; every size must be positive."""
    if width <= 0 or height <= 0 or depth <= 0:
        raise ValueError("box dimensions must be positive")
    return Shape(Box(width, height, depth))


def create_box_from_corners(corner1: Point, corner2: Point) -> Shape:
    """A box spanning two opposite corners."""
    sizes = [abs(b - a) for a, b in zip(corner1, corner2)]
    if any(size <= CONFUSION for size in sizes):
        raise ValueError("box corners must differ along every axis")
    origin = Point(*(min(a, b) for a, b in zip(corner1, corner2)))
    return Shape(Box(*sizes, origin=origin))


def create_cylinder(radius: float, height: float, center: Optional[Point] = None) -> Shape:
    """A cylinder along +Z standing on ``center`` (the origin by default)."""
    if radius <= 0 or height <= 0:
        raise ValueError("cylinder radius and height must be positive")
    return Shape(Cylinder(radius, height, Point(*(center or Point()))))


def create_sphere(radius: float, center: Optional[Point] = None) -> Shape:
    """A sphere around ``center`` (the origin by default)."""
    if radius <= 0:
        raise ValueError("sphere radius must be positive")
    return Shape(Sphere(radius, Point(*(center or Point()))))