"""Two-dimensional sketch elements: points, lines, circles and arcs."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional

from andercad.geometry import Point


class SketchElementType(Enum):
    POINT = auto()
    LINE = auto()
    CIRCLE = auto()
    ARC = auto()


class SketchElement(ABC):
    """Base class of everything drawn in a sketch.

    Each element gets a unique id when it is created.
    """

    _ids = itertools.count(1)

    def __init__(self, element_type: SketchElementType) -> None:
        self.type = element_type
        self.id = next(SketchElement._ids)
        self.selected = False
        self.visible = True

    @abstractmethod
    def description(self) -> str:
        """A short human-readable description."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} #{self.id}: {self.description()}>"


class SketchPoint(SketchElement):
    """A point on the sketch plane (z is kept at 0 when set through x/y)."""

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(SketchElementType.POINT)
        self.point = Point(x, y, 0.0)

    @property
    def x(self) -> float:
        return self.point.x

    @x.setter
    def x(self, value: float) -> None:
        self.point.x = value

    @property
    def y(self) -> float:
        return self.point.y

    @y.setter
    def y(self, value: float) -> None:
        self.point.y = value

    def set_xy(self, x: float, y: float) -> None:
        """Move the point to (x, y) on the sketch plane."""
        self.point = Point(x, y, 0.0)

    def description(self) -> str:
        return f"Point ({self.x:g}, {self.y:g})"


class SketchLine(SketchElement):
    """A straight segment between two sketch points."""

    def __init__(
        self,
        start: Optional[SketchPoint] = None,
        end: Optional[SketchPoint] = None,
    ) -> None:
        super().__init__(SketchElementType.LINE)
        self.start = start if start is not None else SketchPoint()
        self.end = end if end is not None else SketchPoint()

    @classmethod
    def from_coords(cls, x1: float, y1: float, x2: float, y2: float) -> SketchLine:
        return cls(SketchPoint(x1, y1), SketchPoint(x2, y2))

    def length(self) -> float:
        """Distance between the end points, or 0 if either is missing."""
        if self.start is None or self.end is None:
            return 0.0
        return self.start.point.distance(self.end.point)

    def angle(self) -> float:
        """Direction of the line in radians, measured from the x axis."""
        if self.start is None or self.end is None:
            return 0.0
        return math.atan2(self.end.y - self.start.y, self.end.x - self.start.x)

    def description(self) -> str:
        return f"Line (Length: {self.length():g})"


class SketchCircle(SketchElement):
    """A full circle given by its centre and radius."""

    def __init__(self, center: Optional[SketchPoint] = None, radius: float = 1.0) -> None:
        super().__init__(SketchElementType.CIRCLE)
        self.center = center if center is not None else SketchPoint()
        self.radius = radius

    def diameter(self) -> float:
        return 2.0 * self.radius

    def circumference(self) -> float:
        return 2.0 * math.pi * self.radius

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def description(self) -> str:
        return f"Circle (Radius: {self.radius:g})"


class SketchArc(SketchElement):
    """A circular arc running counter-clockwise from start to end angle (radians)."""

    def __init__(
        self,
        center: Optional[SketchPoint] = None,
        radius: float = 1.0,
        start_angle: float = 0.0,
        end_angle: float = math.pi,
    ) -> None:
        super().__init__(SketchElementType.ARC)
        self.center = center if center is not None else SketchPoint()
        self.radius = radius
        self.start_angle = start_angle
        self.end_angle = end_angle

    def sweep_angle(self) -> float:
        """Angle covered by the arc, brought into the range [0, 2*pi]."""
        sweep = self.end_angle - self.start_angle
        while sweep < 0:
            sweep += 2 * math.pi
        while sweep > 2 * math.pi:
            sweep -= 2 * math.pi
        return sweep

    def length(self) -> float:
        return self.radius * self.sweep_angle()

    def _point_at(self, angle: float) -> Optional[SketchPoint]:
        if self.center is None:
            return None
        return SketchPoint(
            self.center.x + self.radius * math.cos(angle),
            self.center.y + self.radius * math.sin(angle),
        )

    def start_point(self) -> Optional[SketchPoint]:
        """A new point at the start of the arc, or None without a centre."""
        return self._point_at(self.start_angle)

    def end_point(self) -> Optional[SketchPoint]:
        """A new point at the end of the arc, or None without a centre."""
        return self._point_at(self.end_angle)

    def description(self) -> str:
        degrees = self.sweep_angle() * 180.0 / math.pi
        return f"Arc (Radius: {self.radius:g}, Sweep: {degrees:g}°)"