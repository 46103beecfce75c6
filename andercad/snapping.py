"""Snapping of cursor positions to the grid and to sketch geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Optional

from andercad.elements import (
    SketchArc,
    SketchCircle,
    SketchElement,
    SketchElementType,
    SketchLine,
)
from andercad.geometry import Point


class SnapType(Enum):
    NONE = auto()
    ENDPOINT = auto()
    MIDPOINT = auto()
    CENTER = auto()
    INTERSECTION = auto()
    PERPENDICULAR = auto()
    TANGENT = auto()
    GRID = auto()


@dataclass
class SnapResult:
    """The outcome of a snap query; ``found`` is False when nothing snapped."""

    found: bool = False
    type: SnapType = SnapType.NONE
    snap_point: Point = field(default_factory=Point)
    element: Optional[SketchElement] = None


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class SnappingManager:
    """Finds the best snap point near an input position."""

    def __init__(self, snap_tolerance: float = 5.0, grid_size: float = 10.0) -> None:
        self.snap_tolerance = snap_tolerance
        self.grid_size = grid_size
        self._enabled: list[SnapType] = [
            SnapType.ENDPOINT,
            SnapType.MIDPOINT,
            SnapType.CENTER,
            SnapType.GRID,
        ]

    @property
    def enabled_snap_types(self) -> tuple[SnapType, ...]:
        return tuple(self._enabled)

    def enable_snap_type(self, snap_type: SnapType) -> None:
        if snap_type not in self._enabled:
            self._enabled.append(snap_type)

    def disable_snap_type(self, snap_type: SnapType) -> None:
        if snap_type in self._enabled:
            self._enabled.remove(snap_type)

    def is_snap_type_enabled(self, snap_type: SnapType) -> bool:
        return snap_type in self._enabled

    def _within_tolerance(self, p1: Point, p2: Point) -> bool:
        return p1.distance(p2) <= self.snap_tolerance

    def find_snap_point(
        self, point: Point, elements: Iterable[SketchElement]
    ) -> SnapResult:
        """The closest snap strictly inside the tolerance, tried in the order
        grid, endpoint, midpoint, centre; earlier kinds win ties."""
        elements = list(elements)
        candidates = []
        if self.is_snap_type_enabled(SnapType.GRID):
            candidates.append(lambda: self.snap_to_grid(point))
        if self.is_snap_type_enabled(SnapType.ENDPOINT):
            candidates.append(lambda: self.snap_to_endpoints(point, elements))
        if self.is_snap_type_enabled(SnapType.MIDPOINT):
            candidates.append(lambda: self.snap_to_midpoints(point, elements))
        if self.is_snap_type_enabled(SnapType.CENTER):
            candidates.append(lambda: self.snap_to_centers(point, elements))

        best = SnapResult()
        best_distance = self.snap_tolerance
        for candidate in candidates:
            result = candidate()
            if result.found:
                distance = point.distance(result.snap_point)
                if distance < best_distance:
                    best, best_distance = result, distance
        return best

    def snap_to_grid(self, point: Point) -> SnapResult:
        """Snap to the nearest grid node on the sketch plane."""
        size = self.grid_size
        snap = Point(
            _round_half_away(point.x / size) * size,
            _round_half_away(point.y / size) * size,
            0.0,
        )
        if self._within_tolerance(point, snap):
            return SnapResult(True, SnapType.GRID, snap)
        return SnapResult()

    def snap_to_endpoints(
        self, point: Point, elements: Iterable[SketchElement]
    ) -> SnapResult:
        """Snap to the first line end point within tolerance."""
        for element in elements:
            if element.type is not SketchElementType.LINE or not isinstance(
                element, SketchLine
            ):
                continue
            if element.start is None or element.end is None:
                continue
            for end in (element.start, element.end):
                if self._within_tolerance(point, end.point):
                    return SnapResult(True, SnapType.ENDPOINT, Point(*end.point), element)
        return SnapResult()

    def snap_to_midpoints(
        self, point: Point, elements: Iterable[SketchElement]
    ) -> SnapResult:
        """Snap to the first line midpoint within tolerance."""
        for element in elements:
            if element.type is not SketchElementType.LINE or not isinstance(
                element, SketchLine
            ):
                continue
            if element.start is None or element.end is None:
                continue
            mid = Point(
                (element.start.x + element.end.x) / 2.0,
                (element.start.y + element.end.y) / 2.0,
                0.0,
            )
            if self._within_tolerance(point, mid):
                return SnapResult(True, SnapType.MIDPOINT, mid, element)
        return SnapResult()

    def snap_to_centers(
        self, point: Point, elements: Iterable[SketchElement]
    ) -> SnapResult:
        """Snap to the first circle or arc centre within tolerance."""
        for element in elements:
            if element.type is SketchElementType.CIRCLE and isinstance(element, SketchCircle):
                center = element.center
            elif element.type is SketchElementType.ARC and isinstance(element, SketchArc):
                center = element.center
            else:
                continue
            if center is not None and self._within_tolerance(point, center.point):
                return SnapResult(True, SnapType.CENTER, Point(*center.point), element)
        return SnapResult()