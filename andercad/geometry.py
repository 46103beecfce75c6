"""Points in model space and rigid/uniform-scale affine transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

# Smallest vector length accepted as a direction, and smallest accepted
# magnitude for a scale factor.
_RESOLUTION = 1e-290

_IDENTITY = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
)


@dataclass
class Point:
    """A point (or vector) in 3D model space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def distance(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.dist(tuple(self), tuple(other))


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return sum(x * y for x, y in zip(a, b))


@dataclass(frozen=True)
class Transform:
    """An affine transform stored as a 3x4 matrix ``[R | t]``.

    Only translations, rotations and uniform scalings (and compositions of
    them) are built by the constructors, so lengths scale by a single factor.
    """

    matrix: tuple[tuple[float, ...], ...] = _IDENTITY

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.matrix)
        if len(rows) != 3 or any(len(row) != 4 for row in rows):
            raise ValueError("a transform matrix must have 3 rows of 4 values")
        object.__setattr__(self, "matrix", rows)

    @classmethod
    def identity(cls) -> Transform:
        """The transform that leaves every point in place."""
        return cls()

    @classmethod
    def translation(cls, dx: float, dy: float, dz: float) -> Transform:
        """A translation by the vector (dx, dy, dz)."""
        return cls(
            (
                (1.0, 0.0, 0.0, dx),
                (0.0, 1.0, 0.0, dy),
                (0.0, 0.0, 1.0, dz),
            )
        )

    @classmethod
    def rotation(
        cls, axis_point: Point, axis_direction: Point, angle: float
    ) -> Transform:
        """A rotation by ``angle`` radians about the given axis."""
        norm = math.hypot(*axis_direction)
        if norm <= _RESOLUTION:
            raise ValueError("rotation axis direction has zero length")
        kx, ky, kz = (c / norm for c in axis_direction)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        one_c = 1.0 - cos_a
        linear = (
            (cos_a + kx * kx * one_c, kx * ky * one_c - kz * sin_a, kx * kz * one_c + ky * sin_a),
            (ky * kx * one_c + kz * sin_a, cos_a + ky * ky * one_c, ky * kz * one_c - kx * sin_a),
            (kz * kx * one_c - ky * sin_a, kz * ky * one_c + kx * sin_a, cos_a + kz * kz * one_c),
        )
        p = tuple(axis_point)
        return cls(tuple(row + (pc - _dot(row, p),) for row, pc in zip(linear, p)))

    @classmethod
    def scaling(cls, center: Point, factor: float) -> Transform:
        """A uniform scaling by ``factor`` about ``center``."""
        if abs(factor) <= _RESOLUTION:
            raise ValueError("scale factor must not be zero")
        cx, cy, cz = ((1.0 - factor) * c for c in center)
        return cls(
            (
                (factor, 0.0, 0.0, cx),
                (0.0, factor, 0.0, cy),
                (0.0, 0.0, factor, cz),
            )
        )

    @property
    def scale_factor(self) -> float:
        """The factor by which this transform scales lengths."""
        return math.hypot(*(row[0] for row in self.matrix))

    def compose(self, other: Transform) -> Transform:
        """Return the transform that applies ``other`` first, then ``self``."""
        columns = list(zip(*other.matrix))
        rows = []
        for row in self.matrix:
            linear = row[:3]
            rows.append(
                tuple(_dot(linear, col) for col in columns[:3])
                + (_dot(linear, columns[3]) + row[3],)
            )
        return Transform(tuple(rows))

    def apply(self, point: Point) -> Point:
        """Map a point through this transform."""
        p = tuple(point)
        return Point(*(_dot(row[:3], p) + row[3] for row in self.matrix))