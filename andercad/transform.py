"""Undoable commands that translate, rotate or scale a set of shapes."""

from __future__ import annotations

import math
from abc import abstractmethod
from enum import Enum, auto
from typing import Iterable, Optional

from andercad.commands import Command
from andercad.geometry import Point, Transform
from andercad.shape import Shape


class TransformationType(Enum):
    TRANSLATE = auto()
    ROTATE = auto()
    SCALE = auto()


class TransformCommand(Command):
    """Applies one transformation to every valid shape in a list.

    The original shapes are never modified; the results are new shapes.
    """

    def __init__(
        self,
        shapes: Iterable[Optional[Shape]],
        transformation_type: TransformationType,
    ) -> None:
        self.original_shapes: list[Optional[Shape]] = list(shapes)
        self.type = transformation_type
        self._transformed: list[Shape] = []
        self._executed = False

    @property
    def executed(self) -> bool:
        return self._executed

    @abstractmethod
    def create_transformation(self) -> Transform:
        """Build the transform; raise ValueError on degenerate parameters."""

    def _apply(self) -> list[Shape]:
        transform = self.create_transformation()
        return [
            shape.transformed(transform)
            for shape in self.original_shapes
            if shape is not None and shape.is_valid()
        ]

    def execute(self) -> bool:
        if self._executed:
            return True
        self._transformed = []
        try:
            self._transformed = self._apply()
        except ValueError:
            return False
        self._executed = True
        return True

    def undo(self) -> bool:
        if not self._executed:
            return False
        self._executed = False
        return True

    def redo(self) -> bool:
        if self._executed:
            return True
        return self.execute()

    def transformed_shapes(self) -> list[Shape]:
        """The transformed shapes, or a preview of them if not yet executed.

        A preview whose transformation cannot be built is empty.
        """
        if not self._executed:
            try:
                return self._apply()
            except ValueError:
                return []
        return list(self._transformed)


class TranslateCommand(TransformCommand):
    """Move shapes by a vector."""

    name = "平移"

    def __init__(
        self, shapes: Iterable[Optional[Shape]], translation: Optional[Point] = None
    ) -> None:
        super().__init__(shapes, TransformationType.TRANSLATE)
        self.translation = Point(*(translation or Point()))

    def set_translation(self, dx: float, dy: float, dz: float) -> None:
        self.translation = Point(dx, dy, dz)

    def create_transformation(self) -> Transform:
        return Transform.translation(*self.translation)


class RotateCommand(TransformCommand):
    """Rotate shapes about an axis by an angle in radians."""

    name = "旋转"

    def __init__(
        self,
        shapes: Iterable[Optional[Shape]],
        axis_point: Point,
        axis_direction: Point,
        angle_radians: float,
    ) -> None:
        super().__init__(shapes, TransformationType.ROTATE)
        self.axis_point = axis_point
        self.axis_direction = axis_direction
        self.angle_radians = angle_radians

    def set_rotation_axis(self, axis_point: Point, axis_direction: Point) -> None:
        self.axis_point = axis_point
        self.axis_direction = axis_direction

    def set_rotation_angle(self, angle_radians: float) -> None:
        self.angle_radians = angle_radians

    def set_rotation_angle_degrees(self, angle_degrees: float) -> None:
        self.angle_radians = math.radians(angle_degrees)

    def create_transformation(self) -> Transform:
        return Transform.rotation(self.axis_point, self.axis_direction, self.angle_radians)


class ScaleCommand(TransformCommand):
    """Scale shapes about a centre point.

    Only uniform scaling is supported by the geometry kernel, so a
    non-uniform request scales every axis by ``scale_x``.
    """

    name = "缩放"

    def __init__(
        self,
        shapes: Iterable[Optional[Shape]],
        center: Point,
        scale_x: float = 1.0,
        scale_y: Optional[float] = None,
        scale_z: Optional[float] = None,
    ) -> None:
        super().__init__(shapes, TransformationType.SCALE)
        self.center = center
        if scale_y is None and scale_z is None:
            self.set_uniform_scale(scale_x)
        else:
            self.set_non_uniform_scale(
                scale_x,
                scale_x if scale_y is None else scale_y,
                scale_x if scale_z is None else scale_z,
            )

    def set_scale_center(self, center: Point) -> None:
        self.center = center

    def set_uniform_scale(self, factor: float) -> None:
        self.scale_x = self.scale_y = self.scale_z = factor
        self.is_uniform = True

    def set_non_uniform_scale(self, scale_x: float, scale_y: float, scale_z: float) -> None:
        self.scale_x, self.scale_y, self.scale_z = scale_x, scale_y, scale_z
        self.is_uniform = False

    def create_transformation(self) -> Transform:
        if self.is_uniform:
            return Transform.scaling(self.center, self.scale_x)
        cx, cy, cz = self.center
        to_origin = Transform.translation(-cx, -cy, -cz)
        scale = Transform.scaling(Point(), self.scale_x)
        back = Transform.translation(cx, cy, cz)
        return back.compose(scale).compose(to_origin)