"""Concrete modelling features: extrude, revolve, sweep and loft."""

from __future__ import annotations

import math
from typing import Optional

from andercad.commands import (
    Command,
    CreateBoxCommand,
    CreateCylinderCommand,
    CreateSphereCommand,
)
from andercad.feature import Feature, FeatureType
from andercad.shape import Shape
from andercad.sketch import Sketch

# Direction and axis vectors shorter than this are rejected.
_MIN_VECTOR_LENGTH = 1e-10


def _sketch_usable(sketch: Optional[Sketch]) -> bool:
    return sketch is not None and not sketch.is_empty()


def _remove_same(items: list[Sketch], item: Sketch) -> None:
    for index, existing in enumerate(items):
        if existing is item:
            del items[index]
            return


class ExtrudeFeature(Feature):
    """Extrudes a sketch along a direction by a distance."""

    def __init__(self, name: str = "Extrude", sketch: Optional[Sketch] = None) -> None:
        super().__init__(FeatureType.EXTRUDE, name)
        self.sketch = sketch
        self.set_parameter("distance", 10.0)
        self.set_direction(0.0, 0.0, 1.0)
        self.set_parameter("taper_angle", 0.0)
        self.set_parameter("midplane", 0.0)

    @property
    def distance(self) -> float:
        return self.get_parameter("distance")

    @distance.setter
    def distance(self, value: float) -> None:
        self.set_parameter("distance", value)

    @property
    def taper_angle(self) -> float:
        return self.get_parameter("taper_angle")

    @taper_angle.setter
    def taper_angle(self, value: float) -> None:
        self.set_parameter("taper_angle", value)

    @property
    def midplane(self) -> bool:
        return self.get_parameter("midplane") != 0.0

    @midplane.setter
    def midplane(self, value: bool) -> None:
        self.set_parameter("midplane", 1.0 if value else 0.0)

    def set_direction(self, x: float, y: float, z: float) -> None:
        self.set_parameter("direction_x", x)
        self.set_parameter("direction_y", y)
        self.set_parameter("direction_z", z)

    def direction(self) -> tuple[float, float, float]:
        return (
            self.get_parameter("direction_x"),
            self.get_parameter("direction_y"),
            self.get_parameter("direction_z"),
        )

    def validate_parameters(self) -> bool:
        if not _sketch_usable(self.sketch):
            return False
        if self.distance <= 0.0:
            return False
        return math.hypot(*self.direction()) >= _MIN_VECTOR_LENGTH

    def create_shape(self) -> Optional[Shape]:
        """The extruded shape, or None if the parameters are invalid.

        The sketch profile is not yet turned into a solid, so the result is
        an empty shape.
        """
        if not self.validate_parameters():
            return None
        return Shape()

    def create_command(self) -> Command:
        d = self.distance
        return CreateBoxCommand(d, d, d)


class RevolveFeature(Feature):
    """Revolves a sketch about an axis by an angle in radians."""

    def __init__(self, name: str = "Revolve", sketch: Optional[Sketch] = None) -> None:
        super().__init__(FeatureType.REVOLVE, name)
        self.sketch = sketch
        self.set_parameter("angle", 2.0 * math.pi)
        self.set_axis(0.0, 0.0, 1.0)
        self.set_axis_origin(0.0, 0.0, 0.0)
        self.set_parameter("midplane", 0.0)

    @property
    def angle(self) -> float:
        return self.get_parameter("angle")

    @angle.setter
    def angle(self, value: float) -> None:
        self.set_parameter("angle", value)

    @property
    def midplane(self) -> bool:
        return self.get_parameter("midplane") != 0.0

    @midplane.setter
    def midplane(self, value: bool) -> None:
        self.set_parameter("midplane", 1.0 if value else 0.0)

    def set_axis(self, x: float, y: float, z: float) -> None:
        self.set_parameter("axis_x", x)
        self.set_parameter("axis_y", y)
        self.set_parameter("axis_z", z)

    def axis(self) -> tuple[float, float, float]:
        return (
            self.get_parameter("axis_x"),
            self.get_parameter("axis_y"),
            self.get_parameter("axis_z"),
        )

    def set_axis_origin(self, x: float, y: float, z: float) -> None:
        self.set_parameter("axis_origin_x", x)
        self.set_parameter("axis_origin_y", y)
        self.set_parameter("axis_origin_z", z)

    def axis_origin(self) -> tuple[float, float, float]:
        return (
            self.get_parameter("axis_origin_x"),
            self.get_parameter("axis_origin_y"),
            self.get_parameter("axis_origin_z"),
        )

    def validate_parameters(self) -> bool:
        if not _sketch_usable(self.sketch):
            return False
        if self.angle <= 0.0 or self.angle > 2.0 * math.pi:
            return False
        return math.hypot(*self.axis()) >= _MIN_VECTOR_LENGTH

    def create_shape(self) -> Optional[Shape]:
        """The revolved shape (currently empty), or None if invalid."""
        if not self.validate_parameters():
            return None
        return Shape()

    def create_command(self) -> Command:
        return CreateCylinderCommand(5.0, 10.0)


class SweepFeature(Feature):
    """Sweeps a profile sketch along a path sketch."""

    def __init__(
        self,
        name: str = "Sweep",
        profile: Optional[Sketch] = None,
        path: Optional[Sketch] = None,
    ) -> None:
        super().__init__(FeatureType.SWEEP, name)
        self.profile = profile
        self.path = path
        self.set_parameter("twist_angle", 0.0)
        self.set_parameter("scale_factor", 1.0)
        self.set_parameter("keep_orientation", 1.0)

    @property
    def twist_angle(self) -> float:
        return self.get_parameter("twist_angle")

    @twist_angle.setter
    def twist_angle(self, value: float) -> None:
        self.set_parameter("twist_angle", value)

    @property
    def scale_factor(self) -> float:
        return self.get_parameter("scale_factor")

    @scale_factor.setter
    def scale_factor(self, value: float) -> None:
        self.set_parameter("scale_factor", value)

    @property
    def keep_original_orientation(self) -> bool:
        return self.get_parameter("keep_orientation") != 0.0

    @keep_original_orientation.setter
    def keep_original_orientation(self, value: bool) -> None:
        self.set_parameter("keep_orientation", 1.0 if value else 0.0)

    def validate_parameters(self) -> bool:
        if not _sketch_usable(self.profile) or not _sketch_usable(self.path):
            return False
        return self.scale_factor > 0.0

    def create_shape(self) -> Optional[Shape]:
        """The swept shape (currently empty), or None if invalid."""
        if not self.validate_parameters():
            return None
        return Shape()

    def create_command(self) -> Command:
        return CreateBoxCommand(10.0, 10.0, 10.0)


class LoftFeature(Feature):
    """Lofts a solid or surface through two or more section sketches."""

    def __init__(self, name: str = "Loft") -> None:
        super().__init__(FeatureType.LOFT, name)
        self.sections: list[Sketch] = []
        self.guide_curves: list[Sketch] = []
        self.set_parameter("solid", 1.0)
        self.set_parameter("ruled", 0.0)
        self.set_parameter("closed", 0.0)

    def _flag(self, name: str) -> bool:
        return self.get_parameter(name) != 0.0

    @property
    def solid(self) -> bool:
        return self._flag("solid")

    @solid.setter
    def solid(self, value: bool) -> None:
        self.set_parameter("solid", 1.0 if value else 0.0)

    @property
    def ruled(self) -> bool:
        return self._flag("ruled")

    @ruled.setter
    def ruled(self, value: bool) -> None:
        self.set_parameter("ruled", 1.0 if value else 0.0)

    @property
    def closed(self) -> bool:
        return self._flag("closed")

    @closed.setter
    def closed(self, value: bool) -> None:
        self.set_parameter("closed", 1.0 if value else 0.0)

    @property
    def section_count(self) -> int:
        return len(self.sections)

    @property
    def guide_curve_count(self) -> int:
        return len(self.guide_curves)

    def add_section(self, section: Sketch) -> None:
        self.sections.append(section)

    def remove_section(self, section: Sketch) -> None:
        """Remove ``section`` if present."""
        _remove_same(self.sections, section)

    def clear_sections(self) -> None:
        self.sections.clear()

    def add_guide_curve(self, guide: Sketch) -> None:
        self.guide_curves.append(guide)

    def remove_guide_curve(self, guide: Sketch) -> None:
        """Remove ``guide`` if present."""
        _remove_same(self.guide_curves, guide)

    def clear_guide_curves(self) -> None:
        self.guide_curves.clear()

    def _sections_valid(self) -> bool:
        return all(_sketch_usable(s) for s in self.sections)

    def validate_parameters(self) -> bool:
        return self._sections_valid() and self.section_count >= 2

    def create_shape(self) -> Optional[Shape]:
        """The lofted shape (currently empty), or None if invalid."""
        if not self.validate_parameters():
            return None
        return Shape()

    def create_command(self) -> Command:
        return CreateSphereCommand(5.0)