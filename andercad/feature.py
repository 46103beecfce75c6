"""The parametric feature base class and its type and state enums."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Optional

from andercad.commands import Command
from andercad.shape import Shape


class FeatureType(Enum):
    EXTRUDE = auto()
    REVOLVE = auto()
    SWEEP = auto()
    LOFT = auto()
    FILLET = auto()
    CHAMFER = auto()
    DRAFT = auto()
    SHELL = auto()
    CUT = auto()
    UNION = auto()
    INTERSECTION = auto()


class FeatureState(Enum):
    CREATED = auto()
    PREVIEWING = auto()
    EXECUTED = auto()
    FAILED = auto()


class Feature(ABC):
    """A modelling operation driven by named numeric parameters."""

    _ids = itertools.count(1)

    def __init__(self, feature_type: FeatureType, name: str) -> None:
        self.type = feature_type
        self.name = name
        self.id = next(Feature._ids)
        self.state = FeatureState.CREATED
        self.active = True
        self.parameters: dict[str, float] = {}

    def set_parameter(self, name: str, value: float) -> None:
        self.parameters[name] = value

    def get_parameter(self, name: str) -> float:
        """The parameter's value, or 0.0 if it is not set."""
        return self.parameters.get(name, 0.0)

    def has_parameter(self, name: str) -> bool:
        return name in self.parameters

    @abstractmethod
    def create_shape(self) -> Optional[Shape]:
        """Build the feature's shape, or None if it cannot be built."""

    def create_preview_shape(self) -> Optional[Shape]:
        """Build a shape for previewing; the same as the final shape by default."""
        return self.create_shape()

    @abstractmethod
    def validate_parameters(self) -> bool:
        """Whether the current parameters can produce a shape."""

    @abstractmethod
    def create_command(self) -> Command:
        """An undoable command that performs this feature."""