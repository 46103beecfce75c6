"""Sketch constraints and the solver that checks them."""

from __future__ import annotations

import itertools
import math
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any


class ConstraintType(Enum):
    HORIZONTAL = auto()
    VERTICAL = auto()
    PARALLEL = auto()
    PERPENDICULAR = auto()
    COINCIDENT = auto()
    DISTANCE = auto()
    ANGLE = auto()
    RADIUS = auto()
    DIAMETER = auto()
    EQUAL = auto()


class Constraint(ABC):
    """A geometric relation between sketch elements."""

    _ids = itertools.count(1)

    def __init__(self, constraint_type: ConstraintType) -> None:
        self.type = constraint_type
        self.id = next(Constraint._ids)
        self.elements: list[Any] = []
        self.active = True

    def add_element(self, element: Any) -> None:
        self.elements.append(element)

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the constraint is well formed."""

    @abstractmethod
    def description(self) -> str:
        """A human-readable description."""

    @abstractmethod
    def error(self) -> float:
        """How far the current geometry is from satisfying the constraint."""


class ConstraintSolver:
    """Holds a set of constraints and checks them against a tolerance."""

    def __init__(self, tolerance: float = 1e-6, max_iterations: int = 100) -> None:
        self.constraints: list[Constraint] = []
        self.tolerance = tolerance
        self.max_iterations = max_iterations

    def add_constraint(self, constraint: Constraint) -> None:
        self.constraints.append(constraint)

    def remove_constraint(self, constraint: Constraint) -> None:
        """Remove ``constraint`` if present."""
        if constraint in self.constraints:
            self.constraints.remove(constraint)

    def clear_constraints(self) -> None:
        self.constraints.clear()

    def solve(self) -> bool:
        """Return whether the system meets the tolerance within the iteration budget.

        An empty system is always solved.
        """
        if not self.constraints:
            return True
        return any(
            self.system_error() < self.tolerance for _ in range(self.max_iterations)
        )

    def validate_constraints(self) -> bool:
        return all(c.is_valid() for c in self.constraints)

    def system_error(self) -> float:
        """Root of the summed squared errors of the active constraints."""
        return math.sqrt(sum(c.error() ** 2 for c in self.constraints if c.active))