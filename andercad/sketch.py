"""A sketch: a named collection of elements and the constraints between them."""

from __future__ import annotations

from typing import Optional

from andercad.constraints import Constraint, ConstraintSolver
from andercad.elements import SketchElement


class Sketch:
    """Elements drawn on a plane together with their constraints."""

    def __init__(self, name: str = "Sketch") -> None:
        self.name = name
        self.elements: list[SketchElement] = []
        self.constraints: list[Constraint] = []
        self.solver = ConstraintSolver()

    def add_element(self, element: SketchElement) -> None:
        self.elements.append(element)

    def remove_element(self, element: SketchElement) -> None:
        """Remove ``element`` if it is in the sketch."""
        if element in self.elements:
            self.elements.remove(element)

    def clear_elements(self) -> None:
        self.elements.clear()

    def element_by_id(self, element_id: int) -> Optional[SketchElement]:
        """The first element with the given id, or None."""
        return next((e for e in self.elements if e.id == element_id), None)

    def add_constraint(self, constraint: Constraint) -> None:
        self.constraints.append(constraint)
        self.solver.add_constraint(constraint)

    def remove_constraint(self, constraint: Constraint) -> None:
        """Remove ``constraint`` if it is in the sketch."""
        if constraint in self.constraints:
            self.constraints.remove(constraint)
            self.solver.remove_constraint(constraint)

    def clear_constraints(self) -> None:
        self.constraints.clear()
        self.solver.clear_constraints()

    def solve_constraints(self) -> bool:
        return self.solver.solve()

    def validate_constraints(self) -> bool:
        return self.solver.validate_constraints()

    def select_element(self, element: SketchElement) -> None:
        element.selected = True

    def deselect_element(self, element: SketchElement) -> None:
        element.selected = False

    def clear_selection(self) -> None:
        for element in self.elements:
            element.selected = False

    def selected_elements(self) -> list[SketchElement]:
        return [e for e in self.elements if e.selected]

    def is_empty(self) -> bool:
        return not self.elements

    def element_count(self) -> int:
        return len(self.elements)

    def constraint_count(self) -> int:
        return len(self.constraints)