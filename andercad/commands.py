"""Undoable commands and the undo/redo history that runs them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from andercad.geometry import Point
from andercad.shape import (
    Shape,
    create_box,
    create_box_from_corners,
    create_cylinder,
    create_sphere,
)


class Command(ABC):
    """An operation that can be executed, undone and redone.

    Each method returns whether it succeeded.
    """

    name: str = "Command"

    @abstractmethod
    def execute(self) -> bool:
        """Perform the operation."""

    @abstractmethod
    def undo(self) -> bool:
        """Revert the operation."""

    @abstractmethod
    def redo(self) -> bool:
        """Perform the operation again after an undo."""


class CommandManager:
    """A linear undo/redo history of executed commands."""

    def __init__(self) -> None:
        self._done: list[Command] = []
        self._undone: list[Command] = []

    def execute_command(self, command: Optional[Command]) -> bool:
        """Execute ``command``; on success record it and drop the redo history."""
        if command is None or not command.execute():
            return False
        self._undone.clear()
        self._done.append(command)
        return True

    def undo(self) -> bool:
        if not self._done:
            return False
        if not self._done[-1].undo():
            return False
        self._undone.append(self._done.pop())
        return True

    def redo(self) -> bool:
        if not self._undone:
            return False
        if not self._undone[-1].redo():
            return False
        self._done.append(self._undone.pop())
        return True

    def clear(self) -> None:
        self._done.clear()
        self._undone.clear()

    def can_undo(self) -> bool:
        return bool(self._done)

    def can_redo(self) -> bool:
        return bool(self._undone)

    def undo_command_name(self) -> Optional[str]:
        """Name of the command an undo would revert, if any."""
        return self._done[-1].name if self._done else None

    def redo_command_name(self) -> Optional[str]:
        """Name of the command a redo would repeat, if any."""
        return self._undone[-1].name if self._undone else None


class _ShapeCreationCommand(Command):
    """Shared behaviour of commands that build one primitive shape."""

    def __init__(self) -> None:
        self.created_shape: Optional[Shape] = None
        self._executed = False

    @property
    def executed(self) -> bool:
        return self._executed

    @abstractmethod
    def _build(self) -> Shape:
        """Create the shape; raise ValueError on bad parameters."""

    def _execute(self) -> bool:
        if self._executed:
            return True
        try:
            self.created_shape = self._build()
        except ValueError:
            self.created_shape = None
        self._executed = self.created_shape is not None
        return self._executed

    def _undo(self) -> bool:
        if not self._executed:
            return False
        self.created_shape = None
        self._executed = False
        return True

    def _redo(self) -> bool:
        if self._executed:
            return True
        return self._execute()

    def execute(self) -> bool:
        return self._execute()

    def undo(self) -> bool:
        return self._undo()

    def redo(self) -> bool:
        return self._redo()


class CreateBoxCommand(_ShapeCreationCommand):
    """Create a box from its sizes or from two opposite corners."""

    name = "Create Box"

    def __init__(
        self,
        width: float = 0.0,
        height: float = 0.0,
        depth: float = 0.0,
        corners: Optional[tuple[Point, Point]] = None,
    ) -> None:
        super().__init__()
        self.width = width
        self.height = height
        self.depth = depth
        self.corners = corners

    @classmethod
    def from_corners(cls, corner1: Point, corner2: Point) -> CreateBoxCommand:
        return cls(corners=(corner1, corner2))

    def _build(self) -> Shape:
        if self.corners is not None:
            return create_box_from_corners(*self.corners)
        return create_box(self.width, self.height, self.depth)

    def execute(self) -> bool:
        """Build the box; True when a box now exists."""
        return self._execute()

    def undo(self) -> bool:
        """Discard the box; False if it was never built."""
        return self._undo()

    def redo(self) -> bool:
        """Build the box again after an undo."""
        return self._redo()


class CreateCylinderCommand(_ShapeCreationCommand):
    """Create a cylinder standing on ``center`` (the origin by default)."""

    name = "Create Cylinder"

    def __init__(self, radius: float, height: float, center: Optional[Point] = None) -> None:
        super().__init__()
        self.radius = radius
        self.height = height
        self.center = center

    def _build(self) -> Shape:
        return create_cylinder(self.radius, self.height, self.center)

    def execute(self) -> bool:
        """Build the cylinder; True when a cylinder now exists."""
        return self._execute()

    def undo(self) -> bool:
        """Discard the cylinder; False if it was never built."""
        return self._undo()

    def redo(self) -> bool:
        """Build the cylinder again after an undo."""
        return self._redo()


class CreateSphereCommand(_ShapeCreationCommand):
    """Create a sphere around ``center`` (the origin by default)."""

    name = "Create Sphere"

    def __init__(self, radius: float, center: Optional[Point] = None) -> None:
        super().__init__()
        self.radius = radius
        self.center = center

    def _build(self) -> Shape:
        return create_sphere(self.radius, self.center)

    def execute(self) -> bool:
        """Build the sphere; True when a sphere now exists."""
        return self._execute()

    def undo(self) -> bool:
        """Discard the sphere; False if it was never built."""
        return self._undo()

    def redo(self) -> bool:
        """Build the sphere again after an undo."""
        return self._redo()