# andercad

`andercad` is the modelling core of a small parametric CAD application. It is written in pure Python and has no third-party dependencies.

## What it provides

### Geometry: `andercad.geometry`

- `Point` is a mutable 3D point with `x`, `y` and `z` fields. It can be iterated, and `distance(other)` returns the Euclidean distance to another point.
- `Transform` is an immutable affine transform. It is built with one of these class methods:
  - `identity()`
  - `translation(dx, dy, dz)`
  - `rotation(axis_point, axis_direction, angle)`: the angle is in radians.
  - `scaling(center, factor)`: a uniform scaling.

  `a.compose(b)` applies `b` first and then `a`. `apply(point)` maps a point through the transform. `scale_factor` gives the length scale of the transform.

  `rotation` raises `ValueError` when the axis direction has zero length. `scaling` raises `ValueError` when the factor is zero.

### Solids: `andercad.shape`

- `Box`, `Cylinder` and `Sphere` are the primitive solids. Each one reports `volume()` and `area()`.
- `Shape` places a solid in model space with a `Transform`.
  - An empty `Shape()` is not valid, and its volume and area are 0.
  - `transformed(transform)` returns a new shape. Its volume and area take account of the scaling.
  - `to_dict()` and `Shape.from_dict()` convert the shape to and from plain data.
- The factory functions are `create_box(width, height, depth)`, `create_box_from_corners(corner1, corner2)`, `create_cylinder(radius, height, center=None)` and `create_sphere(radius, center=None)`. They raise `ValueError` when a dimension is not positive, or when the box corners coincide along an axis.

### Undoable commands: `andercad.commands`, `andercad.transform`

- `Command` is the abstract base. It declares `execute()`, `undo()` and `redo()`, and each of them returns whether it succeeded.
- `CommandManager` keeps a linear history of commands.
  - `execute_command(command)` runs a command. Executing a new command drops the redo history.
  - `undo()` and `redo()` move through the history. `can_undo()` and `can_redo()` report whether that is possible.
  - `undo_command_name()` and `redo_command_name()` return the name of the command that would be affected.
  - `clear()` empties the history.
- `CreateBoxCommand` builds a box from sizes, or from corners with `CreateBoxCommand.from_corners`. `CreateCylinderCommand` and `CreateSphereCommand` build the other solids. Each one keeps its result in `created_shape`. Bad parameters make `execute()` return `False`.
- `TranslateCommand`, `RotateCommand` and `ScaleCommand` come from `andercad.transform`.
  - Each one transforms every valid shape in a list into new shapes, and the originals are left untouched.
  - `transformed_shapes()` returns the results. Before execution it returns a preview.
  - `ScaleCommand` supports only uniform scaling. A non-uniform request scales every axis by `scale_x`.

### Sketches: `andercad.elements`, `andercad.sketch`, `andercad.constraints`, `andercad.snapping`

- The sketch elements are `SketchPoint`, `SketchLine`, `SketchCircle` and `SketchArc`. Each element gets a unique `id` and has `selected` and `visible` flags. It also has a `description()`. Lines, circles and arcs offer their own measurements:
  - Lines have `length()` and `angle()`.
  - Circles have `diameter()`, `circumference()` and `area()`.
  - Arcs have `sweep_angle()`, `length()`, `start_point()` and `end_point()`.
- `Sketch` holds the elements and constraints of one sketch. It offers lookup by id, selection, and counts.
- `Constraint` is an abstract base. A subclass supplies `is_valid()`, `description()` and `error()`.
- `ConstraintSolver` sums the errors of the active constraints as `system_error()`. `solve()` reports whether that error is within `tolerance`.
- `SnappingManager.find_snap_point(point, elements)` picks the nearest snap within `snap_tolerance`. The candidates are grid nodes (`grid_size`), line endpoints, line midpoints, and circle or arc centres. Individual snap kinds can be switched on and off with `enable_snap_type` and `disable_snap_type`.

### Features: `andercad.feature`, `andercad.features`, `andercad.feature_manager`, `andercad.live_preview`

- `Feature` is the base class. A feature has named numeric parameters, a `FeatureType` and a `FeatureState`.
- `ExtrudeFeature`, `RevolveFeature`, `SweepFeature` and `LoftFeature` are the concrete features. Each one validates its sketches and parameters, and `create_command()` returns a creation command.
- `FeatureManager` keeps the features in order.
  - It executes them and sets each feature's state to `EXECUTED` or `FAILED`.
  - It can reorder them.
  - It calls `on_feature_added`, `on_feature_removed` and `on_feature_updated` when they are set.
- `LivePreview` rebuilds a feature's preview shape `update_delay` milliseconds after the last change, and reports the result to `on_preview_update`. `flush()` runs a pending rebuild immediately.

### Documents: `andercad.document`

- `Document` is a tree of `Label`s that carry names, integers, reals and shapes.
  - Changes made between `start_transaction()` and `commit_transaction()` become one undoable step. Up to 50 steps are kept by default.
  - `save_document(filename)` writes the document as JSON, and `open_document(filename)` reads it back. Either one raises `DocumentError` on failure.
- `DocumentManager` gives name-based access to shapes.
  - `add_shape` returns the unique name it used.
  - The other methods are `remove_shape`, `replace_shape`, `get_shape`, `shape_names` and `shapes`.
  - The `transaction()` context manager commits the changes made in its block, or aborts them if the block raises.

## Installation

```
pip install .
```

## Example

```python
from andercad.commands import CommandManager, CreateBoxCommand
from andercad.document import DocumentManager
from andercad.geometry import Point
from andercad.shape import create_box, create_sphere
from andercad.snapping import SnappingManager

manager = CommandManager()
manager.execute_command(CreateBoxCommand(10.0, 20.0, 30.0))
print(manager.undo_command_name())   # Create Box
manager.undo()
print(manager.can_redo())            # True

print(create_sphere(2.0).volume())

docs = DocumentManager()
with docs.transaction("add box"):
    name = docs.add_shape(create_box(1.0, 2.0, 3.0))
print(docs.shape_names())            # ['Shape']
docs.undo()
print(docs.shape_names())            # []

result = SnappingManager().find_snap_point(Point(1.0, 1.0), [])
print(result.type, result.snap_point)  # SnapType.GRID Point(x=0.0, y=0.0, z=0.0)
```

## What it does not do

- There is no graphical interface, 3D viewer, interactive selection, or command-line program.
- There are no boolean operations, fillets, chamfers, or STEP, IGES or STL import and export.
- The extrude, revolve, sweep and loft features do not yet turn sketches into solids. When their parameters are valid, `create_shape()` returns an empty `Shape`.
- `ConstraintSolver` only measures constraint error. It does not move sketch geometry.

## Tests

```
pip install .[test]
pytest
```