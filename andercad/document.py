"""A labelled document tree holding shapes and attributes, with undo/redo."""

from __future__ import annotations

import itertools
import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Optional, Union

from andercad.shape import Shape

logger = logging.getLogger(__name__)

UNDO_LIMIT = 50
ROOT_TAG = 0
SHAPES_TAG = 1
_FORMAT = "andercad-document"
_VERSION = 1

Entry = tuple[int, ...]
Tree = dict[Entry, dict[str, Any]]


class DocumentError(Exception):
    """A document could not be read or written."""


@dataclass(frozen=True)
class Label:
    """A node of a document's tree, addressed by its path of tags."""

    document: Document = field(repr=False)
    entry: Entry

    @property
    def tag(self) -> int:
        return self.entry[-1]

    @property
    def exists(self) -> bool:
        return self.entry in self.document._tree

    def find_child(self, tag: int, create: bool = False) -> Optional[Label]:
        """The child with ``tag``; created if missing and ``create`` is set, else None."""
        if tag <= 0:
            raise ValueError("child tags start at 1")
        entry = self.entry + (tag,)
        if entry not in self.document._tree:
            if not create:
                return None
            self.document._ensure(entry)
        return Label(self.document, entry)

    def children(self) -> list[Label]:
        """Existing direct children, ordered by tag."""
        depth = len(self.entry) + 1
        entries = sorted(
            e for e in self.document._tree if len(e) == depth and e[:-1] == self.entry
        )
        return [Label(self.document, e) for e in entries]

    def __str__(self) -> str:
        return ":".join(str(tag) for tag in self.entry)


class Document:
    """A tree of labels carrying names, numbers and shapes.

    Changes made between :meth:`start_transaction` and
    :meth:`commit_transaction` form one undoable step.
    """

    def __init__(self, undo_limit: int = UNDO_LIMIT) -> None:
        self.undo_limit = undo_limit
        self.new_document()

    # -- document lifecycle -------------------------------------------------

    def new_document(self) -> None:
        """Discard everything and start an empty document."""
        self._reset({(ROOT_TAG,): {}})

    def _reset(self, tree: Tree) -> None:
        self._tree: Tree = tree
        self._undos: list[Tree] = []
        self._redos: list[Tree] = []
        self._pending: Optional[Tree] = None
        self._ensure((ROOT_TAG,))
        self.root = Label(self, (ROOT_TAG,))
        shapes = self.root.find_child(SHAPES_TAG, create=True)
        assert shapes is not None
        self.shapes_label = shapes
        self._tree[shapes.entry]["name"] = "Shapes"
        logger.debug("document initialized with undo limit %d", self.undo_limit)

    def open_document(self, filename: Union[str, Path]) -> None:
        """Replace the content with a document read from ``filename``."""
        try:
            data = json.loads(Path(filename).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise DocumentError(f"cannot read document {filename}: {exc}") from exc
        self._reset(self._parse(data))

    def save_document(self, filename: Union[str, Path]) -> None:
        """Write the document to ``filename``."""
        labels = []
        for entry, attrs in sorted(self._tree.items()):
            item: dict[str, Any] = {"entry": list(entry)}
            for key, value in attrs.items():
                if key == "shape":
                    value = None if value is None else value.to_dict()
                item[key] = value
            labels.append(item)
        data = {"format": _FORMAT, "version": _VERSION, "labels": labels}
        try:
            Path(filename).write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as exc:
            raise DocumentError(f"cannot write document {filename}: {exc}") from exc

    @staticmethod
    def _parse(data: Any) -> Tree:
        try:
            if data.get("format") != _FORMAT:
                raise ValueError("not a document file")
            tree: Tree = {}
            for item in data["labels"]:
                entry = tuple(int(tag) for tag in item["entry"])
                if not entry or entry[0] != ROOT_TAG:
                    raise ValueError(f"bad label entry {entry}")
                attrs: dict[str, Any] = {}
                if "name" in item:
                    attrs["name"] = str(item["name"])
                if "integer" in item:
                    attrs["integer"] = int(item["integer"])
                if "real" in item:
                    attrs["real"] = float(item["real"])
                if "shape" in item:
                    raw = item["shape"]
                    attrs["shape"] = None if raw is None else Shape.from_dict(raw)
                tree[entry] = attrs
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise DocumentError(f"malformed document: {exc}") from exc
        return tree

    # -- tree helpers ---------------------------------------------------------

    def _ensure(self, entry: Entry) -> None:
        for depth in range(1, len(entry) + 1):
            self._tree.setdefault(entry[:depth], {})

    def _own(self, label: Label) -> None:
        if label.document is not self:
            raise ValueError("label belongs to another document")

    def _set(self, label: Label, key: str, value: Any) -> None:
        self._own(label)
        self._ensure(label.entry)
        self._tree[label.entry][key] = value

    def _get(self, label: Label, key: str, default: Any) -> Any:
        self._own(label)
        return self._tree.get(label.entry, {}).get(key, default)

    def _next_available_label(self, parent: Label) -> Label:
        tag = next(t for t in itertools.count(1) if parent.entry + (t,) not in self._tree)
        child = parent.find_child(tag, create=True)
        assert child is not None
        return child

    # -- shapes ----------------------------------------------------------------

    def add_shape(self, shape: Optional[Shape], name: str = "") -> Label:
        """Store ``shape`` under a new label in the shapes folder."""
        if shape is None or not shape.is_valid():
            raise ValueError("cannot add an empty shape")
        label = self._next_available_label(self.shapes_label)
        self._set(label, "shape", shape)
        self._set(label, "integer", 1)
        self._set(label, "name", name or "Shape")
        return label

    def remove_shape(self, label: Label) -> None:
        """Mark the shape on ``label`` as deleted; the label itself stays."""
        if self._get(label, "shape", None) is not None:
            self._set(label, "shape", None)
        self._set(label, "integer", 0)

    def get_shape(self, label: Label) -> Optional[Shape]:
        return self._get(label, "shape", None)

    def all_shapes(self) -> list[Label]:
        """Labels in the shapes folder that carry a shape record, deleted or not."""
        return [c for c in self.shapes_label.children() if "shape" in self._tree[c.entry]]

    def create_folder(self, name: str, parent: Optional[Label] = None) -> Label:
        """A new named label under ``parent`` (the root by default)."""
        parent_label = self.root if parent is None else parent
        self._own(parent_label)
        own_transaction = not self.in_transaction
        if own_transaction:
            self.start_transaction()
        try:
            folder = self._next_available_label(parent_label)
            self.set_name(folder, name)
        except Exception:
            self.abort_transaction()
            raise
        if own_transaction:
            self.commit_transaction()
        return folder

    # -- attributes ------------------------------------------------------------

    def set_name(self, label: Label, name: str) -> None:
        self._set(label, "name", name)

    def get_name(self, label: Label) -> str:
        return self._get(label, "name", "")

    def set_integer(self, label: Label, value: int) -> None:
        self._set(label, "integer", int(value))

    def get_integer(self, label: Label) -> int:
        return self._get(label, "integer", 0)

    def set_real(self, label: Label, value: float) -> None:
        self._set(label, "real", float(value))

    def get_real(self, label: Label) -> float:
        return self._get(label, "real", 0.0)

    # -- undo / redo -------------------------------------------------------------

    def _snapshot(self) -> Tree:
        return {entry: dict(attrs) for entry, attrs in self._tree.items()}

    @property
    def in_transaction(self) -> bool:
        return self._pending is not None

    def start_transaction(self, name: str = "Operation") -> None:
        """Open a transaction unless one is already open."""
        if self._pending is not None:
            return
        self._pending = self._snapshot()
        logger.debug("transaction started: %s", name)

    def commit_transaction(self) -> None:
        """Close the open transaction; it becomes undoable if it changed anything."""
        if self._pending is None:
            logger.debug("cannot commit: no transaction is open")
            return
        before, self._pending = self._pending, None
        if before != self._tree:
            self._undos.append(before)
            while len(self._undos) > self.undo_limit:
                self._undos.pop(0)
            self._redos.clear()
        logger.debug("transaction committed, available undos: %d", len(self._undos))

    def abort_transaction(self) -> None:
        """Close the open transaction, discarding its changes."""
        if self._pending is None:
            return
        self._tree, self._pending = self._pending, None

    def undo(self) -> bool:
        self.abort_transaction()
        if not self._undos:
            return False
        self._redos.append(self._snapshot())
        self._tree = self._undos.pop()
        return True

    def redo(self) -> bool:
        self.abort_transaction()
        if not self._redos:
            return False
        self._undos.append(self._snapshot())
        self._tree = self._redos.pop()
        return True

    def can_undo(self) -> bool:
        return bool(self._undos)

    def can_redo(self) -> bool:
        return bool(self._redos)


class DocumentManager:
    """Name-based access to the shapes of a :class:`Document`."""

    def __init__(self, document: Optional[Document] = None) -> None:
        self.document = document if document is not None else Document()

    def new_document(self) -> None:
        self.document.new_document()

    def open_document(self, filename: Union[str, Path]) -> None:
        self.document.open_document(filename)

    def save_document(self, filename: Union[str, Path]) -> None:
        self.document.save_document(filename)

    def _find(self, name: str) -> Optional[Label]:
        if not name:
            return None
        doc = self.document
        return next((lb for lb in doc.all_shapes() if doc.get_name(lb) == name), None)

    def _find_shape(self, shape: Shape) -> Optional[Label]:
        doc = self.document
        return next((lb for lb in doc.all_shapes() if doc.get_shape(lb) is shape), None)

    def _unique_name(self, base: str) -> str:
        names = set(self.shape_names())
        if base not in names:
            return base
        return next(
            f"{base}_{n}" for n in itertools.count(1) if f"{base}_{n}" not in names
        )

    def add_shape(self, shape: Optional[Shape], name: str = "") -> str:
        """Add ``shape`` under a name not yet used and return that name."""
        unique = name or self._unique_name("Shape")
        if self._find(unique) is not None:
            unique = self._unique_name(unique)
        self.document.add_shape(shape, unique)
        return unique

    def remove_shape(self, target: Union[str, Shape]) -> bool:
        """Remove a shape given by name or by the shape itself; False if not found."""
        label = self._find(target) if isinstance(target, str) else self._find_shape(target)
        if label is None:
            return False
        self.document.remove_shape(label)
        return True

    def replace_shape(self, old_shape: Shape, new_shape: Shape) -> bool:
        """Put ``new_shape`` in place of ``old_shape`` under the same name."""
        if new_shape is None or not new_shape.is_valid():
            raise ValueError("cannot replace with an empty shape")
        label = self._find_shape(old_shape)
        if label is None:
            return False
        name = self.document.get_name(label)
        self.document.remove_shape(label)
        self.document.add_shape(new_shape, name)
        return True

    def get_shape(self, name: str) -> Optional[Shape]:
        label = self._find(name)
        return None if label is None else self.document.get_shape(label)

    def shape_names(self) -> list[str]:
        doc = self.document
        return [n for n in (doc.get_name(lb) for lb in doc.all_shapes()) if n]

    def shapes(self) -> list[Shape]:
        doc = self.document
        return [s for s in (doc.get_shape(lb) for lb in doc.all_shapes()) if s is not None]

    def undo(self) -> bool:
        return self.document.undo()

    def redo(self) -> bool:
        return self.document.redo()

    def can_undo(self) -> bool:
        return self.document.can_undo()

    def can_redo(self) -> bool:
        return self.document.can_redo()

    def start_transaction(self, name: str = "Operation") -> None:
        self.document.start_transaction(name)

    def commit_transaction(self) -> None:
        self.document.commit_transaction()

    def abort_transaction(self) -> None:
        self.document.abort_transaction()

    @contextmanager
    def transaction(self, name: str = "Operation") -> Iterator[DocumentManager]:
        """Commit the changes made in the block, or abort them if it raises."""
        self.start_transaction(name)
        try:
            yield self
        except BaseException:
            self.abort_transaction()
            raise
        self.commit_transaction()