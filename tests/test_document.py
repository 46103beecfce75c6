import pytest

from andercad.document import Document, DocumentError, DocumentManager, Label
from andercad.shape import Shape, create_box, create_cylinder, create_sphere


@pytest.fixture
def doc():
    return Document()


@pytest.fixture
def manager():
    return DocumentManager()


def test_new_document_has_shapes_folder(doc):
    assert doc.get_name(doc.shapes_label) == "Shapes"
    assert doc.shapes_label.find_child(1) is None
    assert doc.all_shapes() == []


def test_add_shape_records_attributes(doc):
    box = create_box(1, 2, 3)
    label = doc.add_shape(box)
    assert doc.get_shape(label) is box
    assert doc.get_name(label) == "Shape"
    assert doc.get_integer(label) == 1
    assert doc.all_shapes() == [label]


def test_add_shape_uses_next_free_tag(doc):
    first = doc.add_shape(create_box(1, 1, 1), "a")
    second = doc.add_shape(create_sphere(1), "b")
    assert second.tag == first.tag + 1
    assert doc.all_shapes() == [first, second]


@pytest.mark.parametrize("shape", [None, Shape()])
def test_add_empty_shape_raises(doc, shape):
    with pytest.raises(ValueError):
        doc.add_shape(shape)


def test_remove_shape_keeps_label(doc):
    label = doc.add_shape(create_box(1, 1, 1), "box")
    doc.remove_shape(label)
    assert doc.get_shape(label) is None
    assert doc.get_integer(label) == 0
    assert doc.all_shapes() == [label]


def test_find_child_create(doc):
    assert doc.root.find_child(7) is None
    child = doc.root.find_child(7, create=True)
    assert child.exists
    assert doc.root.find_child(7) == child


def test_attribute_defaults_and_round_trip(doc):
    label = doc.root.find_child(5, create=True)
    assert (doc.get_name(label), doc.get_integer(label), doc.get_real(label)) == ("", 0, 0.0)
    doc.set_name(label, "part")
    doc.set_integer(label, 42)
    doc.set_real(label, 2.5)
    assert (doc.get_name(label), doc.get_integer(label), doc.get_real(label)) == ("part", 42, 2.5)


def test_foreign_label_rejected(doc):
    other = Document()
    with pytest.raises(ValueError):
        doc.get_name(other.root)


def test_transaction_undo_redo(doc):
    doc.start_transaction("add")
    label = doc.add_shape(create_box(1, 1, 1))
    doc.commit_transaction()
    assert doc.can_undo() and not doc.can_redo()
    assert doc.undo()
    assert doc.all_shapes() == []
    assert doc.can_redo()
    assert doc.redo()
    assert doc.all_shapes() == [label]


def test_commit_without_changes_is_not_undoable(doc):
    doc.start_transaction()
    doc.commit_transaction()
    assert not doc.can_undo()
    assert not doc.undo()


def test_abort_restores_state(doc):
    doc.start_transaction()
    doc.add_shape(create_box(1, 1, 1))
    doc.abort_transaction()
    assert doc.all_shapes() == []
    assert not doc.in_transaction
    assert not doc.can_undo()


def test_new_commit_clears_redo(doc):
    for size in (1, 2):
        doc.start_transaction()
        doc.add_shape(create_box(size, size, size))
        doc.commit_transaction()
    doc.undo()
    assert doc.can_redo()
    doc.start_transaction()
    doc.set_real(doc.root, 1.0)
    doc.commit_transaction()
    assert not doc.can_redo()


def test_undo_limit(doc):
    limited = Document(undo_limit=2)
    for value in range(3):
        limited.start_transaction()
        limited.set_integer(limited.root, value + 1)
        limited.commit_transaction()
    assert limited.undo() and limited.undo()
    assert not limited.can_undo()
    assert limited.get_integer(limited.root) == 1


def test_create_folder_is_undoable(doc):
    folder = doc.create_folder("Parts")
    assert doc.get_name(folder) == "Parts"
    assert folder in doc.root.children()
    assert doc.undo()
    assert not folder.exists


def test_create_folder_under_parent(doc):
    parent = doc.create_folder("Outer")
    inner = doc.create_folder("Inner", parent)
    assert inner.entry[:-1] == parent.entry


def test_save_and_open_round_trip(doc, tmp_path):
    box = create_box(1, 2, 3)
    label = doc.add_shape(box, "box")
    removed = doc.add_shape(create_sphere(2), "gone")
    doc.remove_shape(removed)
    doc.set_real(label, 0.5)
    path = tmp_path / "model.json"
    doc.save_document(path)

    loaded = Document()
    loaded.open_document(path)
    labels = loaded.all_shapes()
    assert [loaded.get_name(lb) for lb in labels] == ["box", "gone"]
    assert loaded.get_shape(labels[0]).volume() == pytest.approx(box.volume())
    assert loaded.get_shape(labels[1]) is None
    assert loaded.get_real(labels[0]) == 0.5
    assert not loaded.can_undo()


def test_open_missing_file_raises(doc, tmp_path):
    with pytest.raises(DocumentError):
        doc.open_document(tmp_path / "missing.json")


def test_open_malformed_file_raises(doc, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"format": "other"}', encoding="utf-8")
    with pytest.raises(DocumentError):
        doc.open_document(path)


def test_manager_generates_unique_names(manager):
    assert manager.add_shape(create_box(1, 1, 1)) == "Shape"
    assert manager.add_shape(create_box(1, 1, 1)) == "Shape_1"
    assert manager.add_shape(create_box(1, 1, 1), "Box") == "Box"
    assert manager.add_shape(create_box(1, 1, 1), "Box") == "Box_1"
    assert len(set(manager.shape_names())) == 4


def test_manager_get_and_remove_by_name(manager):
    box = create_box(1, 1, 1)
    manager.add_shape(box, "box")
    assert manager.get_shape("box") is box
    assert manager.remove_shape("box")
    assert manager.get_shape("box") is None
    assert manager.shapes() == []
    assert not manager.remove_shape("nothing")
    assert not manager.remove_shape("")


def test_manager_remove_by_shape(manager):
    box = create_box(1, 1, 1)
    sphere = create_sphere(1)
    manager.add_shape(box)
    manager.add_shape(sphere)
    assert manager.remove_shape(sphere)
    assert manager.shapes() == [box]
    assert not manager.remove_shape(create_sphere(1))


def test_manager_replace_shape_keeps_name(manager):
    old = create_box(1, 1, 1)
    new = create_cylinder(1, 2)
    manager.add_shape(old, "part")
    assert manager.replace_shape(old, new)
    assert manager.get_shape("part") is old or manager.shapes() == [new]
    assert manager.shapes() == [new]
    assert not manager.replace_shape(old, new)


def test_manager_replace_with_empty_raises(manager):
    old = create_box(1, 1, 1)
    manager.add_shape(old)
    with pytest.raises(ValueError):
        manager.replace_shape(old, Shape())
    assert manager.shapes() == [old]


def test_manager_transaction_commits(manager):
    with manager.transaction("add"):
        manager.add_shape(create_box(1, 1, 1), "box")
    assert manager.can_undo()
    assert manager.undo()
    assert manager.shape_names() == []
    assert manager.redo()
    assert manager.shape_names() == ["box"]


def test_manager_transaction_aborts_on_error(manager):
    with pytest.raises(RuntimeError):
        with manager.transaction():
            manager.add_shape(create_box(1, 1, 1), "box")
            raise RuntimeError("boom")
    assert manager.shape_names() == []
    assert not manager.can_undo()


def test_label_str_and_type(doc):
    label = doc.shapes_label
    assert isinstance(label, Label)
    assert str(label) == "0:1"