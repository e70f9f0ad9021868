import pytest

from yu.types.environment import Frame
from yu.types.errors import YuUndefinedSymbol


def test_new_frame_has_no_parent():
    frame = Frame.new()
    assert frame.outer is None
    assert frame.get("x") is None
    assert frame.depth == 1


def test_get_walks_parent_chain():
    root = Frame.new()
    root.set("x", 1.0)
    child = Frame.with_parent(root)
    grandchild = Frame.with_parent(child)
    assert grandchild.get("x") == 1.0
    assert "x" in grandchild
    assert grandchild.depth == 3


def test_set_writes_current_frame_only():
    root = Frame.new()
    root.set("x", 1.0)
    child = Frame.with_parent(root)
    child.set("x", 2.0)
    assert child.get("x") == 2.0
    assert root.get("x") == 1.0
    child.set("y", 3.0)
    assert "y" not in root


def test_set_overwrites_in_place():
    frame = Frame.new()
    frame.set("x", 1.0)
    frame.set("x", 5.0)
    assert frame.get("x") == 5.0


def test_parent_changes_are_visible_to_children():
    root = Frame.new()
    child = Frame.with_parent(root)
    root.set("late", 7.0)
    assert child.get("late") == 7.0


def test_lookup_raises_for_unbound():
    with pytest.raises(YuUndefinedSymbol) as excinfo:
        Frame.with_parent(Frame.new()).lookup("missing")
    assert excinfo.value.name == "missing"
    assert str(excinfo.value) == "'missing' is undefined"


def test_str_and_repr():
    root = Frame.new()
    root.set("x", 1.0)
    child = Frame.with_parent(root)
    child.set("y", 2.0)
    assert str(child) == "{y: 2.0} -> ..."
    assert repr(child) == "<Frame chain: {y: 2.0} -> {x: 1.0}>"
