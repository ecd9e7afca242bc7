"""Unit tests for the FileSystemNode class."""

import pytest

from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.types import NodeKind


def test_file_system_node_initialization():
    """Test basic initialization of FileSystemNode."""
    file_node = FileSystemNode("/r/a.txt", "a.txt", NodeKind.FILE, size=3, extension=".txt")
    assert file_node.path == "/r/a.txt"
    assert file_node.name == "a.txt"
    assert file_node.is_file
    assert not file_node.is_dir
    assert file_node.size == 3
    assert file_node.extension == ".txt"
    assert file_node.extra_attributes == {}

    dir_node = FileSystemNode("/r", "r", NodeKind.DIRECTORY)
    assert dir_node.is_dir
    assert dir_node.size == 0
    assert dir_node.extension is None
    assert dir_node.children == ()


def test_file_system_node_parent_child():
    """Test that a directory adopts its children in the given order."""
    c_txt = FileSystemNode("/r/sub/c.txt", "c.txt", NodeKind.FILE, size=2)
    sub = FileSystemNode("/r/sub", "sub", NodeKind.DIRECTORY, size=2, children=[c_txt])
    a_txt = FileSystemNode("/r/a.txt", "a.txt", NodeKind.FILE, size=3)
    root = FileSystemNode("/r", "r", NodeKind.DIRECTORY, size=5, children=[a_txt, sub])

    assert root.children == (a_txt, sub)
    assert sub.parent is root
    assert c_txt.parent is sub
    assert root.parent is None
    assert c_txt.root is root
    assert c_txt.depth == 2


def test_fields_are_read_only():
    node = FileSystemNode("/r/a.txt", "a.txt", NodeKind.FILE, size=3, extra_attributes={"mtime": 1.5})

    with pytest.raises(AttributeError):
        node.size = 10
    with pytest.raises(AttributeError):
        node.path = "/elsewhere"
    with pytest.raises(TypeError):
        node.extra_attributes["mtime"] = 2.0


def test_extra_attributes_are_copied():
    attributes = {"mode": 0o644}
    node = FileSystemNode("/r/a.txt", "a.txt", NodeKind.FILE, extra_attributes=attributes)

    attributes["mode"] = 0o600

    assert node.extra_attributes["mode"] == 0o644


def test_widget_aliases():
    node = FileSystemNode("/r/a.txt", "a.txt", NodeKind.FILE)

    assert node.title == "a.txt"
    assert node.key == "/r/a.txt"


def test_repr():
    node = FileSystemNode("/r", "r", NodeKind.DIRECTORY, size=10)

    assert repr(node) == "FileSystemNode(path='/r', kind=directory, size=10)"


def test_path_property_does_not_clash_with_anytree():
    """Test that the filesystem path survives anytree's own parent bookkeeping."""
    leaf = FileSystemNode("/r/a.txt", "a.txt", NodeKind.FILE)
    root = FileSystemNode("/r", "r", NodeKind.DIRECTORY, children=[leaf])

    assert root.path == "/r"
    assert leaf.path == "/r/a.txt"
    assert isinstance(leaf.path, str)


def test_ancestors():
    """Test that ancestors lists the parent chain from the root downwards."""
    leaf = FileSystemNode("/r/sub/c.txt", "c.txt", NodeKind.FILE, size=2)
    sub = FileSystemNode("/r/sub", "sub", NodeKind.DIRECTORY, size=2, children=[leaf])
    root = FileSystemNode("/r", "r", NodeKind.DIRECTORY, size=2, children=[sub])

    assert leaf.ancestors == (root, sub)
    assert sub.ancestors == (root,)
    assert root.ancestors == ()
