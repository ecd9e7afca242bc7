"""Test configuration and fixtures for dirtree."""

import pytest


@pytest.fixture
def sample_tree(tmp_path):
    """Create the reference tree: a.txt (3 B), b.tc (5 B) and sub/c.txt (2 B)."""
    root = tmp_path / "r"
    root.mkdir()
    (root / "a.txt").write_bytes(b"aaa")
    (root / "b.tc").write_bytes(b"bbbbb")
    (root / "sub").mkdir()
    (root / "sub" / "c.txt").write_bytes(b"cc")
    return root
