"""Unit tests for metadata attribute projection."""

import os

import pytest

from dirtree.exceptions import ConfigurationError
from dirtree.file_system_tree.attributes import STAT_ATTRIBUTES, project_attributes, validate_attribute_names


def test_every_known_attribute_maps_to_a_stat_field():
    for name, field_name in STAT_ATTRIBUTES.items():
        assert field_name == f"st_{name}"


def test_project_attributes(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("hello")
    stat_result = os.stat(target)

    projected = project_attributes(stat_result, ["size", "mtime", "mode"])

    assert projected == {"size": 5, "mtime": stat_result.st_mtime, "mode": stat_result.st_mode}
    assert list(projected) == ["size", "mtime", "mode"]


def test_project_no_attributes(tmp_path):
    assert project_attributes(os.stat(tmp_path), ()) == {}


def test_platform_specific_attribute_defaults_to_none(tmp_path):
    stat_result = os.stat(tmp_path)

    projected = project_attributes(stat_result, ["birthtime"])

    assert projected["birthtime"] == getattr(stat_result, "st_birthtime", None)


def test_validate_attribute_names():
    assert validate_attribute_names(("mtime", "ino")) == ["mtime", "ino"]


def test_validate_rejects_unknown_name():
    with pytest.raises(ConfigurationError) as exc_info:
        validate_attribute_names(["mtime", "isDirectory"])

    assert exc_info.value.option == "attributes"
    assert exc_info.value.value == "isDirectory"


def test_validate_rejects_bare_string():
    with pytest.raises(ConfigurationError):
        validate_attribute_names("mtime")
