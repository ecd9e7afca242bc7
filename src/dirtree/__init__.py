"""Filesystem tree scanning.

This package builds filtered, size-aggregated trees of directory contents, with optional
metadata projection and per-entry callbacks.
"""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import ConfigurationError, ScanError
from .file_system_tree import (
    FileSystemNode,
    FileSystemTree,
    PermissionAction,
    ScanConfig,
    build_tree,
    tree_to_dict,
    tree_to_json,
)
from .path_utils import is_file, normalize_path
from .types import NodeKind

try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "ConfigurationError",
    "FileSystemNode",
    "FileSystemTree",
    "NodeKind",
    "PermissionAction",
    "ScanConfig",
    "ScanError",
    "build_tree",
    "is_file",
    "normalize_path",
    "tree_to_dict",
    "tree_to_json",
    "__version__",
]
