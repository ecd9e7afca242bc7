"""Filtered file system tree construction.

This package builds in-memory trees of directory structures, with support for excluding
entries by pattern, restricting files by extension, copying metadata onto nodes and
invoking callbacks as entries are visited.
"""

from .exporters import tree_to_dict, tree_to_json
from .file_system_node import FileSystemNode
from .file_system_tree import FileSystemTree
from .permission_action import PermissionAction
from .scan_config import ScanConfig
from .tree_builder import build_tree

__all__ = [
    "FileSystemNode",
    "FileSystemTree",
    "PermissionAction",
    "ScanConfig",
    "build_tree",
    "tree_to_dict",
    "tree_to_json",
]
