"""Depth-first construction of a filtered FileSystemNode tree.

The walk stats each entry before deciding anything about it, filters it, and for
directories visits every listed child before the directory node itself is built, so
directory sizes are always the sum of the admitted children. Traversal is driven by an
explicit stack of open directories instead of recursion; the order in which nodes are
built and callbacks fire is the same as a recursive depth-first walk.
"""

import logging
import os
import stat
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Mapping, Optional, Union

from dirtree.exceptions import ScanError
from dirtree.file_system_tree.attributes import project_attributes
from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.file_system_tree.scan_config import ScanConfig
from dirtree.path_utils import get_extension, normalize_path
from dirtree.types import NodeKind, PathType

logger = logging.getLogger(__name__)

# Called as callback(node, path, stat_result); the return value is ignored.
NodeCallback = Callable[[FileSystemNode, str, os.stat_result], Any]
ConfigType = Union[ScanConfig, Mapping[str, Any], None]


@dataclass
class _OpenDirectory:
    """A directory whose children are still being visited."""

    raw_path: str
    path: str
    name: str
    stat_result: os.stat_result
    entries: Iterator[str]
    children: List[FileSystemNode] = field(default_factory=list)


def _entry_name(raw_path: str) -> str:
    return os.path.basename(os.path.normpath(raw_path)) or raw_path


def _list_directory(raw_path: str, config: ScanConfig) -> Optional[List[str]]:
    """List a directory, returning None when access is denied and the policy is IGNORE.

    Raises:
        ScanError: For any other listing failure, or for access denial under RAISE.
    """
    try:
        return os.listdir(raw_path)
    except PermissionError as e:
        if config.permission_action == PermissionAction.RAISE:
            raise ScanError(raw_path, e) from e
        logger.debug("Skipping unreadable directory %s: %s", raw_path, e)
        return None
    except OSError as e:
        raise ScanError(raw_path, e) from e


def _visit(
    raw_path: str, config: ScanConfig, on_file: Optional[NodeCallback]
) -> Union[FileSystemNode, _OpenDirectory, None]:
    """Process one entry.

    Returns a finished file node, an open directory whose children still have to be
    visited, or None when the entry is left out of the tree.
    """
    name = _entry_name(raw_path)
    path = normalize_path(raw_path, config.normalize_path)

    try:
        stat_result = os.stat(raw_path)
    except OSError as e:
        logger.debug("Skipping %s, metadata unavailable: %s", raw_path, e)
        return None

    if config.exclusion_rules is not None and config.exclusion_rules.exclude(path):
        logger.debug("Excluded %s", path)
        return None

    if stat.S_ISREG(stat_result.st_mode):
        extension = get_extension(raw_path)
        if config.extension_rule is not None and not config.extension_rule.admits(extension):
            return None
        node = FileSystemNode(
            path,
            name,
            NodeKind.FILE,
            size=stat_result.st_size,
            extension=extension,
            extra_attributes=project_attributes(stat_result, config.attributes),
        )
        if on_file is not None:
            on_file(node, path, stat_result)
        return node

    if stat.S_ISDIR(stat_result.st_mode):
        entries = _list_directory(raw_path, config)
        if entries is None:
            return None
        return _OpenDirectory(raw_path, path, name, stat_result, iter(entries))

    logger.debug("Skipping %s, neither a regular file nor a directory", raw_path)
    return None


def _close(directory: _OpenDirectory, config: ScanConfig, on_directory: Optional[NodeCallback]) -> FileSystemNode:
    node = FileSystemNode(
        directory.path,
        directory.name,
        NodeKind.DIRECTORY,
        size=sum(child.size for child in directory.children),
        extra_attributes=project_attributes(directory.stat_result, config.attributes),
        children=directory.children,
    )
    if on_directory is not None:
        on_directory(node, directory.path, directory.stat_result)
    return node


def build_tree(
    path: PathType,
    config: ConfigType = None,
    on_file: Optional[NodeCallback] = None,
    on_directory: Optional[NodeCallback] = None,
) -> Optional[FileSystemNode]:
    """Scan a path and build the tree of the entries admitted by the configuration.

    Entries whose metadata cannot be read, entries matching an exclusion rule, files whose
    extension fails the extension rule, and entries that are neither regular files nor
    directories are left out silently, together with anything beneath them. So are
    directories that cannot be listed because access is denied, unless the configuration
    says to raise. Directories are never dropped by the extension rule, even when none of
    their files survive it.

    Args:
        path: File or directory to scan.
        config: A ScanConfig, a mapping of options accepted by ScanConfig.from_options, or
            None for no filtering.
        on_file: Called as on_file(node, path, stat_result) for every admitted file, once
            its node is complete.
        on_directory: Called as on_directory(node, path, stat_result) for every admitted
            directory, after its children are collected and its size aggregated.

    Returns:
        The root node, or None if the root itself is excluded, unreadable or of an
        unsupported type.

    Raises:
        ConfigurationError: If the options are invalid.
        ScanError: If a directory cannot be listed for a reason other than access denial
            (or for access denial under PermissionAction.RAISE). No partial tree is returned.

    Example:
        >>> root = build_tree("/r", {"extensions": r"^\\.tc$"})  # doctest: +SKIP
        >>> [child.name for child in root.children]  # doctest: +SKIP
        ['b.tc', 'sub']
    """
    if not isinstance(config, ScanConfig):
        config = ScanConfig.from_options(config)

    result = _visit(os.fspath(path), config, on_file)
    if not isinstance(result, _OpenDirectory):
        return result

    stack = [result]
    while True:
        current = stack[-1]
        child_name = next(current.entries, None)
        if child_name is not None:
            child = _visit(os.path.join(current.raw_path, child_name), config, on_file)
            if isinstance(child, _OpenDirectory):
                stack.append(child)
            elif child is not None:
                current.children.append(child)
            continue

        stack.pop()
        node = _close(current, config, on_directory)
        if not stack:
            return node
        stack[-1].children.append(node)
