"""Lazily built, cached view of a scanned directory tree.

This module provides the FileSystemTree class, which wraps build_tree with caching,
counting, iteration and a text representation of the result.
"""

from typing import Iterator, Optional, Tuple

from anytree import PreOrderIter, RenderTree

from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.file_system_tree.scan_config import ScanConfig
from dirtree.file_system_tree.tree_builder import ConfigType, NodeCallback, build_tree
from dirtree.types import PathType


class FileSystemTree:
    """A scanned tree of a directory structure, built on first access.

    The tree is built lazily on first access and can be refreshed to reflect filesystem
    changes. Configuration is validated up front, when the FileSystemTree is created.

    Attributes:
        root_path (PathType): The path that is scanned.
        config (ScanConfig): The validated scan configuration.
        on_file (Optional[NodeCallback]): Callback passed through to build_tree.
        on_directory (Optional[NodeCallback]): Callback passed through to build_tree.

    Example:
        >>> tree = FileSystemTree("/r", {"exclude": r"/sub$"})  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        r/ (8 B)
        ├── a.txt (3 B)
        └── b.tc (5 B)
    """

    def __init__(
        self,
        root_path: PathType,
        config: ConfigType = None,
        on_file: Optional[NodeCallback] = None,
        on_directory: Optional[NodeCallback] = None,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to scan. Can be any path-like object.
            config: A ScanConfig, a mapping of scan options, or None.
            on_file: Called for every admitted file while the tree is built.
            on_directory: Called for every admitted directory while the tree is built.

        Raises:
            ConfigurationError: If the options are invalid.
        """
        self.root_path = root_path
        self.config = config if isinstance(config, ScanConfig) else ScanConfig.from_options(config)
        self.on_file = on_file
        self.on_directory = on_directory
        self._tree: Optional[FileSystemNode] = None
        self._built = False
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> Optional[FileSystemNode]:
        """Get the root node of the scanned tree, building it on first access.

        Returns:
            The root node, or None if the root is excluded, unreadable or unsupported.

        Raises:
            ScanError: If the scan is aborted by a fatal listing error.
        """
        if not self._built:
            self._build_tree()
        return self._tree

    def _build_tree(self) -> None:
        self._tree = build_tree(self.root_path, self.config, self.on_file, self.on_directory)
        self._built = True
        self._count_files_and_directories()

    def _count_files_and_directories(self) -> None:
        """Count files and directories in the current tree, excluding the root directory."""
        self._file_count = 0
        self._directory_count = 0
        if self._tree is None:
            return

        for node in PreOrderIter(self._tree):
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1
        if self._tree.is_dir:
            self._directory_count -= 1

    def get_file_count(self) -> int:
        """Get the total number of files in the tree."""
        if not self._built:
            self._build_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the total number of directories in the tree (excluding root)."""
        if not self._built:
            self._build_tree()
        return self._directory_count

    def get_total_size(self) -> int:
        """Get the size in bytes of everything admitted into the tree."""
        tree = self.get_tree()
        return tree.size if tree is not None else 0

    def iterate_files(self) -> Iterator[Tuple[str, FileSystemNode]]:
        """Iterate over all files in the tree in depth-first order.

        Yields:
            Pairs of (path, node) for each file.
        """
        tree = self.get_tree()
        if tree is None:
            return
        for node in PreOrderIter(tree, filter_=lambda n: n.is_file):
            yield (node.path, node)

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a tree representation of the scan one line at a time.

        Directories carry a trailing slash; every entry is followed by its size in bytes.
        Children appear in the order they were listed.

        Yields:
            Lines of the tree representation, including the connecting lines.
        """
        tree = self.get_tree()
        if tree is None:
            return
        for prefix, _, node in RenderTree(tree):
            suffix = "/" if node.is_dir else ""
            yield f"{prefix}{node.name}{suffix} ({node.size} B)"

    def get_tree_representation(self) -> str:
        """Get a complete string representation of the scanned tree."""
        return "\n".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Discard the cached tree and rescan, to reflect the current filesystem state."""
        self._tree = None
        self._built = False
        self._file_count = 0
        self._directory_count = 0
        self._build_tree()
