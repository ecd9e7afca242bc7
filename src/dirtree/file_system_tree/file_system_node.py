"""Node representation for file system elements in the tree."""

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional

from anytree import NodeMixin

from dirtree.types import NodeKind


class FileSystemNode(NodeMixin):  # type: ignore
    """Node class representing a file or directory admitted into a scanned tree.

    Mixes in anytree.NodeMixin for parent/child bookkeeping, so anytree's iterators and
    renderers work on a scanned tree. Nodes are created bottom-up: a directory node adopts
    its already-built children when it is constructed and nothing is attached or detached
    afterwards. The entry fields are read-only properties.

    anytree's own ``path`` (tuple of ancestors) and ``size`` (node count) properties are
    replaced by the filesystem path and the byte size; use ``ancestors`` and
    ``len(descendants)`` for the anytree notions. ``anytree.Walker`` relies on the tuple
    ``path`` and is not supported.

    Attributes:
        path (str): Path of the entry, normalized when the scan asked for it.
        name (str): Base name of the entry.
        kind (NodeKind): FILE or DIRECTORY.
        size (int): File size in bytes, or the total size of a directory's subtree.
        extension (Optional[str]): Lowercase extension with leading dot ("" if none) for
            files, None for directories.
        extra_attributes (Mapping[str, Any]): Read-only view of the requested metadata fields.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.NodeMixin).

    Example:
        >>> leaf = FileSystemNode("/r/sub/c.txt", "c.txt", NodeKind.FILE, size=2, extension=".txt")
        >>> sub = FileSystemNode("/r/sub", "sub", NodeKind.DIRECTORY, size=2, children=[leaf])
        >>> leaf.parent is sub
        True
        >>> sub.is_dir, leaf.is_file
        (True, True)
    """

    def __init__(
        self,
        path: str,
        name: str,
        kind: NodeKind,
        size: int = 0,
        extension: Optional[str] = None,
        extra_attributes: Optional[Mapping[str, Any]] = None,
        children: Optional[Iterable["FileSystemNode"]] = None,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            path: Path of the entry.
            name: Base name of the entry.
            kind: Whether the entry is a file or a directory.
            size: Size in bytes. Defaults to 0.
            extension: File extension; only meaningful for files. Defaults to None.
            extra_attributes: Projected metadata fields. Defaults to an empty mapping.
            children: Child nodes of a directory, in listing order. Defaults to none.
        """
        super().__init__()
        self._fs_path = path
        self._name = name
        self._kind = kind
        self._size = size
        self._extension = extension
        self._extra_attributes: Mapping[str, Any] = MappingProxyType(dict(extra_attributes or {}))
        if children:
            self.children = list(children)

    @property
    def path(self) -> str:  # type: ignore[override]
        return self._fs_path

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> NodeKind:
        return self._kind

    @property
    def size(self) -> int:  # type: ignore[override]
        return self._size

    @property
    def extension(self) -> Optional[str]:
        return self._extension

    @property
    def extra_attributes(self) -> Mapping[str, Any]:
        return self._extra_attributes

    @property
    def is_dir(self) -> bool:
        return self._kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self._kind is NodeKind.FILE

    @property
    def ancestors(self) -> tuple:
        """All parent nodes, from the root down to the direct parent."""
        return tuple(reversed(list(self.iter_path_reverse())))[:-1]

    # Aliases expected by tree-view widgets
    @property
    def title(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        return self._fs_path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self._fs_path!r}, kind={self._kind.value}, size={self._size})"
