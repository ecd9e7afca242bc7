"""Export a scanned tree to plain data for consumers such as tree-view widgets."""

import json
from typing import Any, Dict

from anytree import PostOrderIter

from dirtree.file_system_tree.file_system_node import FileSystemNode


def node_to_record(node: FileSystemNode) -> Dict[str, Any]:
    """Flatten one node's fields into a dict, without its children.

    Requested metadata attributes are merged in under their own names, next to path, name,
    type, size and (for files) extension.

    Example:
        >>> from dirtree.types import NodeKind
        >>> node = FileSystemNode("/r/a.txt", "a.txt", NodeKind.FILE, size=3, extension=".txt")
        >>> node_to_record(node)
        {'path': '/r/a.txt', 'name': 'a.txt', 'type': 'file', 'size': 3, 'extension': '.txt'}
    """
    record: Dict[str, Any] = {
        "path": node.path,
        "name": node.name,
        "type": node.kind.value,
        "size": node.size,
    }
    if node.is_file:
        record["extension"] = node.extension
    record.update(node.extra_attributes)
    return record


def tree_to_dict(root: FileSystemNode) -> Dict[str, Any]:
    """Convert a tree to nested dicts; directories carry a "children" list.

    Built bottom-up with a post-order walk, so depth is not limited by recursion.
    """
    records: Dict[int, Dict[str, Any]] = {}
    for node in PostOrderIter(root):
        record = node_to_record(node)
        if node.is_dir:
            record["children"] = [records.pop(id(child)) for child in node.children]
        records[id(node)] = record
    return records[id(root)]


def tree_to_json(root: FileSystemNode, **kwargs: Any) -> str:
    """Serialize a tree to JSON.

    Keyword arguments are passed to json.dumps. Attribute values that JSON cannot
    represent are converted with str().
    """
    kwargs.setdefault("default", str)
    return json.dumps(tree_to_dict(root), **kwargs)
