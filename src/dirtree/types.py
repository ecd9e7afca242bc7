from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeKind(str, Enum):
    """Enumeration of the entry kinds admitted into a scanned tree.

    Entries of any other kind (devices, FIFOs, sockets) never become nodes.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
    """

    FILE = "file"
    DIRECTORY = "directory"
