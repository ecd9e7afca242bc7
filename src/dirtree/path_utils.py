"""Path string helpers used by the tree builder and its consumers.

None of these functions touch the filesystem.
"""

import os

from dirtree.types import PathType


def normalize_path(path: str, enabled: bool = True) -> str:
    """Replace Windows-style backslashes with forward slashes.

    Args:
        path: Path string to normalize.
        enabled: When False, the path is returned unchanged.

    Returns:
        The normalized path.

    Example:
        >>> normalize_path("C:\\\\data\\\\photos")
        'C:/data/photos'
        >>> normalize_path("C:\\\\data", enabled=False)
        'C:\\\\data'
    """
    if not enabled:
        return path
    return path.replace("\\", "/")


def get_extension(path: PathType) -> str:
    """Return the lowercase extension of a path, including the leading dot.

    Example:
        >>> get_extension("/r/IMAGE.TC")
        '.tc'
        >>> get_extension("/r/Makefile")
        ''
    """
    return os.path.splitext(os.fspath(path))[1].lower()


def is_file(path: PathType) -> bool:
    """Guess whether a bare path denotes a file, based only on its extension.

    This is a best-effort heuristic: extensionless files (``Makefile``) are reported as
    directories, and directories with a dotted name (``conf.d``) as files. Dotfiles such as
    ``.bashrc`` have no extension and are therefore not considered files.

    Example:
        >>> is_file("docs/readme.md")
        True
        >>> is_file("docs")
        False
    """
    return bool(os.path.splitext(os.fspath(path))[1])
