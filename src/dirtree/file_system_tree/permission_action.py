"""Permission action enum for handling permission errors during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed because access is denied.

    Values:
        IGNORE: Drop the unreadable directory from the tree and keep scanning (default behavior)
        RAISE: Abort the whole scan with a ScanError
    """

    IGNORE = "ignore"
    RAISE = "raise"
