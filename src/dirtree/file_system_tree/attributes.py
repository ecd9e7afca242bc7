"""Projection of raw filesystem metadata onto node attributes."""

import os
from typing import Any, Dict, Iterable, List, Sequence

from dirtree.exceptions import ConfigurationError

# Attribute name -> os.stat_result field
STAT_ATTRIBUTES: Dict[str, str] = {
    "dev": "st_dev",
    "ino": "st_ino",
    "mode": "st_mode",
    "nlink": "st_nlink",
    "uid": "st_uid",
    "gid": "st_gid",
    "rdev": "st_rdev",
    "size": "st_size",
    "blksize": "st_blksize",
    "blocks": "st_blocks",
    "atime": "st_atime",
    "mtime": "st_mtime",
    "ctime": "st_ctime",
    "atime_ns": "st_atime_ns",
    "mtime_ns": "st_mtime_ns",
    "ctime_ns": "st_ctime_ns",
    "birthtime": "st_birthtime",
}


def validate_attribute_names(names: Iterable[str]) -> List[str]:
    """Check requested attribute names against the known metadata fields.

    Args:
        names: Attribute names, in the order they should appear on nodes.

    Returns:
        The names as a list.

    Raises:
        ConfigurationError: If a name is not a known metadata field.

    Example:
        >>> validate_attribute_names(["mtime", "mode"])
        ['mtime', 'mode']
        >>> validate_attribute_names(["colour"])
        Traceback (most recent call last):
            ...
        dirtree.exceptions.ConfigurationError: Invalid value for 'attributes': Unknown metadata attribute: 'colour'
    """
    if isinstance(names, str):
        raise ConfigurationError("attributes", names, "Expected a sequence of attribute names, got a string")
    validated = []
    for name in names:
        if name not in STAT_ATTRIBUTES:
            raise ConfigurationError("attributes", name, "Unknown metadata attribute")
        validated.append(name)
    return validated


def project_attributes(stat_result: os.stat_result, names: Sequence[str]) -> Dict[str, Any]:
    """Copy the requested metadata fields out of a stat result.

    Names must already have been validated. Fields the platform does not report (st_birthtime
    on Linux, st_blocks on Windows) come out as None.
    """
    return {name: getattr(stat_result, STAT_ATTRIBUTES[name], None) for name in names}
