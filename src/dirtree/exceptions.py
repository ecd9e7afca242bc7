from typing import Any, Optional


class ConfigurationError(ValueError):
    """
    Exception raised when scan options cannot be turned into a valid configuration.

    This covers unknown option names, unknown metadata attribute names, exclusion rules of an
    unsupported type, and regular expressions that fail to compile. It is raised eagerly, before
    any filesystem access takes place.

    Attributes:
        option (str): Name of the offending option.
        value (Any): The value that was rejected.

    Example:
        >>> error = ConfigurationError("attributes", "colour", "Unknown metadata attribute")
        >>> str(error)
        "Invalid value for 'attributes': Unknown metadata attribute: 'colour'"
        >>> error.value
        'colour'
    """

    def __init__(self, option: str, value: Any, reason: str) -> None:
        """
        Initialize the exception with the rejected option and value.

        Args:
            option (str): Name of the option that failed validation.
            value (Any): The rejected value.
            reason (str): Short description of why the value was rejected.
        """
        self.option = option
        self.value = value
        super().__init__(f"Invalid value for {option!r}: {reason}: {value!r}")


class ScanError(Exception):
    """
    Exception raised when a directory cannot be listed for a reason other than access denial.

    A scan that raises this error produces no tree at all. The underlying ``OSError`` is kept
    both as the ``cause`` attribute and as ``__cause__``.

    Attributes:
        path (str): Path of the directory whose listing failed.
        cause (Optional[OSError]): The error reported by the operating system.

    Example:
        >>> error = ScanError("/data/broken", OSError(5, "Input/output error"))
        >>> str(error)
        'Scan aborted at /data/broken: [Errno 5] Input/output error'
    """

    def __init__(self, path: str, cause: Optional[OSError] = None) -> None:
        """
        Initialize the exception with the failing directory.

        Args:
            path (str): Directory whose listing failed.
            cause (Optional[OSError]): The original operating system error, if any.
        """
        self.path = path
        self.cause = cause
        message = f"Scan aborted at {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
