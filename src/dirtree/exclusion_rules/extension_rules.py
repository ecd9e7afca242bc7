"""File extension allow-list rule."""

from typing import Pattern

from .regex_rules import RegexType, compile_pattern


class ExtensionRule:
    """Admit only files whose lowercase extension matches a regular expression.

    The extension includes its leading dot, or is the empty string when the file has none.
    The pattern is applied with ``re.search`` semantics, so anchor it (``r"^\\.tc$"``) for an
    exact match. Directories are never tested against this rule.

    Attributes:
        pattern (Pattern[str]): The compiled extension pattern.

    Example:
        >>> rule = ExtensionRule(r"\\.(txt|md)$")
        >>> rule.admits(".txt")
        True
        >>> rule.admits(".py")
        False
        >>> rule.admits("")
        False
    """

    def __init__(self, pattern: RegexType):
        self.pattern: Pattern[str] = compile_pattern(pattern)

    def admits(self, extension: str) -> bool:
        return self.pattern.search(extension) is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.pattern.pattern!r})"
