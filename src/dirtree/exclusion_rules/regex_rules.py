"""Exclusion rules built from regular expressions."""

import re
from typing import List, Pattern, Sequence, Union

from .base_rules import BaseExclusionRules

RegexType = Union[str, Pattern[str]]


def compile_pattern(pattern: RegexType) -> Pattern[str]:
    """Compile a pattern, passing already-compiled patterns through.

    Raises:
        re.error: If the pattern is not a valid regular expression.
        TypeError: If the pattern is neither a string nor a compiled pattern.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        return re.compile(pattern)
    raise TypeError(f"Expected a regular expression, got {type(pattern)}")


class RegexExclusionRules(BaseExclusionRules):
    """Exclusion rules where each rule is a regular expression over the full path.

    A path is excluded when any pattern matches anywhere in it (``re.search`` semantics), so
    ``r"\\.git"`` excludes ``/repo/.git`` and everything below it.

    Attributes:
        patterns (List[Pattern[str]]): The compiled patterns, in the order they were added.

    Example:
        >>> rules = RegexExclusionRules([r"/sub$", r"\\.bak$"])
        >>> rules.exclude("/r/sub")
        True
        >>> rules.exclude("/r/notes.bak")
        True
        >>> rules.exclude("/r/a.txt")
        False
    """

    def __init__(self, patterns: Union[RegexType, Sequence[RegexType]] = ()):
        if isinstance(patterns, (str, re.Pattern)):
            patterns = [patterns]
        self.patterns: List[Pattern[str]] = [compile_pattern(p) for p in patterns]

    def exclude(self, path: str) -> bool:
        return any(pattern.search(path) for pattern in self.patterns)

    def add_rule(self, rule: str) -> None:
        """Add one regular expression.

        Example:
            >>> rules = RegexExclusionRules()
            >>> rules.add_rule(r"__pycache__")
            >>> rules.exclude("src/__pycache__")
            True
        """
        self.patterns.append(compile_pattern(rule))

    def has_rules(self) -> bool:
        return bool(self.patterns)
