"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from dirtree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class implements the BaseExclusionRules interface using standard .gitignore pattern
    matching rules, through the pathspec library, so paths are matched the same way Git
    matches them.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    Paths handed to exclude() by the tree builder are the node paths, which usually start with
    the scanned root. When base_path is given, that prefix is stripped first so anchored
    patterns such as "/build" behave as they would inside a repository rooted at base_path.

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.
        base_path (Optional[str]): Prefix removed from paths before matching.

    Example:
        >>> rules = GitIgnoreExclusionRules(base_path="/project")
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("/build")
        >>> rules.exclude("/project/logs/app.log")
        True
        >>> rules.exclude("/project/build")
        True
        >>> rules.exclude("/project/src/build.py")
        False
    """

    def __init__(
        self,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        base_path: Optional[PathType] = None,
    ):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.
            base_path: Directory the patterns are relative to. Defaults to None, in which case
                paths are matched exactly as given.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)
        self.base_path = str(base_path).replace("\\", "/").rstrip("/") if base_path is not None else None

        if rules_files is not None:
            self.load_rules(rules_files)

    def _relative(self, path: str) -> str:
        path = path.replace("\\", "/")
        if self.base_path is None:
            return path
        if path == self.base_path:
            return ""
        prefix = self.base_path + "/"
        if path.startswith(prefix):
            return path[len(prefix) :]
        return path

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded based on the loaded .gitignore patterns.

        The scan root itself (an empty relative path) is never excluded by these rules.

        Args:
            path: The path to check.

        Returns:
            bool: True if the path matches the loaded patterns after negations are applied.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("*.pyc")
            >>> rules.add_rule("!important.pyc")
            >>> rules.exclude("test.pyc")
            True
            >>> rules.exclude("important.pyc")
            False
        """
        relative = self._relative(path)
        if not relative:
            return False
        return bool(self.spec.match_file(relative))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Patterns are processed in the order they are added, with later patterns potentially
        overriding earlier ones (especially in the case of negation with !).

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        Args:
            rule: A single .gitignore pattern to add (e.g., "*.pyc", "node_modules/",
                 "!important.txt").
        """
        self._lines.append(rule)
        self.spec = GitIgnoreSpec.from_lines(self._lines)

    def has_rules(self) -> bool:
        return any(line.strip() and not line.lstrip().startswith("#") for line in self._lines)
