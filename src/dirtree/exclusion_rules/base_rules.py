from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for path exclusion rules.

    Implementations decide, from the path string alone, whether an entry should be left out of
    a scanned tree. An excluded directory is never listed, so its whole subtree disappears with
    it. Rules must not access the filesystem.

    Example:
        >>> from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
        >>> rules = RegexExclusionRules(r"node_modules")
        >>> rules.exclude("/project/node_modules")
        True
        >>> rules.exclude("/project/src")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The path of the entry, exactly as it will appear on the node (already
                normalized when path normalization is enabled).

        Returns:
            bool: True if the path should be excluded, False if it should be included.

        Example:
            >>> class TmpExclusionRules(BaseExclusionRules):
            ...     def exclude(self, path: str) -> bool:
            ...         return path.endswith('.tmp')
            >>> rules = TmpExclusionRules()
            >>> rules.exclude("build/temp.tmp")
            True
            >>> rules.exclude("main.py")
            False
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Pattern-based subclasses override this. Rule types that don't support individual rule
        addition use the default implementation which raises NotImplementedError.

        Args:
            rule (str): The exclusion rule to add. The format depends on the implementation
                (a regular expression, a gitignore pattern like "*.pyc", ...).

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
