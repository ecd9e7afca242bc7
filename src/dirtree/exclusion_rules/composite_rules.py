"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules determines it should be excluded.
    The scan configuration always wraps the user's exclusion rules in one of these, so the
    tree builder consults a single object however the rules were supplied.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
        >>> from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> gitignore = GitIgnoreExclusionRules()
        >>> gitignore.add_rule("*.pyc")
        >>> composite = CompositeExclusionRules([RegexExclusionRules(r"/sub$"), gitignore])
        >>> composite.exclude("/r/sub")
        True
        >>> composite.exclude("/r/cache.pyc")
        True
        >>> composite.exclude("/r/a.txt")
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine. Each rule must implement
                  the BaseExclusionRules interface.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Uses short-circuit evaluation: stops checking as soon as any rule
        returns True for exclusion.
        """
        return any(rule.exclude(path) for rule in self.rules)

    def has_rules(self) -> bool:
        """Check if any constituent rule has rules configured.

        Rules without a has_rules() method are assumed to have rules.
        """
        for rule in self.rules:
            if hasattr(rule, "has_rules") and callable(rule.has_rules):
                if rule.has_rules():
                    return True
            else:
                return True
        return False
