"""Rules for filtering files and directories out of a scanned tree."""

from .base_rules import BaseExclusionRules
from .composite_rules import CompositeExclusionRules
from .extension_rules import ExtensionRule
from .git_rules import GitIgnoreExclusionRules
from .regex_rules import RegexExclusionRules

__all__ = [
    "BaseExclusionRules",
    "CompositeExclusionRules",
    "ExtensionRule",
    "GitIgnoreExclusionRules",
    "RegexExclusionRules",
]
