"""Scan configuration, normalized at the boundary before any traversal."""

import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from dirtree.exceptions import ConfigurationError
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.exclusion_rules.composite_rules import CompositeExclusionRules
from dirtree.exclusion_rules.extension_rules import ExtensionRule
from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
from dirtree.file_system_tree.attributes import validate_attribute_names
from dirtree.file_system_tree.permission_action import PermissionAction

# camelCase spellings accepted for compatibility with JavaScript-style option objects
_OPTION_ALIASES = {
    "normalizePath": "normalize_path",
    "permissionAction": "permission_action",
}
_OPTIONS = ("normalize_path", "exclude", "extensions", "attributes", "permission_action")


@dataclass(frozen=True)
class ScanConfig:
    """Validated options for a tree scan.

    Build one with ``ScanConfig.from_options`` (or pass a plain mapping to ``build_tree``),
    which accepts the loose forms users write: a single exclusion pattern or a list of them,
    regex strings or compiled patterns, attribute names in any iterable.

    Attributes:
        normalize_path (bool): Replace backslashes with forward slashes in node paths.
        exclusion_rules (Optional[CompositeExclusionRules]): Rules removing entries and their
            subtrees, or None when nothing is excluded.
        extension_rule (Optional[ExtensionRule]): Allow-list applied to file extensions.
        attributes (Tuple[str, ...]): Metadata fields copied onto every node.
        permission_action (PermissionAction): What to do with directories that cannot be
            listed because access is denied.

    Example:
        >>> config = ScanConfig.from_options({"exclude": r"/sub$", "attributes": ["mtime"]})
        >>> config.exclusion_rules.exclude("/r/sub")
        True
        >>> config.attributes
        ('mtime',)
    """

    normalize_path: bool = False
    exclusion_rules: Optional[CompositeExclusionRules] = None
    extension_rule: Optional[ExtensionRule] = None
    attributes: Tuple[str, ...] = field(default_factory=tuple)
    permission_action: PermissionAction = PermissionAction.IGNORE

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "ScanConfig":
        """Build a configuration from a mapping and/or keyword options.

        Recognized options: normalize_path (alias normalizePath), exclude, extensions,
        attributes, permission_action (alias permissionAction). Keyword arguments override
        entries of the mapping.

        Raises:
            ConfigurationError: For unknown options, unknown attribute names, invalid regular
                expressions, or exclusion rules of an unsupported type.
        """
        merged = {}
        for key, value in {**dict(options or {}), **kwargs}.items():
            key = _OPTION_ALIASES.get(key, key)
            if key not in _OPTIONS:
                raise ConfigurationError(key, value, "Unknown scan option")
            merged[key] = value

        try:
            permission_action = PermissionAction(merged.get("permission_action", PermissionAction.IGNORE))
        except ValueError:
            raise ConfigurationError(
                "permission_action", merged["permission_action"], "Unknown permission action"
            ) from None

        return cls(
            normalize_path=bool(merged.get("normalize_path", False)),
            exclusion_rules=_build_exclusion_rules(merged.get("exclude")),
            extension_rule=_build_extension_rule(merged.get("extensions")),
            attributes=tuple(validate_attribute_names(merged.get("attributes") or ())),
            permission_action=permission_action,
        )


def _build_exclusion_rules(exclude: Any) -> Optional[CompositeExclusionRules]:
    if exclude is None:
        return None
    if isinstance(exclude, (str, re.Pattern, BaseExclusionRules)):
        exclude = [exclude]

    rules = []
    patterns = []
    try:
        for rule in exclude:
            if isinstance(rule, BaseExclusionRules):
                rules.append(rule)
            elif isinstance(rule, (str, re.Pattern)):
                patterns.append(rule)
            else:
                raise ConfigurationError("exclude", rule, "Expected a regular expression or exclusion rules")
        if patterns:
            rules.insert(0, RegexExclusionRules(patterns))
    except TypeError:
        raise ConfigurationError("exclude", exclude, "Expected a pattern or a sequence of patterns") from None
    except re.error as e:
        raise ConfigurationError("exclude", e.pattern, f"Invalid regular expression ({e.msg})") from e

    if not rules:
        return None
    composite = CompositeExclusionRules(rules)
    if not composite.has_rules():
        return None
    return composite


def _build_extension_rule(extensions: Any) -> Optional[ExtensionRule]:
    if extensions is None:
        return None
    try:
        return ExtensionRule(extensions)
    except TypeError:
        raise ConfigurationError("extensions", extensions, "Expected a single regular expression") from None
    except re.error as e:
        raise ConfigurationError("extensions", extensions, f"Invalid regular expression ({e.msg})") from e
