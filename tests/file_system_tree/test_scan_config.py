"""Unit tests for ScanConfig."""

import re

import pytest

from dirtree.exceptions import ConfigurationError
from dirtree.exclusion_rules.composite_rules import CompositeExclusionRules
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
from dirtree.file_system_tree.permission_action import PermissionAction
from dirtree.file_system_tree.scan_config import ScanConfig


def test_defaults():
    config = ScanConfig.from_options()

    assert config == ScanConfig()
    assert config.normalize_path is False
    assert config.exclusion_rules is None
    assert config.extension_rule is None
    assert config.attributes == ()
    assert config.permission_action is PermissionAction.IGNORE


def test_single_pattern_becomes_composite():
    config = ScanConfig.from_options({"exclude": r"/sub$"})

    assert isinstance(config.exclusion_rules, CompositeExclusionRules)
    assert len(config.exclusion_rules.rules) == 1
    assert isinstance(config.exclusion_rules.rules[0], RegexExclusionRules)
    assert config.exclusion_rules.exclude("/r/sub")
    assert not config.exclusion_rules.exclude("/r/sub/c.txt")


def test_mixed_exclusion_rules():
    gitignore = GitIgnoreExclusionRules()
    gitignore.add_rule("*.pyc")
    config = ScanConfig.from_options(exclude=[gitignore, re.compile("node_modules"), r"\.git$"])

    rules = config.exclusion_rules.rules
    assert isinstance(rules[0], RegexExclusionRules)
    assert len(rules[0].patterns) == 2
    assert rules[1] is gitignore
    assert config.exclusion_rules.exclude("app/cache.pyc")
    assert config.exclusion_rules.exclude("/repo/.git")
    assert config.exclusion_rules.exclude("/repo/node_modules/x.js")


def test_empty_exclusion_list_means_no_rules():
    assert ScanConfig.from_options(exclude=[]).exclusion_rules is None


def test_exclusion_rules_without_patterns_mean_no_rules():
    assert ScanConfig.from_options(exclude=RegexExclusionRules()).exclusion_rules is None
    assert ScanConfig.from_options(exclude=[GitIgnoreExclusionRules(), RegexExclusionRules()]).exclusion_rules is None


def test_camel_case_aliases():
    config = ScanConfig.from_options({"normalizePath": True, "permissionAction": "raise"})

    assert config.normalize_path is True
    assert config.permission_action is PermissionAction.RAISE


def test_keyword_arguments_override_mapping():
    config = ScanConfig.from_options({"normalize_path": True}, normalize_path=False)

    assert config.normalize_path is False


def test_extension_rule():
    config = ScanConfig.from_options(extensions=r"^\.(txt|md)$")

    assert config.extension_rule.admits(".md")
    assert not config.extension_rule.admits(".py")


def test_attributes_kept_in_order():
    config = ScanConfig.from_options(attributes=["mtime", "mode", "uid"])

    assert config.attributes == ("mtime", "mode", "uid")


@pytest.mark.parametrize(
    "options,option_name",
    [
        ({"colour": True}, "colour"),
        ({"attributes": ["mtime", "colour"]}, "attributes"),
        ({"attributes": "mtime"}, "attributes"),
        ({"exclude": "(unclosed"}, "exclude"),
        ({"exclude": [42]}, "exclude"),
        ({"exclude": 42}, "exclude"),
        ({"extensions": "[a-"}, "extensions"),
        ({"extensions": [r"\.txt"]}, "extensions"),
        ({"permission_action": "explode"}, "permission_action"),
    ],
)
def test_invalid_options(options, option_name):
    with pytest.raises(ConfigurationError) as exc_info:
        ScanConfig.from_options(options)

    assert exc_info.value.option == option_name


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        ScanConfig.from_options({"unknown": 1})


def test_config_is_frozen():
    config = ScanConfig()

    with pytest.raises(AttributeError):
        config.normalize_path = True
