"""Ignore rules for filtering entries out of the rendered tree."""

from .base_rules import BaseIgnoreRules
from .composite_rules import CompositeIgnoreRules
from .git_rules import GitIgnoreRules
from .pattern_rules import ExtensionMatchRule, NameOrPathRootMatchRule, build_ignore_rules, parse_ignore_pattern

__all__ = [
    "BaseIgnoreRules",
    "CompositeIgnoreRules",
    "ExtensionMatchRule",
    "GitIgnoreRules",
    "NameOrPathRootMatchRule",
    "build_ignore_rules",
    "parse_ignore_pattern",
]
