"""Simple ignore patterns matched against entry names.

Two pattern forms are understood:

- ``*.ext`` matches any entry whose name ends in ``.ext``, directory or not.
- Anything else matches an entry whose name equals the pattern, or a relative path
  that has the pattern as its first segment (``build`` matches ``build`` and
  ``build/out.txt``).
"""

from typing import Iterable, List

from dir2tree.file_system_tree.directory_entry import DirectoryEntry

from .base_rules import BaseIgnoreRules
from .composite_rules import CompositeIgnoreRules

EXTENSION_PREFIX = "*."


class ExtensionMatchRule(BaseIgnoreRules):
    """Ignore entries whose name ends with a given extension.

    Attributes:
        pattern (str): The original ``*.ext`` pattern.
        suffix (str): The suffix being matched, including the leading dot.

    Example:
        >>> rule = ExtensionMatchRule("*.log")
        >>> rule.matches("server.log")
        True
        >>> rule.matches("log")
        False
    """

    def __init__(self, pattern: str) -> None:
        if not pattern.startswith(EXTENSION_PREFIX):
            raise ValueError(f"Extension patterns must start with '{EXTENSION_PREFIX}': {pattern!r}")
        self.pattern = pattern
        self.suffix = pattern[1:]

    def matches(self, name: str) -> bool:
        return name.endswith(self.suffix)

    def exclude(self, entry: DirectoryEntry) -> bool:
        return self.matches(entry.name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.pattern!r})"


class NameOrPathRootMatchRule(BaseIgnoreRules):
    """Ignore entries named exactly like the pattern.

    The pattern also matches any path rooted at it (``pattern/...``), so a rule for
    ``node_modules`` covers both the directory and everything under it.

    Example:
        >>> rule = NameOrPathRootMatchRule("node_modules")
        >>> rule.matches("node_modules")
        True
        >>> rule.matches("node_modules/left-pad/index.js")
        True
        >>> rule.matches("node_modules_backup")
        False
    """

    def __init__(self, pattern: str) -> None:
        if not pattern:
            raise ValueError("Name patterns must not be empty")
        self.pattern = pattern
        self._root_prefix = pattern + "/"

    def matches(self, name: str) -> bool:
        return name == self.pattern or name.startswith(self._root_prefix)

    def exclude(self, entry: DirectoryEntry) -> bool:
        return self.matches(entry.name)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.pattern!r})"


def parse_ignore_pattern(pattern: str) -> BaseIgnoreRules:
    """Create the rule variant matching a single pattern string.

    Example:
        >>> parse_ignore_pattern("*.pyc")
        ExtensionMatchRule('*.pyc')
        >>> parse_ignore_pattern("dist")
        NameOrPathRootMatchRule('dist')
    """
    if pattern.startswith(EXTENSION_PREFIX):
        return ExtensionMatchRule(pattern)
    return NameOrPathRootMatchRule(pattern)


def build_ignore_rules(patterns: Iterable[str]) -> CompositeIgnoreRules:
    """Combine an ordered list of patterns into a single rule set.

    Blank patterns are skipped. An empty list yields a rule set that ignores nothing.

    Example:
        >>> from dir2tree.file_system_tree.directory_entry import DirectoryEntry
        >>> rules = build_ignore_rules(["node_modules", "*.log"])
        >>> rules.exclude(DirectoryEntry("debug.log", "logs/debug.log"))
        True
        >>> rules.exclude(DirectoryEntry("src", "src", is_dir=True))
        False
    """
    rules: List[BaseIgnoreRules] = [parse_ignore_pattern(pattern) for pattern in patterns if pattern]
    return CompositeIgnoreRules(rules)
