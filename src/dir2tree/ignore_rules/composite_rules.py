"""Composite ignore rules for combining multiple rule types."""

from typing import List, Optional, Sequence

from dir2tree.file_system_tree.directory_entry import DirectoryEntry

from .base_rules import BaseIgnoreRules


class CompositeIgnoreRules(BaseIgnoreRules):
    """Composite ignore rules that combine multiple rule types.

    An entry is ignored if ANY of the constituent rules ignores it. This lets the
    simple name and extension patterns given on the command line be combined with
    rules loaded from .gitignore-style files.

    Attributes:
        rules (List[BaseIgnoreRules]): List of constituent ignore rules.

    Example:
        >>> from dir2tree.file_system_tree.directory_entry import DirectoryEntry
        >>> from dir2tree.ignore_rules.pattern_rules import ExtensionMatchRule, NameOrPathRootMatchRule
        >>> composite = CompositeIgnoreRules([ExtensionMatchRule("*.log"), NameOrPathRootMatchRule(".git")])
        >>> composite.exclude(DirectoryEntry(".git", ".git", is_dir=True))
        True
        >>> composite.exclude(DirectoryEntry("app.py", "app.py"))
        False
        >>> CompositeIgnoreRules().has_rules()
        False
    """

    def __init__(self, rules: Optional[Sequence[BaseIgnoreRules]] = None):
        """Initialize composite ignore rules.

        Args:
            rules: Sequence of ignore rules to combine. May be empty, in which case
                nothing is ignored.

        Raises:
            TypeError: If any rule doesn't implement BaseIgnoreRules.
        """
        rules = rules or []
        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseIgnoreRules):
                raise TypeError(f"Rule at index {i} must implement BaseIgnoreRules, got {type(rule)}")

        self.rules: List[BaseIgnoreRules] = list(rules)

    def exclude(self, entry: DirectoryEntry) -> bool:
        """Check if an entry is ignored by any constituent rule.

        Uses short-circuit evaluation: stops checking as soon as any rule matches.
        """
        return any(rule.exclude(entry) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)

    def add_rule_object(self, rule: BaseIgnoreRules) -> None:
        """Add another ignore rule object to this composite.

        Raises:
            TypeError: If rule doesn't implement BaseIgnoreRules.
        """
        if not isinstance(rule, BaseIgnoreRules):
            raise TypeError(f"Rule must implement BaseIgnoreRules, got {type(rule)}")
        self.rules.append(rule)
