"""Implementation of ignore rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from dir2tree.file_system_tree.directory_entry import DirectoryEntry
from dir2tree.types import PathType

from .base_rules import BaseIgnoreRules


class GitIgnoreRules(BaseIgnoreRules):
    """Ignore rules using .gitignore pattern syntax.

    Uses the pathspec library to match entries the same way Git does. Unlike the simple
    name patterns, these rules are matched against the entry's path relative to the
    tree root, and directories are matched with a trailing slash so that patterns such
    as ``build/`` only hit directories.

    The rules support all standard .gitignore syntax including globs, directory-only
    patterns, negation (``!``), ``**`` and comments. Multiple files can be loaded; later
    rules override earlier ones.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> from dir2tree.file_system_tree.directory_entry import DirectoryEntry
        >>> rules = GitIgnoreRules()
        >>> rules.add_rule("build/")
        >>> rules.add_rule("*.py[co]")
        >>> rules.exclude(DirectoryEntry("build", "build", is_dir=True))
        True
        >>> rules.exclude(DirectoryEntry("build", "build", is_dir=False))
        False
        >>> rules.exclude(DirectoryEntry("app.pyc", "src/app.pyc"))
        True
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, entry: DirectoryEntry) -> bool:
        return self.spec.match_file(entry.match_path)

    def has_rules(self) -> bool:
        # Blank lines and comments compile to patterns with include=None
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

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

            with open(path, "r", encoding="utf-8") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern, e.g. ``"*.pyc"`` or ``"!keep.log"``."""
        self._lines.append(rule)
        self._compile()

    def _compile(self) -> None:
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
