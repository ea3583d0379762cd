"""Generator options and parsing of user-supplied depth and ignore input.

The tree builder is configured by a single immutable GeneratorOptions object that is
passed by reference through the whole traversal. The helpers in this module turn the
free-form text a user types at a prompt or on the command line ("2", "",
"node_modules, .git, *.log") into validated option values.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

# Patterns offered when the user does not specify any
DEFAULT_IGNORE_PATTERNS: Tuple[str, ...] = ("node_modules", ".git")

# Hard limit on traversal depth when the caller asks for unlimited depth
DEFAULT_DEPTH_CEILING = 256

DEPTH_ERROR_MESSAGE = "Please enter a positive number or leave empty for unlimited depth"
PATTERN_ERROR_MESSAGE = "Use *.extension for file patterns (e.g., *.log)"


@dataclass(frozen=True)
class GeneratorOptions:
    """Immutable settings controlling tree generation.

    Attributes:
        max_depth: Maximum number of directory levels to expand, counted from the root's
            direct children (depth 0). None means unlimited.
        ignore_patterns: Ordered ignore patterns. ``*.ext`` patterns match by extension,
            anything else matches an exact entry name.
        depth_ceiling: Depth at which an unlimited walk is cut off anyway. Guards against
            symbolic link cycles, which are otherwise followed indefinitely.

    Example:
        >>> options = GeneratorOptions(max_depth=2, ignore_patterns=["node_modules", "*.log"])
        >>> options.ignore_patterns
        ('node_modules', '*.log')
        >>> options.effective_max_depth
        2
        >>> GeneratorOptions().is_unlimited
        True
    """

    max_depth: Optional[int] = None
    ignore_patterns: Tuple[str, ...] = ()
    depth_ceiling: int = DEFAULT_DEPTH_CEILING

    def __post_init__(self) -> None:
        if self.max_depth is not None and (
            isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 1
        ):
            raise ValueError(f"max_depth must be a positive integer or None, got {self.max_depth!r}")
        if isinstance(self.depth_ceiling, bool) or not isinstance(self.depth_ceiling, int) or self.depth_ceiling < 1:
            raise ValueError(f"depth_ceiling must be a positive integer, got {self.depth_ceiling!r}")
        if isinstance(self.ignore_patterns, str):
            raise TypeError("ignore_patterns must be a sequence of patterns, not a single string")
        # Accept any iterable but store a tuple so the options stay hashable and immutable
        object.__setattr__(self, "ignore_patterns", tuple(self.ignore_patterns))

    @property
    def is_unlimited(self) -> bool:
        """Whether the caller asked for unlimited depth."""
        return self.max_depth is None

    @property
    def effective_max_depth(self) -> int:
        """Depth limit actually applied during traversal."""
        return self.depth_ceiling if self.max_depth is None else self.max_depth

    @classmethod
    def from_strings(cls, depth_text: str, ignore_text: str) -> "GeneratorOptions":
        """Create options from raw user input.

        Args:
            depth_text: Maximum depth as typed by the user; empty for unlimited.
            ignore_text: Comma-separated ignore patterns.

        Returns:
            Validated GeneratorOptions.

        Raises:
            ValueError: If the depth is not a positive integer or a pattern uses an
                unsupported wildcard.

        Example:
            >>> GeneratorOptions.from_strings("", "node_modules, *.log,")
            GeneratorOptions(max_depth=None, ignore_patterns=('node_modules', '*.log'), depth_ceiling=256)
        """
        patterns = parse_ignore_patterns(ignore_text)
        validate_ignore_patterns(patterns)
        return cls(max_depth=parse_max_depth(depth_text), ignore_patterns=patterns)


def parse_max_depth(text: Optional[str]) -> Optional[int]:
    """Parse a maximum depth entered by the user.

    Args:
        text: The raw input. None, empty or blank means unlimited.

    Returns:
        The depth as a positive integer, or None for unlimited.

    Raises:
        ValueError: If the input is not a positive integer.

    Example:
        >>> parse_max_depth("3")
        3
        >>> parse_max_depth("") is None
        True
    """
    if text is None or not text.strip():
        return None
    try:
        depth = int(text.strip())
    except ValueError:
        raise ValueError(DEPTH_ERROR_MESSAGE) from None
    if depth < 1:
        raise ValueError(DEPTH_ERROR_MESSAGE)
    return depth


def parse_ignore_patterns(text: Optional[str]) -> Tuple[str, ...]:
    """Split comma-separated ignore patterns, dropping blanks.

    Example:
        >>> parse_ignore_patterns(" node_modules,.git,, *.log ")
        ('node_modules', '.git', '*.log')
    """
    if not text:
        return ()
    return tuple(pattern.strip() for pattern in text.split(",") if pattern.strip())


def validate_ignore_patterns(patterns: Iterable[str]) -> None:
    """Reject patterns using wildcards other than the ``*.ext`` form.

    Raises:
        ValueError: If a pattern contains ``*`` anywhere except as a leading ``*.``.
    """
    for pattern in patterns:
        if "*" in pattern and not (pattern.startswith("*.") and "*" not in pattern[1:]):
            raise ValueError(f"{PATTERN_ERROR_MESSAGE}: {pattern!r}")
