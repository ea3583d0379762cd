"""Markdown document wrapping a rendered tree.

The document starts with a small metadata header (folder, generation time, path, depth
and ignore patterns) followed by the tree inside a fenced code block:

    # File Tree for: proj
    Generated on: Fri Oct 16 14:03:00 2026
    Path: proj
    Max Depth: Unlimited
    Ignored Patterns: node_modules, .git

    ```
    ├── src/
    │   └── a.ts
    └── readme.md
    ```
"""

from datetime import datetime
from typing import Callable, Optional

from dir2tree.options import GeneratorOptions

FENCE = "```"
UNLIMITED_LABEL = "Unlimited"
NO_PATTERNS_LABEL = "None"


class DocumentFormatter:
    """Composes the Markdown document for a rendered tree.

    Formatting is pure string composition. The only non-deterministic part is the
    generation timestamp, which comes from an injectable clock.

    Attributes:
        clock: Callable returning the current time.
        timestamp_format: strftime format for the timestamp. The default ``%c`` uses
            the date and time representation of the LC_TIME locale in effect. The CLI
            switches LC_TIME to the user's locale before formatting.

    Example:
        >>> from datetime import datetime
        >>> formatter = DocumentFormatter(clock=lambda: datetime(2026, 1, 2, 3, 4, 5),
        ...                               timestamp_format="%Y-%m-%d %H:%M:%S")
        >>> print(formatter.format("└── a.txt\\n", "proj", GeneratorOptions(max_depth=2)), end="")
        # File Tree for: proj
        Generated on: 2026-01-02 03:04:05
        Path: proj
        Max Depth: 2
        Ignored Patterns: None
        <BLANKLINE>
        ```
        └── a.txt
        ```
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now, timestamp_format: str = "%c") -> None:
        self.clock = clock
        self.timestamp_format = timestamp_format

    def format_header(self, folder_name: str, options: GeneratorOptions, path: Optional[str] = None) -> str:
        """Format the metadata header, ending with a blank line."""
        max_depth = UNLIMITED_LABEL if options.is_unlimited else str(options.max_depth)
        ignored = ", ".join(options.ignore_patterns) or NO_PATTERNS_LABEL
        return (
            f"# File Tree for: {folder_name}\n"
            f"Generated on: {self.clock().strftime(self.timestamp_format)}\n"
            f"Path: {path if path is not None else folder_name}\n"
            f"Max Depth: {max_depth}\n"
            f"Ignored Patterns: {ignored}\n"
            "\n"
        )

    def format(
        self, tree_text: str, folder_name: str, options: GeneratorOptions, path: Optional[str] = None
    ) -> str:
        """Wrap tree text in the document header and a fenced block.

        Args:
            tree_text: Rendered tree, one newline-terminated line per entry.
            folder_name: Name of the rendered folder, used in the title.
            options: Options the tree was generated with.
            path: Path shown in the header. Defaults to the folder name.

        Returns:
            The complete document text.
        """
        if tree_text and not tree_text.endswith("\n"):
            tree_text += "\n"
        return f"{self.format_header(folder_name, options, path)}{FENCE}\n{tree_text}{FENCE}\n"
