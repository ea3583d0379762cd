"""Directory to tree document conversion.

This module ties the tree builder and the document formatter together: given a
directory and generator options, it produces both the bare tree text and the complete
Markdown document.
"""

from pathlib import Path
from typing import Optional

from dir2tree.document_formatter import DocumentFormatter
from dir2tree.file_system_tree.tree_builder import TreeBuilder
from dir2tree.ignore_rules.base_rules import BaseIgnoreRules
from dir2tree.options import GeneratorOptions
from dir2tree.types import PathType


class TreeDocument:
    """Complete tree document for a directory, processed during initialization.

    Note:
        The doctest examples are marked with SKIP because they require a specific
        filesystem structure that can't be guaranteed in the test environment.

    Attributes:
        directory (Path): Directory being rendered.
        options (GeneratorOptions): Depth limit and ignore patterns used.

    Example:
        >>> document = TreeDocument("proj", GeneratorOptions(max_depth=1))  # doctest: +SKIP
        >>> print(document.tree_text, end="")  # doctest: +SKIP
        ├── src/
        │   ...
        └── readme.md
        >>> document.file_count  # doctest: +SKIP
        1

    Raises:
        FileNotFoundError: If the directory doesn't exist.
        NotADirectoryError: If the path isn't a directory.
        AccessError: If any directory in the tree cannot be listed.
    """

    def __init__(
        self,
        directory: PathType,
        options: Optional[GeneratorOptions] = None,
        *,
        exclusion_rules: Optional[BaseIgnoreRules] = None,
        formatter: Optional[DocumentFormatter] = None,
    ):
        """Build the tree and the document immediately.

        Args:
            directory: Directory to render. Can be any path-like object.
            options: Depth limit and ignore patterns. Defaults to unlimited depth with
                no ignore patterns.
            exclusion_rules: Extra ignore rules, e.g. loaded from .gitignore files.
            formatter: Document formatter to use. Defaults to a DocumentFormatter with
                the system clock.
        """
        self.directory = Path(directory)
        self.options = options if options is not None else GeneratorOptions()
        self._builder = TreeBuilder(self.directory, self.options, exclusion_rules)
        self._formatter = formatter if formatter is not None else DocumentFormatter()

        self._tree_text = self._builder.build()
        self._folder_name = self._builder.get_tree().name
        self._document_text = self._formatter.format(
            self._tree_text, self._folder_name, self.options, path=str(self.directory)
        )

    @property
    def folder_name(self) -> str:
        """Name of the rendered directory."""
        return self._folder_name

    @property
    def tree_text(self) -> str:
        """The bare tree, one newline-terminated line per entry."""
        return self._tree_text

    @property
    def document_text(self) -> str:
        """The Markdown document: metadata header plus the tree in a fenced block."""
        return self._document_text

    @property
    def directory_count(self) -> int:
        """Number of directories shown, excluding the root."""
        return self._builder.get_directory_count()

    @property
    def file_count(self) -> int:
        """Number of files shown."""
        return self._builder.get_file_count()

    @property
    def truncated_count(self) -> int:
        """Number of directories collapsed to a ``...`` line by the depth limit."""
        return self._builder.get_truncated_count()
