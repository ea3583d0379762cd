"""Depth-bounded, filtered directory walk and tree rendering.

This module provides the TreeBuilder class, which lists a directory top-down, drops
entries matching the configured ignore rules, orders siblings directories-first and
renders the result with box-drawing connectors:

    ├── src/
    │   └── a.ts
    └── readme.md

The root directory itself is not rendered. Directories at the depth limit are shown
with a single ``...`` line in place of their children.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from pyuca import Collator

from dir2tree.exceptions import AccessError
from dir2tree.file_system_tree.directory_entry import DirectoryEntry
from dir2tree.file_system_tree.file_system_node import FileSystemNode
from dir2tree.ignore_rules.base_rules import BaseIgnoreRules
from dir2tree.ignore_rules.pattern_rules import build_ignore_rules
from dir2tree.options import GeneratorOptions
from dir2tree.types import PathType

BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL = "│   "
SPACE = "    "
TRUNCATION_MARKER = "..."


@lru_cache(maxsize=None)
def _collator() -> Collator:
    """Root collation table, loaded on first use."""
    return Collator()


def sort_key(entry: DirectoryEntry) -> Tuple[bool, Tuple[int, ...], str]:
    """Ordering for siblings: directories first, then by name.

    Names are ordered by the root collation of the Unicode Collation Algorithm, which
    is what locale-aware string comparison falls back to. Punctuation sorts ahead of
    digits and letters, and letters compare case-insensitively with lowercase first on
    a tie. The raw name breaks any remaining tie.

    Example:
        >>> names = ["abc", "_site", ".github", "1abc", "B.txt", "b.txt"]
        >>> entries = [DirectoryEntry(name, name) for name in names] + [DirectoryEntry("Zeta", "Zeta", is_dir=True)]
        >>> [e.name for e in sorted(entries, key=sort_key)]
        ['Zeta', '_site', '.github', '1abc', 'abc', 'b.txt', 'B.txt']
    """
    return (not entry.is_dir, _collator().sort_key(entry.name), entry.name)


class TreeBuilder:
    """Builds and renders the tree of a directory.

    The whole tree is built before any line is produced, using an explicit work stack
    rather than recursion, so arbitrarily deep directories do not hit the interpreter's
    recursion limit. If any directory cannot be listed the build fails with AccessError
    and no output is produced at all.

    Symbolic links to directories are followed. There is no cycle detection; an
    unlimited walk stops at ``options.depth_ceiling`` instead.

    Attributes:
        root_path (Path): The directory being rendered.
        options (GeneratorOptions): Depth limit and ignore patterns.
        exclusion_rules (Optional[BaseIgnoreRules]): Additional rules, e.g. loaded from
            .gitignore files, applied together with ``options.ignore_patterns``.

    Example:
        >>> builder = TreeBuilder("proj", GeneratorOptions(ignore_patterns=["node_modules"]))  # doctest: +SKIP
        >>> print(builder.build(), end="")  # doctest: +SKIP
        ├── src/
        │   └── a.ts
        └── readme.md
    """

    def __init__(
        self,
        root_path: PathType,
        options: Optional[GeneratorOptions] = None,
        exclusion_rules: Optional[BaseIgnoreRules] = None,
    ) -> None:
        """Initialize a TreeBuilder.

        Args:
            root_path: Path to the directory to render. Can be any path-like object.
            options: Depth limit and ignore patterns. Defaults to unlimited depth with
                no ignore patterns.
            exclusion_rules: Extra ignore rules combined with the option patterns.
        """
        self.root_path = Path(root_path)
        self.options = options if options is not None else GeneratorOptions()
        self.exclusion_rules = exclusion_rules
        self._ignore_rules = build_ignore_rules(self.options.ignore_patterns)
        if exclusion_rules is not None:
            self._ignore_rules.add_rule_object(exclusion_rules)
        self._tree: Optional[FileSystemNode] = None
        self._file_count = 0
        self._directory_count = 0
        self._truncated_count = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the tree, building it on first access.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            AccessError: If any directory in the tree cannot be listed.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        root = FileSystemNode(self.root_path.resolve().name or str(self.root_path), is_dir=True)
        file_count = 0
        directory_count = 0
        truncated_count = 0
        max_depth = self.options.effective_max_depth

        # Each frame is (directory path, path relative to root, node, depth of its children)
        stack: List[Tuple[Path, str, FileSystemNode, int]] = [(self.root_path, "", root, 0)]
        while stack:
            path, relative_path, node, depth = stack.pop()
            if depth >= max_depth:
                node.truncated = True
                truncated_count += 1
                continue

            subdirectories = []
            for entry in self._list_entries(path, relative_path):
                child = FileSystemNode(entry.name, parent=node, is_dir=entry.is_dir)
                if entry.is_dir:
                    directory_count += 1
                    subdirectories.append((path / entry.name, entry.relative_path, child, depth + 1))
                else:
                    file_count += 1

            # Reversed so that directories are visited in display order
            stack.extend(reversed(subdirectories))

        self._tree = root
        self._file_count = file_count
        self._directory_count = directory_count
        self._truncated_count = truncated_count

    def _list_entries(self, path: Path, relative_path: str) -> List[DirectoryEntry]:
        """List, sort and filter the children of one directory.

        Raises:
            AccessError: If the directory cannot be listed.
        """
        try:
            with os.scandir(path) as scan:
                entries = [DirectoryEntry.from_dir_entry(item, relative_path) for item in scan]
        except OSError as e:
            raise AccessError(str(path), e.strerror or str(e)) from e

        entries.sort(key=sort_key)
        return [entry for entry in entries if not self._ignore_rules.exclude(entry)]

    def get_file_count(self) -> int:
        """Number of files shown in the tree."""
        self.get_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Number of directories shown in the tree, excluding the root."""
        self.get_tree()
        return self._directory_count

    def get_truncated_count(self) -> int:
        """Number of directories whose children were cut off by the depth limit."""
        self.get_tree()
        return self._truncated_count

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate the tree one line at a time, without trailing newlines.

        Lines are produced in pre-order: each entry is followed by its descendants
        before its next sibling.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            AccessError: If any directory in the tree cannot be listed.
        """
        root = self.get_tree()

        # Each frame is (node or None for a truncation marker, prefix, is last sibling)
        stack = self._child_frames(root, "")
        while stack:
            node, prefix, is_last = stack.pop()
            if node is None:
                yield f"{prefix}{TRUNCATION_MARKER}"
                continue

            connector = LAST_BRANCH if is_last else BRANCH
            yield f"{prefix}{connector}{node.display_name}"

            if node.is_dir:
                stack.extend(self._child_frames(node, prefix + (SPACE if is_last else VERTICAL)))

    @staticmethod
    def _child_frames(node: FileSystemNode, prefix: str) -> List[Tuple[Optional[FileSystemNode], str, bool]]:
        """Stack frames for a node's children, ordered so the first child pops first."""
        if node.truncated:
            return [(None, prefix, True)]
        children = node.children
        last_index = len(children) - 1
        frames: List[Tuple[Optional[FileSystemNode], str, bool]] = [
            (child, prefix, i == last_index) for i, child in enumerate(children)
        ]
        frames.reverse()
        return frames

    def build(self) -> str:
        """Render the complete tree as text, one newline-terminated line per entry.

        Returns:
            The tree text, or an empty string if the directory shows no entries.
        """
        return "".join(f"{line}\n" for line in self.stream_tree_representation())

    def refresh(self) -> None:
        """Discard the cached tree and rebuild it from the current filesystem state."""
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
        self._truncated_count = 0
        self._build_tree()
