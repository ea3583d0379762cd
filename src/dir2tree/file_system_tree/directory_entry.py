"""Ephemeral record describing one child of a directory being listed."""

import os
from dataclasses import dataclass

from dir2tree.exceptions import AccessError


@dataclass(frozen=True)
class DirectoryEntry:
    """A single directory child as seen while listing its parent.

    Entries are created on demand for every child of the directory being visited,
    handed to the ignore rules and the sort, and then discarded. They are never cached
    across builds.

    Attributes:
        name: The entry's base name.
        relative_path: Path from the tree root to the entry, always using forward slashes.
        is_dir: True if the entry is a directory (symbolic links are followed).

    Example:
        >>> entry = DirectoryEntry("src", "pkg/src", is_dir=True)
        >>> entry.match_path
        'pkg/src/'
    """

    name: str
    relative_path: str
    is_dir: bool = False

    @property
    def match_path(self) -> str:
        """Relative path used for gitignore-style matching; directories end with a slash."""
        return f"{self.relative_path}/" if self.is_dir else self.relative_path

    @classmethod
    def from_dir_entry(cls, entry: "os.DirEntry[str]", parent_relative_path: str) -> "DirectoryEntry":
        """Create an entry from an ``os.scandir`` result.

        Args:
            entry: The scandir entry.
            parent_relative_path: Relative path of the directory being listed ("" for the root).

        Returns:
            The corresponding DirectoryEntry. Dangling symbolic links are classified as
            files.

        Raises:
            AccessError: If the entry cannot be stat'ed, e.g. a symbolic link loop.
        """
        try:
            is_dir = entry.is_dir()
        except OSError as e:
            raise AccessError(entry.path, e.strerror or str(e)) from e
        relative_path = f"{parent_relative_path}/{entry.name}" if parent_relative_path else entry.name
        return cls(entry.name, relative_path, is_dir)
