from abc import ABC, abstractmethod

from dir2tree.file_system_tree.directory_entry import DirectoryEntry


class BaseIgnoreRules(ABC):
    """
    Abstract base class defining the interface for entry ignore rules.

    This class serves as a contract for the rule types that decide which directory
    entries are left out of the rendered tree: simple name and extension patterns as
    well as .gitignore-style rule files. Rules receive the whole DirectoryEntry so that
    each variant can look at the part it cares about (the base name for simple
    patterns, the root-relative path for gitignore rules).

    Example:
        >>> from dir2tree.file_system_tree.directory_entry import DirectoryEntry
        >>> class TmpRules(BaseIgnoreRules):
        ...     def exclude(self, entry: DirectoryEntry) -> bool:
        ...         return entry.name.endswith('.tmp')
        >>> rules = TmpRules()
        >>> rules.exclude(DirectoryEntry("build.tmp", "out/build.tmp"))
        True
        >>> rules.exclude(DirectoryEntry("main.py", "main.py"))
        False
    """

    @abstractmethod
    def exclude(self, entry: DirectoryEntry) -> bool:
        """
        Determine if a directory entry should be left out of the tree.

        Args:
            entry (DirectoryEntry): The entry to check.

        Returns:
            bool: True if the entry should be ignored, False if it should be shown.
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether this object can exclude anything at all.

        Returns:
            bool: True by default. Subclasses holding an empty rule set return False.
        """
        return True
