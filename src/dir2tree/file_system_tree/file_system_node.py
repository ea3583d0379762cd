"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the rendered tree.

    Extends anytree.Node with a directory flag and a truncation flag. Children are
    attached in display order (directories first, then files), so iterating
    ``children`` yields entries exactly as they are rendered.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        truncated (bool): True if this directory sits at the depth limit and its
            children were not listed. Rendered as a single ``...`` line.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("file.txt", parent=root)
        >>> child.is_dir
        False
        >>> child.display_name
        'file.txt'
        >>> root.display_name
        'root/'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        truncated: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The parent node. Defaults to None.
            is_dir: Whether this node represents a directory. Defaults to False.
            truncated: Whether the directory's children were cut off by the depth limit.
                Defaults to False.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.truncated = truncated

    @property
    def display_name(self) -> str:
        """Name as shown in the tree; directories carry a trailing slash."""
        return f"{self.name}/" if self.is_dir else self.name
