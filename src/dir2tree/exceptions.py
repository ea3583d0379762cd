from typing import Optional


class AccessError(Exception):
    """
    Exception raised when a directory cannot be listed during tree generation.

    This exception is raised when the root directory or any directory beneath it cannot be
    read, or the type of one of its entries cannot be determined, whether because permission is denied, the directory disappeared while the tree was
    being built, or the operating system refused to resolve it (for example, too many levels
    of symbolic links). A partially listed tree is considered unreliable, so the whole build
    is aborted rather than silently skipping the unreadable subtree.

    The underlying OSError, when there is one, is chained as ``__cause__``.

    Attributes:
        path (str): Path to the directory that could not be listed.
        reason (Optional[str]): Short description of the underlying failure, if known.

    Example:
        >>> error = AccessError("/srv/private", "Permission denied")
        >>> str(error)
        'Cannot list directory: /srv/private (Permission denied)'
        >>> error.path
        '/srv/private'
    """

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        """
        Initialize the exception with the directory that could not be listed.

        Args:
            path (str): Path to the directory that could not be listed.
            reason (str, optional): Description of the underlying failure. Defaults to None.
        """
        self.path = path
        self.reason = reason
        message = f"Cannot list directory: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
