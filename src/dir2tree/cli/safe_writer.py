"""Output writing for the dir2tree CLI.

The rendered document is written straight to a file descriptor as UTF-8, so that a
closed pipe (``dir2tree big/ | head``) surfaces as a single BrokenPipeError the CLI
can turn into an exit code.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union


class SafeWriter:
    """Writes UTF-8 text to a file descriptor or a file.

    Attributes:
        file: The file descriptor or path given at construction.
        fd: The file descriptor actually written to.
    """

    def __init__(self, file: Union[int, str, Path]):
        """Initialize the writer.

        Args:
            file: A file descriptor (int) to write to as-is, or a path to a file that is
                created or truncated.

        Raises:
            TypeError: If file is neither an int nor a path-like object.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Write text, encoded as UTF-8.

        Args:
            data: Text to write.

        Raises:
            BrokenPipeError: If the reading end of the pipe is closed.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        view = memoryview(data.encode("utf-8"))
        try:
            # os.write may accept only part of a large buffer
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if this writer opened it. Descriptors passed in are left open.

        The writer is marked closed even if closing fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer. An exception from the with block takes priority over a close error."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
