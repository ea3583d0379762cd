"""Directory tree rendering utilities.

This package renders a directory's contents as a box-drawing tree, bounded by a
maximum depth and filtered by ignore patterns, and wraps the result in an
annotated Markdown document.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dir2tree")
except PackageNotFoundError:
    __version__ = "unknown"
