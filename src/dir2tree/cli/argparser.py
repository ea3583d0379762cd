"""Command-line argument parsing for dir2tree.

This module defines the command-line interface for dir2tree,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Type, Union

from dir2tree import __version__
from dir2tree.ignore_rules.git_rules import GitIgnoreRules
from dir2tree.options import DEFAULT_IGNORE_PATTERNS, parse_ignore_patterns, parse_max_depth, validate_ignore_patterns


def positive_depth(value: str) -> int:
    """Argparse type for -d/--max-depth.

    Raises:
        argparse.ArgumentTypeError: If the value is not a positive integer.
    """
    try:
        depth = parse_max_depth(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    if depth is None:
        raise argparse.ArgumentTypeError("omit -d/--max-depth for unlimited depth")
    return depth


def create_exclusion_action(exclusion_rules: GitIgnoreRules) -> Type[argparse.Action]:
    """Create a custom action class that loads exclusion files as they are parsed.

    Args:
        exclusion_rules: The gitignore-style rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to load exclusion files into the rules object, in command-line order."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return
            path = values if isinstance(values, Path) else Path(str(values))
            try:
                exclusion_rules.load_rules(path)
            except FileNotFoundError as e:
                parser.error(str(e))

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(path)

    return ExclusionRulesAction


def create_parser(exclusion_rules: GitIgnoreRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The gitignore-style rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dir2tree's options.
    """
    description = """
    dir2tree: Render a directory as a text tree inside an annotated Markdown document.

    Directories are listed before files, each group in alphabetical order. The depth
    can be limited, in which case directories at the limit show "..." instead of
    their contents. Entries can be hidden with simple ignore patterns:

      *.ext   hides every entry whose name ends in .ext
      name    hides every entry named exactly "name" (and everything under it)

    When no -i/--ignore option is given, "node_modules" and ".git" are ignored.
    """

    epilog = """
    Examples:
      # Render the whole tree of a project
      dir2tree /path/to/project

      # Limit the tree to two levels
      dir2tree -d 2 /path/to/project

      # Ignore patterns, comma-separated and/or repeated
      dir2tree -i "node_modules,.git,*.log" -i dist /path/to/project

      # Show everything, including node_modules and .git
      dir2tree -n /path/to/project

      # Additionally apply .gitignore rules
      dir2tree -e /path/to/project/.gitignore /path/to/project

      # Print only the tree, and save it to a file
      dir2tree -T -o tree.txt /path/to/project

      # Print directory and file counts to stderr
      dir2tree -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dir2tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2tree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to render. The directory itself is not shown in the tree.",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=positive_depth,
        metavar="N",
        help="Maximum number of levels to expand (default: unlimited).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERNS",
        action="append",
        help=(
            "Comma-separated ignore patterns: '*.ext' for extensions, anything else for exact names. "
            "Can be specified multiple times; order is preserved."
        ),
    )
    parser.add_argument(
        "-n",
        "--no-default-ignores",
        action="store_true",
        help=f"Do not ignore {', '.join(DEFAULT_IGNORE_PATTERNS)} when no -i/--ignore is given.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a .gitignore-style file whose rules also hide entries (can be specified multiple times).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-T",
        "--tree-only",
        action="store_true",
        help="Print only the tree, without the document header and code fence.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print directory and file counts. Valid destinations: stderr, stdout",
    )

    return parser


def resolve_ignore_patterns(args: argparse.Namespace) -> Tuple[str, ...]:
    """Collect the ignore patterns from parsed arguments.

    Returns:
        Patterns from all -i/--ignore options in order, or the default patterns when
        none were given and -n/--no-default-ignores is not set.
    """
    if args.ignore is None:
        return () if args.no_default_ignores else DEFAULT_IGNORE_PATTERNS
    patterns: List[str] = []
    for value in args.ignore:
        patterns.extend(parse_ignore_patterns(value))
    return tuple(patterns)


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    validate_ignore_patterns(resolve_ignore_patterns(args))
