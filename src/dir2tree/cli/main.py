"""Command-line interface for dir2tree.

This module provides the command-line interface for dir2tree, rendering a directory as
a tree document. It handles argument parsing, output writing and clean exits when the
reader goes away or the user presses Ctrl+C.

Interruption Notes:
    - Broken pipe: the interpreter ignores SIGPIPE, so writing to a closed pipe (e.g.,
      when piping to `head`) surfaces as BrokenPipeError and exits with 141
    - Ctrl+C: KeyboardInterrupt exits with 130 without a traceback

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: A directory could not be listed
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe on Unix-like systems

Example:
    # Render a directory two levels deep
    $ dir2tree -d 2 /path/to/dir
"""

import locale
import os
import sys

from dir2tree.cli.argparser import create_parser, resolve_ignore_patterns, validate_args
from dir2tree.cli.safe_writer import SafeWriter
from dir2tree.exceptions import AccessError
from dir2tree.ignore_rules.git_rules import GitIgnoreRules
from dir2tree.options import GeneratorOptions
from dir2tree.tree_document import TreeDocument

EXIT_ERROR = 1
EXIT_ACCESS_ERROR = 126
EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


def format_counts(directories: int, files: int) -> str:
    """Format the directory and file counts into a human-readable string."""
    return f"Directories: {directories}\nFiles: {files}"


def use_user_locale() -> None:
    """Format the document timestamp in the user's locale rather than the C locale."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        print(f"Warning: Unsupported locale settings, using the C locale ({e})", file=sys.stderr)


def silence_stdout() -> None:
    """Point stdout at os.devnull.

    After a broken pipe the interpreter still flushes sys.stdout at shutdown, which
    would print a second BrokenPipeError message.
    """
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


def main() -> None:
    """Main entry point for the dir2tree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: A directory could not be listed
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe on Unix-like systems
    """
    try:
        use_user_locale()

        # Populated by -e/--exclude while the arguments are parsed
        exclusion_rules = GitIgnoreRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        validate_args(args)

        options = GeneratorOptions(max_depth=args.max_depth, ignore_patterns=resolve_ignore_patterns(args))

        document = TreeDocument(
            args.directory,
            options,
            exclusion_rules=exclusion_rules if exclusion_rules.has_rules() else None,
        )

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            safe_writer.write(document.tree_text if args.tree_only else document.document_text)

            if args.summary:
                counts = format_counts(document.directory_count, document.file_count)
                if args.summary == "stdout":
                    safe_writer.write("\n" + counts + "\n")
                else:
                    print(counts, file=sys.stderr)

            if args.tree_only and not document.tree_text:
                print("Warning: No entries to show.", file=sys.stderr)

    except BrokenPipeError:
        silence_stdout()
        sys.exit(EXIT_SIGPIPE)
    except KeyboardInterrupt:
        sys.exit(EXIT_SIGINT)
    except AccessError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_ACCESS_ERROR)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
