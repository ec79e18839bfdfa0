"""
Command-line front end.

    cxxlint -f path/to/file.cpp [-d 1] [--format json] [-o fixed.cpp]

Exit status: 0 when clean, 1 when issues were found, 2 when the file could
not be read.
"""

import argparse
import logging
import sys
from typing import List, Optional

from cxxlint.engine import CppLinter, dump_tree, parse
from cxxlint.reporter import format_json, format_text
from cxxlint.source_reader import read_source, write_source

EXIT_CLEAN = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2


def _debug_level(value: str) -> int:
    """Any integer is accepted; anything else means 'off'."""
    try:
        return int(value)
    except ValueError:
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cxxlint",
        description="Report style and correctness issues in a C++ source file.",
    )
    parser.add_argument("-f", "--file_path", required=True,
                        help="Specify the path to the file to read.")
    parser.add_argument("-d", "--debug", type=_debug_level, default=0,
                        help="Enable debug mode (non-zero dumps the syntax tree).")
    parser.add_argument("--format", choices=("text", "json"), default="text",
                        help="Report format (default: text).")
    parser.add_argument("-o", "--output", default=None,
                        help="Write the auto-fixed source to this path.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        source = read_source(args.file_path)
    except (OSError, ValueError) as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return EXIT_ERROR

    tree = parse(source)
    if args.debug:
        print(dump_tree(tree.root_node))

    result = CppLinter().lint_tree(tree, source)

    if args.format == "json":
        print(format_json(result.diagnostics))
    else:
        print(format_text(result.diagnostics))

    if args.output:
        try:
            write_source(args.output, result.fixed_source)
        except OSError as e:
            print(f"Error writing file: {e}", file=sys.stderr)
            return EXIT_ERROR

    return EXIT_ISSUES if result.has_issues else EXIT_CLEAN


if __name__ == "__main__":
    sys.exit(main())
