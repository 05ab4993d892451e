"""Command line front end: parse a Paws file and print its AST.

Usage::

    paws-parse [FILE]        # FILE absent or '-' reads standard input

On success the debug rendering of the tree goes to stdout and the exit
status is 0.  A parse error is written to stderr as a single
``<source>:<line>:<column>: <message>`` line with exit status 1; input that
cannot be read exits with status 2.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from pawslib import __version__
from pawslib.diagnostics import format_error
from pawslib.parser import ParseError, parse, render_debug

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_INPUT_ERROR = 2


def _configure_logging(verbose: bool) -> None:
    """Send pawslib log records to stderr."""
    logger = logging.getLogger("pawslib")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paws-parse",
        description="Parse Paws source and print its syntax tree.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="source file to parse (default: read standard input)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log parser activity to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        if args.file == "-":
            source_name = "<stdin>"
            program = parse(source_name, sys.stdin)
        else:
            source_name = args.file
            with open(args.file, encoding="utf-8") as f:
                program = parse(source_name, f)
    except ParseError as err:
        print(format_error(source_name, err), file=sys.stderr)
        return EXIT_PARSE_ERROR
    except (OSError, UnicodeDecodeError) as err:
        print(f"paws-parse: cannot read {args.file}: {err}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    print(render_debug(program))
    return EXIT_OK
