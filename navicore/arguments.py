"""Command-line options of the file manager."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

APP_NAME = "navi"
VERSION = "v1.3.4"


@dataclass(frozen=True)
class Options:
    """What the command line asked for."""

    config: str | None = None
    quick: bool = False
    bookmark_file: str | None = None
    files: list[str] = field(default_factory=list)


class _Parser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """The parser for the program's command line."""
    parser = _Parser(prog=APP_NAME)
    parser.add_argument(
        "-v", "--version", action="version", version=VERSION,
        help="Show the version and exit",
    )
    parser.add_argument(
        "--config", "-c", metavar="PATH",
        help="Path to a lua config file to use",
    )
    parser.add_argument(
        "--quick", "-Q", action="store_true", default=False,
        help="Load navi without loading configuration file",
    )
    parser.add_argument(
        "--bookmark-file", "-B", dest="bookmark_file", metavar="PATH",
        help="Load a bookmark file",
    )
    parser.add_argument(
        "files", nargs=argparse.REMAINDER,
        help="Directory to load",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Options:
    """Parse the command line; exits with status 1 on a usage error."""
    namespace = build_parser().parse_args(list(argv) if argv is not None else None)
    return Options(
        config=namespace.config,
        quick=namespace.quick,
        bookmark_file=namespace.bookmark_file,
        files=list(namespace.files),
    )