"""Command-line front door for indexify.

Parses CLI options into an immutable ``IndexOptions`` value, then runs the
generation pipeline once or across the target tree.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import is_valid_index_name, load_base_url, load_include_hidden, load_index_name
from .errors import IndexifyError
from .generator import generate
from .options import IndexOptions

LOGGER_NAME = "indexify"


def _index_name(value: str) -> str:
    """argparse type for a plain index file name."""
    if not is_valid_index_name(value):
        raise argparse.ArgumentTypeError(f"invalid index file name: {value!r}")
    return value


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach one plain stdout handler to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="indexify",
        description="Generate static HTML directory listings for a file tree.",
    )
    parser.add_argument("dir", help="Directory to index.")
    parser.add_argument("--root", required=True, help="path to root directory")
    parser.add_argument(
        "--hidden",
        action=argparse.BooleanOptionalAction,
        default=load_include_hidden(),
        help="index hidden files (default: %(default)s)",
    )
    parser.add_argument("-n", "--dry-run", action="store_true", help="don't write anything to disk")
    parser.add_argument("-r", "--recursive", action="store_true", help="process directories recursively")
    parser.add_argument("--stdout", action="store_true", help="output to stdout only")
    parser.add_argument(
        "--index-name",
        type=_index_name,
        default=load_index_name(),
        help="name of index file to generate (default: %(default)s)",
    )
    parser.add_argument(
        "--base-url",
        default=load_base_url(),
        help="base url to use for links (if the files are hosted elsewhere)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every written file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> IndexOptions:
    return IndexOptions(
        root=Path(args.root),
        include_hidden=args.hidden,
        dry_run=args.dry_run,
        recursive=args.recursive,
        stdout=args.stdout,
        index_name=args.index_name,
        base_url=args.base_url,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and generate indexes.

    Fatal pipeline errors exit with status 1 and the error message; skipped
    directories are only logged.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    options = options_from_args(args)
    try:
        generate(Path(args.dir), options)
    except (IndexifyError, OSError) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
