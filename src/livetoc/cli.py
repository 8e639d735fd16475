"""Command line entry point for livetoc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from livetoc.config import (
    LIVETOC_DOCS_ROOT,
    LIVETOC_EXTENSION,
    LIVETOC_HEADER_MARKER,
    LIVETOC_LOG_LEVEL,
    LIVETOC_SECTION_TITLE,
)
from livetoc.exceptions import LivetocError
from livetoc.toc import TocOptions, example_toc, update_documents
from livetoc.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="livetoc",
        description="Generate a numbered table of contents for a documentation tree "
        "and write it into the index section of every document.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=LIVETOC_DOCS_ROOT,
        help=f"Documentation root (default: {LIVETOC_DOCS_ROOT})",
    )
    parser.add_argument("--extension", default=LIVETOC_EXTENSION, help="Document file suffix")
    parser.add_argument("--marker", default=LIVETOC_HEADER_MARKER, help="Heading marker of the TOC section")
    parser.add_argument("--title", default=LIVETOC_SECTION_TITLE, help="Title of the TOC section")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--check", action="store_true", help="Report stale documents without writing")
    mode.add_argument("--print", dest="print_toc", action="store_true", help="Print the root TOC and exit")
    parser.add_argument("--log-level", default=LIVETOC_LOG_LEVEL, help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    options = TocOptions(
        extension=args.extension,
        header_marker=args.marker,
        section_title=args.title,
        dry_run=args.check,
    )

    try:
        if args.print_toc:
            print(example_toc(args.root, options=options))
            return 0
        results = update_documents(args.root, options=options)
    except (LivetocError, OSError, ValueError) as exc:
        logger.debug("TOC run failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    changed = [result for result in results if result.changed]
    if args.check:
        for result in changed:
            print(f"TOC out of date: {result.path}", file=sys.stderr)
        return 1 if changed else 0

    print(f"Updated {len(changed)} of {len(results)} documents.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
