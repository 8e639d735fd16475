"""Build outline TOCs for a documentation tree and inject them into each document."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from livetoc.config import (
    LIVETOC_DOCS_ROOT,
    LIVETOC_ENCODING,
    LIVETOC_EXTENSION,
    LIVETOC_HEADER_MARKER,
    LIVETOC_SECTION_TITLE,
)
from livetoc.outline import add_heading_numbers, count_depth
from livetoc.render import render_toc
from livetoc.schemas import InjectionResult
from livetoc.sections import find_section, splice_section
from livetoc.sources import discover_documents, strip_root
from livetoc.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class TocOptions:
    """Options for a TOC run.

    Attributes:
        extension: Suffix of the documents to collect.
        header_marker: Heading marker of the section receiving the TOC.
        section_title: Title of the section receiving the TOC.
        encoding: Text encoding used to read and write documents.
        dry_run: If True, compute results without writing any file.
    """

    extension: str = LIVETOC_EXTENSION
    header_marker: str = LIVETOC_HEADER_MARKER
    section_title: str = LIVETOC_SECTION_TITLE
    encoding: str = LIVETOC_ENCODING
    dry_run: bool = False


def generate_toc(
    paths: Iterable[str],
    from_depth: int = 0,
    *,
    extension: str = LIVETOC_EXTENSION,
) -> str:
    """Number root-relative paths and render them for a document at ``from_depth``."""
    return render_toc(add_heading_numbers(paths), from_depth, extension=extension)


def build_tocs(
    paths: list[str],
    *,
    root: Path,
    extension: str = LIVETOC_EXTENSION,
) -> list[tuple[str, str]]:
    """Render one TOC per document, with links relative to that document.

    Args:
        paths: Discovered document paths, prefixed with ``root``.
        root: Documentation root the paths live under.
        extension: Markdown extension stripped from titles.

    Returns:
        ``(path, toc)`` pairs in the order of ``paths``.

    Raises:
        OutlineStructureError: If the tree skips a nesting level.
    """
    relative_paths = strip_root(paths, root)
    entries = add_heading_numbers(relative_paths)
    return [
        (path, render_toc(entries, count_depth(relative), extension=extension))
        for path, relative in zip(paths, relative_paths)
    ]


def inject_toc(
    toc: str,
    path: str | Path,
    *,
    options: TocOptions | None = None,
) -> InjectionResult:
    """Write ``toc`` into the TOC section of the document at ``path``.

    The file is only rewritten when its content changes and the run is not a
    dry run. Documents without the section are left as they are.

    Raises:
        OSError: If the document cannot be read or written.
    """
    opts = options or TocOptions()
    path = Path(path)
    # newline="" keeps CRLF line endings intact on both read and write
    with path.open(encoding=opts.encoding, newline="") as handle:
        original = handle.read()

    match = find_section(original, opts.header_marker, opts.section_title)
    if match is None:
        logger.debug(
            "No TOC section found",
            extra={"path": str(path), "section": f"{opts.header_marker} {opts.section_title}"},
        )
        return InjectionResult(path=path, changed=False, content=original)

    updated = splice_section(original, match, opts.header_marker, opts.section_title, toc)
    changed = updated != original
    if changed and not opts.dry_run:
        with path.open("w", encoding=opts.encoding, newline="") as handle:
            handle.write(updated)
        logger.info("Updated TOC", extra={"path": str(path)})
    elif not changed:
        logger.debug("TOC already up to date", extra={"path": str(path)})
    return InjectionResult(path=path, changed=changed, content=updated)


def update_documents(
    root: Path | None = None,
    *,
    options: TocOptions | None = None,
) -> list[InjectionResult]:
    """Regenerate the TOC section of every document below ``root``.

    Documents are processed one at a time and the first failure propagates.

    Args:
        root: Documentation root. Defaults to ``LIVETOC_DOCS_ROOT``.
        options: Run options. Uses defaults if None.

    Returns:
        One result per discovered document, in outline order.

    Raises:
        DocumentSourceError: If ``root`` is missing.
        OutlineStructureError: If the tree skips a nesting level.
        OSError: If a document cannot be read or written.
    """
    opts = options or TocOptions()
    root = root if root is not None else LIVETOC_DOCS_ROOT
    paths = discover_documents(root, opts.extension)
    logger.debug("Discovered documents", extra={"root": str(root), "count": len(paths)})

    return [
        inject_toc(toc, path, options=opts)
        for path, toc in build_tocs(paths, root=root, extension=opts.extension)
    ]


def example_toc(
    root: Path | None = None,
    *,
    options: TocOptions | None = None,
) -> str:
    """Return the TOC as seen from the documentation root, without writing files."""
    opts = options or TocOptions()
    root = root if root is not None else LIVETOC_DOCS_ROOT
    paths = discover_documents(root, opts.extension)
    return generate_toc(strip_root(paths, root), extension=opts.extension)
