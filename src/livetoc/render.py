"""Render numbered outline entries as an indented markdown list."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterable

from livetoc.config import LIVETOC_EXTENSION
from livetoc.schemas import OutlineEntry

INDENT_WIDTH = 3


def document_title(path: str, extension: str = LIVETOC_EXTENSION) -> str:
    """Turn a file name such as ``getting-started.livemd`` into ``Getting Started``."""
    name = PurePosixPath(path).name
    if extension and name.endswith(extension):
        name = name[: -len(extension)]
    return " ".join(part.capitalize() for part in name.split("-"))


def relative_link(path: str, from_depth: int) -> str:
    """Link to ``path`` from a document ``from_depth`` levels below the root."""
    return "./" + "../" * from_depth + path


def render_entry(
    entry: OutlineEntry,
    from_depth: int = 0,
    *,
    extension: str = LIVETOC_EXTENSION,
) -> str:
    """Format one entry as an indented, numbered markdown link."""
    indent =" " * (INDENT_WIDTH * entry.depth)
    title = document_title(entry.path, extension)
    return f"{indent}{entry.number}. [{title}]({relative_link(entry.path, from_depth)})"


def render_toc(
    entries: Iterable[OutlineEntry],
    from_depth: int = 0,
    *,
    extension: str = LIVETOC_EXTENSION,
) -> str:
    """Render entries one per line, with links relative to a target document.

    Args:
        entries: Numbered entries in outline order.
        from_depth: Depth of the document the TOC will be written into.
        extension: Markdown extension stripped from titles.

    Returns:
        The lines joined by newlines, without a trailing newline.
    """
    return "\n".join(
        render_entry(entry, from_depth, extension=extension) for entry in entries
    )
