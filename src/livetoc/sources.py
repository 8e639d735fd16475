"""Discover markdown documents below a documentation root."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterable

from livetoc.config import LIVETOC_EXTENSION
from livetoc.exceptions import DocumentSourceError
from livetoc.utils.logging_config import get_logger

logger = get_logger(__name__)


def outline_sort_key(path: str) -> tuple[str, ...]:
    """Sort key placing the separator before every ordinary character.

    Comparing path components keeps ``guide/intro.livemd`` next to its
    siblings instead of after ``guide-extra.livemd``.
    """
    return PurePosixPath(path).parts


def discover_documents(
    root: Path,
    extension: str = LIVETOC_EXTENSION,
) -> list[str]:
    """List every ``*{extension}`` file below ``root`` in outline order.

    Directories are walked with an explicit stack. Symlinked directories are
    skipped so link cycles cannot repeat documents. Returned paths are POSIX
    strings prefixed with ``root`` as given, matching how they are opened.

    Args:
        root: Documentation root directory.
        extension: File suffix to collect (e.g. ``".livemd"``).

    Returns:
        Document paths sorted by path components.

    Raises:
        DocumentSourceError: If ``root`` does not exist or is not a directory.
    """
    if not root.is_dir():
        raise DocumentSourceError(f"Documentation root not found: {root}")

    documents: list[str] = []
    pending = [root]
    while pending:
        directory = pending.pop()
        for child in directory.iterdir():
            if child.is_dir():
                if child.is_symlink():
                    logger.debug("Skipping symlinked directory", extra={"path": child.as_posix()})
                    continue
                pending.append(child)
            elif child.is_file() and child.name.endswith(extension):
                documents.append(child.as_posix())
    return sorted(documents, key=outline_sort_key)


def strip_root(paths: Iterable[str], root: Path) -> list[str]:
    """Make discovered paths relative to ``root`` (e.g. ``documentation/a/b`` -> ``a/b``)."""
    prefix = root.as_posix().rstrip("/") + "/"
    return [path[len(prefix):] if path.startswith(prefix) else path for path in paths]
