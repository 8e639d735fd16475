"""Depth calculation and nested sibling numbering of documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from livetoc.exceptions import OutlineStructureError
from livetoc.schemas import Document, OutlineEntry

SEPARATOR = "/"


def count_depth(path: str) -> int:
    """Return the nesting depth of a root-relative path (its separator count)."""
    return path.count(SEPARATOR)


@dataclass
class NumberingState:
    """Traversal state of the outline numberer.

    Attributes:
        depth: Depth of the previous document.
        counter: Number given to the previous document.
        stack: Counters of the enclosing levels, nearest ancestor last.
    """

    depth: int = 0
    counter: int = 0
    stack: list[int] = field(default_factory=list)

    def advance(self, path: str, depth: int) -> int:
        """Move to the next document and return its sibling number.

        Raises:
            OutlineStructureError: If ``depth`` is negative or more than one
                level deeper than the previous document.
        """
        if depth < 0:
            raise OutlineStructureError(f"Negative depth {depth} for {path}")

        if depth == self.depth:
            self.counter += 1
        elif depth == self.depth + 1:
            self.stack.append(self.counter)
            self.counter = 1
        elif depth > self.depth:
            raise OutlineStructureError(
                f"{path} is at depth {depth} but the previous document is at "
                f"depth {self.depth}; documents may only nest one level at a time"
            )
        else:
            # len(stack) == self.depth, so popping down to ``depth`` always succeeds
            resumed = self.counter
            for _ in range(self.depth - depth):
                resumed = self.stack.pop()
            self.counter = resumed + 1

        self.depth = depth
        return self.counter


def number_documents(
    documents: Iterable[Document | tuple[str, int]],
) -> list[OutlineEntry]:
    """Assign outline numbers to documents given in pre-order.

    Siblings are numbered ``1, 2, 3, ...`` and numbering of a level resumes
    where it left off after a nested run of documents, so ``a.md``,
    ``b/c.md``, ``b/d.md``, ``e.md`` are numbered ``1, 1, 2, 2``.

    Args:
        documents: Documents, or ``(path, depth)`` pairs, in pre-order.

    Returns:
        One entry per document, in input order.

    Raises:
        OutlineStructureError: If the depth sequence skips a level.
    """
    state = NumberingState()
    entries: list[OutlineEntry] = []
    for document in documents:
        if not isinstance(document, Document):
            path, depth = document
            document = Document(path=path, depth=depth)
        number = state.advance(document.path, document.depth)
        entries.append(
            OutlineEntry(path=document.path, depth=document.depth, number=number)
        )
    return entries


def add_heading_numbers(paths: Iterable[str]) -> list[OutlineEntry]:
    """Number root-relative paths, deriving each depth from the path."""
    return number_documents(
        Document(path=path, depth=count_depth(path)) for path in paths
    )
