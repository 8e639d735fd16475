"""Outline models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Document(BaseModel):
    """A markdown document and its nesting depth below the documentation root."""

    path: str
    depth: int = Field(..., ge=0)


class OutlineEntry(BaseModel):
    """A document with its position among its siblings.

    Attributes:
        path: Root-relative POSIX path of the document.
        depth: Number of separators in ``path``.
        number: 1-based position among the siblings at ``depth`` under the
            same parent.
    """

    path: str
    depth: int = Field(..., ge=0)
    number: int = Field(..., ge=1)
