"""Injection output model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class InjectionResult(BaseModel):
    """Outcome of injecting a TOC into one document."""

    path: Path
    changed: bool
    content: str
