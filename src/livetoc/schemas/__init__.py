"""Shared schemas for livetoc."""

from livetoc.schemas.injection import InjectionResult
from livetoc.schemas.outline import Document, OutlineEntry

__all__ = ["Document", "InjectionResult", "OutlineEntry"]
