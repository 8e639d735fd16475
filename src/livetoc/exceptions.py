"""Custom exceptions for livetoc."""


class LivetocError(Exception):
    """Base exception for livetoc operations."""


class DocumentSourceError(LivetocError, FileNotFoundError):
    """Documentation root is missing or is not a directory."""


class OutlineStructureError(LivetocError, ValueError):
    """Document depths do not form a nested-by-one outline."""
