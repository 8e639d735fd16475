"""livetoc: numbered tables of contents for markdown documentation trees."""

from livetoc.exceptions import (
    DocumentSourceError,
    LivetocError,
    OutlineStructureError,
)
from livetoc.outline import add_heading_numbers, count_depth, number_documents
from livetoc.render import render_toc
from livetoc.schemas import Document, InjectionResult, OutlineEntry
from livetoc.sections import replace_section
from livetoc.sources import discover_documents
from livetoc.toc import (
    TocOptions,
    build_tocs,
    example_toc,
    generate_toc,
    inject_toc,
    update_documents,
)

__all__ = [
    "Document",
    "DocumentSourceError",
    "InjectionResult",
    "LivetocError",
    "OutlineEntry",
    "OutlineStructureError",
    "TocOptions",
    "add_heading_numbers",
    "build_tocs",
    "count_depth",
    "discover_documents",
    "example_toc",
    "generate_toc",
    "inject_toc",
    "number_documents",
    "render_toc",
    "replace_section",
    "update_documents",
]
