"""Local configuration for livetoc."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_DOCS_ROOT = "documentation"
DEFAULT_EXTENSION = ".livemd"
DEFAULT_HEADER_MARKER = "##"
DEFAULT_SECTION_TITLE = "Index"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_ENCODING = "utf-8"

# Root of the documentation tree, relative to the working directory.
LIVETOC_DOCS_ROOT = Path(os.getenv("LIVETOC_DOCS_ROOT", DEFAULT_DOCS_ROOT)).expanduser()
LIVETOC_EXTENSION = os.getenv("LIVETOC_EXTENSION", DEFAULT_EXTENSION)
LIVETOC_HEADER_MARKER = os.getenv("LIVETOC_HEADER_MARKER", DEFAULT_HEADER_MARKER)
LIVETOC_SECTION_TITLE = os.getenv("LIVETOC_SECTION_TITLE", DEFAULT_SECTION_TITLE)
LIVETOC_LOG_LEVEL = os.getenv("LIVETOC_LOG_LEVEL", DEFAULT_LOG_LEVEL)
LIVETOC_ENCODING = os.getenv("LIVETOC_ENCODING", DEFAULT_ENCODING)
