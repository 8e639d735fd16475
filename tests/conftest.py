"""Test setup for livetoc."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


DOCUMENT_TEMPLATE = "# {title}\n\n## Index\n\n## Body\nText for {title}.\n"


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """A small documentation tree with an Index section in every document.

    Layout::

        documentation/
            a-intro.livemd
            b/c.livemd
            b/d/e.livemd
            b/f.livemd
            g.livemd
    """
    root = tmp_path / "documentation"
    for relative in ("a-intro.livemd", "b/c.livemd", "b/d/e.livemd", "b/f.livemd", "g.livemd"):
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DOCUMENT_TEMPLATE.format(title=relative), encoding="utf-8")
    return root
