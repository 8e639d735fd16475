"""Tests for TOC rendering."""

from __future__ import annotations

import pytest

from livetoc.render import document_title, relative_link, render_entry, render_toc
from livetoc.schemas import OutlineEntry


@pytest.mark.parametrize(
    ("path", "title"),
    [
        ("intro.livemd", "Intro"),
        ("b/getting-started.livemd", "Getting Started"),
        ("deep/dir/HTTP-client.livemd", "Http Client"),
        ("notes.md", "Notes.md"),
    ],
)
def test_document_title(path: str, title: str) -> None:
    assert document_title(path, ".livemd") == title


def test_document_title_with_other_extension() -> None:
    assert document_title("guide/user-guide.md", ".md") == "User Guide"


class TestRelativeLink:
    """Tests for relative_link function."""

    def test_from_root(self) -> None:
        """Links from the root only get the ./ prefix."""
        assert relative_link("b/c.md", 0) == "./b/c.md"

    def test_from_nested_document(self) -> None:
        """Each level of the target document adds one ../."""
        assert relative_link("b/c.md", 2) == "./../../b/c.md"


class TestRenderToc:
    """Tests for render_entry and render_toc functions."""

    def test_indents_three_spaces_per_level(self) -> None:
        """A depth-1 entry seen from the root."""
        entry = OutlineEntry(path="b/c.md", depth=1, number=1)

        assert render_entry(entry, 0, extension=".md") == "   1. [C](./b/c.md)"

    def test_joins_lines_without_trailing_newline(self) -> None:
        """Entries are newline-joined with links relative to the target."""
        entries = [
            OutlineEntry(path="a.livemd", depth=0, number=1),
            OutlineEntry(path="b/c-d.livemd", depth=1, number=1),
            OutlineEntry(path="e.livemd", depth=0, number=2),
        ]

        toc = render_toc(entries, from_depth=1)

        assert toc == (
            "1. [A](./../a.livemd)\n"
            "   1. [C D](./../b/c-d.livemd)\n"
            "2. [E](./../e.livemd)"
        )

    def test_empty_entries(self) -> None:
        """Rendering nothing gives an empty string."""
        assert render_toc([]) == ""
