"""Tests for the command line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from livetoc.cli import main


def _args(root: Path, *extra: str) -> list[str]:
    return [str(root), "--extension", ".livemd", *extra]


def test_updates_documents(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(_args(docs_root)) == 0

    assert "Updated 5 of 5 documents." in capsys.readouterr().out
    assert "2. [G](./../g.livemd)" in (docs_root / "b" / "c.livemd").read_text(encoding="utf-8")


def test_print_shows_root_toc(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(_args(docs_root, "--print")) == 0

    out = capsys.readouterr().out
    assert out.startswith("1. [A Intro](./a-intro.livemd)\n")
    assert "## Index\n\n" in (docs_root / "g.livemd").read_text(encoding="utf-8")


def test_check_reports_stale_documents(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    before = (docs_root / "g.livemd").read_text(encoding="utf-8")

    assert main(_args(docs_root, "--check")) == 1

    assert "TOC out of date" in capsys.readouterr().err
    assert (docs_root / "g.livemd").read_text(encoding="utf-8") == before


def test_check_passes_after_update(docs_root: Path) -> None:
    main(_args(docs_root))

    assert main(_args(docs_root, "--check")) == 0


def test_missing_root_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(_args(tmp_path / "missing")) == 2

    assert "Documentation root not found" in capsys.readouterr().err


def test_invalid_marker_exits_with_error(docs_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(_args(docs_root, "--marker", "==")) == 2

    assert "Unsupported header marker" in capsys.readouterr().err


def test_unknown_log_level(docs_root: Path) -> None:
    with pytest.raises(SystemExit):
        main(_args(docs_root, "--log-level", "LOUD"))
