"""Locate and replace named sections of a markdown document."""

from __future__ import annotations

import re

_MARKER_RE = re.compile(r"#{1,6}")


def section_pattern(header_marker: str, section_title: str) -> re.Pattern[str]:
    """Compile the pattern matching a section's heading line and its body.

    The body runs up to the next heading of the same or a higher level
    (``#`` up to ``len(header_marker)`` hashes) or the end of the text, and
    includes the line break before that heading. A ``\\r`` ending the heading
    line is captured as ``cr``.

    Raises:
        ValueError: If ``header_marker`` is not 1 to 6 ``#`` characters.
    """
    if not _MARKER_RE.fullmatch(header_marker):
        raise ValueError(f"Unsupported header marker: {header_marker!r}")
    level = len(header_marker)
    return re.compile(
        rf"^{re.escape(header_marker)}[ \t]+{re.escape(section_title.strip())}[ \t]*(?P<cr>\r?)$"
        rf"(?P<body>.*?)"
        rf"(?=^#{{1,{level}}}[ \t]|\Z)",
        re.MULTILINE | re.DOTALL,
    )


def find_section(
    content: str, header_marker: str, section_title: str
) -> re.Match[str] | None:
    """Return the match of the first ``{header_marker} {section_title}`` section."""
    return section_pattern(header_marker, section_title).search(content)


def splice_section(
    content: str,
    match: re.Match[str],
    header_marker: str,
    section_title: str,
    replacement: str,
) -> str:
    """Swap the matched heading and body for ``replacement``.

    Line breaks in the written section follow the heading line, so CRLF
    documents stay CRLF.
    """
    newline = "\r\n" if match.group("cr") else "\n"
    body = replacement.replace("\r\n", "\n").replace("\n", newline)
    heading = f"{header_marker} {section_title.strip()}"
    return f"{content[:match.start()]}{heading}{newline}{body}{newline}{content[match.end():]}"


def replace_section(
    content: str,
    header_marker: str,
    section_title: str,
    replacement: str,
) -> str:
    """Replace the body of the first ``{header_marker} {section_title}`` section.

    The heading is normalized to ``{header_marker} {section_title}`` and the
    body becomes ``replacement`` followed by exactly one newline, so applying
    the same replacement twice gives the same text. Content without a
    matching heading is returned unchanged.
    """
    match = find_section(content, header_marker, section_title)
    if match is None:
        return content
    return splice_section(content, match, header_marker, section_title, replacement)
