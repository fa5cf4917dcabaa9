"""Whitespace and line-break cleanup.

These are the blunt, whole-text cleanups that run before punctuation spacing.
Each helper is pure and returns a new string; ``None``-like empty input is
returned unchanged.

Notes
-----
:func:`remove_multiple_lines` treats lines holding only spaces or tabs as
blank, so ``"a\\n  \\n\\n b"`` becomes ``"a\\n\\n b"``; the indentation of the
first non-blank line is kept.
"""

from __future__ import annotations

import re

__all__ = [
    "trim",
    "trim_start",
    "trim_end",
    "remove_multiple_spaces",
    "remove_multiple_lines",
    "remove_all_line_breaks",
]

_LINE_BREAK = r"(?:\r\n|\r|\n)"
_MULTIPLE_SPACES_RE = re.compile(r" {2,}")
_MULTIPLE_LINES_RE = re.compile(_LINE_BREAK + r"(?:[^\S\r\n]*" + _LINE_BREAK + r")+")
_LINE_BREAK_RE = re.compile(_LINE_BREAK)


def trim(text: str) -> str:
    return text.strip() if text else text


def trim_start(text: str) -> str:
    return text.lstrip() if text else text


def trim_end(text: str) -> str:
    return text.rstrip() if text else text


def remove_multiple_spaces(text: str) -> str:
    """Collapse runs of two or more plain spaces into one.  Tabs are kept."""

    if not text:
        return text
    return _MULTIPLE_SPACES_RE.sub(" ", text)


def remove_multiple_lines(text: str) -> str:
    """Replace two or more consecutive line breaks with one blank line."""

    if not text:
        return text
    return _MULTIPLE_LINES_RE.sub("\n\n", text)


def remove_all_line_breaks(text: str) -> str:
    """Delete every ``\\r\\n``, ``\\r`` and ``\\n``; nothing is inserted."""

    if not text:
        return text
    return _LINE_BREAK_RE.sub("", text)
