"""Plain-text read/write helpers.

Files are read and written without any content normalization: newline
sequences survive as stored and a UTF-8 byte-order mark is consumed on
read.  The path ``-`` stands for standard input or standard output.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

PathLikeStr = os.PathLike[str]

STDIO = "-"


def _is_stdio(path: str | PathLikeStr) -> bool:
    return os.fspath(path) == STDIO


def read_text(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> str:
    """Read a plain-text file as-is.

    Parameters
    ----------
    path:
        Path to the file on disk, or ``"-"`` for standard input.
    encoding:
        Text encoding.  Defaults to ``"utf-8-sig"`` so that a BOM is consumed.
    errors:
        Error handling strategy passed to :func:`open`.

    ``FileNotFoundError`` and other I/O errors propagate to the caller.
    """

    if _is_stdio(path):
        return sys.stdin.read()
    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return f.read()


def write_text(
    path: str | PathLikeStr,
    text: str,
    *,
    encoding: str = "utf-8",
    newline: str | None = "",
) -> None:
    """Write ``text`` to ``path`` exactly as provided.

    Parent directories are created.  ``newline=""`` emits newline characters
    verbatim; ``"-"`` writes to standard output.
    """

    if _is_stdio(path):
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, "w", encoding=encoding, newline=newline) as f:
        f.write(text)


__all__ = ["STDIO", "read_text", "write_text"]
