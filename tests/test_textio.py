"""Tests for plain-text read/write helpers."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

from tidytext.textio import read_text, write_text


def test_roundtrip_preserves_newlines(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "out.txt"
    text = "a\r\nb\nc\rd"
    write_text(path, text)
    assert path.read_bytes() == text.encode("utf-8")
    assert read_text(path) == text


def test_bom_is_consumed(tmp_path: Path) -> None:
    path = tmp_path / "bom.txt"
    path.write_bytes("﻿hello".encode("utf-8"))
    assert read_text(path) == "hello"


def test_dash_means_stdio(monkeypatch: Any, capsys: Any) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("from stdin"))
    assert read_text("-") == "from stdin"
    write_text("-", "to stdout")
    assert capsys.readouterr().out == "to stdout"
