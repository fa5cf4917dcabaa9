"""Tests for the casing primitives shared by both converters."""

from __future__ import annotations

import pytest

from tidytext.casing.textcase import (
    cap_with_apostrophes,
    is_camel_or_mixed,
    is_turkic,
    is_upper_word,
    looks_like_contraction,
    to_lower,
    to_upper,
    upper_first_lower_rest,
)


@pytest.mark.parametrize(
    ("culture", "expected"),
    [("tr-TR", True), ("az", True), ("tr_TR", True), ("en-US", False), ("", False), (None, False)],
)
def test_is_turkic(culture: str | None, expected: bool) -> None:
    assert is_turkic(culture) is expected


def test_turkic_casing() -> None:
    assert to_upper("istanbul", "tr-TR") == "İSTANBUL"
    assert to_lower("ISPARTA", "tr-TR") == "ısparta"
    assert to_lower("İzmir", "tr-TR") == "izmir"
    assert to_upper("istanbul", "en-US") == "ISTANBUL"


def test_upper_first_lower_rest() -> None:
    assert upper_first_lower_rest("hELLO") == "Hello"
    assert upper_first_lower_rest("") == ""


@pytest.mark.parametrize(
    ("token", "tails", "expected"),
    [
        ("o'neill", False, "O'Neill"),
        ("d’angelo", False, "D’Angelo"),
        ("don't", True, "Don't"),
        ("we’re", True, "We’re"),
        ("o'reilly's", True, "O'Reilly's"),
        ("15th", False, "15th"),
    ],
)
def test_cap_with_apostrophes(token: str, tails: bool, expected: str) -> None:
    assert cap_with_apostrophes(token, keep_tails_lower=tails) == expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [("GPU", True), ("NASA", True), ("A", False), ("Gpu", False), ("4K", False)],
)
def test_is_upper_word(token: str, expected: bool) -> None:
    assert is_upper_word(token) is expected


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("iPhone", True),
        ("eBay", True),
        ("McDonald", True),
        ("OpenAI", True),
        ("hello", False),
        ("Hello", False),
        ("HELLO", False),
        ("tEsT", False),
        ("CaSe", False),
    ],
)
def test_is_camel_or_mixed(token: str, expected: bool) -> None:
    assert is_camel_or_mixed(token) is expected


def test_camel_rejects_upper_tail_when_asked() -> None:
    assert is_camel_or_mixed("inPUT", reject_upper_tail=True) is False
    assert is_camel_or_mixed("OpenAI", reject_upper_tail=True) is False


@pytest.mark.parametrize(
    ("token", "expected"),
    [("it's", True), ("we’re", True), ("o'clock", True), ("o'neill", False), ("'tis", False)],
)
def test_looks_like_contraction(token: str, expected: bool) -> None:
    assert looks_like_contraction(token) is expected
