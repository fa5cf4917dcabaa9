"""Idempotence and protected-token invariance of punctuation spacing.

The fuzz corpus glues realistic fragments together with random separators
and spacing, seeded so that failures reproduce.
"""

from __future__ import annotations

import random

import pytest

from tidytext.preprocess.protected import find_protected_spans
from tidytext.preprocess.spacing import fix_punctuation_spacing

FRAGMENTS = [
    "hello",
    "World",
    "https://ex.com/a?x=1,2&y=3",
    "www.example.org",
    "a.b@foo.bar",
    "example.co.uk",
    "v1.2.3",
    "1,234.56",
    "10:30am",
    "9:15 PM",
    "4:3",
    "2001:db8::1",
    "C:\\Temp\\file.txt",
    "/usr/bin/env",
    "`x = 1, 2`",
    "e.g.",
    "U.S.A.",
    "...",
    "…",
    "it’s",
    "(ref)",
    '"quoted"',
    "“curly”",
    "—",
    "你好",
]
SEPARATORS = ["", " ", "  ", ",", " ,", ".", " .", "!", "?", ";", ":", "\n", " \n"]

CURATED = [
    "Visit https://ex.com/a?x=1,2&y=3.Please  Now…OK?",
    "Note:Important. Key : Value. Title:\"Quote\"",
    "Stamp 2025-08-26T10:05:01+06:00.Ok",
    "He ended.”Yes”OK",
    "Start.\n```\na=1,b=2\nc.d()\n```\nThen,go.",
    "Use e.g.,this and U.S.A.,rocks",
    "I ’ll go , we ’re here",
    "Ratio 1 :3.5 today",
    "Host:fe80::1e.g.",
    "Mix 1:2.5 parts",
    "Meet at 10:305.1 now",
    "Key :v2.0.1 and 1 :2.5",
    "addr:fe80::1 done, ok:2001:db8::8.Next",
]


def _random_text(rng: random.Random) -> str:
    parts: list[str] = []
    for _ in range(rng.randint(2, 12)):
        parts.append(rng.choice(FRAGMENTS))
        parts.append(rng.choice(SEPARATORS))
    return "".join(parts)


def _fuzz_corpus(seed: int = 1234, size: int = 300) -> list[str]:
    rng = random.Random(seed)
    return [_random_text(rng) for _ in range(size)]


@pytest.mark.parametrize("colon", [False, True])
@pytest.mark.parametrize("text", CURATED)
def test_curated_idempotent(text: str, colon: bool) -> None:
    once = fix_punctuation_spacing(text, colon)
    assert fix_punctuation_spacing(once, colon) == once


@pytest.mark.parametrize("colon", [False, True])
def test_fuzz_idempotent(colon: bool) -> None:
    for text in _fuzz_corpus():
        once = fix_punctuation_spacing(text, colon)
        assert fix_punctuation_spacing(once, colon) == once, repr(text)


@pytest.mark.parametrize(
    ("text", "token"),
    [
        ("Visit https://ex.com/a?x=1,2&y=3.Please", "https://ex.com/a?x=1,2&y=3"),
        ("Email a.b-c+d@foo.bar,now", "a.b-c+d@foo.bar"),
        ("Open C:\\Temp\\file.txt,ok", "C:\\Temp\\file.txt"),
        ("Ping 2001:db8::1.Ok", "2001:db8::1"),
        ("v1.2.3,and", "v1.2.3"),
        ("Use `a ,b  c` ,ok", "`a ,b  c`"),
        ("Total 1,234.56 ,ok", "1,234.56"),
    ],
)
def test_protected_token_survives(text: str, token: str) -> None:
    for colon in (False, True):
        assert token in fix_punctuation_spacing(text, colon)


def test_protected_spans_reported_in_priority_order() -> None:
    text = "See https://x.org/a,b and a@b.co at 10:30 in v2.0"
    kinds = [kind for kind, _, _ in find_protected_spans(text)]
    assert kinds == ["url", "email", "ipv6", "version"]


def test_protected_span_bounds() -> None:
    text = "Mail a@b.co now"
    spans = find_protected_spans(text)
    assert spans == [("email", 5, 11)]
    assert text[5:11] == "a@b.co"


def test_ratio_decimal_reported_as_version() -> None:
    assert find_protected_spans("Mix 1:2.5 parts") == [("version", 6, 9)]
