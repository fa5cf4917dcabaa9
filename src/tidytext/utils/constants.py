"""Shared character tables and helpers for the scanners.

The spacing engine and both casing converters classify characters through
the sets and predicates defined here so that the three scanners agree on
what counts as a word character, an apostrophe or a closing bracket.
"""

from __future__ import annotations

__all__ = [
    "APOSTROPHES",
    "CLOSING_BRACKETS",
    "OPENING_QUOTES",
    "SENTENCE_PUNCT",
    "SENTENCE_TERMINATORS",
    "FULLWIDTH_TERMINATORS",
    "URL_TRAILING_PUNCT",
    "BRACKET_PAIRS",
    "is_word_char",
    "is_digit",
    "is_hex_digit",
    "unify_newlines",
    "url_rtrim_index",
]

APOSTROPHES: frozenset[str] = frozenset("'’")
CLOSING_BRACKETS: frozenset[str] = frozenset(")]}»”’")
OPENING_QUOTES: frozenset[str] = frozenset('"\'“‘«')

SENTENCE_TERMINATORS: frozenset[str] = frozenset(".!?")
FULLWIDTH_TERMINATORS: frozenset[str] = frozenset("。！？")
SENTENCE_PUNCT: frozenset[str] = frozenset(",.!?;") | FULLWIDTH_TERMINATORS

URL_TRAILING_PUNCT: frozenset[str] = frozenset(".,!?;:)]}»”’\"'…")
BRACKET_PAIRS: dict[str, str] = {")": "(", "]": "[", "}": "{"}

_HEX = frozenset("0123456789abcdefABCDEF")


def is_word_char(ch: str) -> bool:
    """Return ``True`` for letters, digits and underscore."""

    return ch.isalnum() or ch == "_"


def is_digit(ch: str) -> bool:
    return ch.isdecimal()


def is_hex_digit(ch: str) -> bool:
    return ch in _HEX


def unify_newlines(text: str) -> str:
    """Convert ``\\r\\n`` and lone ``\\r`` to ``\\n``."""

    return text.replace("\r\n", "\n").replace("\r", "\n")


def url_rtrim_index(text: str, start: int, end: int) -> int:
    """Return ``end`` moved left past punctuation that trails a URL in prose.

    A closing bracket is kept when the token ``text[start:end]`` contains an
    unmatched opener of the same kind, e.g. ``https://x.org/Foo_(bar)``.
    """

    while end > start and text[end - 1] in URL_TRAILING_PUNCT:
        tail = text[end - 1]
        opener = BRACKET_PAIRS.get(tail)
        if opener is not None:
            body = text[start : end - 1]
            if body.count(opener) > body.count(tail):
                break
        end -= 1
    return end
