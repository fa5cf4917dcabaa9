"""Tests for the stock lexicons and their extension helpers."""

from __future__ import annotations

import dataclasses

import pytest

from tidytext.casing.lexicon import (
    DEFAULT_SENTENCE_LEXICON,
    DEFAULT_TITLE_LEXICON,
    SentenceCaseLexicon,
    TitleCaseLexicon,
    extend_sentence_lexicon,
    extend_title_lexicon,
    lookup_proper_case,
)
from tidytext.casing.options import SentenceCaseOptions
from tidytext.casing.sentence import SentenceCaseConverter


def test_defaults_satisfy_protocols() -> None:
    assert isinstance(DEFAULT_SENTENCE_LEXICON, SentenceCaseLexicon)
    assert isinstance(DEFAULT_TITLE_LEXICON, TitleCaseLexicon)


def test_case_insensitive_sets_are_lowercase() -> None:
    lex = DEFAULT_SENTENCE_LEXICON
    for words in (
        lex.non_terminal_abbreviations,
        lex.proper_case_tokens,
        lex.brand_tokens,
        lex.brand_suffixes,
        lex.honorific_bases,
    ):
        assert all(w == w.lower() for w in words)
    assert all(k == k.lower() for k in lex.proper_case_map)
    assert all(w == w.lower() for w in DEFAULT_TITLE_LEXICON.small_words)


def test_exact_case_sets_are_uppercase() -> None:
    assert "GPU" in DEFAULT_SENTENCE_LEXICON.upper_acronyms
    assert "gpu" not in DEFAULT_SENTENCE_LEXICON.upper_acronyms
    assert "TO" in DEFAULT_SENTENCE_LEXICON.upper_short_stopwords


def test_honorifics_are_non_terminal() -> None:
    lex = DEFAULT_SENTENCE_LEXICON
    assert lex.honorific_bases <= lex.non_terminal_abbreviations


def test_lexicon_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_SENTENCE_LEXICON.upper_acronyms = frozenset()  # type: ignore[misc]
    with pytest.raises(TypeError):
        DEFAULT_SENTENCE_LEXICON.proper_case_map["foo"] = "Foo"  # type: ignore[index]


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("iphone", "iPhone"),
        ("IPHONE", "iPhone"),
        ("ebay's", "eBay's"),
        ("ebay’s", "eBay’s"),
        ("macdonald's", "MacDonald's"),
        ("banana", None),
        ("s", None),
    ],
)
def test_lookup_proper_case(token: str, expected: str | None) -> None:
    assert lookup_proper_case(DEFAULT_SENTENCE_LEXICON, token) == expected


def test_extend_sentence_lexicon_does_not_mutate_base() -> None:
    extended = extend_sentence_lexicon(
        DEFAULT_SENTENCE_LEXICON,
        acronyms=["KPI"],
        proper_case=["GraphQL"],
        abbreviations=["approx.", "Fig."],
        honorifics=["Sir"],
        brands=["Kindle"],
        brand_suffixes=["Oasis"],
    )
    assert "KPI" in extended.upper_acronyms
    assert "KPI" not in DEFAULT_SENTENCE_LEXICON.upper_acronyms
    assert extended.proper_case_map["graphql"] == "GraphQL"
    assert "graphql" not in DEFAULT_SENTENCE_LEXICON.proper_case_map
    assert "fig" in extended.non_terminal_abbreviations
    assert "sir" in extended.honorific_bases
    assert "kindle" in extended.brand_tokens
    assert "oasis" in extended.brand_suffixes


def test_extended_lexicon_drives_converter() -> None:
    lex = extend_sentence_lexicon(
        DEFAULT_SENTENCE_LEXICON, acronyms=["KPI"], proper_case=["GraphQL"]
    )
    conv = SentenceCaseConverter(lex, SentenceCaseOptions())
    assert conv.convert("our KPI uses graphql.") == "Our KPI uses GraphQL."


def test_extend_title_lexicon() -> None:
    extended = extend_title_lexicon(DEFAULT_TITLE_LEXICON, small_words=["Into"], protected=["pH"])
    assert "into" in extended.small_words
    assert "into" not in DEFAULT_TITLE_LEXICON.small_words
    assert extended.protected_as_is == frozenset({"pH"})
