"""Casing converters and the wordlists that drive them."""

from .lexicon import (
    DEFAULT_SENTENCE_LEXICON,
    DEFAULT_TITLE_LEXICON,
    DefaultSentenceCaseLexicon,
    DefaultTitleCaseLexicon,
    SentenceCaseLexicon,
    TitleCaseLexicon,
    extend_sentence_lexicon,
    extend_title_lexicon,
)
from .options import DEFAULT_CULTURE, SentenceCaseOptions, TitleCaseOptions
from .sentence import SentenceCaseConverter, sentence_case
from .textcase import to_lower, to_upper
from .title import TitleCaseConverter, title_case

__all__ = [
    "DEFAULT_CULTURE",
    "DEFAULT_SENTENCE_LEXICON",
    "DEFAULT_TITLE_LEXICON",
    "DefaultSentenceCaseLexicon",
    "DefaultTitleCaseLexicon",
    "SentenceCaseConverter",
    "SentenceCaseLexicon",
    "SentenceCaseOptions",
    "TitleCaseConverter",
    "TitleCaseLexicon",
    "TitleCaseOptions",
    "extend_sentence_lexicon",
    "extend_title_lexicon",
    "sentence_case",
    "title_case",
    "to_lower",
    "to_upper",
]
