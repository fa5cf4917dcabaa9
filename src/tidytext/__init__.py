"""tidytext: punctuation spacing, sentence case and title case for prose.

The engines never corrupt technical tokens: URLs, emails, paths, versions,
times, IPv6 literals, decimals and code spans survive byte for byte.

>>> from tidytext import fix_punctuation_spacing, sentence_case, title_case
>>> fix_punctuation_spacing("Hello ,world!")
'Hello, world!'
>>> sentence_case("I LOVE my IPHONE. it WORKS")
'I love my iPhone. It works'
>>> title_case("a guide to the in-depth review")
'A Guide to the In-Depth Review'
"""

from .casing import (
    DEFAULT_SENTENCE_LEXICON,
    DEFAULT_TITLE_LEXICON,
    SentenceCaseConverter,
    SentenceCaseOptions,
    TitleCaseConverter,
    TitleCaseOptions,
    extend_sentence_lexicon,
    extend_title_lexicon,
    sentence_case,
    title_case,
)
from .config import ConfigModel, load_config
from .pipeline import CleanResult, clean
from .preprocess import fix_punctuation_spacing

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SENTENCE_LEXICON",
    "DEFAULT_TITLE_LEXICON",
    "CleanResult",
    "ConfigModel",
    "SentenceCaseConverter",
    "SentenceCaseOptions",
    "TitleCaseConverter",
    "TitleCaseOptions",
    "__version__",
    "clean",
    "extend_sentence_lexicon",
    "extend_title_lexicon",
    "fix_punctuation_spacing",
    "load_config",
    "sentence_case",
    "title_case",
]
