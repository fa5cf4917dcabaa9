"""Wordlists that parameterize the casing converters.

Two protocols describe what a converter needs to know:

* :class:`SentenceCaseLexicon` – abbreviations that do not end a sentence,
  whitelisted acronyms, short words that are never acronyms, names and
  brands with canonical casing, honorifics.
* :class:`TitleCaseLexicon` – AP "small words" and tokens that must never be
  rewritten.

Case-insensitive sets hold lowercase entries and are checked against the
lowercased token.  ``upper_short_stopwords``, ``upper_acronyms`` and
``protected_as_is`` are exact-case.  ``proper_case_map`` is keyed by the
lowercase form and yields the canonical spelling.

Lexicons are immutable once built.  Callers extend the defaults with
:func:`extend_sentence_lexicon` / :func:`extend_title_lexicon`, which return
new objects and leave the base untouched, so one lexicon can be shared by
any number of converters on any number of threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Protocol, runtime_checkable

__all__ = [
    "SentenceCaseLexicon",
    "TitleCaseLexicon",
    "DefaultSentenceCaseLexicon",
    "DefaultTitleCaseLexicon",
    "DEFAULT_SENTENCE_LEXICON",
    "DEFAULT_TITLE_LEXICON",
    "extend_sentence_lexicon",
    "extend_title_lexicon",
    "lookup_proper_case",
]


@runtime_checkable
class SentenceCaseLexicon(Protocol):
    """Wordlists and tokens that guide sentence casing."""

    @property
    def non_terminal_abbreviations(self) -> frozenset[str]: ...

    @property
    def upper_short_stopwords(self) -> frozenset[str]: ...

    @property
    def upper_acronyms(self) -> frozenset[str]: ...

    @property
    def proper_case_tokens(self) -> frozenset[str]: ...

    @property
    def brand_tokens(self) -> frozenset[str]: ...

    @property
    def brand_suffixes(self) -> frozenset[str]: ...

    @property
    def honorific_bases(self) -> frozenset[str]: ...

    @property
    def proper_case_map(self) -> Mapping[str, str]: ...


@runtime_checkable
class TitleCaseLexicon(Protocol):
    """Word lists that guide AP-style title case."""

    @property
    def small_words(self) -> frozenset[str]: ...

    @property
    def protected_as_is(self) -> frozenset[str]: ...


def _folded(words: Iterable[str]) -> frozenset[str]:
    return frozenset(w.lower() for w in words)


def _canonical_map(words: Iterable[str]) -> Mapping[str, str]:
    return MappingProxyType({w.lower(): w for w in words})


# Dotted forms are stored without the final dot: "p.m." -> "p.m".
_NON_TERMINAL_ABBREVIATIONS = _folded(
    [
        "mr", "mrs", "ms", "mx", "dr", "prof", "sr", "jr", "st", "rev",
        "gen", "capt", "sgt", "lt", "col", "gov", "sen", "rep", "hon",
        "vs", "v", "etc", "approx", "dept",
        "e.g", "eg", "i.e", "ie", "cf", "al",
        "a.m", "p.m",
        "u.s", "u.s.a", "u.k", "u.n", "e.u", "a.i",
    ]
)

_HONORIFIC_BASES = _folded(
    [
        "mr", "mrs", "ms", "mx", "dr", "prof", "sr", "jr", "st", "rev",
        "gen", "capt", "sgt", "lt", "col", "gov", "sen", "rep", "hon",
    ]
)

_UPPER_SHORT_STOPWORDS = frozenset(
    [
        # articles, conjunctions, prepositions
        "A", "AN", "THE", "AND", "OR", "NOR", "BUT", "SO",
        "TO", "IN", "ON", "AT", "OF", "BY", "AS",
        "IS", "AM", "ARE", "WAS", "WERE", "BE", "BEEN",
        "DO", "DID", "DONE",
        "FOR", "FROM", "WITH", "WITHOUT", "OVER", "UNDER",
        "OUT", "OFF", "UP", "DOWN",
        "NEW", "ALL", "ANY", "NOT", "ONE", "TWO",
        # pronouns and determiners
        "I", "ME", "MY", "YOU", "YOUR", "WE", "US", "OUR",
        "HE", "HIM", "HIS", "SHE", "HER", "IT", "ITS",
        "THEY", "THEM", "THEIR", "THIS", "THAT", "THESE", "THOSE",
        # comparatives, conditionals, misc
        "IF", "THAN", "THEN", "PER", "ET", "AL",
        # short modals and auxiliaries
        "CAN", "MAY", "HAS", "HAD", "YES", "NO", "OK",
    ]
)

_UPPER_ACRONYMS = frozenset(
    [
        # 2-3 letters
        "AI", "ML", "AP", "API", "SDK", "CLI", "UI", "UX", "ID", "IP",
        "DNS", "TCP", "UDP", "SSL", "TLS", "SSH", "FTP", "URL", "PDF",
        "CPU", "GPU", "TPU", "RAM", "ROM", "SSD", "HDD", "USB", "WPF",
        "GPT", "LLM", "NLP", "USA", "UK", "EU", "UN", "UAE", "SLS",
        "CEO", "CTO", "FAQ", "FBI", "CIA", "BBC", "CNN", "NBA", "NFL",
        # trusted 4+ letters
        "NASA", "HTTP", "HTTPS", "HTML", "JSON", "XML", "YAML", "SQL",
        "UUID", "GUID", "JPEG", "PNG", "WASM", "WLAN", "SSID", "NATO",
    ]
)

_PROPER_CASE_TOKENS = _folded(
    [
        "Claude", "Sonnet", "Gemini", "Linux", "Microsoft",
        "Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
        "Saturday", "Sunday", "January", "February", "April",
        "June", "July", "September", "October",
        "November", "December", "English",
    ]
)

_BRAND_TOKENS = _folded(
    [
        "Claude", "Gemini", "iPhone", "iPad", "Pixel", "Galaxy",
        "MacBook", "ThinkPad", "Surface", "Xbox", "PlayStation",
    ]
)

_BRAND_SUFFIXES = _folded(["Pro", "Max", "Ultra", "Plus", "Mini", "Air", "Lite"])

_PROPER_CASE_MAP = _canonical_map(
    [
        "iPhone", "iPad", "iPod", "iOS", "iPadOS", "macOS", "watchOS",
        "tvOS", "iCloud", "iTunes", "iMac", "MacBook", "AirPods",
        "YouTube", "GitHub", "GitLab", "LinkedIn", "PayPal", "eBay",
        "OpenAI", "ChatGPT", "DeepMind", "PlayStation", "Xbox",
        "JavaScript", "TypeScript", "PowerShell", "PyTorch", "TensorFlow",
        "NumPy", "WordPress", "WhatsApp", "TikTok", "FedEx",
        "McDonald", "MacDonald",
    ]
)

_SMALL_WORDS = _folded(
    [
        "a", "an", "the",
        "and", "but", "for", "nor", "or", "so", "yet",
        "as", "at", "by", "in", "of", "off", "on", "per", "to", "up", "via",
        "vs",
    ]
)


@dataclass(slots=True, frozen=True)
class DefaultSentenceCaseLexicon:
    """Stock sentence-case lexicon; see module docstring for case rules."""

    non_terminal_abbreviations: frozenset[str] = _NON_TERMINAL_ABBREVIATIONS
    upper_short_stopwords: frozenset[str] = _UPPER_SHORT_STOPWORDS
    upper_acronyms: frozenset[str] = _UPPER_ACRONYMS
    proper_case_tokens: frozenset[str] = _PROPER_CASE_TOKENS
    brand_tokens: frozenset[str] = _BRAND_TOKENS
    brand_suffixes: frozenset[str] = _BRAND_SUFFIXES
    honorific_bases: frozenset[str] = _HONORIFIC_BASES
    proper_case_map: Mapping[str, str] = field(default_factory=lambda: _PROPER_CASE_MAP)


@dataclass(slots=True, frozen=True)
class DefaultTitleCaseLexicon:
    """AP-ish title lexicon: articles, coordinating conjunctions and
    prepositions of three letters or fewer, plus ``vs``.

    Verbs and adverbs such as "is", "be", "not" are deliberately absent.
    """

    small_words: frozenset[str] = _SMALL_WORDS
    protected_as_is: frozenset[str] = frozenset()


DEFAULT_SENTENCE_LEXICON = DefaultSentenceCaseLexicon()
DEFAULT_TITLE_LEXICON = DefaultTitleCaseLexicon()


def lookup_proper_case(lexicon: SentenceCaseLexicon, token: str) -> str | None:
    """Return the canonical spelling of ``token`` or ``None``.

    Possessives resolve through their stem so that ``ebay's`` becomes
    ``eBay's`` without a separate entry.  The apostrophe style of the input
    is kept.
    """

    mapping = lexicon.proper_case_map
    key = token.lower()
    hit = mapping.get(key)
    if hit is not None:
        if "’" in token and "'" in hit:
            hit = hit.replace("'", "’")
        return hit
    if len(key) > 2 and key[-1] == "s" and key[-2] in "'’":
        stem = mapping.get(key[:-2])
        if stem is not None:
            return stem + token[-2:]
    return None


def extend_sentence_lexicon(
    base: SentenceCaseLexicon,
    *,
    acronyms: Iterable[str] = (),
    proper_case: Iterable[str] = (),
    abbreviations: Iterable[str] = (),
    honorifics: Iterable[str] = (),
    brands: Iterable[str] = (),
    brand_suffixes: Iterable[str] = (),
) -> DefaultSentenceCaseLexicon:
    """Return a new lexicon with extra entries layered over ``base``.

    ``proper_case`` entries are canonical spellings (``"GitHub"``); they are
    added both to the canonical map and to the mid-sentence name list.
    ``abbreviations`` may be given with or without their final dot.
    """

    proper = list(proper_case)
    merged_map = dict(base.proper_case_map)
    merged_map.update({p.lower(): p for p in proper})
    abbrevs = [a.rstrip(".") for a in abbreviations]
    return DefaultSentenceCaseLexicon(
        non_terminal_abbreviations=base.non_terminal_abbreviations | _folded(abbrevs),
        upper_short_stopwords=base.upper_short_stopwords,
        upper_acronyms=base.upper_acronyms | frozenset(acronyms),
        proper_case_tokens=base.proper_case_tokens | _folded(proper),
        brand_tokens=base.brand_tokens | _folded(brands),
        brand_suffixes=base.brand_suffixes | _folded(brand_suffixes),
        honorific_bases=base.honorific_bases | _folded(honorifics),
        proper_case_map=MappingProxyType(merged_map),
    )


def extend_title_lexicon(
    base: TitleCaseLexicon,
    *,
    small_words: Iterable[str] = (),
    protected: Iterable[str] = (),
) -> DefaultTitleCaseLexicon:
    """Return a new title lexicon with extra small words / protected tokens."""

    template = DefaultTitleCaseLexicon()
    return replace(
        template,
        small_words=base.small_words | _folded(small_words),
        protected_as_is=base.protected_as_is | frozenset(protected),
    )
