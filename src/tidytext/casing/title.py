"""AP-style headline (title) case.

:class:`TitleCaseConverter` first collects word spans (letters and digits
joined by internal apostrophes or hyphens), then rewrites each word in
isolation.  The text between words is copied verbatim, so spacing, newlines
and symbols are untouched.

Before the per-word rules run, a few contiguous shapes are recognised:

* email-like runs (``user@example.com``) are copied unchanged;
* words inside scheme or ``www.`` URLs are copied unchanged;
* a single letter touching ``&`` is uppercased (``Q&A``, ``R&D``);
* a word directly followed by ``^`` is a math variable and is uppercased
  (``x^2`` -> ``X^2``).

The per-word rules, first match wins:

1. tokens in ``protected_as_is`` are left alone;
2. hyphenated compounds are split and each segment goes through rules 3-8,
   with the first segment always capitalized and interior small words
   lowercased;
3. canonical spellings from the shared lexicon (``iphone`` -> ``iPhone``);
4. whitelisted acronyms (``gpu`` -> ``GPU``);
5. deliberate camel or mixed case (``eBay``);
6. small words are lowercased unless forced (first word, last word, after a
   colon, first word of a line); a single letter in an ``A to Z`` pattern is
   still uppercased;
7. single letters are uppercased;
8. otherwise the first letter and any letter after an apostrophe are
   capitalized, except contraction tails (``don't``, ``rock ’n’ roll``).
"""

from __future__ import annotations

from dataclasses import dataclass

from tidytext.casing.lexicon import (
    DEFAULT_SENTENCE_LEXICON,
    DEFAULT_TITLE_LEXICON,
    SentenceCaseLexicon,
    TitleCaseLexicon,
    lookup_proper_case,
)
from tidytext.casing.options import TitleCaseOptions
from tidytext.casing.textcase import (
    cap_with_apostrophes,
    is_camel_or_mixed,
    to_lower,
    to_upper,
)
from tidytext.preprocess.protected import consume_url
from tidytext.utils.constants import APOSTROPHES, is_word_char
from tidytext.utils.errors import (
    InvalidLexiconError,
    MissingLexiconError,
    MissingOptionsError,
)

__all__ = ["TitleCaseConverter", "title_case"]

_JOINERS = frozenset("'’-")
_EMAIL_LOCAL_GAPS = frozenset("._%+")
_EMAIL_DOMAIN_GAPS = frozenset(".@")


@dataclass(slots=True, frozen=True)
class _Word:
    start: int
    end: int
    first: bool
    last: bool
    after_colon: bool


def _collect_word_spans(text: str) -> list[tuple[int, int]]:
    spans: list[tuple[int, int]] = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        leading_apostrophe = (
            ch in APOSTROPHES
            and (i == 0 or not is_word_char(text[i - 1]))
            and i + 1 < n
            and text[i + 1].isalpha()
        )
        if not (ch.isalnum() or leading_apostrophe):
            i += 1
            continue
        start = i
        i += 1
        while i < n and (
            text[i].isalnum()
            or (text[i] in _JOINERS and i + 1 < n and text[i + 1].isalnum())
        ):
            i += 1
        spans.append((start, i))
    return spans


def _email_word_indexes(text: str, spans: list[tuple[int, int]]) -> set[int]:
    """Return indexes of words that belong to an email-like run."""

    marked: set[int] = set()
    for k in range(len(spans) - 1):
        end = spans[k][1]
        if end >= len(text) or text[end] != "@" or spans[k + 1][0] != end + 1:
            continue
        marked.update((k, k + 1))
        j = k
        while j > 0 and spans[j][0] - spans[j - 1][1] == 1:
            if text[spans[j - 1][1]] not in _EMAIL_LOCAL_GAPS:
                break
            j -= 1
            marked.add(j)
        j = k + 1
        while j + 1 < len(spans) and spans[j + 1][0] - spans[j][1] == 1:
            if text[spans[j][1]] not in _EMAIL_DOMAIN_GAPS:
                break
            j += 1
            marked.add(j)
    return marked


def _url_word_indexes(text: str, spans: list[tuple[int, int]]) -> set[int]:
    """Return indexes of words that fall inside a scheme or ``www.`` URL."""

    urls: list[tuple[int, int]] = []
    for start, _ in spans:
        if urls and start < urls[-1][1]:
            continue
        end = consume_url(text, start)
        if end is not None:
            urls.append((start, end))
    marked: set[int] = set()
    k = 0
    for idx, (start, end) in enumerate(spans):
        while k < len(urls) and urls[k][1] <= start:
            k += 1
        if k < len(urls) and urls[k][0] <= start and end <= urls[k][1]:
            marked.add(idx)
    return marked


class TitleCaseConverter:
    """Rewrite text in AP headline style."""

    def __init__(
        self,
        title_lexicon: TitleCaseLexicon,
        common_lexicon: SentenceCaseLexicon,
        options: TitleCaseOptions,
    ) -> None:
        if title_lexicon is None or common_lexicon is None:
            raise MissingLexiconError("title case needs a title lexicon and a common lexicon")
        if not isinstance(title_lexicon, TitleCaseLexicon):
            raise InvalidLexiconError(
                f"{type(title_lexicon).__name__} does not provide the title-case wordlists"
            )
        if not isinstance(common_lexicon, SentenceCaseLexicon):
            raise InvalidLexiconError(
                f"{type(common_lexicon).__name__} does not provide the sentence-case wordlists"
            )
        if options is None:
            raise MissingOptionsError("title-case options are required")
        self._title_lexicon = title_lexicon
        self._common_lexicon = common_lexicon
        self._options = options

    @classmethod
    def default(cls) -> TitleCaseConverter:
        """Return the shared converter built from the stock lexicons."""

        return _DEFAULT_CONVERTER

    @property
    def options(self) -> TitleCaseOptions:
        return self._options

    def convert(self, text: str, culture: str | None = None) -> str:
        """Return ``text`` in title case.  Line endings are kept as typed."""

        if not text:
            return text
        culture = culture or self._options.culture
        spans = _collect_word_spans(text)
        if not spans:
            return text
        verbatim = _email_word_indexes(text, spans) | _url_word_indexes(text, spans)
        words = self._annotate(text, spans)

        out: list[str] = []
        pos = 0
        for idx, word in enumerate(words):
            out.append(text[pos : word.start])
            token = text[word.start : word.end]
            if idx in verbatim:
                out.append(token)
            elif self._touches_ampersand(text, word):
                out.append(to_upper(token, culture))
            elif word.end < len(text) and text[word.end] == "^":
                out.append(to_upper(token, culture))
            else:
                letter_name = self._in_letter_name_context(text, words, idx)
                out.append(self._process_word(token, word, letter_name, culture))
            pos = word.end
        out.append(text[pos:])
        return "".join(out)

    # ------------------------------------------------------------------
    # Word context
    # ------------------------------------------------------------------
    def _annotate(self, text: str, spans: list[tuple[int, int]]) -> list[_Word]:
        words: list[_Word] = []
        prev_end = 0
        last = len(spans) - 1
        for idx, (start, end) in enumerate(spans):
            gap = text[prev_end:start]
            line_start = "\n" in gap or "\r" in gap
            after_colon = self._options.capitalize_after_colon and ":" in gap
            words.append(
                _Word(
                    start=start,
                    end=end,
                    first=idx == 0 or line_start,
                    last=idx == last,
                    after_colon=after_colon,
                )
            )
            prev_end = end
        return words

    @staticmethod
    def _touches_ampersand(text: str, word: _Word) -> bool:
        if word.end - word.start != 1 or not text[word.start].isalpha():
            return False
        before = word.start > 0 and text[word.start - 1] == "&"
        after = word.end < len(text) and text[word.end] == "&"
        return before or after

    @staticmethod
    def _in_letter_name_context(text: str, words: list[_Word], idx: int) -> bool:
        """``a`` in ``from a to z``: a single letter paired with another via "to"."""

        def single_letter(k: int) -> bool:
            if not 0 <= k < len(words):
                return False
            w = words[k]
            return w.end - w.start == 1 and text[w.start].isalpha()

        def is_to(k: int) -> bool:
            return 0 <= k < len(words) and text[words[k].start : words[k].end].lower() == "to"

        if not single_letter(idx):
            return False
        return (is_to(idx + 1) and single_letter(idx + 2)) or (
            is_to(idx - 1) and single_letter(idx - 2)
        )

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------
    def _process_word(self, token: str, word: _Word, letter_name: bool, culture: str) -> str:
        opts = self._options
        if token in self._title_lexicon.protected_as_is:
            return token
        forced = word.after_colon or (opts.force_cap_first_and_last and (word.first or word.last))
        if "-" in token and opts.capitalize_hyphenated_segments:
            return self._process_compound(token, forced, culture)
        return self._process_segment(token, forced, letter_name, culture)

    def _process_compound(self, token: str, forced: bool, culture: str) -> str:
        segments = token.split("-")
        parts = [
            self._process_segment(seg, idx == 0 or forced, False, culture)
            for idx, seg in enumerate(segments)
        ]
        small = self._title_lexicon.small_words
        for idx in range(1, len(segments) - 1):
            if segments[idx].lower() in small:
                parts[idx] = to_lower(segments[idx], culture)
        return "-".join(parts)

    def _process_segment(self, seg: str, forced: bool, letter_name: bool, culture: str) -> str:
        opts = self._options
        if seg in self._title_lexicon.protected_as_is:
            return seg

        mapped = lookup_proper_case(self._common_lexicon, seg)
        if mapped is not None:
            return mapped

        if opts.preserve_acronyms:
            upper = seg.upper()
            if any(ch.isalpha() for ch in seg) and upper in self._common_lexicon.upper_acronyms:
                return upper

        if opts.preserve_camel_or_mixed_case and is_camel_or_mixed(seg, reject_upper_tail=True):
            return seg

        single_letter = len(seg) == 1 and seg.isalpha()
        if seg.lower() in self._title_lexicon.small_words and not forced:
            if single_letter and letter_name and opts.uppercase_single_letter_words:
                return to_upper(seg, culture)
            return to_lower(seg, culture)

        if single_letter and opts.uppercase_single_letter_words:
            return to_upper(seg, culture)

        return cap_with_apostrophes(seg, culture, keep_tails_lower=True)


_DEFAULT_CONVERTER = TitleCaseConverter(
    DEFAULT_TITLE_LEXICON, DEFAULT_SENTENCE_LEXICON, TitleCaseOptions()
)

def title_case(
    text: str,
    title_lexicon: TitleCaseLexicon | None = None,
    common_lexicon: SentenceCaseLexicon | None = None,
    options: TitleCaseOptions | None = None,
) -> str:
    """Convert ``text`` to title case.

    Without lexicons or options the shared default converter is used.
    """

    if title_lexicon is None and common_lexicon is None and options is None:
        return TitleCaseConverter.default().convert(text)
    return TitleCaseConverter(
        title_lexicon if title_lexicon is not None else DEFAULT_TITLE_LEXICON,
        common_lexicon if common_lexicon is not None else DEFAULT_SENTENCE_LEXICON,
        options if options is not None else TitleCaseOptions(),
    ).convert(text)
