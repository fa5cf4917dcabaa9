"""Sentence case conversion.

:class:`SentenceCaseConverter` walks the text once.  Every run of letters and
digits (with internal apostrophes) is a *token* and is rewritten according to
where it sits: the first token of a sentence is capitalized, later tokens are
lowercased unless the lexicon or the token's shape says otherwise (names,
brands, acronyms, camel case, digit-bearing tokens).  Scheme and ``www.``
URLs count as one token and are copied as typed.  Everything else is copied
verbatim while the scan state is updated.

Sentence boundaries
-------------------
``.``, ``!`` and ``?`` end a sentence unless the dot sits between digits
(``3.14``), is directly followed by a letter or digit (``example.com``), or
belongs to a dotted run that the lexicon lists as a non-terminal abbreviation
(``p.m.``, ``U.S.A.``, ``Mr.``).  A newline always starts a new sentence.

Wrappers
--------
Brackets and quotes raise and lower a *wrapper depth*.  After a terminator the
first word of the next wrapper group is capitalized, and so is the first word
of a second group that opens right after the first one closes
(``He paused. "ok" (cool).`` -> ``He paused. "Ok" (Cool).``).  A word or any
other non-space character after the first group cancels that, so
``"Yes," she said`` keeps its lowercase ``she``.  An honorific such as
``Mr.`` title-cases the following token only while the wrapper depth is
unchanged, so a closing quote ends the carry-over.
"""

from __future__ import annotations

from dataclasses import dataclass

from tidytext.casing.lexicon import (
    DEFAULT_SENTENCE_LEXICON,
    SentenceCaseLexicon,
    lookup_proper_case,
)
from tidytext.casing.options import SentenceCaseOptions
from tidytext.casing.textcase import (
    cap_with_apostrophes,
    has_digit,
    is_camel_or_mixed,
    is_upper_word,
    looks_like_contraction,
    to_lower,
    to_upper,
    upper_first_lower_rest,
)
from tidytext.preprocess.protected import consume_url
from tidytext.utils.constants import (
    APOSTROPHES,
    FULLWIDTH_TERMINATORS,
    SENTENCE_TERMINATORS,
    unify_newlines,
)
from tidytext.utils.errors import (
    InvalidLexiconError,
    MissingLexiconError,
    MissingOptionsError,
)

__all__ = ["SentenceCaseConverter", "sentence_case"]

_TERMINATORS = SENTENCE_TERMINATORS | FULLWIDTH_TERMINATORS
_OPENERS = frozenset("([{")
_CLOSERS = frozenset(")]}")
# Characters skipped when looking for the word after a terminator.
_TRAILING_WRAPPERS = frozenset("\"“”'’)]}")


@dataclass(slots=True)
class _ScanState:
    """Mutable state of one :meth:`SentenceCaseConverter.convert` call."""

    at_sentence_start: bool = True
    wrapper_depth: int = 0
    pending_second_wrapper_cap: bool = False
    second_group_armed: bool = False
    in_double_quote: bool = False
    in_single_quote: bool = False
    in_curly_double: bool = False
    in_curly_single: bool = False
    prev_had_digit: bool = False
    prev_was_brand: bool = False
    prev_was_honorific: bool = False
    prev_honorific_depth: int = -1
    dotted_run: _DottedRun | None = None

    def open_wrapper(self) -> None:
        self.wrapper_depth += 1

    def close_wrapper(self) -> None:
        if self.wrapper_depth > 0:
            self.wrapper_depth -= 1
        if self.wrapper_depth == 0 and self.pending_second_wrapper_cap:
            self.second_group_armed = True
            self.pending_second_wrapper_cap = False


@dataclass(slots=True, frozen=True)
class _DottedRun:
    """A maximal run of letters and dots with its lexicon lookup keys."""

    left: int
    right: int
    bare_lower: str
    bare_upper: str
    dotted_lower: str
    typed_upper: bool

    @classmethod
    def around(cls, text: str, start: int, end: int) -> _DottedRun:
        left = start
        while left > 0 and (text[left - 1].isalpha() or text[left - 1] == "."):
            left -= 1
        right = end
        while right < len(text) and (text[right].isalpha() or text[right] == "."):
            right += 1
        run = text[left:right]
        bare = run.replace(".", "")
        return cls(
            left=left,
            right=right,
            bare_lower=bare.lower(),
            bare_upper=bare.upper(),
            dotted_lower=run.rstrip(".").lower(),
            typed_upper=bare.isupper(),
        )


def _dotted_run(text: str, start: int, end: int, state: _ScanState) -> _DottedRun:
    """Return the run around ``text[start:end]``, reusing the last one seen."""

    run = state.dotted_run
    if run is None or not (run.left <= start and end <= run.right):
        run = _DottedRun.around(text, start, end)
        state.dotted_run = run
    return run

class SentenceCaseConverter:
    """Rewrite text in sentence case using a lexicon and options."""

    def __init__(self, lexicon: SentenceCaseLexicon, options: SentenceCaseOptions) -> None:
        if lexicon is None:
            raise MissingLexiconError("a sentence-case lexicon is required")
        if not isinstance(lexicon, SentenceCaseLexicon):
            raise InvalidLexiconError(
                f"{type(lexicon).__name__} does not provide the sentence-case wordlists"
            )
        if options is None:
            raise MissingOptionsError("sentence-case options are required")
        self._lexicon = lexicon
        self._options = options

    @classmethod
    def default(cls) -> SentenceCaseConverter:
        """Return the shared converter built from the stock lexicon."""

        return _DEFAULT_CONVERTER

    @property
    def lexicon(self) -> SentenceCaseLexicon:
        return self._lexicon

    @property
    def options(self) -> SentenceCaseOptions:
        return self._options

    def convert(self, text: str, culture: str | None = None) -> str:
        """Return ``text`` in sentence case.

        ``culture`` overrides the options' culture for this call.  Newlines
        are unified to ``\\n``.  Empty input is returned unchanged.
        """

        if not text:
            return text
        culture = culture or self._options.culture
        text = unify_newlines(text)
        state = _ScanState()
        out: list[str] = []
        i, n = 0, len(text)
        while i < n:
            ch = text[i]
            if ch.isalpha():
                url_end = consume_url(text, i)
                if url_end is not None:
                    out.append(text[i:url_end])
                    state.at_sentence_start = False
                    state.second_group_armed = False
                    i = url_end
                    continue
            if ch.isalnum():
                start = i
                while i < n and (
                    text[i].isalnum()
                    or (text[i] in APOSTROPHES and i + 1 < n and text[i + 1].isalnum())
                ):
                    i += 1
                token = text[start:i]
                rendered = self._case_token(text, start, i, state, culture)
                out.append(rendered)
                if state.pending_second_wrapper_cap and state.wrapper_depth == 0:
                    state.pending_second_wrapper_cap = False
                state.second_group_armed = False
                state.at_sentence_start = False
                state.prev_had_digit = has_digit(token)
                state.prev_was_brand = rendered.lower() in self._lexicon.brand_tokens
                continue

            out.append(ch)
            armed = state.second_group_armed
            depth = state.wrapper_depth
            self._track_wrapper(text, i, state)
            if armed and not ch.isspace():
                state.second_group_armed = False
                if state.wrapper_depth > depth:
                    state.at_sentence_start = True
            if ch in _TERMINATORS:
                if self._ends_sentence(text, i, state):
                    j = i + 1
                    while j < n and (text[j].isspace() or text[j] in _TRAILING_WRAPPERS):
                        j += 1
                    if j < n:
                        state.at_sentence_start = True
                        state.pending_second_wrapper_cap = True
            elif ch == "\n":
                state.at_sentence_start = True
            i += 1
        return "".join(out)

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------
    def _case_token(
        self, text: str, start: int, end: int, state: _ScanState, culture: str
    ) -> str:
        lex = self._lexicon
        token = text[start:end]
        lower = token.lower()
        followed_by_dot = end < len(text) and text[end] == "."

        carry = state.prev_was_honorific
        state.prev_was_honorific = False

        mapped = lookup_proper_case(lex, token)
        if mapped is not None:
            return mapped
        if lower == "i" and not (followed_by_dot and text[end + 1 : end + 2].isalpha()):
            return "I"

        is_honorific = lower in lex.honorific_bases
        is_abbreviation = is_honorific or lower in lex.non_terminal_abbreviations

        if state.at_sentence_start:
            if followed_by_dot and is_abbreviation:
                state.prev_was_honorific = is_honorific
                state.prev_honorific_depth = state.wrapper_depth
                return upper_first_lower_rest(token, culture)
            if self._is_acronym(token) or has_digit(token):
                return token
            if any(ch in APOSTROPHES for ch in token):
                if looks_like_contraction(token):
                    return upper_first_lower_rest(token, culture)
                return cap_with_apostrophes(token, culture)
            return upper_first_lower_rest(token, culture)

        if carry and state.wrapper_depth == state.prev_honorific_depth:
            return upper_first_lower_rest(token, culture)

        if followed_by_dot and is_abbreviation:
            state.prev_was_honorific = is_honorific
            state.prev_honorific_depth = state.wrapper_depth
            if is_honorific or not self._options.lowercase_mid_sentence_abbreviations:
                return upper_first_lower_rest(token, culture)
            if token in lex.upper_acronyms:
                return token
            return to_lower(token, culture)

        if followed_by_dot and len(token) == 1 and token.isalpha():
            return self._case_dotted_letter(text, start, end, token, state, culture)

        if lower in lex.proper_case_tokens:
            return cap_with_apostrophes(token, culture)
        if lower in lex.brand_suffixes and (state.prev_was_brand or state.prev_had_digit):
            return cap_with_apostrophes(token, culture)
        if self._is_acronym(token) or is_camel_or_mixed(token) or has_digit(token):
            return token
        return to_lower(token, culture)

    def _case_dotted_letter(
        self, text: str, start: int, end: int, token: str, state: _ScanState, culture: str
    ) -> str:
        """Case one letter of a dotted run such as ``U.S.A.`` or ``e.g.``."""

        lex = self._lexicon
        run = _dotted_run(text, start, end, state)
        if run.bare_upper in lex.upper_acronyms:
            return to_upper(token, culture)
        if self._is_non_terminal(run) and not run.typed_upper:
            return to_lower(token, culture)
        return token

    def _is_acronym(self, token: str) -> bool:
        """Whitelisted ALL-CAPS word, or a short unknown one when allowed."""

        if not is_upper_word(token):
            return False
        if token in self._lexicon.upper_acronyms:
            return True
        opts = self._options
        return (
            opts.preserve_acronyms_mid_sentence
            and opts.treat_unknown_short_all_caps_as_acronym
            and len(token) <= 3
            and token not in self._lexicon.upper_short_stopwords
        )

    # ------------------------------------------------------------------
    # Punctuation
    # ------------------------------------------------------------------
    @staticmethod
    def _track_wrapper(text: str, i: int, state: _ScanState) -> None:
        ch = text[i]
        if ch in _OPENERS:
            state.open_wrapper()
        elif ch in _CLOSERS:
            state.close_wrapper()
        elif ch == '"':
            state.in_double_quote = not state.in_double_quote
            if state.in_double_quote:
                state.open_wrapper()
            else:
                state.close_wrapper()
        elif ch == "'":
            if state.in_single_quote:
                state.in_single_quote = False
                state.close_wrapper()
            elif i == 0 or not text[i - 1].isalnum():
                state.in_single_quote = True
                state.open_wrapper()
        elif ch == "“":
            state.in_curly_double = True
            state.open_wrapper()
        elif ch == "”":
            if state.in_curly_double:
                state.in_curly_double = False
                state.close_wrapper()
        elif ch == "‘":
            state.in_curly_single = True
            state.open_wrapper()
        elif ch == "’":
            if state.in_curly_single:
                state.in_curly_single = False
                state.close_wrapper()

    def _ends_sentence(self, text: str, i: int, state: _ScanState) -> bool:
        if text[i] != ".":
            return True
        if i + 1 < len(text) and text[i + 1].isalnum():
            # 3.14, example.com, file.txt
            return False
        return not self._is_non_terminal(_dotted_run(text, i, i + 1, state))

    def _is_non_terminal(self, run: _DottedRun) -> bool:
        nt = self._lexicon.non_terminal_abbreviations
        return run.bare_lower in nt or run.dotted_lower in nt


_DEFAULT_CONVERTER = SentenceCaseConverter(DEFAULT_SENTENCE_LEXICON, SentenceCaseOptions())

def sentence_case(
    text: str,
    lexicon: SentenceCaseLexicon | None = None,
    options: SentenceCaseOptions | None = None,
) -> str:
    """Convert ``text`` to sentence case.

    Without a lexicon or options the shared default converter is used.
    """

    if lexicon is None and options is None:
        return SentenceCaseConverter.default().convert(text)
    return SentenceCaseConverter(
        lexicon if lexicon is not None else DEFAULT_SENTENCE_LEXICON,
        options if options is not None else SentenceCaseOptions(),
    ).convert(text)
