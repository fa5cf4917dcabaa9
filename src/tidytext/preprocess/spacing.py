"""Punctuation spacing repair.

:func:`fix_punctuation_spacing` normalizes the space around ``, . ! ? ;``
(and optionally ``:``) in one left-to-right pass.  At every position the
protected-token consumers from :mod:`tidytext.preprocess.protected` get the
first chance; a match is copied verbatim and the cursor jumps past it.
Consumers see the last character already written, not the source character,
so a space inserted after ``:`` is a word boundary on the first pass too.  Only
when no consumer matches is the character handled as punctuation:

* spaces before sentence punctuation are removed;
* exactly one space follows sentence punctuation when a word follows;
* closing quotes and brackets right after the punctuation stay attached
  (``."``, ``.)``);
* after ``.``, ``!`` or ``?`` an opening quote stays tight (``Quotes."Yes"``);
  after ``,``, ``;`` and ``:`` it is spaced (``Title: "Quote"``);
* a closing bracket glued to a following word gets one space.

Finally runs of spaces collapse to one and spaces at line ends disappear.
Protected tokens are exempt from both steps, so their bytes survive
unchanged.  The function is idempotent.

Example
-------

>>> fix_punctuation_spacing("v1.2.3,and 1,234.56")
'v1.2.3, and 1,234.56'
"""

from __future__ import annotations

from tidytext.preprocess.protected import PROTECTED_CONSUMERS
from tidytext.utils.constants import (
    APOSTROPHES,
    CLOSING_BRACKETS,
    FULLWIDTH_TERMINATORS,
    OPENING_QUOTES,
    SENTENCE_PUNCT,
    SENTENCE_TERMINATORS,
    is_digit,
    is_word_char,
    unify_newlines,
)

__all__ = ["fix_punctuation_spacing"]

_TIGHT_BEFORE_QUOTE = SENTENCE_TERMINATORS | FULLWIDTH_TERMINATORS
_SHORT_TAILS = ("s", "t", "d", "m")
_LONG_TAILS = ("ll", "re", "ve")


class _Buffer:
    """Output pieces tagged as protected or free text."""

    __slots__ = ("_pieces", "_protected")

    def __init__(self) -> None:
        self._pieces: list[str] = []
        self._protected: list[bool] = []

    def append(self, piece: str) -> None:
        self._pieces.append(piece)
        self._protected.append(False)

    def append_protected(self, piece: str) -> None:
        self._pieces.append(piece)
        self._protected.append(True)

    def last_char(self) -> str:
        for piece in reversed(self._pieces):
            if piece:
                return piece[-1]
        return ""

    def rstrip_spaces(self) -> None:
        """Drop trailing plain spaces from free text; protected text is kept."""

        while self._pieces and not self._protected[-1]:
            stripped = self._pieces[-1].rstrip(" ")
            if stripped:
                self._pieces[-1] = stripped
                return
            self._pieces.pop()
            self._protected.pop()

    def render(self) -> str:
        out: list[str] = []
        pending_space = False
        for piece, protected in zip(self._pieces, self._protected):
            if protected:
                if pending_space:
                    out.append(" ")
                    pending_space = False
                out.append(piece)
                continue
            for ch in piece:
                if ch == " ":
                    pending_space = True
                    continue
                if pending_space and ch != "\n":
                    out.append(" ")
                pending_space = False
                out.append(ch)
        return "".join(out)


def _contraction_tail_at(text: str, j: int) -> bool:
    """``ll`` in ``I ’ll go``: a known tail ending at a non-letter, non-quote."""

    n = len(text)
    for tail in _LONG_TAILS + _SHORT_TAILS:
        end = j + len(tail)
        if text[j:end].lower() != tail:
            continue
        if end < n and (text[end].isalpha() or text[end] in APOSTROPHES or text[end] == '"'):
            continue
        return True
    return False


def _absorb_spaced_apostrophe(text: str, i: int, buf: _Buffer) -> int | None:
    """Handle ``’`` or ``'`` at ``text[i]``; return the next index when handled."""

    n = len(text)
    nxt = text[i + 1] if i + 1 < n else ""
    if is_word_char(buf.last_char()) and is_word_char(nxt):
        buf.append(text[i])
        return i + 1

    if i == 0 or not text[i - 1].isspace() or text[i - 1] == "\n":
        return None
    k = i - 1
    while k >= 0 and text[k] == " ":
        k -= 1
    if k < 0 or not is_word_char(text[k]):
        return None
    j = i + 1
    while j < n and text[j] == " ":
        j += 1
    if j >= n:
        return None

    single_capital_before = text[k].isupper() and (k == 0 or not is_word_char(text[k - 1]))
    if _contraction_tail_at(text, j) or (single_capital_before and text[j].isupper()):
        buf.rstrip_spaces()
        buf.append(text[i])
        return j
    return None


def fix_punctuation_spacing(text: str, treat_colon_as_sentence_punct: bool = False) -> str:
    """Return ``text`` with punctuation spacing normalized.

    ``treat_colon_as_sentence_punct`` spaces narrative colons
    (``Note:Important`` -> ``Note: Important``) while times, ratios, URL
    schemes and IPv6 literals keep their colons tight.  Newlines are unified
    to ``\\n``.  Empty input is returned unchanged.
    """

    if not text:
        return text
    s = unify_newlines(text)
    n = len(s)
    buf = _Buffer()
    i = 0
    while i < n:
        matched = False
        prev = buf.last_char()
        for kind, consume in PROTECTED_CONSUMERS:
            end = consume(s, i, prev)
            if end is None or end <= i:
                continue
            buf.append_protected(s[i:end])
            if kind == "ellipsis":
                k = end
                while k < n and s[k] == " ":
                    k += 1
                if k < n and is_word_char(s[k]):
                    buf.append(" ")
            i = end
            matched = True
            break
        if matched:
            continue

        ch = s[i]
        if ch in APOSTROPHES:
            nxt = _absorb_spaced_apostrophe(s, i, buf)
            if nxt is not None:
                i = nxt
                continue

        if ch in CLOSING_BRACKETS:
            buf.append(ch)
            opening_elision = ch == "’" and (i == 0 or s[i - 1].isspace())
            if not opening_elision and i + 1 < n and is_word_char(s[i + 1]):
                buf.append(" ")
            i += 1
            continue

        if ch in SENTENCE_PUNCT or (ch == ":" and treat_colon_as_sentence_punct):
            i = _space_sentence_punct(s, i, buf)
            continue

        buf.append(ch)
        i += 1

    return buf.render()


def _space_sentence_punct(s: str, i: int, buf: _Buffer) -> int:
    n = len(s)
    ch = s[i]
    buf.rstrip_spaces()

    if ch == ":":
        prev = buf.last_char()
        if s.startswith("//", i + 1) or is_digit(prev) or (i + 1 < n and is_digit(s[i + 1])):
            buf.append(ch)
            return i + 1

    buf.append(ch)
    j = i + 1
    while j < n:
        nx = s[j]
        if nx in CLOSING_BRACKETS:
            buf.append(nx)
            j += 1
        elif nx in "\"'" and not (j + 1 < n and is_word_char(s[j + 1])):
            buf.append(nx)
            j += 1
        else:
            break

    if j >= n:
        return j
    nx = s[j]
    if nx in OPENING_QUOTES and j + 1 < n and is_word_char(s[j + 1]):
        if ch not in _TIGHT_BEFORE_QUOTE:
            buf.append(" ")
    elif not nx.isspace() and nx not in SENTENCE_PUNCT:
        buf.append(" ")
    return j
