"""Culture-aware casing primitives and token shape tests.

The helpers are pure and operate on single tokens.  Both converters use them
so that "what looks like an acronym" or "what looks like camel case" has one
definition.

Casing follows Unicode default rules except for Turkic cultures (``tr``,
``az``) where ``i`` uppercases to ``İ`` and ``I`` lowercases to ``ı``.
"""

from __future__ import annotations

from tidytext.utils.constants import APOSTROPHES

__all__ = [
    "CONTRACTION_TAILS",
    "is_turkic",
    "to_upper",
    "to_lower",
    "upper_first_lower_rest",
    "cap_with_apostrophes",
    "has_digit",
    "is_upper_word",
    "is_camel_or_mixed",
    "looks_like_contraction",
]

# Letters after an apostrophe that mark a contraction or possessive.
CONTRACTION_TAILS: frozenset[str] = frozenset(
    {"s", "t", "d", "m", "n", "ll", "re", "ve", "em"}
)

_TURKIC = frozenset({"tr", "az"})


def is_turkic(culture: str | None) -> bool:
    """Return ``True`` when ``culture`` names a Turkic locale (``tr-TR``, ``az``)."""

    if not culture:
        return False
    primary = culture.replace("_", "-").split("-", 1)[0].lower()
    return primary in _TURKIC


def to_upper(text: str, culture: str | None = None) -> str:
    if is_turkic(culture):
        text = text.replace("i", "İ")
    return text.upper()


def to_lower(text: str, culture: str | None = None) -> str:
    if is_turkic(culture):
        text = text.replace("I", "ı").replace("İ", "i")
    return text.lower()


def upper_first_lower_rest(token: str, culture: str | None = None) -> str:
    """``"hELLO"`` -> ``"Hello"``."""

    if not token:
        return token
    return to_upper(token[0], culture) + to_lower(token[1:], culture)


def _letter_run(token: str, start: int) -> str:
    end = start
    while end < len(token) and token[end].isalpha():
        end += 1
    return token[start:end].lower()


def cap_with_apostrophes(
    token: str, culture: str | None = None, *, keep_tails_lower: bool = False
) -> str:
    """Capitalize the first letter and every letter that follows an apostrophe.

    ``o'neill`` becomes ``O'Neill``.  With ``keep_tails_lower`` a letter run
    after an apostrophe that is a contraction tail stays lowercase, so
    ``don't`` keeps its ``t`` and ``rock ’n’ roll`` keeps its ``n``.  A digit
    cancels the pending capital: ``15th`` stays ``15th``.
    """

    if not token:
        return token
    out: list[str] = []
    cap_next = True
    for idx, ch in enumerate(token):
        if ch.isalpha():
            out.append(to_upper(ch, culture) if cap_next else to_lower(ch, culture))
            cap_next = False
        elif ch in APOSTROPHES:
            out.append(ch)
            cap_next = not (
                keep_tails_lower and _letter_run(token, idx + 1) in CONTRACTION_TAILS
            )
        else:
            out.append(ch)
            cap_next = False
    return "".join(out)


def has_digit(token: str) -> bool:
    return any(ch.isdigit() for ch in token)


def is_upper_word(token: str) -> bool:
    """Return ``True`` for letters-only, all-uppercase tokens of 2+ letters."""

    return len(token) >= 2 and token.isalpha() and token.isupper()


def is_camel_or_mixed(token: str, *, reject_upper_tail: bool = False) -> bool:
    """Return ``True`` for deliberate mixed case such as ``iPhone`` or ``McDonald's``.

    Nearly alternating noise (``tEsT``) is rejected.  With
    ``reject_upper_tail`` a token ending in two or more uppercase letters
    (``inPUT``) is rejected as well.
    """

    letters = [ch for ch in token if ch.isalpha()]
    if not letters:
        return False
    uppers = sum(1 for ch in letters if ch.isupper())
    if uppers == 0 or uppers == len(letters):
        return False
    transitions = sum(
        1 for a, b in zip(letters, letters[1:]) if a.isupper() != b.isupper()
    )
    if transitions >= len(letters) - 1:
        return False

    if reject_upper_tail:
        tail = 0
        for ch in reversed(token):
            if not ch.isalpha():
                break
            if not ch.isupper():
                break
            tail += 1
        if tail >= 2:
            return False

    for i in range(1, len(token) - 1):
        if token[i].isupper() and (token[i - 1].islower() or token[i + 1].islower()):
            return True

    saw_lower_prefix = False
    saw_upper_after = False
    for ch in letters:
        if ch.islower():
            if not saw_upper_after:
                saw_lower_prefix = True
        elif saw_lower_prefix:
            saw_upper_after = True
    return saw_lower_prefix and saw_upper_after


def looks_like_contraction(token: str) -> bool:
    """Return ``True`` for ``it's``, ``we're``, ``o'clock`` and friends."""

    apos = next((i for i, ch in enumerate(token) if ch in APOSTROPHES), -1)
    if apos <= 0 or apos >= len(token) - 1:
        return False
    tail = token[apos + 1 :].lower()
    if tail in CONTRACTION_TAILS:
        return True
    return apos == 1 and token[0] in "oO" and tail == "clock"
