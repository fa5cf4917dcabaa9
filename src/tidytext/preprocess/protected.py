"""Recognisers for technical tokens that punctuation spacing must not touch.

Every consumer has the signature ``consume_x(text, i, prev=None) -> int | None``:
when a token of its class starts at ``text[i]`` it returns the exclusive end
index, otherwise ``None``.  Consumers are pure.  The only context they see to
the left is ``prev``, the character written just before ``text[i]``; it
defaults to ``text[i - 1]``.  The spacing engine passes the last character of
its own output instead, which may be a space it inserted.

:data:`PROTECTED_CONSUMERS` lists them in the priority order used by
:func:`tidytext.preprocess.spacing.fix_punctuation_spacing`.  IPv6 literals
are tried before emails, domains and times because they are the longer,
more specific reading of ``digit:digit`` text.
"""

from __future__ import annotations

from typing import Protocol

from tidytext.utils.constants import (
    CLOSING_BRACKETS,
    OPENING_QUOTES,
    is_digit,
    is_hex_digit,
    is_word_char,
    url_rtrim_index,
)

__all__ = [
    "Consumer",
    "PROTECTED_CONSUMERS",
    "consume_code_span",
    "consume_url",
    "consume_path",
    "consume_ipv6",
    "consume_email",
    "consume_domain",
    "consume_version",
    "consume_decimal",
    "consume_time",
    "consume_ellipsis",
    "consume_dotted_abbreviation",
    "find_protected_spans",
]


class Consumer(Protocol):
    def __call__(self, text: str, i: int, prev: str | None = None) -> int | None: ...


_MAX_SCHEME = 32
_EMAIL_LOCAL_EXTRA = frozenset("._%+-")


# ---------------------------------------------------------------------------
# Small scanners
# ---------------------------------------------------------------------------
def _digits_end(text: str, j: int, limit: int | None = None) -> int:
    start = j
    while j < len(text) and is_digit(text[j]):
        if limit is not None and j - start >= limit:
            break
        j += 1
    return j


def _prev(text: str, i: int, prev: str | None = None) -> str:
    if prev is not None:
        return prev
    return text[i - 1] if i > 0 else ""


def _decimal_follows(text: str, j: int) -> bool:
    """``.5`` at ``text[j]``: the match would split a decimal or version."""

    return j + 1 < len(text) and text[j] == "." and is_digit(text[j + 1])


def _scan_url_like(text: str, token_start: int, j: int) -> int:
    """Scan a URL or path body from ``j`` and return its trimmed end.

    The walk stops at whitespace, at ``,``/``;`` that leads into prose
    (a letter or an opening quote follows) and before a ``.`` that closes a
    sentence (``...=3.Please``, ``...).Thanks``).  A bracketed host such as
    ``[2001:db8::1]`` is skipped as one unit.
    """

    n = len(text)
    body_start = j
    while j < n and not text[j].isspace():
        ch = text[j]
        if ch == "[":
            close = text.find("]", j + 1)
            if close != -1 and not any(c.isspace() for c in text[j + 1 : close]):
                j = close + 1
                continue
        if ch in ",;" and j + 1 < n and (text[j + 1].isalpha() or text[j + 1] in OPENING_QUOTES):
            break
        if (
            ch == "."
            and j > body_start
            and (is_digit(text[j - 1]) or text[j - 1] in CLOSING_BRACKETS)
            and j + 1 < n
            and text[j + 1].isalpha()
        ):
            break
        j += 1
    return url_rtrim_index(text, token_start, j)


# ---------------------------------------------------------------------------
# Consumers
# ---------------------------------------------------------------------------
def consume_code_span(text: str, i: int, prev: str | None = None) -> int | None:
    """Fenced ```` ``` ```` blocks (to the closing fence or end of text) and
    inline `` `code` `` spans (to the next backtick or newline)."""

    if text[i] != "`":
        return None
    if text.startswith("```", i):
        close = text.find("```", i + 3)
        return len(text) if close == -1 else close + 3
    j = i + 1
    while j < len(text) and text[j] not in "`\n":
        j += 1
    if j < len(text) and text[j] == "`":
        j += 1
    return j


def consume_url(text: str, i: int, prev: str | None = None) -> int | None:
    """``scheme://...`` (any RFC 3986 scheme name) and ``www.`` URLs."""

    if not text[i].isalpha() or _prev(text, i, prev).isalnum():
        return None
    if text[i : i + 4].lower() == "www.":
        end = _scan_url_like(text, i, i + 4)
        return end if end > i + 4 else None
    j = i + 1
    while j < len(text) and j - i < _MAX_SCHEME and (text[j].isalnum() or text[j] in "+.-"):
        j += 1
    if not text.startswith("://", j):
        return None
    end = _scan_url_like(text, i, j + 3)
    return end if end > j + 3 else None


def consume_path(text: str, i: int, prev: str | None = None) -> int | None:
    """Drive-letter paths (``C:\\Temp``, ``D:/data``) and root-relative
    paths (``/usr/bin``)."""

    n = len(text)
    ch = text[i]
    if ch.isalpha():
        if (
            i + 2 < n
            and text[i + 1] == ":"
            and text[i + 2] in "\\/"
            and not is_word_char(_prev(text, i, prev))
        ):
            return _scan_url_like(text, i, i + 3)
        return None
    if ch == "/" and not is_word_char(_prev(text, i, prev)):
        if i + 1 < n and text[i + 1] != "/" and not text[i + 1].isspace():
            end = _scan_url_like(text, i, i + 1)
            return end if end > i + 1 else None
    return None


def _ipv4_end(text: str, j: int) -> int | None:
    for part in range(4):
        k = _digits_end(text, j, 3)
        if k == j:
            return None
        j = k
        if part < 3:
            if j + 1 < len(text) and text[j] == "." and is_digit(text[j + 1]):
                j += 1
            else:
                return None
    return j


def consume_ipv6(text: str, i: int, prev: str | None = None) -> int | None:
    """IPv6 literals: hex groups, one ``::`` compression, optional IPv4 tail.

    ``10:30`` qualifies too (two groups with a digit); it is protected either
    way, and ``10:30am`` is left to :func:`consume_time` because a word
    character follows.  A match directly followed by ``.`` and a digit
    (``1:3.5``) is rejected so the decimal keeps its dot.
    """

    prev = _prev(text, i, prev)
    if is_word_char(prev) or prev == ":":
        return None
    n = len(text)
    j = i
    groups = 0
    compressed = False
    ipv4 = False
    if text.startswith("::", j):
        compressed = True
        j += 2
    elif not is_hex_digit(text[i]):
        return None

    while j < n:
        if groups or compressed:
            tail = _ipv4_end(text, j)
            if tail is not None:
                j = tail
                ipv4 = True
                break
        k = j
        while k < n and k - j < 4 and is_hex_digit(text[k]):
            k += 1
        if k == j or (k < n and is_hex_digit(text[k])):
            break
        groups += 1
        j = k
        if text.startswith("::", j):
            if compressed:
                break
            compressed = True
            j += 2
            continue
        if j + 1 < n and text[j] == ":" and is_hex_digit(text[j + 1]):
            j += 1
            continue
        break

    if j < n and is_word_char(text[j]):
        return None
    if j > i and text[j - 1] == ":" and not compressed:
        return None
    if _decimal_follows(text, j):
        return None
    has_digit = any(is_digit(c) for c in text[i:j])
    qualifies = ipv4 or (compressed and groups >= 1) or (groups >= 2 and has_digit)
    return j if qualifies else None


def consume_email(text: str, i: int, prev: str | None = None) -> int | None:
    """``local@label.label.tld`` with a letters-only TLD of 2+ characters."""

    def local_char(c: str) -> bool:
        return c.isalnum() or c in _EMAIL_LOCAL_EXTRA

    if not local_char(text[i]) or local_char(_prev(text, i, prev)):
        return None
    n = len(text)
    j = i
    while j < n and local_char(text[j]):
        j += 1
    if j >= n or text[j] != "@":
        return None
    j += 1
    labels: list[tuple[int, int]] = []
    while j < n and text[j].isalnum():
        start = j
        while j < n and (text[j].isalnum() or text[j] == "-"):
            j += 1
        labels.append((start, j))
        if j + 1 < n and text[j] == "." and text[j + 1].isalnum():
            j += 1
            continue
        break
    if len(labels) < 2:
        return None
    tld = text[labels[-1][0] : labels[-1][1]]
    if len(tld) < 2 or not tld.isalpha():
        return None
    return labels[-1][1]


def consume_domain(text: str, i: int, prev: str | None = None) -> int | None:
    """Bare domains such as ``example.co.uk`` or ``EXAMPLE.COM``.

    The TLD must be 2+ lowercase letters, or the whole domain must be
    uppercase.  Trailing labels that fail the rule are given back, so
    ``example.com.Next`` protects only ``example.com``.
    """

    prev = _prev(text, i, prev)
    if not text[i].isalnum() or prev.isalnum() or prev == "_" or prev == "-":
        return None
    n = len(text)
    j = i
    labels: list[tuple[int, int]] = []
    while j < n and text[j].isalnum():
        start = j
        while j < n and (text[j].isalnum() or text[j] == "-"):
            j += 1
        labels.append((start, j))
        if j + 1 < n and text[j] == "." and text[j + 1].isalnum():
            j += 1
            continue
        break
    if labels and labels[-1][1] < n and text[labels[-1][1]] == "_":
        return None
    while len(labels) >= 2:
        end = labels[-1][1]
        tld = text[labels[-1][0] : end]
        whole = text[i:end]
        if len(tld) >= 2 and tld.isalpha() and (tld.islower() or whole.isupper()):
            return end
        labels.pop()
    return None


def consume_version(text: str, i: int, prev: str | None = None) -> int | None:
    """``1.2``, ``v1.2.3``, ``V10.0.1``."""

    if is_digit(_prev(text, i, prev)):
        return None
    j = i + 1 if text[i] in "vV" else i
    k = _digits_end(text, j)
    if k == j:
        return None
    j = k
    groups = 0
    while j + 1 < len(text) and text[j] == "." and is_digit(text[j + 1]):
        j = _digits_end(text, j + 1)
        groups += 1
    return j if groups else None


def consume_decimal(text: str, i: int, prev: str | None = None) -> int | None:
    """``1,234``, ``1,234.56``, ``3,5``: digits with thousands or decimal separators."""

    if is_digit(_prev(text, i, prev)):
        return None
    n = len(text)
    j = _digits_end(text, i)
    if j == i:
        return None
    separated = False
    while j + 1 < n and text[j] == "," and is_digit(text[j + 1]):
        j = _digits_end(text, j + 1)
        separated = True
    if j + 1 < n and text[j] in ".," and is_digit(text[j + 1]):
        j = _digits_end(text, j + 1)
        separated = True
    return j if separated else None


def consume_time(text: str, i: int, prev: str | None = None) -> int | None:
    """``4:3``, ``10:30``, ``10:30:05``, ``10:30am``, ``9:15 PM``.

    Like :func:`consume_ipv6`, a match that would end inside a digit run or
    right before ``.`` and a digit is rejected.
    """

    n = len(text)
    j = _digits_end(text, i, 2)
    if j == i or j >= n or text[j] != ":":
        return None
    k = _digits_end(text, j + 1, 2)
    if k == j + 1:
        return None
    j = k
    if j + 2 < n and text[j] == ":" and is_digit(text[j + 1]) and is_digit(text[j + 2]):
        j += 3
    if (j < n and is_digit(text[j])) or _decimal_follows(text, j):
        return None
    k = j + 1 if j < n and text[j] == " " else j
    if (
        k + 1 < n
        and text[k] in "aApP"
        and text[k + 1] in "mM"
        and not (k + 2 < n and text[k + 2].isalpha())
    ):
        j = k + 2
    return j


def consume_ellipsis(text: str, i: int, prev: str | None = None) -> int | None:
    """``…`` or three or more dots."""

    if text[i] == "…":
        return i + 1
    if text.startswith("...", i):
        j = i + 3
        while j < len(text) and text[j] == ".":
            j += 1
        return j
    return None


def consume_dotted_abbreviation(text: str, i: int, prev: str | None = None) -> int | None:
    """Two or more ``letter.`` pairs: ``e.g.``, ``U.S.A.``, ``a.m.``."""

    j = i
    groups = 0
    while j + 1 < len(text) and text[j].isalpha() and text[j + 1] == ".":
        groups += 1
        j += 2
    return j if groups >= 2 else None


PROTECTED_CONSUMERS: tuple[tuple[str, Consumer], ...] = (
    ("code", consume_code_span),
    ("url", consume_url),
    ("path", consume_path),
    ("ipv6", consume_ipv6),
    ("email", consume_email),
    ("domain", consume_domain),
    ("version", consume_version),
    ("decimal", consume_decimal),
    ("time", consume_time),
    ("ellipsis", consume_ellipsis),
    ("abbreviation", consume_dotted_abbreviation),
)


def find_protected_spans(text: str) -> list[tuple[str, int, int]]:
    """Return ``(kind, start, end)`` for every protected token in ``text``.

    Uses the same priority order as the spacing engine; handy for
    diagnostics and tests.
    """

    spans: list[tuple[str, int, int]] = []
    i = 0
    while i < len(text):
        for kind, consume in PROTECTED_CONSUMERS:
            end = consume(text, i)
            if end is not None and end > i:
                spans.append((kind, i, end))
                i = end
                break
        else:
            i += 1
    return spans
