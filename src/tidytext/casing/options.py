"""Per-conversion option records for the casing converters.

``culture`` is a BCP-47 style tag such as ``"en-US"`` or ``"tr-TR"``; only
its primary subtag matters (see :func:`tidytext.casing.textcase.is_turkic`).
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_CULTURE", "SentenceCaseOptions", "TitleCaseOptions"]

DEFAULT_CULTURE = "en-US"


@dataclass(slots=True, frozen=True)
class SentenceCaseOptions:
    """Options for :class:`~tidytext.casing.sentence.SentenceCaseConverter`.

    Attributes
    ----------
    culture:
        Casing culture.
    preserve_acronyms_mid_sentence:
        Keep ALL-CAPS acronyms (``GPU``, ``NASA``) as typed mid-sentence.
    treat_unknown_short_all_caps_as_acronym:
        Also keep unknown ALL-CAPS words of at most three letters, except
        short stopwords such as ``TO`` or ``WE``.  Has no effect when
        ``preserve_acronyms_mid_sentence`` is off.
    lowercase_mid_sentence_abbreviations:
        Lowercase non-honorific abbreviations such as ``etc.`` or ``vs.``
        inside a sentence instead of capitalizing their first letter.
    """

    culture: str = DEFAULT_CULTURE
    preserve_acronyms_mid_sentence: bool = True
    treat_unknown_short_all_caps_as_acronym: bool = False
    lowercase_mid_sentence_abbreviations: bool = False


@dataclass(slots=True, frozen=True)
class TitleCaseOptions:
    """Options for :class:`~tidytext.casing.title.TitleCaseConverter`.

    Attributes
    ----------
    culture:
        Casing culture.
    capitalize_after_colon:
        Capitalize the first word after a colon.
    force_cap_first_and_last:
        Capitalize the first and last word even when they are small words.
    capitalize_hyphenated_segments:
        Treat each segment of a hyphenated compound as a word.
    preserve_acronyms:
        Restore whitelisted acronyms to uppercase (``gpu`` -> ``GPU``).
    preserve_camel_or_mixed_case:
        Leave deliberate mixed case (``iPhone``, ``eBay``) untouched.
    uppercase_single_letter_words:
        Uppercase single-letter words (``A to Z``).
    """

    culture: str = DEFAULT_CULTURE
    capitalize_after_colon: bool = True
    force_cap_first_and_last: bool = True
    capitalize_hyphenated_segments: bool = True
    preserve_acronyms: bool = True
    preserve_camel_or_mixed_case: bool = True
    uppercase_single_letter_words: bool = True
