"""Typed configuration schema and loader for the tidytext package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, conint, field_validator

from tidytext.casing.lexicon import (
    DEFAULT_SENTENCE_LEXICON,
    DEFAULT_TITLE_LEXICON,
    DefaultSentenceCaseLexicon,
    DefaultTitleCaseLexicon,
    extend_sentence_lexicon,
    extend_title_lexicon,
)
from tidytext.casing.options import SentenceCaseOptions, TitleCaseOptions

CULTURE_ENV = "TIDYTEXT_CULTURE"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class WhitespaceOptions(BaseModel):
    """Whole-text whitespace cleanups applied before punctuation spacing."""

    trim: bool
    trim_start: bool
    trim_end: bool
    remove_multiple_spaces: bool
    remove_multiple_lines: bool
    remove_all_line_breaks: bool

    model_config = ConfigDict(extra="forbid")


class SpacingOptions(BaseModel):
    """Punctuation spacing switches."""

    fix_punctuation_spacing: bool
    treat_colon_as_sentence_punct: bool

    model_config = ConfigDict(extra="forbid")


class SentenceCaseSettings(BaseModel):
    """Sentence-case converter flags."""

    preserve_acronyms_mid_sentence: bool
    treat_unknown_short_all_caps_as_acronym: bool
    lowercase_mid_sentence_abbreviations: bool

    model_config = ConfigDict(extra="forbid")


class TitleCaseSettings(BaseModel):
    """Title-case converter flags."""

    capitalize_after_colon: bool
    force_cap_first_and_last: bool
    capitalize_hyphenated_segments: bool
    preserve_acronyms: bool
    preserve_camel_or_mixed_case: bool
    uppercase_single_letter_words: bool

    model_config = ConfigDict(extra="forbid")


class CasingOptions(BaseModel):
    """Which casing to apply.

    When several flags are on, only the first of upper, lower, sentence,
    title is used.
    """

    upper: bool
    lower: bool
    sentence: bool
    title: bool
    sentence_options: SentenceCaseSettings
    title_options: TitleCaseSettings

    model_config = ConfigDict(extra="forbid")

    def selected(self) -> str | None:
        """Return the casing mode that wins, or ``None``."""

        for mode in ("upper", "lower", "sentence", "title"):
            if getattr(self, mode):
                return mode
        return None


class LexiconExtensions(BaseModel):
    """Extra wordlist entries layered over the stock lexicons."""

    acronyms: list[str] = Field(default_factory=list)
    proper_case: list[str] = Field(default_factory=list)
    abbreviations: list[str] = Field(default_factory=list)
    honorifics: list[str] = Field(default_factory=list)
    brands: list[str] = Field(default_factory=list)
    brand_suffixes: list[str] = Field(default_factory=list)
    small_words: list[str] = Field(default_factory=list)
    protected: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    @field_validator("*")
    @classmethod
    def _no_blank_entries(cls, value: list[str]) -> list[str]:
        if any(not entry.strip() for entry in value):
            raise ValueError("lexicon entries must be non-empty")
        return value

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in type(self).model_fields)


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    culture: str
    whitespace: WhitespaceOptions
    spacing: SpacingOptions
    casing: CasingOptions
    lexicon: LexiconExtensions = Field(default_factory=LexiconExtensions)

    model_config = ConfigDict(extra="forbid")

    @field_validator("culture")
    @classmethod
    def _culture_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("culture must be a non-empty tag such as 'en-US'")
        return value

    # -- builders -----------------------------------------------------------
    def sentence_case_options(self) -> SentenceCaseOptions:
        return SentenceCaseOptions(
            culture=self.culture, **self.casing.sentence_options.model_dump()
        )

    def title_case_options(self) -> TitleCaseOptions:
        return TitleCaseOptions(culture=self.culture, **self.casing.title_options.model_dump())

    def sentence_lexicon(self) -> DefaultSentenceCaseLexicon:
        """Return the stock sentence lexicon extended with configured entries."""

        lex = self.lexicon
        if lex.is_empty():
            return DEFAULT_SENTENCE_LEXICON
        return extend_sentence_lexicon(
            DEFAULT_SENTENCE_LEXICON,
            acronyms=lex.acronyms,
            proper_case=lex.proper_case,
            abbreviations=lex.abbreviations,
            honorifics=lex.honorifics,
            brands=lex.brands,
            brand_suffixes=lex.brand_suffixes,
        )

    def title_lexicon(self) -> DefaultTitleCaseLexicon:
        lex = self.lexicon
        if not (lex.small_words or lex.protected):
            return DEFAULT_TITLE_LEXICON
        return extend_title_lexicon(
            DEFAULT_TITLE_LEXICON, small_words=lex.small_words, protected=lex.protected
        )


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_defaults() -> dict[str, Any]:
    """Return the packaged ``defaults.yml`` as a plain dict."""

    with (
        importlib_resources.files("tidytext.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        return yaml.safe_load(f) or {}


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    the ``TIDYTEXT_CULTURE`` environment variable.
    """

    defaults = load_defaults()
    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"{path}: top level of a config file must be a mapping")
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    culture = environ.get(CULTURE_ENV)
    if culture:
        merged = deep_merge_dicts(merged, {"culture": culture})

    return ConfigModel.model_validate(merged)


__all__ = [
    "CULTURE_ENV",
    "CasingOptions",
    "ConfigModel",
    "LexiconExtensions",
    "SentenceCaseSettings",
    "SpacingOptions",
    "TitleCaseSettings",
    "WhitespaceOptions",
    "deep_merge_dicts",
    "load_config",
    "load_defaults",
]
