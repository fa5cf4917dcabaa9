"""Tests for the packaged configuration defaults."""

from __future__ import annotations

from tidytext.casing.lexicon import DEFAULT_SENTENCE_LEXICON, DEFAULT_TITLE_LEXICON
from tidytext.casing.options import SentenceCaseOptions, TitleCaseOptions
from tidytext.config import ConfigModel, load_config


def test_defaults_load() -> None:
    cfg = load_config(env={})
    assert isinstance(cfg, ConfigModel)
    assert cfg.schema_version == 1
    assert cfg.culture == "en-US"
    assert cfg.spacing.fix_punctuation_spacing is True
    assert cfg.spacing.treat_colon_as_sentence_punct is False
    assert cfg.casing.selected() is None
    assert not any(cfg.whitespace.model_dump().values())


def test_default_builders_return_stock_objects() -> None:
    cfg = load_config(env={})
    assert cfg.sentence_lexicon() is DEFAULT_SENTENCE_LEXICON
    assert cfg.title_lexicon() is DEFAULT_TITLE_LEXICON
    assert cfg.sentence_case_options() == SentenceCaseOptions()
    assert cfg.title_case_options() == TitleCaseOptions()


def test_casing_priority() -> None:
    cfg = load_config(env={})
    cfg.casing.title = True
    cfg.casing.sentence = True
    assert cfg.casing.selected() == "sentence"
    cfg.casing.upper = True
    assert cfg.casing.selected() == "upper"
