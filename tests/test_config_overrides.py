"""Tests for user YAML overrides, environment overrides and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from tidytext.config import load_config
from tidytext.config.schema import CULTURE_ENV, deep_merge_dicts


def test_deep_merge_nested_and_list_replace() -> None:
    base = {
        "outer": {"a": 1, "b": {"c": 2}},
        "list": [1, 2],
    }
    override = {
        "outer": {"b": {"c": 3}},
        "list": [3],
    }
    merged = deep_merge_dicts(base, override)
    assert merged == {"outer": {"a": 1, "b": {"c": 3}}, "list": [3]}
    # ensure original not mutated
    assert base["list"] == [1, 2]


def test_user_yaml_merges_over_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text(
        "spacing:\n  treat_colon_as_sentence_punct: true\n"
        "casing:\n  title: true\n  title_options:\n    preserve_acronyms: false\n"
        "lexicon:\n  acronyms: [KPI]\n  protected: [pH]\n",
        encoding="utf-8",
    )
    cfg = load_config(cfg_file, env={})
    assert cfg.spacing.treat_colon_as_sentence_punct is True
    assert cfg.spacing.fix_punctuation_spacing is True
    assert cfg.casing.selected() == "title"
    assert cfg.title_case_options().preserve_acronyms is False
    assert cfg.title_case_options().force_cap_first_and_last is True
    assert "KPI" in cfg.sentence_lexicon().upper_acronyms
    assert "pH" in cfg.title_lexicon().protected_as_is


def test_sentence_options_pass_through(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text(
        "casing:\n  sentence_options:\n    lowercase_mid_sentence_abbreviations: true\n",
        encoding="utf-8",
    )
    cfg = load_config(cfg_file, env={})
    options = cfg.sentence_case_options()
    assert options.lowercase_mid_sentence_abbreviations is True
    assert options.preserve_acronyms_mid_sentence is True


def test_empty_user_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yml"
    cfg_file.write_text("", encoding="utf-8")
    assert load_config(cfg_file, env={}) == load_config(env={})


def test_env_culture_override(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("culture: de-DE\n", encoding="utf-8")
    assert load_config(cfg_file, env={}).culture == "de-DE"
    monkeypatch.setenv(CULTURE_ENV, "tr-TR")
    cfg = load_config(cfg_file)
    assert cfg.culture == "tr-TR"
    assert cfg.sentence_case_options().culture == "tr-TR"


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_nested_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("casing:\n  shouting: true\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


@pytest.mark.parametrize(
    "body",
    [
        "schema_version: 0\n",
        "culture: '  '\n",
        "spacing:\n  fix_punctuation_spacing: [1, 2]\n",
        "lexicon:\n  acronyms: ['']\n",
    ],
)
def test_invalid_values(tmp_path: Path, body: str) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text(body)
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_non_mapping_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "list.yml"
    cfg_file.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(cfg_file, env={})
