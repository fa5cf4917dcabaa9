from __future__ import annotations

import os
import time
from collections.abc import Callable

import pytest

from tidytext.casing.sentence import sentence_case
from tidytext.casing.title import title_case
from tidytext.preprocess.spacing import fix_punctuation_spacing

if os.getenv("SKIP_PERF_TESTS") == "1":
    pytest.skip("Performance tests skipped by SKIP_PERF_TESTS", allow_module_level=True)


def _get_env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, "").strip() or default)
    except ValueError:
        return default


def _elapsed(fn: Callable[[str], str], text: str) -> float:
    start = time.perf_counter()
    fn(text)
    return time.perf_counter() - start


@pytest.mark.parametrize(
    ("fn", "text"),
    [
        (fix_punctuation_spacing, "1" * 20000),
        (fix_punctuation_spacing, "1.2" * 6000),
        (fix_punctuation_spacing, "word " * 5000),
        (sentence_case, "Chapter one" + "." * 8000 + "5"),
        (sentence_case, "a." * 8000),
        (sentence_case, "U.S." * 4000 + " ok"),
        (title_case, "the road to nowhere " * 2000),
    ],
    ids=[
        "spacing-digits",
        "spacing-dotted-numbers",
        "spacing-words",
        "sentence-dots",
        "sentence-letter-dots",
        "sentence-acronym-dots",
        "title-words",
    ],
)
def test_long_inputs_stay_linear(fn: Callable[[str], str], text: str) -> None:
    budget = _get_env_float("PERF_BUDGET_SEC", 2.0)
    assert _elapsed(fn, text) < budget
