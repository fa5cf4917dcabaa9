"""Fixed-order text cleanup pipeline.

:func:`clean` applies the configured transformations in this order:

1. ``trim``, ``trim_start``, ``trim_end``
2. ``remove_multiple_spaces``
3. ``remove_multiple_lines``
4. ``remove_all_line_breaks``
5. punctuation spacing
6. one casing transformation, chosen by priority
   upper > lower > sentence > title

The order is part of the contract: spacing runs on whitespace-cleaned text
and casing always sees the final spacing.  Each applied step is logged at
DEBUG level and recorded in :attr:`CleanResult.steps`.

Example
-------

>>> from tidytext.config import load_config
>>> cfg = load_config()
>>> clean("hello ,world", cfg).text
'hello, world'
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from tidytext.casing.sentence import SentenceCaseConverter
from tidytext.casing.textcase import to_lower, to_upper
from tidytext.casing.title import TitleCaseConverter
from tidytext.config import ConfigModel, load_config
from tidytext.preprocess import spacing, whitespace
from tidytext.utils.logging import get_logger

__all__ = ["CleanResult", "Pipeline", "clean"]

LOG = get_logger(__name__)

Step = Callable[[str], str]


@dataclass(slots=True, frozen=True)
class CleanResult:
    """Result of :func:`clean`.

    Attributes
    ----------
    text:
        The transformed text.
    changed:
        ``True`` when ``text`` differs from the input.
    steps:
        Names of the steps that ran, in order.
    """

    text: str
    changed: bool
    steps: tuple[str, ...]


class Pipeline:
    """Steps built once from a :class:`~tidytext.config.ConfigModel`.

    Converters are constructed up front so a pipeline can be reused for many
    inputs; it holds no per-call state.
    """

    def __init__(self, config: ConfigModel) -> None:
        self._config = config
        self._steps = self._build_steps(config)

    @property
    def config(self) -> ConfigModel:
        return self._config

    @property
    def step_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self._steps)

    @staticmethod
    def _build_steps(cfg: ConfigModel) -> list[tuple[str, Step]]:
        steps: list[tuple[str, Step]] = []
        ws = cfg.whitespace
        for name in (
            "trim",
            "trim_start",
            "trim_end",
            "remove_multiple_spaces",
            "remove_multiple_lines",
            "remove_all_line_breaks",
        ):
            if getattr(ws, name):
                steps.append((name, getattr(whitespace, name)))

        if cfg.spacing.fix_punctuation_spacing:
            steps.append(
                (
                    "fix_punctuation_spacing",
                    partial(
                        spacing.fix_punctuation_spacing,
                        treat_colon_as_sentence_punct=cfg.spacing.treat_colon_as_sentence_punct,
                    ),
                )
            )

        mode = cfg.casing.selected()
        if mode == "upper":
            steps.append(("upper_case", partial(to_upper, culture=cfg.culture)))
        elif mode == "lower":
            steps.append(("lower_case", partial(to_lower, culture=cfg.culture)))
        elif mode == "sentence":
            sentence = SentenceCaseConverter(cfg.sentence_lexicon(), cfg.sentence_case_options())
            steps.append(("sentence_case", sentence.convert))
        elif mode == "title":
            title = TitleCaseConverter(
                cfg.title_lexicon(), cfg.sentence_lexicon(), cfg.title_case_options()
            )
            steps.append(("title_case", title.convert))
        return steps

    def run(self, text: str) -> CleanResult:
        if not text:
            return CleanResult(text=text, changed=False, steps=())
        current = text
        applied: list[str] = []
        for name, step in self._steps:
            result = step(current)
            LOG.debug(
                "%s: %d -> %d chars, changed=%s", name, len(current), len(result), result != current
            )
            current = result
            applied.append(name)
        return CleanResult(text=current, changed=current != text, steps=tuple(applied))


def clean(text: str, config: ConfigModel | None = None) -> CleanResult:
    """Run the pipeline described by ``config`` (package defaults if omitted)."""

    cfg = config if config is not None else load_config()
    return Pipeline(cfg).run(text)
