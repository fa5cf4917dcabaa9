"""Typer-based command line interface for the cleanup pipeline.

``tidytext run`` cleans a file (or stdin/stdout with ``-``) and
``tidytext apply`` cleans a literal string and prints the result.  Both
load the packaged defaults, merge an optional ``--config`` YAML file and
then apply command line overrides.

Exit codes
----------
0 success
3 I/O error (missing input, unwritable output)
4 configuration error
5 pipeline error (unexpected exception while transforming)
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from time import perf_counter
from typing import Optional

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, load_config
from .pipeline import CleanResult, Pipeline
from .textio import read_text, write_text
from .utils.logging import configure_logging

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")
    os.environ.setdefault("RICH_DISABLE_NO_COLOR", "1")

app = typer.Typer(
    name="tidytext",
    help="Fix punctuation spacing and casing. Use 'tidytext run' on files "
    "or 'tidytext apply' on a string.",
)

_CASINGS = ("upper", "lower", "sentence", "title")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> None:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _apply_overrides(
    cfg: ConfigModel,
    *,
    fix_spacing: bool | None,
    colon: bool | None,
    casing: str | None,
    culture: str | None,
) -> ConfigModel:
    """Return a copy of ``cfg`` with CLI overrides applied."""

    new_cfg = cfg.model_copy(deep=True)
    if fix_spacing is not None:
        new_cfg.spacing.fix_punctuation_spacing = fix_spacing
    if colon is not None:
        new_cfg.spacing.treat_colon_as_sentence_punct = colon
    if casing is not None:
        for mode in _CASINGS:
            setattr(new_cfg.casing, mode, mode == casing)
    if culture:
        new_cfg.culture = culture
    return new_cfg


def _pick_casing(upper: bool, lower: bool, sentence: bool, title: bool) -> str | None:
    chosen = [name for name, on in zip(_CASINGS, (upper, lower, sentence, title)) if on]
    if len(chosen) > 1:
        _safe_exit(4, "choose at most one of --upper, --lower, --sentence, --title")
    return chosen[0] if chosen else None


def _load(
    config_path: Path | None,
    *,
    fix_spacing: bool | None,
    colon: bool | None,
    casing: str | None,
    culture: str | None,
    verbose: bool,
) -> ConfigModel:
    try:
        cfg = load_config(config_path)
    except (ValidationError, yaml.YAMLError, ValueError, OSError) as exc:
        _safe_exit(4, str(exc).splitlines()[0])
    if verbose:
        typer.echo("Loaded config", err=True)
    return _apply_overrides(
        cfg, fix_spacing=fix_spacing, colon=colon, casing=casing, culture=culture
    )


def _transform(text: str, cfg: ConfigModel, verbose: bool) -> CleanResult:
    start = perf_counter()
    try:
        result = Pipeline(cfg).run(text)
    except Exception as exc:  # pragma: no cover - unexpected
        msg = str(exc)
        if verbose:
            msg = f"{type(exc).__name__}: {msg}"
        _safe_exit(5, msg)
    if verbose:
        elapsed = (perf_counter() - start) * 1000.0
        steps = ", ".join(result.steps) or "none"
        typer.echo(
            f"Steps: {steps} (changed={result.changed}) in {elapsed:.1f} ms", err=True
        )
    return result


@app.callback()
def main() -> None:
    """Entry point for the tidytext command group."""
    pass


@app.command()
def run(  # noqa: PLR0913
    in_path: Path = typer.Option(  # noqa: B008
        ..., "--in", "--input", help="Input text file, or '-' for stdin"
    ),
    out_path: Path = typer.Option(  # noqa: B008
        ..., "--out", help="Output text file, or '-' for stdout"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    fix_spacing: bool | None = typer.Option(  # noqa: B008
        None, "--fix-spacing/--no-fix-spacing", help="Toggle punctuation spacing"
    ),
    colon: bool | None = typer.Option(  # noqa: B008
        None, "--colon/--no-colon", help="Space narrative colons like sentence punctuation"
    ),
    upper: bool = typer.Option(False, "--upper", help="UPPER CASE the result"),  # noqa: B008
    lower: bool = typer.Option(False, "--lower", help="lower case the result"),  # noqa: B008
    sentence: bool = typer.Option(  # noqa: B008
        False, "--sentence", help="Sentence case the result"
    ),
    title: bool = typer.Option(False, "--title", help="Title Case the result"),  # noqa: B008
    culture: Optional[str] = typer.Option(  # noqa: B008
        None, "--culture", help="Casing culture such as en-US or tr-TR"
    ),
    encoding_in: str = typer.Option("utf-8-sig", help="Input file encoding"),  # noqa: B008
    encoding_out: str = typer.Option("utf-8", help="Output file encoding"),  # noqa: B008
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Clean ``in_path`` and write the result to ``out_path``."""

    configure_logging(verbose)
    casing = _pick_casing(upper, lower, sentence, title)
    cfg = _load(
        config_path,
        fix_spacing=fix_spacing,
        colon=colon,
        casing=casing,
        culture=culture,
        verbose=verbose,
    )

    try:
        text = read_text(in_path, encoding=encoding_in)
    except (OSError, UnicodeDecodeError) as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo(f"Read {len(text)} chars", err=True)

    result = _transform(text, cfg, verbose)

    try:
        write_text(out_path, result.text, encoding=encoding_out)
    except OSError as exc:
        _safe_exit(3, str(exc))
    if verbose:
        typer.echo("Wrote output", err=True)


@app.command()
def apply(  # noqa: PLR0913
    text: str = typer.Argument(..., help="Text to clean"),  # noqa: B008
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    fix_spacing: bool | None = typer.Option(  # noqa: B008
        None, "--fix-spacing/--no-fix-spacing", help="Toggle punctuation spacing"
    ),
    colon: bool | None = typer.Option(  # noqa: B008
        None, "--colon/--no-colon", help="Space narrative colons like sentence punctuation"
    ),
    upper: bool = typer.Option(False, "--upper", help="UPPER CASE the result"),  # noqa: B008
    lower: bool = typer.Option(False, "--lower", help="lower case the result"),  # noqa: B008
    sentence: bool = typer.Option(  # noqa: B008
        False, "--sentence", help="Sentence case the result"
    ),
    title: bool = typer.Option(False, "--title", help="Title Case the result"),  # noqa: B008
    culture: Optional[str] = typer.Option(  # noqa: B008
        None, "--culture", help="Casing culture such as en-US or tr-TR"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit progress messages to stderr"
    ),
) -> None:
    """Clean ``TEXT`` and print the result."""

    configure_logging(verbose)
    casing = _pick_casing(upper, lower, sentence, title)
    cfg = _load(
        config_path,
        fix_spacing=fix_spacing,
        colon=colon,
        casing=casing,
        culture=culture,
        verbose=verbose,
    )
    result = _transform(text, cfg, verbose)
    typer.echo(result.text)
