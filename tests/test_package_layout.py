"""Every tidytext module imports, is documented and exports what it lists."""

from __future__ import annotations

import importlib
import pkgutil
from importlib import resources
from types import ModuleType

import pytest

import tidytext


def _modules() -> list[ModuleType]:
    names = [tidytext.__name__] + [
        info.name for info in pkgutil.walk_packages(tidytext.__path__, tidytext.__name__ + ".")
    ]
    return [importlib.import_module(name) for name in names]


@pytest.mark.parametrize("module", _modules(), ids=lambda m: m.__name__)
def test_module_has_docstring(module: ModuleType) -> None:
    assert module.__doc__ and module.__doc__.strip()


@pytest.mark.parametrize(
    "module",
    [m for m in _modules() if hasattr(m, "__all__")],
    ids=lambda m: m.__name__,
)
def test_all_names_resolve(module: ModuleType) -> None:
    missing = [name for name in module.__all__ if not hasattr(module, name)]
    assert not missing


def test_subpackages_present() -> None:
    names = {m.__name__ for m in _modules()}
    assert {
        "tidytext.casing",
        "tidytext.preprocess",
        "tidytext.config",
        "tidytext.utils",
        "tidytext.pipeline",
        "tidytext.cli",
    } <= names


def test_defaults_file_ships_with_config_package() -> None:
    assert resources.files("tidytext.config").joinpath("defaults.yml").is_file()
