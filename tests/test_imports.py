"""Smoke tests for package import and version."""

import tidytext


def test_import_package() -> None:
    assert isinstance(tidytext, object)


def test_version() -> None:
    assert tidytext.__version__ == "0.1.0"


def test_public_api() -> None:
    for name in tidytext.__all__:
        assert hasattr(tidytext, name), name
