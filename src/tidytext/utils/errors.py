"""Typed exceptions raised while wiring converters together.

The text transformations themselves never raise for any string input; the
only failures are construction-time mistakes such as a missing lexicon.
"""


class ConverterConfigError(ValueError):
    """Base class for converter construction errors."""


class MissingLexiconError(ConverterConfigError):
    """Raised when a converter is built without a lexicon."""


class MissingOptionsError(ConverterConfigError):
    """Raised when a converter is built without an options object."""


class InvalidLexiconError(ConverterConfigError):
    """Raised when a supplied lexicon lacks the required wordlists."""
