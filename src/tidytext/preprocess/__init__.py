"""Text preprocessing: punctuation spacing and whitespace cleanup."""

from .protected import PROTECTED_CONSUMERS, find_protected_spans
from .spacing import fix_punctuation_spacing
from .whitespace import (
    remove_all_line_breaks,
    remove_multiple_lines,
    remove_multiple_spaces,
    trim,
    trim_end,
    trim_start,
)

__all__ = [
    "PROTECTED_CONSUMERS",
    "find_protected_spans",
    "fix_punctuation_spacing",
    "remove_all_line_breaks",
    "remove_multiple_lines",
    "remove_multiple_spaces",
    "trim",
    "trim_end",
    "trim_start",
]
