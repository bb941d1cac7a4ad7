"""Identifier and string escaping for emitted CSS."""

from .core import (
    CSS_IDENTIFIER_SIMPLE_ESCAPES,
    CSS_STRING_ESCAPE_MAP,
    escape_css_identifier,
    escape_css_string,
)

__all__ = [
    "CSS_IDENTIFIER_SIMPLE_ESCAPES",
    "CSS_STRING_ESCAPE_MAP",
    "escape_css_identifier",
    "escape_css_string",
]
