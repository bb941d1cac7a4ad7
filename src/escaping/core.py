"""
Escaping helpers that keep emitted CSS lexically valid (CSS2 section 4.1.3).

Identifiers and strings follow different grammars: identifiers escape every
character outside `[a-zA-Z0-9_-]` (and a leading digit or `-` followed by `-`
or a digit), strings only escape the characters that would terminate or
corrupt a double-quoted literal.
"""

from __future__ import annotations

import re
from typing import Dict

CSS_IDENTIFIER_SIMPLE_ESCAPES = ":()-\\ ="

CSS_STRING_ESCAPE_MAP: Dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\a ",
    "\r": "\\\r",
    "\f": "\\\f",
}

_IDENTIFIER_UNSAFE_RE = re.compile(r"\A\d|\A-(?=[-\d])|[^a-zA-Z0-9_-]", re.ASCII)
_STRING_ESCAPE_TABLE = str.maketrans(CSS_STRING_ESCAPE_MAP)


def _escape_identifier_char(match: re.Match) -> str:
    char = match.group(0)
    if char in CSS_IDENTIFIER_SIMPLE_ESCAPES:
        return "\\" + char
    # Always six digits so the escape never needs a terminating space.
    return "\\" + format(ord(char), "06x")


def escape_css_identifier(text: str) -> str:
    """
    Escape `text` for use as an identifier (property, element, class, id...).

    Characters from `: ( ) - \\ =` and space get a backslash prefix, anything
    else that is unsafe becomes a six digit lowercase hex escape.
    """
    return _IDENTIFIER_UNSAFE_RE.sub(_escape_identifier_char, text)


def escape_css_string(text: str) -> str:
    """Escape `text` for placement inside a double-quoted CSS string."""
    return text.translate(_STRING_ESCAPE_TABLE)


__all__ = [
    "CSS_IDENTIFIER_SIMPLE_ESCAPES",
    "CSS_STRING_ESCAPE_MAP",
    "escape_css_identifier",
    "escape_css_string",
]
