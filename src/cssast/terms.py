"""
Value terms appearing on the right-hand side of declarations.

Every term carries an optional combining `operator` (for example `","` between
font families or `"/"` in `font: 12px/1.5`). A missing operator means the term
is juxtaposed with the previous one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class UnaryOperator(str, Enum):
    MINUS = "minus"
    PLUS = "plus"


@dataclass(frozen=True)
class Ident:
    value: str
    operator: Optional[str] = None


@dataclass(frozen=True)
class Hash:
    value: str
    operator: Optional[str] = None


@dataclass(frozen=True)
class URI:
    value: str
    operator: Optional[str] = None


@dataclass(frozen=True)
class String:
    value: str
    operator: Optional[str] = None


@dataclass(frozen=True)
class Number:
    """A numeric literal; `type` holds the unit suffix (`px`, `%`, `em`...)."""

    value: Union[int, float, str]
    type: Optional[str] = None
    unary_operator: Optional[UnaryOperator] = None
    operator: Optional[str] = None


@dataclass(frozen=True)
class Resolution:
    number: Union[int, float, str]
    unit: str
    operator: Optional[str] = None


@dataclass(frozen=True)
class Rgb:
    red: "Term"
    green: "Term"
    blue: "Term"
    operator: Optional[str] = None


@dataclass(frozen=True)
class Function:
    """
    A function call such as `attr(title)` or `rgba(0, 0, 0, 0.5)`.

    Parameters are terms or literal string tokens; literal tokens are emitted
    verbatim, so callers mixing the two pre-format any spacing themselves.
    """

    name: str
    params: List[Union["Term", str]] = field(default_factory=list)
    operator: Optional[str] = None


Term = Union[Ident, Hash, URI, String, Number, Resolution, Rgb, Function]


__all__ = [
    "Function",
    "Hash",
    "Ident",
    "Number",
    "Resolution",
    "Rgb",
    "String",
    "Term",
    "URI",
    "UnaryOperator",
]
