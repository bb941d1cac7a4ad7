"""
Selector chains as produced by the stylesheet parser.

A `Selector` is an ordered run of simple selectors. Each simple selector holds
the combinator linking it to the previous compound, an optional element name
and the qualifiers (id, class, pseudo-class, pseudo-element, attribute
condition) attached to the same compound.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class Combinator(str, Enum):
    DESCENDANT = "descendant"
    CHILD = "child"
    ADJACENT_SIBLING = "adjacent_sibling"
    GENERAL_SIBLING = "general_sibling"


class MatchWay(str, Enum):
    """How an attribute condition compares the attribute value."""

    SET = "set"
    EQUALS = "equals"
    INCLUDES = "includes"
    DASHMATCH = "dashmatch"
    PREFIXMATCH = "prefixmatch"
    SUFFIXMATCH = "suffixmatch"
    SUBSTRINGMATCH = "substringmatch"


@dataclass(frozen=True)
class IdSelector:
    name: str


@dataclass(frozen=True)
class ClassSelector:
    name: str


@dataclass(frozen=True)
class PseudoClass:
    name: str
    extra: Optional[str] = None


@dataclass(frozen=True)
class PseudoElement:
    """
    A pseudo-element such as `::before`.

    `css2` is set by the parser when the source used the legacy single-colon
    form (`:before`); it is kept so the original spelling can be reproduced.
    """

    name: str
    css2: bool = False


@dataclass(frozen=True)
class AttributeSelector:
    name: str
    match_way: MatchWay
    value: Optional[str] = None


AdditionalSelector = Union[
    IdSelector, ClassSelector, PseudoClass, PseudoElement, AttributeSelector
]


@dataclass(frozen=True)
class SimpleSelector:
    name: Optional[str] = None
    combinator: Optional[Combinator] = None
    additional_selectors: List[AdditionalSelector] = field(default_factory=list)


@dataclass(frozen=True)
class UniversalSelector(SimpleSelector):
    name: Optional[str] = "*"


@dataclass(frozen=True)
class TypeSelector(SimpleSelector):
    pass


@dataclass(frozen=True)
class Selector:
    simple_selectors: List[SimpleSelector] = field(default_factory=list)


__all__ = [
    "AdditionalSelector",
    "AttributeSelector",
    "ClassSelector",
    "Combinator",
    "IdSelector",
    "MatchWay",
    "PseudoClass",
    "PseudoElement",
    "Selector",
    "SimpleSelector",
    "TypeSelector",
    "UniversalSelector",
]
