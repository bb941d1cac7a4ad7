"""
Document, rule and media nodes of a parsed stylesheet.

The printer treats every node as read-only. `RuleSet` attaches itself to its
declarations on construction so a declaration can tell whether it lives inside
a rule set (and therefore needs its own indent and terminating `;`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from .selectors import Selector
from .terms import URI, Ident, Term


@dataclass(frozen=True)
class MediaType:
    name: str


@dataclass(frozen=True)
class MediaFeature:
    property: str
    value: Union[Term, str]


MediaExpression = Union[MediaType, MediaFeature]


@dataclass(frozen=True)
class MediaQuery:
    media_expr: MediaExpression
    and_exprs: List[MediaExpression] = field(default_factory=list)
    only_or_not: Optional[str] = None


@dataclass(frozen=True)
class MediaQueryList:
    media_queries: List[MediaQuery] = field(default_factory=list)


@dataclass(frozen=True)
class Charset:
    name: str


@dataclass(frozen=True)
class ImportRule:
    uri: URI
    media_list: List[MediaType] = field(default_factory=list)


@dataclass(frozen=True)
class NamespaceRule:
    uri: URI
    prefix: Optional[Ident] = None


@dataclass(frozen=True)
class DocumentQuery:
    url_functions: List[Term] = field(default_factory=list)


@dataclass
class Declaration:
    property: str
    expressions: List[Term] = field(default_factory=list)
    important: bool = False
    rule_set: Optional["RuleSet"] = field(default=None, compare=False, repr=False)


@dataclass
class RuleSet:
    """
    Selectors plus declarations.

    `parent_rule` identifies the conditional group (usually a media query
    list) that logically encloses the rule; `None` means top level.
    """

    selectors: List[Selector] = field(default_factory=list)
    declarations: List[Declaration] = field(default_factory=list)
    parent_rule: Any = None

    def __post_init__(self) -> None:
        for declaration in self.declarations:
            declaration.rule_set = self


@dataclass
class FontfaceRule:
    declarations: List[Declaration] = field(default_factory=list)


@dataclass
class Document:
    charsets: List[Charset] = field(default_factory=list)
    import_rules: List[ImportRule] = field(default_factory=list)
    fontface_rules: List[FontfaceRule] = field(default_factory=list)
    rule_sets: List[RuleSet] = field(default_factory=list)


__all__ = [
    "Charset",
    "Declaration",
    "Document",
    "DocumentQuery",
    "FontfaceRule",
    "ImportRule",
    "MediaExpression",
    "MediaFeature",
    "MediaQuery",
    "MediaQueryList",
    "MediaType",
    "NamespaceRule",
    "RuleSet",
]
