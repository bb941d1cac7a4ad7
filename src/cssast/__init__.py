"""Stylesheet AST nodes consumed by the printer."""

from .nodes import (
    Charset,
    Declaration,
    Document,
    DocumentQuery,
    FontfaceRule,
    ImportRule,
    MediaFeature,
    MediaQuery,
    MediaQueryList,
    MediaType,
    NamespaceRule,
    RuleSet,
)
from .sac import ConditionalSelector, ElementSelector, NodeSelector, SelectorType
from .selectors import (
    AttributeSelector,
    ClassSelector,
    Combinator,
    IdSelector,
    MatchWay,
    PseudoClass,
    PseudoElement,
    Selector,
    SimpleSelector,
    TypeSelector,
    UniversalSelector,
)
from .terms import URI, Function, Hash, Ident, Number, Resolution, Rgb, String, UnaryOperator

__all__ = [
    "AttributeSelector",
    "Charset",
    "ClassSelector",
    "Combinator",
    "ConditionalSelector",
    "Declaration",
    "Document",
    "DocumentQuery",
    "ElementSelector",
    "FontfaceRule",
    "Function",
    "Hash",
    "IdSelector",
    "Ident",
    "ImportRule",
    "MatchWay",
    "MediaFeature",
    "MediaQuery",
    "MediaQueryList",
    "MediaType",
    "NamespaceRule",
    "NodeSelector",
    "Number",
    "PseudoClass",
    "PseudoElement",
    "Resolution",
    "Rgb",
    "RuleSet",
    "Selector",
    "SelectorType",
    "SimpleSelector",
    "String",
    "TypeSelector",
    "URI",
    "UnaryOperator",
    "UniversalSelector",
]
