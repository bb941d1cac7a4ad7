"""
Serialization engine turning a stylesheet AST back into CSS text.

`CSSPrinter` is a visitor with one `_visit_<NodeClass>` method per node kind.
Each method returns the text for its node, combining the punctuation the
grammar requires with recursively rendered children and escaped leaf text.
The only mutable state during a pass is the indent depth (always restored
through `_indented`) and the diagnostics collected for declared limitations.
Node kinds without a handler, and attribute conditions with an unknown match
kind, raise `PrintError` so corrupt CSS is never produced silently.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Optional

from cssast import (
    AttributeSelector,
    Charset,
    ClassSelector,
    Combinator,
    ConditionalSelector,
    Declaration,
    Document,
    DocumentQuery,
    ElementSelector,
    FontfaceRule,
    Function,
    Hash,
    Ident,
    IdSelector,
    ImportRule,
    MatchWay,
    MediaFeature,
    MediaQuery,
    MediaQueryList,
    MediaType,
    NamespaceRule,
    NodeSelector,
    Number,
    PseudoClass,
    PseudoElement,
    Resolution,
    Rgb,
    RuleSet,
    Selector,
    SimpleSelector,
    String,
    UnaryOperator,
    URI,
)
from escaping import escape_css_identifier, escape_css_string

from .options import MINIFIED, PRETTY, PrintOptions, PrintResult

logger = logging.getLogger(__name__)

COMBINATORS: Dict[Combinator, str] = {
    Combinator.DESCENDANT: " ",
    Combinator.ADJACENT_SIBLING: " + ",
    Combinator.CHILD: " > ",
    Combinator.GENERAL_SIBLING: " ~ ",
}

# `{}` receives the escaped attribute name, then the escaped value.
ATTRIBUTE_TEMPLATES: Dict[MatchWay, str] = {
    MatchWay.EQUALS: '[{}="{}"]',
    MatchWay.INCLUDES: '[{} ~= "{}"]',
    MatchWay.DASHMATCH: '[{} |= "{}"]',
    MatchWay.PREFIXMATCH: '[{} ^= "{}"]',
    MatchWay.SUFFIXMATCH: '[{} $= "{}"]',
    MatchWay.SUBSTRINGMATCH: '[{} *= "{}"]',
}


class PrintError(RuntimeError):
    """Raised when a node cannot be rendered without producing invalid CSS."""

    def __init__(self, message: str, node: Any = None):
        suffix = f" ({type(node).__name__} node)" if node is not None else ""
        super().__init__(f"{message}{suffix}")
        self.node = node


class CSSPrinter:
    """Visitor rendering stylesheet AST nodes as CSS text."""

    def __init__(self, options: Optional[PrintOptions] = None):
        self.options = options or PRETTY
        self.diagnostics: List[str] = []
        self._indent_level = 0

    def _warn(self, message: str) -> None:
        logger.debug(message)
        self.diagnostics.append(message)

    # ------------------------------------------------------------------ helpers

    def visit(self, node: Any) -> str:
        return self._handler_for(node)(node)

    def _handler_for(self, node: Any) -> Callable[[Any], str]:
        handler = self._find_handler(node)
        if handler is None:
            raise PrintError("Unsupported node kind", node)
        return handler

    def _find_handler(self, node: Any) -> Optional[Callable[[Any], str]]:
        for cls in type(node).__mro__:
            handler = getattr(self, f"_visit_{cls.__name__}", None)
            if handler is not None:
                return handler
        return None

    def _indent(self) -> str:
        return self.options.indent_unit * self._indent_level

    @contextmanager
    def _indented(self) -> Iterator[None]:
        self._indent_level += 1
        try:
            yield
        finally:
            self._indent_level -= 1

    def _format_operand(self, term: Any) -> str:
        operator = term.operator
        if operator == "/":
            operator = " /"
        return f"{operator or ''} {self.visit(term)}"

    # ---------------------------------------------------------- document level

    def print_document(self, document: Document) -> str:
        self.diagnostics = []
        self._indent_level = 0
        logger.debug(
            "Printing document with %d charsets, %d imports, %d font-faces, %d rule sets",
            len(document.charsets),
            len(document.import_rules),
            len(document.fontface_rules),
            len(document.rule_sets),
        )
        tokens: List[str] = []
        for charset in document.charsets:
            tokens.append(self.visit(charset))
        for import_rule in document.import_rules:
            tokens.append(self.visit(import_rule))
        for fontface_rule in document.fontface_rules:
            tokens.append(self.visit(fontface_rule))
        tokens.extend(self._group_rule_sets(document.rule_sets))
        return self.options.line_break.join(token for token in tokens if token)

    _visit_Document = print_document

    def _group_rule_sets(self, rule_sets: List[RuleSet]) -> List[str]:
        """
        Render rule sets, wrapping each run of consecutive rules that share a
        parent rule in a single `@media` block.
        """
        tokens: List[str] = []
        current_group: Any = None
        base_level = self._indent_level
        try:
            for rule_set in rule_sets:
                if rule_set.parent_rule != current_group:
                    if current_group is not None:
                        self._indent_level -= 1
                        tokens.append(f"{self._indent()}}}")
                    if rule_set.parent_rule is not None:
                        group = self._format_group(rule_set.parent_rule)
                        tokens.append(f"{self._indent()}@media {group} {{")
                        self._indent_level += 1
                    current_group = rule_set.parent_rule
                tokens.append(self.visit(rule_set))
            if current_group is not None:
                self._indent_level -= 1
                tokens.append(f"{self._indent()}}}")
        finally:
            self._indent_level = base_level
        return tokens

    def _format_group(self, group: Any) -> str:
        handler = self._find_handler(group)
        if handler is None:
            return str(group)
        return handler(group)

    # ------------------------------------------------------------ media nodes

    def _visit_MediaType(self, node: MediaType) -> str:
        return escape_css_identifier(node.name)

    def _visit_MediaFeature(self, node: MediaFeature) -> str:
        value = node.value if isinstance(node.value, str) else self.visit(node.value)
        return f"({escape_css_identifier(node.property)}:{value})"

    def _visit_MediaQuery(self, node: MediaQuery) -> str:
        parts: List[str] = []
        if node.only_or_not:
            parts.append(f"{node.only_or_not} ")
        parts.append(self.visit(node.media_expr))
        if node.and_exprs:
            parts.append(" and ")
            parts.append(" and ".join(self.visit(expr) for expr in node.and_exprs))
        return "".join(parts)

    def _visit_MediaQueryList(self, node: MediaQueryList) -> str:
        return ", ".join(self.visit(query) for query in node.media_queries)

    # -------------------------------------------------------------- at-rules

    def _visit_Charset(self, node: Charset) -> str:
        return f'@charset "{escape_css_string(node.name)}";'

    def _visit_FontfaceRule(self, node: FontfaceRule) -> str:
        line_break = self.options.line_break
        with self._indented():
            inner_indent = self._indent()
            declarations = [
                f"{inner_indent}{self.visit(declaration)};" for declaration in node.declarations
            ]
        return (
            f"@font-face {{{line_break}"
            + line_break.join(declarations)
            + f"{line_break}{self._indent()}}}"
        )

    def _visit_ImportRule(self, node: ImportRule) -> str:
        media = ""
        if node.media_list:
            media = " " + ", ".join(escape_css_identifier(medium.name) for medium in node.media_list)
        return f"{self._indent()}@import {self.visit(node.uri)}{media};"

    def _visit_DocumentQuery(self, node: DocumentQuery) -> str:
        self._warn("@document rule printed with an empty body; nested rules are not serialized.")
        functions = ", ".join(self.visit(function) for function in node.url_functions)
        return f"{self._indent()}@document {functions} {{}}"

    def _visit_NamespaceRule(self, node: NamespaceRule) -> str:
        if node.prefix is None:
            return f"{self._indent()}@namespace {self.visit(node.uri)}"
        return f"{self._indent()}@namespace {self.visit(node.prefix)} {self.visit(node.uri)}"

    # ---------------------------------------------------- rule sets and values

    def _visit_RuleSet(self, node: RuleSet) -> str:
        if not node.selectors:
            return ""
        selectors = ", ".join(self.visit(selector) for selector in node.selectors)
        declarations = [self.visit(declaration) for declaration in node.declarations]
        if self.options.compact_rule_sets:
            return f"{selectors} {{" + "".join(declarations) + " }"
        line_break = self.options.line_break
        indent = self._indent()
        return (
            f"{indent}{selectors} {{{line_break}"
            + line_break.join(declarations)
            + f"{line_break}{indent}}}"
        )

    def _visit_Declaration(self, node: Declaration) -> str:
        in_rule_set = node.rule_set is not None
        with self._indented():
            indent = self._indent() if in_rule_set else ""
            value = "".join(self._format_operand(term) for term in node.expressions).strip()
        important = " !important" if node.important else ""
        terminator = ";" if in_rule_set else ""
        return f"{indent}{escape_css_identifier(node.property)}: {value}{important}{terminator}"

    def _visit_Ident(self, node: Ident) -> str:
        return escape_css_identifier(node.value)

    def _visit_Hash(self, node: Hash) -> str:
        return f"#{node.value}"

    def _visit_URI(self, node: URI) -> str:
        return f'url("{escape_css_string(node.value)}")'

    def _visit_Function(self, node: Function) -> str:
        params: List[str] = []
        for param in node.params:
            if isinstance(param, str):
                params.append(param)
            elif param.operator:
                params.append(f"{param.operator} {self.visit(param)}")
            else:
                params.append(self.visit(param))
        return f"{escape_css_identifier(node.name)}({''.join(params)})"

    def _visit_Rgb(self, node: Rgb) -> str:
        channels = ", ".join(self.visit(channel) for channel in (node.red, node.green, node.blue))
        return f"rgb({channels})"

    def _visit_String(self, node: String) -> str:
        return f'"{escape_css_string(node.value)}"'

    def _visit_Number(self, node: Number) -> str:
        sign = "-" if node.unary_operator == UnaryOperator.MINUS else ""
        return f"{sign}{_format_number(node.value)}{node.type or ''}"

    def _visit_Resolution(self, node: Resolution) -> str:
        return f"{_format_number(node.number)}{node.unit}"

    # -------------------------------------------------------------- selectors

    def _visit_Selector(self, node: Selector) -> str:
        return "".join(self.visit(simple) for simple in node.simple_selectors)

    def _visit_SimpleSelector(self, node: SimpleSelector) -> str:
        combinator = ""
        if node.combinator is not None:
            combinator = COMBINATORS.get(node.combinator)
            if combinator is None:
                raise PrintError(f"No matching combinator: {node.combinator!r}", node)
        name = "*" if node.name in (None, "*") else escape_css_identifier(node.name)
        qualifiers = "".join(self.visit(extra) for extra in node.additional_selectors)
        return f"{combinator}{name}{qualifiers}"

    def _visit_IdSelector(self, node: IdSelector) -> str:
        return f"#{escape_css_identifier(node.name)}"

    def _visit_ClassSelector(self, node: ClassSelector) -> str:
        return f".{escape_css_identifier(node.name)}"

    def _visit_PseudoClass(self, node: PseudoClass) -> str:
        if node.extra is None:
            return f":{escape_css_identifier(node.name)}"
        return f":{escape_css_identifier(node.name)}({escape_css_identifier(node.extra)})"

    def _visit_PseudoElement(self, node: PseudoElement) -> str:
        if node.css2:
            return f":{escape_css_identifier(node.name)}"
        return f"::{escape_css_identifier(node.name)}"

    def _visit_AttributeSelector(self, node: AttributeSelector) -> str:
        name = escape_css_identifier(node.name)
        if node.match_way == MatchWay.SET:
            return f"[{name}]"
        template = ATTRIBUTE_TEMPLATES.get(node.match_way)
        if template is None:
            raise PrintError(f"No matching match kind: {node.match_way!r}", node)
        return template.format(name, escape_css_string(node.value or ""))

    def _visit_NodeSelector(self, node: NodeSelector) -> str:
        return "*"

    def _visit_ElementSelector(self, node: ElementSelector) -> str:
        return escape_css_identifier(node.name)

    def _visit_ConditionalSelector(self, node: ConditionalSelector) -> str:
        return self.visit(node.selector) + self.visit(node.condition)


def _format_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def print_document(document: Document, *, options: Optional[PrintOptions] = None) -> PrintResult:
    """
    Convenience wrapper building a printer instance and returning the CSS text
    along with collected diagnostics.
    """
    printer = CSSPrinter(options)
    css = printer.print_document(document)
    return PrintResult(css=css, diagnostics=printer.diagnostics)


def to_css(document: Document) -> str:
    return print_document(document, options=PRETTY).css


def to_minified_css(document: Document) -> str:
    return print_document(document, options=MINIFIED).css


__all__ = [
    "ATTRIBUTE_TEMPLATES",
    "COMBINATORS",
    "CSSPrinter",
    "PrintError",
    "print_document",
    "to_css",
    "to_minified_css",
]
