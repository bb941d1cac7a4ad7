import pytest

from cssast import (
    AttributeSelector,
    ClassSelector,
    Combinator,
    ConditionalSelector,
    ElementSelector,
    IdSelector,
    MatchWay,
    NodeSelector,
    PseudoClass,
    PseudoElement,
    Selector,
    SelectorType,
    SimpleSelector,
    TypeSelector,
    UniversalSelector,
)
from printer import CSSPrinter, PrintError


def _render(node) -> str:
    return CSSPrinter().visit(node)


def test_compound_selector_chain():
    selector = Selector(
        [
            TypeSelector("ul", additional_selectors=[IdSelector("nav")]),
            TypeSelector(
                "li",
                combinator=Combinator.CHILD,
                additional_selectors=[ClassSelector("item"), PseudoClass("hover")],
            ),
        ]
    )
    assert _render(selector) == "ul#nav > li.item:hover"


@pytest.mark.parametrize(
    "combinator, expected",
    [
        (Combinator.DESCENDANT, "div p"),
        (Combinator.CHILD, "div > p"),
        (Combinator.ADJACENT_SIBLING, "div + p"),
        (Combinator.GENERAL_SIBLING, "div ~ p"),
    ],
)
def test_combinators(combinator, expected):
    selector = Selector([TypeSelector("div"), TypeSelector("p", combinator=combinator)])
    assert _render(selector) == expected


def test_universal_and_nameless_selectors_render_star():
    assert _render(UniversalSelector()) == "*"
    assert _render(SimpleSelector(additional_selectors=[ClassSelector("x")])) == "*.x"


def test_names_are_escaped():
    assert _render(ClassSelector("1col")) == ".\\000031col"
    assert _render(IdSelector("a:b")) == "#a\\:b"
    assert _render(TypeSelector("my elem")) == "my\\ elem"


def test_pseudo_class_with_argument():
    assert _render(PseudoClass("first-child")) == ":first-child"
    assert _render(PseudoClass("nth-child", "odd")) == ":nth-child(odd)"
    assert _render(PseudoClass("lang", "en")) == ":lang(en)"


def test_pseudo_elements():
    assert _render(PseudoElement("before")) == "::before"
    assert _render(PseudoElement("before", css2=True)) == ":before"


@pytest.mark.parametrize(
    "match_way, expected",
    [
        (MatchWay.SET, "[data-x]"),
        (MatchWay.EQUALS, '[data-x="y"]'),
        (MatchWay.INCLUDES, '[data-x ~= "y"]'),
        (MatchWay.DASHMATCH, '[data-x |= "y"]'),
        (MatchWay.PREFIXMATCH, '[data-x ^= "y"]'),
        (MatchWay.SUFFIXMATCH, '[data-x $= "y"]'),
        (MatchWay.SUBSTRINGMATCH, '[data-x *= "y"]'),
    ],
)
def test_attribute_match_kinds(match_way, expected):
    assert _render(AttributeSelector("data-x", match_way, "y")) == expected


def test_attribute_value_is_string_escaped():
    node = AttributeSelector("title", MatchWay.EQUALS, 'say "hi"')
    assert _render(node) == '[title="say \\"hi\\""]'


def test_unknown_attribute_match_kind_raises():
    node = AttributeSelector("data-x", "contains", "y")
    with pytest.raises(PrintError, match="match kind") as excinfo:
        _render(node)
    assert excinfo.value.node is node


def test_sac_selector_kinds():
    element = ElementSelector("div")
    conditional = ConditionalSelector(element, ClassSelector("nav"))

    assert NodeSelector().selector_type is SelectorType.ANY_NODE
    assert element.selector_type is SelectorType.ELEMENT_NODE
    assert element.name == "div"
    assert conditional.selector_type is SelectorType.CONDITIONAL
    assert conditional.selector is element
    assert conditional.condition == ClassSelector("nav")


def test_sac_selectors_render():
    assert _render(NodeSelector()) == "*"
    assert _render(ElementSelector("h1")) == "h1"
    assert _render(ConditionalSelector(ElementSelector("a"), IdSelector("top"))) == "a#top"
    assert _render(ConditionalSelector(NodeSelector(), ClassSelector("x"))) == "*.x"


def test_unknown_combinator_raises():
    node = TypeSelector("p", combinator="sibling")
    with pytest.raises(PrintError, match="combinator") as excinfo:
        _render(Selector([TypeSelector("div"), node]))
    assert excinfo.value.node is node
