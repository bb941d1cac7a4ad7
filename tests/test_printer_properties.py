"""Property-based checks shared by the pretty and minified profiles."""

from hypothesis import given
from hypothesis import strategies as st

from cssast import (
    ClassSelector,
    Combinator,
    Declaration,
    Document,
    Ident,
    Number,
    RuleSet,
    Selector,
    String,
    TypeSelector,
)
from printer import to_css, to_minified_css

NAMES = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=8)

TERMS = st.one_of(
    st.builds(Ident, NAMES),
    st.builds(Number, st.integers(min_value=0, max_value=500), st.sampled_from([None, "px", "%"])),
    st.builds(String, st.text(alphabet="ab \"\n", max_size=6)),
)

SIMPLE_SELECTORS = st.builds(
    TypeSelector,
    NAMES,
    combinator=st.sampled_from([None, Combinator.CHILD, Combinator.DESCENDANT]),
    additional_selectors=st.lists(st.builds(ClassSelector, NAMES), max_size=2),
)


@st.composite
def rule_sets(draw):
    chains = st.builds(Selector, st.lists(SIMPLE_SELECTORS, min_size=1, max_size=3))
    selectors = draw(st.lists(chains, max_size=2))
    declarations = draw(
        st.lists(
            st.builds(Declaration, NAMES, st.lists(TERMS, min_size=1, max_size=3), st.booleans()),
            max_size=3,
        )
    )
    parent = draw(st.sampled_from([None, "screen", "print"]))
    return RuleSet(selectors=selectors, declarations=declarations, parent_rule=parent)


DOCUMENTS = st.builds(Document, rule_sets=st.lists(rule_sets(), max_size=6))


def _strip_whitespace(text: str) -> str:
    return "".join(text.split())


@given(DOCUMENTS)
def test_profiles_differ_only_in_whitespace(document):
    assert _strip_whitespace(to_css(document)) == _strip_whitespace(to_minified_css(document))


@given(DOCUMENTS)
def test_one_media_block_per_run(document):
    runs = 0
    previous = None
    for rule_set in document.rule_sets:
        if rule_set.parent_rule != previous and rule_set.parent_rule is not None:
            runs += 1
        previous = rule_set.parent_rule

    css = to_css(document)
    assert css.count("@media") == runs
    assert css.count("{") == css.count("}")
