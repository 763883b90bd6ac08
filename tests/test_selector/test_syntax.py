"""Tests for the strict Lark selector grammar."""

import pytest

from theme_cascade.model import AttributeMatcher, AttributeOperator, ParsedSelector
from theme_cascade.selector import (
    SelectorSyntaxError,
    is_well_formed,
    parse_selector_text,
    parse_strict,
)


# ---------------------------------------------------------------------------
# Accepted selectors
# ---------------------------------------------------------------------------


class TestWellFormed:
    def test_tag_only(self):
        assert parse_strict("button") == ParsedSelector(component="button")

    def test_context_shorthand(self):
        assert parse_strict("button.chat").context == "chat"

    def test_unknown_context_shorthand_ignored(self):
        assert parse_strict("button.primary") == ParsedSelector(component="button")

    def test_identifier_shorthand_with_state(self):
        parsed = parse_strict("button#chat.send:hover")
        assert parsed.identifier == "chat.send"
        assert parsed.state == "hover"

    def test_attribute_clause(self):
        parsed = parse_strict('input[type="text"]')
        assert parsed.attributes == (AttributeMatcher("type", AttributeOperator.EQUALS, "text"),)

    def test_exists_clause(self):
        parsed = parse_strict("input[disabled]")
        assert parsed.attributes == (AttributeMatcher("disabled"),)

    def test_canonical_form(self):
        parsed = parse_strict('button[data-context="chat"][data-id="send"]:focus')
        assert parsed == ParsedSelector(
            component="button", context="chat", identifier="send", state="focus"
        )

    def test_agrees_with_custom_contexts(self):
        assert parse_strict("card.profile", {"profile"}).context == "profile"

    def test_closing_bracket_inside_quoted_value(self):
        parsed = parse_strict('button[title="x]y"]')
        assert parsed.attributes == (AttributeMatcher("title", AttributeOperator.EQUALS, "x]y"),)


# ---------------------------------------------------------------------------
# Agreement with the lenient parser
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "selector",
    [
        "button#search#query",
        "button.chat.sidebar",
        "button.chat#a#b:hover",
        'button[data-id="a"][data-id="b"]',
        "button.primary.chat",
    ],
)
def test_repeated_clauses_agree_with_lenient_parser(selector):
    assert parse_strict(selector) == parse_selector_text(selector)


# ---------------------------------------------------------------------------
# Rejected selectors
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "selector",
    [
        "",
        ":hover",
        "button > span",
        "nav button",
        "input[type=text]",
        "button:hover:focus",
        'button[type="a"].chat',
        "button[",
    ],
)
def test_rejects_malformed(selector):
    with pytest.raises(SelectorSyntaxError):
        parse_strict(selector)
    assert not is_well_formed(selector)


def test_error_carries_selector_and_column():
    with pytest.raises(SelectorSyntaxError) as exc_info:
        parse_strict("button > span")
    assert exc_info.value.selector == "button > span"
    assert exc_info.value.column is not None


def test_is_well_formed_true():
    assert is_well_formed('button#chat.send[type="submit"]:hover')
