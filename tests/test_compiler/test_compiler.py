"""Tests for the override compiler."""

import logging

import pytest

from theme_cascade.compiler import compile_override, compile_overrides, compile_theme
from theme_cascade.config import CascadeConfig
from theme_cascade.model import (
    DEFAULT_PROP_MAPS,
    AttributeMatcher,
    AttributeOperator,
    CompiledOverride,
    ThemeDefinition,
)


# ---------------------------------------------------------------------------
# compile_override
# ---------------------------------------------------------------------------


class TestCompileOverride:
    def test_fields_from_shorthand(self):
        rule = compile_override('button.chat[type="submit"]:hover', {"variant": "ghost"})
        assert rule == CompiledOverride(
            selector='button.chat[type="submit"]:hover',
            component="button",
            context="chat",
            state="hover",
            attributes=(AttributeMatcher("type", AttributeOperator.EQUALS, "submit"),),
            props={"variant": "ghost"},
            specificity=31,
        )

    def test_original_selector_kept(self):
        rule = compile_override("button#chat.send", {})
        assert rule.selector == "button#chat.send"
        assert rule.identifier == "chat.send"
        assert rule.specificity == 11

    def test_props_are_copied(self):
        props = {"style": {"color": "red"}}
        rule = compile_override("button", props)
        props["style"]["color"] = "blue"
        assert rule.props == {"style": {"color": "red"}}

    def test_non_mapping_props_degrade(self, caplog):
        with caplog.at_level(logging.WARNING, logger="theme_cascade.compiler.compiler"):
            rule = compile_override("button", "solid")
        assert rule.props == {}
        assert "non-mapping props" in caplog.text


# ---------------------------------------------------------------------------
# compile_overrides
# ---------------------------------------------------------------------------


class TestCompileOverrides:
    def test_sorted_descending(self):
        rules = compile_overrides(
            {
                "button": {"variant": "solid"},
                "button#chat.send:hover": {"variant": "outline"},
                "button.chat": {"variant": "ghost"},
            }
        )
        assert [r.specificity for r in rules] == [21, 11, 1]
        assert [r.selector for r in rules] == ["button#chat.send:hover", "button.chat", "button"]

    def test_equal_specificity_keeps_declaration_order(self):
        rules = compile_overrides(
            {
                "button#chat.send": {"color": "a"},
                "button.chat": {"color": "b"},
                "input": {"color": "c"},
            }
        )
        assert [r.selector for r in rules] == ["button#chat.send", "button.chat", "input"]

    def test_pairs_allow_duplicate_selectors(self):
        rules = compile_overrides([("button", {"color": "a"}), ("button", {"color": "b"})])
        assert [r.props["color"] for r in rules] == ["a", "b"]

    def test_result_is_immutable_tuple(self):
        rules = compile_overrides({"button": {}})
        assert isinstance(rules, tuple)

    def test_malformed_selectors_do_not_abort(self):
        rules = compile_overrides(
            {"": {"a": 1}, "[[[": {"b": 2}, "nav > button": {"c": 3}, "button": {"d": 4}}
        )
        assert len(rules) == 4
        assert {r.component for r in rules} == {"button", "nav"}

    def test_custom_contexts(self):
        rules = compile_overrides({"card.profile": {}}, known_contexts={"profile"})
        assert rules[0].context == "profile"

    def test_custom_default_component(self):
        rules = compile_overrides({":hover": {}}, default_component="div")
        assert rules[0].component == "div"


# ---------------------------------------------------------------------------
# compile_theme
# ---------------------------------------------------------------------------


class TestCompileTheme:
    def test_success(self):
        definition = ThemeDefinition(
            name="retro",
            overrides={"button": {"variant": "solid"}, "button.chat": {"color": "primary"}},
        )
        result = compile_theme(definition)
        assert result.success
        assert result.errors == []
        assert result.theme is not None
        assert result.theme.name == "retro"
        assert [o.selector for o in result.theme.overrides] == ["button.chat", "button"]

    def test_prop_maps_overlay_defaults(self):
        definition = ThemeDefinition(
            name="retro",
            overrides={"button": {}},
            prop_maps={"variant": {"solid": "retro-solid"}},
        )
        theme = compile_theme(definition).theme
        assert theme.prop_maps.variant == {"solid": "retro-solid"}
        assert theme.prop_maps.size == DEFAULT_PROP_MAPS.size

    def test_errors_block_compilation(self):
        result = compile_theme(ThemeDefinition(name="", overrides={"button": {}}))
        assert not result.success
        assert result.theme is None
        assert result.name == "unknown"
        assert any(d.rule == "check_theme_name" for d in result.errors)

    def test_warnings_do_not_block(self):
        result = compile_theme(ThemeDefinition(name="retro", overrides={"button.fancy": {}}))
        assert result.success
        assert any(d.rule == "check_unknown_context" for d in result.warnings)

    def test_config_contexts_used(self):
        config = CascadeConfig().with_contexts(["profile"])
        result = compile_theme(
            ThemeDefinition(name="retro", overrides={"card.profile": {}}), config
        )
        assert result.theme.overrides[0].context == "profile"
        assert result.warnings == []
