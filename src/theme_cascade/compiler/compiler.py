"""Override compiler: selector-keyed property bags into sorted runtime rules."""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterable, Mapping, Union

from theme_cascade.config import DEFAULT_CONTEXTS, CascadeConfig
from theme_cascade.model.override import CompiledOverride
from theme_cascade.model.theme import (
    DEFAULT_PROP_MAPS,
    CompiledTheme,
    PropClassMaps,
    ThemeCompilationResult,
    ThemeDefinition,
)
from theme_cascade.selector.normalize import normalize_selector
from theme_cascade.selector.parser import DEFAULT_COMPONENT, parse_selector
from theme_cascade.selector.specificity import calculate_specificity

logger = logging.getLogger(__name__)

__all__ = ["compile_override", "compile_overrides", "compile_theme"]

OverrideSource = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


def compile_override(
    selector: str,
    props: Any,
    known_contexts: Iterable[str] = DEFAULT_CONTEXTS,
    default_component: str = DEFAULT_COMPONENT,
) -> CompiledOverride:
    """Normalize, parse and weigh one selector. Never raises."""
    normalized = normalize_selector(selector, known_contexts)
    parsed = parse_selector(normalized, default_component)
    if not isinstance(props, Mapping):
        logger.warning("Ignoring non-mapping props for selector %r", selector)
        props = {}
    return CompiledOverride(
        selector=selector,
        component=parsed.component,
        context=parsed.context,
        identifier=parsed.identifier,
        state=parsed.state,
        attributes=parsed.attributes,
        props=copy.deepcopy(dict(props)),
        specificity=calculate_specificity(normalized),
    )


def compile_overrides(
    overrides: OverrideSource,
    known_contexts: Iterable[str] = DEFAULT_CONTEXTS,
    default_component: str = DEFAULT_COMPONENT,
) -> tuple[CompiledOverride, ...]:
    """Compile every ``(selector, props)`` pair and sort by descending specificity.

    The sort is stable, so rules of equal specificity keep declaration order
    and the later one wins during merge. A pair sequence may repeat a
    selector; a mapping cannot.
    """
    pairs = overrides.items() if isinstance(overrides, Mapping) else overrides
    contexts = frozenset(known_contexts)
    compiled = [
        compile_override(selector, props, contexts, default_component)
        for selector, props in pairs
    ]
    compiled.sort(key=lambda o: -o.specificity)
    logger.debug("Compiled %d override(s)", len(compiled))
    return tuple(compiled)


def compile_theme(
    definition: ThemeDefinition, config: CascadeConfig | None = None
) -> ThemeCompilationResult:
    """Validate and compile a theme definition.

    Returns a result with ``theme=None`` when validation reports errors;
    warnings never block compilation.
    """
    from theme_cascade.validation import validate

    config = config or CascadeConfig()
    diagnostics = validate(definition, config)
    errors = [d for d in diagnostics if d.is_error]
    warnings = [d for d in diagnostics if not d.is_error]
    name = definition.name or "unknown"

    if errors:
        logger.warning("Theme %s failed validation with %d error(s)", name, len(errors))
        return ThemeCompilationResult(name=name, theme=None, errors=errors, warnings=warnings)

    overrides = compile_overrides(
        definition.overrides, config.known_contexts, config.default_component
    )
    prop_maps = DEFAULT_PROP_MAPS.merged_with(PropClassMaps.from_dict(definition.prop_maps))
    theme = CompiledTheme(
        name=definition.name,
        overrides=overrides,
        prop_maps=prop_maps,
        display_name=definition.display_name,
        description=definition.description,
        is_default=definition.is_default,
    )
    logger.debug(
        "Compiled theme %s: %d override(s), %d warning(s)", name, len(overrides), len(warnings)
    )
    return ThemeCompilationResult(name=name, theme=theme, errors=[], warnings=warnings)
