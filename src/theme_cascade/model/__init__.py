"""Model layer -- public type re-exports."""

from theme_cascade.model.diagnostic import Diagnostic, Severity
from theme_cascade.model.override import (
    CompiledOverride,
    Element,
    PropertyBag,
    ResolvedOverride,
    ResolveQuery,
    StaticElement,
)
from theme_cascade.model.selector import AttributeMatcher, AttributeOperator, ParsedSelector
from theme_cascade.model.theme import (
    DEFAULT_PROP_MAPS,
    CompiledTheme,
    PropClassMaps,
    ThemeCompilationResult,
    ThemeDefinition,
)

__all__ = [
    # selector
    "AttributeOperator",
    "AttributeMatcher",
    "ParsedSelector",
    # override
    "PropertyBag",
    "Element",
    "StaticElement",
    "CompiledOverride",
    "ResolveQuery",
    "ResolvedOverride",
    # theme
    "PropClassMaps",
    "DEFAULT_PROP_MAPS",
    "ThemeDefinition",
    "CompiledTheme",
    "ThemeCompilationResult",
    # diagnostic
    "Severity",
    "Diagnostic",
]
