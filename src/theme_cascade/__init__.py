"""theme-cascade: selector-based component overrides with CSS-like cascade semantics."""

from __future__ import annotations

__version__ = "0.1.0"

from theme_cascade.compiler import compile_overrides, compile_theme
from theme_cascade.config import CascadeConfig
from theme_cascade.model import (
    AttributeMatcher,
    AttributeOperator,
    CompiledOverride,
    CompiledTheme,
    ParsedSelector,
    PropClassMaps,
    ResolvedOverride,
    ResolveQuery,
    StaticElement,
    ThemeDefinition,
)
from theme_cascade.resolver import RuntimeResolver, resolve_overrides
from theme_cascade.runtime import ThemeRuntime
from theme_cascade.selector import calculate_specificity, normalize_selector, parse_selector

__all__ = [
    "__version__",
    "CascadeConfig",
    # model
    "AttributeMatcher",
    "AttributeOperator",
    "ParsedSelector",
    "CompiledOverride",
    "CompiledTheme",
    "PropClassMaps",
    "ResolveQuery",
    "ResolvedOverride",
    "StaticElement",
    "ThemeDefinition",
    # pipeline
    "normalize_selector",
    "parse_selector",
    "calculate_specificity",
    "compile_overrides",
    "compile_theme",
    "resolve_overrides",
    "RuntimeResolver",
    "ThemeRuntime",
]
