"""Active-theme holder: swaps compiled rule sets by replacement."""

from __future__ import annotations

import logging
import threading

from theme_cascade.compiler import compile_theme
from theme_cascade.config import CascadeConfig
from theme_cascade.model.override import ResolvedOverride, ResolveQuery
from theme_cascade.model.theme import CompiledTheme, ThemeDefinition
from theme_cascade.resolver import RuntimeResolver
from theme_cascade.validation import ValidationError

logger = logging.getLogger(__name__)


class ThemeRuntime:
    """Owns the resolver for the currently active theme.

    Activation builds a complete new resolver and then replaces the
    reference, so a reader holding the previous resolver keeps a consistent
    view. Resolution reads the reference without taking the lock.
    """

    def __init__(self, config: CascadeConfig | None = None) -> None:
        self.config = config or CascadeConfig()
        self._lock = threading.Lock()
        self._resolver: RuntimeResolver | None = None

    @property
    def active_theme(self) -> str | None:
        resolver = self._resolver
        return resolver.theme_name if resolver else None

    @property
    def resolver(self) -> RuntimeResolver | None:
        return self._resolver

    def activate(self, theme: CompiledTheme) -> RuntimeResolver:
        """Make *theme* the active theme and return its resolver."""
        resolver = RuntimeResolver(theme, self.config)
        with self._lock:
            previous = self._resolver
            self._resolver = resolver
        logger.info(
            "Activated theme %s (%d overrides, previous=%s)",
            theme.name,
            len(theme.overrides),
            previous.theme_name if previous else None,
        )
        return resolver

    def load(self, definition: ThemeDefinition) -> RuntimeResolver:
        """Compile *definition* and activate it.

        Raises:
            ValidationError: if the definition has ERROR diagnostics. The
                previously active theme stays in place.
        """
        result = compile_theme(definition, self.config)
        for warning in result.warnings:
            logger.warning("Theme %s: %s", result.name, warning)
        if result.theme is None:
            raise ValidationError(result.errors)
        return self.activate(result.theme)

    def deactivate(self) -> None:
        with self._lock:
            self._resolver = None

    def resolve(self, query: ResolveQuery) -> ResolvedOverride:
        """Resolve *query* against the active theme; empty props when none is active."""
        resolver = self._resolver
        if resolver is None:
            return ResolvedOverride()
        return resolver.resolve(query)
