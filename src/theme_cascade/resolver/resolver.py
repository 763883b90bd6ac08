"""Runtime override resolution.

:func:`resolve_overrides` is the pure matching/merge pipeline over a compiled
rule tuple. :class:`RuntimeResolver` wraps one compiled theme with a
per-component index and a bounded result cache for repeated queries.
"""

from __future__ import annotations

import copy
import logging
import threading
from collections import OrderedDict
from typing import Hashable, Iterable

from theme_cascade.config import CascadeConfig
from theme_cascade.model.override import CompiledOverride, ResolvedOverride, ResolveQuery
from theme_cascade.model.theme import CompiledTheme, PropClassMaps
from theme_cascade.resolver.attributes import element_matches
from theme_cascade.resolver.merge import merge_props, project_props_to_classes

logger = logging.getLogger(__name__)

__all__ = ["rule_matches", "resolve_overrides", "RuntimeResolver"]


def rule_matches(rule: CompiledOverride, query: ResolveQuery) -> bool:
    """Check whether *rule* applies to *query*.

    Component must be equal; context, identifier and state only constrain
    when the rule sets them. Attribute clauses need a live element.
    """
    if rule.component != query.component:
        return False
    if rule.context and rule.context != query.context:
        return False
    if rule.identifier and rule.identifier != query.identifier:
        return False
    if rule.state and rule.state != query.state:
        return False
    if rule.attributes and not element_matches(query.element, rule.attributes):
        return False
    return True


def _finish(
    matching: list[CompiledOverride], query: ResolveQuery, prop_maps: PropClassMaps
) -> ResolvedOverride:
    props = copy.deepcopy(merge_props(matching))
    if not query.is_managed:
        props = project_props_to_classes(props, prop_maps)
    return ResolvedOverride(props=props)


def resolve_overrides(
    query: ResolveQuery,
    rules: Iterable[CompiledOverride],
    prop_maps: PropClassMaps | None = None,
) -> ResolvedOverride:
    """Resolve the merged props for *query* against compiled *rules*.

    *prop_maps* is the class-name table used for unmanaged components; with
    none given, semantic props pass through unchanged.
    """
    matching = [rule for rule in rules if rule_matches(rule, query)]
    return _finish(matching, query, prop_maps or PropClassMaps())


class _LRUCache:
    """Bounded mapping that evicts the least recently used entry."""

    def __init__(self, max_size: int = 100) -> None:
        self._lock = threading.Lock()
        self._data: OrderedDict[Hashable, ResolvedOverride] = OrderedDict()
        self.max_size = max_size

    def get(self, key: Hashable) -> ResolvedOverride | None:
        with self._lock:
            value = self._data.get(key)
            if value is not None:
                self._data.move_to_end(key)
            return value

    def set(self, key: Hashable, value: ResolvedOverride) -> None:
        if self.max_size <= 0:
            return
        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            while len(self._data) > self.max_size:
                self._data.popitem(last=False)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class RuntimeResolver:
    """Resolve overrides for component instances against one compiled theme.

    Results are cached when they cannot depend on the element: either no
    element is given or the component has no attribute-dependent rules.
    Cached results are copied on the way out so callers may mutate them.
    """

    def __init__(self, theme: CompiledTheme, config: CascadeConfig | None = None) -> None:
        self.config = config or CascadeConfig()
        self.theme_name = theme.name
        self.prop_maps = theme.prop_maps
        # stable: equal-specificity rules keep declaration order
        self.overrides: tuple[CompiledOverride, ...] = tuple(
            sorted(theme.overrides, key=lambda o: -o.specificity)
        )
        self._index: dict[str, list[CompiledOverride]] = {}
        self._attribute_components: set[str] = set()
        for override in self.overrides:
            self._index.setdefault(override.component, []).append(override)
            if override.attributes:
                self._attribute_components.add(override.component)
        self._cache = _LRUCache(self.config.cache_size)

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def clear_cache(self) -> None:
        self._cache.clear()

    def resolve(self, query: ResolveQuery) -> ResolvedOverride:
        """Return merged props for *query*; never raises."""
        cacheable = query.element is None or query.component not in self._attribute_components
        key = (
            query.component,
            query.context or "",
            query.identifier or "",
            query.state or "",
            query.is_managed,
        )
        if cacheable:
            cached = self._cache.get(key)
            if cached is not None:
                return ResolvedOverride(props=copy.deepcopy(cached.props))

        try:
            candidates = self._index.get(query.component, [])
            matching = [o for o in candidates if rule_matches(o, query)]
            result = _finish(matching, query, self.prop_maps)
            if self.config.debug:
                self._annotate(result, matching, query)
        except Exception:
            logger.exception(
                "Override resolution failed for theme=%s component=%s",
                self.theme_name,
                query.component,
            )
            return ResolvedOverride()

        if cacheable:
            self._cache.set(key, ResolvedOverride(props=copy.deepcopy(result.props)))
        return result

    @staticmethod
    def _annotate(
        result: ResolvedOverride, matching: list[CompiledOverride], query: ResolveQuery
    ) -> None:
        """Add data-theme-target / data-theme-matches for inspection tooling."""
        fallbacks: list[str] = []
        if query.identifier:
            fallbacks.append(f"{query.component}#{query.identifier}")
        if query.context:
            fallbacks.append(f"{query.component}.{query.context}")
        fallbacks.append(query.component)

        selectors = [o.selector for o in matching] or fallbacks
        result.props.setdefault("data-theme-target", selectors[0])
        result.props.setdefault("data-theme-matches", ",".join(selectors))
