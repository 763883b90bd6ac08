"""Cascade merge and prop-to-class projection.

Merge semantics per key are looked up in :data:`MERGE_STRATEGIES`; keys not
listed there are overwritten by the more specific rule.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Mapping

from theme_cascade.model.override import CompiledOverride, PropertyBag
from theme_cascade.model.theme import PROP_MAP_KEYS, PropClassMaps

__all__ = [
    "MergeStrategy",
    "MERGE_STRATEGIES",
    "merge_props",
    "project_props_to_classes",
]


class MergeStrategy(Enum):
    """How a more specific rule's value combines with the accumulated one."""

    OVERWRITE = "overwrite"
    CONCAT = "concat"  # class strings, more specific first
    SHALLOW_MERGE = "shallow_merge"  # nested dicts, one level


MERGE_STRATEGIES: dict[str, MergeStrategy] = {
    "class": MergeStrategy.CONCAT,
    "ui": MergeStrategy.SHALLOW_MERGE,
}


def _join_classes(*parts: Any) -> str:
    return " ".join(str(p) for p in parts if p)


def _combine(strategy: MergeStrategy, current: Any, incoming: Any) -> Any:
    if strategy is MergeStrategy.CONCAT:
        return _join_classes(incoming, current if isinstance(current, str) else "")
    if strategy is MergeStrategy.SHALLOW_MERGE:
        if isinstance(incoming, Mapping):
            base = dict(current) if isinstance(current, Mapping) else {}
            base.update(incoming)
            return base
        return incoming
    return incoming


def merge_props(rules: Iterable[CompiledOverride]) -> PropertyBag:
    """Merge the property bags of matching *rules*.

    Rules are replayed from lowest to highest specificity; within a
    specificity tier declaration order is kept, so the later rule wins.
    """
    merged: PropertyBag = {}
    for rule in sorted(rules, key=lambda r: r.specificity):
        for key, value in rule.props.items():
            strategy = MERGE_STRATEGIES.get(key, MergeStrategy.OVERWRITE)
            if key in merged:
                merged[key] = _combine(strategy, merged[key], value)
            else:
                merged[key] = _combine(strategy, None, value)
    return merged


def project_props_to_classes(props: PropertyBag, prop_maps: PropClassMaps) -> PropertyBag:
    """Rewrite ``variant``/``size``/``color`` into class names for plain elements.

    Mapped keys are removed and their classes placed before existing ones.
    Unmapped values pass through. ``ui`` is dropped: only managed components
    understand it.
    """
    projected: PropertyBag = {k: v for k, v in props.items() if k != "ui"}
    classes: list[str] = []
    for key in PROP_MAP_KEYS:
        if key not in projected:
            continue
        mapped = prop_maps.lookup(key, projected[key])
        if mapped:
            classes.append(mapped)
            del projected[key]
    if classes:
        projected["class"] = _join_classes(*classes, projected.get("class"))
    return projected
