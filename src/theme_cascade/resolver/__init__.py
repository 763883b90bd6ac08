from theme_cascade.resolver.attributes import element_matches, matches_attribute
from theme_cascade.resolver.merge import (
    MERGE_STRATEGIES,
    MergeStrategy,
    merge_props,
    project_props_to_classes,
)
from theme_cascade.resolver.resolver import RuntimeResolver, resolve_overrides, rule_matches

__all__ = [
    "matches_attribute",
    "element_matches",
    "MergeStrategy",
    "MERGE_STRATEGIES",
    "merge_props",
    "project_props_to_classes",
    "rule_matches",
    "resolve_overrides",
    "RuntimeResolver",
]
