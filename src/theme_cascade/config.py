from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

DEFAULT_CONTEXTS = frozenset({"chat", "sidebar", "dashboard", "header", "global"})


@dataclass(frozen=True)
class CascadeConfig:
    known_contexts: frozenset[str] = field(default=DEFAULT_CONTEXTS)
    default_component: str = "button"
    cache_size: int = 100  # resolved results kept per resolver
    debug: bool = False  # adds data-theme-target / data-theme-matches props

    def with_contexts(self, contexts: Iterable[str]) -> CascadeConfig:
        """Return a copy whose known contexts also include *contexts*."""
        return replace(self, known_contexts=self.known_contexts | frozenset(contexts))
