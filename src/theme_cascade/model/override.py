"""Override model: compiled rules, resolution queries, and resolved results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from theme_cascade.model.selector import AttributeMatcher

# Open string-keyed map. Well-known keys: variant, size, color, class, style, ui.
PropertyBag = dict[str, Any]


class Element(Protocol):
    """A live DOM-like handle that can report attribute values."""

    def get_attribute(self, name: str) -> str | None: ...


@dataclass(frozen=True)
class StaticElement:
    """An attribute snapshot satisfying the :class:`Element` protocol."""

    attributes: dict[str, str] = field(default_factory=dict)

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)


@dataclass(frozen=True)
class CompiledOverride:
    """A selector compiled into its runtime matching form.

    ``selector`` keeps the author's original text for debugging output.
    """

    selector: str
    component: str
    props: PropertyBag
    specificity: int
    context: str | None = None
    identifier: str | None = None
    state: str | None = None
    attributes: tuple[AttributeMatcher, ...] = ()

    @property
    def target_key(self) -> str:
        """Key identifying what this rule targets, ignoring attribute clauses."""
        return f"{self.component}:{self.context or ''}:{self.identifier or ''}:{self.state or ''}"


@dataclass(frozen=True)
class ResolveQuery:
    """One component instance asking for its overrides."""

    component: str
    context: str | None = None
    identifier: str | None = None
    state: str | None = None
    element: Element | None = None
    is_managed: bool = False  # managed components take variant/size/color natively


@dataclass(frozen=True)
class ResolvedOverride:
    """Merged props for one query."""

    props: PropertyBag = field(default_factory=dict)
