"""Selector model: AttributeOperator, AttributeMatcher, and ParsedSelector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AttributeOperator(Enum):
    """CSS attribute selector operators."""

    EXISTS = "exists"  # [attr]
    EQUALS = "="  # [attr="value"]
    INCLUDES = "~="  # whitespace-separated word
    DASH_MATCH = "|="  # value or value-prefix
    PREFIX = "^="
    SUFFIX = "$="
    SUBSTRING = "*="


@dataclass(frozen=True)
class AttributeMatcher:
    """One bracketed clause of a selector, e.g. ``[type="submit"]``."""

    attribute: str
    operator: AttributeOperator = AttributeOperator.EXISTS
    value: str | None = None

    def __str__(self) -> str:
        if self.operator is AttributeOperator.EXISTS:
            return f"[{self.attribute}]"
        return f'[{self.attribute}{self.operator.value}"{self.value or ""}"]'


@dataclass(frozen=True)
class ParsedSelector:
    """Structured form of a normalized selector.

    Attributes:
        component: Component tag (e.g. ``button``, ``input``).
        context: Value of the ``data-context`` clause, if any.
        identifier: Value of the ``data-id`` clause, if any.
        state: First pseudo-class (e.g. ``hover``), if any.
        attributes: Remaining attribute clauses; all must match.
    """

    component: str
    context: str | None = None
    identifier: str | None = None
    state: str | None = None
    attributes: tuple[AttributeMatcher, ...] = ()
