"""Attribute selector evaluation against live element values."""

from __future__ import annotations

from typing import Callable, Iterable

from theme_cascade.model.override import Element
from theme_cascade.model.selector import AttributeMatcher, AttributeOperator

__all__ = ["matches_attribute", "element_matches"]

_OPERATORS: dict[AttributeOperator, Callable[[str, str], bool]] = {
    AttributeOperator.EQUALS: lambda actual, expected: actual == expected,
    AttributeOperator.INCLUDES: lambda actual, expected: expected in actual.split(),
    AttributeOperator.DASH_MATCH: lambda actual, expected: (
        actual == expected or actual.startswith(expected + "-")
    ),
    AttributeOperator.PREFIX: lambda actual, expected: actual.startswith(expected),
    AttributeOperator.SUFFIX: lambda actual, expected: actual.endswith(expected),
    AttributeOperator.SUBSTRING: lambda actual, expected: expected in actual,
}


def matches_attribute(value: str | None, matcher: AttributeMatcher) -> bool:
    """Check one attribute clause against the element's current *value*.

    ``None`` means the attribute is absent. Every operator except ``exists``
    fails on an absent attribute or an empty expected value.
    """
    if matcher.operator is AttributeOperator.EXISTS:
        return value is not None
    if value is None or not matcher.value:
        return False
    check = _OPERATORS.get(matcher.operator)
    return check is not None and check(value, matcher.value)


def element_matches(element: Element | None, matchers: Iterable[AttributeMatcher]) -> bool:
    """True if *element* satisfies every matcher. No element never matches."""
    if element is None:
        return False
    return all(matches_attribute(element.get_attribute(m.attribute), m) for m in matchers)
