"""Lenient selector parser.

Extraction is done with independent regex captures so clause order does not
matter; anything unrecognised is skipped. :func:`parse_selector` never raises.
Strict well-formedness checking lives in :mod:`theme_cascade.selector.syntax`.
"""

from __future__ import annotations

import re
from typing import Iterable

from theme_cascade.config import DEFAULT_CONTEXTS
from theme_cascade.model.selector import AttributeMatcher, AttributeOperator, ParsedSelector
from theme_cascade.selector.normalize import BRACKET_RE, normalize_selector

__all__ = ["parse_selector", "parse_selector_text", "strip_brackets"]

DEFAULT_COMPONENT = "button"

_TAG_RE = re.compile(r"^(\w+)")
_CONTEXT_RE = re.compile(r'\[\s*data-context\s*=\s*"([^"]+)"\s*\]')
_IDENTIFIER_RE = re.compile(r'\[\s*data-id\s*=\s*"([^"]+)"\s*\]')
_PSEUDO_RE = re.compile(r":{1,2}([\w-]+)")

# Matches [attr], [attr="value"], [attr^="value"], ... and, best effort,
# unquoted values such as [type=submit].
_ATTRIBUTE_RE = re.compile(
    r"""
    \[\s*
    (?P<name>[A-Za-z_][\w-]*)              # attribute name
    \s*
    (?:
        (?P<op>[~|^$*]?=)                  # operator
        \s*
        (?:"(?P<quoted>[^"]*)"|(?P<bare>[^\]\s"]*))
        \s*
    )?
    \]
    """,
    re.VERBOSE,
)

_CONSUMED = {"data-context", "data-id"}


def strip_brackets(selector: str) -> str:
    """Return *selector* with every bracketed clause blanked out."""
    return BRACKET_RE.sub(" ", selector)


def parse_selector(
    normalized: str, default_component: str = DEFAULT_COMPONENT
) -> ParsedSelector:
    """Parse canonical selector text into a :class:`ParsedSelector`.

    Only the first pseudo-class is honoured as the state. A missing tag
    falls back to *default_component*.
    """
    text = normalized.strip()

    tag = _TAG_RE.match(text)
    context = _CONTEXT_RE.search(text)
    identifier = _IDENTIFIER_RE.search(text)
    pseudo = _PSEUDO_RE.search(strip_brackets(text))

    return ParsedSelector(
        component=tag.group(1) if tag else default_component,
        context=context.group(1) if context else None,
        identifier=identifier.group(1) if identifier else None,
        state=pseudo.group(1) if pseudo else None,
        attributes=_extract_attributes(text),
    )


def parse_selector_text(
    selector: str,
    known_contexts: Iterable[str] = DEFAULT_CONTEXTS,
    default_component: str = DEFAULT_COMPONENT,
) -> ParsedSelector:
    """Normalize then parse a raw author selector."""
    return parse_selector(normalize_selector(selector, known_contexts), default_component)


def _extract_attributes(selector: str) -> tuple[AttributeMatcher, ...]:
    matchers: list[AttributeMatcher] = []
    for match in _ATTRIBUTE_RE.finditer(selector):
        name = match.group("name")
        op = match.group("op")
        # data-context="x" / data-id="x" were captured above
        if name in _CONSUMED and op == "=" and match.group("quoted"):
            continue
        if op is None:
            matchers.append(AttributeMatcher(attribute=name))
            continue
        value = match.group("quoted")
        if value is None:
            value = match.group("bare")
        matchers.append(
            AttributeMatcher(attribute=name, operator=AttributeOperator(op), value=value)
        )
    return tuple(matchers)
