"""Additive selector specificity."""

from __future__ import annotations

import re

from theme_cascade.selector.normalize import BRACKET_RE
from theme_cascade.selector.parser import strip_brackets

__all__ = ["calculate_specificity", "BASE_WEIGHT", "ATTRIBUTE_WEIGHT", "PSEUDO_WEIGHT"]

BASE_WEIGHT = 1
ATTRIBUTE_WEIGHT = 10
PSEUDO_WEIGHT = 10

_PSEUDO_RE = re.compile(r"::?[\w-]+")


def calculate_specificity(selector: str) -> int:
    """Weight a normalized selector: 1 for the element, +10 per bracket and pseudo-class.

    Pass post-normalization text so expanded shorthand counts as brackets.
    Colons inside bracketed values are not pseudo-classes.
    """
    brackets = len(BRACKET_RE.findall(selector))
    pseudos = len(_PSEUDO_RE.findall(strip_brackets(selector)))
    return BASE_WEIGHT + ATTRIBUTE_WEIGHT * brackets + PSEUDO_WEIGHT * pseudos
