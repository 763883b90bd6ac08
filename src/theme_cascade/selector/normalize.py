"""Shorthand expansion: ``tag.context`` and ``tag#id`` into attribute clauses.

    button.chat          -> button[data-context="chat"]   (chat is a known context)
    button#chat.send     -> button[data-id="chat.send"]
    button.primary       -> button.primary                (unknown, left alone)

Text inside ``[...]`` is never rewritten.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterable

from theme_cascade.config import DEFAULT_CONTEXTS

__all__ = ["normalize_selector", "BRACKET_PATTERN", "BRACKET_RE"]

_MAX_CACHED_SELECTORS = 200

# A bracketed clause; quoted values may contain "]".
BRACKET_PATTERN = r'\[(?:"[^"]*"|[^\]"])*\]'
BRACKET_RE = re.compile(BRACKET_PATTERN)

# Bracketed clauses are matched first and passed through untouched.
_IDENTIFIER_RE = re.compile(
    r"(?P<bracket>" + BRACKET_PATTERN + r")"
    r"""
    |
    (?<=[\w\]])\#(?P<ident>[\w-]+(?:\.[\w-]+)*)   # #token(.token)* after a tag or clause
    (?=[:\[\#]|$)
    """,
    re.VERBOSE,
)

_CONTEXT_RE = re.compile(
    r"(?P<bracket>" + BRACKET_PATTERN + r")"
    r"""
    |
    (?<=[\w\]])\.(?P<context>[\w-]+)      # .word after a tag or clause
    (?=[.:\[]|$)
    """,
    re.VERBOSE,
)


def normalize_selector(
    selector: str, known_contexts: Iterable[str] = DEFAULT_CONTEXTS
) -> str:
    """Expand shorthand in *selector* into canonical attribute-selector text.

    Context shorthand only collapses for names in *known_contexts*, so
    class-like tokens outside that vocabulary are not mistaken for contexts.
    Idempotent.
    """
    return _normalize(selector, frozenset(known_contexts))


@lru_cache(maxsize=_MAX_CACHED_SELECTORS)
def _normalize(selector: str, known_contexts: frozenset[str]) -> str:
    result = selector.strip()

    def expand_identifier(match: re.Match[str]) -> str:
        if match.group("bracket"):
            return match.group("bracket")
        return f'[data-id="{match.group("ident")}"]'

    def expand_context(match: re.Match[str]) -> str:
        if match.group("bracket"):
            return match.group("bracket")
        context = match.group("context")
        if context not in known_contexts:
            return match.group(0)
        return f'[data-context="{context}"]'

    # Identifiers first so dotted identifiers are not read as contexts.
    result = _IDENTIFIER_RE.sub(expand_identifier, result)
    return _CONTEXT_RE.sub(expand_context, result)
