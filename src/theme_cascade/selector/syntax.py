"""Strict selector grammar backed by Lark.

The lenient parser accepts anything; this module decides whether a selector
is actually well-formed, for build-time validation.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Iterable

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from theme_cascade.config import DEFAULT_CONTEXTS
from theme_cascade.model.selector import AttributeMatcher, AttributeOperator, ParsedSelector
from theme_cascade.selector.errors import SelectorSyntaxError

__all__ = ["parse_strict", "is_well_formed"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


class _Context:
    def __init__(self, name: str):
        self.name = name


class _Identifier:
    def __init__(self, name: str):
        self.name = name


class _State:
    def __init__(self, name: str):
        self.name = name


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a selector parse tree into a :class:`ParsedSelector`."""

    def __init__(self, known_contexts: frozenset[str]):
        super().__init__()
        self.known_contexts = known_contexts

    def context_shorthand(self, items: list[Token]) -> _Context | None:
        name = str(items[0])[1:]
        # unknown shorthand is dropped; the rule targets the bare component
        return _Context(name) if name in self.known_contexts else None

    def id_shorthand(self, items: list[Token]) -> _Identifier:
        return _Identifier(str(items[0])[1:])

    def exists_clause(self, items: list[Token]) -> AttributeMatcher:
        return AttributeMatcher(attribute=str(items[0]))

    def value_clause(self, items: list[Token]) -> AttributeMatcher | _Context | _Identifier:
        name, op, raw = str(items[0]), str(items[1]), str(items[2])
        value = raw[1:-1]
        if op == "=" and value:
            if name == "data-context":
                return _Context(value)
            if name == "data-id":
                return _Identifier(value)
        return AttributeMatcher(attribute=name, operator=AttributeOperator(op), value=value)

    def pseudo(self, items: list[Token]) -> _State:
        return _State(str(items[0]))

    def selector(self, items: list[object]) -> ParsedSelector:
        # first context/identifier wins, as in the lenient parser
        component = str(items[0])
        context = identifier = state = None
        attributes: list[AttributeMatcher] = []
        for item in items[1:]:
            if isinstance(item, _Context):
                context = context or item.name
            elif isinstance(item, _Identifier):
                identifier = identifier or item.name
            elif isinstance(item, _State):
                state = item.name
            elif isinstance(item, AttributeMatcher):
                attributes.append(item)
        return ParsedSelector(
            component=component,
            context=context,
            identifier=identifier,
            state=state,
            attributes=tuple(attributes),
        )

    def start(self, items: list[object]) -> ParsedSelector:
        return items[0]  # type: ignore[return-value]


def parse_strict(
    selector: str, known_contexts: Iterable[str] = DEFAULT_CONTEXTS
) -> ParsedSelector:
    """Parse *selector* against the grammar.

    Raises:
        SelectorSyntaxError: if the selector is not well-formed.
    """
    try:
        tree = _parser().parse(selector.strip())
    except LarkError as e:
        column = getattr(e, "column", None)
        raise SelectorSyntaxError(str(e), selector=selector, column=column) from e
    return SelectorTransformer(frozenset(known_contexts)).transform(tree)


def is_well_formed(selector: str) -> bool:
    try:
        parse_strict(selector)
    except SelectorSyntaxError:
        return False
    return True
