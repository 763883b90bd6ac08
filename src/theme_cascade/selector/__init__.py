from theme_cascade.selector.errors import SelectorSyntaxError
from theme_cascade.selector.normalize import normalize_selector
from theme_cascade.selector.parser import parse_selector, parse_selector_text
from theme_cascade.selector.specificity import calculate_specificity
from theme_cascade.selector.syntax import is_well_formed, parse_strict

__all__ = [
    "normalize_selector",
    "parse_selector",
    "parse_selector_text",
    "calculate_specificity",
    "parse_strict",
    "is_well_formed",
    "SelectorSyntaxError",
]
