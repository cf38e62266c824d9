from styletree.stylesheet.parser import parse_stylesheet
from styletree.stylesheet.model import (
    Color,
    Declaration,
    Length,
    Other,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Unit,
    Value,
)

__all__ = [
    "parse_stylesheet",
    "Stylesheet",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Declaration",
    "Value",
    "Color",
    "Length",
    "Other",
    "Unit",
]
