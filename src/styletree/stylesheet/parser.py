"""Hand-written recursive-descent parser for stylesheets.

Syntax example::

    h1, h2 { color: red; margin-top: 2em }
    div#main.box { width: 600px; display: block; }

Only tag, ``#id`` and ``.class`` constraints are recognised in selectors;
anything else in a selector (pseudo-classes, combinators, ``*``) is skipped.
Values are typed by property name: colours, lengths, or opaque text.
"""

from __future__ import annotations

import logging

from styletree.parser import Cursor
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

__all__ = ["parse_stylesheet", "translate_color", "translate_length"]

logger = logging.getLogger(__name__)

BLACK = Color(0.0, 0.0, 0.0, 1.0)

_COLORS: dict[str, Color] = {
    "black": BLACK,
    "white": Color(1.0, 1.0, 1.0, 1.0),
    "red": Color(1.0, 0.0, 0.0, 1.0),
    "green": Color(0.0, 1.0, 0.0, 1.0),
    "blue": Color(0.0, 0.0, 1.0, 1.0),
}

COLOR_PROPERTIES = frozenset({"background-color", "border-color", "color"})

LENGTH_PROPERTIES = frozenset(
    {
        "margin",
        "margin-top",
        "margin-left",
        "margin-right",
        "margin-bottom",
        "padding",
        "padding-top",
        "padding-left",
        "padding-right",
        "padding-bottom",
        "border-top-width",
        "border-left-width",
        "border-right-width",
        "border-bottom-width",
        "width",
        "height",
    }
)

# Characters that end a declaration value.
_VALUE_TERMINATORS = frozenset(";\n{}")


def _is_valid_start_ident(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c >= "\u0080" or c == "_"


def _is_valid_ident(c: str) -> bool:
    return _is_valid_start_ident(c) or ("0" <= c <= "9") or c == "-"


def translate_color(keyword: str) -> Color:
    """Look up a colour keyword. Unknown keywords resolve to black."""
    color = _COLORS.get(keyword)
    if color is None:
        logger.debug("Unknown color %r, using black", keyword)
        return BLACK
    return color


def translate_length(raw: str) -> Length:
    """Split *raw* into a leading numeral and a unit suffix.

    Digits are only collected until the first non-digit, so ``"1.5px"``
    reads as ``1`` with unit ``".5px"`` (which falls back to px).
    """
    numeral = ""
    unit = ""
    in_numeral = True
    for ch in raw:
        if in_numeral and ch.isdigit():
            numeral += ch
        else:
            unit += ch
            in_numeral = False

    try:
        number = float(numeral)
    except ValueError:
        number = 0.0
    return Length(number, Unit.parse(unit))


def _translate_value(prop: str, raw: str) -> Value:
    if prop in COLOR_PROPERTIES:
        return translate_color(raw)
    if prop in LENGTH_PROPERTIES:
        return translate_length(raw)
    return Other(raw)


class _StylesheetParser:
    def __init__(self, source: str):
        self._cursor = Cursor(source)

    def parse(self) -> Stylesheet:
        rules: list[Rule] = []
        while True:
            self._cursor.consume_whitespace()
            if self._cursor.eof():
                break
            selectors = self.parse_selectors()
            declarations = self.parse_declarations()
            rules.append(Rule(selectors, declarations))
        return Stylesheet(rules)

    def parse_selectors(self) -> list[Selector]:
        selectors: list[Selector] = []
        while self._cursor.peek_is(lambda c: c != "{"):
            selector = self.parse_selector()
            if selector != Selector():
                selectors.append(selector)

            self._cursor.consume_whitespace()
            if self._cursor.peek_is(lambda c: c == ","):
                self._cursor.consume_char()
        self._skip_char()
        return selectors

    def parse_selector(self) -> Selector:
        self._cursor.consume_whitespace()

        tag_name = None
        if self._cursor.peek_is(_is_valid_start_ident):
            tag_name = self.parse_identifier()

        selector_id: str | None = None
        classes: list[str] = []
        multiple_ids = False
        while self._cursor.peek_is(lambda c: c != "," and c != "{" and not c.isspace()):
            c = self._cursor.next_char()
            if c == "#":
                self._cursor.consume_char()
                parsed = self.parse_id()
                # More than one id can never match an element, so drop the constraint.
                if selector_id is not None or multiple_ids:
                    selector_id = None
                    multiple_ids = True
                else:
                    selector_id = parsed
            elif c == ".":
                self._cursor.consume_char()
                class_name = self.parse_identifier()
                if class_name:
                    classes.append(class_name)
            else:
                self._cursor.consume_while(lambda c: c != "," and c != "{")

        simple = SimpleSelector(tag_name, selector_id, classes)
        if simple == SimpleSelector():
            return Selector()
        return Selector([simple])

    def parse_identifier(self) -> str:
        if not self._cursor.peek_is(_is_valid_start_ident):
            return ""
        return self._cursor.consume_while(_is_valid_ident).lower()

    def parse_id(self) -> str | None:
        return self.parse_identifier() or None

    def parse_declarations(self) -> list[Declaration]:
        declarations: list[Declaration] = []
        while self._cursor.peek_is(lambda c: c != "}"):
            self._cursor.consume_whitespace()
            prop = self._cursor.consume_while(lambda c: c != ":").rstrip().lower()

            self._skip_char()
            self._cursor.consume_whitespace()

            raw = self._cursor.consume_while(lambda c: c not in _VALUE_TERMINATORS)
            declaration = Declaration(prop, _translate_value(prop, raw.rstrip().lower()))

            if self._cursor.peek_is(lambda c: c == ";"):
                declarations.append(declaration)
                self._cursor.consume_char()
            else:
                self._cursor.consume_whitespace()
                if self._cursor.peek_is(lambda c: c == "}"):
                    declarations.append(declaration)
                else:
                    logger.debug("Dropped unterminated declaration %r", prop)
            self._cursor.consume_whitespace()
        self._skip_char()
        return declarations

    def _skip_char(self) -> None:
        """Consume one character if any remain."""
        if not self._cursor.eof():
            self._cursor.consume_char()


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet source into a Stylesheet object.

    Returns a Stylesheet containing all parsed rules in source order.
    """
    stylesheet = _StylesheetParser(source).parse()
    logger.debug("Parsed %d rule(s)", len(stylesheet.rules))
    return stylesheet
