"""Recursive-descent markup parser.

Grammar::

    nodes     := (element | text)*
    element   := '<' name attr* '>' nodes '</' name '>'
    attr      := name '=' ( '"' [^"]* '"' | "'" [^']* "'" )
    text      := [^<]+

Names are ASCII letters and digits only. Comments, CDATA and self-closing
tags are not recognised.
"""

from __future__ import annotations

import logging

from styletree.dom.model import AttrMap, Element, Node, Text
from styletree.parser import Cursor, MalformedSyntax

__all__ = ["parse_html"]

logger = logging.getLogger(__name__)

_QUOTES = ('"', "'")


def _is_name_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


class _MarkupParser:
    def __init__(self, source: str):
        self._cursor = Cursor(source)

    def parse_nodes(self) -> list[Node]:
        nodes: list[Node] = []
        while True:
            self._cursor.consume_whitespace()
            if self._cursor.eof() or self._cursor.starts_with("</"):
                break
            nodes.append(self.parse_node())
        return nodes

    def parse_node(self) -> Node:
        if self._cursor.starts_with("<"):
            return self.parse_element()
        return self.parse_text()

    def parse_text(self) -> Text:
        return Text(self._cursor.consume_while(lambda c: c != "<"))

    def parse_element(self) -> Element:
        self._cursor.expect("<")
        tag_name = self.parse_name()
        attributes = self.parse_attributes()
        self._cursor.expect(">")

        children = self.parse_nodes()

        self._cursor.expect("</")
        closing_at = self._cursor.pos
        if not self._cursor.starts_with(tag_name + ">"):
            closing = self._cursor.consume_while(_is_name_char)
            raise MalformedSyntax(
                f"Closing tag </{closing}> at byte {closing_at} does not match <{tag_name}>",
                closing_at,
            )
        self._cursor.expect(tag_name)
        self._cursor.expect(">")
        return Element(tag_name, attributes, children)

    def parse_name(self) -> str:
        return self._cursor.consume_while(_is_name_char)

    def parse_attributes(self) -> AttrMap:
        attributes: AttrMap = {}
        while True:
            self._cursor.consume_whitespace()
            if self._cursor.next_char() == ">":
                break
            name, value = self.parse_attribute()
            attributes[name] = value
        return attributes

    def parse_attribute(self) -> tuple[str, str]:
        name = self.parse_name()
        self._cursor.expect("=")
        return name, self.parse_attribute_value()

    def parse_attribute_value(self) -> str:
        start = self._cursor.pos
        open_quote = self._cursor.consume_char()
        if open_quote not in _QUOTES:
            raise MalformedSyntax(
                f"Expected a quoted attribute value at byte {start}, got {open_quote!r}",
                start,
            )
        value = self._cursor.consume_while(lambda c: c != open_quote)
        self._cursor.expect(open_quote)
        return value

    def at_end(self) -> bool:
        return self._cursor.eof()

    @property
    def position(self) -> int:
        return self._cursor.pos


def parse_html(source: str) -> Node:
    """Parse markup into a document tree.

    A single top-level node is returned as-is; otherwise the top-level nodes
    (possibly none) are wrapped in a synthetic ``html`` element.

    Raises:
        ParseError: on the first syntax violation.
    """
    parser = _MarkupParser(source)
    nodes = parser.parse_nodes()
    if not parser.at_end():
        raise MalformedSyntax(
            f"Unexpected closing tag at byte {parser.position}", parser.position
        )

    logger.debug("Parsed %d top-level node(s)", len(nodes))
    if len(nodes) == 1:
        return nodes[0]
    return Element("html", {}, nodes)
