"""Document model: Text, Comment and Element nodes.

Each element exclusively owns its children; there are no parent or sibling
back-references.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

AttrMap = dict[str, str]


@dataclass(frozen=True)
class Text:
    """A run of character data."""

    data: str


@dataclass(frozen=True)
class Comment:
    """A comment node. The markup parser never produces these."""

    data: str


@dataclass(frozen=True)
class Element:
    """An element with a tag name, attributes and ordered children."""

    tag_name: str
    attributes: AttrMap = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    @property
    def id(self) -> str | None:
        return self.attributes.get("id")

    @property
    def classes(self) -> set[str]:
        """Space-separated tokens of the ``class`` attribute."""
        return set(self.attributes.get("class", "").split())


Node = Union[Text, Comment, Element]


def text(data: str) -> Text:
    return Text(data)


def elem(tag_name: str, attributes: AttrMap | None = None, children: list[Node] | None = None) -> Element:
    return Element(tag_name, dict(attributes or {}), list(children or []))


def iter_elements(node: Node) -> Iterator[Element]:
    """Traverse elements depth-first, yielding *node* (if an element) then its descendants."""
    if not isinstance(node, Element):
        return
    yield node
    for child in node.children:
        yield from iter_elements(child)
