"""Style resolution: match document elements against stylesheet rules.

Cascade model:
    Rules are visited in source order and the first matching selector of a
    rule contributes all of that rule's declarations. Later rules overwrite
    earlier ones property by property. There is no specificity weighting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from styletree.dom.model import Element, Node
from styletree.stylesheet.model import Length, Other, Selector, Stylesheet, Value

__all__ = ["Display", "PropertyMap", "StyledNode", "matches", "style_tree"]

logger = logging.getLogger(__name__)

PropertyMap = dict[str, Value]


class Display(Enum):
    BLOCK = "block"
    INLINE = "inline"
    INLINE_BLOCK = "inline-block"
    NONE = "none"


@dataclass(frozen=True)
class StyledNode:
    """A document node paired with its resolved properties.

    ``node`` is the original document node, not a copy. Text and comment
    children are not represented here; renderers reach them through
    ``node.children``.
    """

    node: Node
    styles: PropertyMap = field(default_factory=dict)
    children: list[StyledNode] = field(default_factory=list)

    def value(self, name: str) -> Value | None:
        """Return the resolved value of property *name*, if any."""
        return self.styles.get(name)

    def get_display(self) -> Display:
        """Classify the ``display`` property.

        Unset resolves to ``Display.NONE``; a set but unrecognised value
        resolves to ``Display.INLINE``.
        """
        value = self.value("display")
        if value is None:
            return Display.NONE
        if isinstance(value, Other):
            try:
                return Display(value.text)
            except ValueError:
                logger.debug("Unknown display %r, using inline", value.text)
        return Display.INLINE

    def num_or(self, name: str, default: float) -> float:
        """Return the number of a Length property, or *default*."""
        value = self.value(name)
        if isinstance(value, Length):
            return value.number
        return default


def matches(element: Element, selector: Selector) -> bool:
    """Check whether any simple selector of *selector* matches *element*.

    The id constrains only when the simple selector names one. Tag names
    compare case-sensitively.
    """
    for simple in selector.simple:
        if simple.tag_name is not None and simple.tag_name != element.tag_name:
            continue
        if simple.id is not None and simple.id != element.id:
            continue
        element_classes = element.classes
        if all(cls in element_classes for cls in simple.classes):
            return True
    return False


def _resolve_styles(element: Element, stylesheet: Stylesheet) -> PropertyMap:
    styles: PropertyMap = {}
    for rule in stylesheet.rules:
        for selector in rule.selectors:
            if matches(element, selector):
                for declaration in rule.declarations:
                    styles[declaration.property] = declaration.value
                break
    return styles


def style_tree(root: Node, stylesheet: Stylesheet) -> StyledNode:
    """Build the styled tree for *root*.

    Only element children are recursed into. A non-element root yields a
    single StyledNode with no properties.
    """
    if not isinstance(root, Element):
        return StyledNode(root)

    children = [
        style_tree(child, stylesheet)
        for child in root.children
        if isinstance(child, Element)
    ]
    return StyledNode(root, _resolve_styles(root, stylesheet), children)
