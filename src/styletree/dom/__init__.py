from styletree.dom.model import AttrMap, Comment, Element, Node, Text, elem, iter_elements, text
from styletree.dom.parser import parse_html

__all__ = [
    "parse_html",
    "AttrMap",
    "Node",
    "Text",
    "Comment",
    "Element",
    "text",
    "elem",
    "iter_elements",
]
