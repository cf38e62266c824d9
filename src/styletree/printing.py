"""Plain-text renderings of document and styled trees."""

from __future__ import annotations

from styletree.dom.model import Comment, Element, Node, Text
from styletree.style.resolver import StyledNode


def _open_tag(element: Element) -> str:
    attrs = "".join(f' {name}="{value}"' for name, value in element.attributes.items())
    return f"<{element.tag_name}{attrs}>"


def _document_lines(node: Node, indent: int, step: int) -> list[str]:
    pad = " " * indent
    if isinstance(node, Text):
        return [pad + node.data]
    if isinstance(node, Comment):
        return [f"{pad}<!--{node.data}-->"]

    lines = [pad + _open_tag(node)]
    for child in node.children:
        lines.extend(_document_lines(child, indent + step, step))
    lines.append(f"{pad}</{node.tag_name}>")
    return lines


def format_document(node: Node, indent: int = 0, step: int = 2) -> str:
    """Render a document tree with one node per line, children indented by *step*."""
    return "\n".join(_document_lines(node, indent, step))


def _styled_lines(styled: StyledNode, indent: int, step: int) -> list[str]:
    node = styled.node
    label = _open_tag(node) if isinstance(node, Element) else _document_lines(node, 0, 0)[0]
    props = ", ".join(f"{name}: {value}" for name, value in styled.styles.items())
    lines = [f"{' ' * indent}{label} {{{props}}}"]
    for child in styled.children:
        lines.extend(_styled_lines(child, indent + step, step))
    return lines


def format_styled_tree(styled: StyledNode, indent: int = 0, step: int = 2) -> str:
    """Render each styled node as its opening tag followed by its properties."""
    return "\n".join(_styled_lines(styled, indent, step))
