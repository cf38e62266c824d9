from styletree.style.resolver import Display, PropertyMap, StyledNode, matches, style_tree

__all__ = ["style_tree", "matches", "StyledNode", "Display", "PropertyMap"]
