"""styletree: markup and stylesheet parsing into a styled element tree."""

__version__ = "0.1.0"

from styletree.dom import parse_html  # noqa: E402
from styletree.parser import ParseError  # noqa: E402
from styletree.style import style_tree  # noqa: E402
from styletree.stylesheet import parse_stylesheet  # noqa: E402

__all__ = ["__version__", "parse_html", "parse_stylesheet", "style_tree", "ParseError"]
