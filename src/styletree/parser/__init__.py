from styletree.parser.cursor import Cursor
from styletree.parser.errors import (
    EndOfInput,
    MalformedSyntax,
    ParseError,
    UnreachableInternalState,
)

__all__ = [
    "Cursor",
    "ParseError",
    "MalformedSyntax",
    "UnreachableInternalState",
    "EndOfInput",
]
