"""Parser error types."""

from __future__ import annotations


class ParseError(Exception):
    """Raised when markup or stylesheet source cannot be parsed.

    The first violation aborts the whole parse; no partial tree is returned.
    """

    def __init__(self, message: str, position: int | None = None):
        self.message = message
        self.position = position
        super().__init__(message)


class MalformedSyntax(ParseError):
    """An expected literal was missing or an open/close pair did not match."""


class UnreachableInternalState(ParseError):
    """The parser tried to read past the end of its input."""


class EndOfInput(UnreachableInternalState):
    """Raised when a character is requested and none remains."""

    def __init__(self, position: int):
        super().__init__(f"Unexpected end of input at byte {position}", position)
