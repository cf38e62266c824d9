"""Position-tracking scanner shared by the markup and stylesheet parsers."""

from __future__ import annotations

from typing import Callable

from styletree.parser.errors import EndOfInput, MalformedSyntax

__all__ = ["Cursor"]


class Cursor:
    """Scan a text buffer one character at a time.

    ``pos`` is a byte offset into the UTF-8 encoding of the input, so error
    positions line up with what an editor reports for non-ASCII sources.
    """

    def __init__(self, text: str):
        self.text = text
        self._pos = 0
        self._index = 0  # character index backing ``pos``

    @property
    def pos(self) -> int:
        return self._pos

    def eof(self) -> bool:
        return self._index >= len(self.text)

    def next_char(self) -> str:
        """Return the next character without consuming it.

        Callers must check :meth:`eof` first; reading past the end raises
        :class:`EndOfInput`.
        """
        if self.eof():
            raise EndOfInput(self.pos)
        return self.text[self._index]

    def peek_is(self, test: Callable[[str], bool]) -> bool:
        """True if a next character exists and satisfies *test*."""
        return not self.eof() and test(self.text[self._index])

    def starts_with(self, literal: str) -> bool:
        return self.text.startswith(literal, self._index)

    def expect(self, literal: str) -> None:
        """Advance past *literal* or fail with :class:`MalformedSyntax`."""
        if not self.starts_with(literal):
            raise MalformedSyntax(
                f"Expected {literal!r} at byte {self.pos} but it was not found.",
                self.pos,
            )
        self._index += len(literal)
        self._pos += len(literal.encode("utf-8"))

    def consume_char(self) -> str:
        c = self.next_char()
        self._index += 1
        self._pos += len(c.encode("utf-8"))
        return c

    def consume_while(self, test: Callable[[str], bool]) -> str:
        """Consume the run of characters satisfying *test* and return it."""
        start = self._index
        while self.peek_is(test):
            self.consume_char()
        return self.text[start : self._index]

    def consume_whitespace(self) -> None:
        self.consume_while(str.isspace)
