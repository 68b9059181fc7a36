"""Cursor and token readers used by the source grammar."""

from __future__ import annotations

import string

from ..core.errors import ParseError
from .codec import escape

END_OF_INPUT = ""

_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")


class Cursor:
    """Forward-only character cursor over a string.

    ``peek()`` returns :data:`END_OF_INPUT` (the empty string) once the text
    is exhausted, so it never matches any real character.
    """

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str, position: int = 0) -> None:
        self._text = text
        self._pos = position

    def __repr__(self) -> str:
        return f"Cursor(position={self._pos}, remaining={self.remaining()!r})"

    @property
    def position(self) -> int:
        return self._pos

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._text)

    def peek(self) -> str:
        if self._pos >= len(self._text):
            return END_OF_INPUT
        return self._text[self._pos]

    def get(self) -> str:
        char = self.peek()
        if char:
            self._pos += 1
        return char

    def remaining(self) -> str:
        return self._text[self._pos:]


def describe(char: str) -> str:
    """Render a peeked character for an error message."""
    if char == END_OF_INPUT:
        return "end of input"
    return f"'{escape(char)}'"


def expect(cursor: Cursor, char: str) -> None:
    """Consume ``char`` or raise :class:`ParseError`."""
    actual = cursor.peek()
    if actual != char:
        raise ParseError(f"expected '{escape(char)}', got {describe(actual)}", cursor.position)
    cursor.get()


def skip_whitespace(cursor: Cursor) -> None:
    while cursor.peek().isspace():
        cursor.get()


def read_quoted_literal(cursor: Cursor) -> str:
    """Read a double-quoted literal, leaving escapes undecoded.

    A backslash and the character after it are copied as a pair, so an
    escaped quote does not end the literal.
    """
    expect(cursor, '"')
    chars: list[str] = []
    while cursor.peek() not in ('"', END_OF_INPUT):
        char = cursor.get()
        chars.append(char)
        if char == "\\":
            chars.append(cursor.get())
    expect(cursor, '"')
    return "".join(chars)


def read_word(cursor: Cursor) -> str:
    """Read a run of ASCII letters, digits and underscores (may be empty)."""
    chars: list[str] = []
    while cursor.peek() in _WORD_CHARS:
        chars.append(cursor.get())
    return "".join(chars)


def read_path(cursor: Cursor) -> str:
    """Read a run of printable, non-whitespace characters."""
    chars: list[str] = []
    while True:
        char = cursor.peek()
        if not char or char.isspace() or not char.isprintable():
            break
        chars.append(cursor.get())
    return "".join(chars)


__all__ = [
    "Cursor",
    "END_OF_INPUT",
    "describe",
    "expect",
    "read_path",
    "read_quoted_literal",
    "read_word",
    "skip_whitespace",
]
