"""Parser for ``protocol:[options]//identifier`` source strings.

Grammar::

    source     := ws protocol ':' [ '[' options ']' ] '//' identifier
    protocol   := alnum+
    options    := option (',' option)*
    option     := ws name ws [ '=' ws value ] ws
    value      := quoted-literal | word
    identifier := quoted-literal | path

Quoted literals are decoded with :func:`~videosource.parsing.codec.unescape`;
bare words and unquoted paths are taken verbatim. Option names are
lower-cased, values are not.
"""

from __future__ import annotations

import string

from ..core.errors import ParseError
from ..core.logging_utils import get_module_logger
from ..source import Option, VideoSource
from .codec import unescape
from .lexer import (
    Cursor,
    expect,
    read_path,
    read_quoted_literal,
    read_word,
    skip_whitespace,
)

logger = get_module_logger(__name__)

_PROTOCOL_CHARS = frozenset(string.ascii_letters + string.digits)


def _read_protocol(cursor: Cursor) -> str:
    chars: list[str] = []
    while cursor.peek() in _PROTOCOL_CHARS:
        chars.append(cursor.get())
    return "".join(chars)


def _read_literal(cursor: Cursor) -> str:
    start = cursor.position
    raw = read_quoted_literal(cursor)
    try:
        return unescape(raw)
    except ParseError as exc:
        raise ParseError(exc.message, start) from exc


def _read_option(cursor: Cursor) -> Option | None:
    skip_whitespace(cursor)
    start = cursor.position
    name = read_word(cursor).lower()
    skip_whitespace(cursor)

    if cursor.peek() != "=":
        if not name:
            # empty slot: "[]" or a trailing comma
            return None
        return name, ""

    if not name:
        raise ParseError("expected option name before '='", start)
    cursor.get()
    skip_whitespace(cursor)
    if cursor.peek() == '"':
        return name, _read_literal(cursor)
    return name, read_word(cursor)


def _read_options(cursor: Cursor) -> list[Option]:
    expect(cursor, "[")
    options: list[Option] = []
    while True:
        option = _read_option(cursor)
        if option is not None:
            options.append(option)
        skip_whitespace(cursor)
        if cursor.peek() != ",":
            break
        cursor.get()
    skip_whitespace(cursor)
    expect(cursor, "]")
    return options


def parse_cursor(cursor: Cursor) -> VideoSource:
    """Parse one source from ``cursor``, leaving any trailing text unread."""
    skip_whitespace(cursor)
    start = cursor.position
    protocol = _read_protocol(cursor)
    if not protocol:
        raise ParseError("protocol must not be empty", start)
    if cursor.peek() != ":":
        raise ParseError("expected ':' after protocol", cursor.position)
    cursor.get()

    options: list[Option] = []
    if cursor.peek() == "[":
        options = _read_options(cursor)

    expect(cursor, "/")
    expect(cursor, "/")

    if cursor.peek() == '"':
        identifier = _read_literal(cursor)
    else:
        id_start = cursor.position
        identifier = read_path(cursor)
        if not identifier:
            raise ParseError("identifier must not be empty", id_start)

    return VideoSource(protocol=protocol, options=tuple(options), identifier=identifier)


def parse(text: str) -> VideoSource:
    """Parse a complete source string.

    Raises:
        ParseError: when ``text`` does not match the source grammar.
    """
    cursor = Cursor(text)
    source = parse_cursor(cursor)
    if cursor.remaining().strip():
        logger.debug("Ignoring trailing text after identifier: %r", cursor.remaining())
    logger.debug("Parsed %r -> %s", text, source)
    return source


__all__ = ["parse", "parse_cursor"]
