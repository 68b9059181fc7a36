"""C-style escaping for literals in source strings.

``escape`` renders one character for diagnostics; ``unescape`` decodes a
literal containing named escapes (``\\n``), octal codes (``\\101``) and hex
codes (``\\h41``).
"""

from __future__ import annotations

import string
from typing import Union

from ..core.errors import ParseError

NAMED_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

_OCTAL_DIGITS = frozenset("01234567")
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)


def _build_escape_table() -> tuple[str, ...]:
    table = [chr(code) for code in range(256)]
    for letter, char in NAMED_ESCAPES.items():
        table[ord(char)] = "\\" + letter
    return tuple(table)


ESCAPE_TABLE = _build_escape_table()


def escape(char: Union[str, int]) -> str:
    """Return the printable form of a single character or byte value.

    Integers are taken modulo 256, like a C ``unsigned char`` cast.
    """
    if isinstance(char, int):
        return ESCAPE_TABLE[char & 0xFF]
    if len(char) != 1:
        raise TypeError(f"escape() expects a single character, got {char!r}")
    code = ord(char)
    if code < 256:
        return ESCAPE_TABLE[code]
    return char


def unescape(text: str) -> str:
    """Decode the escape sequences in ``text``.

    Raises:
        ParseError: on a dangling backslash, a short or out-of-range octal
            code, a short hex code or an unknown escape letter.
    """
    out: list[str] = []
    length = len(text)
    i = 0
    while i < length:
        char = text[i]
        if char != "\\":
            out.append(char)
            i += 1
            continue

        if i + 1 == length:
            raise ParseError("illegal escape terminating literal")
        code_char = text[i + 1]

        if code_char in _DIGITS:
            if i + 3 >= length or text[i + 2] not in _OCTAL_DIGITS or text[i + 3] not in _OCTAL_DIGITS:
                raise ParseError("partial octal code; need three digits")
            value = int(code_char) * 64 + int(text[i + 2]) * 8 + int(text[i + 3])
            if value > 255:
                raise ParseError(f"invalid octal code; must be 000-377, got {text[i + 1:i + 4]}")
            out.append(chr(value))
            i += 4
        elif code_char == "h":
            if i + 3 >= length or text[i + 2] not in _HEX_DIGITS or text[i + 3] not in _HEX_DIGITS:
                raise ParseError("partial hex code; need two hex digits")
            out.append(chr(int(text[i + 2:i + 4], 16)))
            i += 4
        else:
            decoded = NAMED_ESCAPES.get(code_char)
            if decoded is None:
                raise ParseError(f"unknown escape sequence '\\{escape(code_char)}'")
            out.append(decoded)
            i += 2

    return "".join(out)


__all__ = ["ESCAPE_TABLE", "NAMED_ESCAPES", "escape", "unescape"]
