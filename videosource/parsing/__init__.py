"""Source string parsing components."""

from .codec import escape, unescape
from .formatter import format_source
from .grammar import parse, parse_cursor
from .lexer import Cursor

__all__ = ["Cursor", "escape", "format_source", "parse", "parse_cursor", "unescape"]
