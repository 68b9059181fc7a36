"""Unit tests for literal escaping and unescaping."""

import pytest

from videosource.core.errors import ParseError
from videosource.parsing.codec import ESCAPE_TABLE, NAMED_ESCAPES, escape, unescape


class TestEscape:
    """Test escape() for diagnostic rendering."""

    def test_named_escapes(self):
        assert escape("\n") == "\\n"
        assert escape("\t") == "\\t"
        assert escape("\a") == "\\a"
        assert escape("\b") == "\\b"
        assert escape("\f") == "\\f"
        assert escape("\r") == "\\r"
        assert escape("\v") == "\\v"
        assert escape("\\") == "\\\\"
        assert escape("'") == "\\'"
        assert escape('"') == '\\"'

    def test_ordinary_characters_unchanged(self):
        for char in "aZ09/:[],= ~":
            assert escape(char) == char

    def test_accepts_byte_values(self):
        assert escape(10) == "\\n"
        assert escape(65) == "A"
        assert escape(0) == "\x00"
        assert escape(255) == "\xff"

    def test_table_covers_every_byte(self):
        assert len(ESCAPE_TABLE) == 256
        two_char = [entry for entry in ESCAPE_TABLE if len(entry) == 2]
        assert len(two_char) == len(NAMED_ESCAPES)

    def test_byte_values_wrap_like_unsigned_char(self):
        assert escape(-1) == escape(255)
        assert escape(-246) == "\\n"
        assert escape(256 + 9) == "\\t"

    def test_rejects_multi_character_strings(self):
        with pytest.raises(TypeError, match="single character"):
            escape("ab")
        with pytest.raises(TypeError, match="single character"):
            escape("")

    def test_non_latin1_character_passes_through(self):
        assert escape("é") == "é"
        assert escape("€") == "€"


class TestUnescape:
    """Test unescape() decoding."""

    def test_plain_text_unchanged(self):
        assert unescape("my movie.avi") == "my movie.avi"
        assert unescape("") == ""

    def test_every_named_escape_round_trips(self):
        for code in range(256):
            assert unescape(escape(code)) == chr(code)

    def test_octal(self):
        assert unescape("\\101") == "A"
        assert unescape("x\\000y") == "x\x00y"
        assert unescape("\\377") == "\xff"

    def test_octal_out_of_range(self):
        with pytest.raises(ParseError, match="invalid octal code"):
            unescape("\\400")

    def test_octal_leading_eight_is_out_of_range(self):
        with pytest.raises(ParseError, match="invalid octal code"):
            unescape("\\812")

    def test_partial_octal(self):
        for text in ("\\1", "\\12", "\\18x", "\\1x7"):
            with pytest.raises(ParseError, match="partial octal code"):
                unescape(text)

    def test_octal_consumes_exactly_three_digits(self):
        assert unescape("\\1012") == "A2"

    def test_hex(self):
        assert unescape("\\h41") == "A"
        assert unescape("\\hff\\hFF") == "\xff\xff"
        assert unescape("\\h414") == "A4"

    def test_partial_hex(self):
        for text in ("\\h4", "\\h", "\\h4g", "\\hg4"):
            with pytest.raises(ParseError, match="partial hex code"):
                unescape(text)

    def test_trailing_backslash(self):
        with pytest.raises(ParseError, match="illegal escape terminating literal"):
            unescape("abc\\")

    def test_unknown_escape(self):
        with pytest.raises(ParseError, match="unknown escape sequence"):
            unescape("\\q")

    def test_mixed_sequence(self):
        assert unescape('say \\"hi\\"\\n\\tbye') == 'say "hi"\n\tbye'

    def test_escaped_backslash_does_not_start_new_escape(self):
        assert unescape("\\\\n") == "\\n"
