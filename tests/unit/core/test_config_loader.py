"""Unit tests for the settings file loader."""

import asyncio
from pathlib import Path

import pytest

from videosource.core.config_loader import (
    DEFAULT_SETTINGS,
    ConfigLoader,
    Settings,
    load_settings,
    load_settings_async,
    parse_config_lines,
)
from videosource.parsing import parse


SAMPLE_CONFIG = """\
# videosource settings
log_level = debug
strict_integers = yes

source.webcam = v4l2:[size=vga, input=1]//dev/video0
source.clip = file:[on_end=loop]//"my movie.avi"   # trailing comment
source.quoted = 'files://frames/#1'
not a setting
"""


@pytest.fixture
def config_file(tmp_path) -> Path:
    path = tmp_path / "videosource.txt"
    path.write_text(SAMPLE_CONFIG, encoding="utf-8")
    return path


class TestParseConfigLines:
    """Test raw line parsing."""

    def test_skips_comments_and_blank_lines(self):
        assert parse_config_lines(["", "  # note", "a = 1"]) == {"a": "1"}

    def test_line_without_equals_is_skipped(self):
        assert parse_config_lines(["just words", "b=2"]) == {"b": "2"}

    def test_inline_comment_needs_whitespace(self):
        raw = parse_config_lines(["x = files://a#b", "y = files://c #note"])

        assert raw["x"] == "files://a#b"
        assert raw["y"] == "files://c"

    def test_hash_inside_quoted_identifier_kept(self):
        raw = parse_config_lines(['source.clip = file://"take #2.avi"  # second take'])

        assert raw["source.clip"] == 'file://"take #2.avi"'

    def test_escaped_quote_does_not_close_span(self):
        raw = parse_config_lines(['source.clip = file://"a \\" #b"'])

        assert raw["source.clip"] == 'file://"a \\" #b"'

    def test_value_keeps_later_equals_signs(self):
        raw = parse_config_lines(["source.cam = v4l2:[size=pal]//dev/video0"])

        assert raw["source.cam"] == "v4l2:[size=pal]//dev/video0"

    def test_outer_quotes_stripped(self):
        raw = parse_config_lines(["a = 'one'", 'b = "two"', "c = \"mixed'"])

        assert raw == {"a": "one", "b": "two", "c": "\"mixed'"}

    def test_later_key_wins(self):
        assert parse_config_lines(["a = 1", "a = 2"]) == {"a": "2"}


class TestConfigLoader:
    """Test typed loading."""

    def test_missing_file_returns_defaults(self, tmp_path):
        result = ConfigLoader.load(tmp_path / "absent.txt", DEFAULT_SETTINGS)

        assert result == DEFAULT_SETTINGS
        assert result is not DEFAULT_SETTINGS

    def test_values_take_default_types(self, config_file):
        result = ConfigLoader.load(config_file, DEFAULT_SETTINGS)

        assert result["log_level"] == "debug"
        assert result["strict_integers"] is True
        assert result["log_file"] == ""

    def test_strict_drops_unknown_keys_but_keeps_presets(self, tmp_path):
        path = tmp_path / "settings.txt"
        path.write_text("colour = blue\nsource.cam = v4l2://dev/video0\n", encoding="utf-8")

        result = ConfigLoader.load(path, DEFAULT_SETTINGS, strict=True)

        assert "colour" not in result
        assert result["source.cam"] == "v4l2://dev/video0"

    def test_non_strict_keeps_unknown_keys(self, tmp_path):
        path = tmp_path / "settings.txt"
        path.write_text("colour = blue\n", encoding="utf-8")

        assert ConfigLoader.load(path, DEFAULT_SETTINGS)["colour"] == "blue"

    def test_parse_value_with_type(self):
        assert ConfigLoader._parse_value_with_type("off", bool) is False
        assert ConfigLoader._parse_value_with_type("maybe", bool) is False
        assert ConfigLoader._parse_value_with_type("0x10", int) == 16
        assert ConfigLoader._parse_value_with_type("lots", int) == 0
        assert ConfigLoader._parse_value_with_type("text", str) == "text"

    def test_load_async_matches_load(self, config_file):
        expected = ConfigLoader.load(config_file, DEFAULT_SETTINGS, strict=True)
        result = asyncio.run(ConfigLoader.load_async(config_file, DEFAULT_SETTINGS, strict=True))

        assert result == expected

    def test_load_async_missing_file(self, tmp_path):
        result = asyncio.run(ConfigLoader.load_async(tmp_path / "absent.txt", DEFAULT_SETTINGS))

        assert result == DEFAULT_SETTINGS


class TestSettings:
    """Test the Settings record and preset lookup."""

    def test_no_path_gives_defaults(self):
        settings = load_settings(None)

        assert settings == Settings()
        assert settings.log_file is None
        assert settings.presets == {}

    def test_presets_split_out(self, config_file):
        settings = load_settings(config_file)

        assert settings.log_level == "debug"
        assert settings.strict_integers is True
        assert settings.presets == {
            "webcam": "v4l2:[size=vga, input=1]//dev/video0",
            "clip": 'file:[on_end=loop]//"my movie.avi"',
            "quoted": "files://frames/#1",
        }

    def test_source_lookup_falls_back_to_text(self, config_file):
        settings = load_settings(config_file)

        assert settings.source("webcam") == "v4l2:[size=vga, input=1]//dev/video0"
        assert settings.source("dc1394://0") == "dc1394://0"

    def test_quoted_preset_with_hash_parses(self, tmp_path):
        path = tmp_path / "settings.txt"
        path.write_text('source.clip = file:[on_end=loop]//"take #2.avi"\n', encoding="utf-8")

        source = parse(load_settings(path).source("clip"))

        assert source.identifier == "take #2.avi"

    def test_log_file_becomes_path(self):
        settings = Settings.from_mapping({"log_file": "logs/videosource.log"})

        assert settings.log_file == Path("logs/videosource.log")

    def test_bare_prefix_is_not_a_preset(self):
        assert Settings.from_mapping({"source.": "files://x"}).presets == {}

    def test_load_settings_async(self, config_file):
        settings = asyncio.run(load_settings_async(config_file))

        assert settings == load_settings(config_file)
