"""Loader for ``key = value`` settings files.

The format is the plain text one used for module ``config.txt`` files::

    # comment
    log_level = debug
    strict_integers = false
    source.webcam = v4l2:[size=vga, fps=30]//dev/video0
    source.clip = file:[on_end=loop]//"my movie.avi"

Inline comments start at a ``#`` preceded by whitespace and outside a
double-quoted span, so source strings that contain ``#`` survive.
Surrounding single or double quotes are stripped.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import aiofiles

from .logging_utils import get_module_logger

logger = get_module_logger(__name__)

PRESET_PREFIX = "source."

DEFAULT_SETTINGS: Dict[str, Any] = {
    "log_level": "info",
    "log_file": "",
    "strict_integers": False,
}

_TRUE_WORDS = ("true", "yes", "on", "1")
_FALSE_WORDS = ("false", "no", "off", "0")


def _strip_inline_comment(value: str) -> str:
    in_quotes = False
    escaped = False
    for index, char in enumerate(value):
        if escaped:
            escaped = False
        elif in_quotes and char == "\\":
            escaped = True
        elif char == '"':
            in_quotes = not in_quotes
        elif char == "#" and not in_quotes and index > 0 and value[index - 1].isspace():
            return value[:index].rstrip()
    return value


def parse_config_lines(lines: Iterable[str]) -> Dict[str, str]:
    """Parse raw ``key = value`` lines into a string mapping."""
    config: Dict[str, str] = {}

    for line_num, raw_line in enumerate(lines, 1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            logger.warning("Invalid config line %d (missing '='): %s", line_num, line)
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = _strip_inline_comment(value.strip())

        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]

        config[key] = value

    return config


class ConfigLoader:
    """Typed loader for settings files."""

    @staticmethod
    def load(
        config_path: Path,
        defaults: Optional[Dict[str, Any]] = None,
        strict: bool = False,
    ) -> Dict[str, Any]:
        config = dict(defaults) if defaults else {}

        if not config_path.exists():
            logger.debug("Config file not found at %s, using defaults", config_path)
            return config

        logger.debug("Loading config from: %s", config_path)
        with open(config_path, "r", encoding="utf-8") as fh:
            raw = parse_config_lines(fh)

        return ConfigLoader._apply(config_path, raw, config, defaults, strict)

    @staticmethod
    async def load_async(
        config_path: Path,
        defaults: Optional[Dict[str, Any]] = None,
        strict: bool = False,
    ) -> Dict[str, Any]:
        """Async version of :meth:`load` reading through aiofiles."""
        config = dict(defaults) if defaults else {}

        if not await asyncio.to_thread(config_path.exists):
            logger.debug("Config file not found at %s, using defaults", config_path)
            return config

        async with aiofiles.open(config_path, "r", encoding="utf-8") as fh:
            lines = await fh.readlines()

        return ConfigLoader._apply(config_path, parse_config_lines(lines), config, defaults, strict)

    @staticmethod
    def _apply(
        config_path: Path,
        raw: Dict[str, str],
        config: Dict[str, Any],
        defaults: Optional[Dict[str, Any]],
        strict: bool,
    ) -> Dict[str, Any]:
        for key, value in raw.items():
            if defaults and key in defaults:
                config[key] = ConfigLoader._parse_value_with_type(value, type(defaults[key]))
            elif strict and not key.startswith(PRESET_PREFIX):
                logger.warning("Unknown config key '%s' - ignored in strict mode", key)
            else:
                config[key] = value

        logger.info("Loaded config from %s (%d values)", config_path, len(raw))
        return config

    @staticmethod
    def _parse_value_with_type(value: str, target_type: type) -> Any:
        if target_type is bool:
            lowered = value.lower()
            if lowered not in _TRUE_WORDS + _FALSE_WORDS:
                logger.warning("Failed to parse '%s' as bool, using false", value)
            return lowered in _TRUE_WORDS

        if target_type is int:
            try:
                return int(value, 0)
            except ValueError:
                logger.warning("Failed to parse '%s' as int, using default", value)
                return target_type()

        return value


@dataclass(slots=True)
class Settings:
    """Settings read from a config file, with source presets split out."""

    log_level: str = "info"
    log_file: Optional[Path] = None
    strict_integers: bool = False
    presets: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "Settings":
        presets = {
            key[len(PRESET_PREFIX):]: str(value)
            for key, value in data.items()
            if key.startswith(PRESET_PREFIX) and len(key) > len(PRESET_PREFIX)
        }
        log_file = data.get("log_file") or None
        return cls(
            log_level=str(data.get("log_level") or "info"),
            log_file=Path(log_file) if log_file else None,
            strict_integers=bool(data.get("strict_integers", False)),
            presets=presets,
        )

    def source(self, name_or_text: str) -> str:
        """Return the preset called ``name_or_text``, or the text itself."""
        return self.presets.get(name_or_text, name_or_text)


def load_settings(config_path: Optional[Path]) -> Settings:
    if config_path is None:
        return Settings()
    return Settings.from_mapping(ConfigLoader.load(config_path, DEFAULT_SETTINGS, strict=True))


async def load_settings_async(config_path: Optional[Path]) -> Settings:
    if config_path is None:
        return Settings()
    data = await ConfigLoader.load_async(config_path, DEFAULT_SETTINGS, strict=True)
    return Settings.from_mapping(data)


__all__ = [
    "ConfigLoader",
    "DEFAULT_SETTINGS",
    "Settings",
    "load_settings",
    "load_settings_async",
    "parse_config_lines",
]
