"""Options for the ``v4l2`` protocol (Video4Linux2 capture devices)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Tuple

from ..core.errors import OptionValueError
from .base import OptionResolver, parse_int

Resolution = Tuple[int, int]

SIZE_PRESETS: Dict[str, Resolution] = {
    "vga": (640, 480),
    "qvga": (320, 240),
    "pal": (720, 576),
    "ntsc": (720, 480),
}
DEFAULT_CAPTURE_SIZE: Resolution = SIZE_PRESETS["vga"]

_SIZE_PATTERN = re.compile(r"\s*(\d+)\s*x\s*(\d+)\s*", re.ASCII)
_TRUE_WORDS = ("true", "yes")
_FALSE_WORDS = ("false", "no")


def parse_size(key: str, value: str) -> Resolution:
    """Parse ``vga``/``qvga``/``pal``/``ntsc`` or ``<width>x<height>``."""
    lowered = value.lower()
    preset = SIZE_PRESETS.get(lowered)
    if preset is not None:
        return preset
    match = _SIZE_PATTERN.fullmatch(lowered)
    if match is None:
        raise OptionValueError(
            key,
            value,
            f"invalid image size specification: '{value}'",
            valid=[*SIZE_PRESETS, "<width>x<height>"],
        )
    return int(match.group(1)), int(match.group(2))


def parse_flag(key: str, value: str) -> bool:
    """An empty value switches the flag on; otherwise true/yes or false/no."""
    if not value:
        return True
    lowered = value.lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise OptionValueError(
        key,
        value,
        f"invalid {key} setting '{value}' (must be true/false or yes/no)",
        valid=_TRUE_WORDS + _FALSE_WORDS,
    )


@dataclass(slots=True, frozen=True)
class V4L2Config:
    """Capture settings; ``input`` of -1 keeps the device's current input."""

    size: Resolution = DEFAULT_CAPTURE_SIZE
    input: int = -1
    interlaced: bool = False


class V4L2Resolver(OptionResolver[V4L2Config]):
    protocol: ClassVar[str] = "v4l2"
    config_cls: ClassVar[type] = V4L2Config
    keys: ClassVar[Mapping[str, str]] = {
        "size": "size",
        "input": "input",
        "interlaced": "interlaced",
        "fields": "interlaced",
    }

    def parse_value(self, field: str, key: str, value: str, strict: bool) -> Any:
        if field == "size":
            return parse_size(key, value)
        if field == "interlaced":
            return parse_flag(key, value)
        return parse_int(key, value, strict)


__all__ = [
    "DEFAULT_CAPTURE_SIZE",
    "Resolution",
    "SIZE_PRESETS",
    "V4L2Config",
    "V4L2Resolver",
    "parse_flag",
    "parse_size",
]
