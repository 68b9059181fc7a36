"""Options for the ``files`` protocol (a generic sequence of image frames)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from .base import OnEndOfBuffer, OptionResolver, parse_int, parse_on_end, parse_read_ahead

DEFAULT_FRAMES_FPS = 30


@dataclass(slots=True, frozen=True)
class FrameSourceConfig:
    """Playback settings for a sequence of still images."""

    fps: int = DEFAULT_FRAMES_FPS
    read_ahead: int = 0
    on_end: OnEndOfBuffer = OnEndOfBuffer.REPEAT_LAST_FRAME


class FrameSourceResolver(OptionResolver[FrameSourceConfig]):
    protocol: ClassVar[str] = "files"
    config_cls: ClassVar[type] = FrameSourceConfig
    keys: ClassVar[Mapping[str, str]] = {
        "fps": "fps",
        "read_ahead": "read_ahead",
        "on_end": "on_end",
    }

    def parse_value(self, field: str, key: str, value: str, strict: bool) -> Any:
        if field == "read_ahead":
            return parse_read_ahead(key, value, strict)
        if field == "on_end":
            return parse_on_end(key, value)
        return parse_int(key, value, strict)


__all__ = ["DEFAULT_FRAMES_FPS", "FrameSourceConfig", "FrameSourceResolver"]
