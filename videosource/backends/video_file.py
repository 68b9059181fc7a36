"""Options for the ``file`` protocol (a container decoded frame by frame)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Optional

from .base import OnEndOfBuffer, OptionResolver, parse_on_end, parse_read_ahead


@dataclass(slots=True, frozen=True)
class VideoFileConfig:
    # None means the decoder is used directly, without a read-ahead buffer
    read_ahead: Optional[int] = None
    on_end: OnEndOfBuffer = OnEndOfBuffer.REPEAT_LAST_FRAME


class VideoFileResolver(OptionResolver[VideoFileConfig]):
    protocol: ClassVar[str] = "file"
    config_cls: ClassVar[type] = VideoFileConfig
    keys: ClassVar[Mapping[str, str]] = {
        "read_ahead": "read_ahead",
        "on_end": "on_end",
    }

    def parse_value(self, field: str, key: str, value: str, strict: bool) -> Any:
        if field == "on_end":
            return parse_on_end(key, value)
        return parse_read_ahead(key, value, strict)


__all__ = ["VideoFileConfig", "VideoFileResolver"]
