"""Options for the ``dc1394`` protocol (IEEE-1394 DV cameras)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from .base import OptionResolver, parse_int


@dataclass(slots=True, frozen=True)
class DC1394Config:
    """Camera settings; -1 leaves brightness or exposure under camera control."""

    fps: int = 30
    dma_bufs: int = 3
    brightness: int = -1
    exposure: int = -1


class DC1394Resolver(OptionResolver[DC1394Config]):
    protocol: ClassVar[str] = "dc1394"
    config_cls: ClassVar[type] = DC1394Config
    keys: ClassVar[Mapping[str, str]] = {
        "fps": "fps",
        "dma_bufs": "dma_bufs",
        "dma_buffers": "dma_bufs",
        "brightness": "brightness",
        "bright": "brightness",
        "exp": "exposure",
        "exposure": "exposure",
    }

    def parse_value(self, field: str, key: str, value: str, strict: bool) -> Any:
        return parse_int(key, value, strict)


__all__ = ["DC1394Config", "DC1394Resolver"]
