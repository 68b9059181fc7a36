"""Parsed form of a video source string."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

Option = Tuple[str, str]


@dataclass(slots=True, frozen=True)
class VideoSource:
    """A source string split into protocol, ordered options and identifier.

    Options keep their order and duplicates; which occurrence applies is
    decided by the backend resolver (the last one).
    """

    protocol: str
    options: Tuple[Option, ...] = field(default_factory=tuple)
    identifier: str = ""

    def __post_init__(self) -> None:
        # accept any iterable of pairs but store an immutable tuple
        object.__setattr__(
            self, "options", tuple((str(name), str(value)) for name, value in self.options)
        )

    def __str__(self) -> str:
        from .parsing.formatter import format_source

        return format_source(self)

    def option_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.options)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the last option called ``name``."""
        for option_name, value in reversed(self.options):
            if option_name == name:
                return value
        return default

    def to_dict(self) -> Dict[str, Any]:
        return {
            "protocol": self.protocol,
            "options": [list(option) for option in self.options],
            "identifier": self.identifier,
        }


__all__ = ["Option", "VideoSource"]
