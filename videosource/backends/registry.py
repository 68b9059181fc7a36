"""Selection of the backend resolver for a parsed source.

The set of backends is closed: each :class:`Backend` member names a protocol
and owns exactly one resolver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from ..core.errors import ConfigError
from ..parsing.grammar import parse
from ..source import VideoSource
from .base import OptionResolver
from .dc1394 import DC1394Resolver
from .frames import FrameSourceResolver
from .v4l2 import V4L2Resolver
from .video_file import VideoFileResolver


class Backend(Enum):
    FILES = "files"
    V4L2 = "v4l2"
    FILE = "file"
    DC1394 = "dc1394"

    @property
    def resolver(self) -> OptionResolver:
        return RESOLVERS[self]

    @classmethod
    def from_protocol(cls, protocol: str) -> "Backend":
        try:
            return cls(protocol)
        except ValueError:
            raise ConfigError(
                f"unknown video source protocol: {protocol}",
                valid=[member.value for member in cls],
                label="known protocols",
            ) from None


RESOLVERS: Dict[Backend, OptionResolver] = {
    Backend.FILES: FrameSourceResolver(),
    Backend.V4L2: V4L2Resolver(),
    Backend.FILE: VideoFileResolver(),
    Backend.DC1394: DC1394Resolver(),
}


@dataclass(slots=True, frozen=True)
class ResolvedSource:
    """A parsed source together with its backend and validated config."""

    source: VideoSource
    backend: Backend
    config: Any

    @property
    def identifier(self) -> str:
        return self.source.identifier


def resolve_source(source: Union[VideoSource, str], *, strict: bool = False) -> ResolvedSource:
    """Parse (if needed) and validate ``source`` against its backend.

    Raises:
        ParseError: if ``source`` is a string that does not parse.
        ConfigError: for an unknown protocol or invalid options.
    """
    if isinstance(source, str):
        source = parse(source)
    backend = Backend.from_protocol(source.protocol)
    config = backend.resolver.resolve(source.options, strict=strict)
    return ResolvedSource(source=source, backend=backend, config=config)


def describe_backends() -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
    """Return ``(protocol, option keys)`` for every backend."""
    return tuple((backend.value, backend.resolver.valid_keys) for backend in Backend)


__all__ = ["Backend", "RESOLVERS", "ResolvedSource", "describe_backends", "resolve_source"]
