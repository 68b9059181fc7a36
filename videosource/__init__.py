"""Parse and validate video source strings.

A source string names a capture or playback backend, its options and the
device or file to open::

    >>> from videosource import parse, resolve_source
    >>> source = parse("v4l2:[size=pal, input=1]//dev/video0")
    >>> source.options
    (('size', 'pal'), ('input', '1'))
    >>> resolve_source(source).config.size
    (720, 576)
"""

from __future__ import annotations

from importlib import metadata

from .backends import (
    Backend,
    BufferFactory,
    DC1394Config,
    FrameSourceConfig,
    OnEndOfBuffer,
    PixelFormat,
    ResolvedSource,
    V4L2Config,
    VideoFileConfig,
    resolve_source,
)
from .core.errors import ConfigError, OptionValueError, ParseError, UnknownOptionError, VideoSourceError
from .parsing import escape, format_source, parse, unescape
from .source import VideoSource

try:
    __version__ = metadata.version("videosource")
except metadata.PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"

__all__ = [
    "Backend",
    "BufferFactory",
    "ConfigError",
    "DC1394Config",
    "FrameSourceConfig",
    "OnEndOfBuffer",
    "OptionValueError",
    "ParseError",
    "PixelFormat",
    "ResolvedSource",
    "UnknownOptionError",
    "V4L2Config",
    "VideoFileConfig",
    "VideoSource",
    "VideoSourceError",
    "__version__",
    "escape",
    "format_source",
    "parse",
    "resolve_source",
    "unescape",
]
