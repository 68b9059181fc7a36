"""Backend option resolvers and the buffer constructor registry."""

from .base import OnEndOfBuffer, OptionResolver, lenient_int
from .dc1394 import DC1394Config, DC1394Resolver
from .factory import BufferFactory, PixelFormat
from .frames import FrameSourceConfig, FrameSourceResolver
from .registry import Backend, RESOLVERS, ResolvedSource, describe_backends, resolve_source
from .v4l2 import V4L2Config, V4L2Resolver
from .video_file import VideoFileConfig, VideoFileResolver

__all__ = [
    "Backend",
    "BufferFactory",
    "DC1394Config",
    "DC1394Resolver",
    "FrameSourceConfig",
    "FrameSourceResolver",
    "OnEndOfBuffer",
    "OptionResolver",
    "PixelFormat",
    "RESOLVERS",
    "ResolvedSource",
    "V4L2Config",
    "V4L2Resolver",
    "VideoFileConfig",
    "VideoFileResolver",
    "describe_backends",
    "lenient_int",
    "resolve_source",
]
