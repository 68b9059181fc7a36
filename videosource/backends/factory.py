"""Registry of buffer constructors keyed by backend and pixel format.

This package never opens devices or decoders. A capture layer registers one
constructor per ``(Backend, PixelFormat)`` pair it supports, and
:meth:`BufferFactory.open` parses the source string, resolves its options and
hands ``(identifier, config)`` to that constructor::

    factory = BufferFactory()

    @factory.register(Backend.V4L2, PixelFormat.YUV422)
    def open_v4l2(device: str, config: V4L2Config):
        return MyV4L2Buffer(device, config.size, config.input, config.interlaced)

    buffer = factory.open("v4l2:[size=pal]//dev/video0", PixelFormat.YUV422)
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Tuple, TypeVar, Union

from ..core.errors import ConfigError
from ..core.logging_utils import get_module_logger
from ..source import VideoSource
from .registry import Backend, resolve_source

logger = get_module_logger(__name__)

BufferConstructor = Callable[[str, Any], Any]
ConstructorT = TypeVar("ConstructorT", bound=BufferConstructor)


class PixelFormat(Enum):
    BYTE = "byte"
    BAYER = "bayer"
    YUV422 = "yuv422"
    RGB = "rgb"


class BufferFactory:
    """Maps ``(backend, pixel format)`` to an externally supplied constructor."""

    def __init__(self) -> None:
        self._constructors: Dict[Tuple[Backend, PixelFormat], BufferConstructor] = {}

    def register(
        self, backend: Backend, pixel_format: PixelFormat
    ) -> Callable[[ConstructorT], ConstructorT]:
        """Decorator registering a constructor; re-registering replaces it."""

        def decorator(constructor: ConstructorT) -> ConstructorT:
            key = (backend, pixel_format)
            if key in self._constructors:
                logger.warning(
                    "Replacing %s/%s buffer constructor", backend.value, pixel_format.value
                )
            self._constructors[key] = constructor
            return constructor

        return decorator

    def unregister(self, backend: Backend, pixel_format: PixelFormat) -> None:
        self._constructors.pop((backend, pixel_format), None)

    def supports(self, backend: Backend, pixel_format: PixelFormat) -> bool:
        return (backend, pixel_format) in self._constructors

    def available_backends(self) -> Tuple[Backend, ...]:
        """Backends with at least one registered constructor, in enum order."""
        present = {backend for backend, _ in self._constructors}
        return tuple(backend for backend in Backend if backend in present)

    def open(
        self,
        source: Union[VideoSource, str],
        pixel_format: PixelFormat,
        *,
        strict: bool = False,
    ) -> Any:
        """Resolve ``source`` and build a buffer with the matching constructor.

        Raises:
            ParseError: if ``source`` is a string that does not parse.
            ConfigError: for invalid options or when no constructor is
                registered for the backend and pixel format.
        """
        resolved = resolve_source(source, strict=strict)
        constructor = self._constructors.get((resolved.backend, pixel_format))
        if constructor is None:
            formats = [
                fmt.value for (backend, fmt) in self._constructors if backend is resolved.backend
            ]
            raise ConfigError(
                f"no {pixel_format.value} buffer available for the "
                f"'{resolved.backend.value}' protocol",
                valid=formats,
                label="available pixel formats",
            )
        logger.info(
            "Opening %s buffer (%s) for %s",
            resolved.backend.value,
            pixel_format.value,
            resolved.identifier,
        )
        return constructor(resolved.identifier, resolved.config)


__all__ = ["BufferConstructor", "BufferFactory", "PixelFormat"]
