"""Errors, logging and settings shared across the package."""

from .errors import (
    ConfigError,
    OptionValueError,
    ParseError,
    UnknownOptionError,
    VideoSourceError,
)
from .logging_utils import StructuredLogger, get_module_logger

__all__ = [
    "ConfigError",
    "OptionValueError",
    "ParseError",
    "StructuredLogger",
    "UnknownOptionError",
    "VideoSourceError",
    "get_module_logger",
]
