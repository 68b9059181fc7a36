"""Exception hierarchy shared by the parser, the resolvers and the CLI."""

from __future__ import annotations

from typing import Iterable, Optional


class VideoSourceError(Exception):
    """Base class for every error raised while handling a source string."""


class ParseError(VideoSourceError, ValueError):
    """Malformed input at the grammar or literal-codec level.

    ``position`` is the zero-based offset into the source string where the
    problem was detected, or ``None`` when the error is not tied to one
    (e.g. a bad escape inside an already extracted literal).
    """

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        self.message = message
        self.position = position
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)


class ConfigError(VideoSourceError, ValueError):
    """Source parsed fine but its options are not valid for the backend."""

    def __init__(
        self, message: str, *, valid: Iterable[str] = (), label: str = "valid options"
    ) -> None:
        self.message = message
        self.valid = tuple(valid)
        if self.valid:
            message = f"{message}\n\t {label}: {', '.join(self.valid)}"
        super().__init__(message)


class UnknownOptionError(ConfigError):
    """Option name not recognised by the selected backend."""

    def __init__(self, protocol: str, key: str, valid: Iterable[str]) -> None:
        self.protocol = protocol
        self.key = key
        super().__init__(f"invalid option for '{protocol}' protocol: {key}", valid=valid)


class OptionValueError(ConfigError, ParseError):
    """Recognised option with a value the backend cannot accept.

    Both a :class:`ConfigError` (the option set is invalid) and a
    :class:`ParseError` (the value text is malformed).
    """

    def __init__(self, key: str, value: str, message: str, *, valid: Iterable[str] = ()) -> None:
        self.key = key
        self.value = value
        ConfigError.__init__(self, message, valid=valid, label="valid values")
        # ParseError.__init__ runs via the MRO with the decorated text
        self.message = message


__all__ = [
    "ConfigError",
    "OptionValueError",
    "ParseError",
    "UnknownOptionError",
    "VideoSourceError",
]
