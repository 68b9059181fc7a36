"""Shared option parsing for backend resolvers.

Each backend turns the option list of a :class:`~videosource.source.VideoSource`
into a typed config. The walk is the same for all of them:

* options are visited once, in order;
* an unknown name fails at once with :class:`UnknownOptionError`;
* a malformed value fails at once with :class:`OptionValueError`;
* parsed values are collected per field, so the last occurrence of a key
  (or any of its aliases) wins, and absent fields keep the config defaults.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, ClassVar, Dict, Generic, Iterable, Mapping, Tuple, TypeVar

from ..core.errors import OptionValueError, UnknownOptionError
from ..core.logging_utils import get_module_logger
from ..source import Option

logger = get_module_logger(__name__)

DEFAULT_READ_AHEAD_FRAMES = 50

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_FULL_INT = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)


class OnEndOfBuffer(Enum):
    """What a finite frame source does after its last frame."""

    LOOP = "loop"
    UNSET_PENDING = "unset_pending"
    REPEAT_LAST_FRAME = "repeat_last"


def lenient_int(value: str) -> int:
    """``atoi``-style parse: leading sign and digits, anything else is 0."""
    match = _LEADING_INT.match(value)
    if match is None:
        return 0
    return int(match.group(1))


def parse_int(key: str, value: str, strict: bool = False) -> int:
    """Parse an integer option, leniently unless ``strict`` is set."""
    clean = _FULL_INT.fullmatch(value) is not None
    if strict and not clean:
        raise OptionValueError(key, value, f"invalid integer for '{key}': '{value}'")
    result = lenient_int(value)
    if not clean:
        logger.debug("Option %s=%r is not a clean integer, using %d", key, value, result)
    return result


def parse_read_ahead(key: str, value: str, strict: bool = False) -> int:
    if not value:
        return DEFAULT_READ_AHEAD_FRAMES
    return parse_int(key, value, strict)


def parse_on_end(key: str, value: str) -> OnEndOfBuffer:
    try:
        return OnEndOfBuffer(value)
    except ValueError:
        raise OptionValueError(
            key,
            value,
            f"invalid end-of-buffer behaviour: {value}",
            valid=[member.value for member in (
                OnEndOfBuffer.REPEAT_LAST_FRAME,
                OnEndOfBuffer.UNSET_PENDING,
                OnEndOfBuffer.LOOP,
            )],
        ) from None


ConfigT = TypeVar("ConfigT")


class OptionResolver(Generic[ConfigT]):
    """Base class for the per-backend resolvers.

    Subclasses set ``protocol``, ``config_cls`` and ``keys`` (option name or
    alias -> config field, in the order they are listed in diagnostics) and
    implement :meth:`parse_value`.
    """

    protocol: ClassVar[str]
    config_cls: ClassVar[type]
    keys: ClassVar[Mapping[str, str]]

    @property
    def valid_keys(self) -> Tuple[str, ...]:
        return tuple(self.keys)

    def parse_value(self, field: str, key: str, value: str, strict: bool) -> Any:
        raise NotImplementedError

    def resolve(self, options: Iterable[Option], *, strict: bool = False) -> ConfigT:
        """Build the backend config from ``options``.

        Raises:
            UnknownOptionError: for a name this backend does not know.
            OptionValueError: for a value this backend cannot accept.
        """
        values: Dict[str, Any] = {}
        for key, value in options:
            field = self.keys.get(key)
            if field is None:
                raise UnknownOptionError(self.protocol, key, self.valid_keys)
            values[field] = self.parse_value(field, key, value, strict)

        config = self.config_cls(**values)
        logger.debug("Resolved %s options -> %s", self.protocol, config)
        return config


__all__ = [
    "DEFAULT_READ_AHEAD_FRAMES",
    "OnEndOfBuffer",
    "OptionResolver",
    "lenient_int",
    "parse_int",
    "parse_on_end",
    "parse_read_ahead",
]
