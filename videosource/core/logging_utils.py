"""Component-prefixed loggers under the ``videosource`` namespace."""

from __future__ import annotations

import logging
from typing import Optional

MODULE_LOGGER_NAMESPACE = "videosource"
DEFAULT_COMPONENT = "Core"


def _normalize_logger_name(name: Optional[str]) -> str:
    if not name:
        return MODULE_LOGGER_NAMESPACE
    if name.startswith(MODULE_LOGGER_NAMESPACE):
        return name
    return f"{MODULE_LOGGER_NAMESPACE}.{name}"


def _derive_component(name: str) -> str:
    suffix = name[len(MODULE_LOGGER_NAMESPACE):].lstrip(".")
    return suffix or DEFAULT_COMPONENT


class StructuredLogger:
    """Thin wrapper that prefixes every message with ``[component]``.

    ``videosource.parsing.grammar`` logs as ``[parsing.grammar] ...``.
    """

    __slots__ = ("_logger", "_component")

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger
        self._component = _derive_component(logger.name)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def component(self) -> str:
        return self._component

    def _compose(self, message: object, args: tuple) -> str:
        text = str(message)
        if args:
            try:
                text = text % args
            except (TypeError, ValueError):
                text = f"{text} | args={' '.join(str(arg) for arg in args)}"
        return f"[{self._component}] {text}"

    def _emit(self, level: int, message: object, *args, **kwargs) -> None:
        if not self._logger.isEnabledFor(level):
            return
        # report the caller's line, not this wrapper's
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, self._compose(message, args), **kwargs)

    def debug(self, message: object, *args, **kwargs) -> None:
        self._emit(logging.DEBUG, message, *args, **kwargs)

    def info(self, message: object, *args, **kwargs) -> None:
        self._emit(logging.INFO, message, *args, **kwargs)

    def warning(self, message: object, *args, **kwargs) -> None:
        self._emit(logging.WARNING, message, *args, **kwargs)

    def error(self, message: object, *args, **kwargs) -> None:
        self._emit(logging.ERROR, message, *args, **kwargs)


def get_module_logger(name: Optional[str] = None) -> StructuredLogger:
    """Return a structured logger scoped to the videosource namespace."""
    return StructuredLogger(logging.getLogger(_normalize_logger_name(name)))


__all__ = ["StructuredLogger", "get_module_logger"]
