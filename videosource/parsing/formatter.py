"""Display form of a parsed source."""

from __future__ import annotations

from ..source import VideoSource


def format_source(source: VideoSource) -> str:
    """Render ``source`` as ``protocol:[ name=value, ]//identifier``.

    Values and the identifier are written verbatim, without quoting, so the
    result only parses back to the same record when they contain no
    delimiters, quotes or whitespace.
    """
    parts = [source.protocol, ":"]
    if source.options:
        parts.append("[ ")
        for name, value in source.options:
            parts.append(f"{name}={value}, ")
        parts.append("]")
    parts.append("//")
    parts.append(source.identifier)
    return "".join(parts)


__all__ = ["format_source"]
