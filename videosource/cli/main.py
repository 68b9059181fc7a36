"""``videosource`` command line: inspect and validate source strings."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Optional, Sequence, TextIO

from videosource.backends import describe_backends, resolve_source
from videosource.cli.common import add_common_cli_arguments, load_cli_settings, setup_cli_logging
from videosource.core.config_loader import Settings
from videosource.core.errors import VideoSourceError
from videosource.core.logging_utils import get_module_logger
from videosource.parsing import format_source, parse

logger = get_module_logger("cli")

EXIT_OK = 0
EXIT_INVALID_SOURCE = 2


def _jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {key: _jsonable(item) for key, item in asdict(value).items()}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def _cmd_parse(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    source = parse(settings.source(args.source))
    payload = {"canonical": format_source(source), **source.to_dict()}
    out.write(json.dumps(payload, indent=2) + "\n")
    return EXIT_OK


def _cmd_resolve(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    resolved = resolve_source(settings.source(args.source), strict=settings.strict_integers)
    payload = {
        "backend": resolved.backend.value,
        "identifier": resolved.identifier,
        "config": _jsonable(resolved.config),
    }
    out.write(json.dumps(payload, indent=2) + "\n")
    return EXIT_OK


def _cmd_backends(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    for protocol, keys in describe_backends():
        out.write(f"{protocol}: {', '.join(keys)}\n")
    for name, text in sorted(settings.presets.items()):
        out.write(f"preset {name} = {text}\n")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="videosource",
        description="Parse and validate video source strings such as "
        "'v4l2:[size=vga, input=1]//dev/video0'.",
    )
    add_common_cli_arguments(parser)
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Show the parsed record of a source string")
    parse_cmd.add_argument("source", help="Source string or preset name")
    parse_cmd.set_defaults(handler=_cmd_parse)

    resolve_cmd = commands.add_parser("resolve", help="Validate options against the source's backend")
    resolve_cmd.add_argument("source", help="Source string or preset name")
    resolve_cmd.set_defaults(handler=_cmd_resolve)

    backends_cmd = commands.add_parser("backends", help="List protocols, their options and presets")
    backends_cmd.set_defaults(handler=_cmd_backends)

    return parser


def main(argv: Optional[Sequence[str]] = None, *, out: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    out = out or sys.stdout

    try:
        settings = load_cli_settings(args)
    except (OSError, UnicodeDecodeError) as exc:
        parser.error(f"cannot read settings file: {exc}")
    setup_cli_logging(settings)

    try:
        return args.handler(args, settings, out)
    except VideoSourceError as exc:
        logger.error("%s", exc)
        return EXIT_INVALID_SOURCE


__all__ = ["EXIT_INVALID_SOURCE", "EXIT_OK", "build_parser", "main"]
