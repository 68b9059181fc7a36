"""Argument and logging helpers shared by the CLI commands."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from videosource.core.config_loader import Settings, load_settings
from videosource.core.logging_config import configure_logging
from videosource.core.logging_utils import get_module_logger

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def add_common_cli_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings file with log options and source.<name> presets",
    )
    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS.keys()),
        default=None,
        help="Logging verbosity (overrides the settings file)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Optional path for a rotating log file",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject non-numeric text in integer options instead of reading it as 0",
    )


def load_cli_settings(args: Any) -> Settings:
    """Load the settings file and apply command-line overrides."""
    settings = load_settings(args.config)
    if args.log_level:
        settings.log_level = args.log_level
    if args.log_file:
        settings.log_file = args.log_file
    if args.strict:
        settings.strict_integers = True
    return settings


def setup_cli_logging(settings: Settings) -> None:
    level = settings.log_level.lower()
    if level not in LOG_LEVELS:
        get_module_logger("cli").warning("Unknown log level '%s', using info", settings.log_level)
        level = "info"
    configure_logging(LOG_LEVELS[level], log_file=settings.log_file)


__all__ = ["LOG_LEVELS", "add_common_cli_arguments", "load_cli_settings", "setup_cli_logging"]
