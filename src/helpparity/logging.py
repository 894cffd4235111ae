"""Loguru configuration for helpparity.

Verbosity modes map to a level and a line format:

    quiet    WARNING+, level and message only
    normal   INFO+, level and message only
    verbose  DEBUG+, with time and the emitting function

Target applications imported by the click adapter may log through the stdlib
``logging`` module; those loggers are held at WARNING unless verbose.
"""

from __future__ import annotations

import logging as stdlib_logging
import os
import sys
from typing import Any, Literal

from loguru import logger

__all__ = ["VERBOSITY_ENV", "VerbosityType", "get_logger", "logger", "setup_logging"]

logger.remove()

DETAILED_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)
BRIEF_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"

VerbosityType = Literal["quiet", "normal", "verbose"]

VERBOSITY_ENV = "HELPPARITY_VERBOSITY"

_MODES: dict[str, tuple[str, str]] = {
    "quiet": ("WARNING", BRIEF_FORMAT),
    "normal": ("INFO", BRIEF_FORMAT),
    "verbose": ("DEBUG", DETAILED_FORMAT),
}

# Stdlib loggers that chatter when a target CLI module is imported
TARGET_APP_LOGGERS = ("asyncio", "urllib3", "httpx", "markdown_it")


def _verbosity_from_env() -> VerbosityType:
    value = os.environ.get(VERBOSITY_ENV, "normal").strip().lower()
    return value if value in _MODES else "normal"  # type: ignore[return-value]


def setup_logging(
    level: str | None = None,
    json_output: bool = False,
    log_file: str | None = None,
    verbosity: VerbosityType | None = None,
) -> None:
    """Replace all handlers with one stderr sink (plus an optional file).

    Args:
        level: Explicit level; overrides the one implied by verbosity.
        json_output: Serialize records as JSON lines instead of text.
        log_file: Also write DEBUG+ records here, rotated at 10 MB.
        verbosity: "quiet", "normal" or "verbose". None reads HELPPARITY_VERBOSITY.
    """
    logger.remove()

    mode = verbosity or _verbosity_from_env()
    mode_level, line_format = _MODES[mode]
    sink_level = level or mode_level

    if json_output:
        logger.add(sys.stderr, format="{message}", serialize=True, level=sink_level)
    else:
        logger.add(sys.stderr, format=line_format, level=sink_level, colorize=True)

    if log_file:
        logger.add(
            log_file,
            format=DETAILED_FORMAT,
            level="DEBUG",
            rotation="10 MB",
            retention="7 days",
        )

    stdlib_level = stdlib_logging.DEBUG if mode == "verbose" else stdlib_logging.WARNING
    for name in TARGET_APP_LOGGERS:
        stdlib_logging.getLogger(name).setLevel(stdlib_level)


def get_logger(command_name: str | None = None) -> Any:
    """Logger bound to a command, so records can be filtered per command."""
    return logger.bind(command=command_name) if command_name else logger
