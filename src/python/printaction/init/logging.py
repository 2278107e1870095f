# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import sys
from logging import Formatter, LogRecord
from typing import TextIO

from colors import red, yellow

import printaction.util.logging as printaction_logging
from printaction.util.logging import LogLevel

# Although logging supports the WARN level, its not documented and could conceivably be yanked.
# Set up a 'WARN' level name that maps to 'WARNING', along with our TRACE level.
logging.addLevelName(logging.WARNING, "WARN")
logging.addLevelName(printaction_logging.TRACE, "TRACE")

_ROOT_LOGGER_NAME = "printaction"


class _LevelColoringFormatter(Formatter):
    """Prefixes each record with its level, colored by severity when colors are enabled."""

    def __init__(self, *, use_colors: bool) -> None:
        super().__init__("%(levelname)s: %(message)s")
        self.use_colors = use_colors

    def format(self, record: LogRecord) -> str:
        formatted = super().format(record)
        if not self.use_colors:
            return formatted
        if record.levelno >= logging.ERROR:
            return red(formatted)
        if record.levelno >= logging.WARNING:
            return yellow(formatted)
        return formatted


def initialize_logging(
    level: LogLevel = LogLevel.INFO, stream: TextIO | None = None, *, use_colors: bool = False
) -> logging.Logger:
    """Route every `printaction.*` logger to `stream` (stderr by default) at `level`.

    Calling this again replaces the handler installed by the previous call.
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    for handler in tuple(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_LevelColoringFormatter(use_colors=use_colors))
    logger.addHandler(handler)
    level.set_level_for(logger)
    return logger
