# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering

# Below DEBUG: one record per node a graph traversal visits.
TRACE = 5


@total_ordering
class LogLevel(Enum):
    """The choices for `--level`, each naming the `logging` level it enables."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    @property
    def level(self) -> int:
        return _LOGGING_LEVELS[self]

    def log(self, logger: logging.Logger, *args, **kwargs) -> None:
        logger.log(self.level, *args, **kwargs)

    def set_level_for(self, logger: logging.Logger) -> None:
        logger.setLevel(self.level)

    def __lt__(self, other):
        """More verbose levels sort first."""
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.level < other.level


_LOGGING_LEVELS = {
    LogLevel.TRACE: TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}
