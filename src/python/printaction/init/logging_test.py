# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import logging
from io import StringIO

from printaction.init.logging import initialize_logging
from printaction.util.logging import TRACE, LogLevel


def test_log_levels_are_ordered_by_verbosity() -> None:
    assert LogLevel.TRACE < LogLevel.DEBUG < LogLevel.INFO < LogLevel.WARN < LogLevel.ERROR
    assert LogLevel.TRACE.level == TRACE
    assert LogLevel("warn") is LogLevel.WARN


def test_initialize_logging_routes_printaction_loggers() -> None:
    stream = StringIO()
    initialize_logging(LogLevel.WARN, stream)
    logger = logging.getLogger("printaction.runner")
    logger.info("hidden")
    logger.warning("shown")
    assert stream.getvalue() == "WARN: shown\n"

    replacement = StringIO()
    initialize_logging(LogLevel.TRACE, replacement)
    LogLevel.TRACE.log(logger, "very detailed")
    assert replacement.getvalue() == "TRACE: very detailed\n"
    assert stream.getvalue() == "WARN: shown\n"
    initialize_logging(LogLevel.INFO)


def test_colors() -> None:
    stream = StringIO()
    initialize_logging(LogLevel.INFO, stream, use_colors=True)
    logging.getLogger("printaction").error("broken")
    assert "\x1b[" in stream.getvalue()
    assert "ERROR: broken" in stream.getvalue()
    initialize_logging(LogLevel.INFO)
