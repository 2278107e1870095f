# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from printaction.base.exceptions import PrintActionError
from printaction.base.exiter import PARSING_FAILURE_EXIT_CODE


class OptionsError(PrintActionError):
    """An options system-related error."""

    exit_code = PARSING_FAILURE_EXIT_CODE


class ConfigError(OptionsError):
    """A config file could not be read or parsed."""


class ConfigValidationError(ConfigError):
    """A config file holds unknown options or invalid values."""
