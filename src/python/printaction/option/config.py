# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping

import toml

from printaction.option.errors import ConfigError, ConfigValidationError
from printaction.util.strutil import bullet_list, softwrap

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "printaction.toml"


@dataclass(frozen=True)
class _ConfigValues:
    """The parsed contents of a TOML config file."""

    path: str
    section_to_values: Mapping[str, Mapping[str, Any]]

    def get_value(self, section: str, option: str) -> Any | None:
        return self.section_to_values.get(section, {}).get(option)

    def get_verification_errors(
        self, section_to_valid_options: Mapping[str, Iterable[str]]
    ) -> list[str]:
        errors = []
        for section, valid_options in section_to_valid_options.items():
            values = self.section_to_values.get(section, {})
            if not isinstance(values, Mapping):
                errors.append(f"[{section}] in {self.path} must be a table.")
                continue
            valid = set(valid_options)
            for option in values:
                if option not in valid:
                    errors.append(f"Invalid option '{option}' under [{section}] in {self.path}")
        return errors


@dataclass(frozen=True)
class Config:
    """Encapsulates loading of one or more TOML config files.

    Later files override earlier ones.
    """

    values: tuple[_ConfigValues, ...] = ()

    @classmethod
    def load(cls, paths: Iterable[str | Path]) -> Config:
        config_values = []
        for path in paths:
            try:
                content = Path(path).read_text()
            except OSError as e:
                raise ConfigError(f"Config file {path} could not be read: {e}") from e
            try:
                toml_values = toml.loads(content)
            except toml.TomlDecodeError as e:
                raise ConfigError(f"Config file {path} could not be parsed as TOML:\n  {e}") from e
            config_values.append(_ConfigValues(str(path), toml_values))
            logger.debug(f"Loaded config from {path}.")
        return cls(tuple(config_values))

    @classmethod
    def load_default(cls, explicit_paths: Iterable[str | Path] = ()) -> Config:
        """Load `explicit_paths`, or the default config file if none were given and it exists."""
        paths = list(explicit_paths)
        if not paths and Path(DEFAULT_CONFIG_FILE).is_file():
            paths.append(DEFAULT_CONFIG_FILE)
        return cls.load(paths)

    def verify(self, section_to_valid_options: Mapping[str, Iterable[str]]) -> None:
        error_log = []
        for config_values in self.values:
            error_log.extend(config_values.get_verification_errors(section_to_valid_options))
        if error_log:
            for error in error_log:
                logger.error(error)
            raise ConfigValidationError(
                softwrap(
                    f"""
                    Invalid config entries detected. Update or remove these entries:

                    {bullet_list(error_log)}
                    """
                )
            )

    def get(self, section: str, option: str) -> Any | None:
        """The value of `option` from the last config file that sets it, or None."""
        for config_values in reversed(self.values):
            value = config_values.get_value(section, option)
            if value is not None:
                return value
        return None
