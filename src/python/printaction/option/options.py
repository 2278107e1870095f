# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, TypeVar

from printaction.option.config import Config
from printaction.option.errors import ConfigValidationError
from printaction.summary import OutputFormat
from printaction.util.logging import LogLevel

SECTION = "print_action"

_E = TypeVar("_E", bound=Enum)


def _as_bool(option: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigValidationError(f"[{SECTION}].{option} must be true or false, got {value!r}.")
    return value


def _as_str_list(option: str, value: Any) -> tuple[str, ...]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigValidationError(f"[{SECTION}].{option} must be a list of strings.")
    return tuple(value)


def _as_enum(enum_type: type[_E]) -> Callable[[str, Any], _E]:
    def convert(option: str, value: Any) -> _E:
        try:
            return enum_type(value)
        except ValueError:
            choices = ", ".join(str(member.value) for member in enum_type)
            raise ConfigValidationError(
                f"[{SECTION}].{option} must be one of {choices}, got {value!r}."
            )

    return convert


@dataclass(frozen=True)
class PrintActionOptions:
    mnemonics: tuple[str, ...] = ()
    compile_one_dependency: bool = False
    keep_going: bool = False
    format: OutputFormat = OutputFormat.text
    colors: bool = True
    level: LogLevel = LogLevel.INFO

    _converters = {
        "mnemonics": _as_str_list,
        "compile_one_dependency": _as_bool,
        "keep_going": _as_bool,
        "format": _as_enum(OutputFormat),
        "colors": _as_bool,
        "level": _as_enum(LogLevel),
    }

    @classmethod
    def from_config(cls, config: Config) -> PrintActionOptions:
        config.verify({SECTION: cls._converters.keys()})
        values = {}
        for option, convert in cls._converters.items():
            value = config.get(SECTION, option)
            if value is not None:
                values[option] = convert(option, value)
        return cls(**values)

    def with_overrides(self, overrides: Mapping[str, Any]) -> PrintActionOptions:
        """Apply command line values on top of these; None means "not given"."""
        return dataclasses.replace(
            self, **{option: value for option, value in overrides.items() if value is not None}
        )
