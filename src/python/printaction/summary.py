# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from printaction.engine.artifacts import Action
from printaction.util.strutil import quote_text_field


class OutputFormat(Enum):
    """Output format for printed actions.

    text: One `action { ... }` block per action, in protobuf text format.
    json: A single object `{"actions": [...]}`.
    """

    text = "text"
    json = "json"


@dataclass(frozen=True)
class DetailedActionInfo:
    """What gets printed about one action."""

    mnemonic: str
    owner: str
    inputs: tuple[str, ...]
    outputs: tuple[str, ...]
    arguments: tuple[str, ...]
    environment: tuple[tuple[str, str], ...]

    @classmethod
    def from_action(cls, action: Action) -> DetailedActionInfo:
        return cls(
            mnemonic=action.mnemonic,
            owner=action.owner,
            inputs=tuple(artifact.path for artifact in action.inputs),
            outputs=tuple(artifact.path for artifact in action.outputs),
            arguments=action.arguments,
            environment=action.environment,
        )

    def to_json_dict(self) -> dict[str, Any]:
        return {
            "arguments": list(self.arguments),
            "environment": dict(self.environment),
            "inputs": list(self.inputs),
            "mnemonic": self.mnemonic,
            "outputs": list(self.outputs),
            "owner": self.owner,
        }

    def text_lines(self) -> Iterator[str]:
        yield "action {"
        yield f"  mnemonic: {quote_text_field(self.mnemonic)}"
        if self.owner:
            yield f"  owner: {quote_text_field(self.owner)}"
        for path in self.inputs:
            yield f"  input_file: {quote_text_field(path)}"
        for path in self.outputs:
            yield f"  output_file: {quote_text_field(path)}"
        for argument in self.arguments:
            yield f"  argument: {quote_text_field(argument)}"
        for name, value in self.environment:
            yield "  environment_variable {"
            yield f"    name: {quote_text_field(name)}"
            yield f"    value: {quote_text_field(value)}"
            yield "  }"
        yield "}"


class ActionSummary:
    """Accumulates the actions to print, in the order they were matched.

    Only used from a single resolution; not safe to share between threads.
    """

    def __init__(self) -> None:
        self._actions: list[DetailedActionInfo] = []

    def add_action(self, action: Action) -> bool:
        """Record `action`, returning False for indirections, which have nothing to print."""
        if not action.is_executable:
            return False
        self._actions.append(DetailedActionInfo.from_action(action))
        return True

    @property
    def actions(self) -> tuple[DetailedActionInfo, ...]:
        return tuple(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __bool__(self) -> bool:
        return bool(self._actions)

    def render_text(self) -> str:
        return "".join(f"{line}\n" for info in self._actions for line in info.text_lines())

    def to_json(self) -> str:
        return json.dumps({"actions": [info.to_json_dict() for info in self._actions]}, indent=2)

    def render(self, output_format: OutputFormat) -> str:
        if output_format is OutputFormat.json:
            return self.to_json()
        return self.render_text()
