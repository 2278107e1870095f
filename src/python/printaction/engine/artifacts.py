# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""The action graph of a completed build: artifacts, the actions that generate them, and the
lookup from one to the other.

Everything here is immutable once constructed. The graph is produced by the build and only read
by print-action.
"""

from __future__ import annotations

import logging
import os.path
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Mapping

from printaction.base.exceptions import ActionConflictError
from printaction.util.strutil import softwrap

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    """Normalize a workspace-relative path, rejecting anything outside the workspace."""
    if not path:
        raise ValueError("An artifact path must not be empty.")
    normalized = os.path.normpath(path.replace("\\", "/")).replace(os.sep, "/")
    if os.path.isabs(normalized):
        raise ValueError(f"Artifact paths must be relative to the workspace root, got {path!r}.")
    if normalized == ".." or normalized.startswith("../"):
        raise ValueError(f"Artifact path {path!r} escapes the workspace root.")
    return normalized


@dataclass(frozen=True)
class Artifact:
    """A file-like node in the action graph.

    Indirection artifacts are placeholders that are never materialized: they only thread a
    scheduling dependency through the graph.
    """

    path: str
    is_indirection: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", normalize_path(self.path))

    @property
    def root_relative_path(self) -> str:
        return self.path

    def __str__(self) -> str:
        return self.path


class IndirectionClass(Enum):
    NONE = "none"
    # Stands in for a set of files that is only known after discovery (e.g. included headers).
    # These are the only indirections that closure expansion sees through.
    SCHEDULING_PROPAGATING = "scheduling_propagating"
    # Aggregates artifacts for other purposes (e.g. runfiles). Expanding these would report
    # false matches.
    OTHER_AGGREGATING = "other_aggregating"


@dataclass(frozen=True, eq=False)
class Action:
    """A build step mapping input artifacts to output artifacts.

    Actions compare by identity: two actions registered separately are different actions even if
    every field is equal.
    """

    mnemonic: str
    outputs: tuple[Artifact, ...]
    inputs: tuple[Artifact, ...] = ()
    owner: str = ""
    arguments: tuple[str, ...] = ()
    environment: tuple[tuple[str, str], ...] = ()
    indirection_class: IndirectionClass = IndirectionClass.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "outputs", tuple(self.outputs))
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "arguments", tuple(self.arguments))
        object.__setattr__(self, "environment", tuple(sorted(self.environment)))
        if not self.outputs:
            raise ValueError(f"Action {self.mnemonic} for {self.owner} must have an output.")

    @property
    def is_executable(self) -> bool:
        """Whether this is a real step with a command line, rather than an indirection."""
        return self.indirection_class is IndirectionClass.NONE

    @property
    def primary_output(self) -> Artifact:
        return self.outputs[0]

    def __repr__(self) -> str:
        return f"Action({self.mnemonic}, {self.primary_output.path})"


@dataclass(frozen=True)
class ActionGraph:
    """The mapping from each artifact to the action that generates it.

    Source artifacts have no generating action.
    """

    _generating_actions: Mapping[Artifact, Action] = field(repr=False)

    @classmethod
    def from_actions(cls, actions: Iterable[Action]) -> ActionGraph:
        generating_actions: dict[Artifact, Action] = {}
        for action in actions:
            for output in action.outputs:
                existing = generating_actions.get(output)
                if existing is not None and existing is not action:
                    raise ActionConflictError(
                        softwrap(
                            f"""
                            Artifact {output.path} is generated by both {existing!r} (owned by
                            {existing.owner or '<unknown>'}) and {action!r} (owned by
                            {action.owner or '<unknown>'}).
                            """
                        )
                    )
                generating_actions[output] = action
        logger.debug(f"Indexed {len(generating_actions)} generated artifacts.")
        return cls(generating_actions)

    def generating_action(self, artifact: Artifact) -> Action | None:
        return self._generating_actions.get(artifact)
