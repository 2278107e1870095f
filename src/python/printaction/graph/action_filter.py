# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from printaction.engine.artifacts import Action, ActionGraph
from printaction.engine.target import HEADER_ATTRIBUTE, ConfiguredTarget
from printaction.graph.closure import expand_artifacts
from printaction.util.ordered_set import FrozenOrderedSet, OrderedSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MnemonicFilter:
    """An allow-list of action mnemonics. An empty allow-list allows every action."""

    mnemonics: FrozenOrderedSet[str] = FrozenOrderedSet()

    @classmethod
    def create(cls, mnemonics: Iterable[str] = ()) -> MnemonicFilter:
        return cls(FrozenOrderedSet(m for m in mnemonics if m))

    def allows(self, action: Action) -> bool:
        return not self.mnemonics or action.mnemonic in self.mnemonics

    def __call__(self, action: Action) -> bool:
        return self.allows(action)


class ActionFilter(ABC):
    """Decides whether the action generating a target's artifact should be printed."""

    @abstractmethod
    def should_output(
        self, action: Action | None, target: ConfiguredTarget, graph: ActionGraph
    ) -> bool:
        """Returns True if the given action is not None and should be printed."""


class FileRequestFilter(ActionFilter):
    """A stateful filter that keeps track of which requested files have already been covered.

    A requested file is crossed off the first time an action that consumes it is evaluated, so at
    most one action is ever printed per file. That matters for headers, which many actions consume.
    Crossing off happens before the mnemonic check: a file consumed by an action of the wrong kind
    is not retried against later actions.

    Headers declared in a target's `hdrs` attribute are matched too, since include scanning keeps
    them out of action inputs even after expansion. This only works for files given as plain paths
    relative to the workspace root, in the form label-to-path conversion produces.
    """

    def __init__(self, files_desired: Iterable[str], mnemonic_filter: MnemonicFilter) -> None:
        self._files_desired: OrderedSet[str] = OrderedSet(files_desired)
        self._mnemonic_filter = mnemonic_filter

    @property
    def remaining(self) -> tuple[str, ...]:
        """The requested files no action has matched yet."""
        return tuple(self._files_desired)

    def should_output(
        self, action: Action | None, target: ConfiguredTarget, graph: ActionGraph
    ) -> bool:
        if action is None:
            return False

        for artifact in expand_artifacts(graph, action.inputs):
            if self._files_desired.pop_if_present(artifact.root_relative_path):
                logger.debug(f"{artifact} is consumed by {action!r} of {target.label}.")
                return self._mnemonic_filter(action)

        hdrs = target.declared_attribute_labels(HEADER_ATTRIBUTE)
        for hdr_label in hdrs or ():
            if self._files_desired.pop_if_present(hdr_label.to_path()):
                logger.debug(f"Declared header {hdr_label} of {target.label} matched {action!r}.")
                return self._mnemonic_filter(action)

        return False
