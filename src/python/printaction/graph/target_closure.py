# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
from typing import Callable, Iterable

from printaction.engine.artifacts import Action, ActionGraph, Artifact
from printaction.util.logging import LogLevel
from printaction.util.ordered_set import OrderedSet
from printaction.util.strutil import pluralize

logger = logging.getLogger(__name__)


class TargetActionVisitor:
    """Collects every action reachable from a set of artifacts, each exactly once.

    Unlike closure expansion this follows every input edge, indirection or not. The predicate only
    decides which actions are collected; the walk continues through actions it rejects.

    A visitor may be reused across several `visit` calls; artifacts seen by an earlier call are not
    walked again.
    """

    def __init__(
        self, graph: ActionGraph, predicate: Callable[[Action], bool] | None = None
    ) -> None:
        self._graph = graph
        self._predicate = predicate
        self._visited: set[Artifact] = set()
        self._actions: OrderedSet[Action] = OrderedSet()

    def visit(self, roots: Iterable[Artifact]) -> None:
        to_walk = list(reversed(tuple(roots)))
        while to_walk:
            artifact = to_walk.pop()
            if artifact in self._visited:
                continue
            self._visited.add(artifact)

            action = self._graph.generating_action(artifact)
            if action is None:
                continue
            if action not in self._actions and (self._predicate is None or self._predicate(action)):
                LogLevel.TRACE.log(logger, f"Collecting {action!r} for {artifact}.")
                self._actions.add(action)
            to_walk.extend(
                input_artifact
                for input_artifact in reversed(action.inputs)
                if input_artifact not in self._visited
            )

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(self._actions)


def collect_target_actions(
    graph: ActionGraph,
    files_to_build: Iterable[Artifact],
    predicate: Callable[[Action], bool] | None = None,
) -> tuple[Action, ...]:
    """Every action needed to build `files_to_build`, in depth-first discovery order."""
    visitor = TargetActionVisitor(graph, predicate)
    visitor.visit(files_to_build)
    actions = visitor.actions
    logger.debug(f"Collected {pluralize(len(actions), 'action')}.")
    return actions
