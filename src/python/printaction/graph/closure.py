# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Expansion of action inputs past scheduling indirections.

Some real inputs of an action are not recorded as inputs at all. C++ headers are the usual case:
the actual set of headers is only known after include scanning, so the build instead threads a
scheduling-propagating indirection artifact through the graph to keep actions ordered. To answer
"which action consumes this header" we reach through exactly those indirections to the real files
behind them. Indirections used for other kinds of aggregation are not expanded.
"""

from __future__ import annotations

import logging
from typing import Iterable

from printaction.engine.artifacts import ActionGraph, Artifact, IndirectionClass
from printaction.util.logging import LogLevel
from printaction.util.ordered_set import FrozenOrderedSet, OrderedSet

logger = logging.getLogger(__name__)


def expand_artifacts(
    graph: ActionGraph, artifacts: Iterable[Artifact]
) -> FrozenOrderedSet[Artifact]:
    """Returns the real artifacts reachable from `artifacts` through scheduling indirections.

    Real artifacts are returned as-is and never expanded further. The result is ordered by a
    depth-first walk that visits inputs in their declared order.
    """
    visited: set[Artifact] = set()
    result: OrderedSet[Artifact] = OrderedSet()
    # Reversed so that popping from the end of the stack visits in declared order.
    to_walk = list(reversed(tuple(artifacts)))
    while to_walk:
        artifact = to_walk.pop()
        if artifact in visited:
            continue
        visited.add(artifact)

        if not artifact.is_indirection:
            result.add(artifact)
            continue

        indirection_action = graph.generating_action(artifact)
        if indirection_action is None:
            logger.debug(f"Indirection {artifact} has no generating action; not expanding it.")
            continue
        if indirection_action.indirection_class is not IndirectionClass.SCHEDULING_PROPAGATING:
            LogLevel.TRACE.log(logger, f"Not expanding {artifact}: it only aggregates.")
            continue
        LogLevel.TRACE.log(
            logger, f"Expanding {artifact} into {len(indirection_action.inputs)} inputs."
        )
        to_walk.extend(
            artifact for artifact in reversed(indirection_action.inputs) if artifact not in visited
        )

    return FrozenOrderedSet(result)
