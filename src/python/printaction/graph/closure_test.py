# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import pytest

from printaction.graph.closure import expand_artifacts
from printaction.testutil.graph_builder import GraphBuilder
from printaction.util.logging import TRACE


def _paths(artifacts) -> list[str]:
    return [a.path for a in artifacts]


@pytest.mark.parametrize("depth", [0, 1, 3])
def test_scheduling_indirection_chains_are_expanded(depth: int) -> None:
    builder = GraphBuilder()
    start = builder.artifact("a/a.h")
    for i in range(depth):
        builder.scheduling_indirection(f"a/_middlemen/hdrs{i}", [start])
        start = builder.artifact(f"a/_middlemen/hdrs{i}")

    assert _paths(expand_artifacts(builder.graph(), [start])) == ["a/a.h"]


def test_real_artifacts_are_not_expanded() -> None:
    builder = GraphBuilder()
    builder.action("CppCompile", ["a/a.o"], ["a/a.cc"])
    graph = builder.graph()

    assert _paths(expand_artifacts(graph, [builder.artifact("a/a.o")])) == ["a/a.o"]


def test_other_aggregating_indirections_stop_expansion() -> None:
    builder = GraphBuilder()
    builder.aggregating_indirection("a/_middlemen/runfiles", ["a/data.txt"])
    graph = builder.graph()

    closure = expand_artifacts(
        graph, [builder.artifact("a/a.cc"), builder.artifact("a/_middlemen/runfiles")]
    )
    assert _paths(closure) == ["a/a.cc"]


def test_indirection_without_generating_action_is_skipped() -> None:
    builder = GraphBuilder()
    orphan = builder.indirection("a/_middlemen/orphan")

    assert _paths(expand_artifacts(builder.graph(), [orphan, builder.artifact("a/a.cc")])) == [
        "a/a.cc"
    ]


def test_shared_subgraphs_are_reported_once_in_discovery_order() -> None:
    builder = GraphBuilder()
    builder.scheduling_indirection("b/_middlemen/hdrs", ["b/b.h", "common/c.h"])
    builder.scheduling_indirection(
        "a/_middlemen/hdrs", ["a/a.h", "b/_middlemen/hdrs", "common/c.h"]
    )
    graph = builder.graph()

    closure = expand_artifacts(
        graph,
        [
            builder.artifact("a/a.cc"),
            builder.artifact("a/_middlemen/hdrs"),
            builder.artifact("b/_middlemen/hdrs"),
        ],
    )
    assert _paths(closure) == ["a/a.cc", "a/a.h", "b/b.h", "common/c.h"]


def test_empty_input() -> None:
    assert len(expand_artifacts(GraphBuilder().graph(), [])) == 0


def test_expansion_is_traced(caplog) -> None:
    caplog.set_level(TRACE, logger="printaction.graph.closure")
    builder = GraphBuilder()
    builder.scheduling_indirection("a/_middlemen/hdrs", ["a/a.h", "a/b.h"])
    builder.aggregating_indirection("a/_middlemen/runfiles", ["a/data.txt"])
    graph = builder.graph()

    expand_artifacts(
        graph,
        [builder.artifact("a/_middlemen/hdrs"), builder.artifact("a/_middlemen/runfiles")],
    )
    records = [r for r in caplog.records if r.name == "printaction.graph.closure"]
    assert [(r.levelno, r.getMessage()) for r in records] == [
        (TRACE, "Expanding a/_middlemen/hdrs into 2 inputs."),
        (TRACE, "Not expanding a/_middlemen/runfiles: it only aggregates."),
    ]
