# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import pytest

from printaction.base.exceptions import ActionConflictError
from printaction.engine.artifacts import Action, ActionGraph, Artifact, IndirectionClass


@pytest.mark.parametrize(
    "path,expected",
    [("a/a.cc", "a/a.cc"), ("./a/a.cc", "a/a.cc"), ("a//b/../a.cc", "a/a.cc"), ("a.cc", "a.cc")],
)
def test_artifact_paths_are_normalized(path: str, expected: str) -> None:
    assert Artifact(path).root_relative_path == expected
    assert Artifact(path) == Artifact(expected)


@pytest.mark.parametrize("path", ["", "/abs/a.cc", "../a.cc", "a/../../a.cc"])
def test_artifact_paths_must_stay_in_the_workspace(path: str) -> None:
    with pytest.raises(ValueError):
        Artifact(path)


def test_indirection_artifacts_are_distinct_from_real_ones() -> None:
    assert Artifact("a/hdrs") != Artifact("a/hdrs", is_indirection=True)


def test_actions_compare_by_identity() -> None:
    first = Action("CppCompile", outputs=(Artifact("a/a.o"),), inputs=(Artifact("a/a.cc"),))
    second = Action("CppCompile", outputs=(Artifact("a/a.o"),), inputs=(Artifact("a/a.cc"),))
    assert first != second
    assert len({first, second}) == 2
    assert first.is_executable


def test_actions_need_an_output() -> None:
    with pytest.raises(ValueError):
        Action("CppCompile", outputs=())


def test_indirection_actions_are_not_executable() -> None:
    action = Action(
        "Middleman",
        outputs=(Artifact("a/hdrs", is_indirection=True),),
        indirection_class=IndirectionClass.SCHEDULING_PROPAGATING,
    )
    assert not action.is_executable


def test_generating_action_lookup() -> None:
    compile_action = Action("CppCompile", outputs=(Artifact("a/a.o"), Artifact("a/a.d")))
    graph = ActionGraph.from_actions([compile_action])
    assert graph.generating_action(Artifact("a/a.o")) is compile_action
    assert graph.generating_action(Artifact("a/a.d")) is compile_action
    assert graph.generating_action(Artifact("a/a.cc")) is None


def test_conflicting_generating_actions() -> None:
    first = Action("CppCompile", outputs=(Artifact("a/a.o"),), owner="//a:a")
    second = Action("CppCompile", outputs=(Artifact("a/a.o"),), owner="//a:b")
    with pytest.raises(ActionConflictError, match="a/a.o is generated by both"):
        ActionGraph.from_actions([first, second])
