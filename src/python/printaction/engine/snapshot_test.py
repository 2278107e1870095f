# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import json
from pathlib import Path

import pytest

from printaction.base.exceptions import SnapshotError
from printaction.engine.artifacts import Artifact, IndirectionClass
from printaction.engine.snapshot import BuildSnapshot, SnapshotBuildSession
from printaction.engine.target import FILES_TO_COMPILE, HEADER_ATTRIBUTE, Label
from printaction.graph.action_filter import FileRequestFilter, MnemonicFilter
from printaction.testutil.graph_builder import snapshot_payload


def test_from_json_dict() -> None:
    snapshot = BuildSnapshot.from_json_dict(snapshot_payload())
    assert snapshot.success
    assert snapshot.exit_code == 0

    middleman = snapshot.graph.generating_action(Artifact("a/_middlemen/hdrs", is_indirection=True))
    assert middleman is not None
    assert middleman.indirection_class is IndirectionClass.SCHEDULING_PROPAGATING

    compile_action = snapshot.graph.generating_action(Artifact("a/a.o"))
    assert compile_action is not None
    assert compile_action.inputs[1].is_indirection
    assert compile_action.environment == (("PATH", "/bin"),)

    (target,) = snapshot.targets
    assert target.label == Label("a", "a")
    assert target.output_group(FILES_TO_COMPILE) == (Artifact("a/a.o"),)
    assert target.declared_attribute_labels(HEADER_ATTRIBUTE) == (Label("a", "a.h"),)


def test_failed_build_defaults_to_a_failing_exit_code() -> None:
    payload = snapshot_payload()
    payload["success"] = False
    del payload["exit_code"]
    assert BuildSnapshot.from_json_dict(payload).exit_code == 1


def test_load(tmp_path: Path) -> None:
    path = tmp_path / "build.json"
    path.write_text(json.dumps(snapshot_payload()))
    assert len(BuildSnapshot.load(path).targets) == 1


@pytest.mark.parametrize("content", ["not json", "[]"])
def test_load_invalid(tmp_path: Path, content: str) -> None:
    path = tmp_path / "build.json"
    path.write_text(content)
    with pytest.raises(SnapshotError):
        BuildSnapshot.load(path)


def test_load_missing(tmp_path: Path) -> None:
    with pytest.raises(SnapshotError, match="Could not read"):
        BuildSnapshot.load(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "mutate",
    [
        lambda p: p["actions"][0].pop("outputs"),
        lambda p: p["actions"][0].update(indirection_class="bogus"),
        lambda p: p["targets"][0].pop("kind"),
        lambda p: p["actions"][1].update(inputs=["/abs/a.cc"]),
        lambda p: p.update(success="false"),
    ],
)
def test_malformed_snapshot(mutate) -> None:
    payload = snapshot_payload()
    mutate(payload)
    with pytest.raises(SnapshotError, match="malformed"):
        BuildSnapshot.from_json_dict(payload)


def test_session_resolves_targets_in_request_order() -> None:
    payload = snapshot_payload()
    payload["targets"].append(dict(payload["targets"][0], label="//b:b"))
    session = SnapshotBuildSession(BuildSnapshot.from_json_dict(payload))

    result = session.build(["//b:b", "//a"])
    assert result.success
    assert result.actual_targets is not None
    assert [str(t.label) for t in result.actual_targets] == ["//b:b", "//a:a"]


def test_session_rejects_unknown_targets() -> None:
    session = SnapshotBuildSession(BuildSnapshot.from_json_dict(snapshot_payload()))
    with pytest.raises(SnapshotError, match="//c:c is not part of the build snapshot"):
        session.build(["//c:c"])


def test_attribute_labels_are_relative_to_the_declaring_package() -> None:
    payload = snapshot_payload()
    payload["targets"][0]["attributes"] = {"hdrs": [":a.h", "b.h", "//c:c.h"]}
    (target,) = BuildSnapshot.from_json_dict(payload).targets
    headers = target.declared_attribute_labels(HEADER_ATTRIBUTE)
    assert headers is not None
    assert [label.to_path() for label in headers] == ["a/a.h", "a/b.h", "c/c.h"]


def test_relative_header_label_matches_a_workspace_path() -> None:
    payload = snapshot_payload()
    # Without the indirection a/a.h is only reachable through the declared headers.
    payload["actions"][1]["inputs"] = ["a/a.cc"]
    payload["targets"][0]["attributes"] = {"hdrs": [":a.h"]}
    snapshot = BuildSnapshot.from_json_dict(payload)
    (target,) = snapshot.targets

    file_filter = FileRequestFilter(["a/a.h"], MnemonicFilter.create())
    compile_action = snapshot.graph.generating_action(Artifact("a/a.o"))
    assert file_filter.should_output(compile_action, target, snapshot.graph)
    assert file_filter.remaining == ()
