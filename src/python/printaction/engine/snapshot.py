# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Reads a completed build from a JSON snapshot.

The snapshot is what a build leaves behind for print-action: its status, its action graph and its
configured targets. The format is:

    {
      "success": true,
      "exit_code": 0,
      "indirections": ["a/_middlemen/hdrs"],
      "actions": [
        {"mnemonic": "CppCompile", "owner": "//a:a", "inputs": [...], "outputs": [...],
         "arguments": [...], "environment": {"PATH": "/bin"},
         "indirection_class": "none"}
      ],
      "targets": [
        {"label": "//a:a", "kind": "cc_library", "files_to_build": [...],
         "output_groups": {"files_to_compile": [...]}, "attributes": {"hdrs": ["//a:a.h"]}}
      ]
    }

Paths listed under `indirections` are indirection artifacts wherever they appear. Labels in a
target's `attributes` may be relative (`:a.h` or `a.h`) to that target's package.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Sequence

from printaction.base.exceptions import SnapshotError
from printaction.base.exiter import FAILED_EXIT_CODE, SUCCEEDED_EXIT_CODE
from printaction.engine.artifacts import Action, ActionGraph, Artifact, IndirectionClass
from printaction.engine.target import BuildResult, ConfiguredTarget, Label
from printaction.util.strutil import pluralize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildSnapshot:
    success: bool
    exit_code: int
    graph: ActionGraph
    targets: tuple[ConfiguredTarget, ...]

    @classmethod
    def load(cls, path: str | Path) -> BuildSnapshot:
        try:
            content = Path(path).read_text()
        except OSError as e:
            raise SnapshotError(f"Could not read build snapshot {path}: {e}") from e
        try:
            payload = json.loads(content)
        except ValueError as e:
            raise SnapshotError(f"Build snapshot {path} is not valid JSON: {e}") from e
        return cls.from_json_dict(payload, source=str(path))

    @classmethod
    def from_json_dict(cls, payload: Any, *, source: str = "<snapshot>") -> BuildSnapshot:
        if not isinstance(payload, Mapping):
            raise SnapshotError(f"Build snapshot {source} must be a JSON object.")
        try:
            indirections = frozenset(payload.get("indirections", ()))

            def artifacts(paths: Iterable[str]) -> tuple[Artifact, ...]:
                return tuple(Artifact(p, is_indirection=p in indirections) for p in paths)

            actions = [
                Action(
                    mnemonic=entry["mnemonic"],
                    owner=entry.get("owner", ""),
                    inputs=artifacts(entry.get("inputs", ())),
                    outputs=artifacts(entry["outputs"]),
                    arguments=tuple(entry.get("arguments", ())),
                    environment=tuple(entry.get("environment", {}).items()),
                    indirection_class=IndirectionClass(entry.get("indirection_class", "none")),
                )
                for entry in payload.get("actions", ())
            ]

            def target(entry: Mapping[str, Any]) -> ConfiguredTarget:
                label = Label.parse(entry["label"])
                return ConfiguredTarget(
                    label=label,
                    kind=entry["kind"],
                    files_to_build=artifacts(entry.get("files_to_build", ())),
                    output_groups={
                        name: artifacts(paths)
                        for name, paths in entry.get("output_groups", {}).items()
                    },
                    # Attribute labels are relative to the package of the target declaring them.
                    attributes={
                        name: tuple(Label.parse(spec, relative_to=label.package) for spec in specs)
                        for name, specs in entry.get("attributes", {}).items()
                    },
                )

            targets = tuple(target(entry) for entry in payload.get("targets", ()))
            success = payload.get("success", True)
            if not isinstance(success, bool):
                raise SnapshotError(
                    f"Build snapshot {source} is malformed: `success` must be true or false, "
                    f"got {success!r}."
                )
            exit_code = int(
                payload.get("exit_code", SUCCEEDED_EXIT_CODE if success else FAILED_EXIT_CODE)
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise SnapshotError(f"Build snapshot {source} is malformed: {e!r}") from e

        logger.debug(
            f"Loaded {pluralize(len(actions), 'action')} and "
            f"{pluralize(len(targets), 'target')} from {source}."
        )
        return cls(success, exit_code, ActionGraph.from_actions(actions), targets)


class SnapshotBuildSession:
    """Serves a `BuildSnapshot` as though its targets had just been built."""

    def __init__(self, snapshot: BuildSnapshot) -> None:
        self._snapshot = snapshot
        self._targets_by_label = {target.label: target for target in snapshot.targets}

    def build(self, targets: Sequence[str]) -> BuildResult:
        resolved = []
        for spec in targets:
            try:
                label = Label.parse(spec)
            except ValueError as e:
                raise SnapshotError(str(e)) from e
            target = self._targets_by_label.get(label)
            if target is None:
                raise SnapshotError(f"Target {label} is not part of the build snapshot.")
            resolved.append(target)
        return BuildResult(
            success=self._snapshot.success,
            actual_targets=tuple(resolved),
            exit_code=self._snapshot.exit_code,
        )

    def action_graph(self) -> ActionGraph:
        return self._snapshot.graph
