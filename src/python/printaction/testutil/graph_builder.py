# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from typing import Any, Iterable, Mapping

from printaction.engine.artifacts import Action, ActionGraph, Artifact, IndirectionClass
from printaction.engine.target import (
    FILES_TO_COMPILE,
    HEADER_ATTRIBUTE,
    BuildResult,
    ConfiguredTarget,
    Label,
)


class GraphBuilder:
    """Tersely builds action graphs and configured targets for tests.

    Artifacts are created on first mention and shared afterwards, so the same path always names the
    same artifact.
    """

    def __init__(self) -> None:
        self._artifacts: dict[str, Artifact] = {}
        self._actions: list[Action] = []

    def artifact(self, path: str) -> Artifact:
        if path not in self._artifacts:
            self._artifacts[path] = Artifact(path)
        return self._artifacts[path]

    def indirection(self, path: str) -> Artifact:
        artifact = Artifact(path, is_indirection=True)
        self._artifacts[path] = artifact
        return artifact

    def _resolve(self, artifacts: Iterable[str | Artifact]) -> tuple[Artifact, ...]:
        return tuple(a if isinstance(a, Artifact) else self.artifact(a) for a in artifacts)

    def action(
        self,
        mnemonic: str,
        outputs: Iterable[str | Artifact],
        inputs: Iterable[str | Artifact] = (),
        *,
        owner: str = "//a:a",
        arguments: Iterable[str] = (),
        indirection_class: IndirectionClass = IndirectionClass.NONE,
    ) -> Action:
        action = Action(
            mnemonic=mnemonic,
            outputs=self._resolve(outputs),
            inputs=self._resolve(inputs),
            owner=owner,
            arguments=tuple(arguments),
            indirection_class=indirection_class,
        )
        self._actions.append(action)
        return action

    def scheduling_indirection(self, path: str, inputs: Iterable[str | Artifact]) -> Action:
        return self.action(
            "Middleman",
            [self.indirection(path)],
            inputs,
            indirection_class=IndirectionClass.SCHEDULING_PROPAGATING,
        )

    def aggregating_indirection(self, path: str, inputs: Iterable[str | Artifact]) -> Action:
        return self.action(
            "Middleman",
            [self.indirection(path)],
            inputs,
            indirection_class=IndirectionClass.OTHER_AGGREGATING,
        )

    def graph(self) -> ActionGraph:
        return ActionGraph.from_actions(self._actions)

    def target(
        self,
        label: str,
        *,
        kind: str = "cc_library",
        files_to_compile: Iterable[str | Artifact] = (),
        files_to_build: Iterable[str | Artifact] = (),
        hdrs: Iterable[str] | None = None,
        attributes: Mapping[str, Iterable[str]] | None = None,
    ) -> ConfiguredTarget:
        parsed = Label.parse(label)
        declared = {
            name: tuple(Label.parse(spec, relative_to=parsed.package) for spec in specs)
            for name, specs in (attributes or {}).items()
        }
        if hdrs is not None:
            declared[HEADER_ATTRIBUTE] = tuple(
                Label.parse(spec, relative_to=parsed.package) for spec in hdrs
            )
        return ConfiguredTarget(
            label=parsed,
            kind=kind,
            files_to_build=self._resolve(files_to_build),
            output_groups={FILES_TO_COMPILE: self._resolve(files_to_compile)},
            attributes=declared,
        )


def successful_build(*targets: ConfiguredTarget) -> BuildResult:
    return BuildResult(success=True, actual_targets=targets)


def snapshot_payload() -> dict[str, Any]:
    """A JSON build snapshot of //a:a, whose compile action reaches a/a.h through an indirection."""
    return {
        "success": True,
        "exit_code": 0,
        "indirections": ["a/_middlemen/hdrs"],
        "actions": [
            {
                "mnemonic": "Middleman",
                "owner": "//a:a",
                "inputs": ["a/a.h"],
                "outputs": ["a/_middlemen/hdrs"],
                "indirection_class": "scheduling_propagating",
            },
            {
                "mnemonic": "CppCompile",
                "owner": "//a:a",
                "inputs": ["a/a.cc", "a/_middlemen/hdrs"],
                "outputs": ["a/a.o"],
                "arguments": ["gcc", "-c", "a/a.cc"],
                "environment": {"PATH": "/bin"},
            },
        ],
        "targets": [
            {
                "label": "//a:a",
                "kind": "cc_library",
                "files_to_build": ["a/a.o"],
                "output_groups": {"files_to_compile": ["a/a.o"]},
                "attributes": {"hdrs": ["//a:a.h"]},
            }
        ],
    }
