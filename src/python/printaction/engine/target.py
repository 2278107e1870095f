# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from printaction.base.exiter import SUCCEEDED_EXIT_CODE, ExitCode
from printaction.engine.artifacts import Artifact

# The output group holding the artifacts a target compiles. Targets without it (or with it empty)
# cannot be asked for their actions.
FILES_TO_COMPILE = "files_to_compile"

# The attribute listing declared headers. Headers are found by include scanning, so they are never
# plain action inputs.
HEADER_ATTRIBUTE = "hdrs"

SOURCE_FILE_KIND = "source file"


@dataclass(frozen=True, order=True)
class Label:
    """The address of a target: `//package:name`."""

    package: str
    name: str

    @classmethod
    def parse(cls, spec: str, relative_to: str | None = None) -> Label:
        """Parse `//package:name`, `//package` (name defaults to the last package component), or
        `:name` (in the root package).

        With `relative_to`, specs not starting with `//` name a target in that package: both
        `:a.h` and `a.h` in package `a` parse as `//a:a.h`.
        """
        if relative_to is not None and not spec.startswith("//"):
            name = spec[1:] if spec.startswith(":") else spec
            if not name:
                raise ValueError(f"Label {spec!r} has an empty target name.")
            return cls(relative_to.strip("/"), name)
        if ":" in spec:
            package, name = spec.rsplit(":", 1)
        else:
            package, name = spec, spec.rstrip("/").rsplit("/", 1)[-1]
        package = package[2:] if package.startswith("//") else package
        package = package.strip("/")
        if not name:
            raise ValueError(f"Label {spec!r} has an empty target name.")
        return cls(package, name)

    def to_path(self) -> str:
        """The workspace-relative path a file label names."""
        return f"{self.package}/{self.name}" if self.package else self.name

    def __str__(self) -> str:
        return f"//{self.package}:{self.name}"


@dataclass(frozen=True, eq=False)
class ConfiguredTarget:
    """A target after analysis, as handed over by the build."""

    label: Label
    kind: str
    files_to_build: tuple[Artifact, ...] = ()
    output_groups: Mapping[str, tuple[Artifact, ...]] = field(default_factory=dict)
    attributes: Mapping[str, tuple[Label, ...]] = field(default_factory=dict)

    @property
    def is_rule(self) -> bool:
        return self.kind != SOURCE_FILE_KIND

    def output_group(self, name: str) -> tuple[Artifact, ...]:
        return tuple(self.output_groups.get(name, ()))

    def declared_attribute_labels(self, name: str) -> tuple[Label, ...] | None:
        """The labels of a label-list attribute, or None if this kind of target does not declare
        the attribute at all."""
        labels = self.attributes.get(name)
        return None if labels is None else tuple(labels)

    def __str__(self) -> str:
        return f"{self.kind} rule {self.label}" if self.is_rule else str(self.label)


@dataclass(frozen=True)
class BuildResult:
    """The outcome of the build that produced the action graph.

    `actual_targets` is None when the build failed before producing any configured targets.
    """

    success: bool
    actual_targets: tuple[ConfiguredTarget, ...] | None
    exit_code: ExitCode = SUCCEEDED_EXIT_CODE
