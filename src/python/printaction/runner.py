# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Resolves the actions to print for the targets of a completed build.

Two modes are supported:

  * Whole-target mode (the default) prints every action needed to build each target.
  * File-filtered mode (`--compile-one-dependency`) prints, for each requested file, the one action
    that compiles it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from typing_extensions import Protocol

from printaction.base.exceptions import NoMatchesFound, UnsupportedTargetKind, UpstreamBuildFailure
from printaction.base.exiter import FAILED_EXIT_CODE, ExitCode
from printaction.engine.artifacts import ActionGraph
from printaction.engine.target import FILES_TO_COMPILE, BuildResult, ConfiguredTarget
from printaction.graph.action_filter import ActionFilter, FileRequestFilter, MnemonicFilter
from printaction.graph.target_closure import collect_target_actions
from printaction.summary import ActionSummary
from printaction.util.strutil import pluralize

logger = logging.getLogger(__name__)


class BuildSession(Protocol):
    """The build print-action is layered on."""

    def build(self, targets: Sequence[str]) -> BuildResult:
        """Build `targets`, returning the configured targets that were realized."""

    def action_graph(self) -> ActionGraph:
        """The action graph of the most recent build."""


@dataclass(frozen=True)
class PrintActionRequest:
    targets: tuple[str, ...]
    files: tuple[str, ...] = ()
    compile_one_dependency: bool = False
    mnemonics: tuple[str, ...] = ()
    keep_going: bool = False


@dataclass(frozen=True)
class PrintActionResult:
    summary: ActionSummary
    # Nonzero when a keep-going build failed but still produced actions to print.
    exit_code: ExitCode


class PrintActionRunner:
    """Gathers actions into a single summary. Each runner serves exactly one resolution."""

    def __init__(
        self,
        *,
        compile_one_dependency: bool,
        mnemonic_filter: MnemonicFilter,
        keep_going: bool,
    ) -> None:
        self._compile_one_dependency = compile_one_dependency
        self._mnemonic_filter = mnemonic_filter
        self._keep_going = keep_going
        self._summary = ActionSummary()

    def has_fatal_build_failure(self, result: BuildResult) -> bool:
        return result.actual_targets is None or (not result.success and not self._keep_going)

    def gather_actions_for_targets(
        self, result: BuildResult, graph: ActionGraph, files: Iterable[str] = ()
    ) -> ActionSummary:
        if self.has_fatal_build_failure(result):
            raise UpstreamBuildFailure(result.exit_code)
        if not result.success:
            logger.warning("The build failed; printing actions for the targets it produced.")

        targets = result.actual_targets or ()
        # Every target is checked before any is resolved, so an unsupported target yields nothing.
        for target in targets:
            if not target.output_group(FILES_TO_COMPILE):
                raise UnsupportedTargetKind(target)

        files = tuple(files)
        file_filter = FileRequestFilter(files, self._mnemonic_filter)
        for target in targets:
            if self._compile_one_dependency:
                logger.debug(f"Matching {pluralize(len(files), 'file')} against {target.label}.")
                self.gather_actions_for_file(target, file_filter, graph)
            else:
                logger.debug(f"Collecting every action of {target.label}.")
                self.gather_actions_for_target(target, graph)

        if not self._summary:
            raise NoMatchesFound(
                requested_files=files if self._compile_one_dependency else (),
                remaining_files=file_filter.remaining if self._compile_one_dependency else (),
                mnemonics=self._mnemonic_filter.mnemonics,
            )
        return self._summary

    def gather_actions_for_target(self, target: ConfiguredTarget, graph: ActionGraph) -> None:
        if not target.is_rule:
            logger.debug(f"Skipping {target.label}: it is not a rule.")
            return
        for action in collect_target_actions(graph, target.files_to_build, self._mnemonic_filter):
            self._summary.add_action(action)

    def gather_actions_for_file(
        self, target: ConfiguredTarget, action_filter: ActionFilter, graph: ActionGraph
    ) -> None:
        """Looks at the files `target` compiles and records each generating action the filter
        accepts."""
        for artifact in target.output_group(FILES_TO_COMPILE):
            action = graph.generating_action(artifact)
            if action is not None and action_filter.should_output(action, target, graph):
                self._summary.add_action(action)


def print_actions(session: BuildSession, request: PrintActionRequest) -> PrintActionResult:
    """Build the requested targets and resolve the actions to print for them.

    :raises UpstreamBuildFailure: if the build failed and keep-going is off.
    :raises UnsupportedTargetKind: if any requested target has no files to compile.
    :raises NoMatchesFound: if no action matched.
    """
    result = session.build(request.targets)
    runner = PrintActionRunner(
        compile_one_dependency=request.compile_one_dependency,
        mnemonic_filter=MnemonicFilter.create(request.mnemonics),
        keep_going=request.keep_going,
    )
    summary = runner.gather_actions_for_targets(result, session.action_graph(), request.files)
    logger.info(f"Found {pluralize(len(summary), 'action')} to print.")
    exit_code = result.exit_code if result.success else (result.exit_code or FAILED_EXIT_CODE)
    return PrintActionResult(summary, exit_code)
