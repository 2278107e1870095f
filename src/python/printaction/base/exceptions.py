# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from printaction.base.exiter import FAILED_EXIT_CODE, PARSING_FAILURE_EXIT_CODE, ExitCode
from printaction.util.strutil import bullet_list, pluralize

if TYPE_CHECKING:
    from printaction.engine.target import ConfiguredTarget


class PrintActionError(Exception):
    """Base exception type for print-action.

    Every subclass knows the process exit code it maps to.
    """

    exit_code: ExitCode = FAILED_EXIT_CODE


class UpstreamBuildFailure(PrintActionError):
    """The build the actions are read from did not complete, and keep-going is off."""

    def __init__(self, exit_code: ExitCode) -> None:
        super().__init__("Build failed when printing actions")
        # A failed build must never be reported as a success.
        self.exit_code = exit_code or FAILED_EXIT_CODE


class UnsupportedTargetKind(PrintActionError):
    """A requested target has no files to compile, so there is no action to print for it."""

    exit_code = PARSING_FAILURE_EXIT_CODE

    def __init__(self, target: ConfiguredTarget) -> None:
        super().__init__(f"{target.label} is not a supported target kind")
        self.target = target


class NoMatchesFound(PrintActionError):
    """Resolution finished but produced no actions.

    This usually means the requested files were not given as plain paths relative to the
    workspace root, so the remaining unmatched files are listed. When every file matched, the
    matching actions were all excluded by the mnemonic allow-list, which is named instead.
    """

    exit_code = PARSING_FAILURE_EXIT_CODE

    def __init__(
        self,
        requested_files: Iterable[str] = (),
        remaining_files: Iterable[str] = (),
        mnemonics: Iterable[str] = (),
    ) -> None:
        self.requested_files = tuple(requested_files)
        self.remaining_files = tuple(remaining_files)
        self.mnemonics = tuple(mnemonics)
        message = "no actions to print were found"
        if self.remaining_files:
            message += (
                f"; {pluralize(len(self.remaining_files), 'requested file')} matched no action:\n\n"
                f"{bullet_list(self.remaining_files, max_elements=10)}"
            )
        elif self.mnemonics:
            allowed = ", ".join(self.mnemonics)
            if self.requested_files:
                message += (
                    f"; the actions for these files are not among the allowed mnemonics "
                    f"({allowed}):\n\n{bullet_list(self.requested_files, max_elements=10)}"
                )
            else:
                message += f"; no action is among the allowed mnemonics ({allowed})"
        super().__init__(message)


class ActionConflictError(PrintActionError):
    """Two different actions claim to generate the same artifact."""

    exit_code = PARSING_FAILURE_EXIT_CODE


class SnapshotError(PrintActionError):
    """A build snapshot could not be read, or it does not contain what was asked of it."""

    exit_code = PARSING_FAILURE_EXIT_CODE
