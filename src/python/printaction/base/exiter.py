# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

ExitCode = int

# Centralize integer return codes for the print-action process.
SUCCEEDED_EXIT_CODE: ExitCode = 0
FAILED_EXIT_CODE: ExitCode = 1
# Returned when the request itself could not be satisfied: unsupported targets, files that no
# action produces, or unreadable inputs.
PARSING_FAILURE_EXIT_CODE: ExitCode = 2
