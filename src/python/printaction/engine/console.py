# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import sys
from typing import Callable, TextIO

from colors import red


class Console:
    """Writes printed actions to stdout and diagnostics to stderr."""

    def __init__(
        self,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        use_colors: bool = True,
    ) -> None:
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr
        self._use_colors = use_colors

    @property
    def stdout(self) -> TextIO:
        return self._stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr

    @property
    def use_colors(self) -> bool:
        return self._use_colors

    def write_stdout(self, payload: str) -> None:
        self._stdout.write(payload)

    def print_stderr(self, payload: str, end: str = "\n") -> None:
        self._stderr.write(f"{payload}{end}")

    def print_error(self, message: str) -> None:
        self.print_stderr(f"{self.red('ERROR:')} {message}")

    def flush(self) -> None:
        self._stdout.flush()
        self._stderr.flush()

    def _safe_color(self, text: str, color: Callable[[str], str]) -> str:
        """Only colorize when colors are enabled."""
        return color(text) if self._use_colors else text

    def red(self, text: str) -> str:
        return self._safe_color(text, red)
