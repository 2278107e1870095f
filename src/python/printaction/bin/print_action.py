# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Prints the actions, with their exact command lines, that a build ran for some targets or files.

    print-action --snapshot build.json //a:a
    print-action --snapshot build.json --compile-one-dependency //a:a -- a/a.h
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from printaction.base.exceptions import PrintActionError
from printaction.base.exiter import ExitCode
from printaction.engine.console import Console
from printaction.engine.snapshot import BuildSnapshot, SnapshotBuildSession
from printaction.init.logging import initialize_logging
from printaction.option.config import Config
from printaction.option.options import PrintActionOptions
from printaction.runner import PrintActionRequest, print_actions
from printaction.summary import OutputFormat
from printaction.util.logging import LogLevel

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="print-action",
        description="Prints the command line args for compiling a file.",
        epilog="Files for --compile-one-dependency follow a `--` separator.",
    )
    parser.add_argument(
        "targets", nargs="*", metavar="TARGET", help="Targets to print actions for."
    )
    parser.add_argument(
        "--snapshot", required=True, help="The JSON build snapshot to read actions from."
    )
    parser.add_argument(
        "--config",
        action="append",
        default=[],
        help="A TOML config file. May be repeated; later files win. Defaults to printaction.toml.",
    )
    parser.add_argument(
        "--compile-one-dependency",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print only the action compiling each requested file.",
    )
    parser.add_argument(
        "--print-action-mnemonics",
        dest="mnemonics",
        action="append",
        default=None,
        help=(
            "Lists which mnemonics to filter print_action data by, no filtering takes place when "
            "left empty."
        ),
    )
    parser.add_argument(
        "--keep-going",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print actions for the targets a failed build did produce.",
    )
    parser.add_argument(
        "--format", choices=[f.value for f in OutputFormat], default=None, help="Output format."
    )
    parser.add_argument(
        "--colors", action=argparse.BooleanOptionalAction, default=None, help="Colorize errors."
    )
    parser.add_argument(
        "-l",
        "--level",
        choices=[level.value for level in LogLevel],
        default=None,
        help="Log level.",
    )
    return parser


def split_files(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split off the files that follow the first `--`."""
    argv = list(argv)
    if "--" not in argv:
        return argv, []
    index = argv.index("--")
    return argv[:index], argv[index + 1 :]


def resolve_options(args: argparse.Namespace) -> PrintActionOptions:
    options = PrintActionOptions.from_config(Config.load_default(args.config))
    return options.with_overrides(
        {
            "mnemonics": tuple(args.mnemonics) if args.mnemonics is not None else None,
            "compile_one_dependency": args.compile_one_dependency,
            "keep_going": args.keep_going,
            "format": OutputFormat(args.format) if args.format else None,
            "colors": args.colors,
            "level": LogLevel(args.level) if args.level else None,
        }
    )


def run(argv: Sequence[str], console: Console | None = None) -> ExitCode:
    flags, files = split_files(argv)
    args = create_parser().parse_args(flags)
    console = console or Console()

    try:
        options = resolve_options(args)
    except PrintActionError as e:
        console.print_error(str(e))
        return e.exit_code

    console = Console(console.stdout, console.stderr, use_colors=options.colors)
    initialize_logging(options.level, console.stderr, use_colors=options.colors)

    request = PrintActionRequest(
        targets=tuple(args.targets),
        files=tuple(files),
        compile_one_dependency=options.compile_one_dependency,
        mnemonics=options.mnemonics,
        keep_going=options.keep_going,
    )
    try:
        session = SnapshotBuildSession(BuildSnapshot.load(args.snapshot))
        result = print_actions(session, request)
    except PrintActionError as e:
        logger.error(str(e))
        return e.exit_code

    console.write_stdout(result.summary.render(options.format))
    if options.format is OutputFormat.json:
        console.write_stdout("\n")
    console.flush()
    return result.exit_code


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
