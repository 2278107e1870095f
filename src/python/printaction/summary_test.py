# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

import json
from textwrap import dedent

from printaction.engine.artifacts import Action, Artifact
from printaction.summary import ActionSummary, OutputFormat
from printaction.testutil.graph_builder import GraphBuilder


def _compile_action() -> Action:
    return Action(
        mnemonic="CppCompile",
        owner="//a:a",
        inputs=(Artifact("a/a.cc"), Artifact("a/a.h")),
        outputs=(Artifact("a/a.o"),),
        arguments=("gcc", "-DNAME=\"x\"", "-c", "a/a.cc"),
        environment=(("PWD", "/proc/self/cwd"), ("LANG", "C")),
    )


def test_render_text() -> None:
    summary = ActionSummary()
    assert summary.add_action(_compile_action())
    assert summary.render_text() == dedent(
        """\
        action {
          mnemonic: "CppCompile"
          owner: "//a:a"
          input_file: "a/a.cc"
          input_file: "a/a.h"
          output_file: "a/a.o"
          argument: "gcc"
          argument: "-DNAME=\\"x\\""
          argument: "-c"
          argument: "a/a.cc"
          environment_variable {
            name: "LANG"
            value: "C"
          }
          environment_variable {
            name: "PWD"
            value: "/proc/self/cwd"
          }
        }
        """
    )


def test_render_json() -> None:
    summary = ActionSummary()
    summary.add_action(_compile_action())
    assert json.loads(summary.render(OutputFormat.json)) == {
        "actions": [
            {
                "arguments": ["gcc", '-DNAME="x"', "-c", "a/a.cc"],
                "environment": {"LANG": "C", "PWD": "/proc/self/cwd"},
                "inputs": ["a/a.cc", "a/a.h"],
                "mnemonic": "CppCompile",
                "outputs": ["a/a.o"],
                "owner": "//a:a",
            }
        ]
    }


def test_empty_summary() -> None:
    summary = ActionSummary()
    assert not summary
    assert summary.render_text() == ""
    assert json.loads(summary.to_json()) == {"actions": []}


def test_preserves_match_order_and_skips_indirections() -> None:
    builder = GraphBuilder()
    second = builder.action("CppCompile", ["a/b.o"], ["a/b.cc"])
    first = builder.action("CppCompile", ["a/a.o"], ["a/a.cc"])
    middleman = builder.scheduling_indirection("a/_middlemen/hdrs", ["a/a.h"])

    summary = ActionSummary()
    assert summary.add_action(second)
    assert summary.add_action(first)
    assert not summary.add_action(middleman)
    assert [info.outputs for info in summary.actions] == [("a/b.o",), ("a/a.o",)]
    assert len(summary) == 2
