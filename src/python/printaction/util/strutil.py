# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import re
from typing import Iterable


def pluralize(count: int, item_type: str, include_count: bool = True) -> str:
    """Pluralizes the item_type if the count does not equal one.

    For example `pluralize(1, 'action')` returns '1 action', while `pluralize(0, 'action')` returns
    '0 actions'.
    """
    if count == 1:
        pluralized_item = item_type
    elif item_type.endswith("s"):
        pluralized_item = item_type + "es"
    else:
        pluralized_item = item_type + "s"
    return f"{count} {pluralized_item}" if include_count else pluralized_item


def bullet_list(elements: Iterable[str], max_elements: int = -1) -> str:
    """Format a bullet list with padding.

    `max_elements` limits the number of rows, replacing the tail with "* ... and N more".
    """
    elements = tuple(elements)
    if not elements:
        return ""
    if 0 < max_elements < len(elements):
        elements = elements[: max_elements - 1] + (
            f"... and {len(elements) - max_elements + 1} more",
        )
    sep = "\n  * "
    return f"  * {sep.join(elements)}"


_super_space_re = re.compile(r"(\S)  +(\S)")
_more_than_2_newlines = re.compile(r"\n{2}\n+")
_leading_whitespace_re = re.compile(r"(^[ ]*)(?:[^ \n])", re.MULTILINE)


def softwrap(text: str) -> str:
    """Turns a multiline-ish string from source code into a softwrapped string.

    Dedents the text, squashes runs of spaces, joins single newlines into spaces and keeps
    paragraph breaks. Lines that are indented further, or that start with `* `, keep their newline.
    """
    if not text:
        return text
    if text[0] == "\n":
        text = text[1:]

    text = _more_than_2_newlines.sub("\n\n", text)
    margin = _leading_whitespace_re.search(text)
    if margin:
        text = re.sub(r"(?m)^" + margin[1], "", text)

    lines = text.splitlines(keepends=True)
    result_strs = []
    for i, line in enumerate(lines):
        line = _super_space_re.sub(r"\1 \2", line)
        next_line = lines[i + 1] if i + 1 < len(lines) else ""
        if (
            "\n" in (line, next_line)
            or line.startswith(" ")
            or next_line.startswith(" ")
            or line.lstrip().startswith("* ")
        ):
            result_strs.append(line)
        else:
            result_strs.append(line.rstrip())
            result_strs.append(" ")

    return "".join(result_strs).rstrip()


def quote_text_field(value: str) -> str:
    """Quote a string the way protobuf text format prints a string field."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'
