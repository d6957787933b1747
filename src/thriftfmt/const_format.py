# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Const block renderer with optional collection expansion.

Consecutive consts form one batch: types and names are padded to a common
width and trailing comments share a column. Inline ``[...]``/``{...}`` values
are split one item per line when ``collection_style`` asks for it.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import List, Sequence

from .field_records import ConstField
from .formatting_options_model import CollectionStyle, FormattingOptions
from .indent import get_indent, indent_width
from .text_utils import split_collection_items, split_line_comment

_TERMINATED = re.compile(r"^(.*?)\s*([;,]?)$", re.DOTALL)
_PAIRS = {"[": "]", "{": "}"}


def _single_line_candidate(field: ConstField) -> str:
    comment = f" {field.comment}" if field.comment else ""
    return f"const {field.type_name} {field.name} = {field.value}{comment}"


def expand_collection(field: ConstField, options: FormattingOptions, indent_level: int) -> ConstField:
    """Return ``field`` with an inline collection value split one item per line.

    The ``auto`` style measures the unpadded single-line rendering, before any
    column alignment from the rest of the batch is applied.
    """
    if field.is_multiline or options.collection_style == CollectionStyle.PRESERVE:
        return field
    match = _TERMINATED.match(field.value)
    core, terminator = (match.group(1), match.group(2)) if match else (field.value, "")
    if len(core) < 2 or _PAIRS.get(core[0]) != core[-1]:
        return field

    if options.collection_style == CollectionStyle.AUTO:
        width = indent_width(indent_level, options) + len(_single_line_candidate(field))
        if width <= options.max_line_length:
            return field

    items = split_collection_items(core[1:-1])
    if not items:
        return field
    lines = [core[0]]
    lines.extend(item + ("," if index < len(items) - 1 else "") for index, item in enumerate(items))
    lines.append(core[-1] + terminator)
    return replace(field, value="\n".join(lines))


def _align_continuation_comments(lines: List[str]) -> List[str]:
    """Line up trailing comments on the continuation lines of one const."""
    split = [split_line_comment(line) for line in lines]
    widths = [len(code.rstrip()) for code, comment in split if comment and code.strip()]
    if not widths:
        return lines
    column = max(widths)
    aligned: List[str] = []
    for line, (code, comment) in zip(lines, split):
        if comment and code.strip():
            content = code.rstrip()
            line = f"{content}{' ' * max(1, column - len(content) + 1)}{comment}"
        aligned.append(line)
    return aligned


def format_const_fields(fields: Sequence[ConstField], options: FormattingOptions, indent_level: int) -> List[str]:
    """Render a batch of consts at ``indent_level``.

    Returns:
        Rendered physical lines; a multi-line const contributes several.
    """
    if not fields:
        return []
    indent = get_indent(indent_level, options)
    value_indent = get_indent(indent_level + 1, options)
    expanded = [expand_collection(field, options, indent_level) for field in fields]

    type_width = max(len(field.type_name) for field in expanded) if options.align_types else 0
    name_width = max(len(field.name) for field in expanded) if options.align_field_names else 0

    heads = []
    for field in expanded:
        first_value = field.value.split("\n")[0]
        heads.append(f"const {field.type_name.ljust(type_width)} {field.name.ljust(name_width)} = {first_value}")
    commented = [len(head) for head, field in zip(heads, expanded) if field.comment]
    comment_column = max(commented) if commented else 0

    output: List[str] = []
    for head, field in zip(heads, expanded):
        first = head
        if field.comment:
            pad = max(1, comment_column - len(head) + 1) if options.align_comments else 1
            first = f"{head}{' ' * pad}{field.comment}"
        block = [indent + first]

        value_lines = field.value.split("\n")
        last = len(value_lines) - 1
        for position, raw in enumerate(value_lines[1:], start=1):
            line = raw.strip()
            if not line:
                block.append("")
            elif position == last and line[0] in "]}":
                block.append(indent + line)
            elif line.startswith(("//", "#")):
                target = len(block) - 1
                while target > 0 and not block[target].strip():
                    target -= 1
                block[target] = f"{block[target].rstrip()} {line}"
            else:
                block.append(value_indent + line)

        if options.align_comments and len(block) > 1:
            block = block[:1] + _align_continuation_comments(block[1:])
        output.extend(block)
    return output
