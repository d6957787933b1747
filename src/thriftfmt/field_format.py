# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Alignment renderers for struct and enum field batches.

A batch is every field of one block between two flush points. Rendering is
two passes: measure the column maxima across the batch, then pad each column
whose option is enabled. A rendered field line reads::

    <id>: <qualifier> <type> <name>[ = default] [(annotation)]<terminator> [// comment]

Disabled columns keep the field's natural width. Padding only ever adds
space; a field wider than the target still gets one separating space.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from .field_records import EnumField, StructField
from .formatting_options_model import FormattingOptions, TrailingComma
from .indent import get_indent

_DEFAULT_EQUALS = re.compile(r"^\s*=\s*")


def apply_trailing_comma(terminator: str, mode: TrailingComma) -> str:
    """Apply the trailing-comma policy to one field terminator.

    A ``;`` terminator is never altered.
    """
    if terminator == ";":
        return terminator
    if mode == TrailingComma.ADD:
        return ","
    if mode == TrailingComma.REMOVE:
        return ""
    return terminator


def _finish_lines(
    indent: str,
    bodies: List[str],
    annotations: Sequence[str],
    terminators: Sequence[str],
    comments: Sequence[str],
    options: FormattingOptions,
) -> List[str]:
    """Append annotation, terminator and comment columns to aligned bodies."""
    annotated = [len(body) for body, annotation in zip(bodies, annotations) if annotation]
    annotation_column = max(annotated) if annotated and options.align_annotations else 0

    contents: List[str] = []
    for body, annotation, terminator in zip(bodies, annotations, terminators):
        content = body
        if annotation:
            pad = max(1, annotation_column - len(body) + 1)
            content = f"{body}{' ' * pad}{annotation}"
        contents.append(content + terminator)

    comment_count = sum(1 for comment in comments if comment)
    align = options.align_comments and comment_count > 1
    comment_column = max(len(content) for content in contents) if align else 0

    lines: List[str] = []
    for content, comment in zip(contents, comments):
        if comment:
            pad = max(1, comment_column - len(content) + 1) if align else 1
            content = f"{content}{' ' * pad}{comment}"
        lines.append(indent + content)
    return lines


def _needs_alignment(options: FormattingOptions, *toggles: bool) -> bool:
    return any(toggles) or options.align_annotations or options.align_comments


def format_struct_fields(fields: Sequence[StructField], options: FormattingOptions, indent_level: int) -> List[str]:
    """Render one batch of struct fields at ``indent_level``.

    Args:
        fields: Field records of a single block, in source order
        options: Formatting options
        indent_level: Indent depth of the fields themselves

    Returns:
        One rendered line per field.
    """
    if not fields:
        return []
    indent = get_indent(indent_level, options)
    if (options.trailing_comma == TrailingComma.PRESERVE
            and not _needs_alignment(options, options.align_types, options.align_field_names,
                                     options.align_struct_defaults)):
        return [indent + field.line for field in fields]

    max_id = max(len(field.field_id) for field in fields)
    max_qualifier = max(len(field.qualifier) for field in fields)

    heads: List[str] = []
    for field in fields:
        head = f"{field.field_id}:".ljust(max_id + 1) + " "
        if options.align_types:
            head += field.qualifier.ljust(max_qualifier) + (" " if max_qualifier else "")
        elif field.qualifier:
            head += field.qualifier + " "
        heads.append(head + field.type_name)
    if options.align_field_names:
        head_width = max(len(head) for head in heads)
        heads = [head.ljust(head_width) for head in heads]

    suffixes = [field.split_suffix() for field in fields]
    defaulted = [len(field.name) for field, (default, _) in zip(fields, suffixes) if default]
    max_name = max(defaulted) if defaulted and options.align_struct_defaults else 0

    bodies: List[str] = []
    terminators: List[str] = []
    for head, field, (default, terminator) in zip(heads, fields, suffixes):
        name = field.name
        if default:
            default = _DEFAULT_EQUALS.sub(" = ", default, count=1)
            name = name.ljust(max_name)
        bodies.append(f"{head} {name}{default}")
        terminators.append(apply_trailing_comma(terminator, options.trailing_comma))

    return _finish_lines(
        indent,
        bodies,
        [field.annotation for field in fields],
        terminators,
        [field.comment for field in fields],
        options,
    )


def format_enum_fields(fields: Sequence[EnumField], options: FormattingOptions, indent_level: int) -> List[str]:
    """Render one batch of enum members at ``indent_level``."""
    if not fields:
        return []
    indent = get_indent(indent_level, options)
    if (options.trailing_comma == TrailingComma.PRESERVE
            and not _needs_alignment(options, options.align_enum_names, options.align_enum_equals,
                                     options.align_enum_values)):
        return [indent + field.line for field in fields]

    valued = [len(field.name) for field in fields if field.value]
    max_name = max(valued) if valued else 0

    bodies: List[str] = []
    for field in fields:
        if not field.value:
            bodies.append(field.name)
        elif options.align_enum_names or options.align_enum_equals:
            bodies.append(f"{field.name.ljust(max_name)} = {field.value}")
        elif options.align_enum_values:
            # '=' stays tight to the name, values start in one column
            bodies.append(f"{field.name} ={' ' * (max_name - len(field.name) + 1)}{field.value}")
        else:
            bodies.append(f"{field.name} = {field.value}")

    return _finish_lines(
        indent,
        bodies,
        [field.annotation for field in fields],
        [apply_trailing_comma(field.suffix.strip(), options.trailing_comma) for field in fields],
        [field.comment for field in fields],
        options,
    )
