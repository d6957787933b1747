# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Expansion of one-line block bodies.

``struct User{1:i32 id;2:string name;}`` becomes a header line, one aligned
line per field and a closing brace. The body is taken between the first
``{`` and the last ``}`` of the line's code and split with the top-level
part splitter; parts are parsed from text only.
"""

from __future__ import annotations

from typing import Callable, List, NamedTuple, Optional, Sequence, TypeVar

from .field_format import format_enum_fields, format_struct_fields
from .field_parser import parse_enum_field_text, parse_struct_field_text
from .formatting_options_model import FormattingOptions
from .indent import get_indent
from .text_utils import normalize_generics_in_signature, split_line_comment, split_top_level_parts

Record = TypeVar("Record")


class InlineBody(NamedTuple):
    header: str
    parts: List[str]
    closer: str


def split_inline_body(line: str) -> Optional[InlineBody]:
    """Split a one-line block into header, top-level body parts and closer.

    Returns None when the code part has no ``{`` before a later ``}``.
    """
    code, comment = split_line_comment(line)
    open_at = code.find("{")
    close_at = code.rfind("}")
    if open_at < 0 or close_at < 0 or open_at >= close_at:
        return None
    header = code[:open_at].strip()
    parts = split_top_level_parts(code[open_at + 1:close_at].strip())
    trailing = code[close_at + 1:].strip()
    closer = "}" + trailing if trailing[:1] in ("", ";", ",") else f"}} {trailing}"
    if comment:
        closer = f"{closer} {comment}"
    return InlineBody(f"{header} {{", parts, closer)


def _render_parts(
    parts: Sequence[str],
    parse: Callable[[str], Optional[Record]],
    render: Callable[[List[Record], FormattingOptions, int], List[str]],
    options: FormattingOptions,
    indent_level: int,
) -> List[str]:
    """Render parsed parts as batches; unparseable parts pass through verbatim."""
    lines: List[str] = []
    batch: List[Record] = []
    for part in parts:
        record = parse(part)
        if record is not None:
            batch.append(record)
            continue
        lines.extend(render(batch, options, indent_level))
        batch = []
        lines.append(get_indent(indent_level, options) + part)
    lines.extend(render(batch, options, indent_level))
    return lines


def format_inline_struct_like(line: str, indent_level: int, options: FormattingOptions) -> Optional[List[str]]:
    """Expand an inline struct, union or exception body."""
    body = split_inline_body(line)
    if body is None:
        return None
    indent = get_indent(indent_level, options)
    fields = _render_parts(body.parts, parse_struct_field_text, format_struct_fields, options, indent_level + 1)
    return [indent + body.header, *fields, indent + body.closer]


def format_inline_enum(line: str, indent_level: int, options: FormattingOptions) -> Optional[List[str]]:
    """Expand an inline enum body."""
    body = split_inline_body(line)
    if body is None:
        return None
    indent = get_indent(indent_level, options)
    members = _render_parts(body.parts, parse_enum_field_text, format_enum_fields, options, indent_level + 1)
    return [indent + body.header, *members, indent + body.closer]


def format_inline_service(line: str, indent_level: int, options: FormattingOptions) -> Optional[List[str]]:
    """Expand an inline service body; methods are signatures and get no terminator."""
    body = split_inline_body(line)
    if body is None:
        return None
    indent = get_indent(indent_level, options)
    method_indent = get_indent(indent_level + 1, options)
    methods = [method_indent + normalize_generics_in_signature(part) for part in body.parts]
    return [indent + body.header, *methods, indent + body.closer]
