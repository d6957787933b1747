# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Handlers for lines inside an open struct, enum or service body.

Each handler returns True when it consumed the line. A closing ``}`` flushes
pending fields at the body's indent before the closer is emitted one level
out.
"""

from __future__ import annotations

from typing import Optional

from .ast_index import StructuralIndex
from .field_parser import (
    build_enum_field_from_ast,
    build_struct_field_from_ast,
    is_enum_field_text,
    is_struct_field_text,
    parse_enum_field_text,
    parse_struct_field_text,
)
from .field_records import EnumField, StructField
from .formatter_state import FormatterState
from .line_detection import is_param_line, is_service_method_line
from .text_utils import bracket_depth, normalize_generics_in_signature, split_line_comment


def struct_field_for(line: str, line_number: int, index: StructuralIndex) -> Optional[StructField]:
    """Field record for ``line``: AST-backed when indexed, else parsed from text."""
    node = index.struct_fields.get(line_number)
    if node is not None:
        return build_struct_field_from_ast(line, node)
    if is_struct_field_text(line):
        return parse_struct_field_text(line)
    return None


def enum_field_for(line: str, line_number: int, index: StructuralIndex) -> Optional[EnumField]:
    member = index.enum_members.get(line_number)
    if member is not None:
        return build_enum_field_from_ast(line, member)
    if is_enum_field_text(line):
        return parse_enum_field_text(line)
    return None


def _code(line: str) -> str:
    return split_line_comment(line).code


def handle_struct_content(state: FormatterState, line: str, line_number: int, index: StructuralIndex) -> bool:
    if line.startswith("}"):
        state.flush_struct()
        state.indent_level = max(state.indent_level - 1, 0)
        state.in_struct = False
        state.emit(line, state.indent_level)
        return True

    if is_struct_field_text(line):
        depth = bracket_depth(_code(line))
        if depth > 0:
            # the default continues below; its lines are kept as written
            state.flush_struct()
            state.emit(line, state.indent_level)
            state.open_default_depth = depth
            return True

    if is_service_method_line(line):
        state.emit(normalize_generics_in_signature(line), state.indent_level)
        return True

    record = struct_field_for(line, line_number, index)
    if record is not None:
        state.struct_fields.append(record)
        return True
    return False


def handle_default_continuation(state: FormatterState, line: str) -> None:
    """Place one line of a struct field default that spans several lines.

    Lines are indented by the bracket depth open in front of them; a line
    starting with a closer sits one level out.
    """
    depth = state.open_default_depth
    if line.startswith((")", "]", "}")):
        depth -= 1
    state.emit(line, state.indent_level + max(depth, 0))
    state.open_default_depth = max(state.open_default_depth + bracket_depth(_code(line)), 0)


def handle_enum_content(state: FormatterState, line: str, line_number: int, index: StructuralIndex) -> bool:
    if line.startswith("}"):
        state.flush_enum()
        state.indent_level = max(state.indent_level - 1, 0)
        state.in_enum = False
        state.emit(line, state.indent_level)
        return True

    record = enum_field_for(line, line_number, index)
    if record is not None:
        state.enum_fields.append(record)
        return True
    return False


def handle_service_content(state: FormatterState, line: str) -> bool:
    """Place a service body line; every line inside a service is consumed."""
    base = state.service_indent_level
    if line.startswith("}"):
        state.in_service = False
        state.indent_level = base
        state.emit(line, base)
    elif line == "{":
        state.emit(line, base)
    elif is_param_line(line):
        state.emit(line, base + 2)
    elif is_service_method_line(line):
        state.emit(normalize_generics_in_signature(line), base + 1)
    else:
        state.emit(line, base + 1)
    return True
