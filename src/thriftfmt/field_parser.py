# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Field record parsers.

Every field kind has a *from-AST* constructor, used when the structural index
knows the line, and a *from-text* constructor for lines the parser could not
place. Both peel the line the same way (comment, then terminator, then
annotation) and must return identical records for well-formed input.
"""

from __future__ import annotations

import re
from typing import List, NamedTuple, Optional

from .ast_nodes import EnumMember, FieldNode
from .field_records import ConstField, EnumField, StructField
from .text_utils import normalize_type, split_line_comment, split_trailing_annotation

_TERMINATOR = re.compile(r"^(.*?)([,;])\s*$", re.DOTALL)
_STRUCT_PREFIX = re.compile(r"^(\d+)\s*:\s*(?:(required|optional)\b\s*)?(.*)$")
_STRUCT_BODY = re.compile(r"^(.+?)\s+([A-Za-z_]\w*)(?:\s*=\s*(.+))?$")
_ENUM_BODY = re.compile(r"^([A-Za-z_]\w*)\s*(?:=\s*(.+))?$")
_CONST_HEADER = re.compile(r"^const\s+(.+?)\s+([A-Za-z_]\w*)\s*=\s*(.*)$")

_STRUCT_FIELD_TEXT = re.compile(r"^\s*\d+\s*:\s*(?:(?:required|optional)\b\s*)?\S")
_ENUM_FIELD_TEXT = re.compile(r"^\s*[A-Za-z_]\w*\s*=\s*[-+]?(?:0x[0-9a-f]+|\d+)", re.IGNORECASE)


class PeeledLine(NamedTuple):
    """A field line with its comment, terminator and annotation removed."""
    body: str
    terminator: str
    annotation: str
    comment: str


def peel_field_line(line: str) -> PeeledLine:
    """Split comment, then trailing ``,``/``;``, then trailing annotation."""
    code, comment = split_line_comment(line)
    code = code.strip()

    terminator = ""
    match = _TERMINATOR.match(code)
    if match:
        code, terminator = match.group(1).rstrip(), match.group(2)

    base, annotation = split_trailing_annotation(code)
    base = base.strip()
    if annotation and not terminator:
        # ``name; (anno)`` puts the terminator in front of the annotation
        match = _TERMINATOR.match(base)
        if match:
            base, terminator = match.group(1).rstrip(), match.group(2)
    return PeeledLine(base, terminator, annotation, comment)


def is_struct_field_text(line: str) -> bool:
    """True if ``line`` looks like ``<id>: ...``."""
    return bool(_STRUCT_FIELD_TEXT.match(line))


def is_enum_field_text(line: str) -> bool:
    """True if ``line`` looks like ``NAME = <int or hex>``."""
    return bool(_ENUM_FIELD_TEXT.match(line))


def _struct_suffix(default: Optional[str], terminator: str) -> str:
    return (f" = {default.strip()}" if default else "") + terminator


def parse_struct_field_text(line: str) -> Optional[StructField]:
    """Build a struct field record from raw text, or None if it is not one."""
    peeled = peel_field_line(line)
    prefix = _STRUCT_PREFIX.match(peeled.body)
    if not prefix:
        return None
    body = _STRUCT_BODY.match(prefix.group(3).strip())
    if not body:
        return None
    return StructField(
        line=line.strip(),
        field_id=prefix.group(1),
        qualifier=prefix.group(2) or "",
        type_name=normalize_type(body.group(1)),
        name=body.group(2),
        suffix=_struct_suffix(body.group(3), peeled.terminator),
        comment=peeled.comment,
        annotation=peeled.annotation,
    )


def build_struct_field_from_ast(line: str, node: FieldNode) -> StructField:
    """Build a struct field record from an AST field and its source line.

    The id is taken from the line when present so leading zeros survive.
    """
    peeled = peel_field_line(line)
    prefix = _STRUCT_PREFIX.match(peeled.body)
    field_id = prefix.group(1) if prefix else str(node.field_id if node.field_id is not None else "")
    return StructField(
        line=line.strip(),
        field_id=field_id,
        qualifier=node.requiredness or "",
        type_name=normalize_type(node.field_type),
        name=node.name,
        suffix=_struct_suffix(node.default_value, peeled.terminator),
        comment=peeled.comment,
        annotation=peeled.annotation,
    )


def parse_enum_field_text(line: str) -> Optional[EnumField]:
    """Build an enum member record from raw text, or None if it is not one."""
    peeled = peel_field_line(line)
    match = _ENUM_BODY.match(peeled.body)
    if not match:
        return None
    return EnumField(
        line=line.strip(),
        name=match.group(1),
        value=(match.group(2) or "").strip(),
        suffix=peeled.terminator,
        comment=peeled.comment,
        annotation=peeled.annotation,
    )


def build_enum_field_from_ast(line: str, member: EnumMember) -> EnumField:
    """Build an enum member record from an AST member and its source line."""
    peeled = peel_field_line(line)
    match = _ENUM_BODY.match(peeled.body)
    value = (match.group(2) or "").strip() if match else ""
    return EnumField(
        line=line.strip(),
        name=member.name,
        value=value or (member.initializer or ""),
        suffix=peeled.terminator,
        comment=peeled.comment,
        annotation=peeled.annotation,
    )


def parse_const_field(lines: List[str]) -> Optional[ConstField]:
    """Build a const record from its (possibly multi-line) source slice.

    The text after ``=`` on the header line, minus any line comment, is the
    first chunk of the value; later lines are appended trimmed.
    """
    if not lines:
        return None
    header = lines[0].strip()
    match = _CONST_HEADER.match(header)
    if not match:
        return None
    first_value, comment = split_line_comment(match.group(3))
    value_lines = [first_value.strip()] + [raw.strip() for raw in lines[1:]]
    return ConstField(
        line=header,
        type_name=normalize_type(match.group(1)),
        name=match.group(2),
        value="\n".join(value_lines),
        comment=comment,
    )
