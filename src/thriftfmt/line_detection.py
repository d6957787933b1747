# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Pure predicates over single trimmed source lines.

A block *start* opens ``{`` without closing it on the same line; an *inline*
body carries both braces. Braces inside a trailing line comment are ignored.
"""

from __future__ import annotations

import re

from .text_utils import split_line_comment

_STRUCT_KEYWORD = re.compile(r"^(struct|union|exception)\b")
_ENUM_KEYWORD = re.compile(r"^(enum|senum)\b")
_SERVICE_KEYWORD = re.compile(r"^service\b")
_TYPEDEF = re.compile(r"^\s*typedef\b")
_SERVICE_METHOD = re.compile(
    r"^(?:oneway\s+)?(?!throws\b)[A-Za-z_][\w.]*(?:\s*<.*>)?\s+[A-Za-z_]\w*\s*\("
)
_PARAM_LINE = re.compile(r"^\s*\d+\s*:")


def _braces(line: str) -> tuple[bool, bool]:
    code = split_line_comment(line).code
    return "{" in code, "}" in code


def _is_start(pattern: re.Pattern, line: str) -> bool:
    has_open, has_close = _braces(line)
    return bool(pattern.match(line)) and has_open and not has_close


def _is_inline(pattern: re.Pattern, line: str) -> bool:
    has_open, has_close = _braces(line)
    return bool(pattern.match(line)) and has_open and has_close


def is_struct_start_line(line: str) -> bool:
    return _is_start(_STRUCT_KEYWORD, line)


def is_enum_start_line(line: str) -> bool:
    return _is_start(_ENUM_KEYWORD, line)


def is_service_start_line(line: str) -> bool:
    return _is_start(_SERVICE_KEYWORD, line)


def is_inline_struct_like(line: str) -> bool:
    """True for ``struct|union|exception ... { ... }`` on one line."""
    return _is_inline(_STRUCT_KEYWORD, line)


def is_inline_enum(line: str) -> bool:
    return _is_inline(_ENUM_KEYWORD, line)


def is_inline_service(line: str) -> bool:
    return _is_inline(_SERVICE_KEYWORD, line)


def has_inline_body(line: str) -> bool:
    """True if the code part of ``line`` opens and closes a brace."""
    return all(_braces(line))


def is_typedef_line(line: str) -> bool:
    return bool(_TYPEDEF.match(line))


def is_service_method_line(line: str) -> bool:
    """True for a function signature such as ``list<User> find(1: string q)``."""
    return bool(_SERVICE_METHOD.match(line.strip()))


def is_param_line(line: str) -> bool:
    """True for a parameter continuation line such as ``1: string name,``."""
    return bool(_PARAM_LINE.match(line))
