# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Structural index: line-number lookups built once per format call.

Top-level declarations are keyed by their start line; fields, enum members
and service functions by their own start line. Consts also record their end
line because a const value may span several lines. Nested bodies inside
fields are not indexed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .ast_nodes import (
    STRUCT_LIKE_TYPES,
    ConstNode,
    Document,
    EnumMember,
    EnumNode,
    FieldNode,
    FunctionNode,
    ServiceNode,
    StructNode,
)


@dataclass(frozen=True)
class StructuralIndex:
    struct_starts: Dict[int, StructNode] = field(default_factory=dict)
    struct_fields: Dict[int, FieldNode] = field(default_factory=dict)
    enum_starts: Dict[int, EnumNode] = field(default_factory=dict)
    enum_members: Dict[int, EnumMember] = field(default_factory=dict)
    service_starts: Dict[int, ServiceNode] = field(default_factory=dict)
    service_functions: Dict[int, FunctionNode] = field(default_factory=dict)
    const_starts: Dict[int, ConstNode] = field(default_factory=dict)
    const_ends: Dict[int, int] = field(default_factory=dict)


def build_ast_index(document: Document) -> StructuralIndex:
    """Walk the document's top-level body once and index it by line."""
    index = StructuralIndex()
    for node in document.body:
        start = node.range.start.line
        if isinstance(node, StructNode) and node.type in STRUCT_LIKE_TYPES:
            index.struct_starts[start] = node
            for child in node.fields:
                index.struct_fields[child.range.start.line] = child
        elif isinstance(node, EnumNode):
            index.enum_starts[start] = node
            for member in node.members:
                index.enum_members[member.range.start.line] = member
        elif isinstance(node, ServiceNode):
            index.service_starts[start] = node
            for function in node.functions:
                index.service_functions[function.range.start.line] = function
        elif isinstance(node, ConstNode):
            index.const_starts[start] = node
            index.const_ends[start] = node.range.end.line
    return index
