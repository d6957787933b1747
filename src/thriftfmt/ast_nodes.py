# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Thrift document model.

Only the shape the formatter consumes is modelled: top-level declarations
with their line ranges and, for struct-like, enum and service declarations,
one level of children (fields, members, functions) with their own ranges.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .text_range import TextPosition, TextRange


class NodeType(str, Enum):
    """Kinds of Thrift AST nodes."""
    DOCUMENT = "document"
    NAMESPACE = "namespace"
    INCLUDE = "include"
    TYPEDEF = "typedef"
    CONST = "const"
    STRUCT = "struct"
    UNION = "union"
    EXCEPTION = "exception"
    ENUM = "enum"
    SERVICE = "service"
    FIELD = "field"
    ENUM_MEMBER = "enum_member"
    FUNCTION = "function"


STRUCT_LIKE_TYPES = frozenset({NodeType.STRUCT, NodeType.UNION, NodeType.EXCEPTION})

_EMPTY_RANGE = TextRange(TextPosition(0, 0), TextPosition(0, 0))


@dataclass
class ThriftNode:
    """Common node attributes."""
    type: NodeType
    range: TextRange = _EMPTY_RANGE
    name: str = ""


@dataclass
class FieldNode(ThriftNode):
    """A struct, union or exception field."""
    field_id: Optional[int] = None
    requiredness: Optional[str] = None
    field_type: str = ""
    default_value: Optional[str] = None


@dataclass
class StructNode(ThriftNode):
    """A struct, union or exception declaration."""
    fields: List[FieldNode] = field(default_factory=list)


@dataclass
class EnumMember(ThriftNode):
    """One enum member; ``initializer`` is the raw value text, if any."""
    initializer: Optional[str] = None


@dataclass
class EnumNode(ThriftNode):
    members: List[EnumMember] = field(default_factory=list)


@dataclass
class FunctionNode(ThriftNode):
    """A service function signature."""
    return_type: str = ""
    oneway: bool = False


@dataclass
class ServiceNode(ThriftNode):
    extends: Optional[str] = None
    functions: List[FunctionNode] = field(default_factory=list)


@dataclass
class ConstNode(ThriftNode):
    value_type: str = ""
    value: str = ""


@dataclass
class TypedefNode(ThriftNode):
    alias_type: str = ""


@dataclass
class NamespaceNode(ThriftNode):
    scope: str = ""


@dataclass
class IncludeNode(ThriftNode):
    path: str = ""


Declaration = Union[
    StructNode, EnumNode, ServiceNode, ConstNode, TypedefNode, NamespaceNode, IncludeNode
]


@dataclass
class Document:
    """Parsed Thrift document: ordered top-level declarations."""
    body: List[Declaration] = field(default_factory=list)
    type: NodeType = NodeType.DOCUMENT
