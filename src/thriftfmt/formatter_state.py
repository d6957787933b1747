# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Mutable scan state of one formatting pass.

The state is created per call, threaded through the line handlers and
discarded on return. Renderers receive copies of the pending field lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .const_format import format_const_fields
from .field_format import format_enum_fields, format_struct_fields
from .field_records import ConstField, EnumField, StructField
from .formatting_options_model import FormattingOptions, InitialContext
from .indent import get_indent


@dataclass
class FormatterState:
    """Block flags, indent depth and pending field buffers.

    ``service_indent_level`` is the level of the ``service`` keyword; method
    lines sit one level deeper without changing ``indent_level``.
    ``open_default_depth`` is the bracket depth still open by a struct field
    default that continues on the following lines.
    """
    options: FormattingOptions
    indent_level: int = 0
    in_struct: bool = False
    in_enum: bool = False
    in_service: bool = False
    service_indent_level: int = 0
    struct_fields: List[StructField] = field(default_factory=list)
    enum_fields: List[EnumField] = field(default_factory=list)
    const_fields: List[ConstField] = field(default_factory=list)
    open_default_depth: int = 0
    in_const_block: bool = False
    const_block_indent_level: Optional[int] = None
    output: List[str] = field(default_factory=list)

    @classmethod
    def start(cls, options: FormattingOptions) -> "FormatterState":
        """Create the state for a pass, seeded from ``options.initial_context``."""
        context: Optional[InitialContext] = options.initial_context
        if context is None:
            return cls(options=options)
        service_level = max(context.indent_level - 1, 0) if context.in_service else context.indent_level
        return cls(
            options=options,
            indent_level=context.indent_level,
            in_struct=context.in_struct,
            in_enum=context.in_enum,
            in_service=context.in_service,
            service_indent_level=service_level,
        )

    @property
    def in_block(self) -> bool:
        return self.in_struct or self.in_enum or self.in_service

    @property
    def comment_level(self) -> int:
        """Level for comments and blank lines: service-relative inside a service."""
        return self.service_indent_level + 1 if self.in_service else self.indent_level

    def emit(self, text: str, level: int) -> None:
        self.output.append(get_indent(level, self.options) + text)

    def extend(self, lines: Iterable[str]) -> None:
        self.output.extend(lines)

    def flush_struct(self) -> None:
        if self.struct_fields:
            self.output.extend(format_struct_fields(list(self.struct_fields), self.options, self.indent_level))
            self.struct_fields = []

    def flush_enum(self) -> None:
        if self.enum_fields:
            self.output.extend(format_enum_fields(list(self.enum_fields), self.options, self.indent_level))
            self.enum_fields = []

    def flush_const(self) -> None:
        if self.const_fields:
            level = self.const_block_indent_level
            self.output.extend(format_const_fields(
                list(self.const_fields),
                self.options,
                self.indent_level if level is None else level,
            ))
            self.const_fields = []
        self.in_const_block = False
        self.const_block_indent_level = None

    def flush_all(self) -> None:
        """Flush whatever is still buffered when input ends mid-block."""
        self.flush_const()
        self.flush_struct()
        self.flush_enum()
