# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Main formatting pass.

One top-to-bottom scan over the source lines. Each line is offered, in a
fixed order, to: the field-batch flushers, the block comment reflower, the
const handler, the typedef handler, the inline-body expanders, the block
start detectors, the open-block content handlers and finally the verbatim
fallback. The structural index is consulted first; text predicates cover
lines the parser could not place.

A struct field whose default opens a bracket group that closes on a later
line is emitted as written, and the lines up to the close bypass the
handlers above.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, List, Optional

from .ast_index import StructuralIndex, build_ast_index
from .ast_nodes import Document
from .block_content import (
    enum_field_for,
    handle_default_continuation,
    handle_enum_content,
    handle_service_content,
    handle_struct_content,
    struct_field_for,
)
from .comment_format import collect_block_comment, format_block_comment, is_block_comment_start
from .field_parser import parse_const_field
from .formatter_state import FormatterState
from .formatting_options_model import FormattingOptions
from .indent import get_indent
from .inline_format import format_inline_enum, format_inline_service, format_inline_struct_like
from .line_detection import (
    has_inline_body,
    is_enum_start_line,
    is_inline_enum,
    is_inline_service,
    is_inline_struct_like,
    is_service_start_line,
    is_struct_start_line,
    is_typedef_line,
)
from .text_range import split_lines
from .text_utils import normalize_generics_in_signature

logger = logging.getLogger(__name__)

_HEADER_BRACE = re.compile(r"\s*\{$")

InlineExpander = Callable[[str, int, FormattingOptions], Optional[List[str]]]


def _header(line: str) -> str:
    """``struct A{`` -> ``struct A {``; anything else is kept as written."""
    return _HEADER_BRACE.sub(" {", line)


class _FormattingPass:
    """One invocation of the scan; never reused."""

    def __init__(self, content: str, options: FormattingOptions, document: Document):
        self.lines = split_lines(content)
        self.index: StructuralIndex = build_ast_index(document)
        self.state = FormatterState.start(options)
        self.options = options

    def run(self) -> str:
        line_number = 0
        while line_number < len(self.lines):
            line_number = self._step(line_number)
        self.state.flush_all()
        return "\n".join(line.rstrip() for line in self.state.output)

    def _step(self, i: int) -> int:
        """Handle the line at ``i`` and return the index of the next line."""
        state = self.state
        line = self.lines[i].strip()

        if state.open_default_depth > 0:
            handle_default_continuation(state, line)
            return i + 1

        if state.struct_fields and not line.startswith("}") and struct_field_for(line, i, self.index) is None:
            state.flush_struct()
        if state.enum_fields and not line.startswith("}") and enum_field_for(line, i, self.index) is None:
            state.flush_enum()

        if is_block_comment_start(line):
            comment_lines, next_line = collect_block_comment(self.lines, i)
            state.extend(format_block_comment(comment_lines, get_indent(state.comment_level, self.options)))
            return next_line

        if state.in_const_block and i not in self.index.const_starts:
            state.flush_const()

        if not line or line.startswith(("//", "#")):
            state.emit(line, state.comment_level)
            return i + 1

        if i in self.index.const_starts:
            next_line = self._const(i)
            if next_line is not None:
                return next_line

        if is_typedef_line(line):
            state.emit(normalize_generics_in_signature(line), state.indent_level)
            return i + 1

        if self._expand_inline(line, i, is_inline_struct_like, self.index.struct_starts, format_inline_struct_like):
            return i + 1
        if i in self.index.struct_starts or is_struct_start_line(line):
            state.emit(_header(line), state.indent_level)
            state.indent_level += 1
            state.in_struct = True
            return i + 1

        if self._expand_inline(line, i, is_inline_service, self.index.service_starts, format_inline_service):
            return i + 1
        if i in self.index.service_starts or is_service_start_line(line):
            state.emit(_header(line), state.indent_level)
            state.in_service = True
            state.service_indent_level = state.indent_level
            return i + 1

        if state.in_struct and handle_struct_content(state, line, i, self.index):
            return i + 1
        if state.in_service and handle_service_content(state, line):
            return i + 1

        if self._expand_inline(line, i, is_inline_enum, self.index.enum_starts, format_inline_enum):
            return i + 1
        if i in self.index.enum_starts or is_enum_start_line(line):
            state.emit(_header(line), state.indent_level)
            state.indent_level += 1
            state.in_enum = True
            return i + 1
        if state.in_enum and handle_enum_content(state, line, i, self.index):
            return i + 1

        if line == "{":
            state.emit(line, max(state.indent_level - 1, 0))
            return i + 1

        state.emit(line, state.indent_level)
        return i + 1

    def _const(self, i: int) -> Optional[int]:
        """Buffer the const starting at ``i``; return the line after its span."""
        state = self.state
        end = self.index.const_ends.get(i, i)
        record = parse_const_field(self.lines[i:end + 1])
        if record is None:
            return None
        if not state.const_fields:
            state.const_block_indent_level = state.indent_level if state.in_block else 0
        state.in_const_block = True
        state.const_fields.append(record)
        return end + 1

    def _expand_inline(self, line: str, i: int, is_inline: Callable[[str], bool],
                       starts: dict, expand: InlineExpander) -> bool:
        """Expand a one-line body found by text or by an indexed single-line node."""
        indexed = starts.get(i)
        single_line = (indexed is not None
                       and indexed.range.start.line == indexed.range.end.line
                       and has_inline_body(line))
        if not (is_inline(line) or single_line):
            return False
        expanded = expand(line, self.state.indent_level, self.options)
        if expanded is None:
            return False
        self.state.extend(expanded)
        return True


def format_thrift_content(content: str, options: FormattingOptions, document: Document) -> str:
    """Format ``content`` using ``document`` as its structural source.

    Args:
        content: Thrift source text
        options: Formatting options, including any initial context
        document: Parse of ``content`` supplying line ranges

    Returns:
        Formatted text; lines are right-stripped and joined with ``\\n``.
    """
    logger.debug("formatting %d characters with %d declarations", len(content), len(document.body))
    return _FormattingPass(content, options, document).run()
