# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Initial context for sub-range formatting.

The text in front of a range is parsed and every declaration whose line span
reaches the range's first line counts as an open block. When the parse finds
nothing to go on, a plain textual brace stack is used instead.
"""

from __future__ import annotations

import logging
import re
from typing import List

from returns.result import Success

from .ast_nodes import STRUCT_LIKE_TYPES, EnumNode, ServiceNode
from .formatting_options_model import InitialContext
from .parser_wrapper import parse_thrift_content
from .text_range import split_lines

logger = logging.getLogger(__name__)

_BLOCK_KEYWORD = re.compile(r"^(struct|union|exception|enum|senum|service)\b")
_LINE_COMMENT = re.compile(r"(//|#).*$")


def _context_from_stack(stack: List[str]) -> InitialContext:
    return InitialContext(
        indent_level=len(stack),
        in_struct="struct" in stack,
        in_enum="enum" in stack,
        in_service="service" in stack,
    )


def text_block_stack(lines: List[str]) -> List[str]:
    """Open block kinds, innermost last, found by scanning for braces."""
    stack: List[str] = []
    for raw in lines:
        line = _LINE_COMMENT.sub("", raw).strip()
        if not line:
            continue
        match = _BLOCK_KEYWORD.match(line)
        if match and "{" in line:
            keyword = match.group(1)
            if keyword in ("enum", "senum"):
                stack.append("enum")
            elif keyword == "service":
                stack.append("service")
            else:
                stack.append("struct")
        if "}" in line and stack:
            stack.pop()
    return stack


def compute_initial_context(text_before: str) -> InitialContext:
    """Block state at the end of ``text_before``.

    Args:
        text_before: Document text from the start up to the first line of
            the range, normally ending with a newline

    Returns:
        InitialContext with ``indent_level`` equal to the number of open blocks.
    """
    if not text_before:
        return InitialContext()
    lines = split_lines(text_before)
    boundary = max(0, len(lines) - 1)

    parsed = parse_thrift_content(text_before)
    if not isinstance(parsed, Success) or not parsed.unwrap().document.body:
        logger.debug("no declarations before range; using text block stack")
        return _context_from_stack(text_block_stack(lines))

    stack: List[str] = []
    for node in parsed.unwrap().document.body:
        if not node.range.contains_line(boundary):
            continue
        if node.type in STRUCT_LIKE_TYPES:
            stack.append("struct")
        elif isinstance(node, EnumNode):
            stack.append("enum")
        elif isinstance(node, ServiceNode):
            stack.append("service")
    return _context_from_stack(stack)
