# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Positions, ranges and edits over Thrift source text.

Ranges are used for AST node spans and for sub-range formatting. Edits are
produced by :func:`build_minimal_edit`, which trims the common prefix and
suffix of an original/formatted pair so editors only replace what changed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

_NEWLINE = re.compile(r"\r?\n")


def split_lines(content: str) -> List[str]:
    """Split text into physical lines on ``\\r?\\n``."""
    return _NEWLINE.split(content)


@dataclass(frozen=True)
class TextPosition:
    """Represents a position in source text.

    Attributes:
        line: Line number (0-based)
        column: Column number (0-based)
    """
    line: int
    column: int

    def __post_init__(self):
        """Validate position values."""
        if self.line < 0 or self.column < 0:
            raise ValueError("Line and column must be non-negative")


@dataclass(frozen=True)
class TextRange:
    """Represents a range in source text.

    Attributes:
        start: Starting position
        end: Ending position (exclusive); may equal ``start``
    """
    start: TextPosition
    end: TextPosition

    def __post_init__(self):
        """Validate range ordering."""
        if (self.start.line > self.end.line or
                (self.start.line == self.end.line and self.start.column > self.end.column)):
            raise ValueError("Invalid range: start must not be after end")

    @classmethod
    def lines(cls, start_line: int, end_line: int, end_column: int = 0) -> "TextRange":
        """Build a range from ``start_line`` column 0 to ``end_line``/``end_column``."""
        return cls(TextPosition(start_line, 0), TextPosition(end_line, end_column))

    def contains_line(self, line: int) -> bool:
        """Check if ``line`` falls between the start and end lines inclusive."""
        return self.start.line <= line <= self.end.line


@dataclass(frozen=True)
class TextEdit:
    """Replacement of ``range`` with ``new_text``."""
    range: TextRange
    new_text: str


def offset_at(content: str, position: TextPosition) -> int:
    """Translate a line/column position into a character offset of ``content``."""
    offset = 0
    for _ in range(position.line):
        newline = content.find("\n", offset)
        if newline < 0:
            return len(content)
        offset = newline + 1
    line_end = content.find("\n", offset)
    if line_end < 0:
        line_end = len(content)
    return min(offset + position.column, line_end)


def position_at(content: str, offset: int) -> TextPosition:
    """Translate a character offset of ``content`` into a line/column position."""
    offset = max(0, min(offset, len(content)))
    line = content.count("\n", 0, offset)
    line_start = content.rfind("\n", 0, offset) + 1
    return TextPosition(line, offset - line_start)


def normalize_formatting_range(content: str, text_range: TextRange) -> TextRange:
    """Widen ``text_range`` to whole lines, clamped to the document."""
    lines = split_lines(content)
    last_line = max(0, len(lines) - 1)
    start_line = min(max(text_range.start.line, 0), last_line)
    end_line = min(max(text_range.end.line, start_line), last_line)
    return TextRange.lines(start_line, end_line, len(lines[end_line]))


def text_in_range(content: str, text_range: TextRange) -> str:
    """Return the slice of ``content`` covered by ``text_range``."""
    return content[offset_at(content, text_range.start):offset_at(content, text_range.end)]


def build_minimal_edit(
    content: str,
    text_range: TextRange,
    original_text: str,
    formatted_text: str,
) -> Optional[TextEdit]:
    """Build the smallest single edit turning ``original_text`` into ``formatted_text``.

    Args:
        content: Whole document, used to map offsets back to positions
        text_range: Range of ``content`` that ``original_text`` was taken from
        original_text: Text currently in the range
        formatted_text: Replacement produced by the formatter

    Returns:
        A TextEdit covering only the differing middle section, or None when
        the two texts are identical.
    """
    if original_text == formatted_text:
        return None

    prefix = 0
    max_prefix = min(len(original_text), len(formatted_text))
    while prefix < max_prefix and original_text[prefix] == formatted_text[prefix]:
        prefix += 1

    suffix = 0
    max_suffix = min(len(original_text), len(formatted_text)) - prefix
    while (suffix < max_suffix
           and original_text[len(original_text) - 1 - suffix] == formatted_text[len(formatted_text) - 1 - suffix]):
        suffix += 1

    range_start = offset_at(content, text_range.start)
    replace_start = range_start + prefix
    replace_end = range_start + len(original_text) - suffix
    replacement = formatted_text[prefix:len(formatted_text) - suffix]
    return TextEdit(
        range=TextRange(position_at(content, replace_start), position_at(content, replace_end)),
        new_text=replacement,
    )
