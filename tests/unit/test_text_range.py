# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Unit tests for positions, ranges, minimal edits and range context."""

import pytest

from thriftfmt.formatting_options_model import InitialContext
from thriftfmt.range_context import compute_initial_context, text_block_stack
from thriftfmt.text_range import (
    TextPosition,
    TextRange,
    build_minimal_edit,
    normalize_formatting_range,
    offset_at,
    position_at,
    split_lines,
    text_in_range,
)


class TestTextRange:
    """Test suite for positions and ranges."""

    def test_split_lines_handles_crlf(self):
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_negative_position_rejected(self):
        with pytest.raises(ValueError):
            TextPosition(-1, 0)

    def test_reversed_range_rejected(self):
        with pytest.raises(ValueError):
            TextRange(TextPosition(2, 0), TextPosition(1, 0))

    def test_empty_range_allowed(self):
        position = TextPosition(1, 1)
        assert TextRange(position, position).contains_line(1)

    def test_offsets_round_trip(self):
        """Test offset_at and position_at agree on a two-line text."""
        content = "ab\ncd"
        assert offset_at(content, TextPosition(1, 1)) == 4
        assert position_at(content, 4) == TextPosition(1, 1)

    def test_offset_clamped_to_line_end(self):
        assert offset_at("ab\ncd", TextPosition(0, 10)) == 2
        assert offset_at("ab\ncd", TextPosition(7, 0)) == 5

    def test_normalize_formatting_range(self):
        """Test a range is widened to whole lines and clamped to the document."""
        content = "a\nbb\nccc"
        assert normalize_formatting_range(content, TextRange.lines(1, 5)) == TextRange.lines(1, 2, 3)
        assert normalize_formatting_range(content, TextRange.lines(9, 9)) == TextRange.lines(2, 2, 3)

    def test_text_in_range(self):
        assert text_in_range("a\nbb\nccc", TextRange.lines(1, 2, 3)) == "bb\nccc"


class TestBuildMinimalEdit:
    """Test suite for build_minimal_edit."""

    def test_only_changed_middle_replaced(self):
        """Test the common prefix and suffix are trimmed from the edit.

        Given: A range whose text differs from its replacement by one character
        When: build_minimal_edit is called
        Then: The edit covers only that character
        """
        content = "x\nabc\ny"
        edit = build_minimal_edit(content, TextRange.lines(1, 1, 3), "abc", "aXc")
        assert edit.range == TextRange(TextPosition(1, 1), TextPosition(1, 2))
        assert edit.new_text == "X"

    def test_identical_text_gives_no_edit(self):
        assert build_minimal_edit("abc", TextRange.lines(0, 0, 3), "abc", "abc") is None


class TestInitialContext:
    """Test suite for range context computation."""

    def test_empty_prefix(self):
        assert compute_initial_context("") == InitialContext()

    def test_inside_struct(self):
        """Test text ending inside an open struct yields one struct level."""
        context = compute_initial_context("struct User {\n  1: i32 id\n")
        assert context == InitialContext(indent_level=1, in_struct=True)

    def test_inside_service(self):
        context = compute_initial_context("service Api {\n")
        assert context.in_service is True
        assert context.indent_level == 1

    def test_after_closed_block(self):
        """Test a fully closed block leaves no open context."""
        context = compute_initial_context("enum E {\n  A = 1\n}\n")
        assert context == InitialContext()

    def test_text_block_stack(self):
        """Test the textual fallback tracks open blocks innermost last."""
        stack = text_block_stack(["enum E {", "A = 1", "}", "exception X { // open", "1: i32 c"])
        assert stack == ["struct"]
        assert text_block_stack(["senum S {", "service T {"]) == ["enum", "service"]
