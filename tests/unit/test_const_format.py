# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Unit tests for the const block renderer."""

from thriftfmt.const_format import expand_collection, format_const_fields
from thriftfmt.field_parser import parse_const_field
from thriftfmt.field_records import ConstField
from thriftfmt.formatting_options_model import DEFAULT_OPTIONS, CollectionStyle, FormattingOptions


def const(line: str) -> ConstField:
    return parse_const_field([line])


class TestFormatConstFields:
    """Test suite for format_const_fields."""

    def test_types_and_names_aligned(self):
        """Test a batch of consts pads types and names to common widths.

        Given: Two consts with different type and name widths
        When: Rendered with default options
        Then: Names and '=' signs line up
        """
        lines = format_const_fields([const("const i32 A = 1"), const('const string LONG = "x"')], DEFAULT_OPTIONS, 0)
        assert lines == [
            "const i32    A    = 1",
            'const string LONG = "x"',
        ]

    def test_no_alignment(self):
        """Test natural widths when type and name alignment are off."""
        options = FormattingOptions(align_types=False, align_field_names=False)
        lines = format_const_fields([const("const i32 A = 1"), const('const string LONG = "x"')], options, 0)
        assert lines == ["const i32 A = 1", 'const string LONG = "x"']

    def test_comments_aligned(self):
        """Test trailing comments of a const batch share a column."""
        lines = format_const_fields(
            [const("const i32 A = 1 // a"), const('const string LONG = "x" // b')],
            DEFAULT_OPTIONS, 0,
        )
        assert lines[0].index("//") == lines[1].index("//")
        assert lines[1] == 'const string LONG = "x" // b'

    def test_multiline_value_indented(self):
        """Test continuation lines sit one level deeper and the closer at the const level."""
        record = parse_const_field(["const list<i32> L = [", "1,", "   2", "]"])
        lines = format_const_fields([record], DEFAULT_OPTIONS, 1)
        assert lines == [
            "    const list<i32> L = [",
            "        1,",
            "        2",
            "    ]",
        ]

    def test_comment_only_continuation_joins_previous_line(self):
        """Test a comment-only continuation line is appended to the line above."""
        record = ConstField(line="", type_name="list<i32>", name="L", value="[\n// first\n1\n]")
        lines = format_const_fields([record], DEFAULT_OPTIONS, 0)
        assert lines == [
            "const list<i32> L = [ // first",
            "    1",
            "]",
        ]

    def test_continuation_comments_aligned(self):
        """Test comments on continuation lines share a column."""
        record = ConstField(line="", type_name="list<i32>", name="L", value="[\n1, // one\n100, // hundred\n]")
        lines = format_const_fields([record], DEFAULT_OPTIONS, 0)
        assert lines[1] == "    1,   // one"
        assert lines[2] == "    100, // hundred"

    def test_empty_batch(self):
        assert format_const_fields([], DEFAULT_OPTIONS, 0) == []


class TestExpandCollection:
    """Test suite for expand_collection."""

    def test_multiline_style_expands(self):
        """Test 'multiline' puts one item per line.

        Given: A list const on one line
        When: Rendered with collection_style=multiline
        Then: Each item gets its own line and the closer its own line
        """
        options = FormattingOptions(collection_style=CollectionStyle.MULTILINE)
        lines = format_const_fields([const('const list<string> NAMES = ["a", "b"]')], options, 0)
        assert lines == [
            "const list<string> NAMES = [",
            '    "a",',
            '    "b"',
            "]",
        ]

    def test_terminator_follows_closer(self):
        """Test a trailing ';' moves to the closing bracket line."""
        options = FormattingOptions(collection_style=CollectionStyle.MULTILINE)
        expanded = expand_collection(const("const list<i32> L = [1, 2];"), options, 0)
        assert expanded.value == "[\n1,\n2\n];"

    def test_map_literal(self):
        """Test map pairs are kept whole when expanded."""
        options = FormattingOptions(collection_style=CollectionStyle.MULTILINE)
        expanded = expand_collection(const('const map<string,i32> M = {"a": 1, "b": 2}'), options, 0)
        assert expanded.value == '{\n"a": 1,\n"b": 2\n}'

    def test_preserve_style_keeps_value(self):
        """Test 'preserve' never expands."""
        field = const("const list<i32> L = [1, 2]")
        assert expand_collection(field, DEFAULT_OPTIONS, 0) is field

    def test_auto_style_short_line_kept(self):
        """Test 'auto' keeps a collection that fits on one line."""
        options = FormattingOptions(collection_style=CollectionStyle.AUTO, max_line_length=100)
        field = const("const list<i32> L = [1, 2]")
        assert expand_collection(field, options, 0) is field

    def test_auto_style_long_line_expanded(self):
        """Test 'auto' expands a collection wider than max_line_length."""
        options = FormattingOptions(collection_style=CollectionStyle.AUTO, max_line_length=20)
        expanded = expand_collection(const("const list<i32> L = [1, 2]"), options, 0)
        assert expanded.value == "[\n1,\n2\n]"

    def test_auto_counts_indent(self):
        """Test the indent width counts toward the measured length."""
        field = const("const list<i32> L = [1, 2]")
        options = FormattingOptions(collection_style=CollectionStyle.AUTO, max_line_length=len(field.line))
        assert expand_collection(field, options, 0) is field
        assert expand_collection(field, options, 1).is_multiline

    def test_scalar_value_untouched(self):
        """Test non-collection values are never expanded."""
        options = FormattingOptions(collection_style=CollectionStyle.MULTILINE)
        field = const("const i32 MAX = 10")
        assert expand_collection(field, options, 0) is field
