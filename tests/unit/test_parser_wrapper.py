# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Unit tests for the tolerant parser, its Result wrapper and the structural index."""

from unittest.mock import patch

import pytest
from returns.result import Failure, Success

from thriftfmt.ast_index import build_ast_index
from thriftfmt.ast_nodes import NodeType
from thriftfmt.errors import ParseError
from thriftfmt.parser_wrapper import ThriftParserWrapper, parse_document, strip_comments

SAMPLE = """namespace py demo
include "shared.thrift"
typedef i64 Id
const i32 MAX = 10
const list<i32> L = [
  1,
]
struct User {
  1: i32 id
  // comment
  2: optional string name = "n"
}
enum Color {
  RED = 1
}
service Api extends Base {
  User get(1: Id id)
  oneway void ping()
}
"""


@pytest.fixture
def document():
    return parse_document(SAMPLE)


class TestStripComments:
    """Test suite for strip_comments."""

    def test_comments_blanked(self):
        """Test line and block comments are removed but strings are kept.

        Given: Lines mixing //, #, block comments and string literals
        When: strip_comments is called
        Then: Only code outside comments remains, trimmed
        """
        lines = ["a // b", '"x // y" # z', "/* start", "inside", "end */ code"]
        assert strip_comments(lines) == ["a", '"x // y"', "", "", "code"]


class TestThriftParser:
    """Test suite for the line-based parser."""

    def test_declaration_order(self, document):
        """Test top-level declarations are returned in source order."""
        assert [node.type for node in document.body] == [
            NodeType.NAMESPACE,
            NodeType.INCLUDE,
            NodeType.TYPEDEF,
            NodeType.CONST,
            NodeType.CONST,
            NodeType.STRUCT,
            NodeType.ENUM,
            NodeType.SERVICE,
        ]

    def test_struct_fields(self, document):
        """Test struct fields carry id, requiredness, type, name and default."""
        struct = document.body[5]
        assert struct.name == "User"
        assert (struct.range.start.line, struct.range.end.line) == (7, 11)
        first, second = struct.fields
        assert (first.field_id, first.field_type, first.name) == (1, "i32", "id")
        assert first.range.start.line == 8
        assert second.requiredness == "optional"
        assert second.default_value == '"n"'
        assert second.range.start.line == 10

    def test_multi_line_const(self, document):
        """Test a const whose brackets span lines ends at the closing bracket."""
        const = document.body[4]
        assert const.name == "L"
        assert const.value_type == "list<i32>"
        assert (const.range.start.line, const.range.end.line) == (4, 6)

    def test_enum_and_service(self, document):
        """Test enum members and service functions are collected."""
        enum, service = document.body[6], document.body[7]
        assert [(m.name, m.initializer) for m in enum.members] == [("RED", "1")]
        assert service.extends == "Base"
        assert [(f.name, f.return_type, f.oneway) for f in service.functions] == [
            ("get", "User", False),
            ("ping", "void", True),
        ]

    def test_unterminated_block_runs_to_end(self):
        """Test a struct missing its closer extends to the last line."""
        struct = parse_document("struct A {\n1: i32 x").body[0]
        assert struct.range.end.line == 1
        assert [f.name for f in struct.fields] == ["x"]

    def test_brace_on_next_line(self):
        """Test a header whose '{' is on the following line still owns the body."""
        struct = parse_document("struct A\n{\n1: i32 x\n}").body[0]
        assert struct.range.end.line == 3
        assert struct.fields[0].range.start.line == 2

    def test_empty_content(self):
        assert parse_document("").body == []


class TestThriftParserWrapper:
    """Test suite for the Result-returning wrapper."""

    def test_parse_success(self):
        """Test parsing returns Success with the source lines."""
        result = ThriftParserWrapper().parse_content("struct A {\n}\n")
        assert isinstance(result, Success)
        parsed = result.unwrap()
        assert parsed.line_count == 3
        assert parsed.document.body[0].name == "A"

    def test_parse_failure_mapped(self):
        """Test a parser exception becomes a ParseError value.

        Given: A parser that raises
        When: parse_content is called
        Then: A Failure holding a ParseError naming the exception is returned
        """
        with patch("thriftfmt.parser_wrapper.ThriftParser.parse", side_effect=RuntimeError("boom")):
            result = ThriftParserWrapper().parse_content("struct A {}")
        assert isinstance(result, Failure)
        error = result.failure()
        assert isinstance(error, ParseError)
        assert "RuntimeError" in error.message


class TestStructuralIndex:
    """Test suite for build_ast_index."""

    def test_index_keys(self, document):
        """Test every table is keyed by the node's start line."""
        index = build_ast_index(document)
        assert set(index.struct_starts) == {7}
        assert set(index.struct_fields) == {8, 10}
        assert set(index.enum_starts) == {12}
        assert set(index.enum_members) == {13}
        assert set(index.service_starts) == {15}
        assert set(index.service_functions) == {16, 17}
        assert set(index.const_starts) == {3, 4}
        assert index.const_ends == {3: 3, 4: 6}
