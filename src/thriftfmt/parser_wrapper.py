# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Tolerant line-based Thrift parser with a Result-returning wrapper.

The parser never rejects input: unknown lines are skipped, unbalanced
braces run a block to end of input and a const whose brackets never close
stops at the next top-level declaration. That keeps it usable on buffers
that are half-edited, which is exactly when a formatter runs.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from returns.result import Result, safe

from .ast_nodes import (
    ConstNode,
    Declaration,
    Document,
    EnumMember,
    EnumNode,
    FieldNode,
    FunctionNode,
    IncludeNode,
    NamespaceNode,
    NodeType,
    ServiceNode,
    StructNode,
    TypedefNode,
)
from .errors import ParseError, parse_failed
from .text_range import TextRange, split_lines
from .text_utils import split_trailing_annotation

logger = logging.getLogger(__name__)

_BLOCK_HEADER = re.compile(
    r"^(struct|union|exception|enum|senum|service)\s+([A-Za-z_][\w.]*)"
    r"(?:\s+extends\s+([A-Za-z_][\w.]*))?"
)
_FIELD_PREFIX = re.compile(r"^(\d+)\s*:\s*(?:(required|optional)\b\s*)?(.*)$")
_TYPE_NAME_DEFAULT = re.compile(r"^(.+?)\s+([A-Za-z_]\w*)(?:\s*=\s*(.+))?$")
_ENUM_MEMBER = re.compile(r"^([A-Za-z_]\w*)\s*(?:=\s*([-+]?(?:0[xX][0-9a-fA-F]+|\d+)))?")
_FUNCTION = re.compile(r"^(?:(oneway)\s+)?(.+?)\s+([A-Za-z_]\w*)\s*\(")
_CONST = re.compile(r"^const\s+(.+?)\s+([A-Za-z_]\w*)\s*=\s*(.*)$")
_TYPEDEF = re.compile(r"^typedef\s+(.+?)\s+([A-Za-z_]\w*)\s*[;,]?$")
_NAMESPACE = re.compile(r"^namespace\s+(\S+)\s+(\S+)")
_INCLUDE = re.compile(r"^(?:cpp_)?include\s+[\"']([^\"']+)[\"']")
_TOP_LEVEL = re.compile(
    r"^(struct|union|exception|enum|senum|service|const|typedef|namespace|include|cpp_include)\b"
)


def strip_comments(lines: List[str]) -> List[str]:
    """Return ``lines`` with ``//``, ``#`` and ``/* */`` comments blanked out.

    String literals are preserved verbatim; a block comment may span lines.
    """
    cleaned: List[str] = []
    in_block = False
    for line in lines:
        out: List[str] = []
        quote = ""
        escaped = False
        i = 0
        while i < len(line):
            ch = line[i]
            if in_block:
                if line.startswith("*/", i):
                    in_block = False
                    i += 2
                else:
                    i += 1
                continue
            if quote:
                out.append(ch)
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == quote:
                    quote = ""
                i += 1
                continue
            if ch in ("'", '"'):
                quote = ch
            elif line.startswith("/*", i):
                in_block = True
                i += 2
                continue
            elif ch == "#" or line.startswith("//", i):
                break
            out.append(ch)
            i += 1
        cleaned.append("".join(out).strip())
    return cleaned


def _depth_delta(code: str, openers: str, closers: str) -> Tuple[int, int]:
    """Return (net depth change, lowest running depth) for one code line."""
    depth = 0
    lowest = 0
    quote = ""
    escaped = False
    for ch in code:
        if quote:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = ""
            continue
        if ch in ("'", '"'):
            quote = ch
        elif ch in openers:
            depth += 1
        elif ch in closers:
            depth -= 1
            lowest = min(lowest, depth)
    return depth, lowest


@dataclass(frozen=True)
class ParseResult:
    """Result of successfully parsing Thrift source code.

    Attributes:
        document: Parsed document
        source_lines: Original source lines for reference
        path: Path to the source file (if parsed from file)
        content: Original content string
    """
    document: Document
    source_lines: List[str]
    path: Optional[Path]
    content: str

    @property
    def line_count(self) -> int:
        """Get the number of lines in the source."""
        return len(self.source_lines)


class ThriftParser:
    """Line-oriented Thrift parser producing a :class:`Document`."""

    def __init__(self, content: str):
        self.lines = split_lines(content)
        self.code = strip_comments(self.lines)

    def parse(self) -> Document:
        body: List[Declaration] = []
        index = 0
        while index < len(self.code):
            code = self.code[index]
            if not code:
                index += 1
                continue
            header = _BLOCK_HEADER.match(code)
            if header:
                node, index = self._parse_block(index, header)
                body.append(node)
                continue
            const = _CONST.match(code)
            if const:
                node, index = self._parse_const(index, const)
                body.append(node)
                continue
            single = self._parse_single_line(index, code)
            if single is not None:
                body.append(single)
            index += 1
        logger.debug("parsed %d declarations from %d lines", len(body), len(self.lines))
        return Document(body=body)

    def _line_range(self, start: int, end: int) -> TextRange:
        return TextRange.lines(start, end, len(self.lines[end]))

    def _parse_single_line(self, index: int, code: str) -> Optional[Declaration]:
        line_range = self._line_range(index, index)
        match = _TYPEDEF.match(code)
        if match:
            return TypedefNode(type=NodeType.TYPEDEF, range=line_range,
                               name=match.group(2), alias_type=match.group(1).strip())
        match = _NAMESPACE.match(code)
        if match:
            return NamespaceNode(type=NodeType.NAMESPACE, range=line_range,
                                 name=match.group(2), scope=match.group(1))
        match = _INCLUDE.match(code)
        if match:
            return IncludeNode(type=NodeType.INCLUDE, range=line_range, path=match.group(1))
        return None

    def _find_block_end(self, open_line: int) -> int:
        """Return the line on which the brace opened on ``open_line`` closes."""
        depth = 0
        for index in range(open_line, len(self.code)):
            delta, lowest = _depth_delta(self.code[index], "{", "}")
            if depth + lowest <= 0 and index > open_line:
                return index
            depth += delta
            if depth <= 0:
                return index
        return len(self.code) - 1

    def _parse_block(self, start: int, header: re.Match) -> Tuple[Declaration, int]:
        keyword, name, extends = header.group(1), header.group(2), header.group(3)

        open_line = None
        for index in range(start, len(self.code)):
            code = self.code[index]
            if "{" in code:
                open_line = index
                break
            if index > start and code:
                break

        if open_line is None:
            end = start
            children_lines: List[int] = []
        else:
            end = self._find_block_end(open_line)
            children_lines = list(range(open_line + 1, end + 1)) if end > open_line else []

        block_range = self._line_range(start, end)
        if keyword in ("enum", "senum"):
            node: Declaration = EnumNode(type=NodeType.ENUM, range=block_range, name=name,
                                         members=self._enum_members(children_lines))
        elif keyword == "service":
            node = ServiceNode(type=NodeType.SERVICE, range=block_range, name=name,
                               extends=extends, functions=self._functions(children_lines))
        else:
            node = StructNode(type=NodeType(keyword), range=block_range, name=name,
                              fields=self._fields(children_lines))
        return node, end + 1

    def _fields(self, line_numbers: List[int]) -> List[FieldNode]:
        fields: List[FieldNode] = []
        for index in line_numbers:
            prefix = _FIELD_PREFIX.match(self.code[index])
            if not prefix:
                continue
            body = prefix.group(3).rstrip(",; ")
            body = _strip_annotation(body)
            match = _TYPE_NAME_DEFAULT.match(body)
            if not match:
                continue
            default = match.group(3)
            fields.append(FieldNode(
                type=NodeType.FIELD,
                range=self._line_range(index, index),
                name=match.group(2),
                field_id=int(prefix.group(1)),
                requiredness=prefix.group(2),
                field_type=match.group(1).strip(),
                default_value=default.strip() if default else None,
            ))
        return fields

    def _enum_members(self, line_numbers: List[int]) -> List[EnumMember]:
        members: List[EnumMember] = []
        for index in line_numbers:
            code = self.code[index]
            if code.startswith("}"):
                continue
            match = _ENUM_MEMBER.match(code)
            if not match:
                continue
            members.append(EnumMember(
                type=NodeType.ENUM_MEMBER,
                range=self._line_range(index, index),
                name=match.group(1),
                initializer=match.group(2),
            ))
        return members

    def _functions(self, line_numbers: List[int]) -> List[FunctionNode]:
        functions: List[FunctionNode] = []
        for index in line_numbers:
            code = self.code[index]
            if not code or code[0].isdigit() or code.startswith(("throws", "}", ")")):
                continue
            match = _FUNCTION.match(code)
            if not match:
                continue
            functions.append(FunctionNode(
                type=NodeType.FUNCTION,
                range=self._line_range(index, index),
                name=match.group(3),
                return_type=match.group(2).strip(),
                oneway=bool(match.group(1)),
            ))
        return functions

    def _parse_const(self, start: int, match: re.Match) -> Tuple[ConstNode, int]:
        value_parts = [match.group(3).strip()]
        depth, _ = _depth_delta(match.group(3), "[{(", "]})")
        end = start
        seen_value = bool(value_parts[0])
        while (depth > 0 or not seen_value) and end + 1 < len(self.code):
            code = self.code[end + 1]
            if _TOP_LEVEL.match(code):
                break
            end += 1
            if code:
                seen_value = True
                value_parts.append(code)
            delta, _ = _depth_delta(code, "[{(", "]})")
            depth += delta
        node = ConstNode(
            type=NodeType.CONST,
            range=self._line_range(start, end),
            name=match.group(2),
            value_type=match.group(1).strip(),
            value="\n".join(part for part in value_parts if part).rstrip(";,"),
        )
        return node, end + 1


def _strip_annotation(text: str) -> str:
    """Drop a trailing ``(...)`` annotation group from a field body."""
    return split_trailing_annotation(text).base.strip()


class ThriftParserWrapper:
    """Wrapper around :class:`ThriftParser` with functional error handling."""

    @safe
    def _parse_content_internal(self, content: str) -> Document:
        """Internal content parsing; ``@safe`` turns exceptions into Failure."""
        return ThriftParser(content).parse()

    def parse_content(self, content: str, path: Optional[Path] = None) -> Result[ParseResult, ParseError]:
        """Parse Thrift source content.

        Empty content parses to an empty document.

        Args:
            content: Thrift source code to parse
            path: Optional path for error context

        Returns:
            Result[ParseResult, ParseError]: Parsed result or specific error
        """
        return self._parse_content_internal(content).map(
            lambda document: ParseResult(
                document=document,
                source_lines=split_lines(content),
                path=path,
                content=content,
            )
        ).alt(lambda exc: self._map_parse_error(exc, path))

    def _map_parse_error(self, exc: Exception, path: Optional[Path]) -> ParseError:
        """Map parser exceptions to ParseError."""
        return parse_failed(f"Parse error: {type(exc).__name__}: {exc}", path=path)


def parse_thrift_content(content: str, path: Optional[Path] = None) -> Result[ParseResult, ParseError]:
    """Parse Thrift content with the default wrapper."""
    return ThriftParserWrapper().parse_content(content, path)


def parse_document(content: str) -> Document:
    """Parse ``content`` and return the bare document; raises on failure."""
    return ThriftParser(content).parse()
