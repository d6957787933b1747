# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Public formatting entry points.

``ThriftFormatter.format`` and ``ThriftFormatter.format_range`` never raise:
a parse or formatting failure is reported to the injected
:class:`ErrorHandler` and the input is returned unchanged.
"""

from __future__ import annotations

from typing import Optional

from returns.converters import flatten
from returns.result import Failure, Result, safe

from .error_handler import ErrorContext, ErrorHandler
from .errors import FormatResult, ThriftfmtError, format_failed
from .formatter_core import format_thrift_content
from .formatting_options_model import DEFAULT_OPTIONS, FormattingOptions, InitialContext
from .parser_wrapper import ParseResult, ThriftParserWrapper
from .range_context import compute_initial_context
from .text_range import (
    TextEdit,
    TextRange,
    build_minimal_edit,
    normalize_formatting_range,
    split_lines,
    text_in_range,
)

COMPONENT = "ThriftFormatter"

_safe_format = safe(format_thrift_content)


def _line_range(content: str, start_line: int, end_line: int) -> TextRange:
    start_line = max(start_line, 0)
    return normalize_formatting_range(content, TextRange.lines(start_line, max(end_line, start_line)))


class ThriftFormatter:
    """Formats Thrift source text according to a :class:`FormattingOptions` record.

    Args:
        error_handler: Sink for failures; a logging-only handler by default
        parser: Document provider; the bundled line-based parser by default
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 parser: Optional[ThriftParserWrapper] = None):
        self._error_handler = error_handler or ErrorHandler()
        self._parser = parser or ThriftParserWrapper()

    def format_result(self, content: str, options: Optional[FormattingOptions] = None) -> FormatResult:
        """Format ``content`` and return the outcome as a Result."""
        options = options or DEFAULT_OPTIONS

        def _format(parsed: ParseResult) -> FormatResult:
            return _safe_format(content, options, parsed.document).alt(
                lambda exc: format_failed(exc, component="formatter_core")
            )

        return self._parse(content).bind(_format)

    def _parse(self, content: str) -> Result[ParseResult, ThriftfmtError]:
        """Run the injected parser; an exception it raises becomes a Failure too."""
        return flatten(safe(self._parser.parse_content)(content).alt(
            lambda exc: format_failed(exc, component="parser", operation="parse")
        ))

    def format(self, content: str, options: Optional[FormattingOptions] = None) -> str:
        """Format a whole document; returns ``content`` unchanged on failure."""
        result = self.format_result(content, options)
        if isinstance(result, Failure):
            self._error_handler.handle_error(result.failure(), ErrorContext(
                component=COMPONENT,
                operation="format",
                additional_info={"content_length": len(content)},
            ))
            return content
        return result.unwrap()

    def format_range(
        self,
        content: str,
        start_line: int,
        end_line: int,
        options: Optional[FormattingOptions] = None,
        initial_context: Optional[InitialContext] = None,
    ) -> str:
        """Format lines ``start_line``..``end_line`` (inclusive) of ``content``.

        When no initial context is given (here or on ``options``) it is
        computed from the text in front of the range.

        Returns:
            The formatted text of the range only; the range text unchanged on failure.
        """
        options = options or DEFAULT_OPTIONS
        lines = split_lines(content)
        text_range = _line_range(content, start_line, end_line)
        range_text = "\n".join(lines[text_range.start.line:text_range.end.line + 1])

        context = initial_context or options.initial_context
        if context is None and text_range.start.line > 0:
            context = compute_initial_context("\n".join(lines[:text_range.start.line]) + "\n")

        result = self.format_result(range_text, options.with_context(context))
        if isinstance(result, Failure):
            self._error_handler.handle_error(result.failure(), ErrorContext(
                component=COMPONENT,
                operation="format_range",
                additional_info={"content_length": len(content), "start_line": start_line, "end_line": end_line},
            ))
            return range_text
        return result.unwrap()

    def format_range_edit(
        self,
        content: str,
        start_line: int,
        end_line: int,
        options: Optional[FormattingOptions] = None,
    ) -> Optional[TextEdit]:
        """Minimal single edit that applies :meth:`format_range` to ``content``."""
        text_range = _line_range(content, start_line, end_line)
        original = text_in_range(content, text_range)
        formatted = self.format_range(content, text_range.start.line, text_range.end.line, options)
        return build_minimal_edit(content, text_range, original, formatted)


def format_thrift(content: str, options: Optional[FormattingOptions] = None) -> str:
    """Format ``content`` with a default :class:`ThriftFormatter`."""
    return ThriftFormatter().format(content, options)
