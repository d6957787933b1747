# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Indentation strings."""

from __future__ import annotations

from .formatting_options_model import FormattingOptions


def get_indent(level: int, options: FormattingOptions) -> str:
    """Indent string for ``level`` nesting levels."""
    level = max(level, 0)
    if options.insert_spaces:
        return " " * (level * options.indent_size)
    return "\t" * level


def indent_width(level: int, options: FormattingOptions) -> int:
    """Visual width of :func:`get_indent` for ``level``."""
    level = max(level, 0)
    if options.insert_spaces:
        return level * options.indent_size
    return level * options.tab_size
