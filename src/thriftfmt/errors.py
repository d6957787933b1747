# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Error types for functional error handling using Result.

This module defines all error types used throughout thriftfmt.
Fallible operations return Result[Value, Error] types; errors are values,
not exceptions, until the CLI turns them into exit codes.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from returns.result import Result


# =============================================================================
# Base Error Types
# =============================================================================

@dataclass(frozen=True)
class ThriftfmtError:
    """Base error type for all thriftfmt errors."""
    message: str


# =============================================================================
# File Operation Errors
# =============================================================================

FileOperation = Literal["read", "write", "stat"]


@dataclass(frozen=True)
class FileError(ThriftfmtError):
    """File operation error."""
    path: Path
    operation: FileOperation
    original_error: str | None = None
    permission_error: bool = False
    not_found: bool = False


# =============================================================================
# Parsing Errors
# =============================================================================

@dataclass(frozen=True)
class ParseError(ThriftfmtError):
    """Thrift parsing error."""
    line: int = 0
    column: int = 0
    path: Path | None = None


# =============================================================================
# Formatting Errors
# =============================================================================

@dataclass(frozen=True)
class FormatError(ThriftfmtError):
    """Unexpected failure inside the formatting pass."""
    component: str = "formatter"
    operation: str = "format"
    original_error: str | None = None


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass(frozen=True)
class ConfigError(ThriftfmtError):
    """Configuration error."""
    config_file: Path | None = None
    key: str | None = None
    invalid_value: str | None = None


# =============================================================================
# Result Aliases
# =============================================================================

FormatResult = Result[str, ThriftfmtError]


# =============================================================================
# Error Helpers
# =============================================================================

def file_not_found(path: Path, operation: FileOperation = "read") -> FileError:
    """Create a file not found error."""
    return FileError(
        message=f"File not found: {path}",
        path=path,
        operation=operation,
        not_found=True
    )


def permission_denied(path: Path, operation: FileOperation) -> FileError:
    """Create a permission denied error."""
    return FileError(
        message=f"Permission denied: {operation} {path}",
        path=path,
        operation=operation,
        permission_error=True
    )


def parse_failed(message: str, line: int = 0, column: int = 0, path: Path | None = None) -> ParseError:
    """Create a parse error."""
    return ParseError(
        message=message,
        line=line,
        column=column,
        path=path
    )


def format_failed(exc: Exception, component: str = "formatter", operation: str = "format") -> FormatError:
    """Wrap an unexpected exception raised while formatting."""
    return FormatError(
        message=f"{type(exc).__name__}: {exc}",
        component=component,
        operation=operation,
        original_error=repr(exc)
    )
