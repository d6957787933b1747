# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Injected failure sink.

The formatter never raises to its caller; it reports what went wrong here and
hands back the input unchanged. Reports go to the standard ``logging``
hierarchy and, when attached, to a :class:`JsonlLogger`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional, TypeVar, Union

from returns.result import Failure, safe

from .errors import ThriftfmtError
from .logging_jsonl import JsonlLogger

T = TypeVar("T")

ReportedError = Union[ThriftfmtError, BaseException]


@dataclass(frozen=True)
class ErrorContext:
    """Where a failure happened.

    Attributes:
        component: Reporting component, e.g. ``"ThriftFormatter"``
        operation: Operation in progress, e.g. ``"format"``
        file_path: File being processed, if any
        additional_info: Extra metadata such as ``content_length``
    """
    component: str
    operation: str
    file_path: Optional[Path] = None
    additional_info: Dict[str, Any] = field(default_factory=dict)


def describe_error(error: ReportedError) -> str:
    if isinstance(error, ThriftfmtError):
        return error.message
    return f"{type(error).__name__}: {error}"


class ErrorHandler:
    """Reports errors, warnings and informational events."""

    def __init__(self, logger: Optional[logging.Logger] = None, sink: Optional[JsonlLogger] = None):
        self._logger = logger or logging.getLogger(__name__)
        self._sink = sink

    def _record(self, level: str, message: str, context: ErrorContext) -> None:
        if self._sink is None:
            return
        self._sink.write({
            "level": level,
            "component": context.component,
            "operation": context.operation,
            "file": str(context.file_path) if context.file_path else None,
            "message": message,
            **context.additional_info,
        })

    def handle_error(self, error: ReportedError, context: ErrorContext) -> None:
        message = describe_error(error)
        self._logger.error("%s.%s failed: %s %s", context.component, context.operation,
                           message, context.additional_info)
        self._record("error", message, context)

    def handle_warning(self, message: str, context: ErrorContext) -> None:
        self._logger.warning("%s.%s: %s", context.component, context.operation, message)
        self._record("warning", message, context)

    def handle_info(self, message: str, context: ErrorContext) -> None:
        self._logger.info("%s.%s: %s", context.component, context.operation, message)
        self._record("info", message, context)

    def wrap_sync(self, function: Callable[[], T], context: ErrorContext, fallback: T) -> T:
        """Run ``function``; report any exception and return ``fallback`` instead."""
        result = safe(function)()
        if isinstance(result, Failure):
            self.handle_error(result.failure(), context)
            return fallback
        return result.unwrap()
