# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""thriftfmt - configurable formatter for the Thrift interface definition language."""

__version__ = "0.1.0"

from .error_handler import ErrorContext, ErrorHandler
from .formatter import ThriftFormatter, format_thrift
from .formatting_options_model import (
    DEFAULT_OPTIONS,
    CollectionStyle,
    FormattingOptions,
    InitialContext,
    TrailingComma,
)

__all__ = [
    "CollectionStyle",
    "DEFAULT_OPTIONS",
    "ErrorContext",
    "ErrorHandler",
    "FormattingOptions",
    "InitialContext",
    "ThriftFormatter",
    "TrailingComma",
    "__version__",
    "format_thrift",
]
