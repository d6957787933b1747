# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Integration tests for thriftfmt.

These tests drive the full pipeline (parser, structural index, line scan
and renderers) through ThriftFormatter and check whole outputs.

Markers:
    - @pytest.mark.integration: All tests in this package
"""
