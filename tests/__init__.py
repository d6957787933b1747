# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""thriftfmt test suite.

Test Organization:
    - unit/: Fast, isolated tests of single modules
    - integration/: Whole-document and range formatting through the public API
    - conftest.py: Shared pytest fixtures and configuration

Running Tests:
    # All tests
    pytest

    # Unit tests only
    pytest tests/unit/

    # Skip the full formatting passes
    pytest -m "not integration"
"""
