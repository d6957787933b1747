"""Shared pytest configuration and fixtures for thriftfmt test suite.

This module provides common fixtures, configuration, and utilities used across
all test modules. Fixtures defined here are automatically available to all tests
without explicit imports.
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add src to path for imports during testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from thriftfmt.error_handler import ErrorHandler
from thriftfmt.formatter import ThriftFormatter
from thriftfmt.formatting_options_model import DEFAULT_OPTIONS, FormattingOptions


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (full formatting pass)"
    )
    config.addinivalue_line(
        "markers", "property: mark test as hypothesis property-based test"
    )


# ============================================================================
# Formatter Fixtures
# ============================================================================

@pytest.fixture
def default_options() -> FormattingOptions:
    """The documented default options instance."""
    return DEFAULT_OPTIONS


@pytest.fixture
def mock_error_handler() -> Mock:
    """Create a mock error handler for asserting reported failures.

    Returns:
        Mock ErrorHandler with all reporting methods stubbed.
    """
    return Mock(spec=ErrorHandler)


@pytest.fixture
def formatter(mock_error_handler: Mock) -> ThriftFormatter:
    """ThriftFormatter wired to the mock error handler."""
    return ThriftFormatter(error_handler=mock_error_handler)


# ============================================================================
# File System Fixtures
# ============================================================================

@pytest.fixture
def temp_thrift_file(tmp_path: Path) -> Path:
    """Create a temporary Thrift file that needs formatting.

    Returns:
        Path to a temporary .thrift file containing an unaligned struct.
    """
    file_path = tmp_path / "user.thrift"
    file_path.write_text("struct User{1:i32 id;2:string name;}\n")
    return file_path


@pytest.fixture
def formatted_thrift_file(tmp_path: Path) -> Path:
    """Create a temporary Thrift file that is already formatted."""
    file_path = tmp_path / "clean.thrift"
    file_path.write_text(
        "struct User {\n"
        "    1: i32    id,\n"
        "    2: string name,\n"
        "}\n"
    )
    return file_path


@pytest.fixture
def thrift_tree(tmp_path: Path) -> Path:
    """Create a directory tree with Thrift and non-Thrift files.

    Creates:
        - idl/a.thrift
        - idl/nested/b.thrift
        - idl/README.md

    Returns:
        Path to the ``idl`` directory.
    """
    root = tmp_path / "idl"
    (root / "nested").mkdir(parents=True)
    (root / "a.thrift").write_text("enum Color{RED=1;GREEN=2}\n")
    (root / "nested" / "b.thrift").write_text("const i32 MAX = 10\n")
    (root / "README.md").write_text("# not thrift\n")
    return root


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def isolated_environment(monkeypatch, tmp_path: Path) -> None:
    """Clear THRIFTFMT_* variables and run from an empty directory."""
    for var in ("THRIFTFMT_LOG_LEVEL", "THRIFTFMT_LOG_PATH", "THRIFTFMT_CONFIG_FILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


# ============================================================================
# Utility Fixtures
# ============================================================================

@pytest.fixture
def capture_logs(tmp_path: Path) -> Path:
    """Create a temporary log file path for capturing structured logs.

    Returns:
        Path to temporary JSONL log file.
    """
    return tmp_path / "thriftfmt.jsonl"