"""Unit tests for thriftfmt components.

Tests in this package exercise one module at a time: the text scanners,
field parsers, renderers, options model, error handling, logging and the
CLI. They use temporary files and mocks, never a full formatting run
unless the module under test is the CLI.

Example:
    # Run all unit tests
    pytest tests/unit/

    # Run one module
    pytest tests/unit/test_field_format.py
"""
