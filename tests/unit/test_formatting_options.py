# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Unit tests for the formatting options model and its JSON loading."""

import json

import pytest
from pydantic import ValidationError

from thriftfmt.formatting_options_model import (
    DEFAULT_OPTIONS,
    CollectionStyle,
    FormattingOptions,
    InitialContext,
    TrailingComma,
)


class TestDefaults:
    """Test suite for the documented defaults."""

    def test_default_values(self):
        """Test the default instance carries the documented values."""
        assert DEFAULT_OPTIONS.trailing_comma == TrailingComma.ADD
        assert DEFAULT_OPTIONS.align_types is True
        assert DEFAULT_OPTIONS.align_field_names is True
        assert DEFAULT_OPTIONS.align_struct_defaults is False
        assert DEFAULT_OPTIONS.indent_size == 4
        assert DEFAULT_OPTIONS.max_line_length == 100
        assert DEFAULT_OPTIONS.collection_style == CollectionStyle.PRESERVE
        assert DEFAULT_OPTIONS.insert_spaces is True
        assert DEFAULT_OPTIONS.initial_context is None

    def test_frozen(self):
        """Test options cannot be mutated in place."""
        with pytest.raises(ValidationError):
            DEFAULT_OPTIONS.indent_size = 2


class TestValidation:
    """Test suite for camelCase keys, legacy aliases and bounds."""

    def test_camel_case_keys(self):
        """Test JSON-style camelCase keys populate the fields."""
        options = FormattingOptions.model_validate({
            "trailingComma": "remove",
            "alignTypes": False,
            "indentSize": 2,
            "collectionStyle": "auto",
        })
        assert options.trailing_comma == TrailingComma.REMOVE
        assert options.align_types is False
        assert options.indent_size == 2
        assert options.collection_style == CollectionStyle.AUTO

    def test_legacy_align_names(self):
        """Test alignNames feeds both field and enum name alignment."""
        options = FormattingOptions.model_validate({"alignNames": False})
        assert options.align_field_names is False
        assert options.align_enum_names is False

    def test_legacy_align_assignments(self):
        """Test alignAssignments feeds enum equals and value alignment."""
        options = FormattingOptions.model_validate({"alignAssignments": False})
        assert options.align_enum_equals is False
        assert options.align_enum_values is False

    def test_legacy_struct_annotations(self):
        options = FormattingOptions.model_validate({"alignStructAnnotations": False})
        assert options.align_annotations is False

    def test_explicit_name_wins_over_legacy(self):
        """Test a current key overrides the legacy alias that would feed it.

        Given: alignNames=false together with alignFieldNames=true
        When: The options are validated
        Then: Field names stay aligned while enum names follow the alias
        """
        options = FormattingOptions.model_validate({"alignNames": False, "alignFieldNames": True})
        assert options.align_field_names is True
        assert options.align_enum_names is False

    def test_snake_case_wins_over_legacy(self):
        options = FormattingOptions.model_validate({"alignNames": False, "align_field_names": True})
        assert options.align_field_names is True

    def test_unknown_keys_ignored(self):
        assert FormattingOptions.model_validate({"somethingElse": 1}) == FormattingOptions()

    def test_invalid_values_rejected(self):
        with pytest.raises(ValidationError):
            FormattingOptions.model_validate({"trailingComma": "sometimes"})
        with pytest.raises(ValidationError):
            FormattingOptions(indent_size=0)

    def test_initial_context_from_json(self):
        """Test a nested initialContext is parsed with camelCase keys."""
        options = FormattingOptions.model_validate(
            {"initialContext": {"indentLevel": 1, "inStruct": True}}
        )
        assert options.initial_context == InitialContext(indent_level=1, in_struct=True)

    def test_initial_context_rejects_negative_indent(self):
        with pytest.raises(ValidationError):
            InitialContext(indent_level=-1)

    def test_with_context(self):
        """Test with_context returns a copy and leaves the original untouched."""
        context = InitialContext(indent_level=2, in_enum=True)
        options = DEFAULT_OPTIONS.with_context(context)
        assert options.initial_context == context
        assert DEFAULT_OPTIONS.initial_context is None


class TestLoad:
    """Test suite for loading options from JSON files."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "opts.json"
        path.write_text(json.dumps({"indentSize": 8, "insertSpaces": False}))
        options = FormattingOptions.load(path)
        assert options.indent_size == 8
        assert options.insert_spaces is False

    def test_load_missing_file_gives_defaults(self, tmp_path):
        assert FormattingOptions.load(tmp_path / "missing.json") == FormattingOptions()

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            FormattingOptions.load(path)

    def test_default_file_in_working_directory(self, isolated_environment, tmp_path):
        """Test .thriftfmt.json in the working directory is picked up."""
        (tmp_path / ".thriftfmt.json").write_text(json.dumps({"maxLineLength": 60}))
        assert FormattingOptions.load_from_path_or_default(None).max_line_length == 60

    def test_no_file_gives_defaults(self, isolated_environment):
        assert FormattingOptions.load_from_path_or_default(None) == FormattingOptions()
