# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Pydantic models for the formatting options record.

Options are plain data: every toggle is explicit and ``DEFAULT_OPTIONS`` is
the one documented default instance. JSON configuration files may use the
camelCase names (``trailingComma``, ``alignTypes``...) or the snake_case
field names, plus a few legacy aliases.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class TrailingComma(str, Enum):
    """What to do with the terminator of struct and enum fields."""
    PRESERVE = "preserve"
    ADD = "add"
    REMOVE = "remove"


class CollectionStyle(str, Enum):
    """How inline ``[...]``/``{...}`` const values are laid out."""
    PRESERVE = "preserve"
    MULTILINE = "multiline"
    AUTO = "auto"


class InitialContext(BaseModel):
    """Block state in effect at the first line of a formatted range."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    indent_level: int = Field(default=0, ge=0, description="Indent depth at range start")
    in_struct: bool = Field(default=False, description="Range starts inside a struct-like body")
    in_enum: bool = Field(default=False, description="Range starts inside an enum body")
    in_service: bool = Field(default=False, description="Range starts inside a service body")


# legacy name -> current names it feeds
_LEGACY_ALIASES: Dict[str, tuple[str, ...]] = {
    "alignNames": ("alignFieldNames", "alignEnumNames"),
    "alignAssignments": ("alignEnumEquals", "alignEnumValues"),
    "alignStructAnnotations": ("alignAnnotations",),
}


class FormattingOptions(BaseModel):
    """Formatting options record."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    trailing_comma: TrailingComma = Field(default=TrailingComma.ADD, description="Field terminator policy")
    align_types: bool = Field(default=True, description="Align struct field types")
    align_field_names: bool = Field(default=True, description="Align struct field names")
    align_struct_defaults: bool = Field(default=False, description="Align '=' of struct field defaults")
    align_annotations: bool = Field(default=True, description="Align trailing annotations")
    align_comments: bool = Field(default=True, description="Align trailing line comments")
    align_enum_names: bool = Field(default=True, description="Pad enum member names")
    align_enum_equals: bool = Field(default=True, description="Align enum '=' signs")
    align_enum_values: bool = Field(default=True, description="Align enum values")
    indent_size: int = Field(default=4, ge=1, description="Spaces per indent level")
    max_line_length: int = Field(default=100, ge=1, description="Line length used by collectionStyle=auto")
    collection_style: CollectionStyle = Field(default=CollectionStyle.PRESERVE, description="Const collection layout")
    insert_spaces: bool = Field(default=True, description="Indent with spaces instead of tabs")
    tab_size: int = Field(default=4, ge=1, description="Visual width of a tab")
    initial_context: Optional[InitialContext] = Field(default=None, description="Range-resumption state")

    @model_validator(mode="before")
    @classmethod
    def _apply_legacy_aliases(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        resolved = dict(data)
        for legacy, targets in _LEGACY_ALIASES.items():
            if legacy not in resolved:
                continue
            value = resolved.pop(legacy)
            for target in targets:
                snake = _to_snake(target)
                if target not in resolved and snake not in resolved:
                    resolved[target] = value
        return resolved

    def with_context(self, context: Optional[InitialContext]) -> "FormattingOptions":
        """Return a copy carrying ``context`` as its initial context."""
        return self.model_copy(update={"initial_context": context})

    @classmethod
    def load(cls, path: Path) -> "FormattingOptions":
        """Load formatting options from a JSON file.

        Args:
            path: Path to JSON configuration file

        Returns:
            FormattingOptions: Validated options, or defaults if the file is missing

        Raises:
            pydantic.ValidationError: If JSON doesn't match the schema
            json.JSONDecodeError: If the file is not valid JSON
        """
        if not path.exists():
            return cls()
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls.model_validate(data)

    @classmethod
    def load_from_path_or_default(cls, path: Optional[Path], default_filename: str = ".thriftfmt.json") -> "FormattingOptions":
        """Load options from the given path or look for the default file.

        Args:
            path: Optional path to options file
            default_filename: Default filename to look for in current directory

        Returns:
            FormattingOptions: Loaded or default options
        """
        if path:
            return cls.load(path)

        default_path = Path(default_filename)
        if default_path.exists():
            return cls.load(default_path)

        return cls()


def _to_snake(name: str) -> str:
    return "".join(f"_{ch.lower()}" if ch.isupper() else ch for ch in name)


DEFAULT_OPTIONS = FormattingOptions()
