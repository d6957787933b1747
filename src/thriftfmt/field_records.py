# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Uniform field records handed to the alignment renderers.

A record looks the same whether it was built from an AST node or from a raw
line, so renderers never need to know where it came from. ``suffix``,
``comment`` and ``annotation`` are disjoint slices of the source line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

_SUFFIX_PARTS = re.compile(r"^(.*?)\s*([,;]?)\s*$", re.DOTALL)


@dataclass(frozen=True)
class StructField:
    """One struct, union or exception field.

    Attributes:
        line: Trimmed source text of the field
        field_id: Field id exactly as written (``"01"`` stays ``"01"``)
        qualifier: ``required``, ``optional`` or empty
        type_name: Generic-normalized type
        name: Field name
        suffix: `` = default`` followed by the original ``,``/``;`` terminator
        comment: Trailing line comment including its marker, or empty
        annotation: Trailing ``(...)`` annotation, or empty
    """
    line: str
    field_id: str
    qualifier: str
    type_name: str
    name: str
    suffix: str = ""
    comment: str = ""
    annotation: str = ""

    def split_suffix(self) -> Tuple[str, str]:
        """Return the (default clause, terminator) pair held in ``suffix``."""
        return split_suffix(self.suffix)


@dataclass(frozen=True)
class EnumField:
    """One enum member; ``suffix`` holds only the original terminator."""
    line: str
    name: str
    value: str = ""
    suffix: str = ""
    comment: str = ""
    annotation: str = ""


@dataclass(frozen=True)
class ConstField:
    """One const declaration; ``value`` keeps continuation lines joined by ``\\n``."""
    line: str
    type_name: str
    name: str
    value: str
    comment: str = ""

    @property
    def is_multiline(self) -> bool:
        return "\n" in self.value


def split_suffix(suffix: str) -> Tuple[str, str]:
    """Split a struct suffix into its default clause and terminator."""
    match = _SUFFIX_PARTS.match(suffix)
    if match is None:
        return suffix, ""
    return match.group(1), match.group(2)
