# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Small helpers shared by the CLI commands."""

import difflib
from typing import Optional

import typer

from . import __version__

APP_VERSION = __version__


def version_callback(value: Optional[bool]) -> None:
    """Print the version and exit when ``--version`` is given."""
    if value:
        typer.echo(f"thriftfmt {APP_VERSION}")
        raise typer.Exit()


def unified_diff(original: str, formatted: str, path: str) -> str:
    """Unified diff of ``original`` against ``formatted`` for one file."""
    return "".join(difflib.unified_diff(
        original.splitlines(keepends=True),
        formatted.splitlines(keepends=True),
        fromfile=f"{path} (original)",
        tofile=f"{path} (formatted)",
    ))
