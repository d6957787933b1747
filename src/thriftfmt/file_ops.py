# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Reading, writing and discovering Thrift files.

Every failure comes back as an IOResult carrying a FileError.
"""

from pathlib import Path
from typing import Callable, Iterable, List, Union

from returns.io import IOResult, impure_safe

from .errors import FileError, FileOperation, file_not_found, permission_denied

THRIFT_SUFFIX = ".thrift"


def read_text(path: Union[str, Path], encoding: str = 'utf-8') -> IOResult[str, FileError]:
    """
    Read a Thrift source file.

    Newlines are kept exactly as stored (no universal-newline translation)
    so that CRLF input reaches the formatter untouched.

    Args:
        path: File to read
        encoding: Text encoding

    Returns:
        IOResult with the text, or a FileError describing the failure
    """
    path = Path(path)

    @impure_safe
    def _read() -> str:
        with path.open("r", encoding=encoding, newline="") as handle:
            return handle.read()

    return _read().alt(_error_mapper(path, "read"))


def write_text(path: Union[str, Path], content: str, encoding: str = 'utf-8') -> IOResult[None, FileError]:
    """Write ``content`` to ``path``, creating parent directories.

    Newlines in ``content`` are written untranslated.
    """
    path = Path(path)

    @impure_safe
    def _write() -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(content)

    return _write().alt(_error_mapper(path, "write"))


def discover_thrift_files(paths: Iterable[Union[str, Path]]) -> List[Path]:
    """Expand directories into the sorted ``*.thrift`` files beneath them.

    Plain file arguments are kept as given, whatever their suffix.
    """
    found: List[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            found.extend(sorted(p for p in path.rglob(f"*{THRIFT_SUFFIX}") if p.is_file()))
        else:
            found.append(path)
    return found


def _error_mapper(path: Path, operation: FileOperation) -> Callable[[Exception], FileError]:
    """Translate an OS or codec exception raised during ``operation`` on ``path``."""
    def mapper(exc: Exception) -> FileError:
        if operation == "read" and isinstance(exc, FileNotFoundError):
            return file_not_found(path)
        if isinstance(exc, PermissionError):
            return permission_denied(path, operation)
        reason = "Encoding error" if isinstance(exc, UnicodeError) else f"Cannot {operation}"
        return FileError(
            message=f"{reason} ({path}): {exc}",
            path=path,
            operation=operation,
            original_error=str(exc),
        )
    return mapper
