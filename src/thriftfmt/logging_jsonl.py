# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""JSON Lines logger for structured per-run records."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Union


class JsonlLogger:
    """Append-only JSON Lines writer.

    Each :meth:`write` produces one line and is flushed immediately so the
    log is readable while the run is still going.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._file: Optional[TextIO] = None

    def start_fresh(self) -> None:
        """Truncate (or create) the log file."""
        self.close()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("", encoding="utf-8")

    def _ensure_open(self) -> TextIO:
        if self._file is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._file = self.path.open("a", encoding="utf-8")
        return self._file

    def write(self, record: Dict[str, Any]) -> None:
        handle = self._ensure_open()
        handle.write(json.dumps(record, ensure_ascii=False) + "\n")
        handle.flush()

    def append_notes(self, file: str, notes: List[str]) -> None:
        """Record free-form notes about one file; nothing is written for no notes."""
        if not notes:
            return
        self.write({"file": file, "notes": list(notes)})

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "JsonlLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
