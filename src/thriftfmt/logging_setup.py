# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Logging setup and initialization for the Thrift formatter."""

import logging
from pathlib import Path
from typing import Optional

from .logging_jsonl import JsonlLogger


def setup_loggers(log_path: Optional[Path], log_level: str = "WARNING") -> Optional[JsonlLogger]:
    """
    Configure stdlib logging and open the structured run log.

    Args:
        log_path: Path for the JSON Lines log (None disables it)
        log_level: Level name for the stdlib root logger

    Returns:
        A freshly truncated JsonlLogger, or None when ``log_path`` is None
    """
    logging.basicConfig(
        level=log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if log_path is None:
        return None
    logger = JsonlLogger(log_path)
    logger.start_fresh()
    return logger
