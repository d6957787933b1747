# =============================================================================
# thriftfmt - Thrift IDL Formatter
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Process-level settings read from ``THRIFTFMT_*`` environment variables."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class ThriftfmtSettings(BaseSettings):
    """Global thriftfmt configuration."""

    log_level: str = Field(default="WARNING", description="Logging level")
    log_path: Optional[Path] = Field(default=None, description="JSON Lines log file")
    config_file: Optional[Path] = Field(default=None, description="Formatting options JSON file")

    model_config = {
        "env_prefix": "THRIFTFMT_",
        "env_file": ".thriftfmt.env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }
