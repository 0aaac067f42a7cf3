"""Core module - configuration, logging, and shared models."""

from datasight.core.config import Settings, get_settings
from datasight.core.models.base import (
    ColumnType,
    CorrelationMethod,
    FileInfo,
    Result,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models - enums
    "ColumnType",
    "CorrelationMethod",
    # Models - base data structures
    "FileInfo",
    "Result",
]
