"""Application layer - port definitions the adapters implement.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
]
