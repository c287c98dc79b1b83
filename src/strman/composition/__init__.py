"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging.setup import init_logging

# Checked by pyright only: every adapter must satisfy its Protocol.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding every port implementation the CLI uses."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire lib_layered_config and lib_log_rich backed adapters."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters: empty config, no display, no logging runtime."""
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "display_config",
    "get_config",
    "get_default_config_path",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
