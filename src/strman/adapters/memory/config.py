"""In-memory configuration adapters for tests.

They satisfy the same Protocols as the production adapters without touching
the filesystem or lib_layered_config's discovery.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty Config; commands fall back to their built-in defaults."""
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path that is never read."""
    return Path(tempfile.gettempdir()) / "strman" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
