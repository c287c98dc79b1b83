"""Configuration adapter - loading, display, overrides and typed settings.

Contents:
    * :mod:`.loader` - lib_layered_config loading with caching
    * :mod:`.display` - configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.settings` - pydantic model for the ``[strman]`` section
"""

from __future__ import annotations

from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import StrmanSettings, load_settings

__all__ = [
    "StrmanSettings",
    "apply_overrides",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_settings",
]
