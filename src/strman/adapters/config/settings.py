"""Typed view of the ``[strman]`` configuration section."""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict


class StrmanSettings(BaseModel):
    """Defaults for the text commands, validated at the config boundary.

    Example:
        >>> StrmanSettings().truncate_filler
        '...'
        >>> StrmanSettings.model_validate({"truncate_safe": False}).truncate_safe
        False
    """

    truncate_filler: str = "..."
    truncate_safe: bool = True
    template_strict: bool = False

    model_config = ConfigDict(extra="ignore", frozen=True)


def load_settings(config: Config) -> StrmanSettings:
    """Parse the ``[strman]`` section, falling back to model defaults.

    Raises:
        pydantic.ValidationError: When a configured value has the wrong type.

    Example:
        >>> load_settings(Config({"strman": {"truncate_filler": "~"}}, {})).truncate_filler
        '~'
        >>> load_settings(Config({}, {})).template_strict
        False
    """
    raw: object = config.get("strman", default={})
    return StrmanSettings.model_validate(cast("dict[str, object]", raw) if raw else {})


__all__ = [
    "StrmanSettings",
    "load_settings",
]
