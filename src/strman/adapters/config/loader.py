"""Layered configuration loading with per-profile caching."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from strman import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Config loader callable that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names lib_layered_config cannot map to a directory.

    Raises:
        ValueError: For empty, overlong or path-like names.

    Examples:
        >>> validate_profile("staging")
        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` shipped next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One Config per (profile, start_dir) for the lifetime of the CLI process.
@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration for ``profile``.

    Layers are merged in precedence order defaults → app → host → user →
    dotenv → env, so environment variables win over every file.

    Args:
        profile: Optional profile; inserts ``profile/<name>/`` into every
            configuration path.
        start_dir: Directory that seeds ``.env`` discovery; the working
            directory when None.

    Returns:
        Immutable configuration with provenance tracking.

    Example:
        >>> config = get_config()
        >>> config.get("strman", default={}).get("truncate_filler")
        '...'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Forget every cached Config so the next call re-reads all layers."""
    _read_layers.cache_clear()


# lru_cache's cache_clear is invisible once the function is cast to the Protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "ConfigLoaderProtocol",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
