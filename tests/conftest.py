"""Shared pytest fixtures for domain, CLI and module-entry tests.

Fixtures carry descriptive names that read as plain English and are picked
up implicitly through pytest's conftest discovery.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from strman.composition import AppServices

_COVERAGE_BASENAME = ".coverage.strman"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete SQLite sidecar files a crashed coverage run may have left behind."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database on a local temp directory.

    Runs before ``pytest-cov`` creates its ``Coverage()`` object, so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Assert on ``result.stdout``: log records may reach stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide ``build_production`` for tests that need the real adapters."""
    from strman.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide ``build_testing``: empty config, no display, no logging runtime."""
    from strman.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the ``get_config`` cache before the test.

    Only clears before: a monkeypatched loader may lack ``cache_clear``.
    """
    from strman.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real ``Config`` objects from plain dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests.

    Only this factory changes if lib_layered_config renames SourceInfo keys.
    """

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    The factory serves that config, renders with the real display adapter
    and initialises the real logging runtime.
    """
    from strman.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
        )
        return lambda: services

    return _create


@pytest.fixture
def profile_capturing_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any], list[str | None]], Callable[[], AppServices]]:
    """Like ``config_cli_context`` but records every ``profile`` passed to get_config."""
    from strman.adapters.memory import display_config_in_memory
    from strman.composition import AppServices, build_production

    def _create(config_data: dict[str, Any], captured: list[str | None]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured.append(profile)
            return config

        services = AppServices(
            get_config=_capturing_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=display_config_in_memory,
            init_logging=prod.init_logging,
        )
        return lambda: services

    return _create
