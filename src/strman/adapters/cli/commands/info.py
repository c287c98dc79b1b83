"""Package information command.

Contents:
    * :func:`cli_info` - Display package metadata and the bundled defaults path.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from strman import __init__conf__

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_info(ctx: click.Context) -> None:
    """Print resolved metadata so users can inspect installation details."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()
        click.echo(f"    default_config = {cli_ctx.services.get_default_config_path()}")


__all__ = ["cli_info"]
