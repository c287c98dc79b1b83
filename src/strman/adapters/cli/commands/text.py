"""Text transformation commands.

Contents:
    * :func:`cli_slugify` - Print the URL slug of a text.
    * :func:`cli_transliterate` - Fold a text to ASCII.
    * :func:`cli_case` - Convert a text to another case style.
    * :func:`cli_truncate` - Shorten a text, optionally on word boundaries.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from strman.adapters.config.settings import load_settings
from strman.domain import casing
from strman.domain.editing import safe_truncate, truncate
from strman.domain.enums import CaseStyle
from strman.domain.errors import InvalidArgumentError
from strman.domain.transliteration import slugify, transliterate

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

CASE_CONVERTERS: dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.CAMEL: casing.to_camel_case,
    CaseStyle.STUDLY: casing.to_studly_case,
    CaseStyle.KEBAB: casing.to_kebab_case,
    CaseStyle.SNAKE: casing.to_snake_case,
    CaseStyle.START: casing.start_case,
    CaseStyle.HUMANIZE: casing.humanize,
    CaseStyle.UNDERSCORED: casing.underscored,
    CaseStyle.SWAP: casing.swap_case,
    CaseStyle.CAPITALIZE: casing.capitalize,
}


@click.command("slugify", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
def cli_slugify(text: str) -> None:
    """Print TEXT as a lowercase, hyphen-separated ASCII slug."""
    with lib_log_rich.runtime.bind(job_id="cli-slugify", extra={"command": "slugify"}):
        slug = slugify(text)
        logger.debug("Slugified text", extra={"input_length": len(text), "slug": slug})
        click.echo(slug)


@click.command("transliterate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
def cli_transliterate(text: str) -> None:
    """Print TEXT with accented and non-Latin letters folded to ASCII."""
    with lib_log_rich.runtime.bind(job_id="cli-transliterate", extra={"command": "transliterate"}):
        logger.debug("Transliterating text", extra={"input_length": len(text)})
        click.echo(transliterate(text))


@click.command("case", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--style",
    type=click.Choice([style.value for style in CaseStyle], case_sensitive=False),
    required=True,
    help="Target case style",
)
@click.argument("text")
def cli_case(style: str, text: str) -> None:
    """Print TEXT converted to the requested case style."""
    case_style = CaseStyle(style.lower())
    with lib_log_rich.runtime.bind(job_id="cli-case", extra={"command": "case", "style": case_style.value}):
        logger.debug("Converting case", extra={"style": case_style.value})
        click.echo(CASE_CONVERTERS[case_style](text))


@click.command("truncate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option("--length", type=int, required=True, help="Maximum length of the result")
@click.option("--filler", type=str, default=None, help="Text appended after the cut [config: strman.truncate_filler]")
@click.option(
    "--safe/--unsafe",
    "safe",
    default=None,
    help="Keep whole words only [config: strman.truncate_safe]",
)
@click.pass_context
def cli_truncate(ctx: click.Context, text: str, length: int, filler: str | None, safe: bool | None) -> None:
    """Shorten TEXT to at most LENGTH characters."""
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-truncate", extra={"command": "truncate", "length": length}):
        try:
            settings = load_settings(cli_ctx.config)
        except ValidationError as exc:
            logger.error("Invalid [strman] configuration", extra={"error": str(exc)})
            click.echo(f"\nError: invalid [strman] configuration: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc

        effective_filler = filler if filler is not None else settings.truncate_filler
        effective_safe = safe if safe is not None else settings.truncate_safe
        cut = safe_truncate if effective_safe else truncate
        try:
            result = cut(text, length, effective_filler)
        except InvalidArgumentError as exc:
            logger.error("Truncation rejected", extra={"error": str(exc)})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        logger.debug("Truncated text", extra={"safe": effective_safe, "result_length": len(result)})
        click.echo(result)


__all__ = [
    "CASE_CONVERTERS",
    "cli_case",
    "cli_slugify",
    "cli_transliterate",
    "cli_truncate",
]
