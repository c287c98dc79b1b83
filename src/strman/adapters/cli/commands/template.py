"""Template rendering command.

Contents:
    * :func:`cli_template` - Bind ``--var`` values into a ``<=NAME>`` template and print it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from strman.adapters.config.settings import load_settings
from strman.domain.errors import DuplicateDefinitionError, InvalidArgumentError, UndefinedVariableError
from strman.domain.template import Template

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _parse_variable(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> tuple[tuple[str, str], ...]:
    """Split each ``NAME=VALUE`` argument at its first ``=``.

    Raises:
        click.BadParameter: When an argument has no ``=`` or an empty name.
    """
    pairs: list[tuple[str, str]] = []
    for raw in values:
        name, separator, value = raw.partition("=")
        if not separator or not name:
            raise click.BadParameter(f"expected NAME=VALUE, got {raw!r}", ctx=ctx, param=param)
        pairs.append((name, value))
    return tuple(pairs)


def _read_template(template_text: str | None, template_file: Path | None) -> str:
    """Return the template source from the argument or the ``--file`` path.

    Raises:
        click.UsageError: Unless exactly one source is given.
        SystemExit: With FILE_NOT_FOUND when ``--file`` does not exist.
    """
    if template_file is None:
        if template_text is None:
            raise click.UsageError("Provide TEMPLATE or --file.")
        return template_text
    if template_text is not None:
        raise click.UsageError("TEMPLATE and --file are mutually exclusive.")
    try:
        return template_file.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        logger.error("Template file not found", extra={"path": str(template_file)})
        click.echo(f"\nError: template file not found: {template_file}", err=True)
        raise SystemExit(ExitCode.FILE_NOT_FOUND) from exc


def _fail(message: str, code: ExitCode, exc: Exception) -> NoReturn:
    logger.error(message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {exc}", err=True)
    raise SystemExit(code) from exc


@click.command("template", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("template_text", metavar="TEMPLATE", required=False)
@click.option(
    "--file",
    "template_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read the template from a UTF-8 file instead of TEMPLATE",
)
@click.option(
    "--var",
    "variables",
    multiple=True,
    metavar="NAME=VALUE",
    callback=_parse_variable,
    help="Bind VALUE to the <=NAME> placeholder (repeatable)",
)
@click.option(
    "--strict/--lenient",
    "strict",
    default=None,
    help="Fail when a placeholder stays unbound [config: strman.template_strict]",
)
@click.pass_context
def cli_template(
    ctx: click.Context,
    template_text: str | None,
    template_file: Path | None,
    variables: tuple[tuple[str, str], ...],
    strict: bool | None,
) -> None:
    r"""Render a template whose placeholders are written as <=NAME>.

    \b
    Example:
        strman template "Hello <=name>!" --var name=Ada
    """
    cli_ctx = get_cli_context(ctx)
    source = _read_template(template_text, template_file)

    extra = {"command": "template", "variables": len(variables)}
    with lib_log_rich.runtime.bind(job_id="cli-template", extra=extra):
        try:
            settings = load_settings(cli_ctx.config)
        except ValidationError as exc:
            _fail("Invalid [strman] configuration", ExitCode.CONFIG_ERROR, exc)
        effective_strict = strict if strict is not None else settings.template_strict

        try:
            template = Template(source)
            for name, value in variables:
                template.add(name, value)
        except DuplicateDefinitionError as exc:
            _fail("Template declares a placeholder twice", ExitCode.DATA_ERROR, exc)
        except (UndefinedVariableError, InvalidArgumentError) as exc:
            _fail("Template binding rejected", ExitCode.INVALID_ARGUMENT, exc)

        logger.info(
            "Rendering template",
            extra={"placeholders": list(template.placeholders), "unbound": list(template.unbound)},
        )
        if effective_strict and template.unbound:
            click.echo(f"\nError: unbound placeholders: {', '.join(template.unbound)}", err=True)
            raise SystemExit(ExitCode.DATA_ERROR)
        rendered = template.execute()
        click.echo(rendered, nl=not rendered.endswith("\n"))


__all__ = ["cli_template"]
