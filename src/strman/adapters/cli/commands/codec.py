"""Encode and decode commands.

Contents:
    * :func:`cli_encode` - Encode a text with one of the reversible codecs.
    * :func:`cli_decode` - Decode a text produced by :func:`cli_encode`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import lib_log_rich.runtime
import rich_click as click

from strman.domain import encoding
from strman.domain.enums import Codec
from strman.domain.errors import InvalidArgumentError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

ENCODERS: dict[Codec, Callable[[str], str]] = {
    Codec.BASE64: encoding.base64_encode,
    Codec.BIN: encoding.bin_encode,
    Codec.DEC: encoding.dec_encode,
    Codec.HEX: encoding.hex_encode,
    Codec.HTML: encoding.html_encode,
}

DECODERS: dict[Codec, Callable[[str], str]] = {
    Codec.BASE64: encoding.base64_decode,
    Codec.BIN: encoding.bin_decode,
    Codec.DEC: encoding.dec_decode,
    Codec.HEX: encoding.hex_decode,
    Codec.HTML: encoding.html_decode,
}

_CODEC_OPTION = click.option(
    "--codec",
    type=click.Choice([codec.value for codec in Codec], case_sensitive=False),
    default=Codec.BASE64.value,
    show_default=True,
    help="Codec to apply",
)


def _run_codec(direction: str, table: dict[Codec, Callable[[str], str]], codec_name: str, text: str) -> None:
    codec = Codec(codec_name.lower())
    extra = {"command": direction, "codec": codec.value}
    with lib_log_rich.runtime.bind(job_id=f"cli-{direction}", extra=extra):
        try:
            result = table[codec](text)
        except InvalidArgumentError as exc:
            logger.error("Cannot %s input", direction, extra={"codec": codec.value, "error": str(exc)})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        click.echo(result)


@click.command("encode", context_settings=CLICK_CONTEXT_SETTINGS)
@_CODEC_OPTION
@click.argument("text")
def cli_encode(codec: str, text: str) -> None:
    """Print TEXT encoded with CODEC."""
    _run_codec("encode", ENCODERS, codec, text)


@click.command("decode", context_settings=CLICK_CONTEXT_SETTINGS)
@_CODEC_OPTION
@click.argument("text")
def cli_decode(codec: str, text: str) -> None:
    """Print TEXT decoded with CODEC."""
    _run_codec("decode", DECODERS, codec, text)


__all__ = [
    "DECODERS",
    "ENCODERS",
    "cli_decode",
    "cli_encode",
]
