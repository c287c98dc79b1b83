"""CLI command implementations registered on the root group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Text commands from :mod:`.text`
    * Codec commands from :mod:`.codec`
    * Template command from :mod:`.template`
"""

from __future__ import annotations

from .codec import cli_decode, cli_encode
from .config import cli_config
from .info import cli_info
from .template import cli_template
from .text import cli_case, cli_slugify, cli_transliterate, cli_truncate

__all__ = [
    "cli_case",
    "cli_config",
    "cli_decode",
    "cli_encode",
    "cli_info",
    "cli_slugify",
    "cli_template",
    "cli_transliterate",
    "cli_truncate",
]
