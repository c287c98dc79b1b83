"""Static package metadata surfaced to CLI commands and documentation.

The values mirror ``[project]`` in ``pyproject.toml``; a test keeps them in
sync. ``LAYEREDCONF_*`` identifiers select the platform-specific
configuration directories used by lib_layered_config.
"""

from __future__ import annotations

name = "strman"
title = "String manipulation utilities with transliteration, slugs and templates"
version = "1.0.0"
homepage = "https://github.com/strman-py/strman"
author = "strman contributors"
author_email = "strman@users.noreply.github.com"
shell_command = "strman"

LAYEREDCONF_VENDOR: str = "strman"
LAYEREDCONF_APP: str = "strman"
LAYEREDCONF_SLUG: str = "strman"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for strman:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
