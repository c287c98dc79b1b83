"""Turn ``--set SECTION.KEY=VALUE`` arguments into Config overrides."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values :func:`coerce_value` can produce from a command-line string."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` argument after parsing.

    Attributes:
        section: Top-level table, e.g. ``strman``.
        key_path: Remaining dotted components, outermost first.
        value: JSON-coerced value.
    """

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue

    @property
    def dotted_key(self) -> str:
        """Full dotted path, handy for log records."""
        return ".".join((self.section, *self.key_path))


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Everything before the first ``=`` is the dotted path and must contain at
    least one dot; everything after it is the value.

    Raises:
        ValueError: When ``=`` or the dot is missing, or a path component is empty.

    Examples:
        >>> override = parse_override("strman.truncate_filler=…")
        >>> override.section, override.key_path, override.value
        ('strman', ('truncate_filler',), '…')

        >>> parse_override("strman.truncate_safe=false").value
        False

        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=4096").key_path
        ('payload_limits', 'message_max_chars')
    """
    path, separator, value_text = raw.partition("=")
    if not separator:
        raise ValueError(f"Invalid override {raw!r}: expected SECTION.KEY=VALUE")
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must be dotted (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains an empty component")

    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value_text))


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as JSON when possible, otherwise keep it as text.

    Examples:
        >>> coerce_value("true"), coerce_value("16"), coerce_value("2.5")
        (True, 16, 2.5)
        >>> coerce_value("null")
        >>> coerce_value('["-", "_"]')
        ['-', '_']
        >>> coerce_value("...")
        '...'
        >>> coerce_value("")
        ''
    """
    if not raw:
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _merge_into(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Place ``override.value`` at its dotted path inside ``target``.

    Examples:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _merge_into(tree, ConfigOverride("strman", ("truncate_filler",), "~"))
        >>> _merge_into(tree, ConfigOverride("lib_log_rich", ("limits", "depth"), 3))
        >>> tree["strman"]["truncate_filler"], tree["lib_log_rich"]["limits"]
        ('~', {'depth': 3})
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    *parents, leaf = override.key_path
    for key in parents:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Cannot nest {override.dotted_key!r}: {key!r} already holds {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[leaf] = override.value


def _reject_scalar_parents(existing: Mapping[str, object], override: ConfigOverride) -> None:
    """Refuse an override whose path runs through a plain value of the loaded config.

    Examples:
        >>> loaded = {"strman": {"truncate_filler": "..."}}
        >>> _reject_scalar_parents(loaded, ConfigOverride("strman", ("truncate_filler",), "~"))
        >>> _reject_scalar_parents(loaded, ConfigOverride("strman", ("truncate_filler", "inner"), 1))
        Traceback (most recent call last):
        ...
        TypeError: Cannot nest 'strman.truncate_filler.inner': 'truncate_filler' already holds str
    """
    node: Mapping[str, object] = existing
    for key in (override.section, *override.key_path[:-1]):
        child = node.get(key)
        if child is None:
            return
        if not isinstance(child, Mapping):
            raise TypeError(f"Cannot nest {override.dotted_key!r}: {key!r} already holds {type(child).__name__}")
        node = cast("Mapping[str, object]", child)


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` argument merged on top.

    Raises:
        ValueError: When any argument is malformed.
        TypeError: When a dotted path descends into a plain value.

    Examples:
        >>> cfg = Config({"strman": {"truncate_filler": "..."}}, {})
        >>> apply_overrides(cfg, ("strman.truncate_filler=~",))["strman"]["truncate_filler"]
        '~'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    existing = config.as_dict()
    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        override = parse_override(raw)
        _reject_scalar_parents(existing, override)
        _merge_into(merged, override)
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
