"""Placeholder substitution over ``<=NAME>`` markers.

A :class:`Template` registers every placeholder name when it is built,
accepts values for those names afterwards, and renders on demand. Names
never disappear and a bound name never becomes unbound again.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import Decimal
from types import MappingProxyType

from .errors import DuplicateDefinitionError, InvalidArgumentError, UndefinedVariableError
from .guards import require

PLACEHOLDER_PATTERN = re.compile(r"<=(.*?)>")


class Template:
    """Text with named ``<=NAME>`` placeholders bound after construction.

    Args:
        template: Template text. Every ``<=NAME>`` marker declares ``NAME``.

    Raises:
        InvalidArgumentError: When ``template`` is ``None``.
        DuplicateDefinitionError: When a name is declared twice.

    Example:
        >>> tpl = Template("Hello <=name>, you are <=age> years old")
        >>> tpl.add("name", "Ada").add("age", 36).execute()
        'Hello Ada, you are 36 years old'
        >>> Template("Hi <=who>").execute()
        'Hi <=who>'
    """

    __slots__ = ("_template", "_values")

    def __init__(self, template: str) -> None:
        require(template, "template")
        values: dict[str, str | None] = {}
        for match in PLACEHOLDER_PATTERN.finditer(template):
            name = match.group(1)
            if name in values:
                raise DuplicateDefinitionError(name)
            values[name] = None
        self._template = template
        self._values = values

    @property
    def placeholders(self) -> tuple[str, ...]:
        """Declared names in order of first appearance."""
        return tuple(self._values)

    @property
    def bound(self) -> Mapping[str, str]:
        """Read-only snapshot of the names that currently carry a value."""
        return MappingProxyType({name: value for name, value in self._values.items() if value is not None})

    @property
    def unbound(self) -> tuple[str, ...]:
        """Declared names still waiting for a value."""
        return tuple(name for name, value in self._values.items() if value is None)

    def add(self, name: str, value: str | int | float | Decimal) -> Template:
        """Bind ``value`` to the declared placeholder ``name``.

        Numbers are stored as ``str(value)``. Binding an already bound name
        replaces the earlier value.

        Returns:
            This template, so calls can be chained.

        Raises:
            InvalidArgumentError: When ``value`` is ``None``, a ``bool`` or not a
                string or number.
            UndefinedVariableError: When ``name`` was never declared.
        """
        if name not in self._values:
            raise UndefinedVariableError(name)
        require(value)
        if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
            raise InvalidArgumentError(f"Unsupported value type for {name!r}: {type(value).__name__}")
        self._values[name] = value if isinstance(value, str) else str(value)
        return self

    def execute(self) -> str:
        """Render the template, leaving unbound markers in place.

        Substitution is a single pass over the template text: values are
        inserted verbatim and never scanned for further markers.
        """
        return PLACEHOLDER_PATTERN.sub(self._substitute, self._template)

    def to_string(self) -> str:
        """Return the construction text, unchanged by any binding."""
        return self._template

    def _substitute(self, match: re.Match[str]) -> str:
        value = self._values.get(match.group(1))
        return match.group(0) if value is None else value

    def __str__(self) -> str:
        return self._template

    def __repr__(self) -> str:
        return f"Template({self._template!r})"


__all__ = [
    "PLACEHOLDER_PATTERN",
    "Template",
]
