"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A required argument was ``None`` or outside the accepted domain.

    Raised by every string function before any work is done, so callers
    never observe partial results. Inherits from ValueError so generic
    ``except ValueError`` handlers keep working.

    Example:
        >>> from strman.domain.errors import InvalidArgumentError
        >>> err = InvalidArgumentError("'value' should be not None.")
        >>> str(err)
        "'value' should be not None."
        >>> isinstance(err, ValueError)
        True
    """


class DuplicateDefinitionError(ValueError):
    """A template declared the same placeholder name more than once.

    Attributes:
        name: The placeholder name that appeared a second time.

    Example:
        >>> err = DuplicateDefinitionError("user")
        >>> err.name
        'user'
        >>> str(err)
        "Duplicate placeholder definition: 'user'"
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate placeholder definition: {name!r}")
        self.name = name


class UndefinedVariableError(LookupError):
    """A value was bound to a placeholder the template never declared.

    Attributes:
        name: The unknown placeholder name.

    Example:
        >>> err = UndefinedVariableError("missing")
        >>> err.name
        'missing'
        >>> isinstance(err, LookupError)
        True
    """

    def __init__(self, name: str) -> None:
        super().__init__(f"No placeholder defined with name {name!r}")
        self.name = name


__all__ = [
    "DuplicateDefinitionError",
    "InvalidArgumentError",
    "UndefinedVariableError",
]
