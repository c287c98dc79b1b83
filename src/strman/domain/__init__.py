"""Domain layer - pure string functions with no I/O or framework dependencies.

Contents:
    * :mod:`.transliteration` - ASCII folding and slug derivation
    * :mod:`.template` - ``<=NAME>`` placeholder substitution
    * :mod:`.accessors`, :mod:`.searching`, :mod:`.editing`,
      :mod:`.splitting`, :mod:`.casing`, :mod:`.encoding`,
      :mod:`.formatting` - the string utility library
    * :mod:`.enums` - Domain enumerations (OutputFormat, Codec, CaseStyle)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import CaseStyle, Codec, OutputFormat
from .errors import DuplicateDefinitionError, InvalidArgumentError, UndefinedVariableError
from .template import Template
from .transliteration import slugify, transliterate

__all__ = [
    # Enums
    "CaseStyle",
    "Codec",
    "OutputFormat",
    # Errors
    "DuplicateDefinitionError",
    "InvalidArgumentError",
    "UndefinedVariableError",
    # Core engines
    "Template",
    "slugify",
    "transliterate",
]
