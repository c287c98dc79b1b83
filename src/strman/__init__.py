"""Public package surface: string manipulation functions, templates and metadata.

Every string function lives in the domain layer and is re-exported here so
callers can write ``strman.slugify(...)``. Configuration access is routed
through the composition layer.
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.accessors import (
    at,
    chars_count,
    first,
    head,
    inequal,
    is_blank,
    is_string,
    last,
    length,
    tail,
    unequal,
)
from .domain.casing import (
    capitalize,
    dasherize,
    humanize,
    lower_first,
    start_case,
    swap_case,
    to_camel_case,
    to_decamelize,
    to_kebab_case,
    to_snake_case,
    to_studly_case,
    underscored,
    upper_first,
)
from .domain.editing import (
    append,
    append_array,
    collapse_whitespace,
    ensure_left,
    ensure_right,
    insert,
    left_pad,
    left_trim,
    prepend,
    prepend_array,
    remove_left,
    remove_non_words,
    remove_right,
    remove_spaces,
    repeat,
    replace,
    reverse,
    right_pad,
    right_trim,
    safe_truncate,
    shuffle,
    slice_text,
    surround,
    trim_end,
    trim_start,
    truncate,
)
from .domain.encoding import (
    base64_decode,
    base64_encode,
    bin_decode,
    bin_encode,
    dec_decode,
    dec_encode,
    decode,
    encode,
    escape_reg_exp,
    hex_decode,
    hex_encode,
    html_decode,
    html_encode,
)
from .domain.errors import DuplicateDefinitionError, InvalidArgumentError, UndefinedVariableError
from .domain.formatting import NumberFormatOptions, format_number, format_string
from .domain.searching import (
    contains,
    contains_all,
    contains_any,
    count_substr,
    ends_with,
    index_of,
    is_enclosed_between,
    is_lower_case,
    is_upper_case,
    last_index_of,
    starts_with,
)
from .domain.splitting import (
    between,
    chars,
    chop,
    join,
    lines,
    remove_empty_strings,
    split,
    words,
    zip_strings,
)
from .domain.template import Template
from .domain.transliteration import slugify, transliterate

__all__ = [
    "DuplicateDefinitionError",
    "InvalidArgumentError",
    "NumberFormatOptions",
    "Template",
    "UndefinedVariableError",
    "append",
    "append_array",
    "at",
    "base64_decode",
    "base64_encode",
    "between",
    "bin_decode",
    "bin_encode",
    "capitalize",
    "chars",
    "chars_count",
    "chop",
    "collapse_whitespace",
    "contains",
    "contains_all",
    "contains_any",
    "count_substr",
    "dasherize",
    "dec_decode",
    "dec_encode",
    "decode",
    "encode",
    "ends_with",
    "ensure_left",
    "ensure_right",
    "escape_reg_exp",
    "first",
    "format_number",
    "format_string",
    "get_config",
    "head",
    "hex_decode",
    "hex_encode",
    "html_decode",
    "html_encode",
    "humanize",
    "index_of",
    "inequal",
    "insert",
    "is_blank",
    "is_enclosed_between",
    "is_lower_case",
    "is_string",
    "is_upper_case",
    "join",
    "last",
    "last_index_of",
    "left_pad",
    "left_trim",
    "length",
    "lines",
    "lower_first",
    "prepend",
    "prepend_array",
    "print_info",
    "remove_empty_strings",
    "remove_left",
    "remove_non_words",
    "remove_right",
    "remove_spaces",
    "repeat",
    "replace",
    "reverse",
    "right_pad",
    "right_trim",
    "safe_truncate",
    "shuffle",
    "slice_text",
    "slugify",
    "split",
    "start_case",
    "starts_with",
    "surround",
    "swap_case",
    "tail",
    "to_camel_case",
    "to_decamelize",
    "to_kebab_case",
    "to_snake_case",
    "to_studly_case",
    "transliterate",
    "trim_end",
    "trim_start",
    "truncate",
    "underscored",
    "unequal",
    "upper_first",
    "words",
    "zip_strings",
]
