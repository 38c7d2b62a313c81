"""
StrKit - ASCII byte-string primitives.

Length, case conversion, trimming, splitting and joining, substring
extraction, searching, classification, repetition and character
replacement over ``bytes``-like buffers. In-place operations mutate a
caller-owned ``bytearray``; ``*_copy`` operations and the other
allocating operations return a new ``bytearray``.
"""

import logging

from strkit.classify import (
    char_at,
    contains,
    count_char,
    ends_with,
    first_char,
    index_of,
    index_of_str,
    is_alpha,
    is_alphanumeric,
    is_equal,
    is_numeric,
    is_palindrome,
    last_char,
    last_index_of,
    length,
    starts_with,
)
from strkit.compose import concat, join, release_tokens, split
from strkit.errors import (
    BufferTypeError,
    ReadOnlyBufferError,
    StrKitError,
    UnitError,
)
from strkit.transform import (
    capitalize,
    capitalize_copy,
    lowercase,
    lowercase_copy,
    ltrim,
    ltrim_copy,
    repeat,
    replace_char,
    replace_char_copy,
    reverse,
    reverse_copy,
    rtrim,
    rtrim_copy,
    substring,
    title_case,
    title_case_copy,
    trim,
    trim_copy,
    uppercase,
    uppercase_copy,
)

logging.getLogger("strkit").addHandler(logging.NullHandler())

__version__ = "1.0.0"
__all__ = [
    # Errors
    "StrKitError",
    "BufferTypeError",
    "ReadOnlyBufferError",
    "UnitError",
    # Classification and comparison
    "length",
    "is_numeric",
    "is_alpha",
    "is_alphanumeric",
    "is_equal",
    "is_palindrome",
    "index_of",
    "last_index_of",
    "count_char",
    "index_of_str",
    "contains",
    "starts_with",
    "ends_with",
    "first_char",
    "last_char",
    "char_at",
    # Transformation
    "reverse",
    "reverse_copy",
    "capitalize",
    "capitalize_copy",
    "uppercase",
    "uppercase_copy",
    "lowercase",
    "lowercase_copy",
    "title_case",
    "title_case_copy",
    "trim",
    "trim_copy",
    "ltrim",
    "ltrim_copy",
    "rtrim",
    "rtrim_copy",
    "substring",
    "repeat",
    "replace_char",
    "replace_char_copy",
    # Composition
    "split",
    "join",
    "concat",
    "release_tokens",
]
