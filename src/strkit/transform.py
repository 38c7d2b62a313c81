"""
StrKit - Transformation.

Case conversion, trimming, reversal, character replacement, substring
extraction and repetition.

Most operations come in two forms:

- ``name(buf)`` mutates a caller-owned ``bytearray`` and returns it. The
  buffer never grows; trimming compacts data within it.
- ``name_copy(text)`` leaves its input alone and returns a new
  ``bytearray``, or ``None`` if the input is absent or memory runs out.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from strkit.ascii import LOWER_FOLD, UPPER_FOLD, WHITESPACE_MASK, is_whitespace, upper_fold
from strkit.buffer import Text, Unit, allocate, as_mutable, as_text, as_unit, duplicate

# =============================================================================
# Helpers
# =============================================================================


def _apply_fold(buf: bytearray, table: np.ndarray) -> bytearray:
    """Map every unit of buf through a 256-entry fold table, in place."""
    if buf:
        view = np.frombuffer(buf, dtype=np.uint8)
        view[:] = table[view]
    return buf


def _leading_end(data: Text) -> int:
    """Index of the first non-whitespace unit, or len(data) if there is none."""
    start = 0
    while start < len(data) and is_whitespace(data[start]):
        start += 1
    return start


def _trailing_start(data: Text, floor: int = 0) -> int:
    """Index just past the last non-whitespace unit, never below floor."""
    end = len(data)
    while end > floor and is_whitespace(data[end - 1]):
        end -= 1
    return end


def _compact(buf: bytearray, start: int, end: int) -> bytearray:
    """Keep only buf[start:end], shifted down to the front of buf."""
    assert 0 <= start <= end <= len(buf)
    del buf[end:]
    del buf[:start]
    return buf


def _copy_span(text: Text, start: int, end: int, operation: str) -> Optional[bytearray]:
    result = allocate(end - start, operation)
    if result is None:
        return None
    result[:] = text[start:end]
    return result


# =============================================================================
# Reversal
# =============================================================================


def reverse(buf: Optional[bytearray]) -> Optional[bytearray]:
    """Reverse buf in place."""
    if buf is None:
        return None
    as_mutable(buf, "reverse").reverse()
    return buf


def reverse_copy(text: Optional[Text]) -> Optional[bytearray]:
    """Return a reversed copy of text."""
    if text is None:
        return None
    result = duplicate(as_text(text, "reverse_copy"), "reverse_copy")
    if result is None:
        return None
    result.reverse()
    return result


# =============================================================================
# Case Conversion
# =============================================================================


def capitalize(buf: Optional[bytearray]) -> Optional[bytearray]:
    """Uppercase the first unit of buf in place; the rest is untouched."""
    if buf is None:
        return None
    as_mutable(buf, "capitalize")
    if buf:
        buf[0] = upper_fold(buf[0])
    return buf


def capitalize_copy(text: Optional[Text]) -> Optional[bytearray]:
    """Return a copy of text with its first unit uppercased."""
    if text is None:
        return None
    result = duplicate(as_text(text, "capitalize_copy"), "capitalize_copy")
    if result is None:
        return None
    return capitalize(result)


def uppercase(buf: Optional[bytearray]) -> Optional[bytearray]:
    """Convert every lowercase ASCII letter in buf to uppercase, in place."""
    if buf is None:
        return None
    return _apply_fold(as_mutable(buf, "uppercase"), UPPER_FOLD)


def uppercase_copy(text: Optional[Text]) -> Optional[bytearray]:
    """Return an uppercased copy of text."""
    if text is None:
        return None
    result = duplicate(as_text(text, "uppercase_copy"), "uppercase_copy")
    if result is None:
        return None
    return _apply_fold(result, UPPER_FOLD)


def lowercase(buf: Optional[bytearray]) -> Optional[bytearray]:
    """Convert every uppercase ASCII letter in buf to lowercase, in place."""
    if buf is None:
        return None
    return _apply_fold(as_mutable(buf, "lowercase"), LOWER_FOLD)


def lowercase_copy(text: Optional[Text]) -> Optional[bytearray]:
    """Return a lowercased copy of text."""
    if text is None:
        return None
    result = duplicate(as_text(text, "lowercase_copy"), "lowercase_copy")
    if result is None:
        return None
    return _apply_fold(result, LOWER_FOLD)


def title_case(buf: Optional[bytearray]) -> Optional[bytearray]:
    """
    Convert buf to title case in place.

    A unit starts a word when it is the first unit or follows whitespace.
    Word-starting units are uppercased and every other unit is lowercased,
    so ``b"McDonald"`` becomes ``b"Mcdonald"``. Whitespace is unchanged by
    both folds.

    Args:
        buf: Caller-owned buffer to convert

    Returns:
        The same buffer, or None if buf is absent

    Examples:
        >>> title_case(bytearray(b" mcdonald lake "))
        bytearray(b' Mcdonald Lake ')
    """
    if buf is None:
        return None
    as_mutable(buf, "title_case")
    if not buf:
        return buf

    view = np.frombuffer(buf, dtype=np.uint8)
    word_start = np.empty(len(view), dtype=bool)
    word_start[0] = True
    word_start[1:] = WHITESPACE_MASK[view[:-1]]
    view[:] = np.where(word_start, UPPER_FOLD[view], LOWER_FOLD[view])
    return buf


def title_case_copy(text: Optional[Text]) -> Optional[bytearray]:
    """Return a title-cased copy of text."""
    if text is None:
        return None
    result = duplicate(as_text(text, "title_case_copy"), "title_case_copy")
    if result is None:
        return None
    return title_case(result)


# =============================================================================
# Trimming
# =============================================================================


def trim(buf: Optional[bytearray]) -> Optional[bytearray]:
    """
    Strip leading and trailing whitespace from buf in place.

    An all-whitespace buffer becomes empty.
    """
    if buf is None:
        return None
    as_mutable(buf, "trim")
    start = _leading_end(buf)
    return _compact(buf, start, _trailing_start(buf, start))


def trim_copy(text: Optional[Text]) -> Optional[bytearray]:
    """Return a copy of text without leading and trailing whitespace."""
    if text is None:
        return None
    data = as_text(text, "trim_copy")
    start = _leading_end(data)
    return _copy_span(data, start, _trailing_start(data, start), "trim_copy")


def ltrim(buf: Optional[bytearray]) -> Optional[bytearray]:
    """Strip leading whitespace, shifting the rest of buf to the front."""
    if buf is None:
        return None
    as_mutable(buf, "ltrim")
    return _compact(buf, _leading_end(buf), len(buf))


def ltrim_copy(text: Optional[Text]) -> Optional[bytearray]:
    """Return a copy of text without leading whitespace."""
    if text is None:
        return None
    data = as_text(text, "ltrim_copy")
    return _copy_span(data, _leading_end(data), len(data), "ltrim_copy")


def rtrim(buf: Optional[bytearray]) -> Optional[bytearray]:
    """Strip trailing whitespace from buf in place."""
    if buf is None:
        return None
    as_mutable(buf, "rtrim")
    return _compact(buf, 0, _trailing_start(buf))


def rtrim_copy(text: Optional[Text]) -> Optional[bytearray]:
    """Return a copy of text without trailing whitespace."""
    if text is None:
        return None
    data = as_text(text, "rtrim_copy")
    return _copy_span(data, 0, _trailing_start(data), "rtrim_copy")


# =============================================================================
# Extraction and Generation
# =============================================================================


def substring(text: Optional[Text], start: int, length: int) -> Optional[bytearray]:
    """
    Extract up to ``length`` units of text beginning at ``start``.

    Arguments are clamped rather than rejected:

    - a negative start is treated as 0
    - a start at or past the end gives an empty result
    - a negative length, or one running past the end, takes the remainder

    Examples:
        >>> substring(b"hello world", -3, 5)
        bytearray(b'hello')
        >>> substring(b"hello", 10, 3)
        bytearray(b'')
    """
    if text is None:
        return None
    data = as_text(text, "substring")
    text_len = len(data)

    if start < 0:
        start = 0
    if start >= text_len:
        return allocate(0, "substring")
    if length < 0 or start + length > text_len:
        length = text_len - start

    return _copy_span(data, start, start + length, "substring")


def repeat(text: Optional[Text], times: int) -> Optional[bytearray]:
    """Return text repeated ``times`` times; empty for times <= 0 or empty text."""
    if text is None:
        return None
    data = as_text(text, "repeat")
    unit_len = len(data)
    if times <= 0 or unit_len == 0:
        return allocate(0, "repeat")

    result = allocate(unit_len * times, "repeat")
    if result is None:
        return None
    for i in range(times):
        result[i * unit_len : (i + 1) * unit_len] = data
    return result


# =============================================================================
# Character Replacement
# =============================================================================


def replace_char(buf: Optional[bytearray], find: Unit, replace: Unit) -> Optional[bytearray]:
    """Replace every ``find`` unit in buf with ``replace``, in place."""
    old = as_unit(find, "replace_char")
    new = as_unit(replace, "replace_char")
    if buf is None:
        return None
    as_mutable(buf, "replace_char")
    if buf:
        view = np.frombuffer(buf, dtype=np.uint8)
        view[view == old] = new
    return buf


def replace_char_copy(text: Optional[Text], find: Unit, replace: Unit) -> Optional[bytearray]:
    """Return a copy of text with every ``find`` unit replaced by ``replace``."""
    old = as_unit(find, "replace_char_copy")
    new = as_unit(replace, "replace_char_copy")
    if text is None:
        return None
    result = duplicate(as_text(text, "replace_char_copy"), "replace_char_copy")
    if result is None:
        return None
    return replace_char(result, old, new)
