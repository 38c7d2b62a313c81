"""
StrKit - Classification and Comparison.

Length, class predicates, equality, searching and character access.
None of these functions mutate or allocate; absent input (``None``) yields
the documented sentinel instead of raising.
"""

from __future__ import annotations

from typing import Optional

from strkit.ascii import ALPHANUMERIC, DIGITS, LETTERS, NOT_FOUND, TERMINATOR
from strkit.buffer import Text, Unit, as_text, as_unit

# =============================================================================
# Length and Predicates
# =============================================================================


def length(text: Optional[Text]) -> int:
    """Return number of units in text, 0 if absent."""
    if text is None:
        return 0
    return len(as_text(text, "length"))


def _all_in(text: Optional[Text], members: frozenset[int], operation: str) -> bool:
    if text is None:
        return False
    data = as_text(text, operation)
    if not data:
        return False
    return all(unit in members for unit in data)


def is_numeric(text: Optional[Text]) -> bool:
    """Check if text is non-empty and contains only ASCII digits."""
    return _all_in(text, DIGITS, "is_numeric")


def is_alpha(text: Optional[Text]) -> bool:
    """Check if text is non-empty and contains only ASCII letters."""
    return _all_in(text, LETTERS, "is_alpha")


def is_alphanumeric(text: Optional[Text]) -> bool:
    """Check if text is non-empty and contains only ASCII letters or digits."""
    return _all_in(text, ALPHANUMERIC, "is_alphanumeric")


def is_equal(a: Optional[Text], b: Optional[Text]) -> bool:
    """
    Compare two buffers unit by unit.

    Two absent buffers are equal; an absent and a present buffer are not.

    Examples:
        >>> is_equal(b"abc", bytearray(b"abc"))
        True
        >>> is_equal(None, b"")
        False
    """
    if a is None or b is None:
        return a is None and b is None
    return as_text(a, "is_equal") == as_text(b, "is_equal")


def is_palindrome(text: Optional[Text]) -> bool:
    """
    Check if text reads the same forwards and backwards.

    Absent input is not a palindrome. Empty and single-unit input is.
    """
    if text is None:
        return False
    data = as_text(text, "is_palindrome")
    front, back = 0, len(data) - 1
    while front < back:
        if data[front] != data[back]:
            return False
        front += 1
        back -= 1
    return True


# =============================================================================
# Searching
# =============================================================================


def index_of(text: Optional[Text], unit: Unit) -> int:
    """Find index of first occurrence of unit, -1 if not found."""
    search = as_unit(unit, "index_of")
    if text is None:
        return NOT_FOUND
    for position, current in enumerate(as_text(text, "index_of")):
        if current == search:
            return position
    return NOT_FOUND


def last_index_of(text: Optional[Text], unit: Unit) -> int:
    """Find index of last occurrence of unit, -1 if not found."""
    search = as_unit(unit, "last_index_of")
    if text is None:
        return NOT_FOUND
    data = as_text(text, "last_index_of")
    for position in range(len(data) - 1, -1, -1):
        if data[position] == search:
            return position
    return NOT_FOUND


def count_char(text: Optional[Text], unit: Unit) -> int:
    """Count occurrences of unit in text."""
    search = as_unit(unit, "count_char")
    if text is None:
        return 0
    return sum(1 for current in as_text(text, "count_char") if current == search)


def index_of_str(text: Optional[Text], substring: Optional[Text]) -> int:
    """
    Find the first occurrence of substring in text.

    Each start position in text is tried in turn and the needle is compared
    unit by unit, abandoning the position on the first mismatch.

    Args:
        text: Buffer to search in
        substring: Buffer to search for

    Returns:
        Zero-based index of the first match, 0 for an empty substring,
        or -1 if not found or if either buffer is absent

    Examples:
        >>> index_of_str(b"hello world", b"world")
        6
        >>> index_of_str(b"hello", b"")
        0
    """
    if text is None or substring is None:
        return NOT_FOUND
    haystack = as_text(text, "index_of_str")
    needle = as_text(substring, "index_of_str")
    if not needle:
        return 0

    needle_len = len(needle)
    for start in range(len(haystack) - needle_len + 1):
        offset = 0
        while offset < needle_len and haystack[start + offset] == needle[offset]:
            offset += 1
        if offset == needle_len:
            return start
    return NOT_FOUND


def contains(text: Optional[Text], substring: Optional[Text]) -> bool:
    """Check if text contains substring."""
    return index_of_str(text, substring) >= 0


def starts_with(text: Optional[Text], prefix: Optional[Text]) -> bool:
    """Check if text starts with prefix."""
    if text is None or prefix is None:
        return False
    data = as_text(text, "starts_with")
    head = as_text(prefix, "starts_with")
    return len(head) <= len(data) and data[: len(head)] == head


def ends_with(text: Optional[Text], suffix: Optional[Text]) -> bool:
    """Check if text ends with suffix."""
    if text is None or suffix is None:
        return False
    data = as_text(text, "ends_with")
    tail = as_text(suffix, "ends_with")
    return len(tail) <= len(data) and data[len(data) - len(tail) :] == tail


# =============================================================================
# Character Access
# =============================================================================


def first_char(text: Optional[Text]) -> int:
    """Return first unit, or 0 if text is absent or empty."""
    if text is None:
        return TERMINATOR
    data = as_text(text, "first_char")
    return data[0] if data else TERMINATOR


def last_char(text: Optional[Text]) -> int:
    """Return last unit, or 0 if text is absent or empty."""
    if text is None:
        return TERMINATOR
    data = as_text(text, "last_char")
    return data[-1] if data else TERMINATOR


def char_at(text: Optional[Text], index: int) -> int:
    """Get unit at index; 0 for absent text or an index outside [0, length)."""
    if text is None or index < 0:
        return TERMINATOR
    data = as_text(text, "char_at")
    if index >= len(data):
        return TERMINATOR
    return data[index]
