"""
StrKit ASCII tables.

Lookup tables for case folding and character classes. Every table is a
read-only ``uint8``/``bool`` numpy array indexed by byte value, so a whole
buffer can be mapped with a single fancy-indexing step.
"""

from __future__ import annotations

import numpy as np

# =============================================================================
# Character Classes
# =============================================================================

WHITESPACE = frozenset(b" \t\n\r\f\v")
DIGITS = frozenset(b"0123456789")
LETTERS = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")
ALPHANUMERIC = DIGITS | LETTERS

TERMINATOR = 0
NOT_FOUND = -1

# Distance between an ASCII lowercase letter and its uppercase counterpart
_CASE_OFFSET = ord("a") - ord("A")


def _build_fold(first: int, last: int, delta: int) -> np.ndarray:
    table = np.arange(256, dtype=np.uint8)
    table[first : last + 1] = np.arange(first + delta, last + 1 + delta, dtype=np.uint8)
    table.flags.writeable = False
    return table


def _build_mask(members: frozenset[int]) -> np.ndarray:
    mask = np.zeros(256, dtype=bool)
    mask[list(members)] = True
    mask.flags.writeable = False
    return mask


# =============================================================================
# Fold Tables
# =============================================================================

UPPER_FOLD = _build_fold(ord("a"), ord("z"), -_CASE_OFFSET)
LOWER_FOLD = _build_fold(ord("A"), ord("Z"), _CASE_OFFSET)
WHITESPACE_MASK = _build_mask(WHITESPACE)


def upper_fold(unit: int) -> int:
    """Map a lowercase letter to uppercase; other units are unchanged."""
    return int(UPPER_FOLD[unit])


def lower_fold(unit: int) -> int:
    """Map an uppercase letter to lowercase; other units are unchanged."""
    return int(LOWER_FOLD[unit])


def is_whitespace(unit: int) -> bool:
    """Check if unit is space, tab, newline, carriage return, form feed or vertical tab."""
    return unit in WHITESPACE
