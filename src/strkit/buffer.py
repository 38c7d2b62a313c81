"""
StrKit buffer helpers.

Coercion of caller values into byte buffers and units, plus the single
allocation path used by every ``*_copy`` operation. Allocation failure is
turned into ``None`` here so the operations can propagate it as an absent
result.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from strkit.errors import BufferTypeError, ReadOnlyBufferError, UnitError

logger = logging.getLogger("strkit")

Text = Union[bytes, bytearray, memoryview]
Unit = Union[int, bytes, bytearray]


def as_text(value: Text, operation: str) -> Union[bytes, bytearray, memoryview]:
    """
    Validate a read-only buffer argument.

    Args:
        value: A ``bytes``, ``bytearray`` or ``memoryview``
        operation: Name of the calling operation, used in error messages

    Returns:
        The value itself, or a flat unsigned-byte view for a ``memoryview``

    Raises:
        BufferTypeError: If the value is not bytes-like
    """
    if isinstance(value, (bytes, bytearray)):
        return value
    if isinstance(value, memoryview):
        if value.ndim != 1:
            raise BufferTypeError("expected a one-dimensional buffer", operation)
        if not value.c_contiguous:
            raise BufferTypeError("expected a contiguous buffer", operation)
        return value if value.format == "B" else value.cast("B")
    raise BufferTypeError(
        f"expected a bytes-like buffer, got {type(value).__name__}", operation
    )


def as_mutable(value: bytearray, operation: str) -> bytearray:
    """
    Validate a buffer passed to an in-place operation.

    Raises:
        ReadOnlyBufferError: If the storage is not a ``bytearray``
        BufferTypeError: If the value is not bytes-like at all
    """
    if isinstance(value, bytearray):
        return value
    if isinstance(value, (bytes, memoryview)):
        raise ReadOnlyBufferError(
            "in-place operation needs a bytearray",
            operation,
            buffer_type=type(value).__name__,
        )
    raise BufferTypeError(
        f"expected a bytearray, got {type(value).__name__}", operation
    )


def as_unit(value: Unit, operation: str) -> int:
    """Return a character argument as an int in 0..255."""
    if isinstance(value, bool):
        raise UnitError("expected a byte, got bool", operation)
    if isinstance(value, int):
        if 0 <= value <= 255:
            return value
        raise UnitError(f"byte value {value} out of range 0..255", operation)
    if isinstance(value, (bytes, bytearray)):
        if len(value) == 1:
            return value[0]
        raise UnitError(f"expected a single byte, got {len(value)} bytes", operation)
    raise UnitError(f"expected a byte, got {type(value).__name__}", operation)


def allocate(size: int, operation: str) -> Optional[bytearray]:
    """
    Allocate a zero-filled buffer of ``size`` bytes.

    Returns ``None`` when the memory cannot be obtained, including sizes
    too large to index.
    """
    try:
        return bytearray(size)
    except (MemoryError, OverflowError):
        logger.warning("%s: failed to allocate %d bytes", operation, size)
        return None


def duplicate(text: Text, operation: str) -> Optional[bytearray]:
    """Copy ``text`` into a newly allocated buffer; ``None`` on allocation failure."""
    result = allocate(len(text), operation)
    if result is None:
        return None
    result[:] = text
    return result
