"""
Error types for StrKit.

Absent input and allocation failure are reported as ``None`` results, not
exceptions. The errors below cover misuse of the API: values that are not
byte buffers, in-place calls on storage the caller cannot mutate, and
character arguments that are not a single byte.
"""

from typing import Optional


class StrKitError(Exception):
    """Base exception for all StrKit errors."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        self.message = message
        self.operation = operation
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class BufferTypeError(StrKitError, TypeError):
    """Raised when a value that is not bytes-like is passed as a buffer."""

    pass


class ReadOnlyBufferError(StrKitError, TypeError):
    """
    Raised when an in-place operation receives storage it cannot mutate.

    In-place operations write into the caller's buffer and return it, so the
    buffer must be a ``bytearray``. ``bytes`` objects and read-only views are
    rejected; use the ``*_copy`` variant instead.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        buffer_type: Optional[str] = None,
    ) -> None:
        self.buffer_type = buffer_type
        super().__init__(message, operation)

    def _format_message(self) -> str:
        parts = []

        if self.operation:
            parts.append(f"[{self.operation}]")

        parts.append(self.message)

        if self.buffer_type:
            parts.append(f"(got {self.buffer_type})")

        return " ".join(parts)


class UnitError(StrKitError, ValueError):
    """Raised when a character argument is not a single byte in 0..255."""

    pass
