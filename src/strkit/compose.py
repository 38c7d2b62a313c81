"""
StrKit - Composition.

Splitting a buffer into tokens, joining tokens back together, and
concatenation. Each token returned by :func:`split` is its own
``bytearray``. The caller owns the token list and may hand it to
:func:`release_tokens` once done with it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from strkit.buffer import Text, Unit, allocate, as_text, as_unit

logger = logging.getLogger("strkit")


def release_tokens(tokens: Optional[list[bytearray]]) -> None:
    """Release a split result: empty every token, then the list itself."""
    if tokens is None:
        return
    for token in tokens:
        token.clear()
    tokens.clear()


def split(text: Optional[Text], delimiter: Unit) -> Optional[list[bytearray]]:
    """
    Split text at every occurrence of a one-byte delimiter.

    The first pass counts delimiters to size the result; the second copies
    each token into its own buffer. A text with n delimiters always yields
    n + 1 tokens, so empty tokens between adjacent delimiters, and at either
    end, are kept.

    Args:
        text: Buffer to split
        delimiter: Byte value (or one-byte bytes) to split on

    Returns:
        List of newly allocated tokens, or None if text is absent or a token
        could not be allocated. On allocation failure every token built so
        far is released first.

    Examples:
        >>> split(b"a,,b", b",")
        [bytearray(b'a'), bytearray(b''), bytearray(b'b')]
        >>> split(b"abc", b",")
        [bytearray(b'abc')]
    """
    sep = as_unit(delimiter, "split")
    if text is None:
        return None
    data = as_text(text, "split")

    token_count = 1 + sum(1 for unit in data if unit == sep)
    logger.debug("split: %d bytes into %d tokens", len(data), token_count)

    tokens: list[bytearray] = []
    token_start = 0
    for position in range(len(data) + 1):
        if position < len(data) and data[position] != sep:
            continue
        token = allocate(position - token_start, "split")
        if token is None:
            release_tokens(tokens)
            return None
        token[:] = data[token_start:position]
        tokens.append(token)
        token_start = position + 1

    assert len(tokens) == token_count
    return tokens


def join(tokens: Optional[Iterable[Optional[Text]]], separator: Unit) -> Optional[bytearray]:
    """
    Join tokens into a new buffer with one separator byte between each pair.

    An empty sequence gives an empty buffer. Absent tokens count as empty.

    Examples:
        >>> join([b"", b"x", b""], b"-")
        bytearray(b'-x-')
    """
    sep = as_unit(separator, "join")
    if tokens is None:
        return None
    parts = [b"" if token is None else as_text(token, "join") for token in tokens]
    if not parts:
        return allocate(0, "join")

    total_len = sum(len(part) for part in parts) + len(parts) - 1
    result = allocate(total_len, "join")
    if result is None:
        return None

    position = 0
    for index, part in enumerate(parts):
        result[position : position + len(part)] = part
        position += len(part)
        if index < len(parts) - 1:
            result[position] = sep
            position += 1
    return result


def concat(first: Optional[Text], second: Optional[Text]) -> Optional[bytearray]:
    """Concatenate two buffers into a new one; absent operands count as empty."""
    head = b"" if first is None else as_text(first, "concat")
    tail = b"" if second is None else as_text(second, "concat")

    result = allocate(len(head) + len(tail), "concat")
    if result is None:
        return None
    result[: len(head)] = head
    result[len(head) :] = tail
    return result
