"""
Pytest configuration and shared fixtures for StrKit tests.
"""

import pytest

from strkit.buffer import allocate as real_allocate

SAMPLES = [
    b"",
    b"a",
    b"ab",
    b"racecar",
    b"Hello, World!",
    b"  padded both  ",
    b"\t\n\r\f\v",
    b"a,b,,c,",
    b"MiXeD 123 case_",
    b"\x00embedded\x00zero",
]


@pytest.fixture(params=SAMPLES, ids=repr)
def sample(request) -> bytes:
    """Each sample buffer in turn."""
    return request.param


@pytest.fixture
def failing_allocator(monkeypatch):
    """
    Factory fixture that makes ``allocate`` in a module fail.

    The first ``succeed`` calls go through to the real allocator; every
    later call returns None as if memory ran out. Returns the list of
    requested sizes so tests can see how far the operation got.
    """

    def _install(module, succeed: int = 0) -> list[int]:
        calls: list[int] = []

        def _allocate(size: int, operation: str):
            calls.append(size)
            if len(calls) > succeed:
                return None
            return real_allocate(size, operation)

        monkeypatch.setattr(module, "allocate", _allocate)
        return calls

    return _install
