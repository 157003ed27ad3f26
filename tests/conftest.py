"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io

import pytest

from portbin import Record


@pytest.fixture
def sample_record() -> Record:
    """The sample record written by the demo."""
    return Record(id=123, value=456.789)


@pytest.fixture
def sample_bytes() -> bytes:
    """Wire form of the sample record: id=123, value=binary32(456.789)."""
    return bytes.fromhex("0000007b43e464fe")


class TrickleSource:
    """Source that returns at most one byte per read."""

    def __init__(self, data: bytes) -> None:
        self._stream = io.BytesIO(data)

    def read(self, size: int) -> bytes:
        return self._stream.read(min(size, 1))


@pytest.fixture
def trickle_source():
    """Factory for sources that force short reads."""
    return TrickleSource
