"""Reading and writing portable values over binary streams.

A sink is anything with ``write(bytes)``; a source is anything with
``read(n)`` that returns at most ``n`` bytes and ``b""`` at end of data.
Opening, closing and positioning the stream is the caller's responsibility.
Errors raised by the stream itself (``OSError``) propagate unchanged.

Example:
    >>> with open("data.bin", "wb") as sink:
    ...     write_record(sink, Record(id=123, value=456.789))
    >>> with open("data.bin", "rb") as source:
    ...     record = read_record(source)
"""

from __future__ import annotations

from typing import Iterator, Protocol, TypeVar

import numpy as np

from .codec.primitives import decode_float, decode_int32, encode_float, encode_int32
from .codec.record import decode_record, encode_record
from .codec.schema import RecordSchema
from .exceptions import TruncatedInputError
from .limits import WORD_SIZE
from .models.base import BaseRecord, Record

T = TypeVar("T", bound=BaseRecord)


class Sink(Protocol):
    """Append-only byte sink."""

    def write(self, data: bytes, /) -> object: ...


class Source(Protocol):
    """Sequential byte source."""

    def read(self, size: int, /) -> bytes: ...


def read_exact(source: Source, num_bytes: int, what: str = "data") -> bytes:
    """Read exactly num_bytes from a source.

    Short reads are retried until the source reports end of data.

    Raises:
        TruncatedInputError: If the source ends before num_bytes were read
    """
    chunks: list[bytes] = []
    remaining = num_bytes
    while remaining > 0:
        chunk = source.read(remaining)
        if not chunk:
            raise TruncatedInputError(num_bytes, num_bytes - remaining, what)
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def write_int32(sink: Sink, value: int) -> None:
    """Write a signed 32-bit integer to a sink."""
    sink.write(encode_int32(value))


def write_float(sink: Sink, value: float | np.floating) -> None:
    """Write a 32-bit float to a sink."""
    sink.write(encode_float(value))


def write_record(sink: Sink, record: BaseRecord) -> None:
    """Write a record to a sink."""
    sink.write(encode_record(record))


def read_int32(source: Source) -> int:
    """Read a signed 32-bit integer from a source."""
    return decode_int32(read_exact(source, WORD_SIZE, "int32"))


def read_float(source: Source) -> np.float32:
    """Read a 32-bit float from a source."""
    return decode_float(read_exact(source, WORD_SIZE, "float32"))


def read_record(source: Source, record_class: type[T] = Record) -> T:  # type: ignore[assignment]
    """Read one record from a source.

    Raises:
        TruncatedInputError: If the source ends before a full record was read
    """
    size = RecordSchema.from_model(record_class).total_bytes()
    data = read_exact(source, size, record_class.__name__)
    return decode_record(data, record_class)


def iter_records(source: Source, record_class: type[T] = Record) -> Iterator[T]:  # type: ignore[assignment]
    """Yield records until the source is exhausted.

    End of data exactly on a record boundary ends the iteration.

    Raises:
        TruncatedInputError: If the source ends in the middle of a record
    """
    size = RecordSchema.from_model(record_class).total_bytes()
    while True:
        first = source.read(size)
        if not first:
            return
        data = first
        if len(first) < size:
            try:
                data = first + read_exact(source, size - len(first), record_class.__name__)
            except TruncatedInputError as e:
                raise TruncatedInputError(
                    size, len(first) + e.available, record_class.__name__
                ) from e
        yield decode_record(data, record_class)
