"""Byte-level packing and unpacking for the portable wire format.

This module provides the buffers that all codecs write to and read from.
Every multi-byte value is big-endian (most significant byte first), independent
of the host byte order.
"""

from __future__ import annotations

import numpy as np

from ..exceptions import TruncatedInputError
from ..limits import INT32_MAX, INT32_MIN, UINT32_MAX, WORD_SIZE


def float32_to_bits(value: float | np.floating) -> int:
    """Reinterpret a binary32 value as an unsigned 32-bit integer.

    Python floats and ints are first rounded to the nearest binary32. A
    ``numpy.float32`` is viewed as-is, so NaN payloads, signalling NaNs,
    signed zero and infinities keep their exact bit pattern.

    Args:
        value: Float to reinterpret

    Returns:
        Unsigned integer in the range 0 to 2**32 - 1

    Example:
        >>> hex(float32_to_bits(1.0))
        '0x3f800000'
    """
    # Finite doubles beyond the binary32 range round to infinity, as a C cast does.
    with np.errstate(over="ignore"):
        as_float32 = np.asarray(value, dtype=np.float32)
    return int(as_float32.view(np.uint32))


def bits_to_float32(bits: int) -> np.float32:
    """Reinterpret an unsigned 32-bit integer as a binary32 value.

    Args:
        bits: Unsigned integer in the range 0 to 2**32 - 1

    Returns:
        ``numpy.float32`` whose storage is exactly ``bits``

    Raises:
        ValueError: If bits is outside the unsigned 32-bit range
    """
    if bits < 0 or bits > UINT32_MAX:
        raise ValueError(f"bits must be 0-{UINT32_MAX}, got {bits}")
    return np.asarray(bits, dtype=np.uint32).view(np.float32)[()]


class WireWriter:
    """Appends fixed-width values to a byte buffer.

    Example:
        >>> writer = WireWriter()
        >>> writer.write_int32(123)
        >>> writer.write_float32(456.789)
        >>> data = writer.to_bytes()
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_uint32(self, value: int) -> None:
        """Write an unsigned 32-bit integer.

        Args:
            value: Integer in the range 0 to 2**32 - 1

        Raises:
            ValueError: If value doesn't fit in 32 unsigned bits
        """
        if value < 0 or value > UINT32_MAX:
            raise ValueError(f"Value {value} doesn't fit in 32 unsigned bits")
        self._write_word(value)

    def write_int32(self, value: int) -> None:
        """Write a signed 32-bit integer in two's complement.

        Args:
            value: Integer in the range -2**31 to 2**31 - 1

        Raises:
            ValueError: If value doesn't fit in 32 signed bits
        """
        if value < INT32_MIN or value > INT32_MAX:
            raise ValueError(
                f"Value {value} doesn't fit in 32 bits (range: {INT32_MIN} to {INT32_MAX})"
            )
        self._write_word(value)

    def write_float32(self, value: float | np.floating) -> None:
        """Write the raw binary32 bit pattern of a float.

        Args:
            value: Float to write (rounded to binary32 if not already)
        """
        self._write_word(float32_to_bits(value))

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes.

        Args:
            data: Bytes to append
        """
        self._buffer.extend(data)

    def byte_length(self) -> int:
        """Return the current number of bytes written."""
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)

    def _write_word(self, value: int) -> None:
        # Arithmetic shifts keep the sign for negative ints; the mask drops it.
        self._buffer.append((value >> 24) & 0xFF)
        self._buffer.append((value >> 16) & 0xFF)
        self._buffer.append((value >> 8) & 0xFF)
        self._buffer.append(value & 0xFF)


class WireReader:
    """Consumes fixed-width values from a byte buffer.

    Example:
        >>> reader = WireReader(data)
        >>> record_id = reader.read_int32()
        >>> value = reader.read_float32()
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Byte buffer to read from
        """
        self._data = bytes(data)
        self._position = 0

    def read_uint32(self) -> int:
        """Read an unsigned 32-bit integer.

        Raises:
            TruncatedInputError: If fewer than 4 bytes remain
        """
        b0, b1, b2, b3 = self._take(WORD_SIZE, "uint32")
        return (b0 << 24) | (b1 << 16) | (b2 << 8) | b3

    def read_int32(self) -> int:
        """Read a signed 32-bit integer in two's complement.

        Raises:
            TruncatedInputError: If fewer than 4 bytes remain
        """
        b0, b1, b2, b3 = self._take(WORD_SIZE, "int32")
        unsigned_value = (b0 << 24) | (b1 << 16) | (b2 << 8) | b3

        # Check sign bit (MSB)
        if unsigned_value & 0x80000000:
            return unsigned_value - (1 << 32)
        return unsigned_value

    def read_float32(self) -> np.float32:
        """Read a raw binary32 bit pattern.

        Raises:
            TruncatedInputError: If fewer than 4 bytes remain
        """
        b0, b1, b2, b3 = self._take(WORD_SIZE, "float32")
        return bits_to_float32((b0 << 24) | (b1 << 16) | (b2 << 8) | b3)

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes.

        Raises:
            TruncatedInputError: If fewer than num_bytes remain
        """
        return self._take(num_bytes, f"{num_bytes} bytes")

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position

    def _take(self, num_bytes: int, what: str) -> bytes:
        available = self.bytes_remaining()
        if num_bytes > available:
            raise TruncatedInputError(num_bytes, available, what)
        chunk = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return chunk
