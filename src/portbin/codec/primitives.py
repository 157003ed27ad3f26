"""Encoders and decoders for the two primitive wire types.

Both types occupy exactly 4 bytes, big-endian. Integers are two's complement;
floats are the raw IEEE-754 binary32 bit pattern, bit-cast to an unsigned
integer and split with the same byte order.
"""

from __future__ import annotations

import numbers

import numpy as np

from ..exceptions import DecodeError, EncodeError
from ..limits import WORD_SIZE
from .wire import WireReader, WireWriter


def encode_int32(value: int) -> bytes:
    """Encode a signed 32-bit integer.

    Args:
        value: Integer in the range -2**31 to 2**31 - 1

    Returns:
        4 bytes, most significant first

    Raises:
        EncodeError: If value is not an integer or doesn't fit in 32 bits

    Examples:
        >>> encode_int32(1)
        b'\\x00\\x00\\x00\\x01'
        >>> encode_int32(-1)
        b'\\xff\\xff\\xff\\xff'
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise EncodeError(f"int32: expected int, got {type(value).__name__}")

    writer = WireWriter()
    try:
        writer.write_int32(int(value))
    except ValueError as err:
        raise EncodeError(f"int32: {err}") from err
    return writer.to_bytes()


def decode_int32(data: bytes | bytearray | memoryview) -> int:
    """Decode a signed 32-bit integer from exactly 4 bytes.

    Raises:
        TruncatedInputError: If fewer than 4 bytes are given
        DecodeError: If more than 4 bytes are given
    """
    reader = WireReader(data)
    value = reader.read_int32()
    _check_consumed(reader, "int32")
    return value


def encode_float(value: float | np.floating) -> bytes:
    """Encode a 32-bit IEEE-754 float by its raw bit pattern.

    A ``numpy.float32`` is encoded bit-for-bit. Python floats and ints are
    rounded to the nearest binary32 first.

    Args:
        value: Float to encode

    Returns:
        4 bytes, most significant first

    Raises:
        EncodeError: If value is not a real number

    Example:
        >>> encode_float(1.0).hex()
        '3f800000'
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, np.floating)):
        raise EncodeError(f"float32: expected float, got {type(value).__name__}")

    writer = WireWriter()
    try:
        writer.write_float32(value)
    except OverflowError as err:
        raise EncodeError(f"float32: {err}") from err
    return writer.to_bytes()


def decode_float(data: bytes | bytearray | memoryview) -> np.float32:
    """Decode a 32-bit IEEE-754 float from exactly 4 bytes.

    The returned ``numpy.float32`` has exactly the stored bit pattern.

    Raises:
        TruncatedInputError: If fewer than 4 bytes are given
        DecodeError: If more than 4 bytes are given
    """
    reader = WireReader(data)
    value = reader.read_float32()
    _check_consumed(reader, "float32")
    return value


def _check_consumed(reader: WireReader, what: str) -> None:
    if reader.bytes_remaining():
        raise DecodeError(
            f"{what}: expected {WORD_SIZE} bytes, got {reader.position() + reader.bytes_remaining()}"
        )
