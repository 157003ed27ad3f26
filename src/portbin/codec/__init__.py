"""Portable binary codec for portbin.

This module provides encoding and decoding of 32-bit integers, 32-bit floats
and fixed-layout records in a big-endian wire format.
"""

from __future__ import annotations

from .primitives import decode_float, decode_int32, encode_float, encode_int32
from .record import decode_record, encode_record
from .schema import FieldKind, FieldSchema, RecordSchema
from .wire import WireReader, WireWriter, bits_to_float32, float32_to_bits

__all__ = [
    "encode_int32",
    "decode_int32",
    "encode_float",
    "decode_float",
    "encode_record",
    "decode_record",
    "float32_to_bits",
    "bits_to_float32",
    "WireReader",
    "WireWriter",
    "RecordSchema",
    "FieldSchema",
    "FieldKind",
]
