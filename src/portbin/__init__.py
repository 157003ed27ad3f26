"""portbin: Portable Binary Records

A Python library for encoding fixed-width numbers and fixed-layout records
into a byte representation that is identical on every host, regardless of
native byte order.

Wire format:
- int32: 4 bytes, big-endian, two's complement
- float32: 4 bytes, big-endian, raw IEEE-754 binary32 bit pattern
- record: fields concatenated in declaration order, nothing else

Quick Start:
    >>> from portbin import Record, encode_record, decode_record
    >>>
    >>> data = encode_record(Record(id=123, value=456.789))
    >>> len(data)
    8
    >>> decode_record(data).id
    123
"""

from __future__ import annotations

from .codec import (
    WireReader,
    WireWriter,
    bits_to_float32,
    decode_float,
    decode_int32,
    decode_record,
    encode_float,
    encode_int32,
    encode_record,
    float32_to_bits,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    PortbinError,
    SchemaError,
    TruncatedInputError,
)
from .models import BaseRecord, Float32, Int32, Record
from .stream import (
    iter_records,
    read_exact,
    read_float,
    read_int32,
    read_record,
    write_float,
    write_int32,
    write_record,
)
from .utils import encoded_size, field_offsets, field_sizes

__version__ = "0.1.0"

__all__ = [
    # Primitive codecs
    "encode_int32",
    "decode_int32",
    "encode_float",
    "decode_float",
    "float32_to_bits",
    "bits_to_float32",
    # Record codec
    "encode_record",
    "decode_record",
    "WireReader",
    "WireWriter",
    # Models
    "BaseRecord",
    "Record",
    "Int32",
    "Float32",
    # Streams
    "read_exact",
    "read_int32",
    "read_float",
    "read_record",
    "iter_records",
    "write_int32",
    "write_float",
    "write_record",
    # Exceptions
    "PortbinError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "TruncatedInputError",
    # Sizing
    "encoded_size",
    "field_sizes",
    "field_offsets",
    # Version
    "__version__",
]
