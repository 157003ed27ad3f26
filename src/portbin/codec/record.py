"""Record encoder and decoder.

A record is encoded as the concatenation of its fields in declaration order,
each field using its primitive codec. Nothing else is written: no tags,
lengths, names or schema markers.
"""

from __future__ import annotations

from typing import Any, TypeVar, overload

from pydantic import ValidationError

from ..exceptions import DecodeError, EncodeError
from ..models.base import BaseRecord, Record
from .primitives import encode_float, encode_int32
from .schema import FieldKind, FieldSchema, RecordSchema
from .wire import WireReader, WireWriter

T = TypeVar("T", bound=BaseRecord)


def encode_record(record: BaseRecord) -> bytes:
    """Encode a record to its fixed-layout wire form.

    Args:
        record: Record instance to encode

    Returns:
        Concatenated field encodings (8 bytes for ``Record``)

    Raises:
        SchemaError: If the record declares an unsupported field
        EncodeError: If a field value is outside its wire domain

    Example:
        >>> encode_record(Record(id=123, value=456.789)).hex()
        '0000007b43e464fe'
    """
    schema = RecordSchema.from_model(type(record))
    writer = WireWriter()

    for field_schema in schema.fields:
        _encode_field(writer, field_schema, getattr(record, field_schema.name))

    return writer.to_bytes()


@overload
def decode_record(source: bytes | bytearray | memoryview | WireReader) -> Record: ...


@overload
def decode_record(
    source: bytes | bytearray | memoryview | WireReader, record_class: type[T]
) -> T: ...


def decode_record(
    source: bytes | bytearray | memoryview | WireReader,
    record_class: type[BaseRecord] = Record,
) -> BaseRecord:
    """Decode a record from its fixed-layout wire form.

    Fields are read in the same order they were encoded. Either every field
    decodes and a record is returned, or an exception is raised.

    Args:
        source: Bytes holding exactly one record, or a WireReader positioned
            at the start of one (it is advanced past the record)
        record_class: Record class to decode to

    Returns:
        Decoded record instance

    Raises:
        TruncatedInputError: If the source runs out before the last field
        DecodeError: If bytes remain after the record or the model rejects
            the decoded values
    """
    schema = RecordSchema.from_model(record_class)

    if isinstance(source, WireReader):
        reader = source
        exact = False
    else:
        reader = WireReader(source)
        exact = True

    field_values: dict[str, Any] = {}
    for field_schema in schema.fields:
        field_values[field_schema.name] = _decode_field(reader, field_schema)

    if exact and reader.bytes_remaining():
        raise DecodeError(
            f"{record_class.__name__}: expected {schema.total_bytes()} bytes, "
            f"got {reader.position() + reader.bytes_remaining()}"
        )

    try:
        return record_class(**field_values)
    except ValidationError as e:
        raise DecodeError(f"Failed to construct {record_class.__name__}: {e}") from e


def _encode_field(writer: WireWriter, field_schema: FieldSchema, value: Any) -> None:
    try:
        if field_schema.kind is FieldKind.INT32:
            writer.write_bytes(encode_int32(value))
        else:
            writer.write_bytes(encode_float(value))
    except EncodeError as e:
        raise EncodeError(f"Field {field_schema.name}: {e}") from e


def _decode_field(reader: WireReader, field_schema: FieldSchema) -> Any:
    if field_schema.kind is FieldKind.INT32:
        return reader.read_int32()
    return reader.read_float32()
