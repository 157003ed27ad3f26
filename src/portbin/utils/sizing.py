"""Record size and layout utilities.

This module provides functions to inspect the wire layout of a record
without encoding it.
"""

from __future__ import annotations

from pydantic import BaseModel

from ..codec.schema import RecordSchema


def _schema_for(record_or_class: BaseModel | type[BaseModel]) -> RecordSchema:
    if isinstance(record_or_class, BaseModel):
        return RecordSchema.from_model(type(record_or_class))
    return RecordSchema.from_model(record_or_class)


def encoded_size(record_or_class: BaseModel | type[BaseModel]) -> int:
    """Calculate the encoded size of a record in bytes.

    The size depends only on the record's fields, never on their values.

    Args:
        record_or_class: Record instance or class

    Returns:
        Size in bytes

    Raises:
        SchemaError: If the record declares an unsupported field

    Example:
        >>> encoded_size(Record)
        8
    """
    return _schema_for(record_or_class).total_bytes()


def field_sizes(record_or_class: BaseModel | type[BaseModel]) -> dict[str, int]:
    """Get the size in bytes of each field of a record.

    Example:
        >>> field_sizes(Record)
        {'id': 4, 'value': 4}
    """
    return {field.name: field.size for field in _schema_for(record_or_class).fields}


def field_offsets(record_or_class: BaseModel | type[BaseModel]) -> dict[str, int]:
    """Get the byte offset of each field within the encoded record.

    Example:
        >>> field_offsets(Record)
        {'id': 0, 'value': 4}
    """
    return {field.name: field.offset for field in _schema_for(record_or_class).fields}
