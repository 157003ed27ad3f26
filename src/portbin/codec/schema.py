"""Schema introspection for record models.

This module analyzes BaseRecord subclasses and extracts the wire layout:
the kind, size and byte offset of each field in declaration order.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Type

import numpy as np
from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from ..limits import WORD_SIZE


class FieldKind(enum.Enum):
    """Wire kind of a record field."""

    INT32 = "int32"
    FLOAT32 = "float32"


@dataclass(frozen=True)
class FieldSchema:
    """Schema information for a single field.

    Attributes:
        name: Field name
        kind: Wire kind of the field
        offset: Byte offset of the field within the encoded record
    """

    name: str
    kind: FieldKind
    offset: int

    @property
    def size(self) -> int:
        """Encoded size of the field in bytes."""
        return WORD_SIZE


class RecordSchema:
    """Schema information for an entire record.

    Example:
        >>> schema = RecordSchema.from_model(Record)
        >>> [(f.name, f.kind.value, f.offset) for f in schema.fields]
        [('id', 'int32', 0), ('value', 'float32', 4)]
    """

    def __init__(self, model_class: Type[BaseModel]) -> None:
        """Initialize schema from a Pydantic model.

        Args:
            model_class: Record class to introspect

        Raises:
            SchemaError: If a field is neither Int32 nor Float32
        """
        self.model_class = model_class
        self.fields: List[FieldSchema] = []
        self._introspect()

    @classmethod
    def from_model(cls, model_class: Type[BaseModel]) -> RecordSchema:
        """Create a schema from a record class."""
        return cls(model_class)

    def _introspect(self) -> None:
        offset = 0
        for field_name, field_info in self.model_class.model_fields.items():
            kind = self._field_kind(field_name, field_info)
            self.fields.append(FieldSchema(name=field_name, kind=kind, offset=offset))
            offset += WORD_SIZE

        if not self.fields:
            raise SchemaError(f"{self.model_class.__name__} declares no fields")

    @staticmethod
    def _field_kind(name: str, field_info: FieldInfo) -> FieldKind:
        annotation = field_info.annotation
        if annotation is None:
            raise SchemaError(f"Field {name} has no type annotation")

        if annotation is int:
            return FieldKind.INT32
        if annotation is np.float32:
            return FieldKind.FLOAT32

        raise SchemaError(
            f"Field {name}: unsupported type {annotation}. Supported: Int32, Float32."
        )

    def total_bytes(self) -> int:
        """Return the encoded size of the record in bytes."""
        return sum(field.size for field in self.fields)
