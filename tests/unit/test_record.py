"""Unit tests for record encoding/decoding."""

from __future__ import annotations

import numpy as np
import pytest
from pydantic import ValidationError

from portbin import (
    BaseRecord,
    DecodeError,
    EncodeError,
    Float32,
    Int32,
    Record,
    SchemaError,
    TruncatedInputError,
    WireReader,
    decode_record,
    encode_float,
    encode_int32,
    encode_record,
)


class Reading(BaseRecord):
    """Three-field record."""

    sensor_id: Int32
    celsius: Float32
    sequence: Int32


class BadRecord(BaseRecord):
    """Record with an unsupported field."""

    name: str


class TestRecordModel:
    """Test Record validation."""

    def test_value_rounded_to_float32(self, sample_record: Record) -> None:
        """Test float values are stored as binary32."""
        assert isinstance(sample_record.value, np.float32)
        assert sample_record.value == np.float32(456.789)

    def test_id_range(self) -> None:
        """Test ids outside int32 are rejected."""
        with pytest.raises(ValidationError):
            Record(id=1 << 31, value=0.0)

        with pytest.raises(ValidationError):
            Record(id=-(1 << 31) - 1, value=0.0)

    def test_id_strict(self) -> None:
        """Test ids must be real ints."""
        with pytest.raises(ValidationError):
            Record(id=True, value=0.0)

        with pytest.raises(ValidationError):
            Record(id="123", value=0.0)

    def test_value_must_be_number(self) -> None:
        """Test values must be real numbers."""
        with pytest.raises(ValidationError):
            Record(id=1, value="1.5")

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Record(id=1, value=1.0, name="x")

    def test_validate_assignment(self, sample_record: Record) -> None:
        """Test assignments are validated and converted."""
        sample_record.value = 2.5
        assert isinstance(sample_record.value, np.float32)

        with pytest.raises(ValidationError):
            sample_record.id = 1 << 40

    def test_dump(self, sample_record: Record) -> None:
        """Test model_dump gives plain Python numbers."""
        dumped = sample_record.model_dump()

        assert dumped["id"] == 123
        assert type(dumped["value"]) is float


class TestEncodeRecord:
    """Test encode_record."""

    def test_field_order(self, sample_record: Record, sample_bytes: bytes) -> None:
        """Test id comes before value."""
        data = encode_record(sample_record)

        assert data == encode_int32(123) + encode_float(456.789)
        assert data == sample_bytes

    def test_fixed_length(self) -> None:
        """Test Record always encodes to 8 bytes."""
        for record_id, value in [(0, 0.0), (-1, -1.0), ((1 << 31) - 1, float("inf"))]:
            assert len(encode_record(Record(id=record_id, value=value))) == 8

    def test_custom_record(self) -> None:
        """Test a record with more fields."""
        data = encode_record(Reading(sensor_id=7, celsius=1.0, sequence=-1))

        assert data == b"\x00\x00\x00\x07" b"\x3f\x80\x00\x00" b"\xff\xff\xff\xff"

    def test_invalid_value_bypassing_validation(self) -> None:
        """Test encode-time range checks."""
        # Use model_construct to bypass Pydantic validation
        record = Record.model_construct(id=1 << 31, value=np.float32(0.0))

        with pytest.raises(EncodeError, match="Field id"):
            encode_record(record)

    def test_unsupported_field(self) -> None:
        """Test schema errors."""
        with pytest.raises(SchemaError, match="unsupported type"):
            encode_record(BadRecord(name="x"))


class TestDecodeRecord:
    """Test decode_record."""

    def test_sample(self, sample_bytes: bytes) -> None:
        """Test decoding the sample record."""
        record = decode_record(sample_bytes)

        assert isinstance(record, Record)
        assert record.id == 123
        assert record.value == np.float32(456.789)

    def test_custom_record_class(self) -> None:
        """Test decoding to a given record class."""
        data = b"\x00\x00\x00\x07" b"\x3f\x80\x00\x00" b"\xff\xff\xff\xff"
        reading = decode_record(data, Reading)

        assert reading == Reading(sensor_id=7, celsius=1.0, sequence=-1)

    @pytest.mark.parametrize("length", range(8))
    def test_truncated(self, sample_bytes: bytes, length: int) -> None:
        """Test every short prefix signals truncation."""
        with pytest.raises(TruncatedInputError):
            decode_record(sample_bytes[:length])

    def test_truncated_in_second_field(self, sample_bytes: bytes) -> None:
        """Test truncation in the value field reports that field's shortfall."""
        with pytest.raises(TruncatedInputError, match="float32") as exc_info:
            decode_record(sample_bytes[:6])

        assert exc_info.value.needed == 4
        assert exc_info.value.available == 2

    def test_trailing_bytes(self, sample_bytes: bytes) -> None:
        """Test extra bytes after the record."""
        with pytest.raises(DecodeError, match="expected 8 bytes, got 9"):
            decode_record(sample_bytes + b"\x00")

    def test_from_reader(self, sample_bytes: bytes) -> None:
        """Test decoding consecutive records from one reader."""
        second = encode_record(Record(id=-5, value=-0.5))
        reader = WireReader(sample_bytes + second)

        first = decode_record(reader)
        assert first.id == 123
        assert reader.position() == 8

        assert decode_record(reader) == Record(id=-5, value=-0.5)
        assert reader.bytes_remaining() == 0

    def test_schema_error(self) -> None:
        """Test decoding into an unsupported record class."""
        with pytest.raises(SchemaError):
            decode_record(b"\x00" * 4, BadRecord)
