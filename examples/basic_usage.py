#!/usr/bin/env python3
"""Basic usage example for portbin.

This example demonstrates:
1. Defining a fixed-layout record
2. Encoding to the portable wire format
3. Writing records to a file and reading them back
4. Handling a truncated file
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from portbin import (
    BaseRecord,
    Float32,
    Int32,
    TruncatedInputError,
    encode_record,
    field_offsets,
    iter_records,
    write_record,
)


class Reading(BaseRecord):
    """Sensor reading: id, temperature and humidity."""

    sensor_id: Int32
    celsius: Float32
    humidity_pct: Float32


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("portbin Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Record layout...")
    for name, offset in field_offsets(Reading).items():
        print(f"   {name}: offset {offset}")
    print()

    print("2. Encoding a reading...")
    reading = Reading(sensor_id=7, celsius=21.5, humidity_pct=48.25)
    data = encode_record(reading)
    print(f"   Encoded size: {len(data)} bytes")
    print(f"   Hex: {data.hex()}")
    print()

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "readings.bin"

        print("3. Writing and reading back a file...")
        with open(path, "wb") as sink:
            for sensor_id in range(3):
                write_record(sink, Reading(sensor_id=sensor_id, celsius=20.0, humidity_pct=50.0))

        with open(path, "rb") as source:
            for record in iter_records(source, Reading):
                print(f"   {record}")
        print()

        print("4. Truncating the file...")
        path.write_bytes(path.read_bytes()[:-3])
        try:
            with open(path, "rb") as source:
                for record in iter_records(source, Reading):
                    print(f"   {record}")
        except TruncatedInputError as e:
            print(f"   Error: {e}")
        print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
