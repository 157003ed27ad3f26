"""Write/read-back demo and record dump commands."""

from __future__ import annotations

import logging
from pathlib import Path

from ..codec.record import encode_record
from ..config import DemoConfig
from ..models.base import BaseRecord, Record
from ..stream import iter_records, read_record, write_record

logger = logging.getLogger(__name__)


def run_demo(config: DemoConfig) -> Record:
    """Write a sample record to a file, then read it back from a fresh handle.

    Args:
        config: Demo configuration (file path and sample values)

    Returns:
        The record read back from the file

    Raises:
        TruncatedInputError: If the file holds less than one record
        OSError: If the file cannot be written or read
    """
    record = Record(id=config.record_id, value=config.value)

    logger.info("Writing record id=%d value=%r to %s", record.id, record.value, config.path)
    with open(config.path, "wb") as sink:
        write_record(sink, record)

    with open(config.path, "rb") as source:
        read_back = read_record(source)
    logger.info("Read back %d bytes from %s", config.path.stat().st_size, config.path)

    return read_back


def format_record(record: Record) -> str:
    """Format a record the way the demo prints it."""
    return f"Read id: {record.id}, value: {record.value:.6f}"


def dump_file(path: Path) -> list[str]:
    """Decode every record in a file.

    Returns:
        One line per record: index, wire bytes in hex, and field values

    Raises:
        TruncatedInputError: If the file ends in the middle of a record
    """
    lines = []
    with open(path, "rb") as source:
        for index, record in enumerate(iter_records(source)):
            lines.append(f"{index:>6}  {encode_record(record).hex()}  {_fields(record)}")
    logger.debug("Decoded %d records from %s", len(lines), path)
    return lines


def _fields(record: BaseRecord) -> str:
    return ", ".join(f"{name}={value}" for name, value in record)
