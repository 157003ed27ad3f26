"""Record layout inspection command."""

from __future__ import annotations

import importlib.util
import inspect
import sys
from pathlib import Path

from ..codec.schema import RecordSchema
from ..models.base import BaseRecord, Record


def analyze_file(file_path: Path) -> list[type[BaseRecord]]:
    """Print the layout of every BaseRecord class defined in a Python file.

    Args:
        file_path: Path to Python file containing record definitions

    Returns:
        The record classes found
    """
    spec = importlib.util.spec_from_file_location("user_module", file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules["user_module"] = module
    spec.loader.exec_module(module)

    # Only classes defined in this file, not imported ones
    record_classes = [
        obj
        for _name, obj in inspect.getmembers(module, inspect.isclass)
        if issubclass(obj, BaseRecord)
        and obj is not BaseRecord
        and obj.__module__ == "user_module"
    ]

    if not record_classes:
        print(f"No BaseRecord classes found in {file_path}")
        return []

    print(f"{len(record_classes)} record{'s' if len(record_classes) != 1 else ''} loaded.")
    print()

    for record_class in record_classes:
        print_layout(record_class)

    return record_classes


def print_layout(record_class: type[BaseRecord] = Record) -> None:
    """Print the wire layout of a record class.

    Args:
        record_class: Record class to describe
    """
    schema = RecordSchema.from_model(record_class)

    print(f"{'=' * 19} {record_class.__name__} {'=' * 19}")
    print(f"Size: {schema.total_bytes()} bytes, big-endian")
    print(f"{'offset':>8}  {'size':>4}  {'kind':<8}  name")
    for field_schema in schema.fields:
        print(
            f"{field_schema.offset:>8}  {field_schema.size:>4}  "
            f"{field_schema.kind.value:<8}  {field_schema.name}"
        )
    print()
