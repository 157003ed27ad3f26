"""Record models for portbin.

This module provides the base record class and the field types used to
declare fixed-layout records.
"""

from __future__ import annotations

from .base import BaseRecord, Record
from .fields import Float32, Int32

__all__ = [
    "BaseRecord",
    "Record",
    "Int32",
    "Float32",
]
