"""Field types for portable records.

A record field is either an ``Int32`` or a ``Float32``. Both are plain
``typing.Annotated`` aliases, so they can be used directly as annotations on
a BaseRecord subclass.
"""

from __future__ import annotations

import numbers
from typing import Annotated, Any

import numpy as np
from pydantic import BeforeValidator, Field, PlainSerializer

from ..limits import INT32_MAX, INT32_MIN


def _to_float32(value: Any) -> Any:
    """Round Python numbers to binary32; leave float32 values untouched."""
    if isinstance(value, np.float32):
        return value
    if isinstance(value, bool):
        raise ValueError("bool is not a valid float32 value")
    if isinstance(value, (numbers.Real, np.floating)):
        try:
            with np.errstate(over="ignore"):
                return np.float32(value)
        except OverflowError as err:
            raise ValueError(str(err)) from err
    raise ValueError(f"expected a real number, got {type(value).__name__}")


Int32 = Annotated[int, Field(strict=True, ge=INT32_MIN, le=INT32_MAX)]
"""Signed 32-bit integer field (4 bytes, two's complement)."""

Float32 = Annotated[
    np.float32,
    BeforeValidator(_to_float32),
    PlainSerializer(float, return_type=float),
]
"""IEEE-754 binary32 field (4 bytes, raw bit pattern)."""