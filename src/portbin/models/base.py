"""Base record class and portbin-specific Pydantic configuration.

This module provides the BaseRecord class that all portable records should
inherit from, and the sample Record used by the demo driver.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .fields import Float32, Int32


class BaseRecord(BaseModel):
    """Base class for all fixed-layout records.

    Records declare their fields with the ``Int32`` and ``Float32`` types.
    Fields are written to the wire in declaration order with no tags, lengths
    or names, so the declaration order is the wire layout.

    Example:
        >>> class Reading(BaseRecord):
        ...     sensor_id: Int32
        ...     celsius: Float32
        ...     kelvin: Float32
    """

    model_config = ConfigDict(
        # numpy.float32 is not a native pydantic type
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra="forbid",
    )


class Record(BaseRecord):
    """Sample record: an int32 ``id`` followed by a float32 ``value``.

    Always 8 bytes on the wire.
    """

    id: Int32
    value: Float32
