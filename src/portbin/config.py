"""Configuration for the demo driver.

The CLI builds a DemoConfig from its arguments; the same object can be
constructed directly when driving the demo from Python.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .limits import INT32_MAX, INT32_MIN

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DemoConfig:
    """Configuration for the write/read-back demo.

    Attributes:
        path: File the sample record is written to and read from (default "data.bin")
        record_id: ``id`` of the sample record (default 123)
        value: ``value`` of the sample record, rounded to binary32 (default 456.789)
        log_level: Name of the level for the ``portbin`` logger (default "WARNING")

    Examples:
        ```python
        from portbin.config import DemoConfig
        from portbin.cli.demo import run_demo

        record = run_demo(DemoConfig(path=Path("/tmp/sample.bin"), record_id=7))
        ```
    """

    path: Path = field(default_factory=lambda: Path("data.bin"))
    record_id: int = 123
    value: float = 456.789
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self.path = Path(self.path)

        if not INT32_MIN <= self.record_id <= INT32_MAX:
            raise ValueError(
                f"record_id must be {INT32_MIN} to {INT32_MAX}, got {self.record_id}"
            )

        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}"
            )

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return int(getattr(logging, self.log_level))
