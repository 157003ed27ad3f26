"""Fixed sizes and value ranges of the wire format."""

from __future__ import annotations

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
UINT32_MAX = (1 << 32) - 1

# Every primitive occupies one 4-byte word.
WORD_SIZE = 4
