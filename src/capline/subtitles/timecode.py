"""SRT timestamp conversion (HH:MM:SS,mmm <-> float seconds)."""

from __future__ import annotations

import math
import re
from decimal import Decimal

from capline.core.errors import FormatError

TIMESTAMP_PATTERN = r"\d{2,}:\d{2}:\d{2},\d{3}"

_TIMESTAMP_RE = re.compile(r"(\d{2,}):(\d{2}):(\d{2}),(\d{3})")


def to_timestamp(seconds: float) -> str:
    """Format seconds as an SRT timestamp, floored to the millisecond.

    Hours are zero-padded to two digits but never truncated, so
    ``to_timestamp(360000)`` is ``"100:00:00,000"``.

    Raises:
        ValueError: If ``seconds`` is negative.
    """
    if seconds < 0:
        raise ValueError(f"Timestamp cannot be negative: {seconds}")

    # Floor the shortest decimal form; 1.005 * 1000 is 1004.999... as a float
    total_ms = math.floor(Decimal(str(float(seconds))) * 1000)
    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    secs, ms = divmod(rem, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{ms:03d}"


def from_timestamp(value: str) -> float:
    """Parse an SRT timestamp into seconds.

    Only the digit counts are enforced, not the field ranges.

    Raises:
        FormatError: If ``value`` is not ``HH:MM:SS,mmm``.
    """
    match = _TIMESTAMP_RE.fullmatch(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise FormatError(f"Invalid SRT timestamp: {value!r}")
    hours, minutes, secs, ms = (int(part) for part in match.groups())
    return hours * 3600 + minutes * 60 + secs + ms / 1000
