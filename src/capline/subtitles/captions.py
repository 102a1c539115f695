"""Millisecond caption data for rendering layers."""

from __future__ import annotations

import math
from collections.abc import Iterable

from capline.core.models import CaptionData, Segment
from capline.subtitles.text import normalize


def _to_ms(seconds: float) -> int:
    """Round seconds to whole milliseconds, halves rounded up."""
    return int(math.floor(seconds * 1000 + 0.5))


def to_caption_data(segments: Iterable[Segment]) -> list[CaptionData]:
    """Convert segments to numbered millisecond captions with normalized text."""
    return [
        CaptionData(
            id=i,
            start_time_ms=_to_ms(seg.start),
            end_time_ms=_to_ms(seg.end),
            text=normalize(seg.text),
            duration_ms=_to_ms(seg.end - seg.start),
        )
        for i, seg in enumerate(segments, 1)
    ]
