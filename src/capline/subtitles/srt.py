"""SRT serialization and lenient parsing.

The parser accepts a block when it has at least three non-empty lines and
a ``TS --> TS`` range on its second line. Index lines are not checked.
Anything else is skipped and reported as a SkippedEntry, never raised;
only content with no usable block at all is a FormatError.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from capline.core.errors import FormatError
from capline.core.events import EventCallback, emit
from capline.core.models import CaptionEntry, ParseResult, Segment, SkippedEntry
from capline.subtitles.text import normalize
from capline.subtitles.timecode import TIMESTAMP_PATTERN, from_timestamp, to_timestamp

_RANGE_RE = re.compile(rf"({TIMESTAMP_PATTERN})\s*-->\s*({TIMESTAMP_PATTERN})")
_BLOCK_SPLIT_RE = re.compile(r"\n\s*\n")
_MIN_BLOCK_LINES = 3


def to_entries(segments: Iterable[Segment]) -> list[CaptionEntry]:
    """Number segments from 1 and normalize their text."""
    return [
        CaptionEntry(index=i, start=seg.start, end=seg.end, text=normalize(seg.text))
        for i, seg in enumerate(segments, 1)
    ]


def serialize(segments: Iterable[Segment]) -> str:
    """Render segments as SRT text, in the order given.

    Returns an empty string for no segments. The output carries no
    trailing blank line.
    """
    blocks = [
        f"{entry.index}\n{to_timestamp(entry.start)} --> {to_timestamp(entry.end)}\n{entry.text}\n"
        for entry in to_entries(segments)
    ]
    return "\n".join(blocks).rstrip()


def _split_blocks(text: str) -> list[str]:
    text = text.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not text:
        return []
    return _BLOCK_SPLIT_RE.split(text)


def parse_with_diagnostics(text: str, on_event: EventCallback | None = None) -> ParseResult:
    """Parse SRT text, collecting every skipped block.

    Never raises on malformed content; see :func:`parse` for the strict
    variant.
    """
    result = ParseResult()
    for block_no, block in enumerate(_split_blocks(text), 1):
        lines = [line.strip() for line in block.split("\n") if line.strip()]

        reason = None
        match = None
        if len(lines) < _MIN_BLOCK_LINES:
            reason = f"expected at least {_MIN_BLOCK_LINES} lines, found {len(lines)}"
        else:
            match = _RANGE_RE.search(lines[1])
            if match is None:
                reason = "second line is not a timestamp range"

        if match is None:
            result.skipped.append(SkippedEntry(block=block_no, reason=reason, raw=block))
            emit(
                on_event,
                "parse",
                f"Skipped malformed entry at block {block_no}: {reason}",
                {"block": block_no, "reason": reason},
            )
            continue

        result.segments.append(
            Segment(
                start=from_timestamp(match.group(1)),
                end=from_timestamp(match.group(2)),
                text=" ".join(lines[2:]),
            )
        )

    emit(
        on_event,
        "parse",
        f"Parsed {len(result.segments)} entries, skipped {len(result.skipped)}",
        {"parsed": len(result.segments), "skipped": len(result.skipped)},
    )
    return result


def parse(text: str, on_event: EventCallback | None = None) -> list[Segment]:
    """Parse SRT text into segments.

    Malformed blocks are skipped silently (reported only through
    ``on_event``). Empty or whitespace-only input yields ``[]``.

    Raises:
        FormatError: If the input is non-blank but has no well-formed entry.
    """
    result = parse_with_diagnostics(text, on_event=on_event)
    if not result.segments and text.strip():
        raise FormatError(
            f"No valid subtitle entries found ({len(result.skipped)} malformed blocks)"
        )
    return result.segments
