"""Subtitle file loading and saving.

This module handles:
- Loading transcriber JSON output (Whisper-style) into Segments
- Loading existing subtitle files (SRT natively, VTT/ASS via pysubs2)
- Saving Segments as SRT, VTT, ASS or plain text
- Writing caption data as JSON for rendering layers
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

import pysubs2
from pydantic import BaseModel, Field, TypeAdapter
from pysubs2.exceptions import Pysubs2Error

from capline.core.errors import FormatError
from capline.core.events import EventCallback
from capline.core.models import CaptionData, Segment
from capline.subtitles.srt import parse, serialize
from capline.subtitles.text import normalize


class TranscriberSegment(BaseModel):
    """One segment of transcriber output. Extra keys (tokens, words...) are ignored."""

    start: float = Field(ge=0)
    end: float
    text: str


class TranscriberOutput(BaseModel):
    segments: list[TranscriberSegment]


_SEGMENT_LIST = TypeAdapter(list[TranscriberSegment])


def segments_from_json(data: object) -> list[Segment]:
    """Convert decoded transcriber JSON to Segments.

    Accepts ``{"segments": [...]}`` or a bare list. Text is stripped and
    segments with no caption text (blank or markup only) are dropped;
    order is kept as given.

    Raises:
        pydantic.ValidationError: If a segment is missing fields or has a
            negative start.
    """
    if isinstance(data, dict):
        records = TranscriberOutput.model_validate(data).segments
    else:
        records = _SEGMENT_LIST.validate_python(data)
    return [
        Segment(start=rec.start, end=rec.end, text=rec.text.strip())
        for rec in records
        if normalize(rec.text)
    ]


def load_segments(path: Path, on_event: EventCallback | None = None) -> list[Segment]:
    """Load segments from transcriber JSON or a subtitle file.

    Supports JSON (transcriber output), SRT, and anything pysubs2 reads
    (VTT, ASS, SSA, ...).

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        FormatError: If the file is not a subtitle format that can be read.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        return segments_from_json(json.loads(path.read_text(encoding="utf-8")))
    if suffix == ".srt":
        return parse(path.read_text(encoding="utf-8-sig"), on_event=on_event)

    try:
        subs = pysubs2.load(str(path))
    except Pysubs2Error as e:
        raise FormatError(f"Unsupported subtitle file {path.name}: {e}") from e
    return [
        Segment(
            start=event.start / 1000.0,
            end=event.end / 1000.0,
            text=" ".join(event.plaintext.split()),
        )
        for event in subs.events
        if not event.is_comment and normalize(event.plaintext)
    ]


def save_subtitles(segments: Iterable[Segment], path: Path, fmt: str = "srt") -> Path:
    """Save segments to a subtitle file.

    Args:
        segments: Segments in display order.
        path: Output file path.
        fmt: Format — "srt", "vtt", "ass", or "txt".

    Returns:
        The path the file was written to.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    segments = list(segments)

    if fmt == "srt":
        content = serialize(segments)
        path.write_text(content + "\n" if content else "", encoding="utf-8")
    elif fmt == "txt":
        lines = (normalize(seg.text) for seg in segments)
        path.write_text("\n".join(line for line in lines if line), encoding="utf-8")
    elif fmt in ("vtt", "ass"):
        subs = pysubs2.SSAFile()
        for seg in segments:
            subs.events.append(
                pysubs2.SSAEvent(
                    start=pysubs2.make_time(s=seg.start),
                    end=pysubs2.make_time(s=seg.end),
                    text=normalize(seg.text),
                )
            )
        subs.save(str(path), format_=fmt)
    else:
        raise ValueError(f"Unsupported subtitle format: {fmt}")

    return path


def save_captions_json(captions: Iterable[CaptionData], path: Path) -> Path:
    """Write caption data as a JSON array with camelCase keys."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [caption.to_dict() for caption in captions]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
