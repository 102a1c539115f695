"""Caption bundle orchestrator — serialize, derive captions, chunk, validate."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from capline.core.config import CaplineConfig
from capline.core.events import EventCallback, emit
from capline.core.models import CaptionData, Segment, SubSegment, ValidationResult
from capline.subtitles.captions import to_caption_data
from capline.subtitles.chunker import chunk_segments
from capline.subtitles.srt import serialize
from capline.subtitles.text import normalize
from capline.subtitles.validate import validate


@dataclass
class CaptionBundle:
    """Everything a caller needs to display and check one transcription."""

    srt: str
    captions: list[CaptionData]
    segments: list[Segment]
    chunks: list[SubSegment]
    validation: ValidationResult
    duration: float = 0.0
    segment_count: int = 0

    def to_dict(self) -> dict:
        return {
            "srt": self.srt,
            "captions": [caption.to_dict() for caption in self.captions],
            "transcription": [
                {"start": seg.start, "end": seg.end, "text": seg.text} for seg in self.segments
            ],
            "duration": self.duration,
            "segmentCount": self.segment_count,
            "validation": self.validation.to_dict(),
        }


def build_caption_bundle(
    segments: Iterable[Segment],
    config: CaplineConfig | None = None,
    on_event: EventCallback | None = None,
) -> CaptionBundle:
    """Turn transcriber segments into SRT, caption data and highlight chunks.

    Segments with no caption text after normalization (blank or markup
    only) are dropped first; an SRT block without a text line would not
    parse back. Validation problems are reported in the bundle, never
    raised; the caller decides whether to use unvalidated output.

    Args:
        segments: Transcriber segments, in display order.
        config: Application config. Defaults are used when omitted.
        on_event: Optional callback for progress and diagnostic events.
    """
    if config is None:
        config = CaplineConfig()
    segments = list(segments)
    kept = [seg for seg in segments if normalize(seg.text)]
    dropped = len(segments) - len(kept)
    if dropped:
        emit(
            on_event,
            "filter",
            f"Dropped {dropped} segments with no caption text",
            {"dropped": dropped},
        )
    segments = kept

    srt = serialize(segments)
    emit(on_event, "serialize", f"Serialized {len(segments)} entries")

    captions = to_caption_data(segments)
    emit(on_event, "captions", f"Built {len(captions)} caption records")

    chunks = chunk_segments(segments, config.chunking.max_words_per_chunk)
    emit(
        on_event,
        "chunk",
        f"Split into {len(chunks)} chunks",
        {"max_words_per_chunk": config.chunking.max_words_per_chunk},
    )

    validation = validate(srt, strict=config.validation.strict)
    if validation.is_valid:
        emit(on_event, "validate", "Subtitles are valid")
    else:
        emit(
            on_event,
            "validate",
            f"{len(validation.errors)} validation warnings",
            {"errors": list(validation.errors)},
        )

    return CaptionBundle(
        srt=srt,
        captions=captions,
        segments=segments,
        chunks=chunks,
        validation=validation,
        duration=segments[-1].end if segments else 0.0,
        segment_count=len(segments),
    )
