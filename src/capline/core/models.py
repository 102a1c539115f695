"""Shared data models for Capline."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Segment:
    """A timestamped span of recognized speech, as produced by a transcriber."""

    start: float  # seconds
    end: float  # seconds
    text: str

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class SubSegment:
    """A word-bounded slice of a Segment, used for word highlighting."""

    start: float
    end: float
    text: str
    words: tuple[str, ...] = ()

    @property
    def word_count(self) -> int:
        return len(self.words)

    def contains(self, time: float) -> bool:
        """Closed-interval membership test."""
        return self.start <= time <= self.end


@dataclass(frozen=True)
class CaptionEntry:
    """A numbered SRT record. Index is 1-based."""

    index: int
    start: float
    end: float
    text: str


@dataclass
class ValidationResult:
    """Outcome of validating SRT content. Errors are reported, never raised."""

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {"isValid": self.is_valid, "errors": list(self.errors)}


@dataclass(frozen=True)
class TimelineState:
    """Active sub-segment and highlighted word for one playback time."""

    active: SubSegment | None = None
    highlighted_word_index: int = 0

    @property
    def highlighted_word(self) -> str | None:
        if self.active is None or not self.active.words:
            return None
        return self.active.words[self.highlighted_word_index]


@dataclass(frozen=True)
class CaptionData:
    """Millisecond caption record consumed by rendering layers."""

    id: int
    start_time_ms: int
    end_time_ms: int
    text: str
    duration_ms: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "startTimeMs": self.start_time_ms,
            "endTimeMs": self.end_time_ms,
            "text": self.text,
            "durationMs": self.duration_ms,
        }


@dataclass(frozen=True)
class SkippedEntry:
    """A malformed SRT block dropped by the lenient parser."""

    block: int  # 1-based position among blank-line separated blocks
    reason: str
    raw: str


@dataclass
class ParseResult:
    """Parsed segments plus diagnostics for every skipped block."""

    segments: list[Segment] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)
