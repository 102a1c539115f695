"""Structural and temporal checks for SRT content."""

from __future__ import annotations

from capline.core.models import ValidationResult
from capline.subtitles.srt import parse_with_diagnostics


def validate(text: object, strict: bool = False) -> ValidationResult:
    """Check SRT content for overlaps and non-positive durations.

    Entry numbers in messages are 1-based positions in parse order. The
    content is never modified.

    Args:
        text: SRT content. Anything that is not a non-empty string is invalid.
        strict: Also report blocks the lenient parser skipped.
    """
    if not isinstance(text, str) or not text:
        return ValidationResult(errors=["content is empty or invalid"])

    parsed = parse_with_diagnostics(text)
    segments = parsed.segments
    if not segments:
        return ValidationResult(errors=["no valid subtitle entries found"])

    errors = []
    for i in range(len(segments) - 1):
        if segments[i].end > segments[i + 1].start:
            errors.append(f"overlapping timestamps at entry {i + 1} and {i + 2}")

    for i, seg in enumerate(segments):
        if seg.end <= seg.start:
            errors.append(f"invalid duration at entry {i + 1}")

    if strict:
        for skipped in parsed.skipped:
            errors.append(f"malformed entry at block {skipped.block}: {skipped.reason}")

    return ValidationResult(errors=errors)
