"""Split transcription segments into short word chunks for highlighting.

Each segment is cut into groups of at most ``max_words_per_chunk`` words.
Time is shared out in proportion to word count, so every word of a segment
gets the same slice of its duration and chunk boundaries fall between
words. The chunks of one segment tile ``[start, end]`` exactly: each
chunk's end is computed with the same expression as the next chunk's
start, and the last chunk ends on ``segment.end`` itself.

Zero-length or inverted segments are kept rather than rejected; all of
their chunks collapse to ``[segment.start, segment.start]``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from capline.core.models import Segment, SubSegment

DEFAULT_MAX_WORDS = 6


def chunk(segment: Segment, max_words_per_chunk: int = DEFAULT_MAX_WORDS) -> list[SubSegment]:
    """Split one segment into ordered word chunks.

    Args:
        segment: Source segment. Its text is split on whitespace as-is;
            normalize it beforehand if needed.
        max_words_per_chunk: Upper bound on words per chunk.

    Returns:
        Chunks in reading order; empty if the text has no words.

    Raises:
        ValueError: If ``max_words_per_chunk`` is less than 1.
    """
    if max_words_per_chunk < 1:
        raise ValueError(f"max_words_per_chunk must be >= 1, got {max_words_per_chunk}")

    words = segment.text.split()
    if not words:
        return []

    total = len(words)
    chunk_count = math.ceil(total / max_words_per_chunk)
    duration = max(segment.end - segment.start, 0.0)

    def boundary(word_offset: int) -> float:
        return segment.start + duration * word_offset / total

    chunks = []
    for k in range(chunk_count):
        first = k * max_words_per_chunk
        last = min(first + max_words_per_chunk, total)
        chunk_words = tuple(words[first:last])

        start = boundary(first)
        if duration == 0.0:
            end = segment.start
        elif k == chunk_count - 1:
            end = segment.end
        else:
            end = min(boundary(last), segment.end)

        chunks.append(
            SubSegment(start=start, end=end, text=" ".join(chunk_words), words=chunk_words)
        )
    return chunks


def chunk_segments(
    segments: Iterable[Segment], max_words_per_chunk: int = DEFAULT_MAX_WORDS
) -> list[SubSegment]:
    """Chunk every segment, keeping input order."""
    chunks: list[SubSegment] = []
    for segment in segments:
        chunks.extend(chunk(segment, max_words_per_chunk))
    return chunks
