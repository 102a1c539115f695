"""Resolve the active caption chunk and highlighted word for a playback time.

One tracker serves both display modes:

- word-level highlighting (default): segments are chunked and the word
  under the playhead is estimated from the position inside the chunk;
- whole captions: one sub-segment per segment, word index always 0.

Intervals are closed on both ends. When a time sits on the boundary
shared by two chunks, the earlier chunk in list order wins.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable

from capline.core.models import Segment, SubSegment, TimelineState
from capline.player.clock import PlaybackClock
from capline.subtitles.chunker import DEFAULT_MAX_WORDS, chunk_segments

StateCallback = Callable[[TimelineState], None]


def _whole_captions(segments: Iterable[Segment]) -> list[SubSegment]:
    captions = []
    for seg in segments:
        words = tuple(seg.text.split())
        if words:
            captions.append(
                SubSegment(start=seg.start, end=seg.end, text=" ".join(words), words=words)
            )
    return captions


def word_index(chunk: SubSegment, current_time: float) -> int:
    """Estimate which word of ``chunk`` is being spoken at ``current_time``.

    Assumes words are evenly spaced over the chunk. Zero-width chunks
    report their last word.
    """
    if not chunk.words:
        return 0
    width = chunk.end - chunk.start
    progress = 1.0 if width <= 0 else (current_time - chunk.start) / width
    index = math.floor(progress * chunk.word_count)
    return max(0, min(index, chunk.word_count - 1))


class TimelineTracker:
    """Track caption state over a segment list.

    Args:
        segments: Initial segments; see :meth:`set_segments`.
        max_words_per_chunk: Chunk size for word-level highlighting.
        word_level_highlighting: Chunk and highlight words, or show whole
            captions.
        on_change: Called with the new state whenever :meth:`update`
            produces a state different from the previous one.
    """

    def __init__(
        self,
        segments: Iterable[Segment] = (),
        max_words_per_chunk: int = DEFAULT_MAX_WORDS,
        word_level_highlighting: bool = True,
        on_change: StateCallback | None = None,
    ) -> None:
        self._max_words_per_chunk = max_words_per_chunk
        self._word_level_highlighting = word_level_highlighting
        self.on_change = on_change
        self._chunks: tuple[SubSegment, ...] = ()
        self._last: TimelineState | None = None
        self.set_segments(segments)

    # Read-only: the chunks are derived from these in set_segments.
    @property
    def max_words_per_chunk(self) -> int:
        return self._max_words_per_chunk

    @property
    def word_level_highlighting(self) -> bool:
        return self._word_level_highlighting

    @property
    def chunks(self) -> tuple[SubSegment, ...]:
        return self._chunks

    @property
    def state(self) -> TimelineState | None:
        """The last state computed by :meth:`update`, if any."""
        return self._last

    def set_segments(self, segments: Iterable[Segment]) -> None:
        """Replace the tracked segments and recompute all sub-segments."""
        if self.word_level_highlighting:
            chunks = chunk_segments(segments, self.max_words_per_chunk)
        else:
            chunks = _whole_captions(segments)
        self._chunks = tuple(chunks)
        self._last = None

    def find(self, current_time: float) -> SubSegment | None:
        """Return the first sub-segment whose closed interval holds the time."""
        for chunk in self._chunks:
            if chunk.contains(current_time):
                return chunk
        return None

    def update(self, current_time: float) -> TimelineState:
        """Compute the state for ``current_time``.

        Any time is accepted, including negative values, times past the
        last caption, and backward seeks.
        """
        active = self.find(current_time)
        if active is None:
            state = TimelineState()
        elif self.word_level_highlighting:
            state = TimelineState(active, word_index(active, current_time))
        else:
            state = TimelineState(active, 0)

        if state != self._last:
            self._last = state
            if self.on_change:
                self.on_change(state)
        return state

    def poll(self, clock: PlaybackClock) -> TimelineState:
        """Read the clock and update."""
        return self.update(clock.current_time())
