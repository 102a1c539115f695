"""Playback position sources for the timeline tracker.

The media pipeline owns decoding and playback; the tracker only needs to
read the current position on demand.
"""

from __future__ import annotations

from typing import Protocol


class PlaybackClock(Protocol):
    """Anything that reports a playback position in seconds."""

    def current_time(self) -> float: ...

    @property
    def is_playing(self) -> bool: ...


class ManualClock:
    """In-memory clock driven by explicit play/pause/seek/advance calls."""

    def __init__(self, position: float = 0.0, playing: bool = False) -> None:
        self._position = position
        self._playing = playing

    def current_time(self) -> float:
        return self._position

    @property
    def is_playing(self) -> bool:
        return self._playing

    def play(self) -> None:
        self._playing = True

    def pause(self) -> None:
        self._playing = False

    def seek(self, position: float) -> None:
        self._position = position

    def advance(self, seconds: float) -> None:
        """Move forward by ``seconds`` if playing; paused clocks stay put."""
        if self._playing:
            self._position += seconds
