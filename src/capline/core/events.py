"""Caption event system for streaming diagnostics to external consumers.

Provides a lightweight callback mechanism that parsing and bundling emit
events through. Consumers (CLI output, web handlers, tests) register a
callback to receive updates; nothing in the library prints or logs on its
own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable


@dataclass
class CaptionEvent:
    """A diagnostic event emitted while processing captions.

    Attributes:
        stage: Processing stage name (parse, serialize, captions, chunk, validate).
        message: Human-readable status message.
        data: Optional payload (e.g. skipped block number, counts).
    """

    stage: str
    message: str
    data: dict | None = field(default=None)


EventCallback = Callable[[CaptionEvent], None]


def emit(
    on_event: EventCallback | None, stage: str, message: str, data: dict | None = None
) -> None:
    """Send an event to ``on_event`` if a callback was supplied."""
    if on_event:
        on_event(CaptionEvent(stage=stage, message=message, data=data))
