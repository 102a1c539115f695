"""capline track command — resolve the active caption at playback times."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from capline.core.config import load_config
from capline.core.models import TimelineState
from capline.player.clock import ManualClock
from capline.player.timeline import TimelineTracker
from capline.subtitles.converter import load_segments
from capline.utils.console import console


def render_state(state: TimelineState) -> str:
    """Rich markup for a state, with the highlighted word in bold."""
    if state.active is None:
        return "[dim](no caption)[/dim]"
    words = [escape(word) for word in state.active.words]
    if words:
        i = state.highlighted_word_index
        words[i] = f"[bold yellow]{words[i]}[/bold yellow]"
    return " ".join(words)


def track(
    input_path: Annotated[
        Path,
        typer.Argument(help="Transcriber JSON or subtitle file."),
    ],
    at: Annotated[
        list[float],
        typer.Option("--at", "-t", help="Playback time in seconds. Repeatable."),
    ],
    max_words: Annotated[
        Optional[int],
        typer.Option("--max-words", "-m", help="Words per chunk."),
    ] = None,
    word_level: Annotated[
        Optional[bool],
        typer.Option("--word-level/--no-word-level", help="Highlight words or whole captions."),
    ] = None,
) -> None:
    """Show which caption, and which word in it, is active at each time.

    Times are applied in the order given, like seeks on a player.
    """
    config = load_config(
        **{
            "chunking.max_words_per_chunk": max_words,
            "player.word_level_highlighting": word_level,
        }
    )

    try:
        segments = load_segments(input_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Could not load {input_path}:[/red] {e}")
        raise typer.Exit(1)

    tracker = TimelineTracker(
        segments,
        max_words_per_chunk=config.chunking.max_words_per_chunk,
        word_level_highlighting=config.player.word_level_highlighting,
    )
    clock = ManualClock()
    for time in at:
        clock.seek(time)
        state = tracker.poll(clock)
        console.print(f"[cyan]{time:>10.3f}s[/cyan]  {render_state(state)}")
