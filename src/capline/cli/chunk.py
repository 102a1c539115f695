"""capline chunk command — show word chunks for a transcript."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from capline.core.config import load_config
from capline.subtitles.chunker import chunk_segments
from capline.subtitles.converter import load_segments
from capline.subtitles.timecode import to_timestamp
from capline.utils.console import console


def chunk(
    input_path: Annotated[
        Path,
        typer.Argument(help="Transcriber JSON or subtitle file."),
    ],
    max_words: Annotated[
        Optional[int],
        typer.Option("--max-words", "-m", help="Words per chunk."),
    ] = None,
) -> None:
    """List the highlight chunks a transcript splits into."""
    config = load_config(**{"chunking.max_words_per_chunk": max_words})

    try:
        segments = load_segments(input_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Could not load {input_path}:[/red] {e}")
        raise typer.Exit(1)

    chunks = chunk_segments(segments, config.chunking.max_words_per_chunk)

    table = Table(title=f"Chunks ({len(chunks)} from {len(segments)} segments)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Start", style="cyan")
    table.add_column("End", style="cyan")
    table.add_column("Words", justify="right")
    table.add_column("Text")

    for i, sub in enumerate(chunks, 1):
        table.add_row(
            str(i), to_timestamp(sub.start), to_timestamp(sub.end), str(sub.word_count), sub.text
        )

    console.print(table)
