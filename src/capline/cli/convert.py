"""capline convert command — transcript to subtitles and caption data."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from capline.cli.utils import event_printer
from capline.core.config import load_config
from capline.core.pipeline import build_caption_bundle
from capline.subtitles.converter import load_segments, save_captions_json, save_subtitles
from capline.utils.console import console


def convert(
    input_path: Annotated[
        Path,
        typer.Argument(help="Transcriber JSON or subtitle file (srt, vtt, ass)."),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output file path. Default: <input>.<fmt>"),
    ] = None,
    fmt: Annotated[
        Optional[str],
        typer.Option("--format", "-f", help="Output format: srt, vtt, ass, txt."),
    ] = None,
    captions: Annotated[
        Optional[bool],
        typer.Option("--captions/--no-captions", help="Also write <stem>.captions.json."),
    ] = None,
    max_words: Annotated[
        Optional[int],
        typer.Option("--max-words", "-m", help="Words per highlight chunk."),
    ] = None,
    strict: Annotated[
        Optional[bool],
        typer.Option("--strict/--lenient", help="Report malformed blocks as validation errors."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print processing events."),
    ] = False,
) -> None:
    """Convert a transcript into subtitles, validate them, and emit caption data.

    Validation problems are printed as warnings; the files are still written.
    """
    config = load_config(
        **{
            "output.format": fmt,
            "output.captions_json": captions,
            "chunking.max_words_per_chunk": max_words,
            "validation.strict": strict,
        }
    )
    on_event = event_printer(verbose)

    try:
        segments = load_segments(input_path, on_event=on_event)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Could not load {input_path}:[/red] {e}")
        raise typer.Exit(1)

    bundle = build_caption_bundle(segments, config, on_event=on_event)

    out_fmt = config.output.format
    sub_path = output if output is not None else input_path.with_suffix(f".{out_fmt}")
    if sub_path.resolve() == input_path.resolve():
        sub_path = input_path.with_suffix(f".capline.{out_fmt}")

    try:
        save_subtitles(bundle.segments, sub_path, fmt=out_fmt)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Saved:[/green] {sub_path}")

    if config.output.captions_json:
        json_path = sub_path.with_name(f"{sub_path.stem}.captions.json")
        save_captions_json(bundle.captions, json_path)
        console.print(f"[green]Saved:[/green] {json_path}")

    console.print(
        f"[bold]Segments:[/bold] {bundle.segment_count}  "
        f"[bold]Chunks:[/bold] {len(bundle.chunks)}  "
        f"[bold]Duration:[/bold] {bundle.duration:.3f}s"
    )
    if not bundle.validation.is_valid:
        console.print("[yellow]Subtitle validation warnings:[/yellow]")
        for error in bundle.validation.errors:
            console.print(f"  [yellow]-[/yellow] {error}")
