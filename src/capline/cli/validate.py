"""capline validate command — check SRT files for consistency."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from capline.cli.utils import expand_inputs
from capline.subtitles.validate import validate as validate_srt
from capline.utils.console import console


def validate(
    inputs: Annotated[
        list[str],
        typer.Argument(help="SRT files, glob patterns, or .txt lists of paths."),
    ],
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Also report blocks the parser had to skip."),
    ] = False,
) -> None:
    """Validate SRT files: parseable, non-overlapping, positive durations.

    Exits with status 1 if any file is invalid.
    """
    expanded = expand_inputs(inputs)
    if not expanded:
        console.print("[red]No inputs resolved. Check your paths or patterns.[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Validation ({len(expanded)} files)")
    table.add_column("File", max_width=50, no_wrap=True)
    table.add_column("Status")
    table.add_column("Errors")

    invalid = 0
    for inp in expanded:
        path = Path(inp)
        if not path.is_file():
            table.add_row(inp, "[red]missing[/red]", "file not found")
            invalid += 1
            continue

        try:
            text = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError:
            table.add_row(inp, "[red]invalid[/red]", "not UTF-8 text")
            invalid += 1
            continue

        result = validate_srt(text, strict=strict)
        if result.is_valid:
            table.add_row(inp, "[green]valid[/green]", "")
        else:
            table.add_row(inp, "[red]invalid[/red]", "\n".join(result.errors))
            invalid += 1

    console.print(table)
    if invalid:
        console.print(f"\n[bold red]{invalid}/{len(expanded)} invalid[/bold red]")
        raise typer.Exit(1)
    console.print(f"\n[bold green]{len(expanded)}/{len(expanded)} valid[/bold green]")
