"""Shared CLI utilities."""

from __future__ import annotations

from pathlib import Path

from capline.core.events import CaptionEvent, EventCallback
from capline.utils.console import console


def expand_inputs(inputs: list[str]) -> list[str]:
    """Expand glob patterns and path list files into individual paths."""
    expanded = []
    for inp in inputs:
        path = Path(inp)

        # .txt file: read as path list (one per line)
        if path.suffix == ".txt" and path.is_file():
            for line in path.read_text().splitlines():
                line = line.strip()
                if line and not line.startswith("#"):
                    expanded.append(line)
            continue

        # Try as glob pattern if it contains wildcards
        if any(c in inp for c in "*?["):
            matches = sorted(Path(".").glob(inp))
            if matches:
                expanded.extend(str(m) for m in matches)
                continue

        # Regular file/path
        expanded.append(inp)

    return expanded


def print_event(event: CaptionEvent) -> None:
    """Echo a library event to the console."""
    console.print(f"[dim]{event.stage}:[/dim] {event.message}")


def event_printer(verbose: bool) -> EventCallback | None:
    """Return the console event callback when verbose output is wanted."""
    return print_event if verbose else None
