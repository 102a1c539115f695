"""Capline CLI entry point."""

from typing import Annotated, Optional

import typer
from dotenv import load_dotenv

from capline import __version__
from capline.cli.chunk import chunk
from capline.cli.convert import convert
from capline.cli.track import track
from capline.cli.validate import validate

app = typer.Typer(
    name="capline",
    help="Capline — SRT captions, word chunks and playback highlighting for transcripts.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"capline {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Capline — SRT captions, word chunks and playback highlighting for transcripts."""
    # Load .env so CAPLINE_* settings can live next to the project.
    # Does not override existing env vars; shell exports take precedence.
    load_dotenv(override=False)


app.command("convert")(convert)
app.command("validate")(validate)
app.command("chunk")(chunk)
app.command("track")(track)
