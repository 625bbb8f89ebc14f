"""
Show command - print a pattern in the plain text layout.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from splicedrum.config import DecodeOptions
from splicedrum.formats.splice.reader import SpliceReader
from splicedrum.models.pattern import Pattern
from splicedrum.utils.validation import SpliceDecodeError

console = Console()
app = typer.Typer()


def load_pattern(file: Path, strict: bool = False) -> Pattern:
    """Decode a file for a command, exiting with status 1 on failure."""
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    options = DecodeOptions.from_env()
    if strict:
        options.strict_budget = True

    try:
        return SpliceReader.read(file, options)
    except SpliceDecodeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        partial = getattr(e, "tracks", None)
        if partial:
            console.print(f"[yellow]{len(partial)} track(s) decoded before the failure[/yellow]")
        raise typer.Exit(1)


@app.command()
def show(
    file: Path = typer.Argument(..., help=".splice file to print"),
    strict: bool = typer.Option(
        False, "--strict/--lenient", help="Require tracks to end exactly on the declared length"
    ),
) -> None:
    """
    Print a pattern as header lines followed by one line per track.

    Example:

        splice show pattern_1.splice
    """
    pattern = load_pattern(file, strict)
    typer.echo(str(pattern), nl=False)


if __name__ == "__main__":
    app()
