"""
Info command - display pattern header information.
"""

from pathlib import Path

import typer
from rich.console import Console

from splicedrum.formats.splice.reader import SpliceReader
from cli.commands.show import load_pattern
from cli.display.tables import display_pattern_info, display_tracks_table

console = Console()
app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help=".splice file to analyze"),
    full: bool = typer.Option(False, "--full", "-f", help="Also show the track table"),
    strict: bool = typer.Option(
        False, "--strict/--lenient", help="Require tracks to end exactly on the declared length"
    ),
) -> None:
    """
    Display pattern information.

    Examples:

        splice info pattern_1.splice

        splice info pattern_1.splice --full
    """
    pattern = load_pattern(file, strict)
    file_info = SpliceReader.get_file_info(file)

    display_pattern_info(pattern, file, file_info)

    if full:
        console.print()
        display_tracks_table(pattern)


if __name__ == "__main__":
    app()
