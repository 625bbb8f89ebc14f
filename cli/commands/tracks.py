"""
Tracks command - step grid display for every track.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.commands.show import load_pattern
from cli.display.tables import display_tracks_table

console = Console()
app = typer.Typer()


@app.command()
def tracks(
    file: Path = typer.Argument(..., help=".splice file to analyze"),
    track: Optional[int] = typer.Option(None, "--track", "-t", help="Only show this track id"),
    strict: bool = typer.Option(
        False, "--strict/--lenient", help="Require tracks to end exactly on the declared length"
    ),
) -> None:
    """
    Display tracks with their 16-step grids.

    Examples:

        splice tracks pattern_1.splice

        splice tracks pattern_1.splice --track 1
    """
    pattern = load_pattern(file, strict)

    if not pattern.tracks:
        console.print("[yellow]No track data found in file.[/yellow]")
        return

    if track is not None and pattern.get_track(track) is None:
        console.print(f"[red]No track with id {track}.[/red]")
        raise typer.Exit(1)

    display_tracks_table(pattern, track_id=track)


if __name__ == "__main__":
    app()
