"""
Rich table displays for pattern information.
"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from splicedrum.models.pattern import Pattern
from splicedrum.models.track import STEPS_PER_TRACK
from cli.display.formatters import density_bar, format_size, format_tempo, step_grid_text


console = Console()


def display_pattern_info(pattern: Pattern, filepath: Path, file_info: dict) -> None:
    """Display header information for a decoded pattern."""
    header = pattern.header
    trailing = file_info.get("trailing_bytes", 0)

    header_content = f"""[bold]File:[/bold] {escape(str(filepath))}
[bold]Signature:[/bold] {header.signature.decode("ascii", errors="replace")}
[bold]HW Version:[/bold] {escape(header.version_text()) or "N/A"}
[bold]Tempo:[/bold] {format_tempo(header.tempo)}
[bold]Content Length:[/bold] {format_size(header.content_length)}
[bold]Track Data:[/bold] {format_size(header.content_size())}
[bold]Tracks:[/bold] {len(pattern.tracks)}
[bold]File Size:[/bold] {format_size(file_info["size"])}"""

    if trailing:
        header_content += f"\n[bold]Trailing Bytes:[/bold] [yellow]{trailing}[/yellow]"

    console.print(
        Panel(
            header_content,
            title="[bold blue]Splice Pattern Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_tracks_table(pattern: Pattern, track_id: Optional[int] = None) -> None:
    """Display tracks with their step grids."""
    table = Table(title="Tracks", box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", justify="right", width=5)
    table.add_column("Name", style="cyan")
    table.add_column("Steps", no_wrap=True)
    table.add_column("Active", no_wrap=True)
    table.add_column("Size", style="dim", justify="right", width=5)

    for index, track in enumerate(pattern.tracks):
        if track_id is not None and track.id != track_id:
            continue
        table.add_row(
            str(index + 1),
            str(track.id),
            escape(str(track.name)),
            step_grid_text(track),
            density_bar(len(track.active_steps()), STEPS_PER_TRACK, width=8),
            str(track.byte_size()),
        )

    console.print(table)
