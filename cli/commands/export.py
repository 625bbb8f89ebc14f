"""
Export command - write a pattern as a Standard MIDI File.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from splicedrum.converters.splice_to_midi import SpliceToMidiConverter
from cli.commands.show import load_pattern

console = Console()
app = typer.Typer()


@app.command()
def export(
    source: Path = typer.Argument(..., help="Source .splice file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output .mid path"),
    bars: int = typer.Option(1, "--bars", "-b", min=1, help="Number of times to repeat the bar"),
    velocity: int = typer.Option(100, "--velocity", min=1, max=127, help="Note velocity"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show traceback on failure"),
) -> None:
    """
    Export a pattern to MIDI, one drum note per active step on channel 10.

    Examples:

        splice export pattern_1.splice

        splice export pattern_1.splice -o groove.mid --bars 4
    """
    pattern = load_pattern(source)
    output_path = output or source.with_suffix(".mid")

    try:
        converter = SpliceToMidiConverter(bars=bars, velocity=velocity)
        converter.write(pattern, output_path)
    except (ValueError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    console.print(
        f"[green]Exported:[/green] {escape(str(source))} -> {escape(str(output_path))}"
    )
    console.print(f"[dim]{len(pattern.tracks)} tracks, {bars} bar(s)[/dim]")


if __name__ == "__main__":
    app()
