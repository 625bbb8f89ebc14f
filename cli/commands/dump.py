"""
Dump command - annotated hex dump of a .splice file.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from cli.commands.show import load_pattern
from cli.display.hex_view import build_regions, display_hex_dump, display_region_dump

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help=".splice file to dump"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Plain hex dump without decoding"),
    max_lines: int = typer.Option(32, "--lines", "-n", help="Line limit for --raw"),
) -> None:
    """
    Show a hex dump with each byte tagged by the header field or track it belongs to.

    Examples:

        splice dump pattern_1.splice

        splice dump broken.splice --raw
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    data = file.read_bytes()

    if raw:
        display_hex_dump(data, title=escape(str(file)), max_lines=max_lines)
        return

    pattern = load_pattern(file)
    display_region_dump(data, build_regions(pattern, len(data)))


if __name__ == "__main__":
    app()
