"""
splice - Decode and inspect .splice drum machine patterns.

A modern CLI tool for printing, analyzing and exporting .splice files.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from splicedrum import __version__
from splicedrum.utils.logger import setup_logger
from cli.commands.show import show
from cli.commands.info import info
from cli.commands.tracks import tracks
from cli.commands.dump import dump
from cli.commands.validate import validate
from cli.commands.export import export

console = Console()

# Main app
app = typer.Typer(
    name="splice",
    help="Decode and inspect .splice drum machine pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="show")(show)
app.command(name="info")(info)
app.command(name="tracks")(tracks)
app.command(name="dump")(dump)
app.command(name="validate")(validate)
app.command(name="export")(export)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]splice[/bold] version {__version__}")
    console.print("[dim]Decoder for .splice drum machine pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Log decoder details"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write a detailed log file"),
) -> None:
    """
    splice - Decode and inspect .splice drum patterns.

    [bold]Quick Start:[/bold]

        splice show pattern_1.splice      # Classic text printout
        splice info pattern_1.splice      # Header details

    [bold]Analysis Commands:[/bold]

        splice tracks pattern_1.splice    # Step grids
        splice dump pattern_1.splice      # Annotated hex dump
        splice validate pattern_1.splice  # Structure checks

    [bold]Utility Commands:[/bold]

        splice export pattern_1.splice    # Write a MIDI file

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    setup_logger(level=logging.DEBUG if debug else logging.WARNING, log_file=log_file)

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
