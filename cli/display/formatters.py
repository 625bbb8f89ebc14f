"""
Display formatting utilities for CLI output.

Provides step grids, bar graphics and other formatting helpers.
"""

from rich.text import Text

from splicedrum.models.header import format_tempo as _format_tempo
from splicedrum.models.track import STEPS_PER_BEAT, Track


def step_grid_text(
    track: Track,
    on_char: str = "●",
    off_char: str = "·",
    on_style: str = "bold green",
    off_style: str = "dim",
) -> Text:
    """
    Create a coloured step grid for a track.

    Returns:
        Rich Text like "|●···|●···|●···|●···|"
    """
    text = Text("|", style="dim")
    for index, step in enumerate(track.steps):
        if step:
            text.append(on_char, style=on_style)
        else:
            text.append(off_char, style=off_style)
        if (index + 1) % STEPS_PER_BEAT == 0:
            text.append("|", style="dim")
    return text


def density_bar(
    used: int,
    total: int,
    width: int = 16,
    filled_char: str = "█",
    empty_char: str = "░",
) -> str:
    """
    Create a usage bar with count.

    Returns:
        Formatted string like "[████░░░░░░░░░░░░]  4/16"
    """
    if total <= 0:
        return f"[{empty_char * width}]  0/0"

    fill_count = int((used / total) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)
    return f"[{bar}] {used:2d}/{total}"


def format_tempo(tempo: float) -> str:
    """
    Format tempo for display.

    Returns:
        "98.4 BPM"
    """
    return f"{_format_tempo(tempo)} BPM"


def format_size(size: int) -> str:
    """
    Format a byte count in decimal and hex.

    Returns:
        "239 bytes (0xEF)"
    """
    return f"{size} bytes (0x{size:X})"
