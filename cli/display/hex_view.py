"""
Hex dump display utilities.
"""

import struct
from typing import List, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from splicedrum.models.header import (
    CONTENT_LENGTH_SIZE,
    HEADER_SIZE,
    SIGNATURE_SIZE,
    TEMPO_SIZE,
    VERSION_SIZE,
)
from splicedrum.models.pattern import Pattern
from splicedrum.utils.validation import HEADER_METADATA_SIZE

console = Console()

# (start, end, name, color)
Region = Tuple[int, int, str, str]

REGION_COLORS = ["green", "magenta", "cyan", "yellow"]


def build_regions(pattern: Pattern, file_size: int) -> List[Region]:
    """
    Compute file regions from a decoded pattern.

    Returns:
        Regions in file order, ending with any trailing bytes
    """
    regions: List[Region] = []
    offset = 0
    for size, name in (
        (SIGNATURE_SIZE, "SIGNATURE"),
        (CONTENT_LENGTH_SIZE, "LENGTH"),
        (VERSION_SIZE, "VERSION"),
        (TEMPO_SIZE, "TEMPO"),
    ):
        regions.append((offset, offset + size, name, "bright_blue"))
        offset += size

    for index, track in enumerate(pattern.tracks):
        end = offset + track.byte_size()
        color = REGION_COLORS[index % len(REGION_COLORS)]
        regions.append((offset, end, f"TRACK {index + 1}", color))
        offset = end

    if file_size > offset:
        regions.append((offset, file_size, "TRAILING", "red"))

    return regions


def _raw_byte_style(offset: int, declared_end: int) -> str:
    """Colour a byte by what the header says it should be."""
    if offset < HEADER_SIZE:
        return "bright_blue"
    if offset >= declared_end:
        return "red"
    return ""


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    start_offset: int = 0,
    bytes_per_line: int = 16,
    max_lines: int = 32,
) -> None:
    """
    Print bytes without decoding them.

    Header bytes are blue. When the content length field is readable,
    bytes past the declared end are red, so a file that fails to decode
    still shows where the header expects it to stop.
    """
    length_end = SIGNATURE_SIZE + CONTENT_LENGTH_SIZE
    if len(data) >= length_end:
        content_length = struct.unpack(">Q", data[SIGNATURE_SIZE:length_end])[0]
        declared_end = HEADER_SIZE + max(0, content_length - HEADER_METADATA_SIZE)
    else:
        declared_end = len(data)

    shown = min(len(data), max_lines * bytes_per_line)
    body = Text()
    for line_start in range(0, shown, bytes_per_line):
        chunk = data[line_start : line_start + bytes_per_line]
        body.append(f"{start_offset + line_start:08X}  ", style="dim")
        for i, b in enumerate(chunk):
            body.append(f"{b:02X} ", style=_raw_byte_style(line_start + i, declared_end))
        body.append("   " * (bytes_per_line - len(chunk)) + " ")
        body.append("".join(chr(b) if 32 <= b < 127 else "." for b in chunk), style="cyan")
        body.append("\n")

    if len(data) > shown:
        body.append(f"... {len(data) - shown} more bytes\n", style="dim")
    if len(data) < declared_end:
        missing = declared_end - len(data)
        body.append(f"file ends {missing} bytes before the declared end", style="red")

    body.rstrip()
    console.print(Panel(body, title=title, border_style="blue", expand=False))


def display_region_dump(data: bytes, regions: List[Region]) -> None:
    """Display each region on its own lines with a coloured tag."""
    for start, end, name, color in regions:
        chunk = data[start:end]
        for line_start in range(0, max(len(chunk), 1), 16):
            part = chunk[line_start : line_start + 16]
            hex_str = " ".join(f"{b:02X}" for b in part)
            ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in part)
            console.print(
                f"[dim]0x{start + line_start:04X}[/dim] [{color}]{name:<10}[/{color}] "
                f"{hex_str:<47}  [cyan]{escape(ascii_str)}[/cyan]",
                soft_wrap=True,
            )
