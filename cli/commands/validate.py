"""
Validate command - check .splice file integrity and structure.
"""

from dataclasses import dataclass, field
import io
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich import box

from splicedrum.formats.splice.binary_parser import parse_header, parse_track_stream
from splicedrum.models.header import HEADER_SIZE, Header, format_tempo
from splicedrum.models.track import Track
from splicedrum.utils.validation import (
    HEADER_METADATA_SIZE,
    SignatureMismatchError,
    SizeUnderflowError,
    TruncatedInputError,
)

console = Console()
app = typer.Typer()


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: str  # "error", "warning", "info"
    area: str
    offset: int
    message: str


@dataclass
class ValidationResult:
    """Result of validating a .splice file."""

    filepath: str
    valid: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    info: List[ValidationIssue] = field(default_factory=list)
    header: Optional[Header] = None
    tracks: List[Track] = field(default_factory=list)
    file_size: int = 0

    @property
    def total_issues(self) -> int:
        return len(self.errors) + len(self.warnings) + len(self.info)


class SpliceValidator:
    """Validate .splice file structure."""

    def __init__(self, data: bytes, filepath: str, strict: bool = False):
        self.data = data
        self.filepath = filepath
        self.strict = strict
        self.issues: List[ValidationIssue] = []
        self.header: Optional[Header] = None
        self.tracks: List[Track] = []

    def validate(self) -> ValidationResult:
        """Perform full validation and return result."""
        self.issues = []

        stream = io.BytesIO(self.data)
        if self._validate_header(stream):
            self._validate_tracks(stream)

        errors = [i for i in self.issues if i.severity == "error"]
        warnings = [i for i in self.issues if i.severity == "warning"]
        info = [i for i in self.issues if i.severity == "info"]

        return ValidationResult(
            filepath=self.filepath,
            valid=not errors,
            errors=errors,
            warnings=warnings,
            info=info,
            header=self.header,
            tracks=self.tracks,
            file_size=len(self.data),
        )

    def _add_issue(self, severity: str, area: str, offset: int, message: str) -> None:
        self.issues.append(ValidationIssue(severity, area, offset, message))

    def _validate_header(self, stream: io.BytesIO) -> bool:
        """Parse the header, recording why it failed. Returns True on success."""
        try:
            self.header = parse_header(stream)
        except TruncatedInputError as e:
            self._add_issue("error", "Header", stream.tell(), str(e))
            return False
        except SignatureMismatchError as e:
            self._add_issue("error", "Signature", 0, str(e))
            return False
        except SizeUnderflowError as e:
            self._add_issue("error", "Content Length", 6, str(e))
            return False

        self._add_issue("info", "Header", 0, f"HW version {self.header.version_text()!r}")
        return True

    def _validate_tracks(self, stream: io.BytesIO) -> None:
        budget = self.header.content_size()
        try:
            self.tracks = parse_track_stream(stream, budget)
        except TruncatedInputError as e:
            self.tracks = e.tracks
            self._add_issue(
                "error",
                "Tracks",
                HEADER_SIZE + sum(t.byte_size() for t in self.tracks),
                f"{e} after {len(self.tracks)} complete track(s)",
            )
            return

        used = sum(t.byte_size() for t in self.tracks)
        end = HEADER_SIZE + used
        if used != budget:
            self._add_issue(
                "error" if self.strict else "warning",
                "Content Length",
                6,
                f"Tracks occupy {used} bytes but the header declares {budget}",
            )
        else:
            self._add_issue(
                "info", "Tracks", HEADER_SIZE, f"{len(self.tracks)} tracks fill the declared length"
            )

        if len(self.data) > end:
            self._add_issue(
                "warning", "Trailing Data", end, f"{len(self.data) - end} bytes after the last track"
            )

        ids = [t.id for t in self.tracks]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            self._add_issue("info", "Track IDs", HEADER_SIZE, f"Repeated track ids: {duplicates}")


SEVERITY_STYLES = {
    "error": ("ERROR", "red"),
    "warning": ("WARN", "yellow"),
    "info": ("ok", "green"),
}


def _layout_summary(result: ValidationResult) -> str:
    """Describe how much of the file the decoded header and tracks account for."""
    if result.header is None:
        return "[dim]header not decoded[/dim]"

    used = HEADER_SIZE + sum(t.byte_size() for t in result.tracks)
    declared = HEADER_SIZE + result.header.content_length - HEADER_METADATA_SIZE
    return (
        f"HW {escape(result.header.version_text())} @ {format_tempo(result.header.tempo)} BPM, "
        f"{len(result.tracks)} track(s)\n"
        f"bytes decoded {used} / declared {declared} / on disk {result.file_size}"
    )


def display_validation(result: ValidationResult) -> None:
    """Print the verdict, the decoded layout and every issue in file order."""
    color = "green" if result.valid else "red"
    verdict = "VALID" if result.valid else "INVALID"

    console.print(
        Panel(
            f"[bold {color}]{verdict}[/bold {color}]  {escape(result.filepath)}\n"
            f"{_layout_summary(result)}",
            title="[bold]splice validate[/bold]",
            border_style=color,
            expand=False,
        )
    )

    shown = result.errors + result.warnings
    if result.valid and not result.warnings:
        shown = result.info

    table = Table(box=box.SIMPLE_HEAD, header_style="bold cyan")
    table.add_column("Offset", style="dim", justify="right")
    table.add_column("", width=5)
    table.add_column("Field", style="cyan")
    table.add_column("Detail")
    for issue in sorted(shown, key=lambda i: i.offset):
        label, style = SEVERITY_STYLES[issue.severity]
        table.add_row(
            f"0x{issue.offset:04X}", f"[{style}]{label}[/{style}]", issue.area, escape(issue.message)
        )

    if table.row_count:
        console.print(table)


@app.command()
def validate(
    file: Path = typer.Argument(..., help=".splice file to validate"),
    strict: bool = typer.Option(
        False, "--strict", "-s", help="Treat length mismatches and warnings as errors"
    ),
) -> None:
    """
    Validate a .splice file structure.

    Checks for:

    - Complete header and SPLICE signature
    - Content length of at least 40
    - Complete track records
    - Tracks ending exactly on the declared length
    - Bytes after the last track

    Examples:

        splice validate pattern_1.splice

        splice validate pattern_1.splice --strict
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)

    data = file.read_bytes()

    result = SpliceValidator(data, str(file), strict=strict).validate()

    if strict and result.warnings:
        result.valid = False

    display_validation(result)

    if not result.valid:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
