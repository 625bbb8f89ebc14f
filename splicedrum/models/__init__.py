"""Data models for .splice pattern representation."""

from splicedrum.models.header import Header
from splicedrum.models.track import PascalString, Track
from splicedrum.models.pattern import Pattern, render_pattern

__all__ = [
    "Header",
    "PascalString",
    "Track",
    "Pattern",
    "render_pattern",
]
