"""
splicedrum - Decoder for .splice drum machine pattern files.

This library provides tools to:
- Decode .splice files into Pattern objects
- Print patterns in the classic text layout
- Export patterns as Standard MIDI Files

Example usage:
    from splicedrum import decode_file

    pattern = decode_file("pattern_1.splice")
    print(pattern)
"""

__version__ = "0.1.0"
__author__ = "splicedrum Contributors"

from splicedrum.config import DecodeOptions
from splicedrum.formats.splice.reader import (
    SpliceReader,
    decode_bytes,
    decode_file,
    decode_stream,
)
from splicedrum.models.header import Header
from splicedrum.models.pattern import Pattern, render_pattern
from splicedrum.models.track import PascalString, Track

__all__ = [
    "DecodeOptions",
    "SpliceReader",
    "decode_bytes",
    "decode_file",
    "decode_stream",
    "Header",
    "Pattern",
    "PascalString",
    "Track",
    "render_pattern",
]
