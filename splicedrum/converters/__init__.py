"""
Pattern converters.

Example:
    from splicedrum.converters import convert_splice_to_midi

    convert_splice_to_midi("pattern_1.splice", "pattern_1.mid", bars=4)
"""

from splicedrum.converters.splice_to_midi import (
    SpliceToMidiConverter,
    convert_splice_to_midi,
    drum_note_for_track,
)

__all__ = [
    "SpliceToMidiConverter",
    "convert_splice_to_midi",
    "drum_note_for_track",
]
