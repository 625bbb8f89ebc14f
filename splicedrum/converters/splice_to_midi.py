"""
.splice to Standard MIDI File converter.

Each track becomes a stream of General MIDI drum notes on channel 10,
one sixteenth note per active step. The pattern bar can be repeated.
"""

import logging
import math
from pathlib import Path
from typing import List, Tuple, Union

import mido

from splicedrum.models.pattern import Pattern
from splicedrum.models.track import STEPS_PER_BEAT, STEPS_PER_TRACK, Track

logger = logging.getLogger(__name__)


# Instrument name keywords to GM drum notes, first match wins
GM_DRUM_KEYWORDS: List[Tuple[str, int]] = [
    ("kick", 36),
    ("bass drum", 36),
    ("rim", 37),
    ("snare", 38),
    ("clap", 39),
    ("hh-open", 46),
    ("open hat", 46),
    ("hh-close", 42),
    ("closed hat", 42),
    ("hihat", 42),
    ("low tom", 45),
    ("mid tom", 47),
    ("hi tom", 50),
    ("high tom", 50),
    ("tom", 45),
    ("crash", 49),
    ("ride", 51),
    ("tambourine", 54),
    ("cowbell", 56),
    ("hi conga", 63),
    ("high conga", 63),
    ("low conga", 64),
    ("conga", 63),
    ("maracas", 70),
    ("shaker", 70),
    ("clave", 75),
    ("belltap", 53),
]

DRUM_CHANNEL = 9  # MIDI channel 10, zero-based
FALLBACK_BASE_NOTE = 36


def drum_note_for_track(track: Track, index: int) -> int:
    """
    Get the GM drum note for a track.

    Args:
        track: Track to map
        index: Position of the track in the pattern

    Returns:
        MIDI note number (0-127)
    """
    name = str(track.name).lower()
    for keyword, note in GM_DRUM_KEYWORDS:
        if keyword in name:
            return note
    return min(127, FALLBACK_BASE_NOTE + index)


class SpliceToMidiConverter:
    """
    Converter from a decoded Pattern to a type 1 MIDI file.

    Attributes:
        bars: How many times the 16-step bar is repeated
        ticks_per_beat: MIDI resolution
        velocity: Note-on velocity for active steps
    """

    def __init__(self, bars: int = 1, ticks_per_beat: int = 96, velocity: int = 100):
        if bars < 1:
            raise ValueError(f"bars must be at least 1, got {bars}")
        if not 1 <= velocity <= 127:
            raise ValueError(f"velocity must be 1-127, got {velocity}")
        if ticks_per_beat % STEPS_PER_BEAT:
            raise ValueError(f"ticks_per_beat must be a multiple of {STEPS_PER_BEAT}")

        self.bars = bars
        self.ticks_per_beat = ticks_per_beat
        self.velocity = velocity

    @property
    def step_ticks(self) -> int:
        return self.ticks_per_beat // STEPS_PER_BEAT

    def convert(self, pattern: Pattern) -> mido.MidiFile:
        """
        Convert a pattern to a MIDI file.

        Raises:
            ValueError: If the pattern tempo is not a positive number
        """
        if not math.isfinite(pattern.tempo) or pattern.tempo <= 0:
            raise ValueError(f"Cannot export pattern with tempo {pattern.tempo}")

        midi = mido.MidiFile(type=1, ticks_per_beat=self.ticks_per_beat)

        meta = mido.MidiTrack()
        # Meta text is saved as latin-1
        version = pattern.version.encode("ascii", errors="replace").decode("ascii")
        meta.append(mido.MetaMessage("track_name", name=f"HW {version}", time=0))
        meta.append(mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(pattern.tempo), time=0))
        meta.append(mido.MetaMessage("time_signature", numerator=4, denominator=4, time=0))
        meta.append(mido.MetaMessage("end_of_track", time=self.bars * self._bar_ticks()))
        midi.tracks.append(meta)

        drums = mido.MidiTrack()
        drums.append(mido.MetaMessage("track_name", name="Drums", time=0))
        last_tick = 0
        for tick, kind, note in self._collect_events(pattern):
            velocity = self.velocity if kind == "note_on" else 0
            drums.append(
                mido.Message(
                    kind, channel=DRUM_CHANNEL, note=note, velocity=velocity, time=tick - last_tick
                )
            )
            last_tick = tick
        drums.append(
            mido.MetaMessage("end_of_track", time=max(0, self.bars * self._bar_ticks() - last_tick))
        )
        midi.tracks.append(drums)

        logger.debug(
            "Exported %d tracks, %d bars at %s BPM", len(pattern.tracks), self.bars, pattern.tempo
        )
        return midi

    def write(self, pattern: Pattern, filepath: Union[str, Path]) -> Path:
        """Convert a pattern and save it as a .mid file."""
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)
        self.convert(pattern).save(str(filepath))
        return filepath

    def _bar_ticks(self) -> int:
        return STEPS_PER_TRACK * self.step_ticks

    def _collect_events(self, pattern: Pattern) -> List[Tuple[int, str, int]]:
        """Build absolute-time note events sorted by tick, note-offs first."""
        gate = self.step_ticks // 2
        events = []
        for index, track in enumerate(pattern.tracks):
            note = drum_note_for_track(track, index)
            for bar in range(self.bars):
                for step in track.active_steps():
                    start = bar * self._bar_ticks() + step * self.step_ticks
                    events.append((start, "note_on", note))
                    events.append((start + gate, "note_off", note))

        events.sort(key=lambda e: (e[0], e[1] != "note_off", e[2]))
        return events


def convert_splice_to_midi(
    source: Union[str, Path], output: Union[str, Path], bars: int = 1
) -> Path:
    """
    Convert a .splice file to a MIDI file.

    Args:
        source: Input .splice file
        output: Output .mid path
        bars: Number of bars to write

    Returns:
        Path of the written file
    """
    from splicedrum.formats.splice.reader import SpliceReader

    pattern = SpliceReader.read(source)
    return SpliceToMidiConverter(bars=bars).write(pattern, output)
