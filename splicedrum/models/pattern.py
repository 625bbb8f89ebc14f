"""
Pattern data model - the top-level container for decoded .splice data.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from splicedrum.models.header import Header
from splicedrum.models.track import Track


@dataclass
class Pattern:
    """
    Complete decoded drum pattern.

    Attributes:
        header: The file header
        tracks: Tracks in file order
    """

    header: Header
    tracks: List[Track] = field(default_factory=list)

    @property
    def tempo(self) -> float:
        """Get pattern tempo in BPM."""
        return self.header.tempo

    @property
    def version(self) -> str:
        """Get the hardware version string."""
        return self.header.version_text()

    def tracks_byte_size(self) -> int:
        """Total bytes occupied by all tracks."""
        return sum(track.byte_size() for track in self.tracks)

    def get_track(self, track_id: int) -> Optional[Track]:
        """Get the first track with the given id."""
        for track in self.tracks:
            if track.id == track_id:
                return track
        return None

    def __str__(self) -> str:
        return render_pattern(self)

    def __repr__(self) -> str:
        return (
            f"Pattern(version={self.version!r}, tempo={self.tempo:.1f}, "
            f"tracks={len(self.tracks)})"
        )


def render_pattern(pattern: Pattern) -> str:
    """
    Render a pattern as the plain text printout.

    Returns:
        Header lines followed by one line per track
    """
    text = f"{pattern.header}\n"
    for track in pattern.tracks:
        text += f"{track}\n"
    return text
