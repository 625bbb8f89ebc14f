"""
Track data model for .splice patterns.
"""

from dataclasses import dataclass
from typing import List


TRACK_ID_SIZE = 4
PASCAL_LENGTH_SIZE = 1
STEPS_PER_TRACK = 16
STEPS_PER_BEAT = 4
MAX_NAME_LENGTH = 255


@dataclass(frozen=True)
class PascalString:
    """
    A length-prefixed string, one length byte followed by raw text.

    The text is kept as bytes; ``str()`` decodes it leniently.
    """

    text: bytes = b""

    def __post_init__(self):
        if len(self.text) > MAX_NAME_LENGTH:
            raise ValueError(
                f"Pascal string text must be at most {MAX_NAME_LENGTH} bytes, got {len(self.text)}"
            )

    @property
    def length(self) -> int:
        return len(self.text)

    def byte_size(self) -> int:
        """Number of bytes this string occupies in the stream."""
        return PASCAL_LENGTH_SIZE + self.length

    def __str__(self) -> str:
        return self.text.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Track:
    """
    A single instrument track.

    Attributes:
        id: Opaque instrument identifier (u32)
        name: Instrument display name
        steps: 16 step bytes, 0 = off, anything else = on
    """

    id: int
    name: PascalString
    steps: bytes

    def __post_init__(self):
        if len(self.steps) != STEPS_PER_TRACK:
            raise ValueError(f"Track must have {STEPS_PER_TRACK} steps, got {len(self.steps)}")

    def byte_size(self) -> int:
        """Number of bytes this track occupies in the stream."""
        return TRACK_ID_SIZE + self.name.byte_size() + STEPS_PER_TRACK

    def active_steps(self) -> List[int]:
        """Get indices of steps that are switched on."""
        return [i for i, step in enumerate(self.steps) if step]

    def step_grid(self, on: str = "x", off: str = "-", separator: str = "|") -> str:
        """
        Render the steps as a grid of four groups of four.

        Returns:
            String like "|x---|x---|x---|x---|"
        """
        grid = separator
        for index, step in enumerate(self.steps):
            grid += on if step else off
            if (index + 1) % STEPS_PER_BEAT == 0:
                grid += separator
        return grid

    def __str__(self) -> str:
        return f"({self.id}) {self.name}\t{self.step_grid()}"
