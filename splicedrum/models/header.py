"""
Header data model for .splice patterns.
"""

from dataclasses import dataclass
import struct

from splicedrum.utils.validation import HEADER_METADATA_SIZE, validate_content_length


SIGNATURE_SIZE = 6
CONTENT_LENGTH_SIZE = 8
VERSION_SIZE = 32
TEMPO_SIZE = 4

# Bytes read by the header parser
HEADER_SIZE = SIGNATURE_SIZE + CONTENT_LENGTH_SIZE + VERSION_SIZE + TEMPO_SIZE


def format_tempo(tempo: float) -> str:
    """
    Format a tempo with the shortest decimal that maps back to the same float32.

    Returns:
        String like "98.4" or "120"
    """
    packed = struct.pack("<f", tempo)
    for precision in range(1, 10):
        value = float(f"{tempo:.{precision}g}")
        if struct.pack("<f", value) == packed:
            text = repr(value)
            return text[:-2] if text.endswith(".0") else text
    return repr(tempo)


@dataclass(frozen=True)
class Header:
    """
    The fixed 50-byte prefix of a .splice file.

    Attributes:
        signature: Magic bytes, always b"SPLICE" once parsed
        content_length: Declared bytes of metadata plus track data
        version: 32-byte NUL-padded hardware version field
        tempo: Tempo in BPM (float32 precision)
    """

    signature: bytes
    content_length: int
    version: bytes
    tempo: float

    def __post_init__(self):
        if len(self.signature) != SIGNATURE_SIZE:
            raise ValueError(f"Signature must be {SIGNATURE_SIZE} bytes, got {len(self.signature)}")
        if len(self.version) != VERSION_SIZE:
            raise ValueError(f"Version must be {VERSION_SIZE} bytes, got {len(self.version)}")

    def version_text(self) -> str:
        """Get the version string up to the first NUL byte."""
        raw = self.version.split(b"\x00", 1)[0]
        return raw.decode("ascii", errors="replace")

    def content_size(self) -> int:
        """
        Get the number of track data bytes that follow the header.

        Raises:
            SizeUnderflowError: If content_length is below the metadata size
        """
        validate_content_length(self.content_length)
        return self.content_length - HEADER_METADATA_SIZE

    def __str__(self) -> str:
        return f"Saved with HW Version: {self.version_text()}\nTempo: {format_tempo(self.tempo)}"
