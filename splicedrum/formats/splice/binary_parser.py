"""
.splice binary file parser.

Parses the binary structure of .splice drum pattern files.

Layout:
    Offset  Size    Description
    0x00    6       Signature "SPLICE"
    0x06    8       Content length (big-endian u64)
    0x0E    32      Hardware version, NUL padded
    0x2E    4       Tempo (little-endian float32)
    0x32    var     Track records until content length - 40 bytes are used

Track record:
    4       Instrument id (little-endian u32)
    1       Name length
    n       Name text
    16      Steps (0 = off)
"""

import logging
import struct
from typing import BinaryIO, List

from splicedrum.models.header import (
    CONTENT_LENGTH_SIZE,
    Header,
    SIGNATURE_SIZE,
    TEMPO_SIZE,
    VERSION_SIZE,
)
from splicedrum.models.track import (
    PASCAL_LENGTH_SIZE,
    STEPS_PER_TRACK,
    TRACK_ID_SIZE,
    PascalString,
    Track,
)
from splicedrum.utils.validation import (
    BudgetMismatchError,
    TruncatedInputError,
    read_exact,
    validate_content_length,
    validate_signature,
)

logger = logging.getLogger(__name__)


def parse_header(stream: BinaryIO) -> Header:
    """
    Parse the fixed header from the start of a stream.

    Args:
        stream: Binary stream positioned at offset 0

    Returns:
        Parsed Header

    Raises:
        TruncatedInputError: If any header field is cut short
        SignatureMismatchError: If the magic bytes are wrong
        SizeUnderflowError: If the content length is below 40
    """
    signature = read_exact(stream, SIGNATURE_SIZE, "header signature")
    (content_length,) = struct.unpack(
        ">Q", read_exact(stream, CONTENT_LENGTH_SIZE, "header content length")
    )
    version = read_exact(stream, VERSION_SIZE, "header version")
    (tempo,) = struct.unpack("<f", read_exact(stream, TEMPO_SIZE, "header tempo"))

    # Signature is only checked once every field has been read
    validate_signature(signature)
    validate_content_length(content_length)

    header = Header(
        signature=signature,
        content_length=content_length,
        version=version,
        tempo=tempo,
    )
    logger.debug(
        "Header: version=%r tempo=%s content_length=%d",
        header.version_text(),
        tempo,
        content_length,
    )
    return header


def parse_pascal_string(stream: BinaryIO) -> PascalString:
    """
    Parse a length-prefixed string.

    Raises:
        TruncatedInputError: If the length byte or the text is missing
    """
    (length,) = read_exact(stream, PASCAL_LENGTH_SIZE, "pascal string length")
    text = read_exact(stream, length, "pascal string text")
    return PascalString(text)


def parse_track(stream: BinaryIO) -> Track:
    """
    Parse a single track record.

    Raises:
        TruncatedInputError: Annotated with "track id", "track name" or "track steps"
    """
    (track_id,) = struct.unpack("<I", read_exact(stream, TRACK_ID_SIZE, "track id"))

    try:
        name = parse_pascal_string(stream)
    except TruncatedInputError as e:
        raise TruncatedInputError("track name", cause=e) from e

    steps = read_exact(stream, STEPS_PER_TRACK, "track steps")
    return Track(id=track_id, name=name, steps=steps)


def parse_track_stream(stream: BinaryIO, bytes_to_read: int, strict: bool = False) -> List[Track]:
    """
    Parse tracks until their combined size reaches the byte budget.

    The format has no track count, so the loop runs on the running byte
    total alone. A track that fails to parse ends the loop immediately.

    Args:
        stream: Binary stream positioned at the first track
        bytes_to_read: Track data budget from the header
        strict: Require the tracks to end exactly on the budget

    Returns:
        Tracks in stream order

    Raises:
        TruncatedInputError: If a track is cut short; ``tracks`` holds the
            tracks parsed before it
        BudgetMismatchError: In strict mode, if the tracks overshoot the budget
    """
    tracks: List[Track] = []
    bytes_read = 0

    while bytes_read < bytes_to_read:
        try:
            track = parse_track(stream)
        except TruncatedInputError as e:
            error = TruncatedInputError("track stream", cause=e)
            error.tracks = tracks
            raise error from e

        tracks.append(track)
        bytes_read += track.byte_size()
        logger.debug(
            "Track %d: id=%d name=%r size=%d (%d/%d bytes)",
            len(tracks),
            track.id,
            str(track.name),
            track.byte_size(),
            bytes_read,
            bytes_to_read,
        )

    if bytes_read != bytes_to_read:
        if strict:
            raise BudgetMismatchError(bytes_to_read, bytes_read, tracks)
        logger.warning(
            "Tracks occupy %d bytes but the header declares %d", bytes_read, bytes_to_read
        )

    return tracks


class SpliceParser:
    """
    Parser for .splice binary streams.

    Example:
        parser = SpliceParser()
        header, tracks = parser.parse_bytes(data)
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.bytes_consumed = 0

    def parse_stream(self, stream: BinaryIO):
        """
        Parse a header and its tracks from a stream.

        Returns:
            Tuple of (header, tracks)
        """
        header = parse_header(stream)
        try:
            tracks = parse_track_stream(stream, header.content_size(), strict=self.strict)
        except (TruncatedInputError, BudgetMismatchError) as e:
            e.header = header
            raise

        self.bytes_consumed = (
            SIGNATURE_SIZE
            + CONTENT_LENGTH_SIZE
            + VERSION_SIZE
            + TEMPO_SIZE
            + sum(track.byte_size() for track in tracks)
        )
        return header, tracks
