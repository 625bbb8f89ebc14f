"""
.splice file reader.

Reads .splice binary files and converts them to the Pattern model.
"""

import io
import logging
import struct
from pathlib import Path
from typing import BinaryIO, Optional, Union

from splicedrum.config import DecodeOptions
from splicedrum.formats.splice.binary_parser import SpliceParser
from splicedrum.models.header import HEADER_SIZE
from splicedrum.models.pattern import Pattern
from splicedrum.utils.validation import (
    HEADER_METADATA_SIZE,
    SPLICE_SIGNATURE,
    validate_splice_header,
)

logger = logging.getLogger(__name__)


class SpliceReader:
    """
    Reader for .splice pattern files.

    Example:
        pattern = SpliceReader.read("pattern_1.splice")
        print(pattern)
    """

    def __init__(self, options: Optional[DecodeOptions] = None):
        self.options = options or DecodeOptions()
        self.parser = SpliceParser(strict=self.options.strict_budget)

    @classmethod
    def read(
        cls, filepath: Union[str, Path], options: Optional[DecodeOptions] = None
    ) -> Pattern:
        """
        Read a .splice file and return a Pattern.

        Args:
            filepath: Path to .splice file
            options: Decode options

        Returns:
            Parsed Pattern object
        """
        reader = cls(options)
        return reader.parse_file(filepath)

    def parse_file(self, filepath: Union[str, Path]) -> Pattern:
        """
        Parse a .splice file.

        The file handle is closed before this returns or raises.
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        logger.debug("Decoding %s", filepath)
        with open(filepath, "rb") as f:
            return self.parse_stream(f)

    def parse_bytes(self, data: bytes) -> Pattern:
        """Parse .splice data from bytes."""
        return self.parse_stream(io.BytesIO(data))

    def parse_stream(self, stream: BinaryIO) -> Pattern:
        """
        Parse .splice data from a sequential binary stream.

        The stream must not be reused after a failure.
        """
        header, tracks = self.parser.parse_stream(stream)
        return Pattern(header=header, tracks=tracks)

    @classmethod
    def can_read(cls, filepath: Union[str, Path]) -> bool:
        """
        Check if a file looks like a .splice file.

        Returns:
            True if the file starts with the SPLICE signature
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            return False

        with open(filepath, "rb") as f:
            return validate_splice_header(f.read(len(SPLICE_SIGNATURE)))

    @classmethod
    def get_file_info(cls, filepath: Union[str, Path]) -> dict:
        """
        Get basic information about a .splice file without parsing tracks.

        Returns:
            Dictionary with file info
        """
        filepath = Path(filepath)

        with open(filepath, "rb") as f:
            data = f.read()

        info = {
            "valid": validate_splice_header(data),
            "size": len(data),
        }

        if len(data) >= len(SPLICE_SIGNATURE):
            info["signature"] = data[: len(SPLICE_SIGNATURE)].decode("ascii", errors="replace")

        if len(data) >= 14:
            (content_length,) = struct.unpack(">Q", data[6:14])
            info["content_length"] = content_length
            if content_length >= HEADER_METADATA_SIZE:
                expected = HEADER_SIZE + content_length - HEADER_METADATA_SIZE
                info["expected_size"] = expected
                info["trailing_bytes"] = max(0, len(data) - expected)
            else:
                info["valid"] = False

        return info


def decode_stream(stream: BinaryIO, options: Optional[DecodeOptions] = None) -> Pattern:
    """Decode a pattern from an open binary stream."""
    return SpliceReader(options).parse_stream(stream)


def decode_bytes(data: bytes, options: Optional[DecodeOptions] = None) -> Pattern:
    """Decode a pattern from bytes."""
    return SpliceReader(options).parse_bytes(data)


def decode_file(filepath: Union[str, Path], options: Optional[DecodeOptions] = None) -> Pattern:
    """Decode the .splice file found at the given path."""
    return SpliceReader.read(filepath, options)
