"""Format handlers for .splice files."""

from splicedrum.formats.splice import SpliceReader, decode_bytes, decode_file, decode_stream

__all__ = ["SpliceReader", "decode_bytes", "decode_file", "decode_stream"]
