""".splice format handlers."""

from splicedrum.formats.splice.binary_parser import (
    SpliceParser,
    parse_header,
    parse_pascal_string,
    parse_track,
    parse_track_stream,
)
from splicedrum.formats.splice.reader import (
    SpliceReader,
    decode_bytes,
    decode_file,
    decode_stream,
)

__all__ = [
    "SpliceParser",
    "SpliceReader",
    "decode_bytes",
    "decode_file",
    "decode_stream",
    "parse_header",
    "parse_pascal_string",
    "parse_track",
    "parse_track_stream",
]
