"""
Decode errors and structural validation helpers for .splice data.
"""

from typing import BinaryIO, List, Optional


SPLICE_SIGNATURE = b"SPLICE"

# Bytes counted by the header's content length that are not track data
HEADER_METADATA_SIZE = 40


class SpliceDecodeError(ValueError):
    """Base class for all .splice decoding failures."""

    def __init__(self, context: str, message: str):
        self.context = context
        super().__init__(f"error when parsing {context}: {message}")


class TruncatedInputError(SpliceDecodeError):
    """
    Raised when fewer bytes were available than a field required.

    At the track-stream level the tracks parsed before the failure are
    kept in ``tracks`` so callers can inspect the partial result.
    """

    def __init__(
        self,
        context: str,
        expected: Optional[int] = None,
        available: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        self.expected = expected
        self.available = available
        self.cause = cause
        self.tracks: List = []
        self.header = None

        if cause is not None:
            message = str(cause)
        elif available == 0:
            message = "unexpected end of input"
        else:
            message = f"unexpected end of input (needed {expected} bytes, got {available})"
        super().__init__(context, message)


class SignatureMismatchError(SpliceDecodeError):
    """Raised when the leading magic bytes are not ``SPLICE``."""

    def __init__(self, actual: bytes):
        self.actual = actual
        super().__init__("header", f"signature mismatch (got {actual!r})")


class SizeUnderflowError(SpliceDecodeError):
    """Raised when the declared content length is below the header metadata size."""

    def __init__(self, content_length: int):
        self.content_length = content_length
        super().__init__(
            "header content length",
            f"content length {content_length} is smaller than {HEADER_METADATA_SIZE}",
        )


class BudgetMismatchError(SpliceDecodeError):
    """Raised in strict mode when tracks do not end exactly on the byte budget."""

    def __init__(self, expected: int, actual: int, tracks: List):
        self.expected = expected
        self.actual = actual
        self.tracks = tracks
        self.header = None
        super().__init__(
            "track stream",
            f"tracks occupy {actual} bytes but the header declares {expected}",
        )


def read_exact(stream: BinaryIO, size: int, context: str) -> bytes:
    """
    Read exactly ``size`` bytes from a stream.

    Short reads are retried until the stream reports end of input.

    Args:
        stream: Binary stream to read from
        size: Number of bytes required
        context: Field name used in the error message

    Returns:
        The bytes read

    Raises:
        TruncatedInputError: If the stream ends early
    """
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)

    data = b"".join(chunks)
    if len(data) != size:
        raise TruncatedInputError(context, expected=size, available=len(data))
    return data


def validate_signature(signature: bytes) -> None:
    """Raise SignatureMismatchError unless signature is ``SPLICE``."""
    if signature != SPLICE_SIGNATURE:
        raise SignatureMismatchError(signature)


def validate_content_length(content_length: int) -> None:
    """Raise SizeUnderflowError if the content length cannot hold the metadata."""
    if content_length < HEADER_METADATA_SIZE:
        raise SizeUnderflowError(content_length)


def validate_splice_header(data: bytes) -> bool:
    """
    Check whether data starts with the .splice signature.

    Args:
        data: File data (at least 6 bytes)

    Returns:
        True if the signature matches
    """
    if len(data) < len(SPLICE_SIGNATURE):
        return False

    return data[: len(SPLICE_SIGNATURE)] == SPLICE_SIGNATURE
