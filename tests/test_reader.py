"""Tests for the .splice reader and decode entry points."""

import builtins
import io
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from splicedrum import DecodeOptions, SpliceReader, decode_bytes, decode_file, decode_stream
from splicedrum.config import STRICT_ENV_VAR
import splicedrum.formats.splice.reader as reader_module
from splicedrum.utils.validation import (
    BudgetMismatchError,
    SignatureMismatchError,
    TruncatedInputError,
)
from splice_builders import BACKBEAT, FOUR_ON_FLOOR, TrickleStream, build_splice, build_track


class TestDecode:
    """Test cases for the top-level decode functions."""

    def test_decode_bytes(self, splice_data):
        """Test decoding reproduces the literal fields."""
        pattern = decode_bytes(splice_data)

        assert pattern.header.content_length == 40 + 25 + 26
        assert pattern.version == "0.808-alpha"
        assert pattern.tempo == 120.0
        assert [t.id for t in pattern.tracks] == [0, 1]
        assert [str(t.name) for t in pattern.tracks] == ["kick", "snare"]
        assert pattern.tracks[0].steps == bytes(FOUR_ON_FLOOR)
        assert pattern.tracks[1].steps == bytes(BACKBEAT)
        assert pattern.tracks_byte_size() == pattern.header.content_size()

    def test_printout(self, splice_data):
        """Test the decoded pattern prints in the classic layout."""
        expected = (
            "Saved with HW Version: 0.808-alpha\n"
            "Tempo: 120\n"
            "(0) kick\t|x---|x---|x---|x---|\n"
            "(1) snare\t|----|x---|----|x---|\n"
        )

        assert str(decode_bytes(splice_data)) == expected

    def test_trailing_bytes_are_not_read(self, splice_data):
        """Test that decoding stops at the declared length."""
        stream = io.BytesIO(splice_data + b"\x00" * 32)
        pattern = decode_stream(stream)

        assert stream.tell() == 50 + pattern.header.content_size()
        assert len(pattern.tracks) == 2

    def test_short_reads_are_retried(self, splice_data):
        """Test decoding from a stream that returns a few bytes per read."""
        stream = TrickleStream(splice_data, chunk=7)
        pattern = decode_stream(stream)

        assert str(pattern) == str(decode_bytes(splice_data))
        assert stream.reads > len(splice_data) // 7

    def test_short_reads_still_detect_truncation(self, splice_data):
        """Test a trickling stream that ends early reports the partial tracks."""
        with pytest.raises(TruncatedInputError) as exc_info:
            decode_stream(TrickleStream(splice_data[:-3], chunk=3))

        assert "track steps" in str(exc_info.value)
        assert [str(t.name) for t in exc_info.value.tracks] == ["kick"]

    def test_tracks_keep_file_order(self):
        """Test that tracks are not sorted by id."""
        data = build_splice(
            [
                build_track(40, b"hh-open", FOUR_ON_FLOOR),
                build_track(2, b"clap", BACKBEAT),
                build_track(40, b"hh-open", BACKBEAT),
            ]
        )

        assert [t.id for t in decode_bytes(data).tracks] == [40, 2, 40]

    def test_no_tracks(self):
        """Test a file with an empty track region."""
        pattern = decode_bytes(build_splice([]))

        assert pattern.tracks == []

    def test_signature_error_propagates(self, splice_data):
        """Test header failures reach the caller unchanged."""
        with pytest.raises(SignatureMismatchError):
            decode_bytes(b"SPLICX" + splice_data[6:])

    def test_truncated_track_keeps_partial_result(self, splice_data):
        """Test the partial track list and header travel with the error."""
        with pytest.raises(TruncatedInputError) as exc_info:
            decode_bytes(splice_data[:-3])

        error = exc_info.value
        assert "track steps" in str(error)
        assert [str(t.name) for t in error.tracks] == ["kick"]
        assert error.header.tempo == 120.0

    def test_strict_option(self, overshoot_file):
        """Test strict decoding through options."""
        data = overshoot_file.read_bytes()

        assert len(decode_bytes(data).tracks) == 2

        with pytest.raises(BudgetMismatchError):
            decode_bytes(data, DecodeOptions(strict_budget=True))


class TestSpliceReader:
    """Test cases for file access."""

    def test_read_file(self, splice_file):
        """Test reading a file from disk."""
        pattern = SpliceReader.read(splice_file)

        assert len(pattern.tracks) == 2
        assert decode_file(str(splice_file)).tracks == pattern.tracks

    def test_missing_file(self, tmp_path):
        """Test a missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            decode_file(tmp_path / "missing.splice")

    @pytest.fixture
    def opened_files(self, monkeypatch):
        """Record every file the reader module opens."""
        handles = []

        def recording_open(*args, **kwargs):
            handle = builtins.open(*args, **kwargs)
            handles.append(handle)
            return handle

        monkeypatch.setattr(reader_module, "open", recording_open, raising=False)
        return handles

    def test_file_error(self, truncated_file, opened_files):
        """Test a truncated file raises after closing the handle."""
        with pytest.raises(TruncatedInputError):
            SpliceReader.read(truncated_file)

        assert len(opened_files) == 1
        assert opened_files[0].closed

    def test_signature_error_closes_file(self, tmp_path, splice_data, opened_files):
        path = tmp_path / "bad.splice"
        path.write_bytes(b"PLICE?" + splice_data[6:])

        with pytest.raises(SignatureMismatchError):
            decode_file(path)

        assert opened_files and all(f.closed for f in opened_files)

    def test_read_closes_file(self, splice_file, opened_files):
        SpliceReader.read(splice_file)

        assert len(opened_files) == 1
        assert opened_files[0].closed

    def test_can_read(self, splice_file, tmp_path):
        """Test signature sniffing."""
        other = tmp_path / "other.bin"
        other.write_bytes(b"RIFF....")

        assert SpliceReader.can_read(splice_file) is True
        assert SpliceReader.can_read(other) is False
        assert SpliceReader.can_read(tmp_path / "missing.splice") is False

    def test_get_file_info(self, tmp_path, splice_data):
        """Test quick file info including trailing bytes."""
        path = tmp_path / "padded.splice"
        path.write_bytes(splice_data + b"\xff" * 7)

        info = SpliceReader.get_file_info(path)

        assert info["valid"] is True
        assert info["signature"] == "SPLICE"
        assert info["content_length"] == 91
        assert info["expected_size"] == len(splice_data)
        assert info["trailing_bytes"] == 7

    def test_get_file_info_underflow(self, tmp_path):
        """Test that an underflowing content length marks the file invalid."""
        path = tmp_path / "bad.splice"
        path.write_bytes(build_splice([], content_length=3))

        info = SpliceReader.get_file_info(path)

        assert info["valid"] is False
        assert "expected_size" not in info


class TestDecodeOptions:
    """Test cases for decoder settings."""

    def test_default_is_lenient(self):
        assert DecodeOptions().strict_budget is False

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_strict_from_env(self, value):
        """Test truthy environment values enable strict mode."""
        assert DecodeOptions.from_env({STRICT_ENV_VAR: value}).strict_budget is True

    def test_lenient_from_env(self, monkeypatch):
        """Test unset or falsy values keep lenient mode."""
        monkeypatch.delenv(STRICT_ENV_VAR, raising=False)

        assert DecodeOptions.from_env().strict_budget is False
        assert DecodeOptions.from_env({STRICT_ENV_VAR: "0"}).strict_budget is False
