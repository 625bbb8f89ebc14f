"""Tests for the pattern data models."""

import dataclasses
import struct
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from splicedrum.models import Header, PascalString, Pattern, Track, render_pattern
from splicedrum.models.header import format_tempo
from splicedrum.utils.validation import SizeUnderflowError


def make_header(version: bytes = b"0.909-alpha", tempo: float = 78.5, content_length: int = 100):
    return Header(
        signature=b"SPLICE",
        content_length=content_length,
        version=version.ljust(32, b"\x00"),
        tempo=tempo,
    )


def float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class TestHeader:
    """Test cases for the Header model."""

    def test_version_text(self):
        """Test the version stops at the first NUL."""
        assert make_header().version_text() == "0.909-alpha"

    def test_version_text_without_nul(self):
        """Test a version that fills the whole field."""
        header = make_header(version=b"A" * 32)

        assert header.version_text() == "A" * 32

    def test_version_text_ignores_bytes_after_nul(self):
        """Test that padding after the first NUL is dropped."""
        header = make_header(version=b"1.0\x00garbage")

        assert header.version_text() == "1.0"
        assert "\x00" not in header.version_text()

    def test_string_representation(self):
        """Test the two-line header printout."""
        expected = "Saved with HW Version: 0.909-alpha\nTempo: 78.5"

        assert str(make_header()) == expected

    def test_whole_tempo_has_no_decimals(self):
        """Test that a whole-number tempo prints without a fraction."""
        assert str(make_header(tempo=120.0)).endswith("Tempo: 120")

    def test_float32_tempo_prints_shortest(self):
        """Test that a float32-rounded tempo prints as written."""
        assert format_tempo(float32(98.4)) == "98.4"
        assert format_tempo(float32(119.99)) == "119.99"

    @pytest.mark.parametrize(
        "tempo, expected", [(60.0, "60"), (100.0, "100"), (120.0, "120"), (1000.0, "1000")]
    )
    def test_integer_tempo_prints_digits(self, tempo, expected):
        """Test that whole tempos of any magnitude print as plain integers."""
        assert format_tempo(tempo) == expected
        assert str(make_header(tempo=tempo)).endswith(f"Tempo: {expected}")

    def test_content_size(self):
        """Test content size arithmetic."""
        assert make_header(content_length=239).content_size() == 199

    def test_content_size_underflow(self):
        """Test that content size refuses to go negative."""
        header = make_header(content_length=12)

        with pytest.raises(SizeUnderflowError):
            header.content_size()

    def test_field_sizes_enforced(self):
        """Test that fixed-size fields reject the wrong length."""
        with pytest.raises(ValueError, match="Signature"):
            Header(signature=b"SPLIC", content_length=40, version=bytes(32), tempo=1.0)

        with pytest.raises(ValueError, match="Version"):
            Header(signature=b"SPLICE", content_length=40, version=bytes(31), tempo=1.0)

    def test_immutable(self):
        """Test that headers cannot be modified."""
        header = make_header()

        with pytest.raises(dataclasses.FrozenInstanceError):
            header.tempo = 90.0


class TestPascalString:
    """Test cases for the PascalString model."""

    def test_string_representation(self):
        """Test text conversion."""
        assert str(PascalString(b"Test String")) == "Test String"

    def test_sizes(self):
        """Test length and stream size."""
        pstring = PascalString(b"Test String")

        assert pstring.length == 11
        assert pstring.byte_size() == 12

    def test_invalid_utf8_is_replaced(self):
        """Test lenient decoding of raw bytes."""
        assert str(PascalString(b"ab\xff")) == "ab�"

    def test_too_long(self):
        """Test that more than 255 bytes cannot be length-prefixed."""
        with pytest.raises(ValueError, match="at most 255"):
            PascalString(b"x" * 256)


class TestTrack:
    """Test cases for the Track model."""

    def test_string_representation(self):
        """Test the track printout."""
        track = Track(
            id=220,
            name=PascalString(b"Low Conga"),
            steps=bytes([0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0]),
        )

        assert str(track) == "(220) Low Conga\t|---x|----|---x|----|"

    def test_non_zero_steps_are_on(self):
        """Test that any non-zero step value counts as on."""
        track = Track(id=1, name=PascalString(b"hh"), steps=bytes([2, 0, 255, 0] * 4))

        assert track.step_grid() == "|x-x-|x-x-|x-x-|x-x-|"
        assert track.active_steps() == [0, 2, 4, 6, 8, 10, 12, 14]

    def test_byte_size(self):
        """Test size is id + length byte + name + steps."""
        track = Track(id=0, name=PascalString(b"kick"), steps=bytes(16))

        assert track.byte_size() == 4 + 1 + 4 + 16

    def test_steps_length_enforced(self):
        """Test that a track needs exactly 16 steps."""
        with pytest.raises(ValueError, match="16 steps"):
            Track(id=0, name=PascalString(b"kick"), steps=bytes(15))


class TestPattern:
    """Test cases for the Pattern model."""

    def make_pattern(self) -> Pattern:
        return Pattern(
            header=make_header(version=b"0.808-alpha", tempo=120.0),
            tracks=[
                Track(id=0, name=PascalString(b"kick"), steps=bytes([1, 0, 0, 0] * 4)),
                Track(id=1, name=PascalString(b"snare"), steps=bytes([0, 0, 0, 0, 1, 0, 0, 0] * 2)),
            ],
        )

    def test_string_representation(self):
        """Test the full printout."""
        expected = (
            "Saved with HW Version: 0.808-alpha\n"
            "Tempo: 120\n"
            "(0) kick\t|x---|x---|x---|x---|\n"
            "(1) snare\t|----|x---|----|x---|\n"
        )
        pattern = self.make_pattern()

        assert str(pattern) == expected
        assert render_pattern(pattern) == expected

    def test_empty_pattern(self):
        """Test a pattern without tracks prints only the header."""
        pattern = Pattern(header=make_header())

        assert str(pattern) == "Saved with HW Version: 0.909-alpha\nTempo: 78.5\n"

    def test_properties(self):
        """Test convenience accessors."""
        pattern = self.make_pattern()

        assert pattern.tempo == 120.0
        assert pattern.version == "0.808-alpha"
        assert pattern.tracks_byte_size() == 25 + 26
        assert pattern.get_track(1).name.text == b"snare"
        assert pattern.get_track(7) is None
        assert repr(pattern) == "Pattern(version='0.808-alpha', tempo=120.0, tracks=2)"
