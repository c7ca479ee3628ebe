"""Tests for text encodings."""

import pytest

from id3scope.encoding import (
    Encoding,
    decode_text,
    describe_encoding,
    terminator_width,
    to_encoding,
)
from id3scope.errors import InvalidEncoding


class TestEncodingByte:
    """Test encoding byte validation."""

    @pytest.mark.parametrize("value", [0, 1, 2, 3])
    def test_valid(self, value):
        """Test that the four defined bytes are accepted."""
        assert to_encoding(value) == value

    @pytest.mark.parametrize("value", [4, 0x10, 0xFF])
    def test_invalid(self, value):
        """Test that other values raise InvalidEncoding."""
        with pytest.raises(InvalidEncoding) as exc_info:
            to_encoding(value)
        assert exc_info.value.value == value

    def test_terminator_widths(self):
        """Test that UTF-16 variants use 2-byte terminators."""
        assert terminator_width(Encoding.LATIN1) == 1
        assert terminator_width(Encoding.UTF16) == 2
        assert terminator_width(Encoding.UTF16BE) == 2
        assert terminator_width(Encoding.UTF8) == 1

    def test_describe(self):
        """Test human readable descriptions."""
        assert "UTF-8" in describe_encoding(3)
        assert describe_encoding(9) == "Incorrect encoding."


class TestDecode:
    """Test decoding bytes to text."""

    def test_latin1_maps_every_byte(self):
        """Test Latin-1 decoding against its UTF-8 re-encoding."""
        for b in range(256):
            text = decode_text(bytes([b]), Encoding.LATIN1)
            if b < 0x80:
                expected = bytes([b])
            else:
                expected = bytes([0xC0 | b >> 6, 0x80 | b & 0x3F])
            assert text.encode("utf-8") == expected

    @pytest.mark.parametrize("text", ["", "Song", "Café", "日本語", "emoji 🎵"])
    def test_utf8_round_trip(self, text):
        """Test that UTF-8 text decodes unchanged."""
        assert decode_text(text.encode("utf-8"), Encoding.UTF8) == text

    def test_utf16_little_endian_bom(self):
        """Test UTF-16 with a little-endian BOM."""
        assert decode_text(b"\xff\xfeh\x00i\x00", Encoding.UTF16) == "hi"

    def test_utf16_big_endian_bom(self):
        """Test UTF-16 with a big-endian BOM."""
        assert decode_text(b"\xfe\xff\x00h\x00i", Encoding.UTF16) == "hi"

    def test_utf16be_without_bom(self):
        """Test UTF-16BE."""
        assert decode_text(b"\x00h\x00i", Encoding.UTF16BE) == "hi"

    def test_malformed_utf8_replaced(self):
        """Test that bad sequences become U+FFFD instead of raising."""
        assert decode_text(b"a\xffb", Encoding.UTF8) == "a�b"

    def test_invalid_encoding_raises(self):
        """Test decoding with an undefined encoding byte."""
        with pytest.raises(InvalidEncoding):
            decode_text(b"abc", 7)
