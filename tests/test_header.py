"""Tests for tag header parsing."""

import pytest

from id3scope.cursor import ByteCursor
from id3scope.errors import BadMagic, TruncatedInput
from id3scope.header import TagHeader, is_bit_set

from conftest import synchsafe


class TestTagHeader:
    """Test TagHeader.from_cursor."""

    def test_basic_header(self):
        """Test parsing a plain v2.4 header."""
        cursor = ByteCursor.from_bytes(b"ID3\x04\x00\x00" + synchsafe(257))
        header = TagHeader.from_cursor(cursor)

        assert header.version == (4, 0)
        assert header.major_version == 4
        assert header.version_string == "2.4.0"
        assert header.declared_size == 257
        assert not header.unsync
        assert not header.has_ext_header
        assert not header.experimental
        assert not header.has_footer
        assert cursor.tell() == 10

    def test_flags(self):
        """Test that each flag bit is decoded."""
        cursor = ByteCursor.from_bytes(b"ID3\x04\x00\xb0" + synchsafe(0))
        header = TagHeader.from_cursor(cursor)

        assert header.unsync
        assert not header.has_ext_header
        assert header.experimental
        assert header.has_footer

    def test_extended_header_skipped(self):
        """Test that the extended header is skipped by its declared size."""
        ext = synchsafe(10) + b"\x01\x00\x00\x00\x00\x00"
        cursor = ByteCursor.from_bytes(b"ID3\x04\x00\x40" + synchsafe(100) + ext + b"TIT2")
        header = TagHeader.from_cursor(cursor)

        assert header.has_ext_header
        assert header.ext_header_size == 10
        assert cursor.tell() == 20
        assert cursor.read_exact(4) == b"TIT2"

    def test_bad_magic(self):
        """Test that a missing 'ID3' identifier raises BadMagic."""
        cursor = ByteCursor.from_bytes(b"RIFF\x00\x00\x00\x00\x00\x00")
        with pytest.raises(BadMagic) as exc_info:
            TagHeader.from_cursor(cursor)
        assert exc_info.value.found == b"RIF"

    def test_truncated_header(self):
        """Test that a short header raises TruncatedInput."""
        cursor = ByteCursor.from_bytes(b"ID3\x04\x00")
        with pytest.raises(TruncatedInput):
            TagHeader.from_cursor(cursor)


def test_is_bit_set():
    """Test single bit checks."""
    assert is_bit_set(0x80, 7)
    assert not is_bit_set(0x80, 6)
    assert is_bit_set(0x01, 0)
