"""Tests for frame identifier dispatch."""

import pytest

from id3scope.errors import UnrecognizedFrameKind
from id3scope.frames import (
    CommentFrame,
    TermsOfUseFrame,
    TextFrame,
    UrlFrame,
    UserTextFrame,
    UserUrlFrame,
)
from id3scope.registry import FRAME_KINDS, frame_name, identify


class TestIdentify:
    """Test identify()."""

    def test_exact_identifiers(self):
        """Test that every table entry maps to its own class."""
        for frame_id, kind in FRAME_KINDS.items():
            assert identify(frame_id) is kind

    def test_exact_before_prefix(self):
        """Test that TXXX and WXXX are not caught by the prefix rules."""
        assert identify("TXXX") is UserTextFrame
        assert identify("WXXX") is UserUrlFrame

    @pytest.mark.parametrize("frame_id", ["TIT2", "TPE1", "TZZZ"])
    def test_text_prefix(self, frame_id):
        """Test the 'T' namespace."""
        assert identify(frame_id) is TextFrame

    @pytest.mark.parametrize("frame_id", ["WOAR", "WCOM", "WZZZ"])
    def test_url_prefix(self, frame_id):
        """Test the 'W' namespace."""
        assert identify(frame_id) is UrlFrame

    def test_language_frames(self):
        """Test COMM and USER dispatch."""
        assert identify("COMM") is CommentFrame
        assert identify("USER") is TermsOfUseFrame

    @pytest.mark.parametrize("frame_id", ["APIC", "ABCD", "\x01\x02\x03\x04"])
    def test_unrecognized(self, frame_id):
        """Test that unknown identifiers raise UnrecognizedFrameKind."""
        with pytest.raises(UnrecognizedFrameKind) as exc_info:
            identify(frame_id)
        assert exc_info.value.frame_id == frame_id

    def test_unrecognized_is_key_error(self):
        """Test that UnrecognizedFrameKind can be caught as KeyError."""
        with pytest.raises(KeyError):
            identify("APIC")


class TestFrameName:
    """Test frame_name()."""

    def test_known_name(self):
        """Test a name from the table."""
        assert frame_name("TIT2") == "Title/songname/content description"

    def test_prefix_fallback(self):
        """Test an unknown text frame falls back to the class title."""
        assert frame_name("TZZZ") == "Text Frame"

    def test_unknown(self):
        """Test an unrecognized identifier."""
        assert frame_name("APIC") == "Unknown frame"
