"""Tests for attachment sinks."""

import pytest

from id3scope import ID3Tag
from id3scope.sinks import DirectorySink, MemorySink

from conftest import make_frame, make_tag


class TestDirectorySink:
    """Test DirectorySink."""

    def test_writes_file(self, tmp_path):
        """Test that bytes land in <dir>/<name><ext>."""
        sink = DirectorySink(tmp_path / "out")
        with sink.open("song.mp3", ".png") as f:
            f.write(b"\x01\x02\x03")

        assert (tmp_path / "out" / "song.mp3.png").read_bytes() == b"\x01\x02\x03"

    def test_name_cannot_escape_directory(self, tmp_path):
        """Test that only the last path component of the name is used."""
        sink = DirectorySink(tmp_path)
        assert sink.path_for("../../etc/passwd", ".png") == tmp_path / "passwd.png"

    def test_closed_on_error(self, tmp_path):
        """Test that the file is closed when the writer raises."""
        sink = DirectorySink(tmp_path)
        with pytest.raises(RuntimeError):
            with sink.open("x", ".bin") as f:
                f.write(b"partial")
                raise RuntimeError("boom")
        assert f.closed

    def test_walk_extracts_to_directory(self, tmp_path, tag_file):
        """Test extraction of a COMR logo through ID3Tag.read."""
        body = b"\x00\x00\x00\x00\x00Seller\x00\x00image/png\x00LOGO"
        path = tag_file(make_tag(make_frame("COMR", body)), name="a.mp3")
        ID3Tag.read(path, sink=DirectorySink(tmp_path / "attachments"))

        assert (tmp_path / "attachments" / "a.mp3.png").read_bytes() == b"LOGO"


class TestMemorySink:
    """Test MemorySink."""

    def test_stores_bytes(self):
        """Test that written bytes are kept by filename."""
        sink = MemorySink()
        with sink.open("secret_data", "") as f:
            f.write(b"abc")

        assert "secret_data" in sink
        assert sink["secret_data"] == b"abc"

    def test_partial_write_kept(self):
        """Test that bytes written before an error are still stored."""
        sink = MemorySink()
        with pytest.raises(RuntimeError):
            with sink.open("x", ".bin") as f:
                f.write(b"part")
                raise RuntimeError("boom")

        assert sink["x.bin"] == b"part"
