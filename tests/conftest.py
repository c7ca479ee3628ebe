"""Pytest configuration and fixtures."""

import struct
import sys
from pathlib import Path

import pytest
from mutagen.id3._util import BitPaddedInt

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from id3scope.constants import FRAME_ID_SIZE  # noqa: E402
from id3scope.cursor import ByteCursor  # noqa: E402
from id3scope.frames import FrameBody, FrameHeader  # noqa: E402
from id3scope.registry import identify  # noqa: E402


def synchsafe(value: int) -> bytes:
    """Encode value as a 4-byte synch-safe integer."""
    return BitPaddedInt.to_str(value, width=4)


def make_frame(frame_id: str, body: bytes, version: int = 4, size=None) -> bytes:
    """Build a frame header + body. size overrides the declared size."""
    if size is None:
        size = len(body)
    size_field = struct.pack(">I", size) if version == 3 else synchsafe(size)
    return frame_id.encode("latin-1") + size_field + b"\x00\x00" + body


def make_tag(*frames: bytes, padding: int = 0, flags: int = 0, version: int = 4,
             size=None, ext: bytes = b"", trailer: bytes = b"") -> bytes:
    """Build a complete tag.

    size defaults to the length of everything after the header (extended
    header, frames and padding). trailer is appended after the tag region.
    """
    payload = ext + b"".join(frames) + b"\x00" * padding
    if size is None:
        size = len(payload)
    return b"ID3" + bytes([version, 0, flags]) + synchsafe(size) + payload + trailer


def decode_frame(frame_id: str, body: bytes, attachment_name: str = "attachment"):
    """Decode a single frame body; return (frame, FrameBody)."""
    cursor = ByteCursor.from_bytes(make_frame(frame_id, body))
    cursor.seek(FRAME_ID_SIZE)
    header = FrameHeader.from_cursor(cursor, frame_id)
    frame_body = FrameBody(cursor, header, attachment_name)
    frame = identify(frame_id).from_body(frame_body)
    return frame, frame_body


@pytest.fixture
def frame_bytes():
    """Builder for raw frames."""
    return make_frame


@pytest.fixture
def tag_bytes():
    """Builder for raw tags."""
    return make_tag


@pytest.fixture
def decode():
    """Decode one frame body through its registered routine."""
    return decode_frame


@pytest.fixture
def tag_file(tmp_path):
    """Write tag bytes to a temporary .mp3 file and return its path."""

    def _write(data: bytes, name: str = "song.mp3") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def config_path(tmp_path):
    """Path for a throwaway config file."""
    return tmp_path / "config.toml"
