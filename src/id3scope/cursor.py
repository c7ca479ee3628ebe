"""Sequential, seekable reader over a tag's bytes."""

import io
import os
from typing import BinaryIO, Optional

from .errors import TruncatedInput


class ByteCursor:
    """Wraps a seekable binary file object and tracks the absolute position.

    Every frame decoder reads through the same cursor, so a routine that
    reads too much or too little shifts every frame after it.
    """

    def __init__(self, fp: BinaryIO):
        self._fp = fp

    @staticmethod
    def from_bytes(data: bytes) -> "ByteCursor":
        """Return a cursor over an in-memory byte string."""
        return ByteCursor(io.BytesIO(data))

    def tell(self) -> int:
        return self._fp.tell()

    def seek(self, position: int) -> None:
        self._fp.seek(position, os.SEEK_SET)

    def seek_relative(self, delta: int) -> None:
        """Move the cursor by delta bytes without any validation."""
        self._fp.seek(delta, os.SEEK_CUR)

    def size(self) -> int:
        """Return the total length of the underlying source."""
        position = self._fp.tell()
        end = self._fp.seek(0, os.SEEK_END)
        self._fp.seek(position, os.SEEK_SET)
        return end

    def read_exact(self, n: int) -> bytes:
        """Read exactly n bytes.

        Raises:
            TruncatedInput: If fewer than n bytes remain
        """
        offset = self._fp.tell()
        data = self._fp.read(n)
        if len(data) < n:
            raise TruncatedInput(n, len(data), offset)
        return data

    def read_upto(self, n: int) -> bytes:
        """Read at most n bytes; fewer (or none) at end of input."""
        return self._fp.read(n)

    def read_u8(self) -> int:
        return self.read_exact(1)[0]

    def peek_u8(self) -> Optional[int]:
        """Return the next byte without consuming it, or None at end of input."""
        data = self._fp.read(1)
        if not data:
            return None
        self._fp.seek(-1, os.SEEK_CUR)
        return data[0]

    def read_until_terminator(
        self, width: int = 1, limit: Optional[int] = None, aligned_only: bool = False
    ) -> bytes:
        """Read up to the first run of `width` zero bytes.

        The terminator is searched on `width`-aligned boundaries first, so
        UTF-16 code units ending in a zero byte are not mistaken for it. If
        no aligned terminator exists, the first unaligned run is used unless
        aligned_only is set. The cursor is left just past the terminator,
        which is not returned.
        Without any terminator the whole window is consumed and returned.

        Args:
            width: Terminator width in bytes (1 or 2)
            limit: Maximum number of bytes to scan (None for the rest of
                the input)
            aligned_only: Never fall back to an unaligned terminator

        Returns:
            The bytes before the terminator
        """
        start = self._fp.tell()
        window = self._fp.read(-1 if limit is None else limit)
        terminator = b"\x00" * width

        end = _find_aligned(window, terminator)
        if end < 0 and not aligned_only:
            end = window.find(terminator)
        if end < 0:
            return window

        self.seek(start + end + width)
        return window[:end]

    def read_tail(self, n: int, from_end: int) -> bytes:
        """Read n bytes starting `from_end` bytes before the end of the source.

        Returns fewer bytes (possibly none) if the source is too short.
        """
        end = self.size()
        if from_end > end:
            return b""
        self.seek(end - from_end)
        return self._fp.read(n)


def _find_aligned(data: bytes, terminator: bytes) -> int:
    width = len(terminator)
    if width == 1:
        return data.find(terminator)
    for i in range(0, len(data) - width + 1, width):
        if data[i:i + width] == terminator:
            return i
    return -1
