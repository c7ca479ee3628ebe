"""Exception hierarchy for tag decoding.

BadMagic aborts the whole decode. TruncatedInput and UnrecognizedFrameKind
stop the frame walk. InvalidEncoding and MalformedFrame are recovered by
the walker, which annotates the result and moves on to the next frame.
"""


class ID3Error(ValueError):
    """Base class for every decoding error."""


class BadMagic(ID3Error):
    """The tag does not start with the 'ID3' identifier."""

    def __init__(self, found: bytes):
        self.found = found
        super().__init__(f"Not an ID3v2 tag: expected b'ID3', got {found!r}")


class TruncatedInput(ID3Error, EOFError):
    """Fewer bytes are available than a read requires."""

    def __init__(self, wanted: int, available: int, offset: int):
        self.wanted = wanted
        self.available = available
        self.offset = offset
        super().__init__(
            f"Unexpected end of input at offset {offset}: "
            f"needed {wanted} bytes, got {available}"
        )


class InvalidEncoding(ID3Error):
    """A text encoding byte outside the four defined values."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Invalid text encoding byte: 0x{value:02x}")


class UnrecognizedFrameKind(ID3Error, KeyError):
    """A frame identifier with no known layout."""

    def __init__(self, frame_id: str):
        self.frame_id = frame_id
        super().__init__(f"Unrecognized frame identifier: {frame_id!r}")

    def __str__(self):
        return self.args[0]


class MalformedFrame(ID3Error):
    """A frame whose fields do not fit inside its declared size."""


class SourceUnavailable(ID3Error, OSError):
    """The input file could not be opened."""
