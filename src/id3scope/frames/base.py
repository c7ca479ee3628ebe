"""Frame header, bounded frame body reader and shared frame types."""

import dataclasses
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Union

from ..constants import FRAME_FLAGS_SIZE, LANGUAGE_SIZE, SIZE_FIELD_SIZE
from ..cursor import ByteCursor
from ..encoding import decode_text, terminator_width, to_encoding
from ..errors import InvalidEncoding, MalformedFrame, TruncatedInput
from ..utils import be_to_int, frame_size_to_int

# Decoded text, or the raw bytes when the encoding byte was invalid
Text = Union[str, bytes]


@dataclass(frozen=True)
class FrameHeader:
    """Identifier, declared size and flags read before every frame body.

    offset is the absolute position of the first body byte. The flag
    properties read the v2.3 or v2.4 bit layout according to major_version;
    v2.3 has no unsynchronisation or data length flags.
    """

    frame_id: str
    size: int
    flags: bytes
    offset: int
    major_version: int = 4

    @staticmethod
    def from_cursor(cursor: ByteCursor, frame_id: str, major_version: int = 4) -> "FrameHeader":
        """Read the size and flags that follow an already consumed identifier."""
        size = frame_size_to_int(cursor.read_exact(SIZE_FIELD_SIZE), major_version)
        flags = cursor.read_exact(FRAME_FLAGS_SIZE)
        return FrameHeader(frame_id, size, flags, cursor.tell(), major_version)

    def _flag(self, byte: int, v23_mask: int, v24_mask: int) -> bool:
        mask = v23_mask if self.major_version < 4 else v24_mask
        return bool(self.flags[byte] & mask)

    # Status flags (first byte)
    @property
    def tag_alter_preservation(self) -> bool:
        return self._flag(0, 0x80, 0x40)

    @property
    def file_alter_preservation(self) -> bool:
        return self._flag(0, 0x40, 0x20)

    @property
    def read_only(self) -> bool:
        return self._flag(0, 0x20, 0x10)

    # Format flags (second byte)
    @property
    def grouping(self) -> bool:
        return self._flag(1, 0x20, 0x40)

    @property
    def compressed(self) -> bool:
        return self._flag(1, 0x80, 0x08)

    @property
    def encrypted(self) -> bool:
        return self._flag(1, 0x40, 0x04)

    @property
    def unsynchronised(self) -> bool:
        return self._flag(1, 0x00, 0x02)

    @property
    def has_data_length(self) -> bool:
        return self._flag(1, 0x00, 0x01)


@dataclass(frozen=True)
class AttachmentRequest:
    """A binary payload a frame asks to have written to an attachment sink.

    The sink decides where name + extension actually lands.
    """

    name: str
    extension: str
    data: bytes

    @property
    def filename(self) -> str:
        return self.name + self.extension


@dataclass(frozen=True)
class LanguageBlock:
    """Encoding and ISO-639-2 language code shared by language frames."""

    encoding: int
    language: str


@dataclass(frozen=True)
class Frame:
    """Base class for every decoded frame."""

    header: FrameHeader

    title: ClassVar[str] = "Frame"

    @property
    def frame_id(self) -> str:
        return self.header.frame_id

    @property
    def size(self) -> int:
        return self.header.size

    @property
    def attachment(self) -> Optional[AttachmentRequest]:
        """Payload to hand to an attachment sink, if the frame carries one."""
        return None

    def fields(self) -> Dict[str, Any]:
        """Return the decoded fields (everything except the header)."""
        return {
            field.name: getattr(self, field.name)
            for field in dataclasses.fields(self)
            if field.name != "header"
        }

    @staticmethod
    def from_body(body: "FrameBody") -> "Frame":
        raise NotImplementedError


class FrameBody:
    """Reads one frame body without crossing its declared size.

    Fixed-width reads that would pass the boundary raise MalformedFrame;
    terminator scans stop at the boundary. Encoding problems are collected
    in `issues` so the frame can still be returned.
    """

    def __init__(self, cursor: ByteCursor, header: FrameHeader, attachment_name: str = "attachment"):
        self.cursor = cursor
        self.header = header
        self.attachment_name = attachment_name
        self.start = cursor.tell()
        self.issues: List[str] = []

    @property
    def consumed(self) -> int:
        return self.cursor.tell() - self.start

    @property
    def remaining(self) -> int:
        return max(self.header.size - self.consumed, 0)

    def read(self, n: int) -> bytes:
        if n > self.remaining:
            raise MalformedFrame(
                f"{self.header.frame_id}: field of {n} bytes at body offset "
                f"{self.consumed} overruns declared size {self.header.size}"
            )
        return self.cursor.read_exact(n)

    def byte(self) -> int:
        return self.read(1)[0]

    def uint(self, n: int) -> int:
        return be_to_int(self.read(n))

    def rest(self) -> bytes:
        return self.read(self.remaining)

    def encoding(self) -> int:
        """Read an encoding byte.

        An invalid value is returned as a plain int and reported when text
        is decoded with it.
        """
        value = self.byte()
        try:
            return to_encoding(value)
        except InvalidEncoding:
            return value

    def language(self) -> str:
        return self.read(LANGUAGE_SIZE).decode("latin-1")

    def terminated(self, width: int = 1) -> bytes:
        """Read a zero-terminated field, bounded by the frame.

        Only aligned terminators count; an unterminated last field runs to
        the end of the frame.

        Raises:
            TruncatedInput: If the input ends before the frame does
        """
        offset = self.cursor.tell()
        data = self.cursor.read_until_terminator(width, limit=self.remaining, aligned_only=True)
        if self.remaining > 0 and self.cursor.tell() == offset:
            raise TruncatedInput(self.remaining, 0, offset)
        return data

    def terminated_text(self, encoding: int, width: Optional[int] = None) -> Text:
        """Read and decode a terminated string.

        The terminator width follows the encoding unless given explicitly.
        """
        if width is None:
            width = terminator_width(encoding)
        return self.text(self.terminated(width), encoding)

    def latin1(self) -> str:
        """Read a single-zero terminated ISO-8859-1 string."""
        return self.terminated(1).decode("latin-1")

    def rest_text(self, encoding: int) -> Text:
        """Decode the remainder of the frame, minus a trailing terminator."""
        data = self.rest()
        width = terminator_width(encoding)
        if len(data) % width == 0 and data.endswith(b"\x00" * width):
            data = data[:-width]
        return self.text(data, encoding)

    def text(self, data: bytes, encoding: int) -> Text:
        try:
            return decode_text(data, encoding)
        except InvalidEncoding as e:
            if str(e) not in self.issues:
                self.issues.append(str(e))
            return data
