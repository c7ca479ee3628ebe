"""Tag walker: header, frame loop, padding and footer detection."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, List, Optional, Tuple, Union

from .constants import (
    FOOTER_MAGIC,
    FOOTER_OFFSET_FROM_END,
    FRAME_HEADER_SIZE,
    FRAME_ID_SIZE,
)
from .cursor import ByteCursor
from .errors import MalformedFrame, SourceUnavailable, TruncatedInput, UnrecognizedFrameKind
from .frames import AttachmentRequest, Frame, FrameBody, FrameHeader
from .header import TagHeader
from .registry import identify

logger = logging.getLogger(__name__)

FATAL = "fatal"
RECOVERABLE = "recoverable"

PADDING_CHUNK_SIZE = 4096


@dataclass(frozen=True)
class Diagnostic:
    """A problem found while walking the tag.

    Fatal diagnostics stopped the frame loop; recoverable ones were noted
    and the walk went on.
    """

    severity: str
    message: str
    frame_index: Optional[int] = None
    frame_id: Optional[str] = None
    offset: Optional[int] = None

    @property
    def fatal(self) -> bool:
        return self.severity == FATAL

    def __str__(self):
        where = []
        if self.frame_index is not None:
            where.append(f"frame {self.frame_index}")
        if self.frame_id is not None:
            where.append(repr(self.frame_id))
        if self.offset is not None:
            where.append(f"offset {self.offset}")
        prefix = f"[{' '.join(where)}] " if where else ""
        return f"{self.severity}: {prefix}{self.message}"


@dataclass(frozen=True)
class ID3Tag:
    """Everything decoded from one tag."""

    header: TagHeader
    frames: Tuple[Frame, ...]
    diagnostics: Tuple[Diagnostic, ...]
    padding: int
    consumed: int
    attachments: Tuple[AttachmentRequest, ...]
    footer_present: bool

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    def __len__(self):
        return len(self.frames)

    def __contains__(self, frame_id):
        return any(frame.frame_id == frame_id for frame in self.frames)

    def __getitem__(self, frame_id: str) -> Frame:
        """Return the first frame with the given identifier."""
        for frame in self.frames:
            if frame.frame_id == frame_id:
                return frame
        raise KeyError(frame_id)

    def getall(self, frame_id: str) -> List[Frame]:
        return [frame for frame in self.frames if frame.frame_id == frame_id]

    @property
    def complete(self) -> bool:
        """True if the walk was not stopped by a fatal condition."""
        return not any(d.fatal for d in self.diagnostics)

    @property
    def fully_consumed(self) -> bool:
        return self.consumed + self.padding >= self.header.declared_size

    @staticmethod
    def from_file(
        f: BinaryIO,
        sink=None,
        attachment_name: str = "attachment",
        callback: Optional[Callable[[Frame], None]] = None,
    ) -> "ID3Tag":
        """Decode the tag at the current position of a seekable binary file.

        Raises:
            BadMagic: If no ID3v2 header is found
            TruncatedInput: If the tag header itself is cut short
        """
        walker = TagWalker(ByteCursor(f), sink, attachment_name, callback)
        return walker.walk()

    @staticmethod
    def read(
        filename: Union[str, Path],
        sink=None,
        attachment_name: Optional[str] = None,
        callback: Optional[Callable[[Frame], None]] = None,
    ) -> "ID3Tag":
        """Decode the tag at the start of a file.

        Attachments are named after the file unless attachment_name is given.

        Raises:
            SourceUnavailable: If the file cannot be opened
            BadMagic: If the file does not start with an ID3v2 header
        """
        if attachment_name is None:
            attachment_name = Path(filename).name
        try:
            f = open(filename, "rb")
        except OSError as e:
            raise SourceUnavailable(f"Cannot open {filename}: {e.strerror or e}") from e
        with f:
            return ID3Tag.from_file(f, sink, attachment_name, callback)


class TagWalker:
    """Drives a single decode pass over one cursor.

    Start -> header parsed -> frames* -> padding/footer -> done. The loop
    ends early on padding, an unrecognized frame or truncated input.
    """

    def __init__(
        self,
        cursor: ByteCursor,
        sink=None,
        attachment_name: str = "attachment",
        callback: Optional[Callable[[Frame], None]] = None,
    ):
        self.cursor = cursor
        self.sink = sink
        self.attachment_name = attachment_name
        self.callback = callback
        self.frames: List[Frame] = []
        self.diagnostics: List[Diagnostic] = []
        self.attachments: List[AttachmentRequest] = []

    def walk(self) -> ID3Tag:
        cursor = self.cursor
        header = TagHeader.from_cursor(cursor)
        if header.unsync:
            logger.warning("Tag is unsynchronised; frames are decoded as stored")

        consumed = header.ext_header_size
        padding = 0
        index = 0
        while consumed < header.declared_size:
            offset = cursor.tell()
            first = cursor.peek_u8()
            if first is None:
                self._fatal(
                    f"Input ended with {header.declared_size - consumed} of "
                    f"{header.declared_size} declared bytes unread",
                    index,
                    None,
                    offset,
                )
                break
            if first == 0:
                padding = self.skip_padding()
                logger.debug(f"Found {padding} bytes of padding at offset {offset}")
                break

            try:
                frame_id = cursor.read_exact(FRAME_ID_SIZE).decode("latin-1")
                frame_header = FrameHeader.from_cursor(cursor, frame_id, header.major_version)
            except TruncatedInput as e:
                self._fatal(f"Frame header cut short: {e}", index, None, offset)
                break

            try:
                kind = identify(frame_id)
            except UnrecognizedFrameKind as e:
                self._fatal(f"Didn't understand frame: {e}", index, frame_id, offset)
                break

            left = header.declared_size - consumed
            if FRAME_HEADER_SIZE + frame_header.size > left:
                self._fatal(
                    f"Frame declares {frame_header.size} bytes but only "
                    f"{max(left - FRAME_HEADER_SIZE, 0)} remain in the tag",
                    index,
                    frame_id,
                    offset,
                )
                break

            logger.debug(
                f"Frame {index}: {frame_id} ({frame_header.size} bytes) at offset {offset}"
            )
            body = FrameBody(cursor, frame_header, self.attachment_name)
            frame = None
            try:
                frame = kind.from_body(body)
            except MalformedFrame as e:
                self._recoverable(str(e), index, frame_id, offset)
            except TruncatedInput as e:
                self._fatal(str(e), index, frame_id, offset)
                break

            for issue in body.issues:
                self._recoverable(issue, index, frame_id, offset)

            if body.consumed != frame_header.size:
                # Trust the declared size to find the next frame
                if frame is not None:
                    logger.warning(
                        f"{frame_id} decoded {body.consumed} of {frame_header.size} "
                        f"declared bytes; skipping to the declared end"
                    )
                cursor.seek(frame_header.offset + frame_header.size)

            consumed += FRAME_HEADER_SIZE + frame_header.size
            if frame is not None:
                self._accept(frame)
            index += 1

        footer_present = self.check_footer()
        if header.has_footer and not footer_present:
            logger.warning("Header announces a footer but none was found")

        return ID3Tag(
            header=header,
            frames=tuple(self.frames),
            diagnostics=tuple(self.diagnostics),
            padding=padding,
            consumed=consumed,
            attachments=tuple(self.attachments),
            footer_present=footer_present,
        )

    def skip_padding(self) -> int:
        """Count the run of zero bytes at the cursor.

        Leaves the cursor on the first non-zero byte (or at end of input).
        """
        count = 0
        while True:
            chunk = self.cursor.read_upto(PADDING_CHUNK_SIZE)
            if not chunk:
                return count
            zeros = len(chunk) - len(chunk.lstrip(b"\x00"))
            count += zeros
            if zeros < len(chunk):
                # Back up over the non-zero bytes we over-read
                self.cursor.seek_relative(zeros - len(chunk))
                return count

    def check_footer(self) -> bool:
        """Look for the '3DI' footer identifier 10 bytes before the end."""
        position = self.cursor.tell()
        try:
            tail = self.cursor.read_tail(len(FOOTER_MAGIC), FOOTER_OFFSET_FROM_END)
        finally:
            self.cursor.seek(position)
        present = tail == FOOTER_MAGIC
        if present:
            logger.debug("Footer found")
        return present

    def _accept(self, frame: Frame) -> None:
        self.frames.append(frame)
        request = frame.attachment
        if request is not None:
            self.attachments.append(request)
            if self.sink is not None:
                with self.sink.open(request.name, request.extension) as out:
                    out.write(request.data)
        if self.callback is not None:
            self.callback(frame)

    def _fatal(self, message, index, frame_id, offset):
        logger.error(message)
        self.diagnostics.append(Diagnostic(FATAL, message, index, frame_id, offset))

    def _recoverable(self, message, index, frame_id, offset):
        logger.warning(message)
        self.diagnostics.append(Diagnostic(RECOVERABLE, message, index, frame_id, offset))
