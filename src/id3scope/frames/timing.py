"""Timed frames (ETCO, SYLT, POSS)."""

from dataclasses import dataclass
from typing import Tuple

from ..constants import SYLT_CONTENT_TYPES, TIMESTAMP_FORMATS, TIMESTAMP_SIZE, describe_event
from .base import Frame, FrameBody, LanguageBlock, Text
from .language import read_language_block


def describe_timestamp_format(value: int) -> str:
    return TIMESTAMP_FORMATS.get(value, "unknown")


@dataclass(frozen=True)
class TimedEvent:
    code: int
    timestamp: int

    @property
    def description(self) -> str:
        return describe_event(self.code)


@dataclass(frozen=True)
class EventTimingFrame(Frame):
    """ETCO: a list of (event, absolute time) pairs."""

    timestamp_format: int
    events: Tuple[TimedEvent, ...]

    title = "Event Timing Codes Frame"

    @property
    def timestamp_format_description(self) -> str:
        return describe_timestamp_format(self.timestamp_format)

    @staticmethod
    def from_body(body: FrameBody) -> "EventTimingFrame":
        timestamp_format = body.byte()
        events = []
        while body.remaining > 0:
            code = body.byte()
            events.append(TimedEvent(code, body.uint(TIMESTAMP_SIZE)))
        return EventTimingFrame(body.header, timestamp_format, tuple(events))


@dataclass(frozen=True)
class SyncedText:
    text: Text
    timestamp: int


@dataclass(frozen=True)
class SyncedLyricsFrame(Frame):
    """SYLT: text fragments, each stamped with a time."""

    lang: LanguageBlock
    timestamp_format: int
    content_type: int
    descriptor: Text
    lyrics: Tuple[SyncedText, ...]

    title = "Synchronised Lyrics Frame"

    @property
    def timestamp_format_description(self) -> str:
        return describe_timestamp_format(self.timestamp_format)

    @property
    def content_type_description(self) -> str:
        return SYLT_CONTENT_TYPES.get(self.content_type, "unknown")

    @staticmethod
    def from_body(body: FrameBody) -> "SyncedLyricsFrame":
        lang = read_language_block(body)
        timestamp_format = body.byte()
        content_type = body.byte()
        # Descriptor and syllables are terminated by a single zero byte
        descriptor = body.terminated_text(lang.encoding, width=1)
        lyrics = []
        while body.remaining > 0:
            text = body.terminated_text(lang.encoding, width=1)
            lyrics.append(SyncedText(text, body.uint(TIMESTAMP_SIZE)))
        return SyncedLyricsFrame(
            body.header, lang, timestamp_format, content_type, descriptor, tuple(lyrics)
        )


@dataclass(frozen=True)
class PositionSyncFrame(Frame):
    """POSS: position in the audio where the tag's content starts to apply."""

    timestamp_format: int
    position: int

    title = "Position Synchronisation Frame"

    @property
    def timestamp_format_description(self) -> str:
        return describe_timestamp_format(self.timestamp_format)

    @staticmethod
    def from_body(body: FrameBody) -> "PositionSyncFrame":
        timestamp_format = body.byte()
        return PositionSyncFrame(body.header, timestamp_format, body.uint(body.remaining))
