"""Text and URL frames (T***, TXXX, W***, WXXX)."""

from dataclasses import dataclass
from typing import Tuple

from ..encoding import Encoding, terminator_width
from .base import Frame, FrameBody, Text


@dataclass(frozen=True)
class TextFrame(Frame):
    """Any T*** frame. May hold several zero-separated values."""

    encoding: int
    values: Tuple[Text, ...]

    title = "Text Frame"

    @property
    def text(self) -> Text:
        """All values joined by '/', or the first raw value if undecodable."""
        if all(isinstance(v, str) for v in self.values):
            return "/".join(self.values)
        return self.values[0] if self.values else b""

    @staticmethod
    def from_body(body: FrameBody) -> "TextFrame":
        encoding = body.encoding()
        width = terminator_width(encoding)
        values = []
        while body.remaining > 0:
            # Each UTF-16 value carries its own byte order mark
            values.append(body.text(body.terminated(width), encoding))
        return TextFrame(body.header, encoding, tuple(values))


@dataclass(frozen=True)
class UserTextFrame(Frame):
    """TXXX: user defined description/value pair."""

    encoding: int
    description: Text
    value: Text

    title = "User Defined Text Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "UserTextFrame":
        encoding = body.encoding()
        # The description is always terminated by a single zero byte
        description = body.terminated_text(encoding, width=1)
        value = body.rest_text(encoding)
        return UserTextFrame(body.header, encoding, description, value)


@dataclass(frozen=True)
class UrlFrame(Frame):
    """Any W*** frame: a bare ISO-8859-1 URL."""

    url: str

    title = "URL Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "UrlFrame":
        return UrlFrame(body.header, body.rest_text(Encoding.LATIN1))


@dataclass(frozen=True)
class UserUrlFrame(Frame):
    """WXXX: user defined URL with a description."""

    encoding: int
    description: Text
    url: str

    title = "User Defined URL Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "UserUrlFrame":
        encoding = body.encoding()
        description = body.terminated_text(encoding)
        url = body.rest_text(Encoding.LATIN1)
        return UserUrlFrame(body.header, encoding, description, url)
