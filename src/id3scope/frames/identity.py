"""Owner-identified and counter frames (UFID, PRIV, GRID, LINK, POPM, PCNT)."""

from dataclasses import dataclass
from typing import Tuple

from ..constants import FRAME_ID_SIZE
from .base import Frame, FrameBody


@dataclass(frozen=True)
class UniqueFileIdFrame(Frame):
    """UFID: owner URL/email and an opaque identifier of up to 64 bytes."""

    owner: str
    identifier: bytes

    title = "Unique File Identifier Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "UniqueFileIdFrame":
        owner = body.latin1()
        return UniqueFileIdFrame(body.header, owner, body.rest())


@dataclass(frozen=True)
class PrivateFrame(Frame):
    owner: str
    data: bytes

    title = "Private Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "PrivateFrame":
        owner = body.latin1()
        return PrivateFrame(body.header, owner, body.rest())


@dataclass(frozen=True)
class GroupIdFrame(Frame):
    """GRID: binds a group symbol to an owner."""

    owner: str
    symbol: int
    data: bytes

    title = "Group Identification Registration Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "GroupIdFrame":
        owner = body.latin1()
        symbol = body.byte()
        return GroupIdFrame(body.header, owner, symbol, body.rest())


@dataclass(frozen=True)
class LinkedInfoFrame(Frame):
    """LINK: points at a frame stored in another file."""

    linked_id: str
    url: str
    id_data: Tuple[str, ...]

    title = "Linked Information Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "LinkedInfoFrame":
        linked_id = body.read(FRAME_ID_SIZE).decode("latin-1")
        url = body.latin1()
        id_data = []
        while body.remaining > 0:
            id_data.append(body.latin1())
        return LinkedInfoFrame(body.header, linked_id, url, tuple(id_data))


@dataclass(frozen=True)
class PopularimeterFrame(Frame):
    """POPM: user email, rating (1-255, 0 unknown) and play counter."""

    email: str
    rating: int
    counter: int

    title = "Popularimeter Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "PopularimeterFrame":
        email = body.latin1()
        rating = body.byte()
        # The counter may be omitted or grow beyond 4 bytes
        counter = body.uint(body.remaining)
        return PopularimeterFrame(body.header, email, rating, counter)


@dataclass(frozen=True)
class PlayCounterFrame(Frame):
    counter: int

    title = "Play Counter Frame"

    @staticmethod
    def from_body(body: FrameBody) -> "PlayCounterFrame":
        return PlayCounterFrame(body.header, body.uint(body.remaining))
