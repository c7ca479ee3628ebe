"""Frame kinds.

Each module holds the dataclasses for one family of frames, each with a
`from_body` routine that consumes exactly the frame's declared size:
    base.py: FrameHeader, FrameBody and shared field groups
    text.py: T***, TXXX, W***, WXXX
    language.py: COMM, USLT, USER
    timing.py: ETCO, SYLT, POSS
    commerce.py: COMR, OWNE, ENCR
    identity.py: UFID, PRIV, GRID, LINK, POPM, PCNT
    audio.py: EQU2, RVA2, RBUF, SEEK
"""

from .base import AttachmentRequest, Frame, FrameBody, FrameHeader, LanguageBlock
from .text import TextFrame, UserTextFrame, UrlFrame, UserUrlFrame
from .language import CommentFrame, LyricsFrame, TermsOfUseFrame
from .timing import (
    EventTimingFrame,
    PositionSyncFrame,
    SyncedLyricsFrame,
    SyncedText,
    TimedEvent,
)
from .commerce import CommercialFrame, EncryptionMethodFrame, OwnershipFrame
from .identity import (
    GroupIdFrame,
    LinkedInfoFrame,
    PlayCounterFrame,
    PopularimeterFrame,
    PrivateFrame,
    UniqueFileIdFrame,
)
from .audio import (
    EqualisationBand,
    EqualisationFrame,
    RecommendedBufferFrame,
    RelativeVolumeFrame,
    SeekFrame,
    VolumeAdjustment,
)

__all__ = [
    "AttachmentRequest",
    "Frame",
    "FrameBody",
    "FrameHeader",
    "LanguageBlock",
    "TextFrame",
    "UserTextFrame",
    "UrlFrame",
    "UserUrlFrame",
    "CommentFrame",
    "LyricsFrame",
    "TermsOfUseFrame",
    "EventTimingFrame",
    "PositionSyncFrame",
    "SyncedLyricsFrame",
    "SyncedText",
    "TimedEvent",
    "CommercialFrame",
    "EncryptionMethodFrame",
    "OwnershipFrame",
    "GroupIdFrame",
    "LinkedInfoFrame",
    "PlayCounterFrame",
    "PopularimeterFrame",
    "PrivateFrame",
    "UniqueFileIdFrame",
    "EqualisationBand",
    "EqualisationFrame",
    "RecommendedBufferFrame",
    "RelativeVolumeFrame",
    "SeekFrame",
    "VolumeAdjustment",
]
