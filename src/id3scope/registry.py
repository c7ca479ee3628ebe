"""Frame identifier to frame kind dispatch."""

from typing import Dict, Type

from .errors import UnrecognizedFrameKind
from .frames import (
    CommentFrame,
    CommercialFrame,
    EncryptionMethodFrame,
    EqualisationFrame,
    EventTimingFrame,
    Frame,
    GroupIdFrame,
    LinkedInfoFrame,
    LyricsFrame,
    OwnershipFrame,
    PlayCounterFrame,
    PopularimeterFrame,
    PositionSyncFrame,
    PrivateFrame,
    RecommendedBufferFrame,
    RelativeVolumeFrame,
    SeekFrame,
    SyncedLyricsFrame,
    TermsOfUseFrame,
    TextFrame,
    UniqueFileIdFrame,
    UrlFrame,
    UserTextFrame,
    UserUrlFrame,
)

# Exact identifiers; checked before the 'T'/'W' prefix rules
FRAME_KINDS: Dict[str, Type[Frame]] = {
    "TXXX": UserTextFrame,
    "COMM": CommentFrame,
    "POPM": PopularimeterFrame,
    "USLT": LyricsFrame,
    "WXXX": UserUrlFrame,
    "PCNT": PlayCounterFrame,
    "PRIV": PrivateFrame,
    "GRID": GroupIdFrame,
    "ETCO": EventTimingFrame,
    "SYLT": SyncedLyricsFrame,
    "COMR": CommercialFrame,
    "ENCR": EncryptionMethodFrame,
    "EQU2": EqualisationFrame,
    "LINK": LinkedInfoFrame,
    "OWNE": OwnershipFrame,
    "POSS": PositionSyncFrame,
    "RBUF": RecommendedBufferFrame,
    "RVA2": RelativeVolumeFrame,
    "SEEK": SeekFrame,
    "UFID": UniqueFileIdFrame,
    "USER": TermsOfUseFrame,
}

# Open-ended namespaces
PREFIX_KINDS: Dict[str, Type[Frame]] = {
    "T": TextFrame,
    "W": UrlFrame,
}

FRAME_NAMES = {
    "TALB": "Album/Movie/Show title",
    "TBPM": "BPM (beats per minute)",
    "TCOM": "Composer",
    "TCON": "Content type",
    "TCOP": "Copyright message",
    "TDEN": "Encoding time",
    "TDLY": "Playlist delay",
    "TDOR": "Original release time",
    "TDRC": "Recording time",
    "TDRL": "Release time",
    "TDTG": "Tagging time",
    "TENC": "Encoded by",
    "TEXT": "Lyricist/Text writer",
    "TFLT": "File type",
    "TIPL": "Involved people list",
    "TIT1": "Content group description",
    "TIT2": "Title/songname/content description",
    "TIT3": "Subtitle/Description refinement",
    "TKEY": "Initial key",
    "TLAN": "Language(s)",
    "TLEN": "Length",
    "TMCL": "Musician credits list",
    "TMED": "Media type",
    "TMOO": "Mood",
    "TOAL": "Original album/movie/show title",
    "TOFN": "Original filename",
    "TOLY": "Original lyricist(s)/text writer(s)",
    "TOPE": "Original artist(s)/performer(s)",
    "TOWN": "File owner/licensee",
    "TPE1": "Lead performer(s)/Soloist(s)",
    "TPE2": "Band/orchestra/accompaniment",
    "TPE3": "Conductor/performer refinement",
    "TPE4": "Interpreted, remixed, or otherwise modified by",
    "TPOS": "Part of a set",
    "TPRO": "Produced notice",
    "TPUB": "Publisher",
    "TRCK": "Track number/Position in set",
    "TRSN": "Internet radio station name",
    "TRSO": "Internet radio station owner",
    "TSOA": "Album sort order",
    "TSOP": "Performer sort order",
    "TSOT": "Title sort order",
    "TSRC": "ISRC (international standard recording code)",
    "TSSE": "Software/Hardware and settings used for encoding",
    "TSST": "Set subtitle",
    "TXXX": "User defined text information",
    "WCOM": "Commercial information",
    "WCOP": "Copyright/Legal information",
    "WOAF": "Official audio file webpage",
    "WOAR": "Official artist/performer webpage",
    "WOAS": "Official audio source webpage",
    "WORS": "Official Internet radio station homepage",
    "WPAY": "Payment",
    "WPUB": "Publishers official webpage",
    "WXXX": "User defined URL link",
    "COMM": "Comments",
    "COMR": "Commercial frame",
    "ENCR": "Encryption method registration",
    "EQU2": "Equalisation (2)",
    "ETCO": "Event timing codes",
    "GRID": "Group identification registration",
    "LINK": "Linked information",
    "OWNE": "Ownership frame",
    "PCNT": "Play counter",
    "POPM": "Popularimeter",
    "POSS": "Position synchronisation frame",
    "PRIV": "Private frame",
    "RBUF": "Recommended buffer size",
    "RVA2": "Relative volume adjustment (2)",
    "SEEK": "Seek frame",
    "SYLT": "Synchronised lyric/text",
    "UFID": "Unique file identifier",
    "USER": "Terms of use",
    "USLT": "Unsynchronised lyric/text transcription",
}


def identify(frame_id: str) -> Type[Frame]:
    """Return the frame class for a 4-character identifier.

    Raises:
        UnrecognizedFrameKind: If the identifier is neither in the table nor
            in the 'T'/'W' namespaces
    """
    try:
        return FRAME_KINDS[frame_id]
    except KeyError:
        pass
    try:
        return PREFIX_KINDS[frame_id[:1]]
    except KeyError:
        raise UnrecognizedFrameKind(frame_id) from None


def frame_name(frame_id: str) -> str:
    """Return a human readable name for a frame identifier."""
    if frame_id in FRAME_NAMES:
        return FRAME_NAMES[frame_id]
    try:
        return identify(frame_id).title
    except UnrecognizedFrameKind:
        return "Unknown frame"
