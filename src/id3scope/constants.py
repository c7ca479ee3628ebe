# Field widths in the tag and frame headers
HEADER_SIZE = 10
FILE_ID_SIZE = 3
VERSION_SIZE = 2
FLAGS_SIZE = 1
SIZE_FIELD_SIZE = 4
FRAME_ID_SIZE = 4
FRAME_FLAGS_SIZE = 2
FRAME_HEADER_SIZE = FRAME_ID_SIZE + SIZE_FIELD_SIZE + FRAME_FLAGS_SIZE

ENCODING_SIZE = 1
LANGUAGE_SIZE = 3
DATE_SIZE = 8  # YYYYMMDD in OWNE
TIMESTAMP_SIZE = 4

MAGIC = b"ID3"
FOOTER_MAGIC = b"3DI"
# The footer mirrors the 10-byte header at the very end of the tag
FOOTER_OFFSET_FROM_END = 10

# Logical name used for ENCR payloads
ENCRYPTION_ATTACHMENT_NAME = "secret_data"
# Extension used when a COMR MIME type has no subtype
UNDEFINED_EXTENSION = ".undefined"

# Tag header flag bits (most significant first)
FLAG_UNSYNC = 7
FLAG_EXT_HEADER = 6
FLAG_EXPERIMENTAL = 5
FLAG_FOOTER = 4

ENCODING_DESCRIPTIONS = {
    0x00: "ISO-8859-1. Terminated with $00.",
    0x01: "UTF-16 encoded Unicode with BOM. Terminated with $00 00.",
    0x02: "UTF-16BE encoded Unicode without BOM. Terminated with $00 00.",
    0x03: "UTF-8 encoded Unicode. Terminated with $00.",
}

TIMESTAMP_FORMATS = {
    0x01: "MPEG frames",
    0x02: "milliseconds",
}

EVENT_DESCRIPTIONS = {
    0x00: "padding (has no meaning)",
    0x01: "end of initial silence",
    0x02: "intro start",
    0x03: "main part start",
    0x04: "outro start",
    0x05: "outro end",
    0x06: "verse start",
    0x07: "refrain start",
    0x08: "interlude start",
    0x09: "theme start",
    0x0A: "variation start",
    0x0B: "key change",
    0x0C: "time change",
    0x0D: "momentary unwanted noise (Snap, Crackle & Pop)",
    0x0E: "sustained noise",
    0x0F: "sustained noise end",
    0x10: "intro end",
    0x11: "main part end",
    0x12: "verse end",
    0x13: "refrain end",
    0x14: "theme end",
    0x15: "profanity",
    0x16: "profanity end",
    0xFD: "audio end (start of silence)",
    0xFE: "audio file ends",
    0xFF: "one more byte of events follows",
}

SYLT_CONTENT_TYPES = {
    0x00: "other",
    0x01: "lyrics",
    0x02: "text transcription",
    0x03: "movement/part name",
    0x04: "events",
    0x05: "chord",
    0x06: "trivia/'pop up' information",
    0x07: "URLs to webpages",
    0x08: "URLs to images",
}

RECEIVED_AS = {
    0x00: "other",
    0x01: "standard CD album with other songs",
    0x02: "compressed audio on CD",
    0x03: "file over the Internet",
    0x04: "stream over the Internet",
    0x05: "as note sheets",
    0x06: "as note sheets in a book with other sheets",
    0x07: "music on other media",
    0x08: "non-musical merchandise",
}

CHANNEL_TYPES = {
    0x00: "other",
    0x01: "master volume",
    0x02: "front right",
    0x03: "front left",
    0x04: "back right",
    0x05: "back left",
    0x06: "front centre",
    0x07: "back centre",
    0x08: "subwoofer",
}

INTERPOLATION_METHODS = {
    0x00: "band",
    0x01: "linear",
}


def describe_event(code: int) -> str:
    """Return the event timing description for an ETCO event code."""
    try:
        return EVENT_DESCRIPTIONS[code]
    except KeyError:
        pass
    if 0x17 <= code <= 0xDF or 0xF0 <= code <= 0xFC:
        return "reserved for future use"
    if 0xE0 <= code <= 0xEF:
        return f"not predefined synch {code - 0xE0:X}"
    return "unknown event"
