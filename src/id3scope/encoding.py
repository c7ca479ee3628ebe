"""Text encodings used by ID3v2 frames."""

from enum import IntEnum
from typing import Union

from .constants import ENCODING_DESCRIPTIONS
from .errors import InvalidEncoding


class Encoding(IntEnum):
    """Text encoding byte at the start of text-bearing frames."""

    LATIN1 = 0
    UTF16 = 1
    UTF16BE = 2
    UTF8 = 3


def to_encoding(value: int) -> Encoding:
    """Convert an encoding byte to an Encoding.

    Raises:
        InvalidEncoding: If value is not one of the four defined encodings
    """
    try:
        return Encoding(value)
    except ValueError:
        raise InvalidEncoding(value) from None


def terminator_width(encoding: Union[Encoding, int]) -> int:
    """Return the string terminator width in bytes: 2 for UTF-16, else 1."""
    if encoding in (Encoding.UTF16, Encoding.UTF16BE):
        return 2
    return 1


def decode_text(data: bytes, encoding: Union[Encoding, int]) -> str:
    """Decode raw frame bytes into text.

    Malformed sequences are replaced with U+FFFD rather than raising, since
    the bytes have already been consumed from the tag.

    Raises:
        InvalidEncoding: If encoding is not a defined encoding byte
    """
    encoding = to_encoding(encoding)
    if encoding == Encoding.LATIN1:
        return data.decode("latin-1")
    if encoding == Encoding.UTF16:
        # The 'utf-16' codec consumes and strips the byte order mark
        return data.decode("utf-16", errors="replace")
    if encoding == Encoding.UTF16BE:
        return data.decode("utf-16-be", errors="replace")
    return data.decode("utf-8", errors="replace")


def describe_encoding(encoding: int) -> str:
    return ENCODING_DESCRIPTIONS.get(encoding, "Incorrect encoding.")
