import logging
from dataclasses import dataclass
from typing import Tuple

from .constants import (
    FILE_ID_SIZE,
    FLAG_EXPERIMENTAL,
    FLAG_EXT_HEADER,
    FLAG_FOOTER,
    FLAG_UNSYNC,
    MAGIC,
    SIZE_FIELD_SIZE,
    VERSION_SIZE,
)
from .cursor import ByteCursor
from .errors import BadMagic
from .utils import synchsafe_to_int

logger = logging.getLogger(__name__)


def is_bit_set(value: int, bit: int) -> bool:
    return (value >> bit) & 1 == 1


@dataclass(frozen=True)
class TagHeader:
    """The 10-byte ID3v2 tag header.

    declared_size is the length of everything after the header: the
    extended header (if any), the frames and the padding.
    """

    version: Tuple[int, int]
    unsync: bool
    has_ext_header: bool
    experimental: bool
    has_footer: bool
    declared_size: int
    ext_header_size: int = 0

    @property
    def major_version(self) -> int:
        return self.version[0]

    @property
    def version_string(self) -> str:
        return f"2.{self.version[0]}.{self.version[1]}"

    @staticmethod
    def from_cursor(cursor: ByteCursor) -> "TagHeader":
        """Parse the tag header and leave the cursor at the first frame.

        Raises:
            BadMagic: If the tag does not start with 'ID3'
            TruncatedInput: If the header is cut short
        """
        file_id = cursor.read_exact(FILE_ID_SIZE)
        if file_id != MAGIC:
            raise BadMagic(file_id)

        major, revision = cursor.read_exact(VERSION_SIZE)
        flags = cursor.read_u8()
        size = synchsafe_to_int(cursor.read_exact(SIZE_FIELD_SIZE))

        has_ext_header = is_bit_set(flags, FLAG_EXT_HEADER)
        ext_header_size = 0
        if has_ext_header:
            # The extended header size counts its own 4-byte size field
            ext_header_size = synchsafe_to_int(cursor.read_exact(SIZE_FIELD_SIZE))
            cursor.seek_relative(ext_header_size - SIZE_FIELD_SIZE)
            logger.debug(f"Skipped extended header of {ext_header_size} bytes")

        header = TagHeader(
            version=(major, revision),
            unsync=is_bit_set(flags, FLAG_UNSYNC),
            has_ext_header=has_ext_header,
            experimental=is_bit_set(flags, FLAG_EXPERIMENTAL),
            has_footer=is_bit_set(flags, FLAG_FOOTER),
            declared_size=size,
            ext_header_size=ext_header_size,
        )
        logger.debug(
            "ID3v%s header: %d bytes, flags 0x%02x", header.version_string, size, flags
        )
        return header
