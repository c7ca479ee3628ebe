import struct


def synchsafe_to_int(data: bytes) -> int:
    """Decode a 4-byte synch-safe integer.

    Only the low 7 bits of each byte carry data, most significant byte
    first. High bits are not checked: a corrupt size decodes to a larger
    value rather than raising.

    Args:
        data: Exactly four bytes

    Returns:
        Decoded value
    """
    b0, b1, b2, b3 = struct.unpack(">4B", data)
    return b0 << 21 | b1 << 14 | b2 << 7 | b3


def be_to_int(data: bytes) -> int:
    """Decode an unsigned big-endian integer of any width (0 when empty)."""
    return int.from_bytes(data, "big")


def be_to_signed(data: bytes) -> int:
    """Decode a signed (two's complement) big-endian integer."""
    return int.from_bytes(data, "big", signed=True)


def frame_size_to_int(data: bytes, major_version: int) -> int:
    """Decode a frame size field.

    ID3v2.4 stores frame sizes as synch-safe integers; ID3v2.3 uses a plain
    32-bit big-endian integer.
    """
    if major_version == 3:
        return struct.unpack(">I", data)[0]
    return synchsafe_to_int(data)
