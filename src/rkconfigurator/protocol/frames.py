"""
Frame layout primitives shared by every encoder.

Every outbound report is a fixed 65-byte frame. Multi-frame transfers
(per-key colors, key mapping) start from one flat "virtual table" and cut it
into frames that all share the same header shape::

    frame 0:   [0x0a] [count] [0x01] [lead bytes...] [table bytes...........]
    frame i:   [0x0a] [count] [i+1]  [table bytes..........................]
                 │       │      └─ 1-based frame number
                 │       └─ number of frames in the transfer
                 └─ report ID

The table is consumed strictly in order, with no gaps between frames. Only
``frame_count * 62 - len(lead)`` table bytes fit, so the tail of a table
that is exactly ``frame_count * 65`` bytes long is never transmitted.
"""

FRAME_SIZE = 65
REPORT_ID = 0x0A

# Report ID, frame count, frame number
FRAME_HEADER_SIZE = 3


def empty_frame() -> bytearray:
    """Create a zero-filled frame."""
    return bytearray(FRAME_SIZE)


def payload_capacity(frame_count: int, lead_size: int) -> int:
    """Number of table bytes that fit in a transfer of ``frame_count`` frames."""
    return frame_count * (FRAME_SIZE - FRAME_HEADER_SIZE) - lead_size


def pack_frames(table: bytes, frame_count: int, lead: bytes = b"") -> list[bytes]:
    """
    Split a flat table across ``frame_count`` frames.

    Args:
        table: Flat table data, consumed sequentially from offset 0
        frame_count: Number of frames to produce (also written into each header)
        lead: Extra header bytes that follow the common header in frame 0 only

    Returns:
        List of ``frame_count`` frames, each exactly FRAME_SIZE bytes.
        Table bytes that do not fit are dropped; short tables leave zeros.

    Example:
        >>> frames = pack_frames(bytes(range(1, 11)), 2, lead=b"\\x01")
        >>> list(frames[0][:8])
        [10, 2, 1, 1, 1, 2, 3, 4]
    """
    frames = []
    offset = 0

    for index in range(frame_count):
        frame = empty_frame()
        header = bytes([REPORT_ID, frame_count, index + 1])
        if index == 0:
            header += lead
        frame[: len(header)] = header

        chunk = table[offset : offset + FRAME_SIZE - len(header)]
        frame[len(header) : len(header) + len(chunk)] = chunk
        offset += len(chunk)

        frames.append(bytes(frame))

    return frames


def encode_key_code(key_code: int) -> bytes:
    """
    Encode a key code as a 4-byte big-endian slot.

    Small codes are right-justified and zero-padded::

        0x41       -> 00 00 00 41
        0x0001F600 -> 00 01 F6 00

    Raises:
        OverflowError: If the code does not fit in 32 bits
    """
    return int(key_code).to_bytes(4, "big")
