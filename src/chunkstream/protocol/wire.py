"""
Wire Format
===========

Constant table for the chunked image transport.

Datagram layout (offsets into the UDP payload):

    0-1     magic, ASCII "cc" (0x63 0x63)
    8-9     stream ID, high 16 bits
    12-13   stream ID, low 16 bits
    48      chunk index
    50      flags (opaque, carried through untouched)
    54-     image bytes

The stream ID is split over two non-adjacent byte pairs. This is the
sender's packing and must be read exactly as listed in STREAM_ID_LAYOUT.
"""

from typing import Tuple


MAGIC: bytes = b"cc"

HEADER_LENGTH: int = 54

# Header plus at least one image byte
MIN_DATAGRAM_LENGTH: int = HEADER_LENGTH + 1

# (byte offset, left shift) pairs, most significant first
STREAM_ID_LAYOUT: Tuple[Tuple[int, int], ...] = (
    (8, 24),
    (9, 16),
    (12, 8),
    (13, 0),
)

CHUNK_INDEX_OFFSET: int = 48
FLAGS_OFFSET: int = 50

START_OF_IMAGE: bytes = b"\xff\xd8"
END_OF_IMAGE: bytes = b"\xff\xd9"

# Maximum transport payload the sender emits; size of the zero block
# substituted for each lost chunk.
PLACEHOLDER_SIZE: int = 1400


def read_stream_id(datagram: bytes) -> int:
    """
    Assemble the 32-bit stream ID from its header byte positions.

    Args:
        datagram: Full UDP payload, at least HEADER_LENGTH bytes

    Returns:
        Unsigned 32-bit stream identifier
    """
    stream_id = 0
    for offset, shift in STREAM_ID_LAYOUT:
        stream_id |= datagram[offset] << shift
    return stream_id
