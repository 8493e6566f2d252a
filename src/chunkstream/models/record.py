"""
Stream Record
=============

One classified datagram of the chunked image transport.

Design Rules:
    - Created only by the record classifier
    - Immutable (frozen) once created
    - payload is never empty
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class StreamRecord:
    """
    A single chunk of one image.

    Attributes:
        stream_id: 32-bit identifier shared by every chunk of one image
        chunk_index: Position of this chunk within its image (0-255)
        flags: Opaque per-chunk byte, carried through uninterpreted
        payload: Image bytes following the fixed header
        timestamp: Capture time of the originating frame (UNIX seconds)
        packet_size: Length of the whole datagram, header included
    """

    stream_id: int
    chunk_index: int
    flags: int
    payload: bytes
    timestamp: float
    packet_size: int

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the payload."""
        return (
            f"StreamRecord(stream_id=0x{self.stream_id:08x}, "
            f"chunk_index={self.chunk_index}, "
            f"flags=0x{self.flags:02x}, "
            f"timestamp={self.timestamp:.6f})"
        )

    def describe(self) -> str:
        """Diagnostic line with header fields and payload head/tail."""
        head = " ".join(f"0x{b:02x}" for b in self.payload[:4])
        tail = " ".join(f"0x{b:02x}" for b in self.payload[-4:])
        return (
            f"ID: 0x{self.stream_id:08x} Num: {self.chunk_index} "
            f"Flags: 0x{self.flags:02x} PacketSize: {self.packet_size} bytes "
            f"Payload [{head} ... {tail}]"
        )
