"""
Reconstructed Image
===================

Output of the frame reassembler for one accepted stream.

Design Rules:
    - Only constructed after the boundary check has passed
    - data is written to disk byte-for-byte, padding included
    - Does NOT decode the JPEG
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True, slots=True)
class ReconstructedImage:
    """
    A reassembled image buffer and its effective capture time.

    Attributes:
        data: Concatenated chunk payloads, zero-padded where chunks were lost
        timestamp: Capture time of the lowest-index chunk (UNIX seconds)
        stream_id: Identifier of the source stream
        chunk_count: Highest chunk index seen in the source stream
        missing_chunks: Chunk positions that were replaced by padding
    """

    data: bytes
    timestamp: float
    stream_id: int = 0
    chunk_count: int = 0
    missing_chunks: Tuple[int, ...] = field(default_factory=tuple)

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the image."""
        return (
            f"ReconstructedImage(stream_id=0x{self.stream_id:08x}, "
            f"size={len(self.data)}, "
            f"timestamp={self.timestamp:.6f}, "
            f"missing={len(self.missing_chunks)})"
        )
