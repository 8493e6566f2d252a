"""
Record Classifier
=================

Decides whether a UDP payload belongs to the chunked image transport and,
if so, parses it into a StreamRecord.

Design Rules:
    - Pure functions; no state, no I/O
    - Non-matching or undersized payloads return None (never raise)
    - This is a discovery filter over mixed traffic, not a strict parser
"""

from typing import Optional

from chunkstream.models.record import StreamRecord
from chunkstream.protocol.wire import (
    CHUNK_INDEX_OFFSET,
    FLAGS_OFFSET,
    HEADER_LENGTH,
    MAGIC,
    MIN_DATAGRAM_LENGTH,
    read_stream_id,
)


def classify_payload(payload: bytes, timestamp: float) -> Optional[StreamRecord]:
    """
    Parse a transport payload into a StreamRecord.

    Args:
        payload: UDP payload bytes
        timestamp: Capture time of the originating frame

    Returns:
        StreamRecord, or None if the payload is not a stream chunk
    """
    if len(payload) < MIN_DATAGRAM_LENGTH:
        return None
    if payload[:len(MAGIC)] != MAGIC:
        return None

    return StreamRecord(
        stream_id=read_stream_id(payload),
        chunk_index=payload[CHUNK_INDEX_OFFSET],
        flags=payload[FLAGS_OFFSET],
        payload=bytes(payload[HEADER_LENGTH:]),
        timestamp=timestamp,
        packet_size=len(payload),
    )

