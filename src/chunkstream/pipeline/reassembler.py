"""
Frame Reassembler
=================

Turns one stream's records into a reconstructed image.

Algorithm:
    1. Stable sort by chunk_index (duplicates kept, first wins on lookup)
    2. total_chunks = highest chunk_index present
    3. Lowest-index payload must start with FF D8 and highest-index payload
       must end with FF D9, otherwise the stream is dropped
    4. Concatenate positions 1..total_chunks; a lost position becomes a
       PLACEHOLDER_SIZE block of zero bytes
    5. Timestamp the image with the lowest-index record

Position 0 only takes part in the start-of-image check. Its payload is not
copied into the output buffer, so a stream made of chunk 0 alone yields an
empty image.

Design Rules:
    - Each bucket is processed exactly once, independently of the others
    - A failed boundary check is not an error; the stream is skipped
    - Does NOT decode the JPEG
"""

import logging
from operator import attrgetter
from typing import Dict, List, Optional, Sequence

from chunkstream.models.image import ReconstructedImage
from chunkstream.models.record import StreamRecord
from chunkstream.pipeline.channel import StageChannel
from chunkstream.pipeline.grouper import StreamBuckets
from chunkstream.protocol.wire import END_OF_IMAGE, PLACEHOLDER_SIZE, START_OF_IMAGE


logger = logging.getLogger(__name__)


def has_image_boundaries(ordered: Sequence[StreamRecord]) -> bool:
    """
    Check the start/end-of-image markers of a sorted bucket.

    Args:
        ordered: Records sorted by chunk_index, non-empty

    Returns:
        True if the first payload opens and the last payload closes a JPEG
    """
    return (
        ordered[0].payload.startswith(START_OF_IMAGE)
        and ordered[-1].payload.endswith(END_OF_IMAGE)
    )


def reassemble(records: Sequence[StreamRecord]) -> Optional[ReconstructedImage]:
    """
    Reassemble one stream's records into an image.

    Args:
        records: All records sharing one stream_id, in any order

    Returns:
        ReconstructedImage, or None if the stream fails the boundary check
    """
    if not records:
        return None

    ordered = sorted(records, key=attrgetter("chunk_index"))
    first = ordered[0]
    total_chunks = ordered[-1].chunk_index

    if not has_image_boundaries(ordered):
        logger.debug(
            f"Stream 0x{first.stream_id:08x} dropped: missing image markers "
            f"({len(ordered)} chunks)"
        )
        return None

    logger.info(f"total chunks {total_chunks}")

    payloads: Dict[int, bytes] = {}
    for record in ordered:
        payloads.setdefault(record.chunk_index, record.payload)

    parts: List[bytes] = []
    missing: List[int] = []
    for position in range(1, total_chunks + 1):
        payload = payloads.get(position)
        if payload is None:
            missing.append(position)
            payload = bytes(PLACEHOLDER_SIZE)
        parts.append(payload)

    data = b"".join(parts)

    if missing:
        logger.info(
            f"Stream 0x{first.stream_id:08x}: padded {len(missing)} lost chunks "
            f"{missing}"
        )

    if data:
        logger.debug(
            f"head [{' '.join(f'0x{b:02x}' for b in data[:4])}] "
            f"tail [{' '.join(f'0x{b:02x}' for b in data[-4:])}]"
        )

    return ReconstructedImage(
        data=data,
        timestamp=first.timestamp,
        stream_id=first.stream_id,
        chunk_count=total_chunks,
        missing_chunks=tuple(missing),
    )


class FrameReassembler:
    """
    Reassembles every bucket and hands accepted images downstream.

    Attributes:
        accepted: Streams turned into images
        rejected: Streams dropped by the boundary check
        chunks_padded: Lost chunks replaced by padding across all images

    Example:
        reassembler = FrameReassembler()
        await reassembler.run(buckets, image_channel)
    """

    def __init__(self) -> None:
        self.accepted: int = 0
        self.rejected: int = 0
        self.chunks_padded: int = 0

    def process(self, records: Sequence[StreamRecord]) -> Optional[ReconstructedImage]:
        """Reassemble one bucket and update the counters."""
        image = reassemble(records)
        if image is None:
            self.rejected += 1
        else:
            self.accepted += 1
            self.chunks_padded += len(image.missing_chunks)
        return image

    async def run(
        self,
        buckets: StreamBuckets,
        channel: StageChannel[ReconstructedImage],
    ) -> None:
        """
        Reassemble all buckets into a channel, closing it when done.

        Args:
            buckets: Completed stream buckets from the grouper
            channel: Channel read by the sequencing stage
        """
        try:
            for records in buckets.values():
                image = self.process(records)
                if image is not None:
                    await channel.put(image)
        finally:
            channel.close()

        logger.info(
            f"Reassembly complete: {self.accepted} images, "
            f"{self.rejected} streams dropped, "
            f"{self.chunks_padded} chunks padded"
        )
