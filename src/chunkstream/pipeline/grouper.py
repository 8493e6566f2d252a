"""
Stream Grouper
==============

Partitions classified records into per-stream buckets.

Design Rules:
    - Every record lands in exactly one bucket, keyed by stream_id
    - Buckets are created lazily on first sight of a stream_id
    - Arrival order is preserved inside a bucket (no sorting here)
    - Bucket membership is final only after the input is exhausted
"""

import logging
from typing import Dict, Iterable, List

from chunkstream.models.record import StreamRecord
from chunkstream.pipeline.channel import StageChannel


logger = logging.getLogger(__name__)

StreamBuckets = Dict[int, List[StreamRecord]]


class StreamGrouper:
    """
    Accumulates records into buckets by stream identifier.

    Attributes:
        records_seen: Number of records added
        stream_count: Number of distinct stream identifiers

    Example:
        grouper = StreamGrouper()
        buckets = await grouper.drain(record_channel)
    """

    def __init__(self) -> None:
        self._buckets: StreamBuckets = {}
        self.records_seen: int = 0

    @property
    def stream_count(self) -> int:
        return len(self._buckets)

    def add(self, record: StreamRecord) -> None:
        """Append a record to the bucket for its stream_id."""
        bucket = self._buckets.get(record.stream_id)
        if bucket is None:
            bucket = []
            self._buckets[record.stream_id] = bucket
            logger.debug(f"New stream 0x{record.stream_id:08x}")
        bucket.append(record)
        self.records_seen += 1

    def buckets(self) -> StreamBuckets:
        """
        Get the grouped records.

        Returns:
            Mapping of stream_id to records in arrival order (copied)
        """
        return {stream_id: list(records) for stream_id, records in self._buckets.items()}

    async def drain(self, channel: StageChannel[StreamRecord]) -> StreamBuckets:
        """
        Consume a channel until it is closed.

        Args:
            channel: Channel fed by the classification stage

        Returns:
            Completed bucket mapping
        """
        async for record in channel:
            self.add(record)

        logger.info(
            f"Grouped {self.records_seen} records into {self.stream_count} streams"
        )
        return self.buckets()


def group_records(records: Iterable[StreamRecord]) -> StreamBuckets:
    """
    Group records by stream_id in one synchronous pass.

    Args:
        records: Records in capture order

    Returns:
        Mapping of stream_id to records in arrival order
    """
    grouper = StreamGrouper()
    for record in records:
        grouper.add(record)
    return grouper.buckets()
