"""
Stream Grouper Tests
====================
"""

import asyncio
from collections import Counter

from chunkstream.pipeline.channel import StageChannel
from chunkstream.pipeline.grouper import StreamGrouper, group_records


class TestGroupRecords:
    """Synchronous grouping."""

    def test_empty_input(self):
        assert group_records([]) == {}

    def test_every_record_in_exactly_one_bucket(self, make_record):
        """Buckets are a partition of the input, keyed by stream_id."""
        records = [
            make_record(1, 0, b"\xff\xd8a"),
            make_record(2, 0, b"\xff\xd8b"),
            make_record(1, 2, b"c\xff\xd9"),
            make_record(3, 5, b"d"),
            make_record(1, 1, b"e"),
            make_record(2, 1, b"f"),
        ]
        buckets = group_records(records)

        assert set(buckets) == {1, 2, 3}
        assert sum(len(bucket) for bucket in buckets.values()) == len(records)
        for stream_id, bucket in buckets.items():
            assert all(r.stream_id == stream_id for r in bucket)
            expected = Counter(id(r) for r in records if r.stream_id == stream_id)
            assert Counter(id(r) for r in bucket) == expected

    def test_arrival_order_preserved(self, make_record):
        """No sorting by chunk index at this stage."""
        records = [make_record(9, i, bytes([i + 1])) for i in (4, 0, 3, 1)]
        buckets = group_records(records)
        assert [r.chunk_index for r in buckets[9]] == [4, 0, 3, 1]

    def test_duplicates_kept(self, make_record):
        records = [make_record(5, 1, b"x"), make_record(5, 1, b"y")]
        assert [r.payload for r in group_records(records)[5]] == [b"x", b"y"]


class TestStreamGrouper:
    """Incremental grouping and channel draining."""

    def test_counters(self, make_record):
        grouper = StreamGrouper()
        grouper.add(make_record(1, 0, b"a"))
        grouper.add(make_record(1, 1, b"b"))
        grouper.add(make_record(2, 0, b"c"))

        assert grouper.records_seen == 3
        assert grouper.stream_count == 2

    def test_buckets_returns_copy(self, make_record):
        grouper = StreamGrouper()
        grouper.add(make_record(1, 0, b"a"))

        buckets = grouper.buckets()
        buckets[1].clear()
        assert len(grouper.buckets()[1]) == 1

    def test_drain_until_closed(self, make_record):
        """Drain consumes everything a concurrent producer puts."""
        records = [make_record(i % 3, i, b"p") for i in range(10)]

        async def scenario():
            channel = StageChannel("records")

            async def produce():
                for record in records:
                    await channel.put(record)
                channel.close()

            task = asyncio.create_task(produce())
            buckets = await StreamGrouper().drain(channel)
            await task
            return buckets

        buckets = asyncio.run(scenario())
        assert sorted(buckets) == [0, 1, 2]
        assert sum(len(b) for b in buckets.values()) == 10
        assert [r.chunk_index for r in buckets[1]] == [1, 4, 7]
