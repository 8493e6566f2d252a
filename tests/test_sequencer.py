"""
Frame Sequencer Tests
=====================
"""

import asyncio

from chunkstream.models.image import ReconstructedImage
from chunkstream.pipeline.channel import StageChannel
from chunkstream.pipeline.sequencer import collect, sequence_images


def _image(stream_id: int, timestamp: float) -> ReconstructedImage:
    return ReconstructedImage(data=bytes([stream_id]), timestamp=timestamp, stream_id=stream_id)


class TestSequenceImages:
    """Ordering by whole seconds, stable for ties."""

    def test_sorted_by_timestamp(self):
        images = [_image(1, 30.0), _image(2, 10.0), _image(3, 20.0)]
        assert [i.stream_id for i in sequence_images(images)] == [2, 3, 1]

    def test_same_second_keeps_input_order(self):
        """10.9 and 10.1 fall in the same second, so input order holds."""
        images = [_image(1, 10.9), _image(2, 10.1), _image(3, 9.5)]
        assert [i.stream_id for i in sequence_images(images)] == [3, 1, 2]

    def test_input_not_mutated(self):
        images = [_image(1, 2.0), _image(2, 1.0)]
        sequence_images(images)
        assert [i.stream_id for i in images] == [1, 2]

    def test_empty(self):
        assert sequence_images([]) == []


class TestCollect:
    def test_collect_drains_channel(self):
        async def scenario():
            channel = StageChannel("images")
            for image in (_image(1, 5.0), _image(2, 3.0)):
                await channel.put(image)
            channel.close()
            return await collect(channel)

        assert [i.stream_id for i in asyncio.run(scenario())] == [2, 1]
