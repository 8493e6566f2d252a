"""
Frame Sequencer
===============

Orders reconstructed images by capture time.

Ordering compares whole seconds only. Python's sort is stable, so images
within the same second keep the order in which they were produced.
"""

import logging
import math
from typing import Iterable, List

from chunkstream.models.image import ReconstructedImage
from chunkstream.pipeline.channel import StageChannel


logger = logging.getLogger(__name__)


def _capture_second(image: ReconstructedImage) -> int:
    return math.floor(image.timestamp)


def sequence_images(images: Iterable[ReconstructedImage]) -> List[ReconstructedImage]:
    """
    Sort images ascending by timestamp at second granularity.

    Args:
        images: Images in production order

    Returns:
        New list, time-ordered, ties in input order
    """
    return sorted(images, key=_capture_second)


async def collect(channel: StageChannel[ReconstructedImage]) -> List[ReconstructedImage]:
    """
    Drain the reassembly channel and sequence what it delivered.

    Args:
        channel: Channel fed by the reassembly stage

    Returns:
        Time-ordered images
    """
    images = [image async for image in channel]
    ordered = sequence_images(images)
    logger.info(f"Sequenced {len(ordered)} images")
    return ordered
