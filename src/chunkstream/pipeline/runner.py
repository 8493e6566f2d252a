"""
Pipeline Runner
===============

Wires the reassembly stages together.

Stages:
    1. Classification: capture frames -> StreamRecords (task)
    2. Grouping: drains the record channel into buckets
    3. Reassembly: buckets -> ReconstructedImages (task)
    4. Sequencing: drains the image channel, orders by time

Stage 1 runs concurrently with stage 2, and stage 3 with stage 4. Stage 3
starts only once stage 2 has drained, since bucket membership is final
only after the whole capture has been classified.

The concurrency is cooperative: capture reading is synchronous, so stage 1
hands control to the grouper only when StageChannel.put yields after each
record.

Design Rules:
    - Producers always close their channel, even when they fail
    - A producer failure is re-raised after its consumer has drained
    - No files are written until every stage has finished
"""

import asyncio
import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from chunkstream.capture.source import RawFrame, open_capture
from chunkstream.capture.transport import extract_udp_payload
from chunkstream.models.image import ReconstructedImage
from chunkstream.models.record import StreamRecord
from chunkstream.models.summary import RunSummary
from chunkstream.output.writer import ImageWriter
from chunkstream.pipeline.channel import StageChannel
from chunkstream.pipeline.grouper import StreamGrouper
from chunkstream.pipeline.reassembler import FrameReassembler
from chunkstream.pipeline.sequencer import collect
from chunkstream.protocol.classifier import classify_payload


logger = logging.getLogger(__name__)


class CaptureClassifier:
    """
    Stage 1: classifies capture frames into a record channel.

    Attributes:
        frames_read: Frames taken from the capture
        udp_datagrams: Frames that carried a UDP payload
        records: Frames accepted as stream records
    """

    def __init__(self) -> None:
        self.frames_read: int = 0
        self.udp_datagrams: int = 0
        self.records: int = 0

    async def run(
        self,
        frames: Iterable[RawFrame],
        channel: StageChannel[StreamRecord],
    ) -> None:
        """
        Classify every frame, closing the channel when the capture ends.

        Args:
            frames: Frames in capture order
            channel: Channel drained by the grouping stage
        """
        try:
            for frame in frames:
                self.frames_read += 1

                payload = extract_udp_payload(frame)
                if payload is None:
                    continue
                self.udp_datagrams += 1

                record = classify_payload(payload, frame.timestamp)
                if record is None:
                    continue
                self.records += 1
                logger.debug(record.describe())

                await channel.put(record)
        finally:
            channel.close()

        logger.info(
            f"Classified {self.records} stream records from "
            f"{self.udp_datagrams} UDP datagrams ({self.frames_read} frames)"
        )


async def reassemble_frames(
    frames: Iterable[RawFrame],
    capture_path: str = "<memory>",
) -> Tuple[List[ReconstructedImage], RunSummary]:
    """
    Run stages 1-4 over a sequence of frames.

    Args:
        frames: Frames in capture order
        capture_path: Label recorded in the summary

    Returns:
        Tuple of (time-ordered images, run summary)

    Raises:
        CaptureError: If the frame source fails while being read
    """
    classifier = CaptureClassifier()
    grouper = StreamGrouper()
    record_channel: StageChannel[StreamRecord] = StageChannel("records")

    classify_task = asyncio.create_task(
        classifier.run(frames, record_channel),
        name="classify",
    )
    buckets = await grouper.drain(record_channel)
    await classify_task
    logger.debug(f"Record channel: {record_channel.metrics()}")

    reassembler = FrameReassembler()
    image_channel: StageChannel[ReconstructedImage] = StageChannel("images")

    reassemble_task = asyncio.create_task(
        reassembler.run(buckets, image_channel),
        name="reassemble",
    )
    images = await collect(image_channel)
    await reassemble_task
    logger.debug(f"Image channel: {image_channel.metrics()}")

    summary = RunSummary(
        capture_path=capture_path,
        frames_read=classifier.frames_read,
        udp_datagrams=classifier.udp_datagrams,
        records_classified=classifier.records,
        streams_grouped=grouper.stream_count,
        images_reassembled=reassembler.accepted,
        streams_rejected=reassembler.rejected,
        chunks_padded=reassembler.chunks_padded,
    )
    return images, summary


async def run_pipeline(
    capture_path: Union[str, Path],
    output_dir: Union[str, Path] = ".",
    filename_prefix: str = "frame_",
    extension: str = ".jpg",
) -> RunSummary:
    """
    Reconstruct every image in a capture file and write them to disk.

    Args:
        capture_path: pcap or pcapng file
        output_dir: Directory for the image files
        filename_prefix: Prefix before each file's sequence number
        extension: Image file extension

    Returns:
        RunSummary including the written paths

    Raises:
        CaptureError: If the capture cannot be opened or decoded
        OutputError: If an image cannot be written
    """
    with open_capture(capture_path) as source:
        images, summary = await reassemble_frames(source, capture_path=str(capture_path))

    writer = ImageWriter(
        directory=output_dir,
        filename_prefix=filename_prefix,
        extension=extension,
    )
    paths = writer.write_all(images)
    summary.files_written = [str(path) for path in paths]

    logger.info(
        f"Run complete: {summary.images_reassembled} images from "
        f"{summary.streams_grouped} streams "
        f"({summary.streams_rejected} dropped, {summary.chunks_padded} chunks padded)"
    )
    return summary
