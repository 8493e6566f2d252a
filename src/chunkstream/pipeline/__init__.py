"""
Pipeline Module
===============

Grouping, reassembly and sequencing stages, and the runner that connects
them through StageChannels.

Example:
    from chunkstream.pipeline import run_pipeline

    summary = await run_pipeline("video.pcapng", output_dir="frames")
"""

from chunkstream.pipeline.channel import ChannelClosedError, StageChannel
from chunkstream.pipeline.grouper import StreamBuckets, StreamGrouper, group_records
from chunkstream.pipeline.reassembler import FrameReassembler, reassemble
from chunkstream.pipeline.sequencer import collect, sequence_images
from chunkstream.pipeline.runner import CaptureClassifier, reassemble_frames, run_pipeline


__all__ = [
    "ChannelClosedError",
    "StageChannel",
    "StreamBuckets",
    "StreamGrouper",
    "group_records",
    "FrameReassembler",
    "reassemble",
    "collect",
    "sequence_images",
    "CaptureClassifier",
    "reassemble_frames",
    "run_pipeline",
]
