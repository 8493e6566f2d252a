"""
Run Summary
===========

Pydantic model reporting what a single pipeline run did.

Example:
    summary = await run_pipeline("video.pcapng")
    print(summary.model_dump_json(indent=2))
"""

from typing import List

from pydantic import BaseModel, Field


class RunSummary(BaseModel):
    """
    Counters collected across all pipeline stages.

    Attributes:
        capture_path: Capture file that was processed
        frames_read: Link-layer frames read from the capture
        udp_datagrams: Frames that carried a UDP payload
        records_classified: Datagrams accepted as stream records
        streams_grouped: Distinct stream identifiers seen
        images_reassembled: Streams that passed the boundary check
        streams_rejected: Streams dropped by the boundary check
        chunks_padded: Lost chunks replaced by placeholder padding
        files_written: Paths of the written images, in output order
    """

    capture_path: str = Field(..., description="Capture file that was processed")
    frames_read: int = Field(default=0, ge=0, description="Frames read from the capture")
    udp_datagrams: int = Field(default=0, ge=0, description="Frames carrying UDP")
    records_classified: int = Field(default=0, ge=0, description="Accepted stream records")
    streams_grouped: int = Field(default=0, ge=0, description="Distinct stream IDs")
    images_reassembled: int = Field(default=0, ge=0, description="Accepted streams")
    streams_rejected: int = Field(default=0, ge=0, description="Dropped streams")
    chunks_padded: int = Field(default=0, ge=0, description="Padded chunk positions")
    files_written: List[str] = Field(default_factory=list, description="Written image paths")
