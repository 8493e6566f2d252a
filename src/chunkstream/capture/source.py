"""
Capture Source
==============

Reads link-layer frames from a pcap or pcapng file.

This module wraps scapy's PcapReader, which detects the container format
from the file magic, and yields RawFrame objects in capture order.

Design Rules:
    - Failure to open or decode the capture is fatal (CaptureError)
    - Frames are yielded lazily; the file is not loaded into memory
    - Does NOT look past the link layer
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from scapy.all import PcapReader
from scapy.error import Scapy_Exception
from scapy.packet import Packet

from chunkstream.errors import CaptureError


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RawFrame:
    """
    One frame read from the capture.

    Attributes:
        packet: Decoded scapy packet, outermost layer first
        timestamp: Capture time (UNIX seconds)
        link_layer: Name of the outermost layer, e.g. "Ether"
    """

    packet: Packet
    timestamp: float
    link_layer: str

    @classmethod
    def from_packet(cls, packet: Packet) -> "RawFrame":
        """Build a RawFrame from a packet read off a capture."""
        return cls(
            packet=packet,
            timestamp=float(packet.time),
            link_layer=type(packet).__name__,
        )

    def __repr__(self) -> str:
        return (
            f"RawFrame(link_layer={self.link_layer}, "
            f"timestamp={self.timestamp:.6f}, "
            f"size={len(self.packet)})"
        )


class CaptureSource:
    """
    Iterable over the frames of a capture file.

    Use as a context manager so the underlying file is closed even when
    a later stage fails.

    Attributes:
        path: Capture file path
        frames_read: Number of frames yielded so far

    Example:
        with open_capture("video.pcapng") as source:
            for frame in source:
                handle(frame)
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Open the capture file.

        Args:
            path: pcap or pcapng file

        Raises:
            CaptureError: If the file is missing or not a capture
        """
        self.path = Path(path)
        self.frames_read: int = 0

        if not self.path.is_file():
            raise CaptureError(f"Capture file not found: {self.path}")

        try:
            self._reader: Optional[PcapReader] = PcapReader(str(self.path))
        except (Scapy_Exception, OSError, EOFError) as e:
            raise CaptureError(f"Cannot open capture {self.path}: {e}") from e

        logger.info(f"Opened capture: {self.path}")

    def __enter__(self) -> "CaptureSource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __iter__(self) -> Iterator[RawFrame]:
        if self._reader is None:
            raise CaptureError(f"Capture already closed: {self.path}")

        try:
            for packet in self._reader:
                self.frames_read += 1
                yield RawFrame.from_packet(packet)
        except (Scapy_Exception, OSError, EOFError) as e:
            raise CaptureError(
                f"Failed decoding capture {self.path} "
                f"after {self.frames_read} frames: {e}"
            ) from e

        logger.info(f"Capture exhausted: {self.frames_read} frames read")

    def close(self) -> None:
        """Close the underlying reader. Safe to call twice."""
        if self._reader is not None:
            self._reader.close()
            self._reader = None


def open_capture(path: Union[str, Path]) -> CaptureSource:
    """
    Open a capture file for reading.

    Args:
        path: pcap or pcapng file

    Returns:
        CaptureSource yielding RawFrame objects

    Raises:
        CaptureError: If the file is missing or not a capture
    """
    return CaptureSource(path)
