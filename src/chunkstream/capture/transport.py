"""
Transport Extraction
====================

Pulls the UDP payload out of a captured frame.

Frames without a UDP layer are not errors; they yield None and are
skipped by the caller.
"""

from typing import Optional

from scapy.all import UDP

from chunkstream.capture.source import RawFrame


def extract_udp_payload(frame: RawFrame) -> Optional[bytes]:
    """
    Return the UDP payload bytes of a frame.

    Args:
        frame: Frame read from the capture

    Returns:
        Payload bytes, or None if the frame carries no UDP datagram
    """
    if UDP not in frame.packet:
        return None
    return bytes(frame.packet[UDP].payload)
