"""
Capture Module
==============

Capture-file reading and transport extraction.

    - RawFrame: One frame from the capture
    - CaptureSource / open_capture: pcap and pcapng reader
    - extract_udp_payload: UDP payload or None
"""

from chunkstream.capture.source import CaptureSource, RawFrame, open_capture
from chunkstream.capture.transport import extract_udp_payload


__all__ = [
    "CaptureSource",
    "RawFrame",
    "open_capture",
    "extract_udp_payload",
]
