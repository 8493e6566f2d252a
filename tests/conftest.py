"""
Test Configuration
==================

Pytest fixtures and test configuration for chunkstream.
"""

import pytest


HEADER_LENGTH = 54


def _build_datagram(stream_id: int, chunk_index: int, body: bytes, flags: int = 0) -> bytes:
    header = bytearray(HEADER_LENGTH)
    header[0:2] = b"cc"
    header[8] = (stream_id >> 24) & 0xFF
    header[9] = (stream_id >> 16) & 0xFF
    header[12] = (stream_id >> 8) & 0xFF
    header[13] = stream_id & 0xFF
    header[48] = chunk_index
    header[50] = flags
    return bytes(header) + body


@pytest.fixture
def make_datagram():
    """Build a stream-protocol UDP payload."""
    return _build_datagram


@pytest.fixture
def make_record():
    """Build a StreamRecord directly, bypassing the classifier."""
    from chunkstream.models.record import StreamRecord

    def _make(stream_id: int, chunk_index: int, payload: bytes, timestamp: float = 100.0, flags: int = 0):
        return StreamRecord(
            stream_id=stream_id,
            chunk_index=chunk_index,
            flags=flags,
            payload=payload,
            timestamp=timestamp,
            packet_size=HEADER_LENGTH + len(payload),
        )

    return _make


@pytest.fixture
def make_udp_packet():
    """Build an Ether/IP/UDP scapy packet carrying the given payload."""
    from scapy.all import Ether, IP, UDP, Raw

    def _make(payload: bytes, timestamp: float = 100.0):
        packet = (
            Ether()
            / IP(src="192.168.1.20", dst="192.168.1.10")
            / UDP(sport=40000, dport=40001)
            / Raw(load=payload)
        )
        packet.time = timestamp
        return packet

    return _make


@pytest.fixture
def make_frame(make_udp_packet):
    """Build a RawFrame around a UDP packet."""
    from chunkstream.capture.source import RawFrame

    def _make(payload: bytes, timestamp: float = 100.0):
        return RawFrame.from_packet(make_udp_packet(payload, timestamp))

    return _make


@pytest.fixture
def image_chunks():
    """
    Payloads of a three-chunk image.

    Chunk 0 opens the JPEG, chunk 2 closes it.
    """
    return {
        0: b"\xff\xd8\xff\xe0HEAD",
        1: b"middle-bytes",
        2: b"tail-bytes\xff\xd9",
    }
