"""
Errors
======

Fatal error types for chunkstream.

Only unrecoverable conditions are raised as exceptions. Malformed datagrams
and streams that fail the boundary check are filtered out by their stage
and never surface here.
"""


class ChunkstreamError(Exception):
    """Base class for fatal chunkstream errors."""
    pass


class CaptureError(ChunkstreamError):
    """Raised when the capture file is missing or cannot be decoded."""
    pass


class OutputError(ChunkstreamError):
    """Raised when a reconstructed image cannot be written."""
    pass
