"""
Data Models
===========

Records, images and run reporting for chunkstream.

Models:
    - StreamRecord: One classified chunk (frozen dataclass)
    - ReconstructedImage: One reassembled image (frozen dataclass)
    - RunSummary: Per-run counters (pydantic)
"""

from chunkstream.models.record import StreamRecord
from chunkstream.models.image import ReconstructedImage
from chunkstream.models.summary import RunSummary

__all__ = [
    "StreamRecord",
    "ReconstructedImage",
    "RunSummary",
]
