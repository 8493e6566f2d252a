"""
Output Module
=============

Persistence of reconstructed images.
"""

from chunkstream.output.writer import ImageWriter


__all__ = [
    "ImageWriter",
]
