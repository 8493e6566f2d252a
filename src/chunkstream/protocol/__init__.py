"""
Protocol Module
===============

Wire format of the chunked image transport and the record classifier.
"""

from chunkstream.protocol.classifier import classify_payload
from chunkstream.protocol import wire


__all__ = [
    "classify_payload",
    "wire",
]
