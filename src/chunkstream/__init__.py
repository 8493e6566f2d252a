"""
chunkstream
===========

Offline reassembly of JPEG frames carried by a chunked UDP video transport.

This package reads a network capture (pcap or pcapng), picks out the
datagrams of the streaming protocol, groups them by stream identifier,
restores chunk order, pads lost chunks and writes one image per stream in
capture-time order.

Components:
    - protocol: Wire-format constants and the record classifier
    - capture: Capture-file reading and UDP payload extraction
    - pipeline: Grouping, reassembly and sequencing stages
    - output: Image file writer
    - models: Immutable records, images and run summary

Example:
    import asyncio
    from chunkstream.pipeline import run_pipeline

    summary = asyncio.run(run_pipeline("video.pcapng", output_dir="frames"))
    print(summary.files_written)
"""

__version__ = "0.1.0"
__author__ = "chunkstream contributors"

__all__ = [
    "__version__",
]
