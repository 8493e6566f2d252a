"""
chunkstream Command Line
========================

Entry point for reconstructing images from a capture file.

Usage:
    chunkstream
    chunkstream video.pcapng --output-dir frames
    chunkstream capture.pcap --config chunkstream.yaml --log-level DEBUG

Exit codes:
    0 - Run completed (zero or more images written)
    1 - Fatal capture or output error
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from chunkstream import __version__
from chunkstream.config import load_config, setup_logging
from chunkstream.errors import ChunkstreamError
from chunkstream.pipeline.runner import run_pipeline


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chunkstream",
        description="Reconstruct JPEG frames from a chunked UDP video capture",
    )
    parser.add_argument(
        "capture",
        nargs="?",
        default=None,
        help="pcap or pcapng file (default: capture.path from config)",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for reconstructed images (default: output.directory)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override logging.level (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the reconstruction pipeline from the command line.

    Args:
        argv: Arguments without the program name. None = sys.argv[1:]

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    settings = load_config(args.config)
    if args.log_level:
        settings.logging.level = args.log_level
    setup_logging(settings)

    capture_path = args.capture or settings.capture.path
    output_dir = args.output_dir or settings.output.directory

    logger.info(f"chunkstream {__version__}: {capture_path} -> {output_dir}")

    try:
        summary = asyncio.run(
            run_pipeline(
                capture_path,
                output_dir=output_dir,
                filename_prefix=settings.output.filename_prefix,
                extension=settings.output.extension,
            )
        )
    except ChunkstreamError as e:
        logger.error(f"Fatal: {e}")
        return 1

    logger.debug(summary.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
