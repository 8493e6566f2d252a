"""
Image Writer
============

Persists sequenced images, one file per image.

Files are named by their zero-based position in the sequence, e.g.
frame_0.jpg, frame_1.jpg, and hold the reconstructed buffer unchanged.

Design Rules:
    - Any filesystem failure is fatal (OutputError)
    - A failed run removes the images it already wrote
    - Does NOT re-encode or validate image data
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from chunkstream.errors import OutputError
from chunkstream.models.image import ReconstructedImage


logger = logging.getLogger(__name__)


class ImageWriter:
    """
    Writes reconstructed images into a directory.

    Attributes:
        directory: Output directory (created on first write)
        filename_prefix: Prefix before the sequence number
        extension: File extension, including the dot
    """

    def __init__(
        self,
        directory: Union[str, Path] = ".",
        filename_prefix: str = "frame_",
        extension: str = ".jpg",
    ) -> None:
        self.directory = Path(directory)
        self.filename_prefix = filename_prefix
        self.extension = extension

    def path_for(self, position: int) -> Path:
        """Output path for the image at a sequence position."""
        return self.directory / f"{self.filename_prefix}{position}{self.extension}"

    def write_all(self, images: Iterable[ReconstructedImage]) -> List[Path]:
        """
        Write images in order.

        Args:
            images: Time-ordered images

        Returns:
            Paths written, in sequence order

        Raises:
            OutputError: If the directory or a file cannot be written
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputError(f"Cannot create output directory {self.directory}: {e}") from e

        written: List[Path] = []
        for position, image in enumerate(images):
            path = self.path_for(position)
            try:
                path.write_bytes(image.data)
            except OSError as e:
                self._discard(written)
                raise OutputError(f"Failed writing {path}: {e}") from e
            written.append(path)
            logger.debug(f"Wrote {path} ({len(image.data)} bytes)")

        logger.info(f"Wrote {len(written)} images to {self.directory}")
        return written

    def _discard(self, paths: List[Path]) -> None:
        """Remove the files of a run that failed part-way."""
        for path in paths:
            try:
                path.unlink()
            except OSError as e:
                logger.error(f"Could not remove partial output {path}: {e}")
        if paths:
            logger.warning(f"Removed {len(paths)} images written before the failure")
