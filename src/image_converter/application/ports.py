"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from image_converter.types import ImageFormat, SaveOptions


class ImageEncoder(Protocol):
    """Decode an image file and write it back in another format."""

    def encode(
        self,
        input_path: Path,
        output_path: Path,
        image_format: ImageFormat,
        options: SaveOptions,
    ) -> Path:
        """Write ``output_path`` and return it. Raise ``CodecError`` on failure."""
