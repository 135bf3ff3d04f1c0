"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from image_converter.application.options import EncoderOptions
from image_converter.application.results import ConversionResult
from image_converter.application.use_cases import convert_image_file
from image_converter.types import PathLike


def convert_image(
    input_path: PathLike,
    output_path: PathLike,
    options: EncoderOptions | None = None,
) -> Path:
    """Convert ``input_path`` to the format implied by ``output_path``.

    Returns the written output path.
    """
    return convert_image_with_result(input_path, output_path, options).output_path


def convert_image_with_result(
    input_path: PathLike,
    output_path: PathLike,
    options: EncoderOptions | None = None,
) -> ConversionResult:
    """Convert an image and return sizes alongside the output path."""
    return convert_image_file(input_path, output_path, options=options)
