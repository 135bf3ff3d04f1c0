"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from image_converter.adapters.encoders import PillowImageEncoder
from image_converter.application.options import DEFAULT_ENCODER_OPTIONS, EncoderOptions
from image_converter.application.ports import ImageEncoder
from image_converter.application.results import ConversionResult
from image_converter.errors import ArgumentError
from image_converter.formats import get_format_from_extension
from image_converter.schemas import ConversionRequest
from image_converter.types import PathLike
from image_converter.validate import ensure_output_directory, validate_input_file

logger = logging.getLogger(__name__)


def build_conversion_request(input_path: PathLike, output_path: PathLike) -> ConversionRequest:
    """Resolve the output codec and validate the input file.

    Raises
    ------
    UnsupportedFormatError
        If the output extension is not supported.
    InputNotFoundError, InputNotAFileError
        If the input path is unusable.
    ArgumentError
        If the paths do not form a valid request.
    """
    output_format = get_format_from_extension(output_path)
    validate_input_file(input_path)
    try:
        return ConversionRequest(
            input_path=Path(input_path),
            output_path=Path(output_path),
            output_format=output_format,
        )
    except ValidationError as exc:
        raise ArgumentError(f"Invalid conversion parameters: {exc}") from exc


def run_conversion(
    request: ConversionRequest,
    *,
    encoder: ImageEncoder | None = None,
    options: EncoderOptions | None = None,
) -> ConversionResult:
    """Use-case: encode a validated request and measure the outcome."""
    encoder = encoder or PillowImageEncoder()
    options = options or DEFAULT_ENCODER_OPTIONS

    ensure_output_directory(request.output_path)
    save_options = options.for_format(request.output_format)
    logger.debug(
        "encoding %s as %s with %s",
        request.input_path,
        request.output_format,
        save_options,
    )
    out_path = encoder.encode(
        request.input_path,
        request.output_path,
        request.output_format,
        save_options,
    )

    result = ConversionResult(
        input_path=request.input_path,
        output_path=out_path,
        output_format=request.output_format,
        input_size=request.input_path.stat().st_size,
        output_size=out_path.stat().st_size,
    )
    logger.debug("sizes: input=%d output=%d", result.input_size, result.output_size)
    return result


def convert_image_file(
    input_path: PathLike,
    output_path: PathLike,
    *,
    encoder: ImageEncoder | None = None,
    options: EncoderOptions | None = None,
) -> ConversionResult:
    """Use-case: convert one image file into the format named by ``output_path``."""
    request = build_conversion_request(input_path, output_path)
    return run_conversion(request, encoder=encoder, options=options)
