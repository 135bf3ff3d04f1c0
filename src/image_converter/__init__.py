"""Convert raster images between JPEG, PNG, GIF and WebP."""

from __future__ import annotations

from image_converter.api import convert_image, convert_image_with_result
from image_converter.errors import (
    ArgumentError,
    CodecError,
    ImageConverterError,
    InputNotAFileError,
    InputNotFoundError,
    UnsupportedFormatError,
)
from image_converter.formats import SUPPORTED_EXTENSIONS, get_format_from_extension
from image_converter.reporting import format_bytes
from image_converter.types import ImageFormat

__version__ = "0.1.0"

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "ArgumentError",
    "CodecError",
    "ImageConverterError",
    "ImageFormat",
    "InputNotAFileError",
    "InputNotFoundError",
    "UnsupportedFormatError",
    "convert_image",
    "convert_image_with_result",
    "format_bytes",
    "get_format_from_extension",
]
