"""Application-layer use-cases and option objects."""

from __future__ import annotations

from image_converter.application.options import (
    DEFAULT_ENCODER_OPTIONS,
    EncoderOptions,
    GifOptions,
    JpegOptions,
    PngOptions,
    WebpOptions,
)
from image_converter.application.ports import ImageEncoder
from image_converter.application.results import ConversionResult

__all__ = [
    "DEFAULT_ENCODER_OPTIONS",
    "ConversionResult",
    "EncoderOptions",
    "GifOptions",
    "ImageEncoder",
    "JpegOptions",
    "PngOptions",
    "WebpOptions",
]
