"""Fixed encoder settings shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from image_converter.types import ImageFormat, SaveOptions


@dataclass(frozen=True)
class JpegOptions:
    """JPEG encoder configuration."""

    quality: int = 90
    progressive: bool = True


@dataclass(frozen=True)
class PngOptions:
    """PNG encoder configuration.

    Progressive (Adam7 interlaced) output is not offered: Pillow's PNG
    writer cannot produce it, so files are always written non-interlaced.
    """

    compress_level: int = 6


@dataclass(frozen=True)
class WebpOptions:
    """WebP encoder configuration.

    ``method`` is Pillow's name for the encoder effort (0 fast, 6 slow).
    """

    quality: int = 90
    method: int = 4


@dataclass(frozen=True)
class GifOptions:
    """GIF encoder configuration (Pillow defaults)."""


@dataclass(frozen=True)
class EncoderOptions:
    """Per-format encoder options passed through use-cases."""

    jpeg: JpegOptions = JpegOptions()
    png: PngOptions = PngOptions()
    webp: WebpOptions = WebpOptions()
    gif: GifOptions = GifOptions()

    def for_format(self, image_format: ImageFormat) -> SaveOptions:
        """Return the ``Image.save`` keyword arguments for ``image_format``."""
        per_format = {
            ImageFormat.JPEG: self.jpeg,
            ImageFormat.PNG: self.png,
            ImageFormat.WEBP: self.webp,
            ImageFormat.GIF: self.gif,
        }
        return asdict(per_format[image_format])


DEFAULT_ENCODER_OPTIONS = EncoderOptions()
