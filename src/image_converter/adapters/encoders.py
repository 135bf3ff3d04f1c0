"""Pillow-backed image encoder."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from image_converter.errors import CodecError
from image_converter.types import ImageFormat, SaveOptions

logger = logging.getLogger(__name__)

# Modes each Pillow writer accepts as-is. Formats missing here are
# normalised by Pillow itself on save, apart from high bit depth input.
_WRITABLE_MODES: dict[ImageFormat, frozenset[str]] = {
    ImageFormat.JPEG: frozenset({"1", "L", "RGB", "CMYK"}),
    ImageFormat.PNG: frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}),
}

# Single-channel modes holding 16-bit samples. Pillow's own conversion to
# 8 bits clips these instead of scaling them.
_HIGH_BIT_DEPTH_MODES = frozenset({"I", "I;16", "I;16L", "I;16B", "I;16N", "F"})

_CODEC_FAILURES = (OSError, ValueError, KeyError, Image.DecompressionBombError)


def rescale_to_8bit(image: Image.Image) -> Image.Image:
    """Map 16-bit samples (0-65535) onto 8-bit ``L`` (0-255)."""
    if image.mode != "F":
        image = image.convert("I")
    return image.point(lambda v: v * (1 / 256)).convert("L")


def prepare_for_format(image: Image.Image, image_format: ImageFormat) -> Image.Image:
    """Adapt ``image`` to a mode the target writer can store.

    High bit depth input is rescaled to 8-bit grayscale unless the writer
    keeps it natively (PNG ``I``/``I;16``). Anything else the writer rejects
    becomes RGB.
    """
    writable = _WRITABLE_MODES.get(image_format)
    if writable is not None and image.mode in writable:
        return image
    if image.mode in _HIGH_BIT_DEPTH_MODES:
        logger.debug("rescaling mode %s to 8-bit L for %s", image.mode, image_format)
        image = rescale_to_8bit(image)
    if writable is None or image.mode in writable:
        return image
    logger.debug("converting mode %s to RGB for %s", image.mode, image_format)
    return image.convert("RGB")


class PillowImageEncoder:
    """Decode with Pillow and save in the requested format."""

    def encode(
        self,
        input_path: Path,
        output_path: Path,
        image_format: ImageFormat,
        options: SaveOptions,
    ) -> Path:
        """Re-encode ``input_path`` into ``output_path``.

        Parameters
        ----------
        input_path : Path
            Existing image file readable by Pillow.
        output_path : Path
            Destination file. Its parent directory must exist.
        image_format : ImageFormat
            Target codec.
        options : SaveOptions
            Keyword arguments forwarded to ``Image.save``.

        Returns
        -------
        Path
            ``output_path`` once written.

        Raises
        ------
        CodecError
            If Pillow cannot decode the input or encode/write the output.
        """
        try:
            with Image.open(input_path) as img:
                prepared = prepare_for_format(img, image_format)
                prepared.save(output_path, format=image_format.pil_format, **options)
        except _CODEC_FAILURES as exc:
            raise CodecError(f"Cannot convert {input_path}: {exc}") from exc
        return output_path


# Pillow feature backing each writer; GIF is pure Python and always present.
_REQUIRED_FEATURE: dict[ImageFormat, str | None] = {
    ImageFormat.JPEG: "jpg",
    ImageFormat.PNG: "zlib",
    ImageFormat.WEBP: "webp",
    ImageFormat.GIF: None,
}


def encoder_available(image_format: ImageFormat) -> bool:
    """Return whether the installed Pillow build can write ``image_format``."""
    from PIL import features

    feature = _REQUIRED_FEATURE[image_format]
    if feature is None:
        return True
    return bool(features.check(feature))
