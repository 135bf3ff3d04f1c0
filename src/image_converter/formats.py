"""Extension-to-codec lookup."""

from __future__ import annotations

from pathlib import Path

from image_converter.errors import UnsupportedFormatError
from image_converter.types import ImageFormat, PathLike

FORMAT_BY_EXTENSION: dict[str, ImageFormat] = {
    "jpg": ImageFormat.JPEG,
    "jpeg": ImageFormat.JPEG,
    "png": ImageFormat.PNG,
    "gif": ImageFormat.GIF,
    "webp": ImageFormat.WEBP,
}

SUPPORTED_EXTENSIONS: tuple[str, ...] = tuple(FORMAT_BY_EXTENSION)


def get_extension(file_path: PathLike) -> str:
    """Return the lowercased extension of ``file_path`` without the dot."""
    return Path(file_path).suffix.lower().removeprefix(".")


def get_format_from_extension(file_path: PathLike) -> ImageFormat:
    """Resolve the output codec from a file name.

    Parameters
    ----------
    file_path : PathLike
        Path whose extension selects the codec.

    Returns
    -------
    ImageFormat
        Codec registered for the extension.

    Raises
    ------
    UnsupportedFormatError
        If the extension is missing or not in ``FORMAT_BY_EXTENSION``.
    """
    ext = get_extension(file_path)
    try:
        return FORMAT_BY_EXTENSION[ext]
    except KeyError:
        raise UnsupportedFormatError(
            f"Unsupported format: {ext}. "
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        ) from None
