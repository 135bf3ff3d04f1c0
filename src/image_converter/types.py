"""Shared types for converter modules."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

type PathLike = str | Path
type SaveOptionValue = int | bool | str
type SaveOptions = dict[str, SaveOptionValue]


class ImageFormat(Enum):
    """Output codecs understood by the converter.

    The member value is the codec identifier shown to users.
    """

    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    WEBP = "webp"

    @property
    def pil_format(self) -> str:
        """Format name passed to ``PIL.Image.Image.save``."""
        return self.name

    def __str__(self) -> str:
        return self.value
