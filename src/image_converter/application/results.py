"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from image_converter.types import ImageFormat


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome."""

    input_path: Path
    output_path: Path
    output_format: ImageFormat
    input_size: int
    output_size: int

    @property
    def size_delta(self) -> int:
        """Output size minus input size, in bytes."""
        return self.output_size - self.input_size

    @property
    def size_change_percent(self) -> float | None:
        """Relative size change in percent, or ``None`` for an empty input."""
        if self.input_size == 0:
            return None
        return self.size_delta / self.input_size * 100
