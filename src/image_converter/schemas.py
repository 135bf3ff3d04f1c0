"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from image_converter.types import ImageFormat


class ConversionRequest(BaseModel):
    """Validated input for a single file conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: Path
    output_path: Path
    output_format: ImageFormat

    @field_validator("output_path")
    @classmethod
    def _validate_output_path(cls, value: Path) -> Path:
        if not value.name or value.name in {".", ".."}:
            raise ValueError("output_path must name a file.")
        return value
