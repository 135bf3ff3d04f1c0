"""Filesystem checks run before a conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from image_converter.errors import InputNotAFileError, InputNotFoundError
from image_converter.types import PathLike

logger = logging.getLogger(__name__)


def validate_input_file(input_path: PathLike) -> Path:
    """Check that the input exists and is a regular file.

    Parameters
    ----------
    input_path : PathLike
        Path of the image to convert.

    Returns
    -------
    Path
        The validated input path.

    Raises
    ------
    InputNotFoundError
        If nothing exists at ``input_path``.
    InputNotAFileError
        If ``input_path`` is a directory or a special file.
    """
    path = Path(input_path)
    if not path.exists():
        raise InputNotFoundError(f"Input file does not exist: {input_path}")
    if not path.is_file():
        raise InputNotAFileError(f"Input path is not a file: {input_path}")
    return path


def ensure_output_directory(output_path: PathLike) -> Path:
    """Create the parent directory tree of ``output_path`` when missing."""
    output_dir = Path(output_path).parent
    if not output_dir.exists():
        logger.debug("creating output directory %s", output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir
