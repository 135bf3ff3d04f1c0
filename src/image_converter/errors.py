"""Exception hierarchy for image conversion failures."""

from __future__ import annotations


class ImageConverterError(Exception):
    """Base error for every failure the CLI reports to the user.

    Attributes
    ----------
    exit_code : int
        Process exit code used by the CLI when this error is terminal.
    """

    exit_code: int = 1


class ArgumentError(ImageConverterError):
    """Raised when required command arguments are missing or malformed."""


class UnsupportedFormatError(ImageConverterError):
    """Raised when an output extension has no known codec."""


class InputNotFoundError(ImageConverterError):
    """Raised when the input path does not exist."""


class InputNotAFileError(ImageConverterError):
    """Raised when the input path exists but is not a regular file."""


class CodecError(ImageConverterError):
    """Raised when decoding, encoding, or writing the image fails."""
