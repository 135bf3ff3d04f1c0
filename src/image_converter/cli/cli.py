#!/usr/bin/env python3
"""
image_converter.cli.cli

Typer-based CLI for converting an image to JPEG, PNG, GIF or WebP.

The output format is chosen from the output file extension and the encoder
settings are fixed (see ``image_converter.application.options``).

Examples
--------
Convert a PNG to JPEG:

    image-converter convert input.png output.jpg

Convert a JPEG to WebP in a directory that does not exist yet:

    image-converter convert photo.jpg out/web/photo.webp
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from image_converter.errors import ArgumentError, ImageConverterError
from image_converter.formats import FORMAT_BY_EXTENSION, SUPPORTED_EXTENSIONS

app = typer.Typer(
    name="image-converter",
    help="Convert images between JPEG, PNG, GIF and WebP.",
)

USAGE_LINES = (
    "Usage: image-converter convert <input-file> <output-file>",
    "",
    f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}",
    "",
    "Examples:",
    "  image-converter convert input.png output.jpg",
    "  image-converter convert photo.jpg photo.webp",
    "  image-converter convert image.gif image.png",
)


# -----------------------------
# Utilities
# -----------------------------
def _configure_logging(debug: bool) -> None:
    """Route log records to stderr, at DEBUG level when requested."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _print_usage() -> None:
    for line in USAGE_LINES:
        typer.echo(line)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ Conversion failed: {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback(invoke_without_command=True)
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show tracebacks and debug logs on error."),
) -> None:
    """Initialize shared CLI state and print usage when no command is given.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug output.
    """
    ctx.obj = {"debug": debug}
    _configure_logging(debug)
    if ctx.invoked_subcommand is None:
        _print_usage()
        raise typer.Exit(code=ArgumentError.exit_code)


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    input_file: Path | None = typer.Argument(None, help="Image to convert."),
    output_file: Path | None = typer.Argument(
        None, help="Where to write the result; the extension selects the format."
    ),
) -> None:
    """Convert an image file to the format named by the output extension.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    input_file : Path | None
        Existing image file.
    output_file : Path | None
        Destination path ending in .jpg, .jpeg, .png, .gif or .webp.
    """
    debug = bool((ctx.obj or {}).get("debug", False))

    if input_file is None or output_file is None:
        _print_usage()
        raise typer.Exit(code=ArgumentError.exit_code)

    try:
        from image_converter.application import use_cases
        from image_converter.reporting import render_report

        request = use_cases.build_conversion_request(input_file, output_file)
        typer.echo(f"Converting {input_file} to {output_file} ({request.output_format})")
        result = use_cases.run_conversion(request)
    except ImageConverterError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    for line in render_report(result):
        typer.echo(line)


@app.command("formats")
def formats_cmd() -> None:
    """List supported output extensions and their codecs."""
    for ext, image_format in FORMAT_BY_EXTENSION.items():
        typer.echo(f"{ext}: {image_format}")


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions and codec availability."""
    import importlib.metadata as metadata

    from image_converter.adapters.encoders import encoder_available
    from image_converter.types import ImageFormat

    typer.echo(f"Python: {sys.version.split()[0]}")
    for dist in ("pillow", "pydantic", "typer"):
        try:
            typer.echo(f"{dist}: {metadata.version(dist)}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{dist}: <not installed>")

    for image_format in ImageFormat:
        status = "ok" if encoder_available(image_format) else "<unavailable>"
        typer.echo(f"encoder {image_format}: {status}")


if __name__ == "__main__":
    app()
