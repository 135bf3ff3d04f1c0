"""Unit tests for byte formatting and size summaries."""

from __future__ import annotations

from pathlib import Path

import pytest

from image_converter.application.results import ConversionResult
from image_converter.reporting import format_bytes, format_size_change, render_report
from image_converter.types import ImageFormat


def _result(input_size: int, output_size: int) -> ConversionResult:
    return ConversionResult(
        input_path=Path("photo.jpg"),
        output_path=Path("photo.webp"),
        output_format=ImageFormat.WEBP,
        input_size=input_size,
        output_size=output_size,
    )


@pytest.mark.parametrize(
    ("num_bytes", "expected"),
    [
        (0, "0 Bytes"),
        (1, "1 Bytes"),
        (1023, "1023 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (2500, "2.44 KB"),
        (1048576, "1 MB"),
        (1073741824, "1 GB"),
        (5 * 1024**4, "5120 GB"),
    ],
)
def test_format_bytes(num_bytes: int, expected: str) -> None:
    """Scale by 1024 and drop trailing zeros."""
    assert format_bytes(num_bytes) == expected


def test_format_bytes_negative() -> None:
    """Format the magnitude of a negative delta with a leading minus."""
    assert format_bytes(-1536) == "-1.5 KB"


def test_size_change_growth_has_explicit_plus() -> None:
    """Prefix growth with '+' on both the bytes and the percentage."""
    assert format_size_change(_result(1000, 1500)) == "+500 Bytes (+50.0%)"


def test_size_change_shrink_uses_bare_minus() -> None:
    """Show shrinkage with a bare negative sign."""
    assert format_size_change(_result(10000, 7500)) == "-2.44 KB (-25.0%)"


def test_size_change_no_change() -> None:
    """Report equal sizes as no change."""
    assert format_size_change(_result(4096, 4096)) == "No change"


def test_size_change_percent_rounds_to_one_decimal() -> None:
    """Match (out - in) / in * 100 rounded to one decimal."""
    result = _result(10000, 3333)
    expected = f"{(3333 - 10000) / 10000 * 100:.1f}"
    assert format_size_change(result).endswith(f"({expected}%)")
    assert expected == "-66.7"


def test_size_change_empty_input_omits_percent() -> None:
    """Skip the percentage when the input had zero bytes."""
    result = _result(0, 2048)
    assert result.size_change_percent is None
    assert format_size_change(result) == "+2 KB"


def test_render_report_lines() -> None:
    """Render banner, both sizes and the delta."""
    lines = render_report(_result(1536, 1024))
    assert lines == [
        "✓ Conversion completed successfully!",
        "  Input:  photo.jpg (1.5 KB)",
        "  Output: photo.webp (1 KB)",
        "  Size change: -512 Bytes (-33.3%)",
    ]
