"""Human-readable conversion summaries."""

from __future__ import annotations

from image_converter.application.results import ConversionResult

_UNIT = 1024
_SIZES = ("Bytes", "KB", "MB", "GB")


def format_bytes(num_bytes: int) -> str:
    """Format a byte count with a binary unit.

    ``0`` renders as ``"0 Bytes"``. Values are rounded to two decimals with
    trailing zeros dropped, so ``1536`` gives ``"1.5 KB"`` and ``1048576``
    gives ``"1 MB"``. Anything past GB stays in GB.
    """
    if num_bytes == 0:
        return "0 Bytes"
    if num_bytes < 0:
        return f"-{format_bytes(-num_bytes)}"

    index = 0
    while index < len(_SIZES) - 1 and num_bytes >= _UNIT ** (index + 1):
        index += 1
    value = f"{num_bytes / _UNIT**index:.2f}".rstrip("0").rstrip(".")
    return f"{value} {_SIZES[index]}"


def format_size_change(result: ConversionResult) -> str:
    """Describe the size delta: ``+`` for growth, bare ``-`` for shrink."""
    delta = result.size_delta
    if delta == 0:
        return "No change"

    percent = result.size_change_percent
    sign = "+" if delta > 0 else ""
    text = f"{sign}{format_bytes(delta)}"
    if percent is not None:
        text += f" ({sign}{percent:.1f}%)"
    return text


def render_report(result: ConversionResult) -> list[str]:
    """Build the success summary printed after a conversion."""
    return [
        "✓ Conversion completed successfully!",
        f"  Input:  {result.input_path} ({format_bytes(result.input_size)})",
        f"  Output: {result.output_path} ({format_bytes(result.output_size)})",
        f"  Size change: {format_size_change(result)}",
    ]
