"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from PIL import Image, ImageDraw


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo the CLI's ``logging.basicConfig(force=True)`` between tests."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _draw_scene(mode: str, size: tuple[int, int] = (64, 48)) -> Image.Image:
    background = (30, 90, 160, 255) if mode == "RGBA" else (30, 90, 160)
    img = Image.new(mode, size, background)
    draw = ImageDraw.Draw(img)
    draw.rectangle((8, 8, 40, 30), fill=(240, 200, 40) + ((128,) if mode == "RGBA" else ()))
    draw.ellipse((30, 16, 60, 44), fill=(200, 40, 60) + ((255,) if mode == "RGBA" else ()))
    return img


@pytest.fixture
def sample_png(tmp_path: Path) -> Path:
    """Small opaque RGB PNG."""
    path = tmp_path / "sample.png"
    _draw_scene("RGB").save(path, "PNG")
    return path


@pytest.fixture
def sample_rgba_png(tmp_path: Path) -> Path:
    """Small PNG with a semi-transparent region."""
    path = tmp_path / "sample_rgba.png"
    _draw_scene("RGBA").save(path, "PNG")
    return path


@pytest.fixture
def sample_jpeg(tmp_path: Path) -> Path:
    """Small baseline JPEG."""
    path = tmp_path / "sample.jpg"
    _draw_scene("RGB").save(path, "JPEG", quality=75)
    return path


@pytest.fixture
def corrupt_image(tmp_path: Path) -> Path:
    """File with an image extension that Pillow cannot identify."""
    path = tmp_path / "corrupt.png"
    path.write_bytes(b"definitely not an image")
    return path
