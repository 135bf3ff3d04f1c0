#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/image_converter"

PIL_IMPORTS = ["import PIL", "from PIL"]
TYPER_IMPORTS = ["import typer", "from typer"]
CORE_MODULES = ["errors.py", "types.py", "formats.py", "validate.py", "schemas.py", "reporting.py"]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    # Pillow stays behind the encoder adapter.
    _assert_no_imports(PACKAGE / "cli/cli.py", PIL_IMPORTS)

    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(path, TYPER_IMPORTS + PIL_IMPORTS)

    for path in (PACKAGE / "adapters").glob("*.py"):
        _assert_no_imports(path, TYPER_IMPORTS)

    for name in CORE_MODULES:
        _assert_no_imports(PACKAGE / name, TYPER_IMPORTS + PIL_IMPORTS)

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
