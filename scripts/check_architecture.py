#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/webp_converter"


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = path.read_text(encoding="utf-8")
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    _assert_no_imports(PACKAGE / "cli/cli.py", ["import PIL", "from PIL"])

    for path in (PACKAGE / "application").glob("*.py"):
        if path.name == "use_cases.py":
            # Composition root: wires the default adapters.
            _assert_no_imports(path, ["import typer", "from typer", "from PIL"])
            continue
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "import PIL",
                "from PIL",
                "webp_converter.adapters",
            ],
        )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
