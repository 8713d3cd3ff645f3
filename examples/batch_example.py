#!/usr/bin/env python3
"""Example: convert a single image and a directory of images to WebP."""

from __future__ import annotations

from pathlib import Path
from tempfile import TemporaryDirectory

from PIL import Image

from webp_converter import SourceNotFoundError, convert_file, convert_path


def _make_samples(directory: Path) -> None:
    Image.new("RGB", (64, 48), (200, 30, 30)).save(directory / "photo.jpg", quality=95)
    Image.new("RGBA", (32, 32), (0, 120, 255, 128)).save(directory / "icon.png")
    (directory / "notes.txt").write_text("not an image", encoding="utf-8")
    (directory / "broken.gif").write_bytes(b"GIF89a-truncated")


def example_single_file(source: Path, output_dir: Path) -> None:
    """Convert one image and save the returned buffer."""
    data = convert_file(source)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{source.stem}.webp"
    output_path.write_bytes(data)
    print(f"PASS: {output_path} ({len(data) / 1024:.2f} KB)")


def example_directory(source_dir: Path, output_dir: Path) -> None:
    """Convert a directory and report per-file outcomes."""
    results = convert_path(source_dir, output_dir)
    for index, result in enumerate(results, start=1):
        if result.success:
            size = result.path.stat().st_size if result.path else 0
            print(f"  {index}. ✓ {result.input} → {result.output} ({size / 1024:.2f} KB)")
        else:
            print(f"  {index}. ✗ {result.input} [{result.error_kind}]: {result.error}")
    succeeded = sum(1 for result in results if result.success)
    print(f"{succeeded}/{len(results)} conversions succeeded")


def example_missing_file() -> None:
    """Show the error raised for a missing source file."""
    try:
        convert_file("./missing.jpg")
    except SourceNotFoundError as exc:
        print(f"PASS: caught {type(exc).__name__}: {exc}")
    else:
        raise SystemExit("FAIL: expected SourceNotFoundError.")


def main() -> None:
    """Run all examples in a scratch directory."""
    with TemporaryDirectory() as tmp:
        root = Path(tmp)
        source_dir = root / "input"
        source_dir.mkdir()
        _make_samples(source_dir)

        example_single_file(source_dir / "icon.png", root / "output")
        example_directory(source_dir, root / "output" / "batch")
        example_missing_file()


if __name__ == "__main__":
    main()
