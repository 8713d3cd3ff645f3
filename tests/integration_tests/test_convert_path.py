"""Integration tests for directory batch conversion."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from webp_converter import (
    SourceDirectoryNotFoundError,
    SourceNotFoundError,
    convert_file,
    convert_path,
)


@pytest.fixture
def mixed_dir(tmp_path: Path, make_image) -> Path:
    """Directory with two valid images and one unsupported file."""
    input_dir = tmp_path / "input"
    make_image(input_dir / "photo.jpg")
    make_image(input_dir / "icon.png", mode="RGBA", color=(0, 0, 255, 255))
    (input_dir / "notes.txt").write_text("hello", encoding="utf-8")
    return input_dir


def test_mixed_directory_scenario(tmp_path: Path, mixed_dir: Path) -> None:
    """Convert only supported files and write one output per success."""
    output_dir = tmp_path / "output"

    results = convert_path(mixed_dir, output_dir)

    assert [r.to_dict() for r in results] == [
        {
            "success": True,
            "input": "icon.png",
            "output": "icon.webp",
            "path": str(output_dir / "icon.webp"),
        },
        {
            "success": True,
            "input": "photo.jpg",
            "output": "photo.webp",
            "path": str(output_dir / "photo.webp"),
        },
    ]
    assert sorted(p.name for p in output_dir.iterdir()) == ["icon.webp", "photo.webp"]
    for result in results:
        assert result.path is not None
        assert result.path.stat().st_size > 0
        with Image.open(result.path) as image:
            assert image.format == "WEBP"


def test_rerun_overwrites_outputs(tmp_path: Path, mixed_dir: Path) -> None:
    """Produce the same outcome pattern when run twice."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    (output_dir / "photo.webp").write_bytes(b"stale")

    first = convert_path(mixed_dir, output_dir)
    second = convert_path(str(mixed_dir), str(output_dir))

    assert [(r.success, r.input, r.output) for r in first] == [
        (r.success, r.input, r.output) for r in second
    ]
    assert (output_dir / "photo.webp").read_bytes()[:4] == b"RIFF"


def test_bad_file_does_not_abort_batch(tmp_path: Path, mixed_dir: Path) -> None:
    """Record a corrupt image as a failure and keep converting the rest."""
    (mixed_dir / "broken.gif").write_bytes(b"GIF89a")
    output_dir = tmp_path / "output"

    results = convert_path(mixed_dir, output_dir)

    assert [r.input for r in results] == ["broken.gif", "icon.png", "photo.jpg"]
    broken = results[0]
    assert broken.success is False
    assert broken.error_kind == "codec-failure"
    assert broken.error
    assert not (output_dir / "broken.webp").exists()
    assert all(r.success for r in results[1:])


def test_unwritable_target_is_a_write_failure(tmp_path: Path, mixed_dir: Path) -> None:
    """Report write errors per file when the output name is occupied by a directory."""
    output_dir = tmp_path / "output"
    (output_dir / "icon.webp").mkdir(parents=True)

    results = convert_path(mixed_dir, output_dir)

    icon, photo = results
    assert icon.success is False
    assert icon.error_kind == "write-failure"
    assert icon.input == "icon.png"
    assert photo.success is True


def test_uppercase_extensions_and_subdirectories(tmp_path: Path, make_image) -> None:
    """Match extensions case-insensitively and skip nested directories."""
    input_dir = tmp_path / "input"
    make_image(input_dir / "SHOUT.JPG")
    make_image(input_dir / "nested" / "inner.png")

    results = convert_path(input_dir, tmp_path / "output")

    assert [(r.input, r.output) for r in results] == [("SHOUT.JPG", "SHOUT.webp")]


def test_missing_input_directory(tmp_path: Path) -> None:
    """Fail the whole batch when the input directory is absent."""
    with pytest.raises(SourceDirectoryNotFoundError) as exc_info:
        convert_path(tmp_path / "absent", tmp_path / "output")

    assert str(exc_info.value) == f"Source directory not found: {tmp_path / 'absent'}"
    assert not (tmp_path / "output").exists()


def test_missing_file_message_keeps_relative_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Quote relative paths verbatim in the missing-source message."""
    monkeypatch.chdir(tmp_path)

    with pytest.raises(SourceNotFoundError) as exc_info:
        convert_file("./missing.jpg")

    assert str(exc_info.value) == "Source file not found: ./missing.jpg"
    assert list(tmp_path.iterdir()) == []


def test_output_path_occupied_by_file(tmp_path: Path, mixed_dir: Path) -> None:
    """Record write failures instead of raising when the output path is a file."""
    output_path = tmp_path / "output"
    output_path.write_text("not a directory", encoding="utf-8")

    results = convert_path(mixed_dir, output_path)

    assert [(r.input, r.success, r.error_kind) for r in results] == [
        ("icon.png", False, "write-failure"),
        ("photo.jpg", False, "write-failure"),
    ]
    assert all(r.error for r in results)
    assert output_path.read_text(encoding="utf-8") == "not a directory"
