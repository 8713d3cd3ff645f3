"""Unit tests for conversion result records."""

from __future__ import annotations

from pathlib import Path

import pytest

from webp_converter.application.results import ERROR_KINDS, ConversionResult


def test_success_record_shape() -> None:
    """Serialize successes with output name and path only."""
    result = ConversionResult.succeeded("photo.jpg", "photo.webp", Path("out/photo.webp"))

    assert result.to_dict() == {
        "success": True,
        "input": "photo.jpg",
        "output": "photo.webp",
        "path": str(Path("out/photo.webp")),
    }
    assert result.error is None
    assert result.error_kind is None


def test_failure_record_shape() -> None:
    """Serialize failures with error message and kind only."""
    result = ConversionResult.failed("bad.png", "cannot identify image file", "codec-failure")

    assert result.to_dict() == {
        "success": False,
        "input": "bad.png",
        "error": "cannot identify image file",
        "error_kind": "codec-failure",
    }
    assert result.output is None
    assert result.path is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"success": True, "input": "a.jpg", "output": "a.webp"},
        {
            "success": True,
            "input": "a.jpg",
            "output": "a.webp",
            "path": Path("a.webp"),
            "error": "boom",
        },
        {"success": False, "input": "a.jpg", "error": "boom"},
        {
            "success": False,
            "input": "a.jpg",
            "error": "boom",
            "error_kind": "codec-failure",
            "output": "a.webp",
        },
        {"success": False, "input": "a.jpg", "error": "boom", "error_kind": "disk-full"},
    ],
)
def test_result_invariant_rejects_mixed_fields(kwargs: dict[str, object]) -> None:
    """Reject records populating both or neither side of the outcome."""
    with pytest.raises(ValueError):
        ConversionResult(**kwargs)  # type: ignore[arg-type]


def test_error_kinds_follow_type_alias() -> None:
    """Accept exactly the kinds declared by the ErrorKind alias."""
    assert ERROR_KINDS == {"missing-source", "codec-failure", "write-failure"}
    for kind in ERROR_KINDS:
        assert ConversionResult.failed("a.jpg", "boom", kind).error_kind == kind
