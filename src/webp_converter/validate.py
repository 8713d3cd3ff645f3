"""WebP output validation helpers."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from webp_converter.errors import ConversionError


def is_webp_bytes(data: bytes) -> bool:
    """Return whether ``data`` starts with a RIFF/WEBP container header."""
    return len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP"


def validate_webp_if_requested(output_path: Path, validate: bool) -> None:
    """Validate a written WebP file when validation is enabled.

    Parameters
    ----------
    output_path : Path
        Path to the WebP file.
    validate : bool
        Whether validation should be executed.

    Raises
    ------
    ConversionError
        If the file cannot be decoded or is not WebP.
    """
    if not validate:
        return

    try:
        with Image.open(output_path) as image:
            image.verify()
            image_format = image.format
    except Exception as exc:
        raise ConversionError(f"WebP validation failed: {exc}") from exc

    if image_format != "WEBP":
        raise ConversionError(
            f"WebP validation failed: {output_path} decoded as {image_format}"
        )
